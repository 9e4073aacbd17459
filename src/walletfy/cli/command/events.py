from __future__ import annotations

from typing import Optional

from rich.table import Table

from walletfy.config import load_settings
from walletfy.workspace import Workspace

from .util import console, fmt_event_amount, open_wallet


def run(*, workspace: Workspace, limit: Optional[int] = None) -> int:
    """List stored events as a Rich table, oldest date first.

    Returns an exit code (0 for success, non-zero for error).
    """
    try:
        settings = load_settings(workspace.settings_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    service = open_wallet(workspace)
    events = sorted(service.list_events(), key=lambda e: e.date)
    if limit is not None:
        events = events[:limit]

    if not events:
        console.print("[yellow]No events recorded yet.[/] Add one with 'walletfy add'.")
        return 0

    table = Table(title=f"Events ({len(events)})", show_lines=False)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Amount", justify="right")
    table.add_column("Description", style="dim")
    table.add_column("Att", justify="center", no_wrap=True)
    table.add_column("ID8", style="dim", no_wrap=True)

    for event in events:
        table.add_row(
            event.date.strftime(settings.date_format),
            event.name,
            fmt_event_amount(event, settings.currency_symbol),
            event.description or "",
            "✓" if event.attachment else "",
            event.id[:8],
        )

    console.print(table)
    return 0
