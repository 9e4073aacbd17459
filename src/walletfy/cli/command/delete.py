"""Delete an event."""

from __future__ import annotations

from walletfy.config import load_settings
from walletfy.errors import WalletfyError
from walletfy.workspace import Workspace

from .util import console, money, open_wallet, resolve_event


def run(*, workspace: Workspace, id_prefix: str, write: bool = False) -> int:
    """Remove one event, resolved by id prefix.

    Safety: dry-run by default; pass write=True to persist the deletion.

    Returns:
        Exit code (0 = deleted or previewed, 1 = not found, ambiguous, or bad settings)
    """
    try:
        settings = load_settings(workspace.settings_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    service = open_wallet(workspace)
    event = resolve_event(service, id_prefix)
    if event is None:
        return 1

    label = (
        f"{event.type.value} [bold]{event.name}[/] "
        f"{money(event.amount, settings.currency_symbol)} "
        f"on {event.date.isoformat()} [dim](id {event.id[:8]})[/]"
    )
    if not write:
        console.print(f"[yellow]Would delete[/] {label}")
        console.print("[dim]Dry-run: use --write to persist.[/dim]")
        return 0

    try:
        service.delete_event(event.id)
    except WalletfyError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1
    console.print(f"[green]Deleted[/] {label}")
    return 0
