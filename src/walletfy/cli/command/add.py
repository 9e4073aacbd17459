"""Record a new income or expense event."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional
from uuid import uuid4

from walletfy.config import load_settings
from walletfy.workspace import Workspace

from .util import console, encode_attachment, money, open_wallet, print_field_errors


def run(
    *,
    workspace: Workspace,
    name: str,
    amount: float,
    event_type: str,
    event_date: Optional[str] = None,
    description: Optional[str] = None,
    attachment: Optional[Path] = None,
) -> int:
    """Validate and store a new event with a freshly generated id.

    Args:
        event_date: ISO date (defaults to today)
        attachment: Image file to embed as base64

    Returns:
        Exit code (0 = stored, 1 = invalid input or settings)
    """
    try:
        settings = load_settings(workspace.settings_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    candidate = {
        "id": str(uuid4()),
        "name": name,
        "description": description,
        "amount": amount,
        "date": event_date or date.today().isoformat(),
        "type": event_type,
        "attachment": None,
    }

    if attachment is not None:
        try:
            candidate["attachment"] = encode_attachment(attachment)
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1

    service = open_wallet(workspace)
    result = service.submit_event(candidate)
    if not result.is_ok:
        print_field_errors(result.errors)
        return 1

    event = result.event
    console.print(
        f"[green]Added[/] {event.type.value} [bold]{event.name}[/] "
        f"{money(event.amount, settings.currency_symbol)} on {event.date.isoformat()} "
        f"[dim](id {event.id[:8]})[/]"
    )
    return 0
