"""Edit an existing event in place."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from walletfy.config import load_settings
from walletfy.workspace import Workspace

from .util import (
    console,
    encode_attachment,
    money,
    open_wallet,
    print_field_errors,
    resolve_event,
)


def run(
    *,
    workspace: Workspace,
    id_prefix: str,
    name: Optional[str] = None,
    amount: Optional[float] = None,
    event_type: Optional[str] = None,
    event_date: Optional[str] = None,
    description: Optional[str] = None,
    attachment: Optional[Path] = None,
    clear_description: bool = False,
    clear_attachment: bool = False,
) -> int:
    """Overlay the given fields on a stored event and submit it as an update.

    The id never changes. Fields left as None keep their stored values.

    Returns:
        Exit code (0 = updated, 1 = not found, ambiguous, or invalid)
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

    candidate = event.model_dump(mode="json")
    changes = {
        "name": name,
        "amount": amount,
        "type": event_type,
        "date": event_date,
        "description": description,
    }
    candidate.update({k: v for k, v in changes.items() if v is not None})

    if clear_description:
        candidate["description"] = None
    if clear_attachment:
        candidate["attachment"] = None
    elif attachment is not None:
        try:
            candidate["attachment"] = encode_attachment(attachment)
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1

    result = service.submit_event(candidate)
    if not result.is_ok:
        print_field_errors(result.errors)
        return 1

    updated = result.event
    console.print(
        f"[green]Updated[/] [bold]{updated.name}[/] "
        f"{money(updated.amount, settings.currency_symbol)} "
        f"on {updated.date.isoformat()} [dim](id {updated.id[:8]})[/]"
    )
    return 0
