from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text

from walletfy.errors import FieldError
from walletfy.model.event import Event
from walletfy.services.wallet_service import WalletService
from walletfy.storage.kv_store import SQLiteKeyValueStore
from walletfy.workspace import Workspace

console = Console()


def open_wallet(workspace: Workspace) -> WalletService:
    """Open the workspace store, warning about any records dropped on load."""
    service = WalletService.open(SQLiteKeyValueStore(workspace.store_path))
    load = service.last_load
    if load is not None and load.errors:
        console.print(
            f"[yellow]Warning:[/] skipped {len(load.errors)} unreadable stored record(s). "
            "Run with --verbose for details."
        )
    return service


def resolve_event(service: WalletService, id_prefix: str) -> Optional[Event]:
    """Find one event by id prefix, printing why when there is no single match."""
    result = service.event_store.find_by_id_prefix(id_prefix)
    if result.is_match:
        return result.event
    if result.is_ambiguous:
        sample = ", ".join(f"{e.id[:8]} ({e.name})" for e in result.matches[:5])
        console.print(
            f"[yellow]Ambiguous id[/] [bold]{id_prefix}[/]: matches {len(result.matches)} events. "
            f"Examples: {sample}"
        )
        console.print("Use more characters of the id to disambiguate.")
        return None
    console.print(f"[red]Error:[/] No event with id starting '{id_prefix}'")
    return None


def print_field_errors(errors: list[FieldError]) -> None:
    console.print("[red]Error:[/] Event is invalid:")
    for error in errors:
        console.print(f"  [bold]{error.field}[/]: {error.message}")


def encode_attachment(path: Path) -> str:
    """Read an image file as a base64 data URL.

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Attachment not found: {path}")
    mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def money(amount: float, symbol: str = "$") -> str:
    """Format to two decimals with the sign ahead of the currency symbol."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def fmt_money(amount: float, symbol: str = "$") -> Text:
    s = money(amount, symbol)
    if amount < 0:
        return Text(s, style="bold red")
    elif amount > 0:
        return Text(s, style="bold green")
    return Text(s)


def fmt_event_amount(event: Event, symbol: str = "$") -> Text:
    """Event amount with a +/- marker from its type."""
    if event.is_income:
        return Text(f"+ {money(event.amount, symbol)}", style="green")
    return Text(f"- {money(event.amount, symbol)}", style="red")
