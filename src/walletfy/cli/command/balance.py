"""Show or set the initial balance."""

from __future__ import annotations

from typing import Optional

from walletfy.config import load_settings
from walletfy.workspace import Workspace

from .util import console, fmt_money, open_wallet


def run(*, workspace: Workspace, amount: Optional[float] = None) -> int:
    """Print the initial balance, or replace it when amount is given.

    Returns:
        Exit code (0 = success, 1 = bad settings or amount)
    """
    try:
        settings = load_settings(workspace.settings_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    service = open_wallet(workspace)

    if amount is not None:
        try:
            service.set_initial_balance(amount)
        except ValueError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1
        console.print("[green]Initial balance updated.[/]")

    console.print(
        "[bold]Initial balance:[/]",
        fmt_money(service.initial_balance, settings.currency_symbol),
    )
    return 0
