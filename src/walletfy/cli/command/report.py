from __future__ import annotations

"""
Balance flow report: month-by-month totals and the running global balance.
"""

from typing import Optional

from rich.table import Table
from rich.text import Text

from .util import console, fmt_event_amount, fmt_money, open_wallet
from walletfy.config import Settings, load_settings
from walletfy.services.balance_service import BalanceReport, MonthSummary
from walletfy.workspace import Workspace


def run(*, workspace: Workspace, expand: Optional[bool] = None) -> int:
    """Display the balance flow for every month that has events.

    Args:
        workspace: Workspace providing the store and settings paths
        expand: List each month's events (default: settings.expand_months)

    Returns:
        Exit code (0 = success, 1 = bad settings)
    """
    try:
        settings = load_settings(workspace.settings_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    service = open_wallet(workspace)
    report = service.get_balance_report()

    show_events = settings.expand_months if expand is None else expand
    _display_report(report, settings, show_events)
    return 0


def _display_report(report: BalanceReport, settings: Settings, show_events: bool) -> None:
    symbol = settings.currency_symbol

    console.print(
        Text("Current global balance:", style="bold"),
        fmt_money(report.current_global_balance, symbol),
    )
    console.print(Text("Initial balance:", style="dim"), fmt_money(report.initial_balance, symbol))

    if not report.month_summaries:
        console.print("\n[yellow]No events recorded yet.[/] Add one to see your balance flow.")
        return

    month_word = "month" if report.month_count == 1 else "months"
    event_word = "event" if report.event_count == 1 else "events"
    console.print(
        f"\nYou have {report.event_count} {event_word} in {report.month_count} {month_word}\n"
    )

    table = Table(title="Balance Flow", show_lines=False)
    table.add_column("Month", style="cyan", no_wrap=True)
    table.add_column("Income", justify="right", style="green")
    table.add_column("Expense", justify="right", style="red")
    table.add_column("Monthly", justify="right")
    table.add_column("Global", justify="right")
    table.add_column("Events", justify="right", style="dim")

    for month in report.month_summaries:
        table.add_row(
            f"{month.month_name} {month.year}",
            fmt_money(month.total_income, symbol),
            fmt_money(month.total_expense, symbol),
            fmt_money(month.monthly_balance, symbol),
            fmt_money(month.global_balance, symbol),
            str(month.event_count),
        )

    console.print(table)

    if show_events:
        for month in report.month_summaries:
            _display_month_events(month, settings)


def _display_month_events(month: MonthSummary, settings: Settings) -> None:
    table = Table(title=f"{month.month_name} {month.year}", show_lines=False)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Amount", justify="right")
    table.add_column("Description", style="dim")
    table.add_column("ID8", style="dim", no_wrap=True)

    for event in month.events:
        table.add_row(
            event.date.strftime(settings.date_format),
            Text("Income", style="green") if event.is_income else Text("Expense", style="red"),
            event.name,
            fmt_event_amount(event, settings.currency_symbol),
            event.description or "",
            event.id[:8],
        )

    console.print(table)
