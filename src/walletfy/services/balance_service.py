"""
Balance aggregation engine.

Turns an unordered list of events plus an initial balance into chronological
month summaries and a running global balance. Pure functions: no I/O, no
cached state, every call recomputes from the full event list.

Amounts are summed as floats. Rounding to cents is a display concern and
never happens here, so error does not compound from month to month.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Tuple

from walletfy.model.event import Event, EventType


@dataclass(frozen=True)
class MonthSummary:
    """Totals for one calendar month that has at least one event."""

    month_key: str  # YYYY-MM
    month_name: str
    year: int
    total_income: float
    total_expense: float
    monthly_balance: float
    global_balance: float  # Running balance through the end of this month
    events: Tuple[Event, ...]  # Date ascending, ties in insertion order

    @property
    def event_count(self) -> int:
        return len(self.events)


@dataclass(frozen=True)
class BalanceReport:
    """Full monthly breakdown plus the balance after the last month."""

    month_summaries: Tuple[MonthSummary, ...]
    current_global_balance: float
    initial_balance: float

    @property
    def event_count(self) -> int:
        return sum(m.event_count for m in self.month_summaries)

    @property
    def month_count(self) -> int:
        return len(self.month_summaries)


def month_key(day: date) -> str:
    """Sortable year-month key, e.g. '2025-01'."""
    return f"{day.year:04d}-{day.month:02d}"


def group_by_month(events: Iterable[Event]) -> Dict[str, List[Event]]:
    """Bucket events by month key, preserving insertion order within each bucket."""
    groups: Dict[str, List[Event]] = defaultdict(list)
    for event in events:
        groups[month_key(event.date)].append(event)
    return dict(groups)


def summarize_month(key: str, events: List[Event], previous_balance: float) -> MonthSummary:
    """Build one month's summary given the global balance at the end of the prior month."""
    total_income = 0.0
    total_expense = 0.0
    for event in events:
        if event.type == EventType.income:
            total_income += event.amount
        else:
            total_expense += event.amount

    monthly_balance = total_income - total_expense
    year, month = (int(part) for part in key.split("-"))

    return MonthSummary(
        month_key=key,
        month_name=calendar.month_name[month],
        year=year,
        total_income=total_income,
        total_expense=total_expense,
        monthly_balance=monthly_balance,
        global_balance=previous_balance + monthly_balance,
        # sorted() is stable, so same-day events keep insertion order
        events=tuple(sorted(events, key=lambda e: e.date)),
    )


def build_balance_report(events: Iterable[Event], initial_balance: float) -> BalanceReport:
    """Group events by month and fold monthly balances into a running total.

    Months are processed oldest first; each month's global balance is the
    previous month's global balance (or the initial balance for the first
    month) plus its own monthly balance. Months without events are never
    synthesized.

    Args:
        events: Validated events in any order
        initial_balance: Starting capital before the first event

    Returns:
        BalanceReport with summaries sorted by month key ascending
    """
    groups = group_by_month(events)

    summaries: List[MonthSummary] = []
    running = float(initial_balance)
    for key in sorted(groups):
        summary = summarize_month(key, groups[key], running)
        running = summary.global_balance
        summaries.append(summary)

    return BalanceReport(
        month_summaries=tuple(summaries),
        current_global_balance=running,
        initial_balance=float(initial_balance),
    )


__all__ = [
    "MonthSummary",
    "BalanceReport",
    "month_key",
    "group_by_month",
    "summarize_month",
    "build_balance_report",
]
