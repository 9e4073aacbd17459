"""
Tests for the balance aggregation engine.
"""

from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from walletfy.model.event import Event
from walletfy.services.balance_service import (
    build_balance_report,
    group_by_month,
    month_key,
)


def _event(amount, type, day, name="Event"):
    return Event(id=str(uuid4()), name=name, amount=amount, date=day, type=type)


class DescribeMonthKey:
    def it_should_zero_pad_the_month(self):
        assert month_key(date(2025, 1, 31)) == "2025-01"
        assert month_key(date(2025, 12, 1)) == "2025-12"


class DescribeGroupByMonth:
    def it_should_bucket_events_by_year_and_month(self):
        events = [
            _event(10, "income", "2025-02-03", "feb"),
            _event(10, "income", "2024-02-10", "feb-last-year"),
            _event(10, "expense", "2025-02-28", "feb-2"),
        ]

        groups = group_by_month(events)

        assert set(groups) == {"2025-02", "2024-02"}
        assert [e.name for e in groups["2025-02"]] == ["feb", "feb-2"]


class DescribeBuildBalanceReport:
    """Scenarios and invariants of the monthly fold."""

    def it_should_return_initial_balance_for_no_events(self):
        report = build_balance_report([], 100)

        assert report.month_summaries == ()
        assert report.current_global_balance == 100
        assert report.event_count == 0
        assert report.month_count == 0

    def it_should_summarize_a_single_income(self):
        report = build_balance_report([_event(50, "income", "2025-01-10")], 0)

        assert report.month_count == 1
        month = report.month_summaries[0]
        assert month.month_key == "2025-01"
        assert month.month_name == "January"
        assert month.year == 2025
        assert month.total_income == 50
        assert month.total_expense == 0
        assert month.monthly_balance == 50
        assert month.global_balance == 50
        assert report.current_global_balance == 50

    def it_should_carry_the_running_balance_across_months(self):
        events = [
            _event(30, "expense", "2025-01-05"),
            _event(100, "income", "2025-02-01"),
        ]

        report = build_balance_report(events, 10)

        jan, feb = report.month_summaries
        assert (jan.month_key, jan.monthly_balance, jan.global_balance) == ("2025-01", -30, -20)
        assert (feb.month_key, feb.monthly_balance, feb.global_balance) == ("2025-02", 100, 80)
        assert report.current_global_balance == 80

    def it_should_add_monthly_balance_to_initial_when_all_in_one_month(self):
        events = [
            _event(200, "income", "2025-05-01"),
            _event(75, "expense", "2025-05-20"),
            _event(25, "expense", "2025-05-31"),
        ]

        report = build_balance_report(events, 1000)

        (may,) = report.month_summaries
        assert may.total_income == 200
        assert may.total_expense == 100
        assert may.global_balance == 1000 + may.monthly_balance == 1100

    def it_should_sort_months_chronologically_regardless_of_input_order(self):
        events = [
            _event(1, "income", "2025-03-15"),
            _event(1, "income", "2024-12-01"),
            _event(1, "income", "2025-01-09"),
        ]

        report = build_balance_report(events, 0)

        assert [m.month_key for m in report.month_summaries] == [
            "2024-12",
            "2025-01",
            "2025-03",
        ]

    def it_should_not_synthesize_empty_months(self):
        events = [_event(1, "income", "2025-01-01"), _event(1, "income", "2025-04-01")]

        report = build_balance_report(events, 0)

        assert [m.month_key for m in report.month_summaries] == ["2025-01", "2025-04"]

    def it_should_sort_events_within_month_by_date_keeping_ties_in_insertion_order(self):
        events = [
            _event(1, "income", "2025-01-20", "late"),
            _event(1, "income", "2025-01-05", "tie-a"),
            _event(1, "expense", "2025-01-05", "tie-b"),
            _event(1, "income", "2025-01-01", "early"),
        ]

        report = build_balance_report(events, 0)

        assert [e.name for e in report.month_summaries[0].events] == [
            "early",
            "tie-a",
            "tie-b",
            "late",
        ]

    def it_should_allow_negative_global_balance(self):
        report = build_balance_report([_event(500, "expense", "2025-01-01")], 100)
        assert report.current_global_balance == -400

    def it_should_not_round_inside_the_accumulator(self):
        events = [_event(0.005, "income", f"2025-{m:02d}-01") for m in range(1, 13)]

        report = build_balance_report(events, 0)

        assert report.current_global_balance == pytest.approx(0.06)
        assert report.current_global_balance != 0.0


class DescribeReportInvariants:
    @pytest.fixture
    def events(self):
        return [
            _event(1200, "income", "2025-01-31"),
            _event(640.5, "expense", "2025-01-03"),
            _event(80.25, "expense", "2025-02-14"),
            _event(1200, "income", "2025-02-28"),
            _event(99.99, "expense", "2024-11-11"),
            _event(15, "income", "2025-06-30"),
        ]

    def it_should_equal_initial_plus_sum_of_monthly_balances(self, events):
        report = build_balance_report(events, 250)

        total = sum(m.monthly_balance for m in report.month_summaries)
        assert report.current_global_balance == pytest.approx(250 + total)

    def it_should_chain_adjacent_global_balances(self, events):
        summaries = build_balance_report(events, 250).month_summaries

        for earlier, later in zip(summaries, summaries[1:]):
            assert earlier.month_key < later.month_key
            assert later.global_balance == earlier.global_balance + later.monthly_balance

    def it_should_be_idempotent(self, events):
        assert build_balance_report(events, 250) == build_balance_report(events, 250)

    def it_should_count_every_event(self, events):
        report = build_balance_report(events, 0)
        assert report.event_count == len(events)
        assert report.month_count == 4
