"""
Service layer for Walletfy.

This module contains the functional core separated from the imperative
shell (CLI). Services hold no UI framework imports and return data
structures for the caller to render.
"""

from walletfy.services.balance_service import (
    BalanceReport,
    MonthSummary,
    build_balance_report,
    group_by_month,
    month_key,
)
from walletfy.services.wallet_service import SubmitResult, WalletService

__all__ = [
    "BalanceReport",
    "MonthSummary",
    "build_balance_report",
    "group_by_month",
    "month_key",
    "SubmitResult",
    "WalletService",
]
