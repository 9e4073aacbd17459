"""
Initial balance holder: the user's starting capital before any events.
"""

from __future__ import annotations

import math

from walletfy.config import DEFAULT_INITIAL_BALANCE


class InitialBalanceHolder:
    """A single settable scalar, independent of the event collection.

    Any finite number is accepted, including zero and negatives (starting in
    debt is a valid state).
    """

    def __init__(self, value: float = DEFAULT_INITIAL_BALANCE):
        self._value = _coerce(value)

    @property
    def value(self) -> float:
        return self._value

    def set(self, value: float) -> None:
        """Replace the initial balance.

        Raises:
            ValueError: If value is not a finite number
        """
        self._value = _coerce(value)


def _coerce(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Initial balance must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"Initial balance must be finite, got {value!r}")
    return float(value)


__all__ = ["InitialBalanceHolder"]
