"""
Error types for Walletfy.

Every error here is local and recoverable. Services raise them; the CLI
layer catches WalletfyError and turns it into a message and an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single field that failed validation.

    Not an exception: validation returns a list of these so a form layer can
    highlight every invalid field at once.
    """

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class WalletfyError(Exception):
    """Base class for all Walletfy errors."""


class EventValidationError(WalletfyError):
    """Raised when a candidate event fails one or more field constraints."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Invalid event ({fields})")


class NotFoundError(WalletfyError):
    """Raised when an update or delete targets an id that is not stored."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


class DuplicateIdError(WalletfyError):
    """Raised when an event id would appear twice in the store."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Duplicate event id: {event_id}")


class PersistenceParseError(WalletfyError):
    """A stored record that could not be recovered.

    Collected by PersistenceBridge.load() and returned to the caller rather
    than raised, so one corrupt record never blocks the rest from loading.
    """

    def __init__(self, key: str, reason: str, index: Optional[int] = None):
        self.key = key
        self.index = index
        self.reason = reason
        where = key if index is None else f"{key}[{index}]"
        super().__init__(f"Dropped {where}: {reason}")


__all__ = [
    "FieldError",
    "WalletfyError",
    "EventValidationError",
    "NotFoundError",
    "DuplicateIdError",
    "PersistenceParseError",
]
