"""
Canonical Event model for Walletfy.

An Event is one dated income or expense record. The amount is always
positive; direction comes from the type. Events are immutable: an edit
replaces the stored Event with a new one carrying the same id.

Serialization via Pydantic v2 gives the persisted JSON shape directly:
dates as YYYY-MM-DD strings, the type as its enum value.
"""

from __future__ import annotations

import datetime as dt
import re
from enum import StrEnum
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from walletfy.config import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH

UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class EventType(StrEnum):
    """Direction of an event's amount."""

    income = "income"
    expense = "expense"


class Event(BaseModel):
    """A single dated income or expense record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    amount: float = Field(gt=0, allow_inf_nan=False)
    date: dt.date
    type: EventType
    attachment: Optional[str] = Field(
        default=None, description="Base64-encoded image attached to the event"
    )

    @field_validator("id")
    @classmethod
    def check_id(cls, value: str) -> str:
        if not UUID_PATTERN.fullmatch(value):
            raise ValueError("Id must be a valid UUID.")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def check_amount_is_number(cls, value: Any) -> Any:
        """Reject strings and booleans that lax float parsing would accept."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("Amount must be a number.")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> dt.date:
        """Parse an ISO date or datetime; any time of day is discarded."""
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return dt.date.fromisoformat(text)
            except ValueError:
                pass
            try:
                return dt.datetime.fromisoformat(text).date()
            except ValueError:
                pass
        raise ValueError("Date must be a valid date in YYYY-MM-DD format.")

    @property
    def is_income(self) -> bool:
        return self.type == EventType.income


__all__ = ["Event", "EventType", "UUID_PATTERN"]
