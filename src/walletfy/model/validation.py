"""
Validation gate for candidate events.

Candidates arrive as loose mappings (form input, JSON recovered from
storage). validate() either returns a fully valid Event or the complete list
of failing fields, so nothing partially valid ever reaches the store.

Each field reports at most one error (its first failing rule), but every
failing field is reported.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from walletfy.config import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from walletfy.errors import EventValidationError, FieldError
from walletfy.model.event import Event

ROOT_FIELD = "__root__"

FIELD_ORDER = ("id", "name", "description", "amount", "date", "type", "attachment")

_MESSAGES: Dict[tuple[str, str], str] = {
    ("id", "missing"): "Id is required.",
    ("id", "string_type"): "Id must be a valid UUID.",
    ("name", "missing"): "Name is required.",
    ("name", "string_type"): "Name must be text.",
    ("name", "string_too_short"): "Name is required.",
    ("name", "string_too_long"): f"Name cannot exceed {NAME_MAX_LENGTH} characters.",
    ("description", "string_type"): "Description must be text.",
    ("description", "string_too_long"): (
        f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters."
    ),
    ("amount", "missing"): "Amount is required.",
    ("amount", "greater_than"): "Amount must be a positive number.",
    ("amount", "finite_number"): "Amount must be a finite number.",
    ("date", "missing"): "Date is required.",
    ("type", "missing"): "Type is required.",
    ("type", "enum"): "Type must be 'income' or 'expense'.",
    ("attachment", "string_type"): "Attachment must be a base64-encoded string.",
}


def validate(candidate: Any) -> Union[Event, List[FieldError]]:
    """Check a candidate against every Event constraint.

    Args:
        candidate: A mapping of event fields, or an existing Event

    Returns:
        The validated Event, or a non-empty list of FieldError ordered by
        field (id, name, description, amount, date, type, attachment).
    """
    if isinstance(candidate, Event):
        data: Dict[str, Any] = candidate.model_dump()
    elif isinstance(candidate, Mapping):
        data = dict(candidate)
    else:
        return [FieldError(ROOT_FIELD, "Event must be an object.")]

    errors: Dict[str, str] = {}
    # Event generates ids for new records; a candidate must carry its own.
    if "id" not in data:
        errors["id"] = _MESSAGES[("id", "missing")]

    event = None
    try:
        event = Event.model_validate(data)
    except ValidationError as e:
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else ROOT_FIELD
            errors.setdefault(field, _message_for(field, err))

    if errors:
        return _ordered(errors)
    return event


def require_valid(candidate: Any) -> Event:
    """Like validate(), but raise EventValidationError instead of returning errors."""
    result = validate(candidate)
    if isinstance(result, Event):
        return result
    raise EventValidationError(result)


def errors_by_field(errors: List[FieldError]) -> Dict[str, str]:
    """Map field name to message, for highlighting every invalid field at once."""
    return {e.field: e.message for e in errors}


def _message_for(field: str, err: Dict[str, Any]) -> str:
    if err["type"] == "value_error":
        # Our own validators raise ValueError with a ready-made message
        return str(err["ctx"]["error"])
    return _MESSAGES.get((field, err["type"]), err["msg"])


def _ordered(errors: Dict[str, str]) -> List[FieldError]:
    def rank(field: str) -> int:
        return FIELD_ORDER.index(field) if field in FIELD_ORDER else len(FIELD_ORDER)

    return [FieldError(f, errors[f]) for f in sorted(errors, key=rank)]


__all__ = [
    "validate",
    "require_valid",
    "errors_by_field",
    "FIELD_ORDER",
    "ROOT_FIELD",
]
