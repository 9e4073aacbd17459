from .event import Event, EventType
from .validation import errors_by_field, require_valid, validate

__all__ = [
    # models
    "Event",
    "EventType",
    # validation gate
    "validate",
    "require_valid",
    "errors_by_field",
]
