"""
In-memory event store.

Holds the flat collection of Event records in insertion order. Ids are
unique across the store. Every mutation builds a new list and swaps it in,
so a reader never observes a half-applied change.

Durability is not handled here; see walletfy.storage.persistence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from walletfy.errors import DuplicateIdError, NotFoundError
from walletfy.model.event import Event

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Result of finding an event by id prefix."""

    type: str  # "match", "ambiguous", "not_found"
    event: Optional[Event] = None
    matches: List[Event] = field(default_factory=list)  # For ambiguous case

    @property
    def is_match(self) -> bool:
        return self.type == "match"

    @property
    def is_ambiguous(self) -> bool:
        return self.type == "ambiguous"

    @property
    def is_not_found(self) -> bool:
        return self.type == "not_found"


class EventStore:
    """Ordered collection of events keyed by id.

    Usage:
        store = EventStore()
        store.add(event)
        store.update(edited)        # same id, new values
        events = store.list()
    """

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._events: List[Event] = []
        if events is not None:
            self.replace_all(events)

    def add(self, event: Event) -> None:
        """Append an event.

        Raises:
            DuplicateIdError: If an event with the same id is already stored
        """
        if event.id in self:
            raise DuplicateIdError(event.id)
        self._events = [*self._events, event]
        logger.debug("Added event %s", event.id)

    def update(self, event: Event) -> None:
        """Replace the stored event whose id matches event.id, keeping its position.

        Raises:
            NotFoundError: If no stored event has that id (store unchanged)
        """
        index = self._index_of(event.id)
        if index is None:
            raise NotFoundError(event.id)
        events = list(self._events)
        events[index] = event
        self._events = events
        logger.debug("Updated event %s", event.id)

    def remove(self, event_id: str) -> Event:
        """Remove and return the event with the given id.

        Raises:
            NotFoundError: If no stored event has that id (store unchanged)
        """
        index = self._index_of(event_id)
        if index is None:
            raise NotFoundError(event_id)
        removed = self._events[index]
        self._events = self._events[:index] + self._events[index + 1 :]
        logger.debug("Removed event %s", event_id)
        return removed

    def replace_all(self, events: Iterable[Event]) -> None:
        """Replace the whole collection.

        Events are expected to be validated already. The batch is rejected as
        a whole if it repeats an id.

        Raises:
            DuplicateIdError: If two events in the batch share an id (store unchanged)
        """
        new_events = list(events)
        seen: set[str] = set()
        for event in new_events:
            if event.id in seen:
                raise DuplicateIdError(event.id)
            seen.add(event.id)
        self._events = new_events

    def list(self) -> List[Event]:
        """Snapshot of all events in insertion order."""
        return list(self._events)

    def get(self, event_id: str) -> Optional[Event]:
        index = self._index_of(event_id)
        return None if index is None else self._events[index]

    def find_by_id_prefix(self, prefix: str) -> MatchResult:
        """Find an event by a case-insensitive id prefix.

        Returns:
            MatchResult indicating:
            - match: Exactly one event found
            - ambiguous: Multiple events match
            - not_found: No events match (or prefix is empty)
        """
        normalized = (prefix or "").strip().lower()
        if not normalized:
            return MatchResult(type="not_found")

        matches = [e for e in self._events if e.id.lower().startswith(normalized)]

        if len(matches) == 0:
            return MatchResult(type="not_found")
        elif len(matches) == 1:
            return MatchResult(type="match", event=matches[0])
        else:
            return MatchResult(type="ambiguous", matches=matches)

    def _index_of(self, event_id: str) -> Optional[int]:
        for i, event in enumerate(self._events):
            if event.id == event_id:
                return i
        return None

    def __contains__(self, event_id: object) -> bool:
        return any(e.id == event_id for e in self._events)

    def __len__(self) -> int:
        return len(self._events)


__all__ = ["EventStore", "MatchResult"]
