"""
Persistence bridge between in-memory state and the key-value medium.

Layout (two records):
- "events": JSON array of Event objects
- "initialBalance": decimal string

Loading validates every stored event individually. A corrupt record is
dropped and reported; the rest of the collection still loads. Missing keys
fall back to an empty event list and a zero initial balance.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from walletfy.config import DEFAULT_INITIAL_BALANCE, EVENTS_KEY, INITIAL_BALANCE_KEY
from walletfy.errors import PersistenceParseError
from walletfy.model.event import Event
from walletfy.model.validation import validate
from walletfy.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """State recovered from storage plus every record that had to be dropped."""

    events: List[Event]
    initial_balance: float
    errors: List[PersistenceParseError] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return sum(1 for e in self.errors if e.key == EVENTS_KEY and e.index is not None)

    @property
    def is_clean(self) -> bool:
        return not self.errors


class PersistenceBridge:
    """Serialize events and the initial balance to a KeyValueStore and back."""

    def __init__(self, kv_store: KeyValueStore):
        self.kv_store = kv_store

    def save(self, events: Iterable[Event], initial_balance: float) -> None:
        """Write both records."""
        self.save_events(events)
        self.save_initial_balance(initial_balance)

    def save_events(self, events: Iterable[Event]) -> None:
        payload = [event.model_dump(mode="json") for event in events]
        self.kv_store.set(EVENTS_KEY, json.dumps(payload))
        logger.debug("Saved %d events", len(payload))

    def save_initial_balance(self, initial_balance: float) -> None:
        self.kv_store.set(INITIAL_BALANCE_KEY, str(float(initial_balance)))
        logger.debug("Saved initial balance %s", initial_balance)

    def load(self) -> LoadResult:
        """Read both records, dropping and reporting anything unreadable.

        Never raises for bad stored data; problems are returned in
        LoadResult.errors and logged as warnings.
        """
        errors: List[PersistenceParseError] = []
        events = self._load_events(errors)
        initial_balance = self._load_initial_balance(errors)

        result = LoadResult(events=events, initial_balance=initial_balance, errors=errors)
        for error in errors:
            logger.warning("%s", error)
        logger.debug(
            "Loaded %d events (dropped %d), initial balance %s",
            len(events),
            result.dropped_count,
            initial_balance,
        )
        return result

    def _load_events(self, errors: List[PersistenceParseError]) -> List[Event]:
        raw = self.kv_store.get(EVENTS_KEY)
        if raw is None:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            errors.append(PersistenceParseError(EVENTS_KEY, f"not valid JSON ({e})"))
            return []

        if not isinstance(records, list):
            errors.append(
                PersistenceParseError(
                    EVENTS_KEY, f"expected a JSON array, got {type(records).__name__}"
                )
            )
            return []

        events: List[Event] = []
        seen: set[str] = set()
        for index, record in enumerate(records):
            event, reason = _recover_event(record)
            if event is not None and event.id in seen:
                event, reason = None, f"duplicate id {event.id}"
            if event is None:
                errors.append(PersistenceParseError(EVENTS_KEY, reason, index=index))
                continue
            seen.add(event.id)
            events.append(event)
        return events

    def _load_initial_balance(self, errors: List[PersistenceParseError]) -> float:
        raw = self.kv_store.get(INITIAL_BALANCE_KEY)
        if raw is None:
            return DEFAULT_INITIAL_BALANCE

        try:
            value = float(raw)
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            errors.append(
                PersistenceParseError(INITIAL_BALANCE_KEY, f"not a finite number: {raw!r}")
            )
            return DEFAULT_INITIAL_BALANCE
        return value


def _recover_event(record: object) -> Tuple[Event | None, str]:
    result = validate(record)
    if isinstance(result, Event):
        return result, ""
    return None, "; ".join(str(e) for e in result)


__all__ = ["PersistenceBridge", "LoadResult"]
