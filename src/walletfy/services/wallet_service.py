"""
Wallet service - the boundary the presentation layer talks to.

Wires the event store, the initial balance holder, and the persistence
bridge together. Every mutation is applied in memory first and then
persisted explicitly; reads recompute the balance report from scratch.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from walletfy.errors import FieldError
from walletfy.model.event import Event
from walletfy.model.validation import validate
from walletfy.services.balance_service import BalanceReport, build_balance_report
from walletfy.storage.balance import InitialBalanceHolder
from walletfy.storage.event_store import EventStore
from walletfy.storage.kv_store import KeyValueStore
from walletfy.storage.persistence import LoadResult, PersistenceBridge

logger = logging.getLogger(__name__)


@dataclass
class SubmitResult:
    """Outcome of submitting a candidate event."""

    event: Optional[Event] = None
    errors: List[FieldError] = field(default_factory=list)
    created: bool = False  # True for add, False for update or failure

    @property
    def is_ok(self) -> bool:
        return self.event is not None and not self.errors


class WalletService:
    """Consumer-facing operations over explicit state objects.

    Usage:
        service = WalletService.open(SQLiteKeyValueStore(workspace.store_path))
        result = service.submit_event({...})
        report = service.get_balance_report()
    """

    def __init__(
        self,
        event_store: EventStore,
        balance_holder: InitialBalanceHolder,
        persistence: PersistenceBridge,
    ):
        self.event_store = event_store
        self.balance_holder = balance_holder
        self.persistence = persistence
        self.last_load: Optional[LoadResult] = None

    @classmethod
    def open(cls, kv_store: KeyValueStore) -> WalletService:
        """Create a service over kv_store and load whatever it holds."""
        service = cls(EventStore(), InitialBalanceHolder(), PersistenceBridge(kv_store))
        service.load()
        return service

    def load(self) -> LoadResult:
        """Replace in-memory state with persisted state.

        Returns:
            LoadResult listing any stored records that were dropped
        """
        result = self.persistence.load()
        self.event_store.replace_all(result.events)
        self.balance_holder.set(result.initial_balance)
        self.last_load = result
        if result.errors:
            logger.warning("Dropped %d unreadable stored record(s)", len(result.errors))
        return result

    def submit_event(self, candidate: Any) -> SubmitResult:
        """Validate a candidate, then add it or update the event with the same id.

        On validation failure the store is untouched and nothing is persisted.
        """
        result = validate(candidate)
        if not isinstance(result, Event):
            return SubmitResult(errors=result)

        created = result.id not in self.event_store
        if created:
            self.event_store.add(result)
        else:
            self.event_store.update(result)
        self.persistence.save_events(self.event_store.list())

        logger.info("%s event %s", "Added" if created else "Updated", result.id)
        return SubmitResult(event=result, created=created)

    def delete_event(self, event_id: str) -> Event:
        """Remove an event and persist the remaining collection.

        Raises:
            NotFoundError: If no stored event has that id
        """
        removed = self.event_store.remove(event_id)
        self.persistence.save_events(self.event_store.list())
        logger.info("Deleted event %s", event_id)
        return removed

    def set_initial_balance(self, value: float) -> None:
        """Replace the initial balance and persist it.

        Raises:
            ValueError: If value is not a finite number
        """
        self.balance_holder.set(value)
        self.persistence.save_initial_balance(self.balance_holder.value)
        logger.info("Initial balance set to %s", self.balance_holder.value)

    @property
    def initial_balance(self) -> float:
        return self.balance_holder.value

    def list_events(self) -> List[Event]:
        return self.event_store.list()

    def get_balance_report(self) -> BalanceReport:
        """Recompute the monthly breakdown from the current state."""
        return build_balance_report(self.event_store.list(), self.balance_holder.value)


__all__ = ["WalletService", "SubmitResult"]
