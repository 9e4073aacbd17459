"""
Storage layer: in-memory state holders and their durable persistence.
"""

from walletfy.storage.balance import InitialBalanceHolder
from walletfy.storage.event_store import EventStore, MatchResult
from walletfy.storage.kv_store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    SQLiteKeyValueStore,
)
from walletfy.storage.persistence import LoadResult, PersistenceBridge

__all__ = [
    "EventStore",
    "MatchResult",
    "InitialBalanceHolder",
    "KeyValueStore",
    "SQLiteKeyValueStore",
    "InMemoryKeyValueStore",
    "PersistenceBridge",
    "LoadResult",
]
