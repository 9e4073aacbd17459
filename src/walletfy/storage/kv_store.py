"""
Durable key-value medium for Walletfy state.

Persisted state is two string values under fixed keys (see walletfy.config).
The SQLite implementation keeps them in a single local file; the in-memory
implementation is for tests and throwaway sessions.

Privacy: the store is a local SQLite file. Never transmit its contents over
networks as they contain personal financial data.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Dict, Optional, Protocol


class KeyValueStore(Protocol):
    """String-keyed storage of string values."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class SQLiteKeyValueStore:
    """Key-value store backed by a SQLite file.

    Each call opens and closes its own connection, so writes are committed
    as soon as the call returns.

    Usage:
        kv = SQLiteKeyValueStore("data/walletfy.db")
        kv.set("initialBalance", "100.0")
        kv.get("initialBalance")
    """

    def __init__(self, db_path: str | Path):
        """Initialize the store, creating the database file if needed.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _init_schema(self) -> None:
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT DEFAULT (datetime('now'))
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row[0] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value for key."""
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO kv (key, value, updated_at)
                VALUES (?, ?, datetime('now'))
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        """Remove key if present."""
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()


class InMemoryKeyValueStore:
    """Dict-backed key-value store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


__all__ = ["KeyValueStore", "SQLiteKeyValueStore", "InMemoryKeyValueStore"]
