"""
Key-value stores backing persisted builder state.

Each artifact (resume record, template choice, theme color) lives under its own
string key as a string value. MemoryStore is used in tests and embedding; the
SQLite store is the on-disk default.
"""

import os
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()
VITAE_STORE_PATH = Path(os.getenv("VITAE_STORE_PATH", "outs/vitae_store.sqlite3"))


class KeyValueStore(ABC):
    """Minimal string-to-string store; writes replace the whole value."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Deleting an absent key is a no-op."""

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class MemoryStore(KeyValueStore):
    """Dict-backed store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SqliteStore(KeyValueStore):
    """
    SQLite-backed store with a single kv table.

    Every write is committed immediately (whole-record, last-write-wins).
    The database file and its parent directory are created on first use.
    """

    def __init__(self, db_path: Path = VITAE_STORE_PATH):
        """
        Open (or create) the store.

        Args:
            db_path: SQLite file path (defaults to VITAE_STORE_PATH)
        """
        if type(db_path) is str:
            db_path = Path(db_path)

        self.db_path = db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        self.conn = sqlite3.connect(str(db_path))
        self.conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """
        )
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        row = self.conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.conn.execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )
        self.conn.commit()

    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "SqliteStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
