from __future__ import annotations

import os
import sqlite3
import threading
from datetime import datetime, timezone

from resumeai.core.config import settings


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LocalStore:
    """String key/value storage in a local SQLite file."""

    def __init__(self, db_path: str | None = None):
        self._db_path = db_path or settings.session_db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def db_path(self) -> str:
        return self._db_path

    def _get_connection(self) -> sqlite3.Connection:
        with self._lock:
            if self._conn is not None:
                return self._conn

            directory = os.path.dirname(self._db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            self._conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            self._conn.execute("PRAGMA journal_mode=WAL;")
            self._conn.execute("PRAGMA synchronous=NORMAL;")
            self._conn.execute("PRAGMA busy_timeout=5000;")
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS local_storage (
                    storage_key TEXT PRIMARY KEY,
                    value_text TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
                """
            )
            return self._conn

    def get_item(self, key: str) -> str | None:
        conn = self._get_connection()
        with self._lock:
            cur = conn.execute("SELECT value_text FROM local_storage WHERE storage_key = ?", (key,))
            row = cur.fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_connection()
        with self._lock:
            conn.execute(
                """
                INSERT INTO local_storage (storage_key, value_text, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(storage_key) DO UPDATE SET
                    value_text = excluded.value_text,
                    updated_at = excluded.updated_at
                """,
                (key, value, _utc_now().isoformat()),
            )
            conn.commit()

    def remove_item(self, key: str) -> None:
        conn = self._get_connection()
        with self._lock:
            conn.execute("DELETE FROM local_storage WHERE storage_key = ?", (key,))
            conn.commit()

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
