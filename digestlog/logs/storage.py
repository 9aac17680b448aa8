# -*- coding: utf-8 -*-
"""Log entries — SQLite record store."""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..db import connect, init_schema
from .models import LogEntry, LogEntryCreate

logger = logging.getLogger(__name__)

_FLAG_FIELDS = ("has_blood", "has_mucus", "is_floating")


class StorageError(Exception):
    """I/O or constraint failure in the record store."""


class NotFoundError(StorageError):
    """No row with the requested id."""


def _row_to_entry(row: sqlite3.Row) -> LogEntry:
    data: Dict[str, Any] = dict(row)
    for name in _FLAG_FIELDS:
        data[name] = bool(data.get(name))
    if data.get("pain_level") is None:
        data["pain_level"] = 0
    return LogEntry.model_validate(data)


class LogStore:
    """Durable CRUD for log entries, backed by one SQLite file.

    A single connection is shared between request threads, so every statement
    runs under `self._lock`.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def initialize(self) -> None:
        with self._lock:
            try:
                if self._conn is None:
                    self._conn = connect(self.db_path)
                init_schema(self._conn)
            except (OSError, sqlite3.Error) as exc:
                raise StorageError(f"Failed to open log database {self.db_path}: {exc}") from exc
        logger.debug("Log store ready at %s", self.db_path)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Log store is not initialized")
        return self._conn

    def add(self, entry: LogEntryCreate) -> int:
        with self._lock:
            conn = self._require_conn()
            try:
                cur = conn.execute(
                    """
                    INSERT INTO logs (
                        timestamp, bristol_score, color, quantity, urgency, pain_level,
                        notes, has_blood, has_mucus, is_floating, smell
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        entry.timestamp,
                        entry.bristol_score,
                        entry.color,
                        entry.quantity,
                        entry.urgency,
                        entry.pain_level,
                        entry.notes,
                        1 if entry.has_blood else 0,
                        1 if entry.has_mucus else 0,
                        1 if entry.is_floating else 0,
                        entry.smell,
                    ),
                )
                conn.commit()
            except sqlite3.Error as exc:
                conn.rollback()
                raise StorageError(f"Failed to insert log: {exc}") from exc
            return int(cur.lastrowid)

    def list(self) -> List[LogEntry]:
        """All entries, newest first (ISO8601 strings sort chronologically)."""
        with self._lock:
            conn = self._require_conn()
            try:
                rows = conn.execute("SELECT * FROM logs ORDER BY timestamp DESC, id DESC").fetchall()
            except sqlite3.Error as exc:
                raise StorageError(f"Failed to read logs: {exc}") from exc
        try:
            return [_row_to_entry(row) for row in rows]
        except ValidationError as exc:
            raise StorageError(f"Malformed log row: {exc}") from exc

    def remove(self, log_id: int, *, missing_ok: bool = True) -> None:
        with self._lock:
            conn = self._require_conn()
            try:
                cur = conn.execute("DELETE FROM logs WHERE id = ?", (log_id,))
                conn.commit()
            except sqlite3.Error as exc:
                conn.rollback()
                raise StorageError(f"Failed to delete log {log_id}: {exc}") from exc
        if cur.rowcount == 0:
            if not missing_ok:
                raise NotFoundError(f"Log {log_id} not found")
            logger.info("Delete of missing log %s ignored", log_id)
