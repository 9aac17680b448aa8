# -*- coding: utf-8 -*-
"""SQLite helpers for the log database."""

from __future__ import annotations

import sqlite3
from pathlib import Path


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the `logs` table if it does not exist yet."""
    cur = conn.cursor()
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS logs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            timestamp TEXT NOT NULL,
            bristol_score INTEGER NOT NULL,
            color TEXT NOT NULL,
            quantity TEXT,
            urgency TEXT,
            pain_level INTEGER,
            notes TEXT,
            has_blood BOOLEAN DEFAULT 0,
            has_mucus BOOLEAN DEFAULT 0,
            is_floating BOOLEAN DEFAULT 0,
            smell TEXT
        );
        """
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON logs(timestamp DESC);")
    conn.commit()
