# -*- coding: utf-8 -*-
"""Client application state: the dashboard / new-entry view toggle and the draft entry."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..logs.models import LogEntry, LogEntryCreate
from .dashboard import DashboardStats, DayGroup, compute_stats, group_by_day
from .http import LogClient

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this entry?"


class View(str, Enum):
    dashboard = "dashboard"
    new_log = "new-log"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class LogDraft:
    """In-progress entry on the New-Entry form, pre-filled with form defaults."""

    timestamp: str = field(default_factory=_utc_now)
    bristol_score: int = 4
    color: str = "Brown"
    quantity: str = "Medium"
    urgency: str = "Normal"
    pain_level: int = 0
    notes: str = ""
    has_blood: bool = False
    has_mucus: bool = False
    is_floating: bool = False
    smell: str = "Normal"

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


_DRAFT_FIELDS = {f.name for f in fields(LogDraft)}


class DigestApp:
    """Two-view client controller.

    Holds only transient state: the current view, the loaded entries, a loading
    flag and the draft. Network failures are logged and leave the state as it
    was; nothing is retried.
    """

    def __init__(self, client: LogClient) -> None:
        self.client = client
        self.view: View = View.dashboard
        self.logs: List[LogEntry] = []
        self.loading: bool = True
        self.draft: Optional[LogDraft] = None

    @property
    def stats(self) -> DashboardStats:
        return compute_stats(self.logs)

    @property
    def groups(self) -> List[DayGroup]:
        return group_by_day(self.logs)

    def refresh(self) -> bool:
        """Reload entries; returns False (keeping the old list) when the fetch fails."""
        try:
            self.logs = self.client.fetch_logs()
        except httpx.HTTPError as exc:
            logger.error("Failed to fetch logs: %s", exc)
            return False
        finally:
            self.loading = False
        return True

    def start_entry(self) -> LogDraft:
        self.view = View.new_log
        self.draft = LogDraft()
        return self.draft

    def cancel(self) -> None:
        self.view = View.dashboard
        self.draft = None

    def update_draft(self, **changes: Any) -> LogDraft:
        if self.draft is None:
            raise RuntimeError("No entry in progress; call start_entry() first")
        unknown = set(changes) - _DRAFT_FIELDS
        if unknown:
            raise ValueError(f"Unknown draft field(s): {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self.draft, name, value)
        return self.draft

    def save(self) -> Optional[int]:
        """Submit the draft; on success refresh and return to the dashboard."""
        if self.draft is None:
            raise RuntimeError("No entry in progress; call start_entry() first")
        try:
            entry = LogEntryCreate.model_validate(self.draft.to_payload())
            log_id = self.client.add_log(entry)
        except ValidationError as exc:
            logger.error("Draft entry is invalid: %s", exc)
            return None
        except httpx.HTTPError as exc:
            logger.error("Failed to save log: %s", exc)
            return None
        self.refresh()
        self.cancel()
        return log_id

    def delete(self, log_id: int, confirm: Callable[[str], bool]) -> bool:
        if not confirm(DELETE_PROMPT):
            return False
        try:
            self.client.delete_log(log_id)
        except httpx.HTTPError as exc:
            logger.error("Failed to delete log %s: %s", log_id, exc)
            return False
        self.refresh()
        return True
