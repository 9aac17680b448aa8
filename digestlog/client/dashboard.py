# -*- coding: utf-8 -*-
"""Dashboard data — quick stats and day grouping over loaded entries.

Entries are expected in store order (newest first). Timestamps are shown in
local time; naive timestamps are taken as already local.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from ..logs.models import BRISTOL_SCALE, BristolType, LogEntry, parse_timestamp

NO_TIME = "--:--"
NO_AVERAGE = "-"
UNKNOWN_DAY = "Unknown date"


@dataclass
class DashboardStats:
    today_count: int = 0
    last_entry_time: str = NO_TIME
    average_bristol: str = NO_AVERAGE


@dataclass
class DayGroup:
    label: str
    entries: List[LogEntry] = field(default_factory=list)


def _as_local(dt: datetime) -> datetime:
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def local_time(iso8601: str) -> Optional[datetime]:
    dt = parse_timestamp(iso8601)
    return _as_local(dt) if dt else None


def format_clock(iso8601: str) -> str:
    dt = local_time(iso8601)
    return dt.strftime("%H:%M") if dt else NO_TIME


def day_label(dt: datetime) -> str:
    # e.g. "Monday, Jan 1"
    return f"{dt:%A}, {dt:%b} {dt.day}"


def compute_stats(logs: Sequence[LogEntry], now: Optional[datetime] = None) -> DashboardStats:
    if not logs:
        return DashboardStats()

    today = _as_local(now or datetime.now()).date()
    today_count = 0
    for entry in logs:
        dt = local_time(entry.timestamp)
        if dt is not None and dt.date() == today:
            today_count += 1

    average = sum(entry.bristol_score for entry in logs) / len(logs)
    return DashboardStats(
        today_count=today_count,
        last_entry_time=format_clock(logs[0].timestamp),
        average_bristol=f"{average:.1f}",
    )


def group_by_day(logs: Sequence[LogEntry]) -> List[DayGroup]:
    groups: Dict[str, DayGroup] = {}
    for entry in logs:
        dt = local_time(entry.timestamp)
        label = day_label(dt) if dt else UNKNOWN_DAY
        groups.setdefault(label, DayGroup(label=label)).entries.append(entry)
    return list(groups.values())


def bristol_info(score: int) -> Optional[BristolType]:
    for item in BRISTOL_SCALE:
        if item.score == score:
            return item
    return None


def entry_badges(entry: LogEntry) -> List[str]:
    """Short tags shown under an entry; normal values are left out."""
    badges: List[str] = []
    if entry.quantity:
        badges.append(entry.quantity)
    if entry.color:
        badges.append(entry.color)
    if entry.urgency and entry.urgency != "Normal":
        badges.append(entry.urgency)
    if entry.pain_level > 0:
        badges.append(f"Pain: {entry.pain_level}/10")
    if entry.is_floating:
        badges.append("Floating/Greasy")
    if entry.has_blood:
        badges.append("Blood")
    if entry.has_mucus:
        badges.append("Mucus")
    if entry.smell and entry.smell != "Normal":
        badges.append(f"Smell: {entry.smell}")
    return badges
