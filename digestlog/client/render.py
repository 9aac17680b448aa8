# -*- coding: utf-8 -*-
"""Plain-text rendering of the dashboard for the terminal client."""

from __future__ import annotations

from typing import List

from ..logs.models import LogEntry
from .dashboard import bristol_info, entry_badges, format_clock
from .state import DigestApp


def render_card(entry: LogEntry) -> str:
    bristol = bristol_info(entry.bristol_score)
    label = bristol.label if bristol else f"Type {entry.bristol_score}"
    lines = [f"  #{entry.id}  {format_clock(entry.timestamp)}  {label}"]
    if bristol:
        lines.append(f"      {bristol.desc}")
    badges = entry_badges(entry)
    if badges:
        lines.append("      " + " | ".join(badges))
    if entry.notes:
        lines.append(f'      "{entry.notes}"')
    return "\n".join(lines)


def render_dashboard(app: DigestApp) -> str:
    stats = app.stats
    lines: List[str] = [
        f"Today's count: {stats.today_count}",
        f"Last entry:    {stats.last_entry_time}",
        f"Avg Bristol:   {stats.average_bristol}",
        "",
        "History",
    ]
    if app.loading:
        lines.append("Loading logs...")
    elif not app.logs:
        lines.append('No logs yet. Run "digestlog add" to start tracking.')
    else:
        for group in app.groups:
            lines.append("")
            lines.append(group.label)
            lines.extend(render_card(entry) for entry in group.entries)
    return "\n".join(lines)
