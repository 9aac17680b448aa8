# -*- coding: utf-8 -*-
"""
Terminal client for the digestlog API.

Usage:
    digestlog [dashboard]
    digestlog add --bristol 4 --color Brown [--blood] [--notes "..."]
    digestlog delete <id> [--yes]
    digestlog health
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import httpx

from ..config import settings
from ..logs.models import BRISTOL_SCALE, COLORS, QUANTITIES, SMELLS, URGENCIES
from .http import LogClient
from .render import render_dashboard
from .state import DigestApp


def _ask_confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def cmd_dashboard(app: DigestApp, args: argparse.Namespace) -> int:
    if not app.refresh():
        print("Error: failed to fetch logs")
        return 1
    print(render_dashboard(app))
    return 0


def cmd_add(app: DigestApp, args: argparse.Namespace) -> int:
    app.start_entry()
    changes = {
        "bristol_score": args.bristol,
        "color": args.color,
        "quantity": args.quantity,
        "urgency": args.urgency,
        "smell": args.smell,
        "pain_level": args.pain,
        "notes": args.notes,
        "has_blood": args.blood,
        "has_mucus": args.mucus,
        "is_floating": args.floating,
    }
    if args.timestamp:
        changes["timestamp"] = args.timestamp
    app.update_draft(**changes)

    log_id = app.save()
    if log_id is None:
        print("Error: failed to save entry")
        return 1
    print(f"Saved entry #{log_id}")
    return 0


def cmd_delete(app: DigestApp, args: argparse.Namespace) -> int:
    confirm = (lambda _prompt: True) if args.yes else _ask_confirm
    if not app.delete(args.id, confirm):
        print("Entry not deleted")
        return 1
    print(f"Deleted entry #{args.id}")
    return 0


def cmd_health(app: DigestApp, args: argparse.Namespace) -> int:
    try:
        status = app.client.health()
    except httpx.HTTPError as exc:
        print(f"Error: API unreachable: {exc}")
        return 1
    print(status.get("status", "unknown"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="digestlog", description="Digestive symptom log")
    parser.add_argument("--api-url", default=None, help=f"API base URL (default: {settings.api_url})")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("dashboard", help="Show stats and history")

    add = sub.add_parser("add", help="Record a new entry")
    add.add_argument("--bristol", type=int, default=4, choices=[b.score for b in BRISTOL_SCALE])
    add.add_argument("--color", default="Brown", choices=COLORS)
    add.add_argument("--quantity", default="Medium", choices=QUANTITIES)
    add.add_argument("--urgency", default="Normal", choices=URGENCIES)
    add.add_argument("--smell", default="Normal", choices=SMELLS)
    add.add_argument("--pain", type=int, default=0, choices=range(0, 11), metavar="0-10")
    add.add_argument("--notes", default="")
    add.add_argument("--blood", action="store_true")
    add.add_argument("--mucus", action="store_true")
    add.add_argument("--floating", action="store_true", help="Floating / greasy / oily")
    add.add_argument("--timestamp", default=None, help="ISO8601, defaults to now")

    delete = sub.add_parser("delete", help="Delete an entry")
    delete.add_argument("id", type=int)
    delete.add_argument("--yes", action="store_true", help="Skip confirmation")

    sub.add_parser("health", help="Check the API")
    return parser


_COMMANDS = {
    "dashboard": cmd_dashboard,
    "add": cmd_add,
    "delete": cmd_delete,
    "health": cmd_health,
}


def main(argv: Optional[List[str]] = None, client: Optional[LogClient] = None) -> int:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    handler = _COMMANDS[args.command or "dashboard"]

    owned = client is None
    client = client or LogClient(args.api_url)
    try:
        return handler(DigestApp(client), args)
    finally:
        if owned:
            client.close()


if __name__ == "__main__":
    sys.exit(main())
