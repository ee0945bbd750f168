#!/usr/bin/env python3
"""
run_replay.py — Replay recorded refresh cycles through the engine.

Usage:
    python run_replay.py replay/sample_cycles.jsonl          # Text report
    python run_replay.py cycles.json --locale pt-BR          # Localized names
    python run_replay.py cycles.jsonl --window 5             # Custom window
    python run_replay.py cycles.jsonl --min-mentions 2       # Ignore one-off headlines
    python run_replay.py cycles.jsonl --json                 # JSON only (for CI)
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from pathlib import Path

from compoundwatch.annotations import MemoryStorage
from compoundwatch.config import settings
from compoundwatch.engine import MonitorEngine
from compoundwatch.errors import CatalogError
from compoundwatch.logging import setup_logging
from compoundwatch.replay import format_report, load_cycles, run_replay


def main():
    parser = argparse.ArgumentParser(description="CompoundWatch Replay Runner")
    parser.add_argument("path", help="JSON or JSONL file of recorded cycles")
    parser.add_argument(
        "--locale",
        default=None,
        help="Display locale, overrides per-cycle locale (default: per cycle)",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=settings.WINDOW_CYCLES,
        help=f"Active window in cycles (default: {settings.WINDOW_CYCLES})",
    )
    parser.add_argument(
        "--min-streak",
        type=int,
        default=settings.MIN_STREAK,
        help=f"Streak a topic needs to count (default: {settings.MIN_STREAK})",
    )
    parser.add_argument(
        "--min-mentions",
        type=int,
        default=settings.MIN_TOPIC_MENTIONS,
        help=f"In-window mentions a topic needs to count (default: {settings.MIN_TOPIC_MENTIONS})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON only (for CI/automation)",
    )
    args = parser.parse_args()

    path = Path(args.path)
    if not path.exists():
        print(f"Error: Replay file not found: {path}")
        sys.exit(1)

    try:
        cycles = load_cycles(path)
    except (ValueError, json.JSONDecodeError) as e:
        print(f"Error: Could not parse {path}: {e}")
        sys.exit(1)

    if not args.json:
        setup_logging()

    config = dataclasses.replace(
        settings,
        WINDOW_CYCLES=args.window,
        MIN_STREAK=args.min_streak,
        MIN_TOPIC_MENTIONS=args.min_mentions,
    )
    try:
        engine = MonitorEngine(config=config, storage=MemoryStorage())
    except CatalogError as e:
        print(f"Error: Invalid catalog: {e}")
        sys.exit(2)

    reports = run_replay(cycles, engine, locale=args.locale)

    if args.json:
        print(json.dumps(
            [dict(r.to_dict(), summary=engine.summary(r)) for r in reports],
            indent=2,
            ensure_ascii=False,
        ))
    else:
        print(format_report(reports, engine))

    sys.exit(0)


if __name__ == "__main__":
    main()
