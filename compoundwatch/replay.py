"""
Replay Runner — Feed Recorded Cycles Through the Engine

Loads a file of recorded refresh cycles and runs them, in order, through a
fresh MonitorEngine. Useful for tuning the catalog against real feeds.

Accepted file formats:
  - JSON:  [{"items": [{"text", "source", "link"}, ...], "locale": "en"}, ...]
  - JSONL: one cycle object per line (blank lines ignored)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from compoundwatch.engine import CycleReport, IngestItem, MonitorEngine


@dataclass
class ReplayCycle:
    items: list[IngestItem]
    locale: Optional[str] = None


def _parse_cycle(obj, where: str) -> ReplayCycle:
    if isinstance(obj, list):
        obj = {"items": obj}
    if not isinstance(obj, dict) or not isinstance(obj.get("items"), list):
        raise ValueError(f"{where}: expected an object with an 'items' list")
    items = []
    for i, raw in enumerate(obj["items"]):
        if not isinstance(raw, dict) or not isinstance(raw.get("text"), str):
            raise ValueError(f"{where}, item {i}: expected an object with a 'text' string")
        items.append(IngestItem(raw["text"], raw.get("source"), raw.get("link")))
    return ReplayCycle(items=items, locale=obj.get("locale"))


def load_cycles(path: Path) -> list[ReplayCycle]:
    """Parse a JSON or JSONL replay file."""
    content = path.read_text(encoding="utf-8")
    stripped = content.lstrip()
    if stripped.startswith("["):
        data = json.loads(content)
        return [_parse_cycle(obj, f"cycle {n}") for n, obj in enumerate(data, 1)]

    cycles = []
    for lineno, line in enumerate(content.splitlines(), 1):
        if not line.strip():
            continue
        cycles.append(_parse_cycle(json.loads(line), f"line {lineno}"))
    return cycles


def run_replay(
    cycles: list[ReplayCycle],
    engine: MonitorEngine,
    locale: Optional[str] = None,
) -> list[CycleReport]:
    return [engine.run_cycle(c.items, locale=locale or c.locale) for c in cycles]


def format_report(reports: list[CycleReport], engine: MonitorEngine) -> str:
    """Format replay results as a human-readable report."""
    lines = [
        "=" * 60,
        "COMPOUNDWATCH REPLAY REPORT",
        "=" * 60,
        "",
        f"Cycles replayed: {len(reports)}",
        f"Window: {engine.config.WINDOW_CYCLES} cycles, "
        f"min streak: {engine.config.MIN_STREAK}, "
        f"min mentions: {engine.config.MIN_TOPIC_MENTIONS}",
        "",
    ]

    for report in reports:
        status = engine.summary(report)["status"]
        lines.append(
            f"--- CYCLE {report.cycle} ({report.items_processed} items, {status}) ---"
        )
        if report.matched_topics:
            lines.append(f"Topics: {', '.join(report.matched_topics)}")
        for p in report.patterns:
            lines.append(
                f"  [{p.level.upper():<8}] {p.name:<36} {p.score:>7.3f}  "
                f"({p.matched_count}/{len(p.topics)} topics, "
                f"source weight {p.mean_source_weight:.2f})"
            )
        signals = report.signals
        for s in signals.emerging:
            lines.append(f"  emerging     {s.name} x{s.count} ({s.level})")
        for s in signals.momentum:
            lines.append(f"  momentum     {s.name} {s.delta:+d} ({s.momentum})")
        for s in signals.cross_source:
            lines.append(f"  cross-source {s.name} in {s.source_count} sources ({s.level})")
        for s in signals.predictive:
            lines.append(f"  predictive   {s.name} {s.confidence}%: {s.prediction}")
        for w in report.warnings:
            lines.append(f"  ! topic '{w.topic_id}' skipped: {w.error}")
        if report.expired:
            lines.append(f"  Expired: {', '.join(report.expired)}")
        lines.append("")

    lines.append("=" * 60)
    return "\n".join(lines)
