"""
Monitor Engine — Cycle Orchestrator

Wires the pieces together for one refresh cycle:

    items -> source weight + TopicMatcher -> CooccurrenceTracker.observe
          -> currently_active(window) -> CompoundEvaluator
          -> Localizer + ManualAnnotationStore decorate the results

    TopicStats + previous-cycle counts -> detect_signals (emerging,
          momentum, cross-source and predictive topic signals)

The static configuration (topics, source table, patterns, translations) is
bundled into a Catalog and fully validated before it is used. A broken
catalog is fatal at load time; nothing is half-loaded. replace_catalog()
swaps the whole bundle with one reference assignment.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Optional, Sequence

from compoundwatch.annotations import (
    ManualAnnotationStore,
    MemoryStorage,
    NarrativeView,
    SqliteStorage,
    StoragePort,
)
from compoundwatch.config import Settings, settings as default_settings
from compoundwatch.evaluator import ActivePatternResult, CompoundEvaluator
from compoundwatch.locales import BUILTIN_TRANSLATIONS, CANONICAL_LOCALE
from compoundwatch.localization import Localizer
from compoundwatch.logging import get_logger
from compoundwatch.patterns import (
    COMPOUND_PATTERNS,
    CompoundPattern,
    PatternTranslation,
    validate_catalog,
)
from compoundwatch.signals import TopicActivity, TopicSignals, detect_signals
from compoundwatch.sources import DEFAULT_WEIGHT, SOURCE_WEIGHTS, SourceCredibility
from compoundwatch.topics import TOPIC_CATALOG, MatchWarning, Topic, TopicMatcher
from compoundwatch.tracker import ActiveTopic, CooccurrenceTracker

logger = get_logger("engine")

MAX_TOPIC_SAMPLES = 5


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class IngestItem:
    """One text item from the ingestion pipeline."""
    text: str
    source: Optional[str] = None
    link: Optional[str] = None


@dataclass
class TopicStats:
    """Per-cycle aggregate for one matched topic."""
    count: int = 0
    weighted_count: float = 0.0
    sources: list[str] = field(default_factory=list)
    samples: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "weighted_count": round(self.weighted_count, 3),
            "sources": self.sources,
            "samples": self.samples,
        }


@dataclass
class CycleReport:
    cycle: int
    items_processed: int
    matched_topics: list[str]
    topic_stats: dict[str, TopicStats]
    active_topics: dict[str, ActiveTopic]
    patterns: list[ActivePatternResult]
    warnings: list[MatchWarning]
    expired: list[str]
    locale: str = CANONICAL_LOCALE
    signals: TopicSignals = field(default_factory=TopicSignals)

    def to_dict(self) -> dict:
        return {
            "cycle": self.cycle,
            "locale": self.locale,
            "items_processed": self.items_processed,
            "matched_topics": self.matched_topics,
            "topic_stats": {k: v.to_dict() for k, v in self.topic_stats.items()},
            "active_topics": {
                k: {
                    "first_seen": t.first_seen,
                    "last_seen": t.last_seen,
                    "streak": t.streak,
                    "mentions": t.mentions,
                    "mean_weight": round(t.mean_weight, 3),
                }
                for k, t in self.active_topics.items()
            },
            "patterns": [p.to_dict() for p in self.patterns],
            "warnings": [
                {"topic_id": w.topic_id, "pattern": w.pattern, "error": w.error}
                for w in self.warnings
            ],
            "expired": self.expired,
            "signals": self.signals.to_dict(),
        }


@dataclass(frozen=True)
class Catalog:
    """Validated bundle of all static configuration."""
    topics: tuple[Topic, ...]
    matcher: TopicMatcher
    sources: SourceCredibility
    patterns: tuple[CompoundPattern, ...]
    localizer: Localizer


def build_catalog(
    topics: Sequence[Topic] = TOPIC_CATALOG,
    patterns: Sequence[CompoundPattern] = COMPOUND_PATTERNS,
    source_weights: Mapping[str, float] = SOURCE_WEIGHTS,
    translations: Mapping[str, Mapping[str, PatternTranslation]] = BUILTIN_TRANSLATIONS,
    default_weight: float = DEFAULT_WEIGHT,
) -> Catalog:
    """
    Build and fully validate a Catalog.

    Raises:
        CatalogError: unknown topic reference, bad threshold or boost,
            duplicate ids, non-positive source weight.
        TranslationParityError: a translation table out of parity with
            the canonical patterns.
    """
    matcher = TopicMatcher(topics)
    validate_catalog(patterns, set(matcher.topics))
    sources = SourceCredibility(source_weights, default_weight)
    localizer = Localizer(patterns, translations)
    localizer.validate()
    return Catalog(
        topics=tuple(topics),
        matcher=matcher,
        sources=sources,
        patterns=tuple(patterns),
        localizer=localizer,
    )


def default_storage(config: Settings) -> StoragePort:
    if config.STORAGE_BACKEND == "memory":
        return MemoryStorage()
    return SqliteStorage(config.STORAGE_PATH)


# ============================================================
# THE ENGINE
# ============================================================

class MonitorEngine:
    """Runs refresh cycles against a catalog and keeps tracker state between them."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        config: Settings = default_settings,
        storage: Optional[StoragePort] = None,
    ):
        self.config = config
        self._catalog = catalog or build_catalog()
        self.tracker = CooccurrenceTracker(retention_cycles=config.RETENTION_CYCLES)
        self.annotations = ManualAnnotationStore(
            storage if storage is not None else default_storage(config),
            self._catalog.localizer,
            config.STORAGE_KEY,
        )
        self._cycle = 0

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def current_cycle(self) -> int:
        return self._cycle

    def replace_catalog(self, catalog: Catalog) -> None:
        """Swap in a new catalog. Readers see either the old or the new one."""
        catalog.localizer.validate()
        validate_catalog(catalog.patterns, set(catalog.matcher.topics))
        self._catalog = catalog
        self.annotations.localizer = catalog.localizer
        logger.info(
            "Catalog replaced",
            extra={"items": len(catalog.patterns)},
        )

    def run_cycle(
        self,
        items: Iterable[IngestItem],
        cycle: Optional[int] = None,
        locale: Optional[str] = None,
    ) -> CycleReport:
        start = time.monotonic()
        catalog = self._catalog
        cycle = self._cycle + 1 if cycle is None else cycle
        self._cycle = max(self._cycle, cycle)
        locale = locale if catalog.localizer.supports(locale) else self.config.DEFAULT_LOCALE

        stats: dict[str, TopicStats] = {}
        warnings: dict[MatchWarning, None] = {}
        observations: list[tuple[str, float]] = []
        processed = 0

        for item in items:
            processed += 1
            weight = catalog.sources.weight(item.source)
            result = catalog.matcher.match(item.text)
            warnings.update(dict.fromkeys(result.warnings))
            for topic_id in sorted(result.topic_ids):
                observations.append((topic_id, weight))
                entry = stats.setdefault(topic_id, TopicStats())
                entry.count += 1
                entry.weighted_count += weight
                if item.source and item.source not in entry.sources:
                    entry.sources.append(item.source)
                if len(entry.samples) < MAX_TOPIC_SAMPLES:
                    entry.samples.append(
                        {"text": item.text, "source": item.source, "link": item.link}
                    )
        for entry in stats.values():
            entry.sources.sort()

        # History must be read before this cycle's mentions are recorded
        signals = detect_signals(self._activities(catalog, stats, cycle))
        for topic_id, weight in observations:
            self.tracker.observe(topic_id, cycle, weight)

        active = self.tracker.currently_active(self.config.WINDOW_CYCLES, cycle)
        evaluator = CompoundEvaluator(
            catalog.patterns,
            max_score=self.config.MAX_SCORE,
            min_streak=self.config.MIN_STREAK,
            min_mentions=self.config.MIN_TOPIC_MENTIONS,
        )
        manual = self.annotations.additions(locale)
        patterns = [self._decorate(r, locale, manual) for r in evaluator.evaluate(active)]
        expired = self.tracker.expire(cycle, self.config.RETENTION_CYCLES)

        for w in warnings:
            logger.warning(
                f"Topic '{w.topic_id}' skipped: malformed pattern {w.pattern!r}",
                extra={"cycle": cycle, "topic_id": w.topic_id, "error": w.error},
            )

        report = CycleReport(
            cycle=cycle,
            items_processed=processed,
            matched_topics=sorted(stats),
            topic_stats=stats,
            active_topics=active,
            patterns=patterns,
            warnings=list(warnings),
            expired=expired,
            locale=locale,
            signals=signals,
        )
        logger.info(
            "Cycle complete",
            extra={
                "cycle": cycle,
                "items": processed,
                "active_patterns": len(patterns),
                "topic_signals": signals.total,
                "warnings_count": len(warnings),
                "duration_ms": round((time.monotonic() - start) * 1000, 1),
            },
        )
        return report

    def _activities(
        self,
        catalog: Catalog,
        stats: Mapping[str, TopicStats],
        cycle: int,
    ) -> list[TopicActivity]:
        topics = catalog.matcher.topics
        return [
            TopicActivity(
                topic=topics[topic_id],
                count=entry.count,
                weighted_count=entry.weighted_count,
                sources=tuple(entry.sources),
                previous_count=self.tracker.mentions_at(topic_id, cycle - 1),
                count_before_previous=self.tracker.mentions_at(topic_id, cycle - 2),
            )
            for topic_id, entry in sorted(stats.items())
        ]

    def _decorate(
        self,
        result: ActivePatternResult,
        locale: str,
        manual: Mapping[str, dict[str, list[str]]],
    ) -> ActivePatternResult:
        localizer = self._catalog.localizer
        localized = localizer.localize(localizer.get_pattern(result.pattern_id), locale)
        view = NarrativeView(
            result.pattern_id, localized.narrative, manual.get(result.pattern_id, {})
        )
        return replace(
            result,
            name=localized.name,
            prediction=localized.prediction,
            narrative=view.as_dict(),
        )

    def summary(self, report: CycleReport) -> dict:
        """
        Headline status for a dashboard badge.

        Counts compound patterns plus emerging, momentum and predictive
        topic signals.
        """
        total = len(report.patterns) + report.signals.total
        if report.items_processed == 0 and not report.active_topics:
            status = "NO DATA"
        elif total:
            status = f"{total} SIGNALS"
        else:
            status = "MONITORING"
        return {"total_signals": total, "status": status}

    def reset(self) -> None:
        self.tracker.reset()
        self._cycle = 0
