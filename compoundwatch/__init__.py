"""
CompoundWatch — Compound Signal Detection for News Streams

Classifies text items against a curated topic catalog, tracks how long each
topic persists across refresh cycles, and reports which compound patterns
(several related topics active together) are firing, scored by source
credibility and pattern boost.

Public API:
  - MonitorEngine:       Runs refresh cycles, keeps tracker state
  - IngestItem:          One {text, source, link} item
  - build_catalog:       Validated bundle of topics, sources, patterns, locales
  - TopicMatcher:        Deterministic regex topic matching
  - CooccurrenceTracker: Per-topic streaks and source weight samples
  - CompoundEvaluator:   Activation and scoring of compound patterns
  - detect_signals:      Emerging, momentum, cross-source, predictive topic signals
  - Localizer:           Locale overlay for pattern display text
  - ManualAnnotationStore: Append-only operator narrative additions

Usage:
    from compoundwatch import MonitorEngine, IngestItem
    engine = MonitorEngine()
    report = engine.run_cycle([IngestItem("Tariff talks collapse", "Reuters")])
"""

__version__ = "1.0.0"

from compoundwatch.errors import CatalogError, TranslationParityError
from compoundwatch.topics import TOPIC_CATALOG, Topic, TopicMatcher, MatchResult, MatchWarning
from compoundwatch.sources import SOURCE_WEIGHTS, SourceCredibility, get_source_weight
from compoundwatch.patterns import COMPOUND_PATTERNS, CompoundPattern, Narrative, validate_catalog
from compoundwatch.tracker import CooccurrenceTracker, ActiveTopic
from compoundwatch.evaluator import CompoundEvaluator, ActivePatternResult
from compoundwatch.signals import TopicSignals, detect_signals
from compoundwatch.localization import Localizer, LocalizedPattern
from compoundwatch.annotations import (
    ManualAnnotationStore,
    MemoryStorage,
    SqliteStorage,
    NarrativeView,
)
from compoundwatch.engine import MonitorEngine, IngestItem, Catalog, CycleReport, build_catalog

__all__ = [
    "__version__",
    "CatalogError",
    "TranslationParityError",
    "TOPIC_CATALOG",
    "Topic",
    "TopicMatcher",
    "MatchResult",
    "MatchWarning",
    "SOURCE_WEIGHTS",
    "SourceCredibility",
    "get_source_weight",
    "COMPOUND_PATTERNS",
    "CompoundPattern",
    "Narrative",
    "validate_catalog",
    "CooccurrenceTracker",
    "ActiveTopic",
    "CompoundEvaluator",
    "ActivePatternResult",
    "TopicSignals",
    "detect_signals",
    "Localizer",
    "LocalizedPattern",
    "ManualAnnotationStore",
    "MemoryStorage",
    "SqliteStorage",
    "NarrativeView",
    "MonitorEngine",
    "IngestItem",
    "Catalog",
    "CycleReport",
    "build_catalog",
]
