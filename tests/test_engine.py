"""
End-to-end tests for the Monitor Engine: items in, scored patterns out.
"""

import dataclasses

import pytest

from compoundwatch.annotations import MemoryStorage
from compoundwatch.config import settings
from compoundwatch.engine import IngestItem, MonitorEngine, build_catalog
from compoundwatch.errors import CatalogError, TranslationParityError
from compoundwatch.patterns import COMPOUND_PATTERNS, CompoundPattern
from compoundwatch.topics import TOPIC_CATALOG, Topic

TARIFF = IngestItem("New tariff schedule announced", "Reuters", "https://example.com/1")
CHINA = IngestItem("Beijing and Washington exchange warnings", "BBC News")
SUPPLY = IngestItem("Supply chain disruption deepens", "Springfield Gazette")
NOISE = IngestItem("Local bakery wins regional award", "Springfield Gazette")

CONFIG = dataclasses.replace(
    settings, WINDOW_CYCLES=3, MIN_STREAK=1, MIN_TOPIC_MENTIONS=1, RETENTION_CYCLES=6,
    MAX_SCORE=10.0,
    DEFAULT_LOCALE="en",
)


@pytest.fixture
def engine():
    return MonitorEngine(config=CONFIG, storage=MemoryStorage())


class TestEndToEnd:
    def test_all_three_topics_activate_trade_war(self, engine):
        report = engine.run_cycle([TARIFF, CHINA, SUPPLY])
        ids = [p.pattern_id for p in report.patterns]
        assert ids == ["trade-war-escalation"]
        assert report.patterns[0].matched_count == 3

    def test_single_topic_does_not_activate(self, engine):
        report = engine.run_cycle([TARIFF, NOISE])
        assert report.matched_topics == ["tariffs"]
        assert report.patterns == []

    def test_score_uses_source_weights(self, engine):
        report = engine.run_cycle([TARIFF, CHINA, SUPPLY])
        pattern = report.patterns[0]
        # Reuters 1.5, BBC 1.2, unknown 1.0
        assert pattern.mean_source_weight == pytest.approx(1.233, abs=1e-3)
        assert pattern.score == pytest.approx(18.5, abs=1e-3)
        assert pattern.level == "high"

    def test_topics_accumulate_across_cycles(self, engine):
        engine.run_cycle([TARIFF])
        report = engine.run_cycle([CHINA])
        assert [p.pattern_id for p in report.patterns] == ["trade-war-escalation"]
        assert report.patterns[0].matched_topics == ("tariffs", "china-tensions")

    def test_topics_leave_window(self, engine):
        engine.run_cycle([TARIFF])
        engine.run_cycle([NOISE])
        engine.run_cycle([NOISE])
        report = engine.run_cycle([CHINA])
        assert report.patterns == []


class TestCycleReport:
    def test_cycle_numbers_increment(self, engine):
        assert engine.run_cycle([]).cycle == 1
        assert engine.run_cycle([]).cycle == 2

    def test_explicit_cycle(self, engine):
        assert engine.run_cycle([TARIFF], cycle=10).cycle == 10
        assert engine.run_cycle([TARIFF]).cycle == 11

    def test_topic_stats(self, engine):
        items = [TARIFF, IngestItem("Tariff retaliation looms", "AP")]
        stats = engine.run_cycle(items).topic_stats["tariffs"]
        assert stats.count == 2
        assert stats.weighted_count == pytest.approx(3.0)
        assert stats.sources == ["AP", "Reuters"]
        assert stats.samples[0]["link"] == "https://example.com/1"

    def test_samples_capped(self, engine):
        items = [IngestItem(f"tariff story {i}", "Reuters") for i in range(8)]
        stats = engine.run_cycle(items).topic_stats["tariffs"]
        assert stats.count == 8
        assert len(stats.samples) == 5

    def test_to_dict(self, engine):
        data = engine.run_cycle([TARIFF, CHINA]).to_dict()
        assert data["cycle"] == 1
        assert data["patterns"][0]["matched_count"] == 2
        assert "tariffs" in data["active_topics"]

    def test_idle_topics_expire(self, engine):
        engine.run_cycle([TARIFF])
        for _ in range(5):
            engine.run_cycle([])
        report = engine.run_cycle([])
        assert report.expired == ["tariffs"]
        assert "tariffs" not in engine.tracker


class TestLocalization:
    def test_portuguese_results(self, engine):
        report = engine.run_cycle([TARIFF, CHINA], locale="pt-BR")
        assert report.locale == "pt-BR"
        assert report.patterns[0].name == "Escalada da Guerra Comercial"

    def test_unknown_locale_uses_default(self, engine):
        report = engine.run_cycle([TARIFF, CHINA], locale="xx-XX")
        assert report.locale == "en"
        assert report.patterns[0].name == "Trade War Escalation"

    def test_manual_annotations_merged(self, engine):
        engine.annotations.append("en", "trade-war-escalation", "indicators", "port strike vote")
        report = engine.run_cycle([TARIFF, CHINA])
        assert report.patterns[0].narrative["indicators"][-1] == "port strike vote"


class TestSummary:
    def test_monitoring(self, engine):
        report = engine.run_cycle([TARIFF])
        assert engine.summary(report) == {"total_signals": 0, "status": "MONITORING"}

    def test_signals(self, engine):
        report = engine.run_cycle([TARIFF, CHINA])
        assert engine.summary(report) == {"total_signals": 1, "status": "1 SIGNALS"}

    def test_no_data(self, engine):
        report = engine.run_cycle([])
        assert engine.summary(report)["status"] == "NO DATA"


class TestMalformedTopic:
    def test_warnings_reported_not_raised(self):
        topics = list(TOPIC_CATALOG) + [Topic("broken", ("(oops",), "Test")]
        engine = MonitorEngine(
            build_catalog(topics=topics), config=CONFIG, storage=MemoryStorage()
        )
        report = engine.run_cycle([TARIFF, CHINA])
        assert [w.topic_id for w in report.warnings] == ["broken"]
        assert report.patterns[0].pattern_id == "trade-war-escalation"


class TestCatalog:
    def test_unknown_topic_is_fatal(self):
        bad = list(COMPOUND_PATTERNS) + [CompoundPattern(
            id="bad", topics=("tariffs", "nonexistent"), min_topics=2,
            name="Bad", prediction="", boost_factor=1.0,
        )]
        with pytest.raises(CatalogError, match="nonexistent"):
            build_catalog(patterns=bad)

    def test_bad_source_weight_is_fatal(self):
        with pytest.raises(CatalogError):
            build_catalog(source_weights={"reuters": -1.0})

    def test_translation_parity_is_fatal(self):
        with pytest.raises(TranslationParityError):
            build_catalog(translations={"pt-BR": {}})

    def test_replace_catalog(self, engine):
        smaller = build_catalog(
            patterns=[p for p in COMPOUND_PATTERNS if p.id != "trade-war-escalation"],
            translations={},
        )
        engine.replace_catalog(smaller)
        report = engine.run_cycle([TARIFF, CHINA, SUPPLY])
        assert report.patterns == []
        assert engine.catalog is smaller


class TestTopicSignals:
    def test_momentum_uses_previous_cycle(self, engine):
        engine.run_cycle([TARIFF])
        items = [IngestItem(f"tariff story {i}", "Reuters") for i in range(3)]
        report = engine.run_cycle(items)
        momentum = report.signals.momentum
        assert [s.topic_id for s in momentum] == ["tariffs"]
        assert (momentum[0].previous, momentum[0].delta) == (1, 2)

    def test_gap_resets_previous_count(self, engine):
        engine.run_cycle([TARIFF])
        engine.run_cycle([NOISE])
        items = [IngestItem(f"tariff story {i}", "Reuters") for i in range(2)]
        report = engine.run_cycle(items)
        assert report.signals.momentum[0].previous == 0

    def test_summary_counts_topic_signals(self, engine):
        items = [IngestItem(f"tariff story {i}", "Reuters") for i in range(3)]
        report = engine.run_cycle(items)
        # emerging (3 mentions), momentum (+3), predictive (9 + 3 + 15 = 27)
        assert report.patterns == []
        assert len(report.signals.emerging) == 1
        assert len(report.signals.momentum) == 1
        assert len(report.signals.predictive) == 1
        assert engine.summary(report) == {"total_signals": 3, "status": "3 SIGNALS"}

    def test_cross_source(self, engine):
        items = [
            IngestItem("Tariff retaliation looms", source)
            for source in ("AP", "BBC News", "Reuters", "Bloomberg")
        ]
        report = engine.run_cycle(items)
        assert report.signals.cross_source[0].source_count == 4
        assert report.signals.cross_source[0].level == "elevated"

    def test_in_report_dict(self, engine):
        items = [IngestItem(f"tariff story {i}", "Reuters") for i in range(3)]
        data = engine.run_cycle(items).to_dict()
        assert data["signals"]["emerging"][0]["topic_id"] == "tariffs"


class TestMinTopicMentions:
    @pytest.fixture
    def strict(self):
        config = dataclasses.replace(CONFIG, MIN_TOPIC_MENTIONS=2)
        return MonitorEngine(config=config, storage=MemoryStorage())

    def test_single_headlines_do_not_activate(self, strict):
        assert strict.run_cycle([TARIFF, CHINA]).patterns == []

    def test_repeated_headlines_activate(self, strict):
        report = strict.run_cycle([TARIFF, TARIFF, CHINA, CHINA])
        assert [p.pattern_id for p in report.patterns] == ["trade-war-escalation"]

    def test_mentions_accumulate_in_window(self, strict):
        strict.run_cycle([TARIFF, CHINA])
        report = strict.run_cycle([TARIFF, CHINA])
        assert [p.pattern_id for p in report.patterns] == ["trade-war-escalation"]


class TestWarnings:
    def test_warnings_not_repeated_per_item(self):
        topics = list(TOPIC_CATALOG) + [Topic("broken", ("(oops",), "Test")]
        engine = MonitorEngine(
            build_catalog(topics=topics), config=CONFIG, storage=MemoryStorage()
        )
        report = engine.run_cycle([TARIFF, CHINA, SUPPLY, NOISE])
        assert len(report.warnings) == 1

    def test_no_items_no_warnings(self):
        topics = list(TOPIC_CATALOG) + [Topic("broken", ("(oops",), "Test")]
        engine = MonitorEngine(
            build_catalog(topics=topics), config=CONFIG, storage=MemoryStorage()
        )
        assert engine.run_cycle([]).warnings == []
