"""
Tests for compound pattern activation and scoring.
"""

import pytest

from compoundwatch.evaluator import (
    CompoundEvaluator,
    calculate_pattern_score,
    level_for,
)
from compoundwatch.patterns import COMPOUND_PATTERNS, CompoundPattern
from compoundwatch.tracker import ActiveTopic


def _active(*topic_ids, streak=1, weights=(1.0,)):
    return {
        t: ActiveTopic(t, first_seen=1, last_seen=1, streak=streak, mentions=len(weights),
                       weights=tuple(weights))
        for t in topic_ids
    }


TRADE_WAR = CompoundPattern(
    id="trade-war-escalation",
    topics=("tariffs", "china-tensions", "supply-chain"),
    min_topics=2,
    name="Trade War Escalation",
    prediction="",
    boost_factor=1.5,
)


class TestActivation:
    def test_all_three_topics(self):
        results = CompoundEvaluator([TRADE_WAR]).evaluate(
            _active("tariffs", "china-tensions", "supply-chain")
        )
        assert len(results) == 1
        assert results[0].pattern_id == "trade-war-escalation"
        assert results[0].matched_count == 3

    def test_below_threshold(self):
        results = CompoundEvaluator([TRADE_WAR]).evaluate(_active("tariffs"))
        assert results == []

    def test_exactly_at_threshold(self):
        results = CompoundEvaluator([TRADE_WAR]).evaluate(_active("tariffs", "supply-chain"))
        assert results[0].matched_topics == ("tariffs", "supply-chain")

    def test_unrelated_topics_ignored(self):
        results = CompoundEvaluator([TRADE_WAR]).evaluate(
            _active("tariffs", "inflation", "climate")
        )
        assert results == []

    def test_min_streak_filters_topics(self):
        active = _active("tariffs", "china-tensions", streak=1)
        assert CompoundEvaluator([TRADE_WAR], min_streak=2).evaluate(active) == []
        assert CompoundEvaluator([TRADE_WAR], min_streak=1).evaluate(active)

    def test_min_mentions_filters_single_headlines(self):
        once = _active("tariffs", "china-tensions", weights=(1.0,))
        twice = _active("tariffs", "china-tensions", weights=(1.0, 1.2))
        assert CompoundEvaluator([TRADE_WAR], min_mentions=2).evaluate(once) == []
        assert CompoundEvaluator([TRADE_WAR], min_mentions=2).evaluate(twice)

    def test_min_mentions_is_per_topic(self):
        active = {
            **_active("tariffs", weights=(1.0, 1.0)),
            **_active("china-tensions", weights=(1.0,)),
            **_active("supply-chain", weights=(1.0, 1.0, 1.0)),
        }
        results = CompoundEvaluator([TRADE_WAR], min_mentions=2).evaluate(active)
        assert results[0].matched_topics == ("tariffs", "supply-chain")

    def test_identical_topic_sets_evaluated_independently(self):
        twin = CompoundPattern(
            id="trade-war-twin", topics=TRADE_WAR.topics, min_topics=3,
            name="Twin", prediction="", boost_factor=1.0,
        )
        evaluator = CompoundEvaluator([TRADE_WAR, twin])
        two = evaluator.evaluate(_active("tariffs", "china-tensions"))
        three = evaluator.evaluate(_active("tariffs", "china-tensions", "supply-chain"))
        assert [r.pattern_id for r in two] == ["trade-war-escalation"]
        assert {r.pattern_id for r in three} == {"trade-war-escalation", "trade-war-twin"}

    def test_builtin_catalog_single_pattern(self):
        results = CompoundEvaluator(COMPOUND_PATTERNS).evaluate(
            _active("tariffs", "china-tensions", "supply-chain")
        )
        assert [r.pattern_id for r in results] == ["trade-war-escalation"]


class TestScoring:
    def test_full_match_score(self):
        results = CompoundEvaluator([TRADE_WAR]).evaluate(
            _active("tariffs", "china-tensions", "supply-chain")
        )
        assert results[0].score == pytest.approx(15.0)
        assert results[0].level == "high"

    def test_partial_match_score(self):
        score, breakdown = calculate_pattern_score(
            TRADE_WAR, {"tariffs": 1.0, "china-tensions": 1.0}
        )
        assert score == pytest.approx(10.0)
        assert breakdown["matched"] == 2
        assert breakdown["total_topics"] == 3

    def test_breakdown_lists_topic_weights(self):
        score, breakdown = calculate_pattern_score(
            TRADE_WAR, {"tariffs": 1.5, "china-tensions": 0.5}
        )
        assert breakdown["topic_weights"] == {"tariffs": 1.5, "china-tensions": 0.5}
        assert breakdown["mean_source_weight"] == 1.0
        assert score == pytest.approx(10.0)

    def test_source_weight_scales_score(self):
        credible = CompoundEvaluator([TRADE_WAR]).evaluate(
            _active("tariffs", "china-tensions", weights=(1.5,))
        )
        fringe = CompoundEvaluator([TRADE_WAR]).evaluate(
            _active("tariffs", "china-tensions", weights=(0.4,))
        )
        assert credible[0].score > fringe[0].score
        assert credible[0].mean_source_weight == 1.5

    def test_monotonic_in_matched_count(self):
        evaluator = CompoundEvaluator([TRADE_WAR])
        two = evaluator.evaluate(_active("tariffs", "china-tensions"))[0].score
        three = evaluator.evaluate(_active("tariffs", "china-tensions", "supply-chain"))[0].score
        assert three >= two

    def test_low_weight_topic_never_lowers_score(self):
        evaluator = CompoundEvaluator([TRADE_WAR])
        strong = _active("tariffs", "china-tensions", weights=(1.5,))
        two = evaluator.evaluate(strong)[0].score
        with_weak = {**strong, **_active("supply-chain", weights=(0.4,) * 10)}
        three = evaluator.evaluate(with_weak)[0].score
        assert two == pytest.approx(15.0)
        assert three == pytest.approx(17.0)
        assert three >= two

    def test_topic_sample_count_does_not_dominate(self):
        active = {
            **_active("tariffs", weights=(1.5,)),
            **_active("china-tensions", weights=(0.5,) * 9),
        }
        result = CompoundEvaluator([TRADE_WAR]).evaluate(active)[0]
        assert result.mean_source_weight == 1.0

    def test_invalid_max_score(self):
        with pytest.raises(ValueError):
            CompoundEvaluator([TRADE_WAR], max_score=0)


class TestLevels:
    def test_thresholds(self):
        assert level_for(25.0) == "critical"
        assert level_for(20.0) == "critical"
        assert level_for(19.999) == "high"
        assert level_for(12.0) == "high"
        assert level_for(11.9) == "elevated"


class TestOrdering:
    def test_sorted_by_score_then_id(self):
        low = CompoundPattern(
            id="a-low", topics=("tariffs", "inflation"), min_topics=2,
            name="Low", prediction="", boost_factor=1.0,
        )
        tie = CompoundPattern(
            id="b-tie", topics=("tariffs", "inflation"), min_topics=2,
            name="Tie", prediction="", boost_factor=1.0,
        )
        high = CompoundPattern(
            id="c-high", topics=("tariffs", "inflation"), min_topics=2,
            name="High", prediction="", boost_factor=2.0,
        )
        results = CompoundEvaluator([tie, high, low]).evaluate(_active("tariffs", "inflation"))
        assert [r.pattern_id for r in results] == ["c-high", "a-low", "b-tie"]
