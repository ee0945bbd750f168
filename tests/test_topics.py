"""
Tests for the Topic Catalog and Topic Matcher.
"""

import pytest

from compoundwatch.errors import CatalogError
from compoundwatch.topics import TOPIC_CATALOG, Topic, TopicMatcher, validate_topics


@pytest.fixture(scope="module")
def matcher():
    return TopicMatcher()


class TestCatalog:
    def test_catalog_size(self):
        assert len(TOPIC_CATALOG) == 42

    def test_ids_unique(self):
        ids = [t.id for t in TOPIC_CATALOG]
        assert len(ids) == len(set(ids))

    def test_every_rule_compiles(self, matcher):
        assert matcher.warnings == ()
        assert all(t["enabled"] for t in matcher.get_topics())

    def test_duplicate_id_rejected(self):
        with pytest.raises(CatalogError, match="Duplicate topic id 'x'"):
            validate_topics([Topic("x", ("a",), "C"), Topic("x", ("b",), "C")])

    def test_topic_without_rules_rejected(self):
        with pytest.raises(CatalogError, match="no patterns"):
            validate_topics([Topic("x", (), "C")])


class TestMatching:
    """A topic matches when any one of its rules matches, case-insensitively."""

    def test_single_topic(self, matcher):
        result = matcher.match("New tariff schedule announced")
        assert result.topic_ids == frozenset({"tariffs"})

    def test_case_insensitive(self, matcher):
        assert "tariffs" in matcher.match("TARIFF WAR LOOMS").topic_ids

    def test_multiple_topics_in_one_item(self, matcher):
        result = matcher.match("Supply chain fears grow as new tariff takes effect")
        assert {"tariffs", "supply-chain"} <= result.topic_ids

    def test_word_boundary_rule(self, matcher):
        assert "oil-opec" in matcher.match("OPEC meets in Vienna").topic_ids
        assert "oil-opec" not in matcher.match("The shop reopened today").topic_ids

    def test_no_match(self, matcher):
        assert matcher.match("Local bakery wins regional award").topic_ids == frozenset()

    def test_empty_and_none(self, matcher):
        assert matcher.match("").topic_ids == frozenset()
        assert matcher.match(None).topic_ids == frozenset()

    def test_idempotent(self, matcher):
        text = "Beijing and Washington trade accusations over new tariff"
        assert matcher.match(text) == matcher.match(text)


class TestMalformedRules:
    """A topic with a broken rule is skipped; the rest keep working."""

    @pytest.fixture
    def broken(self):
        return TopicMatcher([
            Topic("good", (r"tariff",), "Economy"),
            Topic("bad", (r"fine", r"(unclosed"), "Economy"),
        ])

    def test_other_topics_still_match(self, broken):
        assert broken.match("tariff news").topic_ids == frozenset({"good"})

    def test_broken_topic_never_matches(self, broken):
        assert "bad" not in broken.match("fine print").topic_ids

    def test_warning_on_every_call(self, broken):
        for _ in range(2):
            result = broken.match("anything")
            assert len(result.warnings) == 1
            assert result.warnings[0].topic_id == "bad"
            assert result.warnings[0].pattern == "(unclosed"

    def test_listed_as_disabled(self, broken):
        enabled = {t["id"]: t["enabled"] for t in broken.get_topics()}
        assert enabled == {"good": True, "bad": False}
