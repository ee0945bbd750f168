"""
Tests for the Compound Pattern Catalog and its load-time validation.
"""

import pytest

from compoundwatch.errors import CatalogError
from compoundwatch.patterns import (
    COMPOUND_PATTERNS,
    NARRATIVE_CATEGORIES,
    CompoundPattern,
    Narrative,
    validate_catalog,
)
from compoundwatch.topics import TOPIC_CATALOG

TOPIC_IDS = {t.id for t in TOPIC_CATALOG}


def _pattern(**overrides):
    fields = dict(
        id="p", topics=("a", "b", "c"), min_topics=2,
        name="P", prediction="", boost_factor=1.5,
    )
    fields.update(overrides)
    return CompoundPattern(**fields)


class TestBuiltinCatalog:
    def test_catalog_size(self):
        assert len(COMPOUND_PATTERNS) == 36

    def test_builtin_catalog_is_valid(self):
        by_id = validate_catalog(COMPOUND_PATTERNS, TOPIC_IDS)
        assert list(by_id) == [p.id for p in COMPOUND_PATTERNS]

    def test_trade_war_definition(self):
        p = validate_catalog(COMPOUND_PATTERNS, TOPIC_IDS)["trade-war-escalation"]
        assert p.topics == ("tariffs", "china-tensions", "supply-chain")
        assert p.min_topics == 2
        assert p.boost_factor == 1.5

    def test_every_pattern_has_full_narrative(self):
        for p in COMPOUND_PATTERNS:
            for category in NARRATIVE_CATEGORIES:
                assert p.narrative.get(category), f"{p.id} has empty {category}"


class TestNarrative:
    def test_get_unknown_category(self):
        with pytest.raises(KeyError):
            Narrative().get("footnotes")

    def test_as_dict_order(self):
        assert list(Narrative().as_dict()) == list(NARRATIVE_CATEGORIES)


class TestValidation:
    """Patterns that are malformed or can never fire are rejected."""

    known = {"a", "b", "c"}

    def test_valid(self):
        assert "p" in validate_catalog([_pattern()], self.known)

    def test_duplicate_id(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            validate_catalog([_pattern(), _pattern()], self.known)

    def test_single_topic(self):
        with pytest.raises(CatalogError, match="at least 2 topics"):
            validate_catalog([_pattern(topics=("a",), min_topics=1)], self.known)

    def test_repeated_topic(self):
        with pytest.raises(CatalogError, match="more than once"):
            validate_catalog([_pattern(topics=("a", "a", "b"))], self.known)

    def test_unknown_topic(self):
        with pytest.raises(CatalogError, match="unknown topic.*zz"):
            validate_catalog([_pattern(topics=("a", "zz"))], self.known)

    def test_threshold_too_high(self):
        with pytest.raises(CatalogError, match="min_topics=4"):
            validate_catalog([_pattern(min_topics=4)], self.known)

    def test_threshold_too_low(self):
        with pytest.raises(CatalogError, match="min_topics=1"):
            validate_catalog([_pattern(min_topics=1)], self.known)

    def test_non_positive_boost(self):
        with pytest.raises(CatalogError, match="boost_factor"):
            validate_catalog([_pattern(boost_factor=0)], self.known)

    def test_error_names_pattern(self):
        with pytest.raises(CatalogError, match="'broken'"):
            validate_catalog([_pattern(id="broken", boost_factor=-1)], self.known)
