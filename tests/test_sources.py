"""
Tests for source credibility weighting.
"""

import pytest

from compoundwatch.errors import CatalogError
from compoundwatch.sources import (
    DEFAULT_WEIGHT,
    SourceCredibility,
    get_source_weight,
    normalize_source,
)


class TestNormalize:
    def test_lowercase_and_strip(self):
        assert normalize_source("AP News-Wire 2.0") == "apnewswire"

    def test_empty(self):
        assert normalize_source(None) == ""
        assert normalize_source("") == ""


class TestBuiltinTable:
    def test_wire_service(self):
        assert get_source_weight("Reuters") == 1.5

    def test_major_outlet(self):
        assert get_source_weight("BBC News") == 1.2

    def test_tabloid(self):
        assert get_source_weight("New York Post (nypost.com)") == 0.7

    def test_fringe(self):
        assert get_source_weight("ZeroHedge") == 0.4

    def test_unknown_source_default(self):
        assert get_source_weight("Springfield Gazette") == DEFAULT_WEIGHT

    def test_missing_source_default(self):
        assert get_source_weight(None) == DEFAULT_WEIGHT
        assert get_source_weight("") == DEFAULT_WEIGHT


class TestOrdering:
    """First declared key that is a substring wins."""

    def test_short_key_declared_first_wins(self):
        table = SourceCredibility({"ap": 1.5, "apnews": 1.2})
        assert table.weight("AP News Wire") == 1.5

    def test_reversed_declaration_order(self):
        table = SourceCredibility({"apnews": 1.2, "ap": 1.5})
        assert table.weight("AP News Wire") == 1.2

    def test_custom_default(self):
        table = SourceCredibility({"ap": 1.5}, default=0.9)
        assert table.weight("unknown") == 0.9


class TestValidation:
    def test_zero_weight_rejected(self):
        with pytest.raises(CatalogError, match="must be > 0"):
            SourceCredibility({"ap": 0.0})

    def test_negative_weight_rejected(self):
        with pytest.raises(CatalogError):
            SourceCredibility({"ap": -1.0})

    def test_non_normalized_key_rejected(self):
        with pytest.raises(CatalogError, match="lowercase"):
            SourceCredibility({"AP News": 1.5})

    def test_bad_default_rejected(self):
        with pytest.raises(CatalogError):
            SourceCredibility({"ap": 1.5}, default=0)
