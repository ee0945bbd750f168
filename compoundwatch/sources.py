"""
Source Credibility — Weighted Sources

Maps a free-text source name ("Reuters", "AP News Wire", "zerohedge.com")
to a credibility multiplier. The multiplier scales a compound pattern's
score; it never excludes a source. Unlisted sources weigh 1.0.

Lookup is first-match-wins over the declaration order below, so a short
key declared early ("ap") shadows longer keys declared later ("apnews").
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

from compoundwatch.errors import CatalogError

DEFAULT_WEIGHT = 1.0

# Declaration order is lookup order.
SOURCE_WEIGHTS: dict[str, float] = {
    # Tier 1: Major wire services
    "reuters": 1.5,
    "ap": 1.5,
    "afp": 1.5,

    # Tier 2: Major outlets
    "bbc": 1.2,
    "nytimes": 1.2,
    "wsj": 1.2,
    "wapo": 1.2,
    "guardian": 1.2,
    "cnn": 1.2,
    "ft": 1.2,
    "economist": 1.2,

    # Tier 3: Standard outlets fall through to DEFAULT_WEIGHT

    # Tier 4: Partisan / tabloid
    "breitbart": 0.7,
    "dailymail": 0.7,
    "nypost": 0.7,

    # Tier 5: Fringe
    "zerohedge": 0.4,
    "infowars": 0.4,
    "naturalnews": 0.4,
}

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize_source(source: Optional[str]) -> str:
    """Lowercase and strip everything that is not a-z."""
    if not source:
        return ""
    return _NON_ALPHA.sub("", source.lower())


class SourceCredibility:
    """Resolves source names to weights using an ordered key table."""

    def __init__(
        self,
        weights: Mapping[str, float] = SOURCE_WEIGHTS,
        default: float = DEFAULT_WEIGHT,
    ):
        if default <= 0:
            raise CatalogError(f"Default source weight must be > 0, got {default}")
        for key, weight in weights.items():
            if weight <= 0:
                raise CatalogError(f"Source weight for '{key}' must be > 0, got {weight}")
            if not key or normalize_source(key) != key:
                raise CatalogError(
                    f"Source key '{key}' must be a non-empty lowercase a-z fragment"
                )
        # Copy so later mutation of the caller's dict can't leak in
        self._weights: tuple[tuple[str, float], ...] = tuple(weights.items())
        self.default = default

    def weight(self, source: Optional[str]) -> float:
        normalized = normalize_source(source)
        if normalized:
            for key, weight in self._weights:
                if key in normalized:
                    return weight
        return self.default

    def as_dict(self) -> dict[str, float]:
        return dict(self._weights)


source_credibility = SourceCredibility()


def get_source_weight(source: Optional[str]) -> float:
    """Weight for `source` using the built-in table."""
    return source_credibility.weight(source)
