"""
Error taxonomy.

Configuration errors are fatal at load time: they mean the deployment is
broken, not that the input is bad. Match problems and persistence problems
never surface as exceptions (see topics.MatchWarning and annotations.py).
"""

from __future__ import annotations


class CatalogError(ValueError):
    """A topic, source or compound pattern catalog is invalid."""


class TranslationParityError(CatalogError):
    """A locale's narrative lists do not line up with the canonical catalog."""

    def __init__(self, locale: str, pattern_id: str, detail: str):
        self.locale = locale
        self.pattern_id = pattern_id
        super().__init__(f"Locale '{locale}', pattern '{pattern_id}': {detail}")
