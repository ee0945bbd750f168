"""
Localization Overlay

Swaps the display text of a compound pattern (name, prediction, the five
narrative lists) for a locale's translation. Identifiers, topic lists,
thresholds and boost factors are never localized.

A translation table must be structurally identical to the canonical
catalog: same pattern ids, and for every pattern the same number of entries
in each narrative list. Parity is checked once per Localizer, either eagerly
via validate() or lazily on the first localize() call, and a violation
raises TranslationParityError naming the locale, pattern and list.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from compoundwatch.errors import TranslationParityError
from compoundwatch.locales import BUILTIN_TRANSLATIONS, CANONICAL_LOCALE
from compoundwatch.logging import get_logger
from compoundwatch.patterns import (
    COMPOUND_PATTERNS,
    NARRATIVE_CATEGORIES,
    CompoundPattern,
    Narrative,
    PatternTranslation,
)

logger = get_logger("localization")


@dataclass(frozen=True)
class LocalizedPattern:
    id: str
    topics: tuple[str, ...]
    min_topics: int
    boost_factor: float
    name: str
    prediction: str
    narrative: Narrative
    locale: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "topics": list(self.topics),
            "min_topics": self.min_topics,
            "boost_factor": self.boost_factor,
            "name": self.name,
            "prediction": self.prediction,
            "narrative": self.narrative.as_dict(),
            "locale": self.locale,
        }


class Localizer:
    """Resolves display text for a pattern in a locale, falling back to canonical."""

    def __init__(
        self,
        patterns: Sequence[CompoundPattern] = COMPOUND_PATTERNS,
        translations: Mapping[str, Mapping[str, PatternTranslation]] = BUILTIN_TRANSLATIONS,
        canonical_locale: str = CANONICAL_LOCALE,
    ):
        self.canonical_locale = canonical_locale
        self._patterns = {p.id: p for p in patterns}
        self._translations = {
            locale: dict(table)
            for locale, table in translations.items()
            if locale != canonical_locale
        }
        self._validated = False
        self._lock = threading.Lock()

    @property
    def locales(self) -> list[str]:
        return [self.canonical_locale] + sorted(self._translations)

    @property
    def pattern_ids(self) -> list[str]:
        return list(self._patterns)

    def get_pattern(self, pattern_id: str) -> Optional[CompoundPattern]:
        return self._patterns.get(pattern_id)

    def supports(self, locale: Optional[str]) -> bool:
        return locale == self.canonical_locale or locale in self._translations

    def validate(self) -> None:
        """
        Check every registered locale against the canonical catalog.

        Raises:
            TranslationParityError: on the first missing translation,
                list-length mismatch, or translation for an unknown pattern.
        """
        with self._lock:
            if self._validated:
                return
            for locale, table in self._translations.items():
                for pattern_id in table:
                    if pattern_id not in self._patterns:
                        raise TranslationParityError(
                            locale, pattern_id, "translation for unknown pattern"
                        )
                for pattern_id, pattern in self._patterns.items():
                    translation = table.get(pattern_id)
                    if translation is None:
                        raise TranslationParityError(locale, pattern_id, "missing translation")
                    for category in NARRATIVE_CATEGORIES:
                        expected = len(pattern.narrative.get(category))
                        actual = len(translation.narrative.get(category))
                        if expected != actual:
                            raise TranslationParityError(
                                locale,
                                pattern_id,
                                f"'{category}' has {actual} entries, expected {expected}",
                            )
            self._validated = True
            logger.info(
                f"Translation parity verified for {len(self._translations)} locale(s)"
            )

    def localize(self, pattern: CompoundPattern, locale: Optional[str] = None) -> LocalizedPattern:
        self.validate()
        translation = None
        if locale and locale != self.canonical_locale:
            translation = self._translations.get(locale, {}).get(pattern.id)

        if translation is None:
            name, prediction, narrative = pattern.name, pattern.prediction, pattern.narrative
            resolved = self.canonical_locale
        else:
            name, prediction, narrative = (
                translation.name, translation.prediction, translation.narrative,
            )
            resolved = locale

        return LocalizedPattern(
            id=pattern.id,
            topics=pattern.topics,
            min_topics=pattern.min_topics,
            boost_factor=pattern.boost_factor,
            name=name,
            prediction=prediction,
            narrative=narrative,
            locale=resolved,
        )

    def localize_all(self, locale: Optional[str] = None) -> list[LocalizedPattern]:
        return [self.localize(p, locale) for p in self._patterns.values()]
