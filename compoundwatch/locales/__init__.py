"""Built-in translation tables, keyed by locale tag."""

from compoundwatch.locales.pt_br import PT_BR_PATTERNS

CANONICAL_LOCALE = "en"

BUILTIN_TRANSLATIONS = {
    "pt-BR": PT_BR_PATTERNS,
}

__all__ = ["CANONICAL_LOCALE", "BUILTIN_TRANSLATIONS", "PT_BR_PATTERNS"]
