"""
Manual Annotation Store

Operators can append their own bullets to any of the five narrative lists of
a pattern, per locale. Additions are append-only: nothing is ever removed or
reordered, and an exact duplicate of an existing manual entry is ignored.

All additions live in ONE JSON document under a single storage key:

    {locale: {pattern_id: {category: [text, ...]}}}

Persistence is best effort. If the backend raises, or the stored document is
corrupt or the wrong shape, the failure is logged at WARNING and the store
behaves as if there were no manual additions. It never raises to the caller.
An append whose backend read fails is refused, so stored entries are never
replaced by a document built from nothing.
"""

from __future__ import annotations

import json
import sqlite3
import threading
from dataclasses import dataclass, field
from typing import Optional, Protocol

from compoundwatch.localization import Localizer
from compoundwatch.logging import get_logger
from compoundwatch.patterns import NARRATIVE_CATEGORIES, Narrative

logger = get_logger("annotations")

Additions = dict[str, dict[str, list[str]]]     # pattern_id -> category -> texts


# ============================================================
# STORAGE PORTS
# ============================================================

class StoragePort(Protocol):
    """Key/value string storage. Either method may raise on backend failure."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage, for tests and the replay CLI."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteStorage:
    """Single-table key/value store backed by SQLite."""

    def __init__(self, db_path: str = "compoundwatch_annotations.db"):
        self.db_path = db_path
        self._lock = threading.Lock()
        self._init_db()

    def _init_db(self):
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()

    def _get_conn(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def get(self, key: str) -> Optional[str]:
        with self._get_conn() as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            with self._get_conn() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                    (key, value),
                )
                conn.commit()


# ============================================================
# MERGED VIEW
# ============================================================

@dataclass(frozen=True)
class NarrativeView:
    """Built-in (localized) narrative followed by manual additions."""
    pattern_id: str
    builtin: Narrative
    manual: dict[str, list[str]] = field(default_factory=dict)

    def get(self, category: str) -> list[str]:
        return list(self.builtin.get(category)) + list(self.manual.get(category, []))

    def as_dict(self) -> dict[str, list[str]]:
        return {c: self.get(c) for c in NARRATIVE_CATEGORIES}


# ============================================================
# THE STORE
# ============================================================

class ManualAnnotationStore:
    """Append-only manual narrative additions, merged over localized narrative."""

    def __init__(
        self,
        storage: StoragePort,
        localizer: Localizer,
        storage_key: str = "compoundwatch.manual_annotations",
    ):
        self.storage = storage
        self.localizer = localizer
        self.storage_key = storage_key
        self._lock = threading.Lock()

    def _read_document(self) -> dict[str, Additions]:
        doc = self._load_document()
        return {} if doc is None else doc

    def _load_document(self) -> Optional[dict[str, Additions]]:
        """The stored document, or None when the backend read failed."""
        try:
            raw = self.storage.get(self.storage_key)
        except Exception as e:
            logger.warning(
                f"Annotation storage read failed: {e}",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            return None
        if not raw:
            return {}

        try:
            doc = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(
                "Stored annotations are not valid JSON; ignoring them",
                extra={"error": str(e)},
            )
            return {}

        return _clean_document(doc)

    def _write_document(self, doc: dict[str, Additions]) -> bool:
        try:
            self.storage.set(self.storage_key, json.dumps(doc, ensure_ascii=False))
            return True
        except Exception as e:
            logger.warning(
                f"Annotation storage write failed: {e}",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            return False

    def append(self, locale: str, pattern_id: str, category: str, text: str) -> bool:
        """
        Append one manual bullet.

        Returns:
            True if the text was stored; False for a no-op (empty text,
            unknown category, duplicate entry) or a failed write.
        """
        text = (text or "").strip()
        if not text:
            return False
        if category not in NARRATIVE_CATEGORIES:
            logger.warning(
                f"Ignoring annotation with unknown category '{category}'",
                extra={"pattern_id": pattern_id, "locale": locale},
            )
            return False

        with self._lock:
            doc = self._load_document()
            if doc is None:
                # Writing over an unread document would drop every stored entry
                logger.warning(
                    "Annotation not appended: stored document could not be read",
                    extra={"pattern_id": pattern_id, "locale": locale},
                )
                return False
            entries = (
                doc.setdefault(locale, {})
                .setdefault(pattern_id, {})
                .setdefault(category, [])
            )
            if text in entries:
                return False
            entries.append(text)
            stored = self._write_document(doc)

        if stored:
            logger.info(
                "Manual annotation appended",
                extra={"pattern_id": pattern_id, "locale": locale},
            )
        return stored

    def additions(self, locale: str) -> Additions:
        """Manual entries for one locale: pattern_id -> category -> texts."""
        return self._read_document().get(locale, {})

    def view(self, pattern_id: str, locale: Optional[str] = None) -> Optional[NarrativeView]:
        pattern = self.localizer.get_pattern(pattern_id)
        if pattern is None:
            return None
        localized = self.localizer.localize(pattern, locale)
        manual = self.additions(locale or self.localizer.canonical_locale).get(pattern_id, {})
        return NarrativeView(pattern_id, localized.narrative, manual)

    def load(self, locale: Optional[str] = None) -> dict[str, NarrativeView]:
        """Every pattern's merged narrative in `locale`."""
        locale = locale or self.localizer.canonical_locale
        manual = self.additions(locale)
        views = {}
        for localized in self.localizer.localize_all(locale):
            views[localized.id] = NarrativeView(
                localized.id, localized.narrative, manual.get(localized.id, {})
            )
        return views


def _clean_document(doc) -> dict[str, Additions]:
    """Keep only well-shaped entries; anything else is dropped with a warning."""
    if not isinstance(doc, dict):
        logger.warning("Stored annotations have the wrong shape; ignoring them")
        return {}

    cleaned: dict[str, Additions] = {}
    dropped = 0
    for locale, patterns in doc.items():
        if not isinstance(patterns, dict):
            dropped += 1
            continue
        for pattern_id, categories in patterns.items():
            if not isinstance(categories, dict):
                dropped += 1
                continue
            for category, texts in categories.items():
                if category not in NARRATIVE_CATEGORIES or not isinstance(texts, list):
                    dropped += 1
                    continue
                kept = [t for t in texts if isinstance(t, str)]
                dropped += len(texts) - len(kept)
                cleaned.setdefault(locale, {}).setdefault(pattern_id, {})[category] = kept

    if dropped:
        logger.warning(f"Dropped {dropped} malformed stored annotation entr(ies)")
    return cleaned
