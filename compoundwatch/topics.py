"""
Topic Catalog and Topic Matcher

The catalog is static data: each topic is a named set of regex rules plus a
display category. The matcher applies the catalog to a single text item and
returns the set of topic ids it hits.

Matching is deterministic and case-insensitive. A topic matches when ANY of
its rules matches. There is no scoring here; weights and co-occurrence live
downstream in the tracker and evaluator.

A topic with a rule that fails to compile is disabled, not fatal: every
match call reports it as a MatchWarning and the remaining topics are matched
normally.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from compoundwatch.errors import CatalogError
from compoundwatch.logging import get_logger

logger = get_logger("topics")


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class Topic:
    """A named, pattern-matched category of text content."""
    id: str
    patterns: tuple[str, ...]   # regex sources, evaluated with re.IGNORECASE
    category: str               # e.g. "Economy", "Conflict"


@dataclass(frozen=True)
class MatchWarning:
    """A topic skipped because one of its rules is malformed."""
    topic_id: str
    pattern: str
    error: str


@dataclass(frozen=True)
class MatchResult:
    topic_ids: frozenset[str]
    warnings: tuple[MatchWarning, ...] = ()


# ============================================================
# TOPIC CATALOG
# ============================================================

TOPIC_CATALOG: tuple[Topic, ...] = (
    # --- Economy & markets ---
    Topic("tariffs", (r"tariff", r"trade war", r"import tax", r"customs duty"), "Economy"),
    Topic(
        "fed-rates",
        (r"federal reserve", r"interest rate", r"rate cut", r"rate hike", r"powell", r"fomc"),
        "Economy",
    ),
    Topic("inflation", (r"inflation", r"cpi", r"consumer price", r"cost of living"), "Economy"),
    Topic(
        "housing",
        (r"housing market", r"mortgage rate", r"home price", r"real estate.*crash"),
        "Economy",
    ),
    Topic(
        "supply-chain",
        (r"supply chain", r"shipping.*delay", r"port.*congestion", r"logistics.*crisis"),
        "Economy",
    ),
    Topic(
        "rare-earths",
        (r"rare earth", r"lithium", r"cobalt", r"critical mineral", r"semiconductor supply"),
        "Economy",
    ),
    Topic(
        "oil-opec",
        (r"\bopec\b", r"oil price", r"oil production", r"crude oil", r"petroleum", r"oil cut"),
        "Economy",
    ),
    Topic(
        "food-security",
        (r"food crisis", r"crop failure", r"grain export", r"food price", r"\bfamine\b",
         r"food shortage"),
        "Economy",
    ),
    Topic(
        "sovereign-debt",
        (r"national debt", r"debt ceiling", r"fiscal deficit", r"credit rating", r"bond yield",
         r"\btreasury\b"),
        "Economy",
    ),
    Topic(
        "demographics",
        (r"aging population", r"birth rate", r"fertility rate", r"population decline",
         r"brain drain"),
        "Economy",
    ),

    # --- Finance ---
    Topic(
        "crypto",
        (r"bitcoin", r"crypto.*regulation", r"ethereum", r"sec.*crypto"),
        "Finance",
    ),
    Topic("bank-crisis", (r"bank.*fail", r"banking crisis", r"fdic", r"bank run"), "Finance"),
    Topic(
        "credit-stress",
        (r"credit crunch", r"default risk", r"junk bond", r"high yield", r"credit spread"),
        "Finance",
    ),

    # --- Business & tech ---
    Topic(
        "layoffs",
        (r"layoff", r"job cut", r"workforce reduction", r"downsizing"),
        "Business",
    ),
    Topic(
        "ai-regulation",
        (r"ai regulation", r"artificial intelligence.*law", r"ai safety", r"ai governance"),
        "Tech",
    ),
    Topic(
        "big-tech",
        (r"antitrust.*tech", r"google.*monopoly", r"meta.*lawsuit", r"apple.*doj"),
        "Tech",
    ),
    Topic("deepfake", (r"deepfake", r"ai.*misinformation", r"synthetic media"), "Tech"),
    Topic(
        "space-race",
        (r"space launch", r"spacex", r"moon mission", r"mars mission", r"space station"),
        "Tech",
    ),

    # --- Geopolitics ---
    Topic(
        "china-tensions",
        (r"china.*taiwan", r"south china sea", r"us.*china", r"beijing.*washington"),
        "Geopolitics",
    ),
    Topic(
        "iran",
        (r"iran.*nuclear", r"tehran", r"ayatollah", r"iranian.*strike"),
        "Geopolitics",
    ),
    Topic(
        "sanctions",
        (r"\bsanction", r"swift ban", r"asset freeze", r"export control", r"trade restriction",
         r"\bembargo\b"),
        "Geopolitics",
    ),
    Topic(
        "trade-blocs",
        (r"\bbrics\b", r"g7 summit", r"\bg20\b", r"trade agreement", r"trade bloc",
         r"economic alliance"),
        "Geopolitics",
    ),
    Topic(
        "nato-defense",
        (r"nato spending", r"nato expansion", r"european defense", r"military alliance",
         r"collective defense"),
        "Geopolitics",
    ),

    # --- Conflict & security ---
    Topic(
        "russia-ukraine",
        (r"ukraine", r"zelensky", r"putin.*war", r"crimea", r"donbas"),
        "Conflict",
    ),
    Topic(
        "israel-gaza",
        (r"gaza", r"hamas", r"netanyahu", r"israel.*attack", r"hostage"),
        "Conflict",
    ),
    Topic(
        "nuclear",
        (r"nuclear.*threat", r"nuclear weapon", r"atomic", r"icbm"),
        "Security",
    ),
    Topic(
        "cyberattack",
        (r"cyberattack", r"cyber attack", r"data breach", r"ransomware", r"hacking",
         r"zero.day"),
        "Security",
    ),
    Topic(
        "state-hacking",
        (r"state.sponsored", r"\bapt\b", r"cyber espionage", r"cyber warfare"),
        "Security",
    ),
    Topic(
        "space-military",
        (r"space force", r"satellite weapon", r"anti.satellite", r"space militariz",
         r"orbital weapon"),
        "Security",
    ),
    Topic(
        "political-violence",
        (r"assassination", r"political violence", r"insurrection", r"\bcoup\b",
         r"\bextremism\b", r"domestic terror"),
        "Security",
    ),
    Topic(
        "arms-race",
        (r"arms deal", r"weapons sale", r"military buildup", r"defense spending", r"arms race",
         r"conscription"),
        "Security",
    ),

    # --- Politics & society ---
    Topic(
        "election",
        (r"election", r"polling", r"campaign", r"ballot", r"voter"),
        "Politics",
    ),
    Topic(
        "immigration",
        (r"immigration", r"border.*crisis", r"migrant", r"deportation", r"asylum"),
        "Politics",
    ),
    Topic(
        "civil-unrest",
        (r"\bprotest", r"\briot", r"civil unrest", r"demonstration", r"\bstrike\b",
         r"\buprising\b"),
        "Politics",
    ),
    Topic(
        "refugee-crisis",
        (r"\brefugee", r"\bdisplaced\b", r"humanitarian crisis", r"refugee camp",
         r"migration crisis"),
        "Politics",
    ),

    # --- Environment ---
    Topic(
        "climate",
        (r"climate change", r"wildfire", r"hurricane", r"extreme weather", r"flood"),
        "Environment",
    ),
    Topic(
        "energy-transition",
        (r"renewable energy", r"\bsolar\b.*power", r"wind power", r"green energy",
         r"clean energy", r"energy transition"),
        "Environment",
    ),
    Topic(
        "agriculture",
        (r"fertilizer", r"\bdrought\b", r"\bharvest\b", r"agriculture", r"farming crisis"),
        "Environment",
    ),
    Topic(
        "extreme-weather",
        (r"extreme weather", r"heat wave", r"polar vortex", r"\btornado\b", r"\btyphoon\b",
         r"\bcyclone\b", r"ice storm", r"record temperature", r"climate emergency",
         r"weather disaster"),
        "Environment",
    ),

    # --- Health ---
    Topic(
        "pandemic",
        (r"pandemic", r"outbreak", r"virus.*spread", r"who.*emergency", r"bird flu"),
        "Health",
    ),
    Topic(
        "biotech",
        (r"gene therapy", r"\bcrispr\b", r"biotech breakthrough", r"drug approval",
         r"fda approval"),
        "Health",
    ),
    Topic(
        "antimicrobial",
        (r"antibiotic resistance", r"superbug", r"antimicrobial", r"drug.resistant"),
        "Health",
    ),
)


def validate_topics(topics: Iterable[Topic]) -> dict[str, Topic]:
    """
    Check topic ids are unique and every topic has at least one rule.

    Malformed regex rules are NOT a catalog error: they are handled per
    match by the TopicMatcher so one bad rule can't take the engine down.

    Returns:
        Mapping of topic id to Topic, in declaration order.
    """
    by_id: dict[str, Topic] = {}
    for topic in topics:
        if not topic.id:
            raise CatalogError("Topic with empty id")
        if topic.id in by_id:
            raise CatalogError(f"Duplicate topic id '{topic.id}'")
        if not topic.patterns:
            raise CatalogError(f"Topic '{topic.id}' declares no patterns")
        by_id[topic.id] = topic
    return by_id


# ============================================================
# THE MATCHER
# ============================================================

class TopicMatcher:
    """
    Applies a topic catalog to text. Pure: no state changes after __init__.

    Rules are compiled once here. A topic whose rules don't all compile is
    disabled and reported with every match() call.
    """

    def __init__(self, topics: Sequence[Topic] = TOPIC_CATALOG):
        self._topics = validate_topics(topics)
        self._compiled: dict[str, tuple[re.Pattern, ...]] = {}
        warnings: list[MatchWarning] = []

        for topic in self._topics.values():
            compiled = []
            broken = False
            for rule in topic.patterns:
                try:
                    compiled.append(re.compile(rule, re.IGNORECASE))
                except (re.error, TypeError) as e:
                    warnings.append(MatchWarning(topic.id, str(rule), str(e)))
                    broken = True
            if broken:
                logger.warning(
                    f"Topic '{topic.id}' disabled: malformed pattern",
                    extra={"topic_id": topic.id},
                )
                continue
            self._compiled[topic.id] = tuple(compiled)

        self._warnings = tuple(warnings)

    @property
    def topics(self) -> dict[str, Topic]:
        return dict(self._topics)

    @property
    def warnings(self) -> tuple[MatchWarning, ...]:
        return self._warnings

    def match(self, text: Optional[str]) -> MatchResult:
        """Return the ids of every topic with at least one matching rule."""
        text = text or ""
        hits = frozenset(
            topic_id
            for topic_id, rules in self._compiled.items()
            if any(rule.search(text) for rule in rules)
        )
        return MatchResult(topic_ids=hits, warnings=self._warnings)

    def get_topics(self) -> list[dict]:
        """Catalog as plain dicts, for the GET /topics endpoint."""
        return [
            {
                "id": t.id,
                "category": t.category,
                "patterns": list(t.patterns),
                "enabled": t.id in self._compiled,
            }
            for t in self._topics.values()
        ]
