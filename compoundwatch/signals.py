"""
Topic Signals — Per-topic Signal Families

Alongside compound patterns, every cycle reports four families of
single-topic signals computed from that cycle's TopicStats:

    emerging      count >= 3                  level by count (8 high, 5 elevated)
    momentum      delta >= 2, or count >= 3 with delta >= 1
    cross-source  >= 3 distinct named sources level by sources (5 high, 4 elevated)
    predictive    weighted*2 + sources*3 + delta*5 >= 15

delta is this cycle's count minus the previous cycle's count, as recorded
by the tracker. Predictive confidence is min(95, round(score * 1.5)).

Each family is sorted strongest first, ties broken by topic id.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, field
from typing import Sequence

from compoundwatch.topics import Topic

EMERGING_MIN_COUNT = 3
CROSS_SOURCE_MIN_SOURCES = 3
PREDICTIVE_MIN_SCORE = 15.0
MAX_CONFIDENCE = 95


@dataclass(frozen=True)
class TopicActivity:
    """What the signal detectors need to know about one topic this cycle."""
    topic: Topic
    count: int
    weighted_count: float
    sources: tuple[str, ...]
    previous_count: int = 0
    count_before_previous: int = 0

    @property
    def delta(self) -> int:
        return self.count - self.previous_count

    @property
    def previous_delta(self) -> int:
        return self.previous_count - self.count_before_previous


@dataclass(frozen=True)
class EmergingSignal:
    topic_id: str
    name: str
    category: str
    count: int
    weighted_count: float
    level: str                  # "high" | "elevated" | "emerging"
    sources: tuple[str, ...]


@dataclass(frozen=True)
class MomentumSignal:
    topic_id: str
    name: str
    category: str
    current: int
    previous: int
    delta: int
    momentum: str               # "surging" | "rising" | "stable"


@dataclass(frozen=True)
class CrossSourceSignal:
    topic_id: str
    name: str
    category: str
    source_count: int
    sources: tuple[str, ...]
    level: str                  # "high" | "elevated" | "emerging"


@dataclass(frozen=True)
class PredictiveSignal:
    topic_id: str
    name: str
    category: str
    score: float
    confidence: int
    prediction: str
    level: str                  # "high" | "medium" | "low"


@dataclass
class TopicSignals:
    emerging: list[EmergingSignal] = field(default_factory=list)
    momentum: list[MomentumSignal] = field(default_factory=list)
    cross_source: list[CrossSourceSignal] = field(default_factory=list)
    predictive: list[PredictiveSignal] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Signals counted by the status badge (cross-source excluded)."""
        return len(self.emerging) + len(self.momentum) + len(self.predictive)

    def to_dict(self) -> dict:
        return {
            "emerging": [asdict(s) for s in self.emerging],
            "momentum": [asdict(s) for s in self.momentum],
            "cross_source": [asdict(s) for s in self.cross_source],
            "predictive": [asdict(s) for s in self.predictive],
        }


def display_name(topic_id: str) -> str:
    """'china-tensions' -> 'China Tensions'."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), topic_id.replace("-", " "))


# ============================================================
# LEVELS
# ============================================================

def emerging_level(count: int) -> str:
    if count >= 8:
        return "high"
    if count >= 5:
        return "elevated"
    return "emerging"


def cross_source_level(source_count: int) -> str:
    if source_count >= 5:
        return "high"
    if source_count >= 4:
        return "elevated"
    return "emerging"


def momentum_level(delta: int, previous_delta: int) -> str:
    if delta >= 4 and delta > previous_delta:
        return "surging"
    if delta >= 2:
        return "rising"
    return "stable"


def predictive_score(activity: TopicActivity) -> float:
    return round(
        activity.weighted_count * 2 + len(activity.sources) * 3 + activity.delta * 5, 3
    )


def confidence_for(score: float) -> int:
    # half-up rounding
    return min(MAX_CONFIDENCE, int(math.floor(score * 1.5 + 0.5)))


def predictive_level(confidence: int) -> str:
    if confidence >= 70:
        return "high"
    if confidence >= 50:
        return "medium"
    return "low"


def prediction_for(topic: Topic, count: int) -> str:
    if topic.id == "tariffs" and count >= 4:
        return "Market volatility likely in next 24-48h"
    if topic.id == "fed-rates":
        return "Expect increased financial sector coverage"
    if "china" in topic.id or "russia" in topic.id:
        return "Geopolitical escalation narrative forming"
    if topic.id == "layoffs":
        return "Employment concerns may dominate news cycle"
    if topic.category == "Conflict":
        return "Breaking developments likely within hours"
    return "Topic gaining mainstream traction"


# ============================================================
# DETECTION
# ============================================================

def detect_signals(activities: Sequence[TopicActivity]) -> TopicSignals:
    """Run every signal family over this cycle's matched topics."""
    emerging, momentum, cross_source, predictive = [], [], [], []

    for a in activities:
        topic = a.topic
        name = display_name(topic.id)

        if a.count >= EMERGING_MIN_COUNT:
            emerging.append(EmergingSignal(
                topic_id=topic.id,
                name=name,
                category=topic.category,
                count=a.count,
                weighted_count=round(a.weighted_count, 3),
                level=emerging_level(a.count),
                sources=a.sources,
            ))

        if a.delta >= 2 or (a.count >= 3 and a.delta >= 1):
            momentum.append(MomentumSignal(
                topic_id=topic.id,
                name=name,
                category=topic.category,
                current=a.count,
                previous=a.previous_count,
                delta=a.delta,
                momentum=momentum_level(a.delta, a.previous_delta),
            ))

        if len(a.sources) >= CROSS_SOURCE_MIN_SOURCES:
            cross_source.append(CrossSourceSignal(
                topic_id=topic.id,
                name=name,
                category=topic.category,
                source_count=len(a.sources),
                sources=a.sources,
                level=cross_source_level(len(a.sources)),
            ))

        score = predictive_score(a)
        if score >= PREDICTIVE_MIN_SCORE:
            confidence = confidence_for(score)
            predictive.append(PredictiveSignal(
                topic_id=topic.id,
                name=name,
                category=topic.category,
                score=score,
                confidence=confidence,
                prediction=prediction_for(topic, a.count),
                level=predictive_level(confidence),
            ))

    emerging.sort(key=lambda s: (-s.weighted_count, s.topic_id))
    momentum.sort(key=lambda s: (-s.delta, s.topic_id))
    cross_source.sort(key=lambda s: (-s.source_count, s.topic_id))
    predictive.sort(key=lambda s: (-s.score, s.topic_id))
    return TopicSignals(emerging, momentum, cross_source, predictive)
