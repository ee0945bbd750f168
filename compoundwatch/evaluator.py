"""
Compound Pattern Evaluator

Given the tracker's view of currently active topics, decides which compound
patterns are active and scores them.

Each matched topic contributes its own mean source weight (the mean of its
weight samples inside the window, 1.0 with no samples):

    score = max_score * sum(topic_weight for matched) / len(pattern.topics)
            * boost_factor

which equals base x boost_factor x mean_source_weight with
base = max_score * matched / len(pattern.topics) and mean_source_weight the
mean of the per-topic weights. Every added topic adds a positive term, so a
score never drops when more of a pattern's topics become active.

Levels: critical >= 20, high >= 12, else elevated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from compoundwatch.patterns import COMPOUND_PATTERNS, CompoundPattern
from compoundwatch.tracker import ActiveTopic

CRITICAL_THRESHOLD = 20.0
HIGH_THRESHOLD = 12.0


@dataclass
class ActivePatternResult:
    pattern_id: str
    name: str
    prediction: str
    topics: tuple[str, ...]
    matched_topics: tuple[str, ...]
    min_topics: int
    boost_factor: float
    score: float
    level: str                  # "critical" | "high" | "elevated"
    mean_source_weight: float
    narrative: dict[str, list[str]] = field(default_factory=dict)
    breakdown: dict = field(default_factory=dict)

    @property
    def matched_count(self) -> int:
        return len(self.matched_topics)

    def to_dict(self) -> dict:
        return {
            "pattern_id": self.pattern_id,
            "name": self.name,
            "prediction": self.prediction,
            "topics": list(self.topics),
            "matched_topics": list(self.matched_topics),
            "matched_count": self.matched_count,
            "min_topics": self.min_topics,
            "boost_factor": self.boost_factor,
            "score": self.score,
            "level": self.level,
            "mean_source_weight": self.mean_source_weight,
            "narrative": self.narrative,
        }


def level_for(score: float) -> str:
    if score >= CRITICAL_THRESHOLD:
        return "critical"
    if score >= HIGH_THRESHOLD:
        return "high"
    return "elevated"


def calculate_pattern_score(
    pattern: CompoundPattern,
    topic_weights: Mapping[str, float],
    max_score: float = 10.0,
) -> tuple[float, dict]:
    """
    Score one active pattern.

    Args:
        pattern: The pattern being scored.
        topic_weights: Matched topic id -> that topic's mean source weight.
        max_score: Base score of a fully matched pattern at weight 1.0.

    Returns:
        (score, breakdown) where breakdown shows each factor applied.
    """
    matched = len(topic_weights)
    weight_sum = sum(topic_weights.values())
    mean_weight = weight_sum / matched if matched else 1.0
    base = max_score * matched / len(pattern.topics)
    score = round(max_score * weight_sum / len(pattern.topics) * pattern.boost_factor, 3)
    breakdown = {
        "base": round(base, 3),
        "matched": matched,
        "total_topics": len(pattern.topics),
        "boost_factor": pattern.boost_factor,
        "topic_weights": {t: round(w, 3) for t, w in topic_weights.items()},
        "mean_source_weight": round(mean_weight, 3),
        "final_score": score,
    }
    return score, breakdown


class CompoundEvaluator:
    """Stateless evaluation of a pattern catalog against active topics."""

    def __init__(
        self,
        patterns: Sequence[CompoundPattern] = COMPOUND_PATTERNS,
        max_score: float = 10.0,
        min_streak: int = 1,
        min_mentions: int = 1,
    ):
        if max_score <= 0:
            raise ValueError(f"max_score must be > 0, got {max_score}")
        self.patterns = tuple(patterns)
        self.max_score = max_score
        self.min_streak = max(1, min_streak)
        self.min_mentions = max(1, min_mentions)

    def _eligible(self, topic: ActiveTopic) -> bool:
        # weights holds one sample per mention inside the window
        return topic.streak >= self.min_streak and len(topic.weights) >= self.min_mentions

    def evaluate(self, active: Mapping[str, ActiveTopic]) -> list[ActivePatternResult]:
        """All active patterns, highest score first (ties broken by id)."""
        eligible = {
            topic_id: topic
            for topic_id, topic in active.items()
            if self._eligible(topic)
        }

        results = []
        for pattern in self.patterns:
            matched = tuple(t for t in pattern.topics if t in eligible)
            if len(matched) < pattern.min_topics:
                continue

            topic_weights = {t: eligible[t].mean_weight for t in matched}
            score, breakdown = calculate_pattern_score(pattern, topic_weights, self.max_score)

            results.append(ActivePatternResult(
                pattern_id=pattern.id,
                name=pattern.name,
                prediction=pattern.prediction,
                topics=pattern.topics,
                matched_topics=matched,
                min_topics=pattern.min_topics,
                boost_factor=pattern.boost_factor,
                score=score,
                level=level_for(score),
                mean_source_weight=breakdown["mean_source_weight"],
                narrative=pattern.narrative.as_dict(),
                breakdown=breakdown,
            ))

        results.sort(key=lambda r: (-r.score, r.pattern_id))
        return results
