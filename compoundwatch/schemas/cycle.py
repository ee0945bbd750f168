"""
API Schemas — Request and Response Models

Pydantic models for the CompoundWatch API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from compoundwatch.engine import IngestItem

_LOCALE_PATTERN = "^[a-z]{2}(-[A-Z]{2})?$"
_CATEGORY_PATTERN = "^(key_judgments|indicators|confirmation_signals|assumptions|change_triggers)$"


# ============================================================
# CYCLE
# ============================================================

class IngestItemModel(BaseModel):
    text: str = Field(..., max_length=50_000)
    source: Optional[str] = Field(None, max_length=200)
    link: Optional[str] = Field(None, max_length=2_000)

    def to_item(self) -> IngestItem:
        return IngestItem(text=self.text, source=self.source, link=self.link)


class CycleRequest(BaseModel):
    """POST /cycle request body."""
    items: list[IngestItemModel] = Field(..., max_length=5_000,
                                         description="Items collected in this refresh cycle.")
    locale: Optional[str] = Field(None, pattern=_LOCALE_PATTERN,
                                  description="Display locale for pattern text.")

    model_config = {"json_schema_extra": {"examples": [
        {
            "items": [
                {"text": "New tariff schedule announced", "source": "Reuters"},
                {"text": "US China talks stall over Taiwan", "source": "BBC"},
            ],
            "locale": "en",
        },
    ]}}


class TopicStatsResponse(BaseModel):
    count: int
    weighted_count: float
    sources: list[str]
    samples: list[dict]


class ActiveTopicResponse(BaseModel):
    first_seen: int
    last_seen: int
    streak: int
    mentions: int
    mean_weight: float


class PatternResultResponse(BaseModel):
    pattern_id: str
    name: str
    prediction: str
    topics: list[str]
    matched_topics: list[str]
    matched_count: int
    min_topics: int
    boost_factor: float
    score: float
    level: str
    mean_source_weight: float
    narrative: dict[str, list[str]]


class MatchWarningResponse(BaseModel):
    topic_id: str
    pattern: str
    error: str


class EmergingSignalResponse(BaseModel):
    topic_id: str
    name: str
    category: str
    count: int
    weighted_count: float
    level: str
    sources: list[str]


class MomentumSignalResponse(BaseModel):
    topic_id: str
    name: str
    category: str
    current: int
    previous: int
    delta: int
    momentum: str


class CrossSourceSignalResponse(BaseModel):
    topic_id: str
    name: str
    category: str
    source_count: int
    sources: list[str]
    level: str


class PredictiveSignalResponse(BaseModel):
    topic_id: str
    name: str
    category: str
    score: float
    confidence: int
    prediction: str
    level: str


class TopicSignalsResponse(BaseModel):
    emerging: list[EmergingSignalResponse]
    momentum: list[MomentumSignalResponse]
    cross_source: list[CrossSourceSignalResponse]
    predictive: list[PredictiveSignalResponse]


class CycleResponse(BaseModel):
    """POST /cycle response body."""
    cycle: int
    locale: str
    items_processed: int
    matched_topics: list[str]
    topic_stats: dict[str, TopicStatsResponse]
    active_topics: dict[str, ActiveTopicResponse]
    patterns: list[PatternResultResponse]
    signals: TopicSignalsResponse
    warnings: list[MatchWarningResponse]
    expired: list[str]
    summary: dict


# ============================================================
# CATALOG
# ============================================================

class PatternResponse(BaseModel):
    id: str
    topics: list[str]
    min_topics: int
    boost_factor: float
    name: str
    prediction: str
    narrative: dict[str, list[str]]
    locale: str


class PatternListResponse(BaseModel):
    locale: str
    total: int
    patterns: list[PatternResponse]


class TopicResponse(BaseModel):
    id: str
    category: str
    patterns: list[str]
    enabled: bool


class TopicListResponse(BaseModel):
    total: int
    topics: list[TopicResponse]


class SourceWeightResponse(BaseModel):
    source: str
    weight: float


# ============================================================
# ANNOTATIONS
# ============================================================

class AnnotationRequest(BaseModel):
    """POST /annotations request body."""
    locale: str = Field(..., pattern=_LOCALE_PATTERN)
    pattern_id: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., pattern=_CATEGORY_PATTERN)
    text: str = Field(..., min_length=1, max_length=2_000)


class AnnotationResponse(BaseModel):
    appended: bool


class AnnotationListResponse(BaseModel):
    locale: str
    patterns: dict[str, dict[str, list[str]]]


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    engine_version: str
    window_cycles: int
    current_cycle: int
    tracked_topics: int
    locales: list[str]
