"""Emotion Data Models."""
from datetime import datetime
from typing import Any

from apps.core.schemas import CamelModel


class AnalyzeRequest(CamelModel):
    # Validated in the router so missing/blank text maps to a 400
    text: Any = None


class EmotionDistribution(CamelModel):
    happy: float
    sad: float
    angry: float
    fear: float
    surprise: float
    neutral: float


class EmotionResponse(CamelModel):
    id: int
    primary_emotion: str
    confidence: float
    emotions: EmotionDistribution
    created_at: datetime


class AnalysisItem(CamelModel):
    id: int
    user_id: str
    text: str
    primary_emotion: str
    confidence: float
    emotions: EmotionDistribution
    created_at: datetime


class UserStatsResponse(CamelModel):
    total_analyses: int
    most_common_emotion: str
    weekly_count: int
