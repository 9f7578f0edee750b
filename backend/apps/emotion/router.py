"""Emotion API Router."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from apps.core.config import settings
from apps.core.database import get_db
from apps.emotion.engine import EmotionScorer
from apps.emotion.models import AnalysisItem, AnalyzeRequest, EmotionResponse, UserStatsResponse
from apps.emotion.storage import AnalysisStorage
from apps.stats.storage import StatsStorage
from apps.users.auth import get_current_user
from apps.users.tables import User

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Emotion"])

# Singleton
_scorer: EmotionScorer | None = None


def get_scorer() -> EmotionScorer:
    global _scorer
    if _scorer is None:
        _scorer = EmotionScorer()
    return _scorer


@router.get("/emotion/health")
async def health_check():
    return {"status": "ok", "service": "Emotion"}


@router.post("/api/analyze-emotion", response_model=EmotionResponse)
async def analyze(
    payload: AnalyzeRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    scorer: EmotionScorer = Depends(get_scorer),
):
    text = payload.text
    if not text or not isinstance(text, str):
        raise HTTPException(status_code=400, detail="Text is required")
    # Deployment limit on request size; the scorer itself takes any length
    if settings.MAX_TEXT_CHARS and len(text) > settings.MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"Text too long. Limit: {settings.MAX_TEXT_CHARS} characters")

    try:
        score = scorer.analyze(text)
        saved = await AnalysisStorage(db).create_analysis(user.id, text, score)
        await StatsStorage(db).increment("total_analyses")
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Emotion analysis failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to analyze emotion")

    logger.debug("User %s: %s (%.3f)", user.id, score.primary_emotion, score.confidence)
    return EmotionResponse(
        id=saved.id,
        primary_emotion=score.primary_emotion,
        confidence=score.confidence,
        emotions=score.emotions,
        created_at=saved.created_at,
    )


@router.get("/api/user/analyses", response_model=list[AnalysisItem])
async def user_analyses(
    limit: int = Query(settings.history.default_limit, ge=1, le=settings.history.max_limit),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        analyses = await AnalysisStorage(db).list_user_analyses(user.id, limit)
    except Exception:
        logger.exception("Fetching analyses failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to fetch analyses")
    return [AnalysisItem.model_validate(a) for a in analyses]


@router.get("/api/user/stats", response_model=UserStatsResponse)
async def user_stats(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        stats = await AnalysisStorage(db).user_stats(user.id)
    except Exception:
        logger.exception("Fetching stats failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to fetch stats")
    return UserStatsResponse(**stats)
