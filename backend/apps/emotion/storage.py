"""Emotion analysis persistence and per-user aggregates."""
from datetime import datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.core.config import settings
from apps.core.timeutil import utcnow
from apps.emotion.engine import EmotionScore
from apps.emotion.tables import EmotionAnalysis


class AnalysisStorage:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_analysis(self, user_id: str, text: str, score: EmotionScore) -> EmotionAnalysis:
        analysis = EmotionAnalysis(
            user_id=user_id,
            text=text,
            primary_emotion=score.primary_emotion,
            confidence=score.confidence,
            emotions=dict(score.emotions),
        )
        self.session.add(analysis)
        await self.session.flush()
        return analysis

    async def list_user_analyses(self, user_id: str, limit: int = 10) -> list[EmotionAnalysis]:
        """Most recent analyses first."""
        result = await self.session.execute(
            select(EmotionAnalysis)
            .where(EmotionAnalysis.user_id == user_id)
            .order_by(EmotionAnalysis.created_at.desc(), EmotionAnalysis.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def user_stats(self, user_id: str, now: datetime | None = None) -> dict:
        now = now or utcnow()
        week_ago = now - timedelta(days=settings.WEEKLY_WINDOW_DAYS)

        total = await self.session.scalar(
            select(func.count()).select_from(EmotionAnalysis).where(EmotionAnalysis.user_id == user_id)
        )

        emotion_count = func.count().label("count")
        most_common = await self.session.scalar(
            select(EmotionAnalysis.primary_emotion, emotion_count)
            .where(EmotionAnalysis.user_id == user_id)
            .group_by(EmotionAnalysis.primary_emotion)
            .order_by(emotion_count.desc(), EmotionAnalysis.primary_emotion.asc())
            .limit(1)
        )

        weekly = await self.session.scalar(
            select(func.count())
            .select_from(EmotionAnalysis)
            .where(EmotionAnalysis.user_id == user_id, EmotionAnalysis.created_at >= week_ago)
        )

        return {
            "total_analyses": total or 0,
            "most_common_emotion": most_common or settings.FALLBACK_EMOTION,
            "weekly_count": weekly or 0,
        }
