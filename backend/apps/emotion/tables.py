from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text

from apps.core.database import Base
from apps.core.timeutil import utcnow


class EmotionAnalysis(Base):
    """One scored text submission."""
    __tablename__ = "emotion_analyses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    primary_emotion = Column(String(32), nullable=False, index=True)
    confidence = Column(Float, nullable=False)

    # Full normalized distribution, one key per category
    emotions = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
