from sqlalchemy import Column, DateTime, Integer

from apps.core.database import Base
from apps.core.timeutil import utcnow

STATS_ROW_ID = 1


class AppStats(Base):
    """Single-row table of app-wide usage counters."""
    __tablename__ = "app_stats"

    id = Column(Integer, primary_key=True)
    total_users = Column(Integer, default=0, nullable=False)
    total_analyses = Column(Integer, default=0, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
