"""Stats API Router."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from apps.core.database import get_db
from apps.stats.models import AppStatsResponse
from apps.stats.storage import StatsStorage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Stats"])


@router.get("/stats", response_model=AppStatsResponse)
async def app_stats(db: AsyncSession = Depends(get_db)):
    try:
        stats = await StatsStorage(db).get_app_stats()
    except Exception:
        logger.exception("Fetching app stats failed")
        raise HTTPException(status_code=500, detail="Failed to fetch stats")
    if stats is None:
        return AppStatsResponse()
    return AppStatsResponse.model_validate(stats)
