"""
Stats API - job counts per status and applications per month (trailing window).
Cached per user and generation (ttl from config). The generation is read before the
query runs, so a result racing a job mutation is stored under the superseded generation.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobify.app.core.config import settings
from jobify.app.core.dependencies import get_current_user_id, get_db
from jobify.app.schemas.job import ChartPoint, StatusStatsOut
from jobify.app.services.invalidation import CacheResource
from jobify.app.services.stats_service import StatsService
from jobify.app.utils import cache

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatusStatsOut)
async def get_status_stats(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> dict:
    """Counts for pending, interview and declined. Redirects to the job list if the query fails."""
    generation = await cache.current_generation(CacheResource.STATS.value, user_id)
    cache_key = cache.entry_key(CacheResource.STATS.value, user_id, generation)
    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    result = StatsService.status_stats(db, user_id)
    await cache.set(cache_key, result, ttl=settings.stats_cache_ttl)
    return result


@router.get("/charts", response_model=list[ChartPoint])
async def get_monthly_series(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> list[dict]:
    """
    Applications per month, e.g. [{"date": "Jan 25", "count": 2}, {"date": "Mar 25", "count": 1}].
    Months without applications are omitted.
    """
    generation = await cache.current_generation(CacheResource.CHARTS.value, user_id)
    cache_key = cache.entry_key(CacheResource.CHARTS.value, user_id, generation)
    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    result = StatsService.monthly_series(db, user_id)
    await cache.set(cache_key, result, ttl=settings.charts_cache_ttl)
    return result
