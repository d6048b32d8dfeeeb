from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pomodoro.database import get_db
from pomodoro.dependencies import get_user_id
from pomodoro.schemas.stats import StatsResponse
from pomodoro.services import stats_service

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
async def get_stats(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await stats_service.get_stats(db, user_id)
