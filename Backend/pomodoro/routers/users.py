from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pomodoro.database import get_db
from pomodoro.dependencies import get_user_id
from pomodoro.schemas.user import UserProfileResponse
from pomodoro.services import profile_service

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("", response_model=UserProfileResponse)
async def get_user(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Return the caller's profile, creating a default one on first access."""
    return await profile_service.ensure_profile(db, user_id)
