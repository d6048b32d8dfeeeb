from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pomodoro.database import get_db
from pomodoro.dependencies import get_user_id
from pomodoro.schemas.session import MessageResponse, SessionCreate, SessionResponse
from pomodoro.services import session_service

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("", response_model=list[SessionResponse])
async def list_sessions(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await session_service.get_sessions(db, user_id)


@router.post("", response_model=SessionResponse)
async def create_session(
    data: SessionCreate,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    owner = data.user_id or user_id
    return await session_service.create_session(
        db, owner, data.model_dump(exclude={"user_id"})
    )


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a session. Unknown ids succeed with the same message."""
    await session_service.delete_session(db, session_id)
    return {"message": "Session deleted"}
