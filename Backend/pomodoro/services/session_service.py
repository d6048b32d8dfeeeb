import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from pomodoro.database import store_operation
from pomodoro.exceptions import InvalidSessionId
from pomodoro.models.session import Session
from pomodoro.services import profile_service
from pomodoro.services.stats_service import format_day, local_date

logger = logging.getLogger(__name__)


@store_operation
async def get_sessions(db: AsyncSession, user_id: str) -> list[Session]:
    result = await db.execute(
        select(Session)
        .where(Session.user_id == user_id)
        .order_by(Session.timestamp.desc())
    )
    return list(result.scalars().all())


@store_operation
async def create_session(db: AsyncSession, user_id: str, data: dict) -> Session:
    """Store a session and add its duration to the owner's profile.

    The session row and the profile update are committed together, so a
    failed profile update leaves no orphaned session behind.
    """
    await profile_service.ensure_profile(db, user_id)

    now = datetime.now(timezone.utc)
    session = Session(
        task=data["task"],
        duration=data["duration"],
        type=data.get("type") or "focus",
        timestamp=data.get("timestamp") or now,
        date=format_day(local_date(now)),
        user_id=user_id,
    )
    db.add(session)
    await db.flush()

    await profile_service.apply_session_delta(db, user_id, session.duration)
    await db.commit()
    await db.refresh(session)

    logger.info(
        "Recorded %d min %s session %s for %s",
        session.duration, session.type, session.id, user_id,
    )
    return session


@store_operation
async def delete_session(db: AsyncSession, session_id: str) -> bool:
    """Delete a session by id. Returns whether a row was removed.

    Profile totals are left untouched.
    """
    try:
        key = uuid.UUID(session_id)
    except ValueError:
        raise InvalidSessionId(f"Invalid session id: {session_id!r}") from None

    result = await db.execute(delete(Session).where(Session.id == key))
    await db.commit()

    deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted session %s", session_id)
    else:
        logger.debug("Delete for unknown session %s ignored", session_id)
    return deleted
