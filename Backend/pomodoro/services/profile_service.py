import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pomodoro.database import store_operation
from pomodoro.models.user import UserProfile

logger = logging.getLogger(__name__)

MINUTES_PER_LEVEL = 1500


def compute_level(total_focus: int) -> int:
    return total_focus // MINUTES_PER_LEVEL + 1


def default_profile(user_id: str) -> UserProfile:
    """Build an unsaved profile with default values."""
    return UserProfile(
        user_id=user_id,
        name="Guest",
        total_focus=0,
        streak=0,
        level=1,
    )


async def get_profile(db: AsyncSession, user_id: str) -> UserProfile | None:
    result = await db.execute(select(UserProfile).where(UserProfile.user_id == user_id))
    return result.scalar_one_or_none()


@store_operation
async def ensure_profile(db: AsyncSession, user_id: str) -> UserProfile:
    """Return the user's profile, creating and committing a default one if absent."""
    profile = await get_profile(db, user_id)
    if profile is not None:
        return profile

    profile = default_profile(user_id)
    db.add(profile)
    try:
        await db.commit()
    except IntegrityError:
        # Another request created it first
        await db.rollback()
        logger.debug("Profile for %s created concurrently, reloading", user_id)
        profile = await get_profile(db, user_id)
        if profile is None:
            raise
        return profile

    logger.info("Created profile for %s", user_id)
    await db.refresh(profile)
    return profile


@store_operation
async def apply_session_delta(db: AsyncSession, user_id: str, duration: int) -> UserProfile:
    """Add ``duration`` minutes to the user's focus total and recompute the level.

    Both columns are computed inside a single UPDATE from the stored total,
    so concurrent session writes for the same user never lose an increment.
    Does not commit.
    """
    await ensure_profile(db, user_id)

    new_total = UserProfile.total_focus + duration
    result = await db.scalars(
        update(UserProfile)
        .where(UserProfile.user_id == user_id)
        .values(total_focus=new_total, level=new_total // MINUTES_PER_LEVEL + 1)
        .returning(UserProfile),
        execution_options={"populate_existing": True},
    )
    profile = result.one()

    if profile.level != compute_level(profile.total_focus - duration):
        logger.info("User %s reached level %d", user_id, profile.level)
    return profile
