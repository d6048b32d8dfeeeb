from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pomodoro.config import settings
from pomodoro.database import store_operation
from pomodoro.models.session import Session
from pomodoro.models.user import UserProfile
from pomodoro.services import profile_service

WINDOW_DAYS = 7

# Fixed labels so output does not depend on the process locale
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def format_day(day: date) -> str:
    """Grouping key stored on every session: ISO ``YYYY-MM-DD``."""
    return day.isoformat()


def weekday_label(day: date) -> str:
    return WEEKDAY_LABELS[day.weekday()]


def local_date(instant: datetime) -> date:
    """Calendar day of ``instant`` in the configured server timezone."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(ZoneInfo(settings.TIMEZONE)).date()


def local_today() -> date:
    return local_date(datetime.now(timezone.utc))


def task_breakdown(sessions: Iterable[Session]) -> list[dict]:
    """Count sessions per task label, in order of each label's first appearance."""
    counts: dict[str, int] = {}
    for s in sessions:
        counts[s.task] = counts.get(s.task, 0) + 1
    return [{"task": task, "count": count} for task, count in counts.items()]


def weekly_data(sessions: Sequence[Session], today: date) -> list[dict]:
    """Per-day totals for the trailing window ending ``today``, oldest day first."""
    by_day: dict[str, list[Session]] = {}
    for s in sessions:
        by_day.setdefault(s.date, []).append(s)

    days = []
    for offset in range(WINDOW_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        day_sessions = by_day.get(format_day(day), [])
        days.append({
            "date": weekday_label(day),
            "iso_date": format_day(day),
            "sessions": len(day_sessions),
            "minutes": sum(s.duration for s in day_sessions),
        })
    return days


def build_stats(sessions: Sequence[Session], profile: UserProfile, today: date) -> dict:
    """Fold a user's sessions and profile into the stats view.

    ``sessions`` order matters only for ``task_breakdown``, which lists tasks
    by first occurrence.
    """
    today_key = format_day(today)
    today_sessions = [s for s in sessions if s.date == today_key]

    return {
        "today_total": sum(s.duration for s in today_sessions),
        "today_sessions": len(today_sessions),
        "weekly_data": weekly_data(sessions, today),
        "total_sessions": len(sessions),
        "task_breakdown": task_breakdown(sessions),
        "user": profile,
    }


@store_operation
async def get_stats(db: AsyncSession, user_id: str) -> dict:
    result = await db.execute(
        select(Session)
        .where(Session.user_id == user_id)
        .order_by(Session.timestamp.asc())
    )
    sessions = list(result.scalars().all())

    # Stats reads never persist a profile
    profile = await profile_service.get_profile(db, user_id)
    if profile is None:
        profile = profile_service.default_profile(user_id)

    return build_stats(sessions, profile, local_today())
