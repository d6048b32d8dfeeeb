from fastapi import Header

from pomodoro.config import settings


async def get_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> str:
    """Resolve the caller's identity. There is no authentication, so a missing
    or blank header falls back to the configured default user."""
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return settings.DEFAULT_USER_ID
