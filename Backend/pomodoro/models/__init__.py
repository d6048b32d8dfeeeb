from pomodoro.models.base import Base
from pomodoro.models.session import Session
from pomodoro.models.user import UserProfile

__all__ = [
    "Base",
    "Session",
    "UserProfile",
]
