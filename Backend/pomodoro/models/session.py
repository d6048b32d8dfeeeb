from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pomodoro.models.base import Base


class Session(Base):
    __tablename__ = "sessions"

    task: Mapped[str] = mapped_column(String(500), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="focus")
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    # Calendar day (YYYY-MM-DD) of the creation instant in the server timezone
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
