from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pomodoro.models.base import Base


class UserProfile(Base):
    __tablename__ = "user_profiles"

    user_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="Guest")
    total_focus: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # never updated
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
