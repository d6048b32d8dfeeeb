from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from pomodoro.schemas.user import UserProfileResponse

_camel = {"alias_generator": to_camel, "populate_by_name": True}


class WeeklyEntry(BaseModel):
    date: str  # short weekday label, e.g. "Mon"
    iso_date: str
    sessions: int
    minutes: int

    model_config = _camel


class TaskCount(BaseModel):
    task: str
    count: int


class StatsResponse(BaseModel):
    today_total: int
    today_sessions: int
    weekly_data: list[WeeklyEntry]
    total_sessions: int
    task_breakdown: list[TaskCount]
    user: UserProfileResponse

    model_config = _camel
