import uuid
from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class SessionCreate(BaseModel):
    task: str = Field(min_length=1, max_length=500)
    duration: int = Field(ge=0)  # minutes
    type: str = Field(default="focus", min_length=1, max_length=50)
    user_id: str | None = Field(default=None, min_length=1, max_length=255)
    timestamp: datetime | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class SessionResponse(BaseModel):
    id: uuid.UUID
    task: str
    duration: int
    type: str
    timestamp: datetime
    date: str
    user_id: str

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}


class MessageResponse(BaseModel):
    message: str
