import uuid

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class UserProfileResponse(BaseModel):
    id: uuid.UUID | None  # None for a default profile that was never stored
    user_id: str
    name: str
    total_focus: int
    streak: int
    level: int

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}
