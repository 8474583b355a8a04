from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.behaviors import BehaviorType


class BadgeOut(BaseModel):
    id: str
    name: str
    description: str
    image_path: str
    behavior_types: list[BehaviorType]


class GroupAwardRequest(BaseModel):
    group_id: str
    behavior_id: str | None = None
    points: int = Field(..., gt=0)
    praise: str | None = Field(default=None, max_length=512)


class GroupWorkAwardOut(BaseModel):
    id: str
    group_id: str | None
    group_work_id: str | None
    group_name: str
    behavior_id: str | None
    behavior_name: str | None
    points: int
    praise: str
    badge_id: str
    badge_name: str
    awarded_by: str
    created_at: datetime

    model_config = {"from_attributes": True}


class GroupAwardResponse(GroupWorkAwardOut):
    badge: BadgeOut
