from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

BehaviorType = Literal["INDIVIDUAL", "GROUP_WORK"]


class BehaviorCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    behavior_type: BehaviorType = "INDIVIDUAL"
    praise: str | None = Field(default=None, max_length=512)


class BehaviorUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=128)
    praise: str | None = Field(default=None, max_length=512)


class BehaviorOut(BaseModel):
    id: str
    name: str
    teacher_id: str | None
    is_default: bool
    behavior_type: str
    praise: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
