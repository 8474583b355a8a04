from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.behaviors import BehaviorOut
from app.schemas.classes import ClassSummary
from app.schemas.students import StudentOut


class GroupPayload(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    student_ids: list[str] = Field(default_factory=list)


class GroupWorkCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    class_id: str
    groups: list[GroupPayload]
    behavior_ids: list[str]
    behavior_praises: dict[str, str | None] | None = None


class GroupWorkUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    groups: list[GroupPayload] = Field(default_factory=list)
    behavior_ids: list[str] = Field(default_factory=list)
    behavior_praises: dict[str, str | None] | None = None


class GroupMemberOut(BaseModel):
    student_id: str
    student: StudentOut

    model_config = {"from_attributes": True}


class GroupOut(BaseModel):
    id: str
    name: str
    position: int
    members: list[GroupMemberOut]

    model_config = {"from_attributes": True}


class GroupWorkBehaviorOut(BaseModel):
    behavior_id: str
    praise: str | None
    behavior: BehaviorOut

    model_config = {"from_attributes": True}


class GroupWorkOut(BaseModel):
    id: str
    name: str
    teacher_id: str
    class_id: str | None
    created_at: datetime
    school_class: ClassSummary | None
    groups: list[GroupOut]
    behaviors: list[GroupWorkBehaviorOut]

    model_config = {"from_attributes": True}


class GroupLeaderboardEntry(BaseModel):
    group_id: str
    group_name: str
    total_points: int
    awards_count: int
