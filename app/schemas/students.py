from datetime import datetime

from pydantic import BaseModel, Field


class StudentCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    class_id: str
    points: int = Field(default=0, ge=0)


class StudentOut(BaseModel):
    id: str
    name: str
    points: int
    class_id: str
    created_at: datetime

    model_config = {"from_attributes": True}


class PointAwardRequest(BaseModel):
    student_ids: list[str] = Field(..., min_length=1)
    points_to_add: int = Field(..., gt=0)
    reason: str | None = Field(default=None, max_length=512)
    behavior_id: str | None = None
    behavior_name: str | None = Field(default=None, max_length=128)


class PointHistoryItem(BaseModel):
    id: str
    student_id: str
    behavior_id: str | None
    points: int
    reason: str
    behavior_name: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
