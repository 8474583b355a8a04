from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.students import StudentOut


class ClassCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1024)


class ClassUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1024)


class ClassSummary(BaseModel):
    id: str
    name: str
    description: str | None

    model_config = {"from_attributes": True}


class ClassOut(BaseModel):
    id: str
    name: str
    description: str | None
    teacher_id: str
    created_at: datetime
    students: list[StudentOut]

    model_config = {"from_attributes": True}
