from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_teacher
from app.db.session import get_db
from app.models.teacher import Teacher
from app.schemas.group_works import (
    GroupLeaderboardEntry,
    GroupWorkCreateRequest,
    GroupWorkOut,
    GroupWorkUpdateRequest,
)
from app.services import group_works as group_work_service

router = APIRouter(prefix="/group-works", tags=["group-works"])


@router.get("", response_model=list[GroupWorkOut])
def list_group_works(db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    return group_work_service.list_group_works(db, teacher.id)


@router.post("", response_model=GroupWorkOut, status_code=status.HTTP_201_CREATED)
def create_group_work(
    payload: GroupWorkCreateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return group_work_service.create_group_work(
        db,
        teacher.id,
        name=payload.name,
        class_id=payload.class_id,
        groups=[group.model_dump() for group in payload.groups],
        behavior_ids=payload.behavior_ids,
        behavior_praises=payload.behavior_praises,
    )


@router.get("/{group_work_id}", response_model=GroupWorkOut)
def get_group_work(group_work_id: str, db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    return group_work_service.get_group_work(db, teacher.id, group_work_id)


@router.put("/{group_work_id}", response_model=GroupWorkOut)
def update_group_work(
    group_work_id: str,
    payload: GroupWorkUpdateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return group_work_service.update_group_work(
        db,
        teacher.id,
        group_work_id,
        name=payload.name,
        groups=[group.model_dump() for group in payload.groups],
        behavior_ids=payload.behavior_ids,
        behavior_praises=payload.behavior_praises,
    )


@router.delete("/{group_work_id}")
def delete_group_work(
    group_work_id: str,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    group_work_service.delete_group_work(db, teacher.id, group_work_id)
    return {"ok": True}


@router.get("/{group_work_id}/leaderboard", response_model=list[GroupLeaderboardEntry])
def group_work_leaderboard(
    group_work_id: str,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return group_work_service.group_work_leaderboard(db, teacher.id, group_work_id)
