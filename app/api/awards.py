from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_teacher
from app.db.session import get_db
from app.models.teacher import Teacher
from app.schemas.awards import GroupAwardRequest, GroupAwardResponse, GroupWorkAwardOut
from app.services.awards import award_group_work, list_group_awards

router = APIRouter(prefix="/group-work-awards", tags=["awards"])


@router.post("", response_model=GroupAwardResponse, status_code=status.HTTP_201_CREATED)
def create_award(
    payload: GroupAwardRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    award, badge = award_group_work(
        db,
        teacher.id,
        group_id=payload.group_id,
        points=payload.points,
        behavior_id=payload.behavior_id,
        praise=payload.praise,
    )
    return GroupAwardResponse(**GroupWorkAwardOut.model_validate(award).model_dump(), badge=badge)


@router.get("", response_model=list[GroupWorkAwardOut])
def list_awards(
    group_id: str = Query(...),
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return list_group_awards(db, teacher.id, group_id)
