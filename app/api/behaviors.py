from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_teacher
from app.db.session import get_db
from app.models.teacher import Teacher
from app.schemas.behaviors import BehaviorCreateRequest, BehaviorOut, BehaviorType, BehaviorUpdateRequest
from app.services import behaviors as behavior_service
from app.services.defaults import list_default_behaviors

router = APIRouter(prefix="/behaviors", tags=["behaviors"])


@router.get("", response_model=list[BehaviorOut])
def list_behaviors(
    behavior_type: BehaviorType | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return behavior_service.list_behaviors(db, teacher.id, behavior_type)


@router.get("/defaults", response_model=list[BehaviorOut])
def list_defaults(
    behavior_type: BehaviorType | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
    _: Teacher = Depends(get_current_teacher),
):
    return list_default_behaviors(db, behavior_type)


@router.post("", response_model=BehaviorOut, status_code=status.HTTP_201_CREATED)
def create_behavior(
    payload: BehaviorCreateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return behavior_service.create_behavior(
        db,
        teacher.id,
        name=payload.name,
        behavior_type=payload.behavior_type,
        praise=payload.praise,
    )


@router.put("/{behavior_id}", response_model=BehaviorOut)
def update_behavior(
    behavior_id: str,
    payload: BehaviorUpdateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return behavior_service.update_behavior(db, teacher.id, behavior_id, name=payload.name, praise=payload.praise)


@router.delete("/{behavior_id}")
def delete_behavior(
    behavior_id: str,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    behavior_service.delete_behavior(db, teacher.id, behavior_id)
    return {"ok": True}
