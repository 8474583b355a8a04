from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_teacher
from app.db.session import get_db
from app.models.teacher import Teacher
from app.schemas.classes import ClassCreateRequest, ClassOut, ClassUpdateRequest
from app.schemas.students import StudentOut
from app.services import classes as class_service

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=list[ClassOut])
def list_classes(db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    return class_service.list_classes(db, teacher.id)


@router.post("", response_model=ClassOut, status_code=status.HTTP_201_CREATED)
def create_class(
    payload: ClassCreateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return class_service.create_class(db, teacher.id, name=payload.name, description=payload.description)


@router.get("/{class_id}", response_model=ClassOut)
def get_class(class_id: str, db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    return class_service.get_owned_class(db, teacher.id, class_id)


@router.put("/{class_id}", response_model=ClassOut)
def update_class(
    class_id: str,
    payload: ClassUpdateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return class_service.update_class(db, teacher.id, class_id, name=payload.name, description=payload.description)


@router.delete("/{class_id}")
def delete_class(class_id: str, db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    class_service.delete_class(db, teacher.id, class_id)
    return {"ok": True}


@router.get("/{class_id}/leaderboard", response_model=list[StudentOut])
def class_leaderboard(class_id: str, db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    return class_service.class_leaderboard(db, teacher.id, class_id)
