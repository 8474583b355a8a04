from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_teacher
from app.db.session import get_db
from app.models.teacher import Teacher
from app.schemas.students import PointAwardRequest, PointHistoryItem, StudentCreateRequest, StudentOut
from app.services import classes as class_service
from app.services.awards import award_individual_points

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=list[StudentOut])
def list_students(
    class_id: str = Query(...),
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return class_service.list_students(db, teacher.id, class_id)


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentCreateRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return class_service.create_student(db, teacher.id, payload.class_id, name=payload.name, points=payload.points)


@router.put("/points", response_model=list[StudentOut])
def add_points(
    payload: PointAwardRequest,
    db: Session = Depends(get_db),
    teacher: Teacher = Depends(get_current_teacher),
):
    return award_individual_points(
        db,
        teacher.id,
        student_ids=payload.student_ids,
        points_to_add=payload.points_to_add,
        reason=payload.reason,
        behavior_name=payload.behavior_name,
        behavior_id=payload.behavior_id,
    )


@router.get("/{student_id}/points", response_model=list[PointHistoryItem])
def points_history(student_id: str, db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    return class_service.point_history(db, teacher.id, student_id)


@router.delete("/{student_id}")
def delete_student(student_id: str, db: Session = Depends(get_db), teacher: Teacher = Depends(get_current_teacher)):
    class_service.delete_student(db, teacher.id, student_id)
    return {"ok": True}
