from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_teacher
from app.core.security import issue_token
from app.db.session import get_db
from app.models.teacher import Teacher
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, TeacherOut
from app.services.teachers import authenticate_teacher, register_teacher

router = APIRouter(prefix="/teachers", tags=["teachers"])


def _auth_response(teacher: Teacher) -> AuthResponse:
    return AuthResponse(
        teacher=TeacherOut.model_validate(teacher),
        token=issue_token(teacher.id, teacher.email),
    )


@router.post("", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    teacher = register_teacher(db, name=payload.name, email=payload.email, password=payload.password)
    return _auth_response(teacher)


@router.put("", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    teacher = authenticate_teacher(db, email=payload.email, password=payload.password)
    return _auth_response(teacher)


@router.get("/me", response_model=TeacherOut)
def me(teacher: Teacher = Depends(get_current_teacher)):
    return teacher
