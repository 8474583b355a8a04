from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.db.session import get_db
from app.models.class_model import SchoolClass
from app.models.student import Student
from app.models.teacher import Teacher

router = APIRouter(tags=["system"])


@router.get("/health")
def health():
    settings = get_settings()
    return {"status": "ok", "version": settings.app_version}


@router.get("/system/info")
def system_info(db: Session = Depends(get_db)):
    settings = get_settings()
    return {
        "app_name": settings.app_name,
        "app_env": settings.app_env,
        "app_version": settings.app_version,
        "teachers": db.scalar(select(func.count()).select_from(Teacher)) or 0,
        "classes": db.scalar(select(func.count()).select_from(SchoolClass)) or 0,
        "students": db.scalar(select(func.count()).select_from(Student)) or 0,
    }
