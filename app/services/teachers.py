import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import AuthError, ConflictError, ValidationError
from app.core.security import hash_password, verify_password
from app.models.teacher import Teacher
from app.services.defaults import copy_defaults_to_teacher

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def register_teacher(db: Session, name: str, email: str, password: str) -> Teacher:
    if not name or not email or not password:
        raise ValidationError("Name, email, and password are required")

    email = _normalize_email(email)
    if db.scalar(select(Teacher).where(Teacher.email == email)):
        raise ConflictError("Teacher with this email already exists")

    teacher = Teacher(name=name.strip(), email=email, password_hash=hash_password(password))
    db.add(teacher)
    db.flush()
    copies = copy_defaults_to_teacher(db, teacher)
    db.commit()
    db.refresh(teacher)
    logger.info("Registered teacher %s with %d default behaviors.", teacher.id, len(copies))
    return teacher


def authenticate_teacher(db: Session, email: str, password: str) -> Teacher:
    teacher = db.scalar(select(Teacher).where(Teacher.email == _normalize_email(email)))
    if not teacher or not verify_password(password, teacher.password_hash):
        raise AuthError("Invalid credentials")
    return teacher
