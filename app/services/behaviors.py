import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from app.models.behavior import BEHAVIOR_TYPES, Behavior
from app.models.teacher import Teacher

logger = logging.getLogger(__name__)


def _clean_praise(praise: str | None) -> str | None:
    if praise is None:
        return None
    return praise.strip() or None


def _ensure_name_free(db: Session, teacher_id: str, name: str, exclude_id: str | None = None) -> None:
    stmt = select(Behavior.id).where(Behavior.teacher_id == teacher_id, Behavior.name == name)
    if exclude_id:
        stmt = stmt.where(Behavior.id != exclude_id)
    if db.scalar(stmt):
        raise ConflictError(f"Behavior '{name}' already exists")


def list_behaviors(db: Session, teacher_id: str, behavior_type: str | None = None) -> list[Behavior]:
    stmt = select(Behavior).where(Behavior.teacher_id == teacher_id)
    if behavior_type:
        stmt = stmt.where(Behavior.behavior_type == behavior_type)
    return list(db.scalars(stmt.order_by(Behavior.created_at)).all())


def get_owned_behavior(db: Session, teacher_id: str, behavior_id: str) -> Behavior:
    behavior = db.scalar(select(Behavior).where(Behavior.id == behavior_id, Behavior.teacher_id == teacher_id))
    if not behavior:
        raise NotFoundError("Behavior not found or access denied")
    return behavior


def create_behavior(
    db: Session,
    teacher_id: str,
    name: str,
    behavior_type: str = "INDIVIDUAL",
    praise: str | None = None,
) -> Behavior:
    name = (name or "").strip()
    if not name or not teacher_id:
        raise ValidationError("Name and teacherId are required")
    if behavior_type not in BEHAVIOR_TYPES:
        raise ValidationError(f"behaviorType must be one of {', '.join(BEHAVIOR_TYPES)}")
    if not db.get(Teacher, teacher_id):
        raise NotFoundError("Teacher not found")

    _ensure_name_free(db, teacher_id, name)
    behavior = Behavior(
        name=name,
        teacher_id=teacher_id,
        is_default=False,
        behavior_type=behavior_type,
        praise=_clean_praise(praise),
    )
    db.add(behavior)
    db.commit()
    db.refresh(behavior)
    return behavior


def update_behavior(
    db: Session,
    teacher_id: str,
    behavior_id: str,
    name: str | None = None,
    praise: str | None = None,
) -> Behavior:
    behavior = get_owned_behavior(db, teacher_id, behavior_id)

    if name is not None and name.strip() and name.strip() != behavior.name:
        _ensure_name_free(db, teacher_id, name.strip(), exclude_id=behavior.id)
        behavior.name = name.strip()
    if praise is not None:
        behavior.praise = _clean_praise(praise)

    db.add(behavior)
    db.commit()
    db.refresh(behavior)
    return behavior


def delete_behavior(db: Session, teacher_id: str, behavior_id: str) -> None:
    behavior = db.get(Behavior, behavior_id)
    if not behavior:
        raise NotFoundError("Behavior not found")
    if behavior.is_default:
        raise ForbiddenError("Default behaviors cannot be deleted")
    if behavior.teacher_id != teacher_id:
        raise ForbiddenError("Access denied")

    db.delete(behavior)
    db.commit()
    logger.info("Teacher %s deleted behavior %s.", teacher_id, behavior_id)
