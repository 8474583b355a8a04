"""Point awards for students and group-work teams.

Every award updates ``Student.points`` with an atomic increment and writes the
matching Point ledger rows in the same transaction, so a student's balance
always equals the sum of their ledger.
"""

import logging
import random
from collections.abc import Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from app.core.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.behavior import GROUP_WORK, Behavior
from app.models.group_work import Group, GroupWork
from app.models.group_work_award import GroupWorkAward
from app.models.point import Point
from app.models.student import Student
from app.schemas.awards import BadgeOut
from app.services.badges import pick_random_badge

logger = logging.getLogger(__name__)

FALLBACK_PRAISE = "Great work!"
DEFAULT_REASON = "Points added"
GROUP_WORK_LABEL = "Group work"


def _credit_students(
    db: Session,
    student_ids: Sequence[str],
    points: int,
    reason: str,
    behavior_id: str | None,
    behavior_name: str | None,
) -> None:
    db.execute(
        update(Student)
        .where(Student.id.in_(student_ids))
        .values(points=Student.points + points)
        .execution_options(synchronize_session=False)
    )
    for student_id in student_ids:
        db.add(
            Point(
                student_id=student_id,
                behavior_id=behavior_id,
                points=points,
                reason=reason,
                behavior_name=behavior_name,
            )
        )


def _validate_points(points) -> None:
    if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
        raise ValidationError("Points must be a positive integer")


def award_individual_points(
    db: Session,
    teacher_id: str,
    student_ids: Sequence[str],
    points_to_add: int,
    reason: str | None = None,
    behavior_name: str | None = None,
    behavior_id: str | None = None,
) -> list[Student]:
    if not student_ids:
        raise ValidationError("Student IDs array is required")
    _validate_points(points_to_add)
    if not teacher_id:
        raise ValidationError("Teacher ID is required")

    unique_ids = list(dict.fromkeys(student_ids))
    students = {
        student.id: student
        for student in db.scalars(
            select(Student).where(Student.id.in_(unique_ids)).options(selectinload(Student.school_class))
        ).all()
    }
    missing = [student_id for student_id in unique_ids if student_id not in students]
    if missing:
        raise NotFoundError(f"Students not found: {', '.join(missing)}")
    if any(student.school_class.teacher_id != teacher_id for student in students.values()):
        raise ForbiddenError("Access denied to some students")

    if behavior_id:
        behavior = db.scalar(select(Behavior).where(Behavior.id == behavior_id, Behavior.teacher_id == teacher_id))
        if not behavior:
            raise NotFoundError("Behavior not found or access denied")
        behavior_name = behavior_name or behavior.name

    try:
        _credit_students(db, unique_ids, points_to_add, reason or DEFAULT_REASON, behavior_id, behavior_name)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Teacher %s awarded %d point(s) to %d student(s).", teacher_id, points_to_add, len(unique_ids))
    updated = db.scalars(select(Student).where(Student.id.in_(unique_ids)).execution_options(populate_existing=True)).all()
    by_id = {student.id: student for student in updated}
    return [by_id[student_id] for student_id in unique_ids]


def resolve_praise(group_work: GroupWork, behavior_id: str | None, praise: str | None) -> str:
    """Activity-specific praise wins over the caller's text, then the fallback."""
    if behavior_id:
        link = next((item for item in group_work.behaviors if item.behavior_id == behavior_id), None)
        if link is not None and link.praise:
            return link.praise
    if praise and praise.strip():
        return praise.strip()
    return FALLBACK_PRAISE


def _get_owned_group(db: Session, teacher_id: str, group_id: str) -> Group:
    group = db.scalar(
        select(Group)
        .where(Group.id == group_id)
        .options(
            selectinload(Group.group_work).selectinload(GroupWork.behaviors),
            selectinload(Group.members),
        )
    )
    if not group or group.group_work.teacher_id != teacher_id:
        raise NotFoundError("Group not found")
    return group


def award_group_work(
    db: Session,
    teacher_id: str,
    group_id: str,
    points: int,
    behavior_id: str | None = None,
    praise: str | None = None,
    rng: random.Random | None = None,
) -> tuple[GroupWorkAward, BadgeOut]:
    if not group_id or not teacher_id:
        raise ValidationError("Group ID, points, and teacher ID are required")
    _validate_points(points)

    group = _get_owned_group(db, teacher_id, group_id)
    group_work = group.group_work

    behavior = None
    if behavior_id:
        behavior = db.scalar(select(Behavior).where(Behavior.id == behavior_id, Behavior.teacher_id == teacher_id))
        if not behavior:
            raise NotFoundError("Behavior not found or access denied")

    final_praise = resolve_praise(group_work, behavior_id, praise)
    badge = pick_random_badge(behavior.behavior_type if behavior else GROUP_WORK, rng)
    member_ids = [member.student_id for member in group.members]

    try:
        award = GroupWorkAward(
            group_id=group.id,
            group_work_id=group_work.id,
            group_name=group.name,
            behavior_id=behavior.id if behavior else None,
            behavior_name=behavior.name if behavior else None,
            points=points,
            praise=final_praise,
            badge_id=badge.id,
            badge_name=badge.name,
            awarded_by=teacher_id,
        )
        db.add(award)
        if member_ids:
            _credit_students(
                db,
                member_ids,
                points,
                reason=f"Group work: {group_work.name} - {final_praise}",
                behavior_id=behavior.id if behavior else None,
                behavior_name=behavior.name if behavior else GROUP_WORK_LABEL,
            )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(award)
    logger.info(
        "Group %s awarded %d point(s) with badge %s; %d member(s) credited.",
        group.id,
        points,
        badge.id,
        len(member_ids),
    )
    return award, badge


def list_group_awards(db: Session, teacher_id: str, group_id: str) -> list[GroupWorkAward]:
    _get_owned_group(db, teacher_id, group_id)
    rows = db.scalars(
        select(GroupWorkAward)
        .where(GroupWorkAward.group_id == group_id)
        .order_by(GroupWorkAward.created_at.desc())
    ).all()
    return list(rows)
