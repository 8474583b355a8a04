"""Group-work aggregate: a GroupWork with its Groups, memberships and target behaviors.

Children are never diffed. Create inserts the whole aggregate and update
replaces the supplied child collections wholesale; both run inside a single
transaction so a failure leaves no partial aggregate behind.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFoundError, ValidationError
from app.models.behavior import Behavior
from app.models.class_model import SchoolClass
from app.models.group_work import Group, GroupMembership, GroupWork, GroupWorkBehavior
from app.models.group_work_award import GroupWorkAward
from app.models.student import Student
from app.services.classes import get_owned_class

logger = logging.getLogger(__name__)

GroupSpec = Mapping[str, object]


def _hydrated():
    return (
        selectinload(GroupWork.school_class),
        selectinload(GroupWork.groups).selectinload(Group.members).selectinload(GroupMembership.student),
        selectinload(GroupWork.behaviors).selectinload(GroupWorkBehavior.behavior),
    )


def list_group_works(db: Session, teacher_id: str) -> list[GroupWork]:
    rows = db.scalars(
        select(GroupWork)
        .where(GroupWork.teacher_id == teacher_id)
        .options(*_hydrated())
        .order_by(GroupWork.created_at.desc())
    ).all()
    return list(rows)


def get_group_work(db: Session, teacher_id: str, group_work_id: str) -> GroupWork:
    group_work = db.scalar(
        select(GroupWork)
        .where(GroupWork.id == group_work_id, GroupWork.teacher_id == teacher_id)
        .options(*_hydrated())
        .execution_options(populate_existing=True)
    )
    if not group_work:
        raise NotFoundError("Group work not found or access denied")
    return group_work


def _normalize_groups(groups: Sequence[GroupSpec]) -> list[tuple[str, list[str]]]:
    normalized: list[tuple[str, list[str]]] = []
    seen: set[str] = set()
    for group in groups:
        name = str(group.get("name") or "").strip()
        if not name:
            raise ValidationError("Every group needs a name")
        student_ids = list(dict.fromkeys(group.get("student_ids") or ()))
        repeated = seen.intersection(student_ids)
        if repeated:
            raise ValidationError(f"Students assigned to more than one group: {', '.join(sorted(repeated))}")
        seen.update(student_ids)
        normalized.append((name, student_ids))
    return normalized


def _check_students(db: Session, teacher_id: str, class_id: str | None, student_ids: Iterable[str]) -> None:
    wanted = set(student_ids)
    if not wanted:
        return
    stmt = select(Student.id).join(SchoolClass).where(Student.id.in_(wanted), SchoolClass.teacher_id == teacher_id)
    if class_id:
        stmt = stmt.where(Student.class_id == class_id)
    unknown = wanted - set(db.scalars(stmt).all())
    if unknown:
        raise ValidationError(f"Students do not belong to this class: {', '.join(sorted(unknown))}")


def _check_behaviors(db: Session, teacher_id: str, behavior_ids: Sequence[str]) -> list[str]:
    unique_ids = list(dict.fromkeys(behavior_ids))
    if not unique_ids:
        return unique_ids
    owned = set(
        db.scalars(select(Behavior.id).where(Behavior.id.in_(unique_ids), Behavior.teacher_id == teacher_id)).all()
    )
    missing = [behavior_id for behavior_id in unique_ids if behavior_id not in owned]
    if missing:
        raise NotFoundError(f"Behavior not found or access denied: {', '.join(missing)}")
    return unique_ids


def _add_groups(db: Session, group_work_id: str, groups: list[tuple[str, list[str]]]) -> None:
    for position, (name, student_ids) in enumerate(groups):
        group = Group(name=name, group_work_id=group_work_id, position=position)
        group.members = [
            GroupMembership(student_id=student_id, position=index) for index, student_id in enumerate(student_ids)
        ]
        db.add(group)


def _add_behaviors(
    db: Session,
    group_work_id: str,
    behavior_ids: list[str],
    behavior_praises: Mapping[str, str | None] | None,
) -> None:
    praises = behavior_praises or {}
    for position, behavior_id in enumerate(behavior_ids):
        praise = (praises.get(behavior_id) or "").strip() or None
        db.add(
            GroupWorkBehavior(group_work_id=group_work_id, behavior_id=behavior_id, praise=praise, position=position)
        )


def create_group_work(
    db: Session,
    teacher_id: str,
    name: str,
    class_id: str,
    groups: Sequence[GroupSpec],
    behavior_ids: Sequence[str],
    behavior_praises: Mapping[str, str | None] | None = None,
) -> GroupWork:
    missing = [
        field
        for field, value in (
            ("name", (name or "").strip()),
            ("class_id", class_id),
            ("groups", groups),
            ("behavior_ids", behavior_ids),
        )
        if value is None or value == ""
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    get_owned_class(db, teacher_id, class_id)
    normalized = _normalize_groups(groups)
    _check_students(db, teacher_id, class_id, (sid for _, ids in normalized for sid in ids))
    unique_behavior_ids = _check_behaviors(db, teacher_id, behavior_ids)

    try:
        group_work = GroupWork(name=name.strip(), teacher_id=teacher_id, class_id=class_id)
        db.add(group_work)
        db.flush()
        _add_groups(db, group_work.id, normalized)
        _add_behaviors(db, group_work.id, unique_behavior_ids, behavior_praises)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Created group work %s with %d group(s) and %d behavior(s).",
        group_work.id,
        len(normalized),
        len(unique_behavior_ids),
    )
    return get_group_work(db, teacher_id, group_work.id)


def update_group_work(
    db: Session,
    teacher_id: str,
    group_work_id: str,
    name: str | None = None,
    groups: Sequence[GroupSpec] | None = None,
    behavior_ids: Sequence[str] | None = None,
    behavior_praises: Mapping[str, str | None] | None = None,
) -> GroupWork:
    """Rebuild the aggregate from the payload.

    Every group, membership and behavior link is deleted and recreated from
    ``groups`` and ``behavior_ids``; an omitted collection ends up empty.
    Replaced groups get new ids, so earlier awards keep only their name snapshot.
    """
    group_work = db.scalar(
        select(GroupWork).where(GroupWork.id == group_work_id, GroupWork.teacher_id == teacher_id)
    )
    if not group_work:
        raise NotFoundError("Group work not found or access denied")

    normalized = _normalize_groups(groups or ())
    _check_students(db, teacher_id, group_work.class_id, (sid for _, ids in normalized for sid in ids))
    unique_behavior_ids = _check_behaviors(db, teacher_id, behavior_ids or ())

    try:
        if name and name.strip():
            group_work.name = name.strip()
            db.add(group_work)

        old_group_ids = select(Group.id).where(Group.group_work_id == group_work_id)
        db.execute(
            delete(GroupMembership).where(GroupMembership.group_id.in_(old_group_ids)),
            execution_options={"synchronize_session": False},
        )
        db.execute(
            delete(Group).where(Group.group_work_id == group_work_id),
            execution_options={"synchronize_session": False},
        )
        db.execute(
            delete(GroupWorkBehavior).where(GroupWorkBehavior.group_work_id == group_work_id),
            execution_options={"synchronize_session": False},
        )
        _add_groups(db, group_work_id, normalized)
        _add_behaviors(db, group_work_id, unique_behavior_ids, behavior_praises)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Updated group work %s: %d group(s), %d behavior(s).",
        group_work_id,
        len(normalized),
        len(unique_behavior_ids),
    )
    return get_group_work(db, teacher_id, group_work_id)


def delete_group_work(db: Session, teacher_id: str, group_work_id: str) -> None:
    group_work = get_group_work(db, teacher_id, group_work_id)
    db.delete(group_work)
    db.commit()
    logger.info("Deleted group work %s.", group_work_id)


def group_work_leaderboard(db: Session, teacher_id: str, group_work_id: str) -> list[dict]:
    group_work = get_group_work(db, teacher_id, group_work_id)
    totals = {
        row.group_id: (row.total_points, row.awards_count)
        for row in db.execute(
            select(
                GroupWorkAward.group_id,
                func.coalesce(func.sum(GroupWorkAward.points), 0).label("total_points"),
                func.count(GroupWorkAward.id).label("awards_count"),
            )
            .where(GroupWorkAward.group_work_id == group_work_id, GroupWorkAward.group_id.is_not(None))
            .group_by(GroupWorkAward.group_id)
        ).all()
    }
    entries = [
        {
            "group_id": group.id,
            "group_name": group.name,
            "total_points": int(totals.get(group.id, (0, 0))[0]),
            "awards_count": int(totals.get(group.id, (0, 0))[1]),
        }
        for group in group_work.groups
    ]
    return sorted(entries, key=lambda entry: -entry["total_points"])
