"""Shared default-behavior catalog.

Default rows are Behavior records with ``is_default=True`` and no owning
teacher. Teachers never reference them directly: they get their own editable
copies at registration, and GROUP_WORK defaults added later are propagated
to existing teachers by :func:`propagate_group_defaults`.
"""

import logging
from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.behavior import GROUP_WORK, INDIVIDUAL, Behavior
from app.models.teacher import Teacher

logger = logging.getLogger(__name__)


class DefaultBehavior(NamedTuple):
    name: str
    behavior_type: str
    praise: str | None = None


DEFAULT_BEHAVIORS: tuple[DefaultBehavior, ...] = (
    DefaultBehavior("Participating", INDIVIDUAL),
    DefaultBehavior("Following instruction", INDIVIDUAL),
    DefaultBehavior("Sitting properly", INDIVIDUAL),
    DefaultBehavior("Finish task on time", INDIVIDUAL),
    DefaultBehavior("Listening attentively", INDIVIDUAL),
    DefaultBehavior("Stays in the designated place", INDIVIDUAL),
    DefaultBehavior("Working cooperatively", INDIVIDUAL),
    DefaultBehavior("Working quietly", INDIVIDUAL),
    DefaultBehavior("Collaboration", GROUP_WORK, "Amazing teamwork!"),
    DefaultBehavior("Leadership", GROUP_WORK, "Great job leading your team!"),
    DefaultBehavior("Communication", GROUP_WORK, "You explained your ideas so clearly!"),
    DefaultBehavior("Problem solving", GROUP_WORK, "Brilliant problem solving!"),
    DefaultBehavior("Active participation", GROUP_WORK, "Everyone joined in, well done!"),
    DefaultBehavior("Respectful listening", GROUP_WORK, "Thank you for listening to each other!"),
    DefaultBehavior("Sharing ideas", GROUP_WORK, "What creative ideas!"),
    DefaultBehavior("Supporting teammates", GROUP_WORK, "You helped each other succeed!"),
)


def list_default_behaviors(db: Session, behavior_type: str | None = None) -> list[Behavior]:
    stmt = select(Behavior).where(Behavior.is_default.is_(True), Behavior.teacher_id.is_(None))
    if behavior_type:
        stmt = stmt.where(Behavior.behavior_type == behavior_type)
    return list(db.scalars(stmt.order_by(Behavior.created_at)).all())


def seed_defaults(db: Session) -> int:
    """Upsert the fixed catalog. Returns the number of inserted rows."""
    existing = {behavior.name: behavior for behavior in list_default_behaviors(db)}
    inserted = 0
    for item in DEFAULT_BEHAVIORS:
        behavior = existing.get(item.name)
        if behavior is None:
            db.add(
                Behavior(
                    name=item.name,
                    teacher_id=None,
                    is_default=True,
                    behavior_type=item.behavior_type,
                    praise=item.praise,
                )
            )
            inserted += 1
        else:
            behavior.behavior_type = item.behavior_type
            behavior.praise = item.praise
    db.commit()
    logger.info("Default behavior catalog seeded: %d inserted, %d already present.", inserted, len(existing))
    return inserted


def copy_defaults_to_teacher(db: Session, teacher: Teacher) -> list[Behavior]:
    """Add non-default copies of every default behavior. Caller commits."""
    copies = [
        Behavior(
            name=default.name,
            teacher_id=teacher.id,
            is_default=False,
            behavior_type=default.behavior_type,
            praise=default.praise,
        )
        for default in list_default_behaviors(db)
    ]
    db.add_all(copies)
    return copies


def propagate_group_defaults(db: Session) -> int:
    """Give every teacher the GROUP_WORK defaults they are missing, matched by name."""
    defaults = list_default_behaviors(db, GROUP_WORK)
    if not defaults:
        return 0

    rows = db.execute(
        select(Behavior.teacher_id, Behavior.name).where(
            Behavior.teacher_id.is_not(None),
            Behavior.name.in_([default.name for default in defaults]),
        )
    ).all()
    owned = {(row.teacher_id, row.name) for row in rows}
    created = 0
    for teacher_id in db.scalars(select(Teacher.id)).all():
        for default in defaults:
            if (teacher_id, default.name) in owned:
                continue
            db.add(
                Behavior(
                    name=default.name,
                    teacher_id=teacher_id,
                    is_default=False,
                    behavior_type=default.behavior_type,
                    praise=default.praise,
                )
            )
            created += 1
    db.commit()
    logger.info("Propagated %d GROUP_WORK default behavior copies.", created)
    return created
