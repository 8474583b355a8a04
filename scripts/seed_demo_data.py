from __future__ import annotations

from pathlib import Path
import sys

from sqlalchemy import select

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.db.session import get_session_factory
from app.models.behavior import GROUP_WORK
from app.models.teacher import Teacher
from app.services.awards import award_individual_points
from app.services.behaviors import list_behaviors
from app.services.classes import create_class, create_student
from app.services.defaults import seed_defaults
from app.services.group_works import create_group_work
from app.services.teachers import register_teacher


DEMO_EMAIL = "demo@classroom.local"
DEMO_PASSWORD = "demo123"
DEMO_STUDENTS = ("Sam", "Alex", "Jordan", "Riley", "Casey", "Morgan")


def main() -> None:
    session_factory = get_session_factory()

    with session_factory() as db:
        seed_defaults(db)
        if db.scalar(select(Teacher).where(Teacher.email == DEMO_EMAIL)):
            print(f"Demo teacher {DEMO_EMAIL} already exists, nothing to do.")
            return

        teacher = register_teacher(db, name="Demo Teacher", email=DEMO_EMAIL, password=DEMO_PASSWORD)
        school_class = create_class(db, teacher.id, name="3B", description="[DEMO] Sample class")
        students = [create_student(db, teacher.id, school_class.id, name) for name in DEMO_STUDENTS]

        award_individual_points(
            db,
            teacher.id,
            [students[0].id, students[1].id],
            points_to_add=3,
            reason="Great focus",
            behavior_name="Listening attentively",
        )

        group_behaviors = list_behaviors(db, teacher.id, GROUP_WORK)[:2]
        create_group_work(
            db,
            teacher.id,
            name="[DEMO] Science Fair",
            class_id=school_class.id,
            groups=[
                {"name": "Team 1", "student_ids": [student.id for student in students[:3]]},
                {"name": "Team 2", "student_ids": [student.id for student in students[3:]]},
            ],
            behavior_ids=[behavior.id for behavior in group_behaviors],
        )

    print(f"Demo data seeded: teacher {DEMO_EMAIL} / {DEMO_PASSWORD}, 1 class, {len(DEMO_STUDENTS)} students, 1 group work.")


if __name__ == "__main__":
    main()
