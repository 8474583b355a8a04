from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.core.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.class_model import SchoolClass
from app.models.point import Point
from app.models.student import Student
from app.models.teacher import Teacher


def get_owned_class(db: Session, teacher_id: str, class_id: str) -> SchoolClass:
    school_class = db.scalar(
        select(SchoolClass)
        .where(SchoolClass.id == class_id, SchoolClass.teacher_id == teacher_id)
        .options(selectinload(SchoolClass.students))
    )
    if not school_class:
        raise NotFoundError("Class not found or access denied")
    return school_class


def list_classes(db: Session, teacher_id: str) -> list[SchoolClass]:
    rows = db.scalars(
        select(SchoolClass)
        .where(SchoolClass.teacher_id == teacher_id)
        .options(selectinload(SchoolClass.students))
        .order_by(SchoolClass.created_at.desc())
    ).all()
    return list(rows)


def create_class(db: Session, teacher_id: str, name: str, description: str | None = None) -> SchoolClass:
    if not name or not name.strip() or not teacher_id:
        raise ValidationError("Name and teacherId are required")
    if not db.get(Teacher, teacher_id):
        raise NotFoundError("Teacher not found")

    school_class = SchoolClass(name=name.strip(), description=description or None, teacher_id=teacher_id)
    db.add(school_class)
    db.commit()
    return get_owned_class(db, teacher_id, school_class.id)


def update_class(
    db: Session,
    teacher_id: str,
    class_id: str,
    name: str | None = None,
    description: str | None = None,
) -> SchoolClass:
    school_class = get_owned_class(db, teacher_id, class_id)
    if name:
        school_class.name = name.strip()
    if description is not None:
        school_class.description = description or None
    db.add(school_class)
    db.commit()
    return get_owned_class(db, teacher_id, class_id)


def delete_class(db: Session, teacher_id: str, class_id: str) -> None:
    school_class = get_owned_class(db, teacher_id, class_id)
    db.delete(school_class)
    db.commit()


def class_leaderboard(db: Session, teacher_id: str, class_id: str) -> list[Student]:
    get_owned_class(db, teacher_id, class_id)
    rows = db.scalars(
        select(Student).where(Student.class_id == class_id).order_by(Student.points.desc(), Student.name)
    ).all()
    return list(rows)


def list_students(db: Session, teacher_id: str, class_id: str) -> list[Student]:
    return get_owned_class(db, teacher_id, class_id).students


def create_student(db: Session, teacher_id: str, class_id: str, name: str, points: int = 0) -> Student:
    if not name or not name.strip() or not class_id:
        raise ValidationError("Name and class_id are required")
    if points < 0:
        raise ValidationError("Initial points cannot be negative")
    get_owned_class(db, teacher_id, class_id)

    student = Student(name=name.strip(), class_id=class_id, points=points)
    db.add(student)
    if points:
        db.flush()
        db.add(Point(student_id=student.id, points=points, reason="Initial points"))
    db.commit()
    db.refresh(student)
    return student


def get_student_for_teacher(db: Session, teacher_id: str, student_id: str) -> Student:
    student = db.scalar(
        select(Student).where(Student.id == student_id).options(selectinload(Student.school_class))
    )
    if not student:
        raise NotFoundError("Student not found")
    if student.school_class.teacher_id != teacher_id:
        raise ForbiddenError("Access denied")
    return student


def delete_student(db: Session, teacher_id: str, student_id: str) -> None:
    student = get_student_for_teacher(db, teacher_id, student_id)
    db.delete(student)
    db.commit()


def point_history(db: Session, teacher_id: str, student_id: str) -> list[Point]:
    get_student_for_teacher(db, teacher_id, student_id)
    rows = db.scalars(
        select(Point).where(Point.student_id == student_id).order_by(Point.created_at.desc())
    ).all()
    return list(rows)
