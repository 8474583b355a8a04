"""init schema

Revision ID: 0001_init_schema
Revises:
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = "0001_init_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "teachers",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=512), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_teachers_email", "teachers", ["email"], unique=True)

    op.create_table(
        "classes",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=1024), nullable=True),
        sa.Column("teacher_id", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["teacher_id"], ["teachers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_classes_teacher_id", "classes", ["teacher_id"], unique=False)

    op.create_table(
        "students",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("class_id", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["class_id"], ["classes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_students_class_id", "students", ["class_id"], unique=False)

    op.create_table(
        "behaviors",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("teacher_id", sa.String(length=36), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("behavior_type", sa.String(length=16), nullable=False, server_default="INDIVIDUAL"),
        sa.Column("praise", sa.String(length=512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["teacher_id"], ["teachers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", "teacher_id", name="uq_behaviors_name_teacher"),
    )
    op.create_index("ix_behaviors_teacher_id", "behaviors", ["teacher_id"], unique=False)
    op.create_index("ix_behaviors_behavior_type", "behaviors", ["behavior_type"], unique=False)

    op.create_table(
        "points",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("student_id", sa.String(length=36), nullable=False),
        sa.Column("behavior_id", sa.String(length=36), nullable=True),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("reason", sa.String(length=512), nullable=False),
        sa.Column("behavior_name", sa.String(length=128), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["student_id"], ["students.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["behavior_id"], ["behaviors.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_points_student_id", "points", ["student_id"], unique=False)

    op.create_table(
        "group_works",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("teacher_id", sa.String(length=36), nullable=False),
        sa.Column("class_id", sa.String(length=36), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["teacher_id"], ["teachers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["class_id"], ["classes.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_group_works_teacher_id", "group_works", ["teacher_id"], unique=False)
    op.create_index("ix_group_works_class_id", "group_works", ["class_id"], unique=False)

    op.create_table(
        "groups",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("group_work_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["group_work_id"], ["group_works.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_groups_group_work_id", "groups", ["group_work_id"], unique=False)

    op.create_table(
        "group_memberships",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("group_id", sa.String(length=36), nullable=False),
        sa.Column("student_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["student_id"], ["students.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("group_id", "student_id", name="uq_group_memberships_group_student"),
    )
    op.create_index("ix_group_memberships_group_id", "group_memberships", ["group_id"], unique=False)
    op.create_index("ix_group_memberships_student_id", "group_memberships", ["student_id"], unique=False)

    op.create_table(
        "group_work_behaviors",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("group_work_id", sa.String(length=36), nullable=False),
        sa.Column("behavior_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("praise", sa.String(length=512), nullable=True),
        sa.ForeignKeyConstraint(["group_work_id"], ["group_works.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["behavior_id"], ["behaviors.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("group_work_id", "behavior_id", name="uq_group_work_behaviors_work_behavior"),
    )
    op.create_index("ix_group_work_behaviors_group_work_id", "group_work_behaviors", ["group_work_id"], unique=False)

    op.create_table(
        "group_work_awards",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("group_id", sa.String(length=36), nullable=True),
        sa.Column("group_work_id", sa.String(length=36), nullable=True),
        sa.Column("group_name", sa.String(length=255), nullable=False),
        sa.Column("behavior_id", sa.String(length=36), nullable=True),
        sa.Column("behavior_name", sa.String(length=128), nullable=True),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("praise", sa.String(length=512), nullable=False),
        sa.Column("badge_id", sa.String(length=64), nullable=False),
        sa.Column("badge_name", sa.String(length=128), nullable=False),
        sa.Column("awarded_by", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["group_work_id"], ["group_works.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["behavior_id"], ["behaviors.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["awarded_by"], ["teachers.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_group_work_awards_group_id", "group_work_awards", ["group_id"], unique=False)
    op.create_index("ix_group_work_awards_group_work_id", "group_work_awards", ["group_work_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_group_work_awards_group_work_id", table_name="group_work_awards")
    op.drop_index("ix_group_work_awards_group_id", table_name="group_work_awards")
    op.drop_table("group_work_awards")

    op.drop_index("ix_group_work_behaviors_group_work_id", table_name="group_work_behaviors")
    op.drop_table("group_work_behaviors")

    op.drop_index("ix_group_memberships_student_id", table_name="group_memberships")
    op.drop_index("ix_group_memberships_group_id", table_name="group_memberships")
    op.drop_table("group_memberships")

    op.drop_index("ix_groups_group_work_id", table_name="groups")
    op.drop_table("groups")

    op.drop_index("ix_group_works_class_id", table_name="group_works")
    op.drop_index("ix_group_works_teacher_id", table_name="group_works")
    op.drop_table("group_works")

    op.drop_index("ix_points_student_id", table_name="points")
    op.drop_table("points")

    op.drop_index("ix_behaviors_behavior_type", table_name="behaviors")
    op.drop_index("ix_behaviors_teacher_id", table_name="behaviors")
    op.drop_table("behaviors")

    op.drop_index("ix_students_class_id", table_name="students")
    op.drop_table("students")

    op.drop_index("ix_classes_teacher_id", table_name="classes")
    op.drop_table("classes")

    op.drop_index("ix_teachers_email", table_name="teachers")
    op.drop_table("teachers")
