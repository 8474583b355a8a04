from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin


class GroupWork(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "group_works"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    teacher_id: Mapped[str] = mapped_column(String(36), ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False, index=True)
    class_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("classes.id", ondelete="SET NULL"), nullable=True, index=True)

    school_class = relationship("SchoolClass")
    groups = relationship(
        "Group",
        back_populates="group_work",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Group.position",
    )
    behaviors = relationship(
        "GroupWorkBehavior",
        back_populates="group_work",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="GroupWorkBehavior.position",
    )


class Group(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "groups"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    group_work_id: Mapped[str] = mapped_column(String(36), ForeignKey("group_works.id", ondelete="CASCADE"), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    group_work = relationship("GroupWork", back_populates="groups")
    members = relationship(
        "GroupMembership",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="GroupMembership.position",
    )


class GroupMembership(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "group_memberships"
    __table_args__ = (UniqueConstraint("group_id", "student_id", name="uq_group_memberships_group_student"),)

    group_id: Mapped[str] = mapped_column(String(36), ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    group = relationship("Group", back_populates="members")
    student = relationship("Student", back_populates="memberships")


class GroupWorkBehavior(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "group_work_behaviors"
    __table_args__ = (UniqueConstraint("group_work_id", "behavior_id", name="uq_group_work_behaviors_work_behavior"),)

    group_work_id: Mapped[str] = mapped_column(String(36), ForeignKey("group_works.id", ondelete="CASCADE"), nullable=False, index=True)
    behavior_id: Mapped[str] = mapped_column(String(36), ForeignKey("behaviors.id", ondelete="CASCADE"), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # overrides Behavior.praise within this activity
    praise: Mapped[str | None] = mapped_column(String(512), nullable=True)

    group_work = relationship("GroupWork", back_populates="behaviors")
    behavior = relationship("Behavior")
