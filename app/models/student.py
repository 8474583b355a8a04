from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin


class Student(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # running total, kept equal to the sum of this student's Point rows
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    class_id: Mapped[str] = mapped_column(String(36), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)

    school_class = relationship("SchoolClass", back_populates="students")
    point_entries = relationship("Point", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    memberships = relationship("GroupMembership", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
