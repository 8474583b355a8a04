from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin


class SchoolClass(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "classes"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    teacher_id: Mapped[str] = mapped_column(String(36), ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False, index=True)

    teacher = relationship("Teacher", back_populates="classes")
    students = relationship(
        "Student",
        back_populates="school_class",
        cascade="all, delete-orphan",
        order_by="Student.created_at.desc()",
    )
