from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin


class Point(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "points"

    student_id: Mapped[str] = mapped_column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    behavior_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("behaviors.id", ondelete="SET NULL"), nullable=True)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str] = mapped_column(String(512), nullable=False)
    behavior_name: Mapped[str | None] = mapped_column(String(128), nullable=True)

    student = relationship("Student", back_populates="point_entries")
