from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin

INDIVIDUAL = "INDIVIDUAL"
GROUP_WORK = "GROUP_WORK"
BEHAVIOR_TYPES = (INDIVIDUAL, GROUP_WORK)


class Behavior(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "behaviors"
    __table_args__ = (UniqueConstraint("name", "teacher_id", name="uq_behaviors_name_teacher"),)

    name: Mapped[str] = mapped_column(String(128), nullable=False)
    # NULL for rows of the shared default catalog
    teacher_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("teachers.id", ondelete="CASCADE"), nullable=True, index=True)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    behavior_type: Mapped[str] = mapped_column(String(16), nullable=False, default=INDIVIDUAL, index=True)
    praise: Mapped[str | None] = mapped_column(String(512), nullable=True)

    teacher = relationship("Teacher", back_populates="behaviors")
