from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin


class GroupWorkAward(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "group_work_awards"

    # group and activity links are nulled when a roster edit or delete removes them;
    # the *_name snapshots keep the history readable
    group_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("groups.id", ondelete="SET NULL"), nullable=True, index=True)
    group_work_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("group_works.id", ondelete="SET NULL"), nullable=True, index=True)
    group_name: Mapped[str] = mapped_column(String(255), nullable=False)
    behavior_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("behaviors.id", ondelete="SET NULL"), nullable=True)
    behavior_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    praise: Mapped[str] = mapped_column(String(512), nullable=False)
    badge_id: Mapped[str] = mapped_column(String(64), nullable=False)
    badge_name: Mapped[str] = mapped_column(String(128), nullable=False)
    awarded_by: Mapped[str] = mapped_column(String(36), ForeignKey("teachers.id", ondelete="RESTRICT"), nullable=False)

    behavior = relationship("Behavior")
