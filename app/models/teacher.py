from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, UUIDPrimaryKeyMixin


class Teacher(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "teachers"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(512), nullable=False)

    classes = relationship("SchoolClass", back_populates="teacher")
    behaviors = relationship("Behavior", back_populates="teacher")
