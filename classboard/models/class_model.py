from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classboard.db.base import Base
from classboard.models.common import CreatedAtMixin, OwnedMixin, UUIDPrimaryKeyMixin


class SchoolClass(UUIDPrimaryKeyMixin, CreatedAtMixin, OwnedMixin, Base):
    __tablename__ = "classes"
    __table_args__ = (
        CheckConstraint("students_count >= 1 AND students_count <= 50", name="ck_classes_students_count_range"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    grade: Mapped[str] = mapped_column(String(64), nullable=False)
    students_count: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # No stored activity counter: counts are always derived from this relationship's rows.
    activities = relationship("Activity", back_populates="school_class", cascade="all, delete-orphan")
    owner = relationship("Teacher", back_populates="classes")
