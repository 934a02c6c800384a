from datetime import date
from enum import StrEnum

from sqlalchemy import CheckConstraint, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classboard.db.base import Base
from classboard.models.common import CreatedAtMixin, OwnedMixin, UUIDPrimaryKeyMixin


class ActivityStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Activity(UUIDPrimaryKeyMixin, CreatedAtMixin, OwnedMixin, Base):
    __tablename__ = "activities"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'completed', 'cancelled')", name="ck_activities_status"),
    )

    class_id: Mapped[str] = mapped_column(String(36), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=ActivityStatus.PENDING.value)

    school_class = relationship("SchoolClass", back_populates="activities")
