from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator

from classboard.models.common import as_utc
from classboard.schemas.activities import ActivityRecord


class ClassCreateRequest(BaseModel):
    # Checked by ClassRegistry, not here.
    name: str | None = None
    subject: str | None = None
    grade: str | None = None
    students_count: Any = None
    description: str | None = None
    color: str | None = None


class ClassRecord(BaseModel):
    id: str
    owner_id: str | None = None
    name: str
    subject: str
    grade: str
    students_count: int
    description: str | None = None
    color: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ClassWithActivities(ClassRecord):
    activities: list[ActivityRecord] = Field(default_factory=list)

    @computed_field
    @property
    def activities_count(self) -> int:
        return len(self.activities)


class ClassStats(BaseModel):
    classes: int
    students: int
    activities: int


class DashboardOut(BaseModel):
    stats: ClassStats
    classes: list[ClassWithActivities]
