from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, field_validator

from classboard.models.common import as_utc


class ActivityCreateRequest(BaseModel):
    # Checked by ClassRegistry, not here.
    title: str | None = None
    description: str | None = None
    due_date: Any = None
    status: str | None = None


class ActivityRecord(BaseModel):
    id: str
    owner_id: str | None = None
    class_id: str
    title: str
    description: str | None = None
    due_date: date | None = None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
