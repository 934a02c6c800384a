import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel

from classboard.core.errors import ClassReferenceError, ValidationError
from classboard.models.activity import ActivityStatus
from classboard.schemas.activities import ActivityRecord
from classboard.schemas.classes import ClassRecord, ClassStats, ClassWithActivities
from classboard.store.base import RecordStore

logger = logging.getLogger(__name__)

MIN_STUDENTS = 1
MAX_STUDENTS = 50

_NAME_MAX_LENGTH = 255
_GRADE_MAX_LENGTH = 64
_COLOR_MAX_LENGTH = 32
_DESCRIPTION_MAX_LENGTH = 2000


def _as_mapping(data: Mapping[str, Any] | BaseModel | None) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def _required_text(data: Mapping[str, Any], field: str, max_length: int = _NAME_MAX_LENGTH) -> str:
    value = data.get(field)
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "is required")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value


def _optional_text(data: Mapping[str, Any], field: str, max_length: int | None = None) -> str | None:
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(field, "must be text")
    value = value.strip()
    if not value:
        return None
    if max_length is not None and len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value


def parse_students_count(value: Any) -> int:
    """Coerce a form value into a student count within the allowed range."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("students_count", "is required")
    if isinstance(value, bool):
        raise ValidationError("students_count", "must be an integer")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError("students_count", "must be an integer") from None
    if not isinstance(value, int):
        raise ValidationError("students_count", "must be an integer")
    if not MIN_STUDENTS <= value <= MAX_STUDENTS:
        raise ValidationError("students_count", f"must be between {MIN_STUDENTS} and {MAX_STUDENTS}")
    return value


def parse_due_date(value: Any) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError("due_date", "must be a date in YYYY-MM-DD format") from None
    raise ValidationError("due_date", "must be a date in YYYY-MM-DD format")


def parse_status(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return ActivityStatus.PENDING.value
    try:
        return ActivityStatus(str(value).strip().lower()).value
    except ValueError:
        allowed = ", ".join(status.value for status in ActivityStatus)
        raise ValidationError("status", f"must be one of: {allowed}") from None


class ClassRegistry:
    """Authoritative view of one teacher's classes and activities.

    Every aggregate is computed from the stored records on read, so counts
    cannot drift from the collections they describe. When ``owner_id`` is
    set, new records are stamped with it and only that owner's classes are
    visible.
    """

    def __init__(self, store: RecordStore, owner_id: str | None = None) -> None:
        self.store = store
        self.owner_id = owner_id

    def create_class(self, data: Mapping[str, Any] | BaseModel) -> ClassRecord:
        fields = _as_mapping(data)
        try:
            values = {
                "name": _required_text(fields, "name"),
                "subject": _required_text(fields, "subject"),
                "grade": _required_text(fields, "grade", _GRADE_MAX_LENGTH),
                "students_count": parse_students_count(fields.get("students_count")),
                "description": _optional_text(fields, "description", _DESCRIPTION_MAX_LENGTH),
                "color": _optional_text(fields, "color", _COLOR_MAX_LENGTH),
                "owner_id": self.owner_id,
            }
        except ValidationError as exc:
            logger.info("Rejected class input: %s", exc)
            raise

        record = self.store.insert_class(values)
        logger.info("Created class %s (%s) for owner %s.", record.id, record.name, record.owner_id)
        return record

    def create_activity(self, class_id: str, data: Mapping[str, Any] | BaseModel) -> ActivityRecord:
        fields = _as_mapping(data)
        try:
            values = {
                "title": _required_text(fields, "title"),
                "description": _optional_text(fields, "description", _DESCRIPTION_MAX_LENGTH),
                "due_date": parse_due_date(fields.get("due_date")),
                "status": parse_status(fields.get("status")),
            }
        except ValidationError as exc:
            logger.info("Rejected activity input for class %s: %s", class_id, exc)
            raise

        if self.get_class(class_id) is None:
            logger.warning("Activity creation refused: class %s does not exist.", class_id)
            raise ClassReferenceError(class_id)

        values["class_id"] = class_id
        values["owner_id"] = self.owner_id
        record = self.store.insert_activity(values)
        logger.info("Created activity %s for class %s.", record.id, class_id)
        return record

    def get_class(self, class_id: str) -> ClassRecord | None:
        record = self.store.get_class(class_id)
        if record is None:
            return None
        if self.owner_id is not None and record.owner_id != self.owner_id:
            return None
        return record

    def list_classes(self) -> list[ClassRecord]:
        return self.store.query_classes(owner_id=self.owner_id)

    def activities_for_class(self, class_id: str) -> list[ActivityRecord]:
        if self.owner_id is not None and self.get_class(class_id) is None:
            return []
        return self.store.query_activities(class_id)

    def classes_with_activities(self) -> list[ClassWithActivities]:
        return [
            ClassWithActivities(**record.model_dump(), activities=self.store.query_activities(record.id))
            for record in self.list_classes()
        ]

    def aggregate_stats(self) -> ClassStats:
        return self.stats_for(self.classes_with_activities())

    @staticmethod
    def stats_for(classes: list[ClassWithActivities]) -> ClassStats:
        return ClassStats(
            classes=len(classes),
            students=sum(item.students_count for item in classes),
            activities=sum(len(item.activities) for item in classes),
        )
