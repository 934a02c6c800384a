from collections.abc import Mapping
from typing import Any

from classboard.models.common import new_id, utcnow
from classboard.schemas.activities import ActivityRecord
from classboard.schemas.classes import ClassRecord


class MemoryRecordStore:
    """Process-local store; contents vanish with the process."""

    def __init__(self) -> None:
        self._classes: list[ClassRecord] = []
        self._activities: list[ActivityRecord] = []

    def insert_class(self, fields: Mapping[str, Any]) -> ClassRecord:
        record = ClassRecord(**fields, id=new_id(), created_at=utcnow())
        self._classes.append(record)
        return record.model_copy()

    def insert_activity(self, fields: Mapping[str, Any]) -> ActivityRecord:
        record = ActivityRecord(**fields, id=new_id(), created_at=utcnow())
        self._activities.append(record)
        return record.model_copy()

    def get_class(self, class_id: str) -> ClassRecord | None:
        for record in self._classes:
            if record.id == class_id:
                return record.model_copy()
        return None

    def query_classes(self, owner_id: str | None = None) -> list[ClassRecord]:
        return [
            record.model_copy()
            for record in reversed(self._classes)
            if owner_id is None or record.owner_id == owner_id
        ]

    def query_activities(self, class_id: str) -> list[ActivityRecord]:
        return [record.model_copy() for record in reversed(self._activities) if record.class_id == class_id]

    def close(self) -> None:
        self._classes.clear()
        self._activities.clear()
