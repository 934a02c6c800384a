from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from classboard.schemas.activities import ActivityRecord
from classboard.schemas.classes import ClassRecord


@runtime_checkable
class RecordStore(Protocol):
    """Backing store for classes and activities.

    Inserts assign ``id`` and ``created_at`` and return the stored record.
    Queries return records most-recently-created first. Implementations raise
    ``StoreError`` for transport or storage failures.
    """

    def insert_class(self, fields: Mapping[str, Any]) -> ClassRecord: ...

    def insert_activity(self, fields: Mapping[str, Any]) -> ActivityRecord: ...

    def get_class(self, class_id: str) -> ClassRecord | None: ...

    def query_classes(self, owner_id: str | None = None) -> list[ClassRecord]: ...

    def query_activities(self, class_id: str) -> list[ActivityRecord]: ...

    def close(self) -> None: ...
