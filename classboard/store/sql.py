import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from classboard.core.errors import StoreError
from classboard.db.session import Database
from classboard.models.activity import Activity
from classboard.models.class_model import SchoolClass
from classboard.schemas.activities import ActivityRecord
from classboard.schemas.classes import ClassRecord

logger = logging.getLogger(__name__)


class SqlRecordStore:
    """RecordStore backed by the relational schema in ``classboard.models``."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def insert_class(self, fields: Mapping[str, Any]) -> ClassRecord:
        return ClassRecord.model_validate(self._insert(SchoolClass(**fields)))

    def insert_activity(self, fields: Mapping[str, Any]) -> ActivityRecord:
        return ActivityRecord.model_validate(self._insert(Activity(**fields)))

    def get_class(self, class_id: str) -> ClassRecord | None:
        with self.database.session() as db:
            try:
                school_class = db.get(SchoolClass, class_id)
            except SQLAlchemyError as exc:
                logger.exception("Failed to load class %s.", class_id)
                raise StoreError("failed to load class") from exc
            if school_class is None:
                return None
            return ClassRecord.model_validate(school_class)

    def query_classes(self, owner_id: str | None = None) -> list[ClassRecord]:
        query = select(SchoolClass).order_by(SchoolClass.created_at.desc(), SchoolClass.id.desc())
        if owner_id is not None:
            query = query.where(SchoolClass.owner_id == owner_id)
        with self.database.session() as db:
            try:
                rows = db.scalars(query).all()
            except SQLAlchemyError as exc:
                logger.exception("Failed to query classes.")
                raise StoreError("failed to query classes") from exc
            return [ClassRecord.model_validate(row) for row in rows]

    def query_activities(self, class_id: str) -> list[ActivityRecord]:
        query = (
            select(Activity)
            .where(Activity.class_id == class_id)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
        )
        with self.database.session() as db:
            try:
                rows = db.scalars(query).all()
            except SQLAlchemyError as exc:
                logger.exception("Failed to query activities for class %s.", class_id)
                raise StoreError("failed to query activities") from exc
            return [ActivityRecord.model_validate(row) for row in rows]

    def close(self) -> None:
        # The Database handle belongs to the application and is disposed there.
        return None

    def _insert(self, row):
        with self.database.session() as db:
            try:
                db.add(row)
                db.commit()
                db.refresh(row)
            except SQLAlchemyError as exc:
                db.rollback()
                logger.exception("Failed to insert into %s.", row.__tablename__)
                raise StoreError(f"failed to insert into {row.__tablename__}") from exc
            return row
