from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
import sys

from sqlalchemy import select

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from classboard.core.config import get_settings
from classboard.db.session import Database
from classboard.models.teacher import Teacher
from classboard.services.registry import ClassRegistry
from classboard.store.sql import SqlRecordStore


DEMO_CLASSES = [
    {"name": "5º Ano A", "subject": "Matemática", "grade": "5º Ano", "students_count": 25},
    {"name": "6º Ano B", "subject": "Português", "grade": "6º Ano", "students_count": 28},
    {"name": "1ª Série", "subject": "Física", "grade": "Ensino Médio", "students_count": 32},
]

DEMO_ACTIVITIES = [
    ("Prova bimestral", 7),
    ("Lista de exercícios", 3),
]


def main() -> None:
    settings = get_settings()
    database = Database(settings)
    try:
        with database.session() as db:
            teacher = db.scalar(select(Teacher).where(Teacher.email == settings.bootstrap_teacher_email.lower()))
        if not teacher:
            raise RuntimeError("Teacher not found. Run seed_teacher first.")

        registry = ClassRegistry(SqlRecordStore(database), owner_id=teacher.id)
        existing = {record.name for record in registry.list_classes()}
        today = date.today()
        for template in DEMO_CLASSES:
            if template["name"] in existing:
                continue
            record = registry.create_class(template)
            for title, days_ahead in DEMO_ACTIVITIES:
                registry.create_activity(
                    record.id,
                    {"title": title, "due_date": today + timedelta(days=days_ahead)},
                )

        stats = registry.aggregate_stats()
    finally:
        database.dispose()
    print(f"Demo data ready: {stats.classes} classes, {stats.students} students, {stats.activities} activities.")


if __name__ == "__main__":
    main()
