from datetime import date, timedelta

import pytest

from classboard.core.errors import ClassReferenceError, StoreError, ValidationError
from classboard.schemas.classes import ClassCreateRequest
from classboard.services.registry import ClassRegistry
from classboard.store.memory import MemoryRecordStore
from classboard.store.sql import SqlRecordStore


def _class_input(name: str = "5º Ano A", students_count: int = 25, **overrides):
    data = {"name": name, "subject": "Matemática", "grade": "5º Ano", "students_count": students_count}
    data.update(overrides)
    return data


def test_create_class_then_list_returns_it_first(store):
    registry = ClassRegistry(store)
    first = registry.create_class(_class_input("5º Ano A"))
    second = registry.create_class(_class_input("5º Ano B"))

    classes = registry.list_classes()
    assert [record.id for record in classes] == [second.id, first.id]
    assert classes[0].name == "5º Ano B"


def test_full_dashboard_scenario(store):
    registry = ClassRegistry(store)
    created = registry.create_class(_class_input("5º Ano A", 25))

    classes = registry.list_classes()
    assert len(classes) == 1
    assert classes[0].students_count == 25
    assert registry.activities_for_class(created.id) == []

    activity = registry.create_activity(created.id, {"title": "Prova"})
    activities = registry.activities_for_class(created.id)
    assert [item.id for item in activities] == [activity.id]
    assert activities[0].status == "pending"

    stats = registry.aggregate_stats()
    assert (stats.classes, stats.students, stats.activities) == (1, 25, 1)


def test_activity_for_unknown_class_is_rejected_without_insert(store):
    registry = ClassRegistry(store)

    with pytest.raises(ClassReferenceError) as exc_info:
        registry.create_activity("nonexistent-id", {"title": "X"})

    assert exc_info.value.class_id == "nonexistent-id"
    assert registry.aggregate_stats().activities == 0
    assert store.query_activities("nonexistent-id") == []


def test_blank_class_name_is_rejected(store):
    registry = ClassRegistry(store)

    with pytest.raises(ValidationError) as exc_info:
        registry.create_class({"name": "", "students_count": 10})

    assert exc_info.value.field == "name"
    assert registry.list_classes() == []


@pytest.mark.parametrize("students_count", [0, 51, -3, None, "", "abc", True])
def test_students_count_outside_range_is_rejected(store, students_count):
    registry = ClassRegistry(store)

    with pytest.raises(ValidationError) as exc_info:
        registry.create_class(_class_input(students_count=students_count))

    assert exc_info.value.field == "students_count"
    assert registry.list_classes() == []


@pytest.mark.parametrize("field", ["subject", "grade"])
def test_missing_labels_are_rejected(store, field):
    registry = ClassRegistry(store)
    data = _class_input()
    data[field] = "   "

    with pytest.raises(ValidationError) as exc_info:
        registry.create_class(data)
    assert exc_info.value.field == field


def test_blank_activity_title_is_rejected(store):
    registry = ClassRegistry(store)
    created = registry.create_class(_class_input())

    with pytest.raises(ValidationError) as exc_info:
        registry.create_activity(created.id, {"title": "  ", "description": "sem título"})

    assert exc_info.value.field == "title"
    assert registry.activities_for_class(created.id) == []


def test_activity_fields_are_normalized(store):
    registry = ClassRegistry(store)
    created = registry.create_class(_class_input(description="  ", color="azul"))
    assert created.description is None
    assert created.color == "azul"

    activity = registry.create_activity(
        created.id,
        {"title": "  Trabalho  ", "description": "", "due_date": "2026-11-05", "status": "Completed"},
    )
    assert activity.title == "Trabalho"
    assert activity.description is None
    assert activity.due_date == date(2026, 11, 5)
    assert activity.status == "completed"
    assert activity.class_id == created.id


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"title": "Prova", "status": "archived"}, "status"),
        ({"title": "Prova", "due_date": "05/11/2026"}, "due_date"),
        ({"title": "Prova", "due_date": 20261105}, "due_date"),
    ],
)
def test_malformed_activity_fields_are_rejected(store, payload, field):
    registry = ClassRegistry(store)
    created = registry.create_class(_class_input())

    with pytest.raises(ValidationError) as exc_info:
        registry.create_activity(created.id, payload)
    assert exc_info.value.field == field


def test_students_count_from_form_text(store):
    registry = ClassRegistry(store)
    created = registry.create_class(_class_input(students_count=" 30 "))
    assert created.students_count == 30


def test_create_class_accepts_request_model(store):
    registry = ClassRegistry(store)
    payload = ClassCreateRequest(name="7º Ano", subject="História", grade="7º Ano", students_count="12")

    created = registry.create_class(payload)
    assert created.students_count == 12


def test_activities_are_listed_newest_first_per_class(store):
    registry = ClassRegistry(store)
    first_class = registry.create_class(_class_input("A"))
    second_class = registry.create_class(_class_input("B"))

    older = registry.create_activity(first_class.id, {"title": "Leitura"})
    registry.create_activity(second_class.id, {"title": "Redação"})
    newer = registry.create_activity(first_class.id, {"title": "Prova"})

    assert [item.id for item in registry.activities_for_class(first_class.id)] == [newer.id, older.id]
    assert len(registry.activities_for_class(second_class.id)) == 1


def test_total_activities_matches_per_class_sum(store):
    registry = ClassRegistry(store)
    created = [registry.create_class(_class_input(f"Turma {index}", index + 1)) for index in range(3)]
    for index, record in enumerate(created):
        for number in range(index):
            registry.create_activity(record.id, {"title": f"Atividade {number}"})

    stats = registry.aggregate_stats()
    per_class = sum(len(registry.activities_for_class(record.id)) for record in registry.list_classes())
    assert stats.activities == per_class == 3
    assert stats.students == 1 + 2 + 3
    assert stats.classes == 3


def test_list_classes_is_idempotent(store):
    registry = ClassRegistry(store)
    for index in range(3):
        registry.create_class(_class_input(f"Turma {index}"))

    assert registry.list_classes() == registry.list_classes()


def test_classes_with_activities_counts_are_derived(store):
    registry = ClassRegistry(store)
    record = registry.create_class(_class_input())
    registry.create_activity(record.id, {"title": "Prova"})
    registry.create_activity(record.id, {"title": "Seminário"})

    (view,) = registry.classes_with_activities()
    assert view.id == record.id
    assert view.activities_count == 2
    assert [item.title for item in view.activities] == ["Seminário", "Prova"]


def test_registry_is_scoped_to_owner():
    store = MemoryRecordStore()
    alice = ClassRegistry(store, owner_id="alice")
    bob = ClassRegistry(store, owner_id="bob")

    record = alice.create_class(_class_input())
    alice.create_activity(record.id, {"title": "Prova"})

    assert record.owner_id == "alice"
    assert bob.list_classes() == []
    assert bob.activities_for_class(record.id) == []
    assert bob.aggregate_stats().activities == 0
    with pytest.raises(ClassReferenceError):
        bob.create_activity(record.id, {"title": "Intrusa"})
    assert len(alice.activities_for_class(record.id)) == 1


def test_unowned_registry_sees_every_class():
    store = MemoryRecordStore()
    ClassRegistry(store, owner_id="alice").create_class(_class_input("A"))
    ClassRegistry(store, owner_id="bob").create_class(_class_input("B"))

    assert {record.name for record in ClassRegistry(store).list_classes()} == {"A", "B"}


def test_returned_records_do_not_alias_store_state():
    store = MemoryRecordStore()
    registry = ClassRegistry(store)
    record = registry.create_class(_class_input())

    record.name = "changed"
    assert registry.list_classes()[0].name == "5º Ano A"


def test_sql_store_failure_is_wrapped_and_store_stays_usable(database):
    store = SqlRecordStore(database)
    registry = ClassRegistry(store)

    with pytest.raises(StoreError) as exc_info:
        store.insert_class({"name": "x", "subject": "y", "grade": "z", "students_count": 0, "owner_id": None})
    assert exc_info.value.__cause__ is not None

    created = registry.create_class(_class_input())
    assert [record.id for record in registry.list_classes()] == [created.id]


def test_store_error_propagates_from_registry():
    class BrokenStore(MemoryRecordStore):
        def insert_class(self, fields):
            raise StoreError("connection refused")

    registry = ClassRegistry(BrokenStore())
    with pytest.raises(StoreError):
        registry.create_class(_class_input())
    assert registry.list_classes() == []


def test_created_at_is_utc_aware_on_every_store(store):
    registry = ClassRegistry(store)
    record = registry.create_class(_class_input())
    activity = registry.create_activity(record.id, {"title": "Prova"})

    assert record.created_at.utcoffset() == timedelta(0)
    assert activity.created_at.utcoffset() == timedelta(0)
    assert registry.list_classes()[0].created_at.tzinfo is not None
    assert registry.activities_for_class(record.id)[0].created_at.tzinfo is not None
    assert registry.classes_with_activities()[0].created_at.tzinfo is not None


@pytest.mark.parametrize(("field", "length"), [("description", 2001), ("color", 33)])
def test_overlong_optional_text_is_rejected(store, field, length):
    registry = ClassRegistry(store)

    with pytest.raises(ValidationError) as exc_info:
        registry.create_class(_class_input(**{field: "x" * length}))
    assert exc_info.value.field == field
    assert registry.list_classes() == []
