import pytest

from app.db.storages.memory import InMemoryTodoStorage
from app.domain.errors import NotFound, StorageReadError, ValidationError
from app.domain.models import TodoPatch, UNSET
from app.domain.repositories import TodoRepository
from app.domain.services import TodoService


def test_create_then_get_round_trip(service):
    todo = service.create(title="Buy milk", description="2%")

    fetched = service.get(todo.id)
    assert fetched.title == "Buy milk"
    assert fetched.description == "2%"
    assert fetched.completed is False


def test_list_is_idempotent(service):
    service.create(title="a", description="b")
    service.create(title="c", description="d")

    assert service.list() == service.list()
    assert [t.id for t in service.list()] == ["todo-1", "todo-2"]


@pytest.mark.parametrize(
    "title, description",
    [(None, "d"), ("t", None), ("", "d"), ("t", ""), (None, None)],
)
def test_create_validation(service, title, description):
    with pytest.raises(ValidationError):
        service.create(title=title, description=description)
    assert service.list() == []


def test_update_only_completed_keeps_other_fields(service):
    todo = service.create(title="Write report", description="Quarterly numbers")

    updated = service.update(todo.id, TodoPatch(completed=True))

    assert updated.id == todo.id
    assert updated.completed is True
    assert updated.title == "Write report"
    assert updated.description == "Quarterly numbers"
    assert service.get(todo.id) == updated


def test_update_applies_falsy_values(service):
    todo = service.create(title="t", description="d")
    service.update(todo.id, TodoPatch(completed=True))

    updated = service.update(todo.id, TodoPatch(completed=False, description=""))

    assert updated.completed is False
    assert updated.description == ""
    assert updated.title == "t"


def test_update_requires_a_field(service):
    todo = service.create(title="t", description="d")
    with pytest.raises(ValidationError):
        service.update(todo.id, TodoPatch())


def test_update_rejects_null(service):
    todo = service.create(title="t", description="d")
    with pytest.raises(ValidationError):
        service.update(todo.id, TodoPatch(completed=None))
    assert service.get(todo.id).completed is False


@pytest.mark.parametrize(
    "call",
    [
        lambda svc: svc.get("missing"),
        lambda svc: svc.update("missing", TodoPatch(title="x")),
        lambda svc: svc.update("missing", TodoPatch()),
        lambda svc: svc.delete("missing"),
    ],
)
def test_unknown_id_raises_not_found(service, call):
    service.create(title="t", description="d")
    with pytest.raises(NotFound):
        call(service)


def test_delete_removes_exactly_one(service):
    first = service.create(title="a", description="b")
    second = service.create(title="c", description="d")

    service.delete(first.id)

    remaining = service.list()
    assert len(remaining) == 1
    assert remaining[0].id == second.id
    with pytest.raises(NotFound):
        service.get(first.id)


def test_colliding_ids_are_regenerated():
    ids = iter(["dup", "dup", "fresh"])
    storage = InMemoryTodoStorage()
    svc = TodoService(TodoRepository(storage, id_generator=lambda: next(ids)))

    assert svc.create(title="a", description="b").id == "dup"
    assert svc.create(title="c", description="d").id == "fresh"


def test_id_generator_stuck_on_existing_ids_fails():
    storage = InMemoryTodoStorage()
    svc = TodoService(TodoRepository(storage, id_generator=lambda: "same"))
    svc.create(title="a", description="b")

    with pytest.raises(RuntimeError):
        svc.create(title="c", description="d")


def test_default_ids_are_128_bit_hex(storage):
    svc = TodoService(TodoRepository(storage))
    todo = svc.create(title="a", description="b")

    assert len(todo.id) == 32
    int(todo.id, 16)


def test_malformed_records_are_a_read_error():
    storage = InMemoryTodoStorage([{"_id": "x", "title": "no description"}])
    svc = TodoService(TodoRepository(storage))

    with pytest.raises(StorageReadError):
        svc.list()


def test_patch_from_payload_keeps_only_known_present_fields():
    patch = TodoPatch.from_payload({"completed": False, "other": 1})

    assert patch.title is UNSET
    assert patch.changes() == {"completed": False}
    assert not patch.is_empty()
    assert TodoPatch.from_payload({}).is_empty()


def test_records_keyed_by_field_name_are_a_read_error():
    storage = InMemoryTodoStorage([{"id": "x", "title": "t", "description": "d", "completed": False}])
    svc = TodoService(TodoRepository(storage))

    with pytest.raises(StorageReadError):
        svc.list()


def test_update_rejects_wrongly_typed_value(service):
    todo = service.create(title="t", description="d")

    with pytest.raises(ValidationError):
        service.update(todo.id, TodoPatch(completed="maybe"))
    with pytest.raises(ValidationError):
        service.update(todo.id, TodoPatch(title=["x"]))
    assert service.get(todo.id) == todo
