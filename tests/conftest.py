import itertools

import pytest
from fastapi.testclient import TestClient

from app.api.v1.dependencies import get_id_generator, get_todo_storage
from app.db.storages.memory import InMemoryTodoStorage
from app.domain.repositories import TodoRepository
from app.domain.services import TodoService
from app.main import create_app


@pytest.fixture
def storage() -> InMemoryTodoStorage:
    return InMemoryTodoStorage()


@pytest.fixture
def id_generator():
    counter = itertools.count(1)
    return lambda: f"todo-{next(counter)}"


@pytest.fixture
def service(storage, id_generator) -> TodoService:
    return TodoService(TodoRepository(storage, id_generator=id_generator))


@pytest.fixture
def app(storage, id_generator):
    app = create_app()
    app.dependency_overrides[get_todo_storage] = lambda: storage
    app.dependency_overrides[get_id_generator] = lambda: id_generator
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
