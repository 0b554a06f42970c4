import json

from app.core.config import Settings
from app.db import session
from app.db.storages.json_file import JsonFileTodoStorage
from app.db.storages.memory import InMemoryTodoStorage


def test_database_url_defaults_to_sqlite_path():
    cfg = Settings(SQLITE_PATH="data/todos.db")
    assert cfg.DATABASE_URL == "sqlite:///data/todos.db"

    cfg = Settings(DATABASE_URL="postgresql://db/todos")
    assert cfg.DATABASE_URL == "postgresql://db/todos"


def test_docs_disabled_in_prod():
    assert Settings(ENV="dev").docs_enabled is True
    assert Settings(ENV="prod").docs_enabled is False


def test_file_backend_is_created_at_startup(tmp_path, monkeypatch):
    path = tmp_path / "data" / "todos.json"
    monkeypatch.setattr(session.settings, "STORAGE_BACKEND", "file")
    monkeypatch.setattr(session.settings, "TODOS_FILE", str(path))

    session.init_storage()

    assert json.loads(path.read_text(encoding="utf-8")) == []
    with session.open_todo_storage() as storage:
        assert isinstance(storage, JsonFileTodoStorage)
        assert storage.path == path


def test_memory_backend_is_shared(monkeypatch):
    monkeypatch.setattr(session.settings, "STORAGE_BACKEND", "memory")

    with session.open_todo_storage() as first:
        first.save([{"_id": "x", "title": "t", "description": "d", "completed": False}])
    with session.open_todo_storage() as second:
        assert isinstance(second, InMemoryTodoStorage)
        assert second.load() == first.load()
    session.get_memory_storage.cache_clear()
