from pathlib import Path

import pytest

from app.db.seed import load_seed_yaml, seed_todos
from app.domain.errors import ValidationError

SEED_DATA = Path(__file__).resolve().parent.parent / "app" / "db" / "seed_data.yaml"


def test_seed_todos_from_bundled_yaml(service):
    created = seed_todos(service, SEED_DATA)

    assert len(created) == 3
    stored = service.list()
    assert stored == created
    assert [t.completed for t in stored] == [False, False, True]


def test_seed_entry_without_description_is_rejected(service, tmp_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text("todos:\n  - title: lonely\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        seed_todos(service, seed)


def test_load_seed_yaml_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_yaml(tmp_path / "absent.yaml")

    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_yaml(not_mapping)

    bad_todos = tmp_path / "bad.yaml"
    bad_todos.write_text("todos: nope\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_yaml(bad_todos)


def test_load_seed_yaml_without_todos_key(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("other: 1\n", encoding="utf-8")

    assert load_seed_yaml(empty) == []
