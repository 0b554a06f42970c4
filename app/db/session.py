"""
➡️ But : Choisir le stockage des todos et gérer son cycle de vie.

open_todo_storage() : ouvre le stockage configuré (STORAGE_BACKEND) :
fichier JSON, mémoire (partagée par le processus) ou base SQL.

init_storage() : prépare le stockage au démarrage (fichier `[]`, tables SQL).

get_engine() : moteur SQLModel, construit à la première utilisation.

🔹 Avantages :

Un seul endroit pour savoir où vivent les todos.

Réutilisable par injection (Depends) et par les scripts (seed).
"""

from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.todos import TodoRow

from app.core.config import settings
from app.db.storages.base import TodoStorage
from app.db.storages.json_file import JsonFileTodoStorage
from app.db.storages.memory import InMemoryTodoStorage
from app.db.storages.sql import SqlTodoStorage


def _build_engine(url: str) -> Engine:
    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        echo=False,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
    )


@lru_cache
def get_engine() -> Engine:
    url = settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"
    return _build_engine(url)


@lru_cache
def get_memory_storage() -> InMemoryTodoStorage:
    return InMemoryTodoStorage()


def init_db(engine: Engine) -> None:
    """Crée les tables si elles n'existent pas."""
    SQLModel.metadata.create_all(engine)


def init_storage() -> None:
    """Appelée au démarrage de l'application."""
    backend = settings.STORAGE_BACKEND
    if backend == "sql":
        init_db(get_engine())
    elif backend == "file" and settings.TODOS_FILE_AUTO_CREATE:
        JsonFileTodoStorage(Path(settings.TODOS_FILE)).ensure_exists()


@contextmanager
def open_todo_storage() -> Iterator[TodoStorage]:
    backend = settings.STORAGE_BACKEND
    if backend == "memory":
        yield get_memory_storage()
    elif backend == "sql":
        with Session(get_engine()) as session:
            yield SqlTodoStorage(session)
    else:
        yield JsonFileTodoStorage(Path(settings.TODOS_FILE))
