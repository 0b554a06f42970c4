"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_todo_storage() : ouvre le stockage configuré pour la durée de la requête.

get_id_generator() : générateur d'identifiants des todos.

get_todo_service() : crée un TodoService à partir du repository.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à remplacer dans les tests (app.dependency_overrides).
"""

from typing import Iterator

from fastapi import Depends

from app.db.session import open_todo_storage
from app.db.storages.base import TodoStorage
from app.domain.ids import IdGenerator, random_hex_id
from app.domain.repositories import TodoRepository
from app.domain.services import TodoService


def get_todo_storage() -> Iterator[TodoStorage]:
    with open_todo_storage() as storage:
        yield storage


def get_id_generator() -> IdGenerator:
    return random_hex_id


def get_todo_repository(
    storage: TodoStorage = Depends(get_todo_storage),
    id_generator: IdGenerator = Depends(get_id_generator),
) -> TodoRepository:
    return TodoRepository(storage, id_generator=id_generator)


def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)
