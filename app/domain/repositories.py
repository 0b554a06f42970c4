"""
➡️ But : Encapsuler les opérations de persistance des todos.

TodoRepository : CRUD (create, read, update, delete) sur la collection.

Chaque opération relit toute la collection via le stockage injecté, la modifie
en mémoire puis (pour les écritures) la réécrit entièrement.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Le stockage (fichier, mémoire, SQL) est interchangeable.

Testable indépendamment (InMemoryTodoStorage, pas de disque).
"""

from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.db.storages.base import TodoStorage
from app.domain.errors import StorageReadError
from app.domain.ids import IdGenerator, random_hex_id
from app.domain.models import Todo

# Au-delà, le générateur d'ids est considéré comme défaillant
MAX_ID_ATTEMPTS = 5


class TodoRepository:
    def __init__(self, storage: TodoStorage, id_generator: IdGenerator = random_hex_id):
        self.storage = storage
        self.id_generator = id_generator

    # ---------- helpers ----------

    def _load(self) -> List[Todo]:
        records = self.storage.load()
        try:
            return [Todo.model_validate(r) for r in records]
        except PydanticValidationError as exc:
            raise StorageReadError("Stored todos are malformed") from exc

    def _save(self, todos: List[Todo]) -> None:
        self.storage.save([t.to_record() for t in todos])

    def _new_id(self, todos: List[Todo]) -> str:
        taken = {t.id for t in todos}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self.id_generator()
            if candidate not in taken:
                return candidate
        raise RuntimeError("Id generator keeps returning ids already in use")

    # ---------- READ ----------

    def list(self) -> List[Todo]:
        return self._load()

    def get(self, todo_id: str) -> Optional[Todo]:
        for todo in self._load():
            if todo.id == todo_id:
                return todo
        return None

    # ---------- CREATE ----------

    def create(self, *, title: str, description: str) -> Todo:
        todos = self._load()
        todo = Todo(_id=self._new_id(todos), title=title, description=description, completed=False)
        todos.append(todo)
        self._save(todos)
        return todo

    # ---------- UPDATE ----------

    def update(self, todo_id: str, **changes: Any) -> Optional[Todo]:
        """Applique `changes` au todo `todo_id` ; None si absent."""
        todos = self._load()
        for index, todo in enumerate(todos):
            if todo.id == todo_id:
                updated = todo.model_copy(update=changes)
                todos[index] = updated
                self._save(todos)
                return updated
        return None

    # ---------- DELETE ----------

    def delete(self, todo_id: str) -> bool:
        todos = self._load()
        remaining = [t for t in todos if t.id != todo_id]
        if len(remaining) == len(todos):
            return False
        self._save(remaining)
        return True
