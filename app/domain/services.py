"""
➡️ But : Contenir la logique métier : orchestrer le repository, appliquer des règles, gérer les erreurs.

TodoService : les cinq opérations du store (list, get, create, update, delete).
Vérifie la présence des champs, lève NotFound quand l'id est inconnu.

🔹 Avantages :

Code métier découplé du web (les erreurs sont celles de app.domain.errors).

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.domain.errors import NotFound, ValidationError
from app.domain.models import Todo, TodoPatch
from app.domain.repositories import TodoRepository
from app.domain.schemas import TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list(self) -> List[Todo]:
        todos = self.repo.list()
        logger.debug("Listed %d todos", len(todos))
        return todos

    def get(self, todo_id: str) -> Todo:
        todo = self.repo.get(todo_id)
        if todo is None:
            raise NotFound(todo_id)
        return todo

    def create(self, title: Optional[str], description: Optional[str]) -> Todo:
        # chaîne vide et champ absent sont refusés tous les deux
        if not title or not description:
            raise ValidationError("All fields are required!")
        todo = self.repo.create(title=title, description=description)
        logger.info("Created todo %s", todo.id)
        return todo

    def update(self, todo_id: str, patch: TodoPatch) -> Todo:
        """
        Mise à jour partielle : seuls les champs présents dans `patch` sont appliqués.
        NotFound est vérifié avant la validation du patch.
        """
        self.get(todo_id)

        changes = patch.changes()
        if not changes:
            raise ValidationError("No change was provided!")
        nulls = sorted(name for name, value in changes.items() if value is None)
        if nulls:
            raise ValidationError(f"Fields cannot be null: {', '.join(nulls)}")
        changes = self._parse_changes(changes)

        todo = self.repo.update(todo_id, **changes)
        if todo is None:
            raise NotFound(todo_id)
        logger.info("Updated todo %s (%s)", todo_id, ", ".join(sorted(changes)))
        return todo

    @staticmethod
    def _parse_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
        """Valide les types avec TodoUpdate ; renvoie les valeurs converties (ex: "true" → True)."""
        try:
            parsed = TodoUpdate.model_validate(changes)
        except PydanticValidationError as exc:
            bad = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
            raise ValidationError(f"Invalid value for: {', '.join(bad)}") from exc
        return parsed.model_dump(include=set(changes))

    def delete(self, todo_id: str) -> None:
        if not self.repo.delete(todo_id):
            raise NotFound(todo_id)
        logger.info("Deleted todo %s", todo_id)
