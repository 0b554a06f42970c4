"""
➡️ But : Définir les erreurs métier du domaine Todo.

Les services lèvent ces exceptions, la couche API les traduit en réponses HTTP
(voir app/api/errors.py) :

ValidationError → 400

NotFound → 404

StorageError (lecture / écriture) → 500

🔹 Avantages :

Le domaine ne dépend pas de FastAPI.

Les codes HTTP sont décidés à un seul endroit.
"""


class TodoError(Exception):
    """Erreur de base du domaine Todo."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    """Entrée manquante ou invalide."""


class NotFound(TodoError):
    """Aucun todo avec cet identifiant."""

    def __init__(self, todo_id: str):
        super().__init__("Todo not found")
        self.todo_id = todo_id


class StorageError(TodoError):
    pass


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass
