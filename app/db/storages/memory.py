import copy
from typing import List, Optional

from app.db.storages.base import Record


class InMemoryTodoStorage:
    """
    Stockage volatile, propre au processus (tests, démo).
    `load()` renvoie des copies : modifier le résultat n'a aucun effet sans `save()`.
    """

    def __init__(self, initial: Optional[List[Record]] = None):
        self._todos: List[Record] = copy.deepcopy(initial) if initial else []

    def load(self) -> List[Record]:
        return copy.deepcopy(self._todos)

    def save(self, todos: List[Record]) -> None:
        self._todos = copy.deepcopy(todos)
