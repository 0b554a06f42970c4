from typing import Any, Dict, List, Protocol, runtime_checkable

Record = Dict[str, Any]


@runtime_checkable
class TodoStorage(Protocol):
    """
    Capacité de stockage de la collection de todos.

    👉 `load()` renvoie toute la collection (liste de dicts au format persisté).
    👉 `save(todos)` remplace toute la collection.
    👉 Aucune logique métier : le repository fait le read-modify-write.
    """

    def load(self) -> List[Record]:
        ...

    def save(self, todos: List[Record]) -> None:
        ...
