"""
➡️ But : Définir les objets manipulés par le domaine.

Todo : un enregistrement tel qu'il est persisté (clé `_id` côté JSON).

TodoPatch : une mise à jour partielle explicite. Chaque champ vaut UNSET
(absent) ou une valeur, ce qui permet d'appliquer `completed=False` ou
`title=""` sans les confondre avec "non fourni".

🔹 Avantages :

Le même modèle sert au stockage fichier, mémoire et SQL.

Plus aucun test de "truthiness" pour savoir si un champ a été envoyé.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from pydantic import BaseModel, Field


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class Todo(BaseModel):
    # lu et construit uniquement par l'alias : un enregistrement sans `_id` est invalide
    id: str = Field(alias="_id")
    title: str
    description: str
    completed: bool = False

    def to_record(self) -> Dict[str, Any]:
        """Forme persistée : {"_id", "title", "description", "completed"}."""
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class TodoPatch:
    title: Any = UNSET
    description: Any = UNSET
    completed: Any = UNSET

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TodoPatch":
        """Construit un patch à partir des seules clés reconnues présentes dans `payload`."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in payload.items() if k in known})

    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()
