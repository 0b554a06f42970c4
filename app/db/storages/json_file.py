"""
➡️ But : Persister la collection de todos dans un fichier JSON (tableau).

Chaque requête relit le fichier entier puis le réécrit entièrement : le fichier
est la seule source de vérité. Aucun verrou n'est posé, deux écritures
concurrentes peuvent se chevaucher.
"""

import json
import logging
from pathlib import Path
from typing import List

from app.db.storages.base import Record
from app.domain.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class JsonFileTodoStorage:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def ensure_exists(self) -> bool:
        """Crée le fichier avec `[]` s'il est absent. Renvoie True si créé."""
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageWriteError(f"Cannot create todos file {self.path}") from exc
        logger.info("Created empty todos file at %s", self.path)
        return True

    def load(self) -> List[Record]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise StorageReadError(f"Todos file {self.path} does not exist") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError(f"Cannot read todos file {self.path}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageReadError(f"Todos file {self.path} is not valid JSON") from exc

        if not isinstance(data, list):
            raise StorageReadError(f"Todos file {self.path} must contain a JSON array")
        return data

    def save(self, todos: List[Record]) -> None:
        try:
            self.path.write_text(json.dumps(todos, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError) as exc:
            raise StorageWriteError(f"Cannot write todos file {self.path}") from exc
