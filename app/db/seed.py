import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from app.domain.models import Todo, TodoPatch
from app.domain.services import TodoService

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> List[Dict[str, Any]]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")

    todos = data.get("todos", [])
    if not isinstance(todos, list) or not all(isinstance(t, dict) for t in todos):
        raise ValueError("La clé `todos` doit être une liste d'objets.")
    return todos


# -----------------------------
# Seed
# -----------------------------
def seed_todos(svc: TodoService, seed_path: str | Path) -> List[Todo]:
    """
    Crée chaque todo du YAML via le service (validation et ids identiques à l'API).
    `completed: true` est appliqué ensuite par une mise à jour partielle.
    """
    created: List[Todo] = []
    for entry in load_seed_yaml(seed_path):
        todo = svc.create(title=entry.get("title"), description=entry.get("description"))
        if entry.get("completed"):
            todo = svc.update(todo.id, TodoPatch(completed=True))
        created.append(todo)
    logger.info("Seeded %d todos from %s", len(created), seed_path)
    return created
