import sys

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.session import init_storage, open_todo_storage
from app.db.seed import seed_todos
from app.domain.repositories import TodoRepository
from app.domain.services import TodoService


def run_seed(seed_path: str = "app/db/seed_data.yaml") -> None:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    init_storage()
    with open_todo_storage() as storage:
        svc = TodoService(TodoRepository(storage))
        seed_todos(svc, seed_path)


if __name__ == "__main__":
    run_seed(*sys.argv[1:2])
