"""
➡️ But : Persister la collection de todos dans une base SQL (SQLModel).

Même contrat que le fichier JSON : `load()` relit toute la table, `save()`
remplace tout son contenu dans une seule transaction.

🔹 Avantages :

Passer du fichier à SQLite / PostgreSQL ne touche ni aux routes ni au service.
"""

from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.db.models.todos import TodoRow
from app.db.storages.base import Record
from app.domain.errors import StorageReadError, StorageWriteError


class SqlTodoStorage:
    def __init__(self, session: Session):
        self.session = session

    def load(self) -> List[Record]:
        try:
            rows = self.session.exec(select(TodoRow).order_by(TodoRow.position)).all()
        except SQLAlchemyError as exc:
            raise StorageReadError("Cannot read todos table") from exc
        return [
            {"_id": row.id, "title": row.title, "description": row.description, "completed": row.completed}
            for row in rows
        ]

    def save(self, todos: List[Record]) -> None:
        try:
            for row in self.session.exec(select(TodoRow)).all():
                self.session.delete(row)
            # flush des DELETE avant les INSERT : les mêmes clés primaires reviennent
            self.session.flush()
            for position, record in enumerate(todos):
                self.session.add(
                    TodoRow(
                        id=record["_id"],
                        title=record["title"],
                        description=record["description"],
                        completed=record["completed"],
                        position=position,
                    )
                )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageWriteError("Cannot write todos table") from exc
