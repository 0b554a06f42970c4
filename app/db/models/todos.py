"""Table des todos pour le stockage SQL. `position` conserve l'ordre de la collection."""

from sqlmodel import SQLModel, Field


class TodoRow(SQLModel, table=True):
    __tablename__ = "todos"

    id: str = Field(primary_key=True, description="Identifiant opaque (clé `_id` côté JSON)")
    title: str
    description: str
    completed: bool = False
    position: int = Field(default=0, index=True)
