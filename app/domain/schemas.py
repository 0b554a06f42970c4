"""
➡️ But : Définir les formats d'entrée/sortie de l'API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoCreate → corps de requête POST

TodoUpdate → corps PUT (mise à jour partielle)

TodoOut → réponse de l'API

Les champs d'entrée sont optionnels ici : la présence est vérifiée par le
service, qui répond 400 (et non 422) quand il manque quelque chose.

🔹 Avantages :

Documente les champs dans Swagger (types, exemples...).

Les erreurs de type (ex: title=42) sont rejetées avant d'atteindre le service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    title: Optional[str] = Field(None, examples=["Buy milk"])
    description: Optional[str] = Field(None, examples=["2%"])


class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, examples=["Buy oat milk"])
    description: Optional[str] = Field(None, examples=["1L"])
    completed: Optional[bool] = Field(None, examples=[True])


class TodoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", examples=["3f2a9c5d0e7b41a6b8c9d0e1f2a3b4c5"])
    title: str
    description: str
    completed: bool


class TodoCreatedOut(BaseModel):
    todo: TodoOut


class MessageOut(BaseModel):
    message: str
