"""
➡️ But : Définir les endpoints de l'API.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Chaque fonction représente une route. Les erreurs métier (NotFound,
ValidationError, StorageError) sont traduites en HTTP par app/api/errors.py.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.v1.dependencies import get_todo_service
from app.domain.models import TodoPatch
from app.domain.schemas import MessageOut, TodoCreate, TodoCreatedOut, TodoOut, TodoUpdate
from app.domain.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        404: {"model": MessageOut, "description": "Not Found"},
        500: {"model": MessageOut, "description": "Storage error"},
    },
)

@router.get(
    "",
    summary="Lister les todos",
    description="Retourne la collection complète, telle qu'elle est persistée.",
    response_model=List[TodoOut],
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return svc.list()

@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoCreatedOut,
    responses={400: {"model": MessageOut, "description": "Champs manquants"}},
)
def create_todo(payload: Optional[TodoCreate] = None, svc: TodoService = Depends(get_todo_service)):
    payload = payload or TodoCreate()
    todo = svc.create(title=payload.title, description=payload.description)
    return {"todo": todo}

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    return svc.get(todo_id)

@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Mise à jour partielle : seuls les champs présents dans le corps sont appliqués.",
    response_model=TodoOut,
    responses={400: {"model": MessageOut, "description": "Aucun champ fourni ou valeur invalide"}},
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": TodoUpdate.model_json_schema()}}}},
)
def update_todo(todo_id: str, payload: Any = Body(None), svc: TodoService = Depends(get_todo_service)):
    # corps non typé ici : le service cherche le todo (404) avant de valider les valeurs (400)
    fields = payload if isinstance(payload, dict) else {}
    return svc.update(todo_id, TodoPatch.from_payload(fields))

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    response_model=MessageOut,
)
def delete_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    svc.delete(todo_id)
    return {"message": "Todo deleted successfully"}
