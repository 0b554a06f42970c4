"""
➡️ But : Traduire les erreurs en réponses HTTP, à un seul endroit.

ValidationError → 400, NotFound → 404, StorageError → 500.

Corps de requête illisible (JSON invalide, mauvais type) → 400 au lieu du 422 de FastAPI.

Route ou méthode inconnue → 404.

Toutes les réponses d'erreur ont la forme {"message": "..."}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import NotFound, StorageError, ValidationError

logger = logging.getLogger(__name__)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain and fallback error handlers."""

    @app.exception_handler(ValidationError)
    async def on_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return _message(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(NotFound)
    async def on_not_found(request: Request, exc: NotFound) -> JSONResponse:
        return _message(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(StorageError)
    async def on_storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage error")

    @app.exception_handler(RequestValidationError)
    async def on_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body", "errors": jsonable_errors(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def on_http_error(request: Request, exc: StarletteHTTPException):
        # 405 compris : une méthode non prévue est une route inconnue
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _message(status.HTTP_404_NOT_FOUND, "Route not found")
        return await http_exception_handler(request, exc)


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
