"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app) via create_app().

Configure :

les logs

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé (désactivé en prod)

les gestionnaires d'erreurs ({"message": ...})

Inclut le router /todos.

Prépare le stockage au démarrage (@app.on_event("startup")).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d'exécution : uvicorn app.main:app --reload.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.core.openapi import custom_openapi
from app.db.session import init_storage
from app.api.errors import register_exception_handlers

from app.api.v1.routers import todos

import uvicorn


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    docs = settings.docs_enabled
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        openapi_tags=[
            {"name": "todos", "description": "Opérations CRUD sur les todos"},
        ],
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(todos.router, prefix=settings.API_PREFIX)

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)

    # Démarrage
    @app.on_event("startup")
    def on_startup():
        init_storage()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev")) # http://localhost:4000
