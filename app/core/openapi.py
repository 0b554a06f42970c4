"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour ajouter une
description détaillée et les conventions de l'API.
"""

from fastapi.openapi.utils import get_openapi


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de todos, persistés dans un fichier JSON.\n\n"
            "### Conventions\n"
            "- L'identifiant d'un todo est exposé sous la clé `_id`.\n"
            "- Les erreurs renvoient `{\"message\": \"...\"}`.\n"
            "- PUT applique une mise à jour partielle : seuls les champs envoyés sont modifiés.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
