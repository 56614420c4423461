"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.

Tu peux y ajouter des conventions d’API (formats, erreurs, etc.).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Gestionnaire de tâches et de catégories (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Les identifiants sont des UUID générés par la base.\n"
            "- Mises à jour partielles (PATCH) : seuls les champs envoyés sont modifiés.\n"
            "- Erreurs : `{\"kind\": \"validation\" | \"store\" | \"not_found\", \"message\": ..., \"errors\": {...}}`.\n"
            "- Filtres de la vue `/tasks/board` : `all` = pas de restriction.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
