"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs (setup_logging)

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (ex : /api/v1/tasks).

Traduit les erreurs métier en réponses JSON {kind, message, errors?} : c'est le SEUL endroit
où une erreur devient un message affichable.

Initialise la base SQLite au démarrage (lifespan).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import AppError
from app.core.logging import setup_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.routers import categories, tasks

import uvicorn

logger = logging.getLogger(__name__)


# Démarrage
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "tasks", "description": "Opérations liées aux tâches"},
        {"name": "categories", "description": "Opérations liées aux catégories"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# -----------------------------
# Erreurs → JSON
# -----------------------------
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # même forme que ValidationError : un message par champ
    errors = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        errors[".".join(loc) or "request"] = err.get("msg", "Invalid value")
    message = next(iter(errors.values()), "Invalid request")
    return JSONResponse(
        status_code=422,
        content={"kind": "validation", "message": message, "errors": errors},
    )

# Routers
app.include_router(categories.router, prefix="/api/v1")
app.include_router(tasks.router, prefix="/api/v1")


@app.get("/health", tags=["health"], summary="Sonde de vie")
def health():
    return {"status": "ok"}


# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

if __name__ == "__main__":
    setup_logging()
    uvicorn.run("app.main:app", host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
