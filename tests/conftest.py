"""Fixtures partagées : une base SQLite neuve par test, services et client HTTP branchés dessus."""

import os
from pathlib import Path

# avant tout import de app.* : pas d'echo SQL, pas de base dans le dossier courant
os.environ.setdefault("ENV", "test")
os.environ.setdefault("SQLITE_PATH", ":memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.db.session import build_engine, get_session, init_db
from app.db.repositories.categories import CategoryRepository
from app.db.repositories.tasks import TaskRepository
from app.features.categories.services import CategoryService
from app.features.tasks.services import TaskService
from app.main import app


@pytest.fixture()
def engine(tmp_path: Path) -> Engine:
    eng = build_engine(f"sqlite:///{tmp_path / 'tasks.sqlite3'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine: Engine) -> Session:
    with Session(engine) as s:
        yield s


@pytest.fixture()
def category_service(session: Session) -> CategoryService:
    return CategoryService(CategoryRepository(session))


@pytest.fixture()
def task_service(session: Session) -> TaskService:
    return TaskService(TaskRepository(session))


@pytest.fixture()
def client(engine: Engine) -> TestClient:
    """
    Client HTTP sur l'app réelle, session remplacée par la base du test.
    Pas de `with TestClient(...)` : le lifespan créerait la base par défaut.
    """
    def _session_override():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    yield TestClient(app)
    app.dependency_overrides.clear()
