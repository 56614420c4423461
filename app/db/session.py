"""
➡️ But : Configurer la base (SQLite par défaut) et gérer les sessions de base de données.

engine : connexion à la base (sqlite:///tasks.db).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Dict, Any, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

# Import all models for creating all tables
from app.db.models.categories import Category
from app.db.models.tasks import Task

from app.core.config import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite n'applique les FK (et donc ON DELETE SET NULL) que si on le demande, par connexion
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: Optional[str] = None) -> Engine:
    url = url or settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    engine = create_engine(
        url,
        echo=False,  # l'echo SQL passe par le logger "sqlalchemy.engine" (cf. setup_logging)
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
    )
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine

engine: Engine = build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec Alembic, préfère des migrations.
    """
    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    logger.info("Tables ready on %s", bind.url.render_as_string(hide_password=True))


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
