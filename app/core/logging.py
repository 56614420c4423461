"""
➡️ But : Configurer les logs de l'application une seule fois, au démarrage.

Chaque module récupère son logger avec logging.getLogger(__name__).
Les bibliothèques tierces (uvicorn, sqlalchemy…) ne passent sur la console qu'à partir de WARNING.
"""

import logging
import sys
from typing import Optional

from app.core.config import settings

_APP_PREFIX = "app"


class _ThirdPartyNoiseFilter(logging.Filter):
    """Laisse passer nos logs, coupe le bruit des libs tierces sous WARNING."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == _APP_PREFIX or record.name.startswith(_APP_PREFIX + "."):
            return True
        # echo SQL demandé explicitement en dev
        if record.name.startswith("sqlalchemy.engine") and settings.DB_ECHO:
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: Optional[str] = None) -> None:
    """
    Installe un handler console unique sur le logger racine.
    Appelée au démarrage de l'app (et par les scripts).
    """
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    # Évite les doublons si appelée plusieurs fois (reload uvicorn, tests…)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(ch)

    # echo SQL en dev : niveau du logger plutôt que create_engine(echo=True), qui ajoute son propre handler
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DB_ECHO else logging.WARNING)

    logging.captureWarnings(True)
