import logging

import pytest

from app.core.config import settings
from app.core.logging import _ThirdPartyNoiseFilter, setup_logging
from app.db.session import build_engine


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    sql_level = logging.getLogger("sqlalchemy.engine").level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
    logging.captureWarnings(False)


def test_importing_app_does_not_touch_root_handlers():
    import app.main  # noqa: F401

    root = logging.getLogger()
    assert not any(isinstance(f, _ThirdPartyNoiseFilter) for h in root.handlers for f in h.filters)


def test_sql_echo_goes_through_logger_only(monkeypatch, restore_root_logger):
    monkeypatch.setattr(settings, "DB_ECHO", True)

    engine = build_engine("sqlite://")
    assert engine.echo is False

    setup_logging("INFO")
    sql_logger = logging.getLogger("sqlalchemy.engine")
    assert sql_logger.level == logging.INFO
    # un seul handler : celui du root, pas de handler ajouté par SQLAlchemy
    assert sql_logger.handlers == []
    assert len(logging.getLogger().handlers) == 1
    engine.dispose()


def test_sql_echo_off_outside_dev(monkeypatch, restore_root_logger):
    monkeypatch.setattr(settings, "DB_ECHO", False)
    setup_logging("INFO")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
