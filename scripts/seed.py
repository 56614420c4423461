from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, Session, init_db

from app.db.seed import load_seed_yaml, seed_all


def run_seed(seed_path: str = settings.SEED_PATH) -> None:
    setup_logging()
    init_db()
    data = load_seed_yaml(seed_path)
    with Session(engine) as session:
        seed_all(session, data)


if __name__ == "__main__":
    run_seed()
