import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session

from app.db.repositories.categories import CategoryRepository
from app.db.repositories.tasks import TaskRepository
from app.features.categories.schemas import CategoryCreateIn
from app.features.categories.services import CategoryService
from app.features.tasks.schemas import TaskCreateIn
from app.features.tasks.services import TaskService

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed
# -----------------------------
def seed_all(session: Session, data: Dict[str, Any]) -> Dict[str, int]:
    """
    Insère les catégories puis les tâches décrites dans `data`.
    Tout le fichier passe dans UNE transaction : au moindre refus (titre vide, FK…)
    rien n'est gardé, et le seed peut être relancé une fois le YAML corrigé.
    Idempotent sur le nom de catégorie : une catégorie déjà présente n'est pas recréée
    (et ses tâches ne sont pas ré-insérées).

    Format attendu :
        categories:
          - name: Work
            color: "#3b82f6"
            description: ...
            tasks:
              - title: Write report
                priority: high
    """
    category_repo = CategoryRepository(session)
    category_svc = CategoryService(category_repo)
    task_svc = TaskService(TaskRepository(session))

    counts = {"categories": 0, "tasks": 0}
    categories_yaml: List[Dict[str, Any]] = data.get("categories") or []

    try:
        for entry in categories_yaml:
            entry = dict(entry)
            tasks_yaml: List[Dict[str, Any]] = entry.pop("tasks", None) or []

            if category_repo.get_by_name(str(entry.get("name", "")).strip()):
                logger.info("Category %r already seeded, skipped", entry.get("name"))
                continue

            category = category_svc.create(CategoryCreateIn(**entry), commit=False)
            counts["categories"] += 1

            for task_entry in tasks_yaml:
                task_svc.create(TaskCreateIn(**task_entry, category_id=category.id), commit=False)
                counts["tasks"] += 1

        session.commit()
    except Exception:
        session.rollback()
        logger.warning("Seed aborted, nothing was saved")
        raise

    logger.info("Seed done: %(categories)d categories, %(tasks)d tasks", counts)
    return counts
