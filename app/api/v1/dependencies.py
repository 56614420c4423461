"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_task_service() : crée un TaskService à partir d’une session DB.

get_category_service() : idem pour les catégories.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).

Une session, des repos et des services neufs à chaque requête : aucun état partagé.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session

from app.db.repositories.categories import CategoryRepository
from app.features.categories.services import CategoryService

from app.db.repositories.tasks import TaskRepository
from app.features.tasks.services import TaskService


# -----------------------------
# Repositories
# -----------------------------
def get_category_repository(session: Session = Depends(get_session)) -> CategoryRepository:
    return CategoryRepository(session)

def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_category_service(
    repo: CategoryRepository = Depends(get_category_repository),
) -> CategoryService:
    return CategoryService(repo)

def get_task_service(
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    return TaskService(repo)
