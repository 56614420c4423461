"""
➡️ But : Contenir la logique métier des tâches : valider, normaliser, orchestrer le repo, gérer les erreurs.

TaskService :
- valide le titre avant tout appel à la base,
- applique les valeurs par défaut (status=todo, priority=medium),
- horodate updated_at à CHAQUE mise à jour (y compris un simple changement de statut).

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
import uuid
from datetime import timedelta
from typing import List

from app.core.errors import NotFoundError
from app.db.models.base import as_utc, utcnow
from app.db.models.tasks import Task, TaskPriority, TaskStatus
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskWithCategoryOut
from app.features.validation import TASK_REQUIRED, ensure_valid

logger = logging.getLogger(__name__)

# champs non nullables : un null explicite dans un update est ignoré
_NOT_NULLABLE = ("status", "priority")


class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    # -------- Reads --------

    def list_all(self) -> List[TaskWithCategoryOut]:
        return self.repo.list_with_category()

    def list_by_status(self, status: TaskStatus) -> List[TaskWithCategoryOut]:
        return self.repo.list_with_category(status=status)

    def list_by_category(self, category_id: uuid.UUID) -> List[TaskWithCategoryOut]:
        return self.repo.list_with_category(category_id=category_id)

    def get(self, task_id: uuid.UUID) -> TaskWithCategoryOut:
        task = self.repo.get_with_category(task_id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def _get_entity(self, task_id: uuid.UUID) -> Task:
        task = self.repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    # -------- Writes --------

    def create(self, payload: TaskCreateIn, *, commit: bool = True) -> Task:
        """
        Retourne la tâche brute (sans jointure) : recharger pour avoir la catégorie.
        commit=False : l'appelant (seed) valide la transaction lui-même.
        """
        fields = payload.model_dump()
        ensure_valid(fields, TASK_REQUIRED, log=logger)

        now = utcnow()
        created = self.repo.create(
            commit=commit,
            title=fields["title"].strip(),
            description=fields["description"],
            status=fields["status"] or TaskStatus.TODO,
            priority=fields["priority"] or TaskPriority.MEDIUM,
            category_id=fields["category_id"],
            due_date=fields["due_date"],
            created_at=now,
            updated_at=now,
        )
        logger.info("Task %s created (%s)", created.id, created.title)
        return created

    def update(self, task_id: uuid.UUID, payload: TaskUpdateIn) -> Task:
        changes = payload.model_dump(exclude_unset=True)
        ensure_valid(changes, TASK_REQUIRED, partial=True, log=logger)
        if "title" in changes:
            changes["title"] = changes["title"].strip()
        for field in _NOT_NULLABLE:
            if field in changes and changes[field] is None:
                changes.pop(field)

        task = self._get_entity(task_id)

        # updated_at strictement croissant, même si deux updates tombent sur la même microseconde
        previous = as_utc(task.updated_at)
        stamp = utcnow()
        if stamp <= previous:
            stamp = previous + timedelta(microseconds=1)
        changes["updated_at"] = stamp

        updated = self.repo.update(task, **changes)
        logger.info("Task %s updated (%s)", updated.id, ", ".join(sorted(changes)))
        return updated

    def update_status(self, task_id: uuid.UUID, status: TaskStatus) -> Task:
        return self.update(task_id, TaskUpdateIn(status=status))

    def delete(self, task_id: uuid.UUID) -> None:
        task = self._get_entity(task_id)
        self.repo.delete(task)
        logger.info("Task %s deleted", task_id)
