# app/db/repositories/tasks.py
import uuid
from typing import Any, List, Optional

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.tasks import Task, TaskStatus
from app.db.models.categories import Category
from app.features.categories.schemas import CategoryOut
from app.features.tasks.schemas import TaskWithCategoryOut


class TaskRepository(BaseRepository[Task]):
    """CRUD Tasks + lectures jointes avec la catégorie."""
    model = Task

    # ---------- HELPERS ----------

    def _select_with_category(self):
        """Jointure externe Task ↔ Category : une tâche sans catégorie ressort avec None."""
        return (
            select(Task, Category)
            .select_from(Task)
            .join(Category, Category.id == Task.category_id, isouter=True)
        )

    def _row_to_out(self, task: Task, category: Optional[Category]) -> TaskWithCategoryOut:
        return TaskWithCategoryOut(
            **task.model_dump(),
            category=CategoryOut.model_validate(category) if category is not None else None,
        )

    # ---------- LECTURES JOINTES ----------

    def list_with_category(
        self,
        *,
        status: Optional[TaskStatus] = None,
        category_id: Optional[uuid.UUID] = None,
    ) -> List[TaskWithCategoryOut]:
        """
        Liste des tâches avec leur catégorie, filtres d'égalité optionnels.
        - status      : limite à un statut
        - category_id : limite à une catégorie
        """
        stmt = self._select_with_category()
        if status is not None:
            stmt = stmt.where(Task.status == status)
        if category_id is not None:
            stmt = stmt.where(Task.category_id == category_id)

        stmt = stmt.order_by(Task.created_at.desc())

        with self._store_call():
            rows = self.session.exec(stmt).all()
        return [self._row_to_out(task, category) for task, category in rows]

    def get_with_category(self, task_id: Any) -> Optional[TaskWithCategoryOut]:
        stmt = self._select_with_category().where(Task.id == task_id)
        with self._store_call():
            row = self.session.exec(stmt).first()
        if row is None:
            return None
        task, category = row
        return self._row_to_out(task, category)
