"""
➡️ But : Représenter l'état de la page des tâches pour UNE requête.

TaskBoard regroupe ce que la page affiche : toutes les tâches (jointes), les
catégories pour les sélecteurs, et les deux filtres choisis. Il est construit
à chaque requête (aucun état partagé entre pages ou entre requêtes).
"""

from dataclasses import dataclass
from typing import List, Sequence

from app.db.models.categories import Category
from app.features.categories.schemas import CategoryOut
from app.features.tasks.filters import ALL, filter_tasks
from app.features.tasks.schemas import TaskBoardOut, TaskWithCategoryOut


@dataclass
class TaskBoard:
    tasks: List[TaskWithCategoryOut]
    categories: Sequence[Category]
    status_filter: str = ALL
    category_filter: str = ALL

    def visible(self) -> List[TaskWithCategoryOut]:
        return filter_tasks(self.tasks, status=self.status_filter, category=self.category_filter)

    def to_out(self) -> TaskBoardOut:
        items = self.visible()
        return TaskBoardOut(
            items=items,
            total=len(items),
            categories=[CategoryOut.model_validate(c) for c in self.categories],
            status_filter=self.status_filter,
            category_filter=self.category_filter,
        )
