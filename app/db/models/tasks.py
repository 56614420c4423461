"""Table des tâches. Le statut et la priorité sont des énumérations fermées."""

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field

from .base import BaseModelDB, utcnow


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(BaseModelDB, table=True):
    title: str = Field(index=True, description="Titre de la tâche")
    description: Optional[str] = Field(default=None)

    status: TaskStatus = Field(default=TaskStatus.TODO, index=True)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)

    # Clé étrangère : la base remet à NULL si la catégorie est supprimée
    category_id: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="category.id",
        ondelete="SET NULL",
        index=True,
    )
    due_date: Optional[date] = Field(default=None)

    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
