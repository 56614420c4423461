import uuid
from typing import Annotated, List, Optional
from datetime import date, datetime
from pydantic import BaseModel, BeforeValidator, Field as PydField

from app.db.models.tasks import TaskPriority, TaskStatus
from app.features.categories.schemas import CategoryOut, OptionalText, strip_or_none

# '' (select "None" / date vide côté formulaire) → null
OptionalCategoryId = Annotated[Optional[uuid.UUID], BeforeValidator(strip_or_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(strip_or_none)]


# ---------- IN / UPDATE ----------

class TaskCreateIn(BaseModel):
    # pas de min_length ici : la règle "obligatoire" est appliquée par le service
    title: Optional[str] = PydField("", description="Titre de la tâche", examples=["Write report"])
    description: OptionalText = None
    status: Optional[TaskStatus] = PydField(None, description="todo par défaut")
    priority: Optional[TaskPriority] = PydField(None, description="medium par défaut")
    category_id: OptionalCategoryId = None
    due_date: OptionalDate = PydField(None, examples=["2025-01-31"])


class TaskUpdateIn(BaseModel):
    """Chaque champ est présent ou absent ; seuls les champs envoyés sont modifiés."""
    title: Optional[str] = None
    description: OptionalText = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category_id: OptionalCategoryId = None
    due_date: OptionalDate = None


class TaskStatusIn(BaseModel):
    status: TaskStatus = PydField(..., examples=["completed"])


# ---------- OUT ----------

class TaskOut(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: TaskPriority
    category_id: Optional[uuid.UUID]
    due_date: Optional[date]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TaskWithCategoryOut(TaskOut):
    """Projection de lecture : la tâche + sa catégorie résolue (ou None)."""
    category: Optional[CategoryOut] = None


class TaskList(BaseModel):
    items: List[TaskWithCategoryOut]
    total: int


class TaskBoardOut(BaseModel):
    """Vue de la page des tâches : liste filtrée + catégories pour les sélecteurs."""
    items: List[TaskWithCategoryOut]
    total: int
    categories: List[CategoryOut]
    status_filter: str
    category_filter: str
