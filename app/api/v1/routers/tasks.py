import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.v1.dependencies import get_category_service, get_task_service
from app.db.models.tasks import TaskStatus
from app.features.categories.services import CategoryService
from app.features.tasks.board import TaskBoard
from app.features.tasks.filters import ALL
from app.features.tasks.schemas import (
    TaskCreateIn,
    TaskUpdateIn,
    TaskStatusIn,
    TaskOut,
    TaskWithCategoryOut,
    TaskList,
    TaskBoardOut,
)
from app.features.tasks.services import TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={404: {"description": "Not Found"}},
)

# -----------------------------
# Lists
# -----------------------------
@router.get(
    "",
    summary="Lister les tâches",
    description="Tâches jointes avec leur catégorie, les plus récentes d'abord. Filtres d'égalité optionnels.",
    response_model=TaskList,
)
def list_tasks(
    status_: Optional[TaskStatus] = Query(None, alias="status"),
    category_id: Optional[uuid.UUID] = Query(None),
    svc: TaskService = Depends(get_task_service),
):
    if status_ is not None and category_id is not None:
        # les deux filtres : côté base sur le statut, puis en mémoire sur la catégorie
        items = [t for t in svc.list_by_status(status_) if t.category_id == category_id]
    elif status_ is not None:
        items = svc.list_by_status(status_)
    elif category_id is not None:
        items = svc.list_by_category(category_id)
    else:
        items = svc.list_all()
    return TaskList(items=items, total=len(items))

@router.get(
    "/board",
    summary="Vue de la page des tâches",
    description="Toutes les tâches + catégories, filtrées en mémoire par statut et catégorie ('all' = pas de filtre).",
    response_model=TaskBoardOut,
)
def task_board(
    status_filter: str = Query(ALL, alias="status", examples=["all", "todo"]),
    category_filter: str = Query(ALL, alias="category", examples=["all"]),
    svc: TaskService = Depends(get_task_service),
    category_svc: CategoryService = Depends(get_category_service),
):
    board = TaskBoard(
        tasks=svc.list_all(),
        categories=category_svc.list_all(),
        status_filter=status_filter,
        category_filter=category_filter,
    )
    return board.to_out()

# -----------------------------
# CRUD
# -----------------------------
@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
    responses={422: {"description": "Titre manquant"}},
)
def create_task(payload: TaskCreateIn, svc: TaskService = Depends(get_task_service)):
    return svc.create(payload)

@router.get(
    "/{task_id}",
    summary="Récupérer une tâche (avec sa catégorie)",
    response_model=TaskWithCategoryOut,
)
def get_task(task_id: uuid.UUID = Path(...), svc: TaskService = Depends(get_task_service)):
    return svc.get(task_id)

@router.patch(
    "/{task_id}",
    summary="Mettre à jour une tâche",
    description="Seuls les champs envoyés sont modifiés ; updated_at est toujours rafraîchi.",
    response_model=TaskOut,
)
def update_task(
    payload: TaskUpdateIn,
    task_id: uuid.UUID = Path(...),
    svc: TaskService = Depends(get_task_service),
):
    return svc.update(task_id, payload)

@router.patch(
    "/{task_id}/status",
    summary="Changer le statut d'une tâche",
    response_model=TaskOut,
)
def update_task_status(
    payload: TaskStatusIn,
    task_id: uuid.UUID = Path(...),
    svc: TaskService = Depends(get_task_service),
):
    return svc.update_status(task_id, payload.status)

@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_task(task_id: uuid.UUID = Path(...), svc: TaskService = Depends(get_task_service)):
    svc.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
