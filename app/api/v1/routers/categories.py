"""
➡️ But : Définir les endpoints de l’API pour les catégories.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PATCH, DELETE…)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Les erreurs métier (ValidationError, NotFoundError, StoreError) remontent
telles quelles : les handlers de app.main les traduisent en réponse JSON.
"""

import uuid

from fastapi import APIRouter, Depends, Path, Response, status
from app.api.v1.dependencies import get_category_service
from app.features.categories.schemas import CategoryCreateIn, CategoryUpdateIn, CategoryOut, CategoryList
from app.features.categories.services import CategoryService

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les catégories",
    description="Retourne toutes les catégories, les plus récentes d'abord.",
    response_model=CategoryList,
)
def list_categories(svc: CategoryService = Depends(get_category_service)):
    items = [CategoryOut.model_validate(c) for c in svc.list_all()]
    return CategoryList(items=items, total=len(items))

@router.post(
    "",
    summary="Créer une catégorie",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryOut,
    responses={422: {"description": "Nom manquant"}},
)
def create_category(payload: CategoryCreateIn, svc: CategoryService = Depends(get_category_service)):
    return svc.create(payload)

@router.get(
    "/{category_id}",
    summary="Récupérer une catégorie",
    response_model=CategoryOut,
)
def get_category(category_id: uuid.UUID = Path(...), svc: CategoryService = Depends(get_category_service)):
    return svc.get(category_id)

@router.patch(
    "/{category_id}",
    summary="Mettre à jour une catégorie",
    description="Seuls les champs envoyés sont modifiés.",
    response_model=CategoryOut,
)
def update_category(
    payload: CategoryUpdateIn,
    category_id: uuid.UUID = Path(...),
    svc: CategoryService = Depends(get_category_service),
):
    return svc.update(category_id, payload)

@router.delete(
    "/{category_id}",
    summary="Supprimer une catégorie",
    description="Les tâches rattachées sont conservées, sans catégorie.",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_category(category_id: uuid.UUID = Path(...), svc: CategoryService = Depends(get_category_service)):
    svc.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
