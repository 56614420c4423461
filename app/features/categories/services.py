"""
➡️ But : Contenir la logique métier des catégories : valider, orchestrer le repo, gérer les erreurs.

CategoryService : vérifie les champs obligatoires avant tout appel à la base,
vérifie l'existence d'une catégorie avant update/delete.

Lève des erreurs métier (ValidationError, NotFoundError, StoreError) ; la
traduction HTTP est faite par les handlers de app.main.
"""

import logging
import uuid
from typing import Sequence

from app.core.errors import NotFoundError
from app.db.models.categories import Category
from app.db.repositories.categories import CategoryRepository
from app.features.categories.schemas import CategoryCreateIn, CategoryUpdateIn
from app.features.validation import CATEGORY_REQUIRED, ensure_valid

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    # -------- Reads --------

    def list_all(self) -> Sequence[Category]:
        return self.repo.list()

    def get(self, category_id: uuid.UUID) -> Category:
        category = self.repo.get(category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category

    # -------- Writes --------

    def create(self, payload: CategoryCreateIn, *, commit: bool = True) -> Category:
        fields = payload.model_dump()
        ensure_valid(fields, CATEGORY_REQUIRED, log=logger)

        created = self.repo.create(
            commit=commit,
            name=fields["name"].strip(),
            color=fields["color"],
            description=fields["description"],
        )
        logger.info("Category %s created (%s)", created.id, created.name)
        return created

    def update(self, category_id: uuid.UUID, payload: CategoryUpdateIn) -> Category:
        changes = payload.model_dump(exclude_unset=True)
        ensure_valid(changes, CATEGORY_REQUIRED, partial=True, log=logger)
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        # la couleur n'est pas nullable : un null explicite est ignoré
        if changes.get("color") is None:
            changes.pop("color", None)

        category = self.get(category_id)
        updated = self.repo.update(category, **changes)
        logger.info("Category %s updated (%s)", updated.id, ", ".join(sorted(changes)) or "no change")
        return updated

    def delete(self, category_id: uuid.UUID) -> None:
        category = self.get(category_id)
        # les tâches liées gardent leur ligne : category_id passe à NULL (FK ON DELETE SET NULL)
        self.repo.delete(category)
        logger.info("Category %s deleted", category_id)
