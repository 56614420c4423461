"""
➡️ But : Encapsuler toutes les opérations de base de données.

CategoryRepository : CRUD (create, read, update, delete) sur la table Category.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mock du repo sans base réelle).
"""

from typing import Optional
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.categories import Category

class CategoryRepository(BaseRepository[Category]):
    model = Category

    def get_by_name(self, name: str) -> Optional[Category]:
        """Première catégorie portant exactement ce nom (utilisé par le seed)."""
        statement = select(Category).where(Category.name == name).order_by(Category.created_at.asc())
        with self._store_call():
            return self.session.exec(statement).first()
