from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

# Première couleur de la palette du formulaire (bleu)
DEFAULT_COLOR = "#3b82f6"


class Category(BaseModelDB, table=True):
    """Catégories de tâches, avec une couleur d'affichage.

    Suppression : les tâches liées sont gérées par la FK (task.category_id ON DELETE SET NULL).
    """

    name: str = Field(index=True, description="Nom de la catégorie (ex: 'Work', 'Perso', etc.)")
    color: str = Field(default=DEFAULT_COLOR, description="Couleur d'affichage (chaîne opaque, ex: '#3b82f6')")
    description: Optional[str] = Field(default=None, description="Description de la catégorie")
