import uuid
from typing import Annotated, List, Optional
from datetime import datetime
from pydantic import BaseModel, BeforeValidator, Field as PydField

from app.db.models.categories import DEFAULT_COLOR


def strip_or_none(value):
    """'' / '   ' → None, sinon la chaîne trimée."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


# Texte optionnel : une chaîne vide devient null
OptionalText = Annotated[Optional[str], BeforeValidator(strip_or_none)]


# ---------- IN / UPDATE ----------

class CategoryCreateIn(BaseModel):
    # pas de min_length ici : la règle "obligatoire" est appliquée par le service
    name: Optional[str] = PydField("", description="Nom de la catégorie", examples=["Work"])
    color: str = PydField(DEFAULT_COLOR, description="Couleur d'affichage", examples=["#3b82f6"])
    description: OptionalText = None


class CategoryUpdateIn(BaseModel):
    """Chaque champ est présent ou absent ; seuls les champs envoyés sont modifiés."""
    name: Optional[str] = None
    color: Optional[str] = None
    description: OptionalText = None


# ---------- OUT ----------

class CategoryOut(BaseModel):
    id: uuid.UUID
    name: str
    color: str
    description: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class CategoryList(BaseModel):
    items: List[CategoryOut]
    total: int
