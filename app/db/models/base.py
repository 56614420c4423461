"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """Heure UTC avec tzinfo (les colonnes datetime refusent les valeurs naïves)."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Relecture : certains backends (SQLite) rendent une heure naïve, on la remet en UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    # id opaque généré à l'insertion, jamais réassigné
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
