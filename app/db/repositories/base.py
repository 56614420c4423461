import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, Session, select
from fastapi import status

from app.core.errors import StoreError

# Type générique pour le modèle (Category, Task)
ModelT = TypeVar("ModelT", bound=SQLModel)

logger = logging.getLogger(__name__)


def _store_message(exc: SQLAlchemyError) -> str:
    """Message brut de la base (sans la requête SQL que SQLAlchemy ajoute)."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Toute erreur SQLAlchemy remonte en StoreError (avec rollback).
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _store_call(self) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("%s rejected by store: %s", self.model.__name__, _store_message(exc))
            raise StoreError(_store_message(exc), status_code=status.HTTP_409_CONFLICT) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("%s store call failed: %s", self.model.__name__, _store_message(exc))
            raise StoreError(_store_message(exc)) from exc

    # ---------- READ ----------

    def list(self) -> Sequence[ModelT]:
        """Retourne tous les enregistrements, les plus récents d'abord."""
        statement = select(self.model).order_by(self.model.created_at.desc())
        with self._store_call():
            return self.session.exec(statement).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        with self._store_call():
            return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Crée et persiste un nouvel enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        entity = self.model(**fields)
        with self._store_call():
            self.session.add(entity)
            if commit:
                self.session.commit()
                self.session.refresh(entity)
            else:
                # flush pour obtenir l'ID sans commit (utile pour FKs)
                self.session.flush()
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        """Met à jour un enregistrement existant (seuls les champs passés changent)."""
        for key, value in changes.items():
            setattr(entity, key, value)
        with self._store_call():
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        """Supprime un enregistrement."""
        with self._store_call():
            self.session.delete(entity)
            self.session.commit()
