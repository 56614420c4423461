"""
➡️ But : Définir les erreurs métier renvoyées par les couches d'accès aux données.

ValidationError : champ obligatoire vide, levée AVANT tout appel à la base.

StoreError : la base a refusé l'écriture ou n'a pas répondu (porte le message de la base).

NotFoundError : l'id ciblé n'existe pas (variante de StoreError).

Chaque erreur porte un `kind` et un `message` ; la conversion en réponse HTTP
se fait uniquement dans app.main (handlers d'exceptions).
"""

from typing import Dict, Optional

from fastapi import status


class AppError(Exception):
    kind: str = "error"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ValidationError(AppError):
    kind = "validation"
    status_code = 422  # Unprocessable Content

    def __init__(self, errors: Dict[str, str]):
        # message lisible : on reprend le premier message de champ
        message = next(iter(errors.values()), "Invalid data")
        super().__init__(message)
        self.errors = dict(errors)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class StoreError(AppError):
    kind = "store"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class NotFoundError(StoreError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
