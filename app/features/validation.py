"""
➡️ But : Règles de validation communes avant create/update.

Un seul type de règle : champ obligatoire, non vide après trim.
Le résultat est un dict champ → message (vide si tout est bon), prêt à être
affiché à côté du champ fautif.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from app.core.errors import ValidationError

CATEGORY_REQUIRED: Dict[str, str] = {"name": "Name is required"}
TASK_REQUIRED: Dict[str, str] = {"title": "Title is required"}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_required(
    data: Mapping[str, Any],
    rules: Mapping[str, str],
    *,
    partial: bool = False,
) -> Dict[str, str]:
    """
    Retourne {champ: message} pour chaque champ obligatoire manquant ou vide.
    partial=True (update) : seuls les champs présents dans `data` sont vérifiés.
    """
    errors: Dict[str, str] = {}
    for field, message in rules.items():
        if partial and field not in data:
            continue
        if _is_blank(data.get(field)):
            errors[field] = message
    return errors


def ensure_valid(
    data: Mapping[str, Any],
    rules: Mapping[str, str],
    *,
    partial: bool = False,
    log: Optional[logging.Logger] = None,
) -> None:
    """
    Lève ValidationError si au moins une règle échoue.
    log : logger de l'appelant (service), qui trace le refus en WARNING.
    """
    errors = validate_required(data, rules, partial=partial)
    if errors:
        if log is not None:
            log.warning("Validation failed: %s", errors)
        raise ValidationError(errors)
