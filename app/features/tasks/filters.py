"""
➡️ But : Filtrer en mémoire une liste de tâches déjà chargée (sélecteurs de la page).

filter_tasks(tasks, status, category) : garde les tâches dont le statut ET la
catégorie correspondent ; "all" veut dire "pas de restriction".

Fonction pure : même entrée → même sortie, ordre conservé, rejouable sans effet.
"""

from enum import Enum
from typing import Any, Iterable, List, TypeVar

ALL = "all"

T = TypeVar("T")


def _key(value: Any) -> Any:
    # les sélecteurs arrivent en str (query string) ; les tâches portent Enum/UUID
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _matches(selected: Any, actual: Any) -> bool:
    if selected is None or _key(selected) == ALL:
        return True
    return _key(selected) == _key(actual)


def filter_tasks(tasks: Iterable[T], status: Any = ALL, category: Any = ALL) -> List[T]:
    return [
        t for t in tasks
        if _matches(status, getattr(t, "status")) and _matches(category, getattr(t, "category_id"))
    ]
