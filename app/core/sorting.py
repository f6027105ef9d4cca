"""Result ordering. Always returns a new list; sorts are stable.

Name ordering collates with ``locale.strxfrm``. Entry points call
``use_system_collation`` once so the process follows the environment locale
instead of the C locale.
"""
import locale
import logging
from typing import Callable, Dict, Iterable, List, Tuple

from app.core import accessors
from app.core.pricing import price_sort_value
from app.models.creator import CreatorRecord

logger = logging.getLogger(__name__)


def use_system_collation() -> str:
    """Adopt the environment's collation rules; keep the current ones if unavailable."""
    try:
        return locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("System locale unavailable for collation: %s", e)
        return locale.setlocale(locale.LC_COLLATE)


def _name_key(record: CreatorRecord) -> str:
    name = accessors.get_name(record).casefold()
    try:
        return locale.strxfrm(name)
    except ValueError:
        return name


def _price_key(record: CreatorRecord) -> float:
    return price_sort_value(accessors.get_pricing(record))


# sort key -> (record key, descending)
SORTERS: Dict[str, Tuple[Callable[[CreatorRecord], object], bool]] = {
    "followers": (accessors.get_followers, True),
    "views": (accessors.get_total_views, True),
    "price": (_price_key, False),
    "name": (_name_key, False),
}


def sort_creators(records: Iterable[CreatorRecord], key: str) -> List[CreatorRecord]:
    sorter = SORTERS.get(key)
    if sorter is None:
        return list(records)
    record_key, descending = sorter
    return sorted(records, key=record_key, reverse=descending)
