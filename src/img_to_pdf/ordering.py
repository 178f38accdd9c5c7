"""
Page ordering policies
"""

import os
from enum import Enum
from typing import Iterable, List

from .file_collector import ImageEntry


class SortOrder(Enum):
    SEQUENTIAL = "seq"
    BY_NAME = "nam"
    BY_MOD_TIME = "mod"

    @classmethod
    def parse(cls, value: str) -> "SortOrder":
        """Map a command-line value to an order, defaulting to sequential"""
        key = (value or "").strip().lower()
        return _ALIASES.get(key, cls.SEQUENTIAL)


_ALIASES = {
    "seq": SortOrder.SEQUENTIAL,
    "sequential": SortOrder.SEQUENTIAL,
    "nam": SortOrder.BY_NAME,
    "name": SortOrder.BY_NAME,
    "by-name": SortOrder.BY_NAME,
    "mod": SortOrder.BY_MOD_TIME,
    "by-modification-time": SortOrder.BY_MOD_TIME,
}


def _name_key(entry: ImageEntry) -> bytes:
    return os.fsencode(os.path.basename(entry.path))


def sort_images(entries: Iterable[ImageEntry], order: SortOrder) -> List[ImageEntry]:
    """Return the entries in page order.

    Sorting is stable: entries with equal names or equal modification times
    keep their discovery order.
    """
    if order is SortOrder.BY_NAME:
        return sorted(entries, key=_name_key)
    if order is SortOrder.BY_MOD_TIME:
        return sorted(entries, key=lambda entry: entry.mod_time)
    return list(entries)
