"""
Available/chosen partition of a catalog.

Items only ever move between the two lists, so every catalog key is present
in exactly one of them. `add_to_chosen` and `remove_from_chosen` are the only
mutators; both absorb invalid input as a no-op.
"""

from __future__ import annotations

from typing import Optional, Tuple

from segment_core.catalog import Catalog
from segment_core.schemas import SchemaItem


class SelectionSet:
    """
    Two ordered partitions over one catalog.

    Chosen keeps insertion order. Items removed from chosen are appended to
    the end of available rather than restored to their catalog position.
    """

    def __init__(self, catalog: Catalog):
        self._by_key: dict[str, SchemaItem] = {item.key: item for item in catalog}
        self._available: list[SchemaItem] = list(catalog)
        self._chosen: list[SchemaItem] = []
        self._chosen_keys: set[str] = set()

    @property
    def available(self) -> Tuple[SchemaItem, ...]:
        return tuple(self._available)

    @property
    def chosen(self) -> Tuple[SchemaItem, ...]:
        return tuple(self._chosen)

    def is_available(self, key: Optional[str]) -> bool:
        return bool(key) and key in self._by_key and key not in self._chosen_keys

    def is_chosen(self, key: Optional[str]) -> bool:
        return bool(key) and key in self._chosen_keys

    def add_to_chosen(self, key: Optional[str]) -> bool:
        """
        Move the available item with `key` to the end of chosen.

        Returns False (without mutating) for an empty, unknown or already
        chosen key.
        """
        if not self.is_available(key):
            return False
        item = self._by_key[key]
        self._available = [a for a in self._available if a.key != key]
        self._chosen.append(item)
        self._chosen_keys.add(key)
        return True

    def remove_from_chosen(self, item: SchemaItem | str | None) -> bool:
        """
        Move a chosen item (matched by key) to the end of available.
        """
        key = item.key if isinstance(item, SchemaItem) else item
        if not self.is_chosen(key):
            return False
        moved = self._by_key[key]
        self._chosen = [c for c in self._chosen if c.key != key]
        self._chosen_keys.discard(key)
        self._available.append(moved)
        return True
