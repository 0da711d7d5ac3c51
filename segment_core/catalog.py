"""
Catalog of selectable schemas.

The catalog is fixed at startup and never mutated; sessions only ever
partition it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional, Tuple

from segment_core.schemas import SchemaItem


Catalog = Tuple[SchemaItem, ...]


class CatalogError(ValueError):
    """Raised when a catalog definition is malformed."""


DEFAULT_SCHEMA_OPTIONS: Catalog = (
    SchemaItem(key="first_name", label="First Name"),
    SchemaItem(key="last_name", label="Last Name"),
    SchemaItem(key="gender", label="Gender"),
    SchemaItem(key="age", label="Age"),
    SchemaItem(key="account_name", label="Account Name"),
    SchemaItem(key="city", label="City"),
    SchemaItem(key="state", label="State"),
)


def build_catalog(items: Iterable[SchemaItem]) -> Catalog:
    """
    Freeze items into a catalog, rejecting empty or duplicate keys.
    """
    catalog = tuple(items)
    seen: set[str] = set()
    for item in catalog:
        if not item.key:
            raise CatalogError("Catalog entries must have a non-empty key")
        if item.key in seen:
            raise CatalogError(f"Duplicate catalog key: {item.key}")
        seen.add(item.key)
    return catalog


def _item_from_entry(entry: object, index: int) -> SchemaItem:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog entry {index} is not an object")
    # "value" is accepted as an alias for "key" (select-option style)
    key = entry.get("key", entry.get("value"))
    label = entry.get("label")
    if not isinstance(key, str) or not isinstance(label, str):
        raise CatalogError(f"Catalog entry {index} needs string 'key' and 'label'")
    return SchemaItem(key=key, label=label)


def load_catalog(path: str | Path) -> Catalog:
    """
    Load a catalog from a JSON array of {"key", "label"} objects.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise CatalogError(f"Catalog file {path} must contain a JSON array")

    return build_catalog(_item_from_entry(entry, idx) for idx, entry in enumerate(raw))


def resolve_catalog(path: Optional[str] = None) -> Catalog:
    """
    Return the configured catalog, or the built-in default when no path is set.
    """
    if path:
        return load_catalog(path)
    return DEFAULT_SCHEMA_OPTIONS
