"""Segment composition core: catalog, selection partition, lifecycle and submission."""

from segment_core.catalog import (
    Catalog,
    CatalogError,
    DEFAULT_SCHEMA_OPTIONS,
    build_catalog,
    load_catalog,
    resolve_catalog,
)
from segment_core.composer import SegmentComposer, SegmentDraft, Visibility
from segment_core.schemas import SchemaItem, SegmentPayload
from segment_core.selection_set import SelectionSet
from segment_core.submission import SubmitController, WebhookSink, build_payload

__all__ = [
    "Catalog",
    "CatalogError",
    "DEFAULT_SCHEMA_OPTIONS",
    "build_catalog",
    "load_catalog",
    "resolve_catalog",
    "SegmentComposer",
    "SegmentDraft",
    "Visibility",
    "SchemaItem",
    "SegmentPayload",
    "SelectionSet",
    "SubmitController",
    "WebhookSink",
    "build_payload",
]
