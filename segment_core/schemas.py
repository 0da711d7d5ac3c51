"""
Data shapes for segment composition.

SchemaItem is the unit of the catalog; SegmentPayload is the wire form sent
to the sink when a segment is saved.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SchemaItem:
    """
    A selectable attribute schema. Identity is `key`.
    """
    key: str
    label: str


class SegmentPayload(BaseModel):
    """Serialized segment definition."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    segment_name: str = ""
    # Each entry is a single-key mapping {key: label}, in chosen order
    schema_items: list[dict[str, str]] = Field(default_factory=list, alias="schema")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
