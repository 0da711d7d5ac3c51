"""
Segment composer lifecycle.

The composer owns one draft at a time. Opening, cancelling and submitting
all leave a freshly built draft behind: available is the full catalog in
catalog order, chosen is empty, name and pending selection are blank.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from segment_core.catalog import Catalog
from segment_core.logger import get_logger
from segment_core.schemas import SchemaItem
from segment_core.selection_set import SelectionSet
from segment_core.submission import SubmitController, build_payload


logger = get_logger(__name__)


class Visibility(str, Enum):
    """Whether the editing surface is showing."""
    CLOSED = "closed"
    OPEN = "open"


@dataclass
class SegmentDraft:
    """
    In-progress segment definition for one open session.
    """
    selection: SelectionSet
    name: str = ""
    pending_key: str = ""

    @classmethod
    def fresh(cls, catalog: Catalog) -> "SegmentDraft":
        return cls(selection=SelectionSet(catalog))


@dataclass
class SegmentComposer:
    """
    State machine over visibility plus the current draft.

    Edits are only live while open; while closed they are ignored.
    """
    catalog: Catalog
    controller: SubmitController
    visibility: Visibility = Visibility.CLOSED
    _draft: SegmentDraft = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._draft = SegmentDraft.fresh(self.catalog)

    # ---- Read-only views ----

    @property
    def draft(self) -> SegmentDraft:
        """
        The current draft, exposed for identity checks only.

        Mutate it through the composer operations; they carry the open/closed gate.
        """
        return self._draft

    @property
    def is_open(self) -> bool:
        return self.visibility is Visibility.OPEN

    @property
    def name(self) -> str:
        return self._draft.name

    @property
    def pending_key(self) -> str:
        return self._draft.pending_key

    @property
    def available(self) -> Tuple[SchemaItem, ...]:
        return self._draft.selection.available

    @property
    def chosen(self) -> Tuple[SchemaItem, ...]:
        return self._draft.selection.chosen

    # ---- Lifecycle ----

    def _reset(self) -> None:
        self._draft = SegmentDraft.fresh(self.catalog)

    def open(self) -> None:
        if self.is_open:
            return
        self._reset()
        self.visibility = Visibility.OPEN
        logger.debug("Composer opened")

    def cancel(self) -> None:
        if not self.is_open:
            return
        self._reset()
        self.visibility = Visibility.CLOSED
        logger.debug("Composer cancelled")

    def submit(self) -> Optional[threading.Thread]:
        """
        Dispatch the current draft, then reset and close immediately.

        Returns the dispatch thread, or None when the composer is closed.
        """
        if not self.is_open:
            return None
        payload = build_payload(self._draft.name, self._draft.selection.chosen)
        handle = self.controller.submit(payload)
        self._reset()
        self.visibility = Visibility.CLOSED
        logger.debug("Composer submitted and closed")
        return handle

    # ---- Edits ----

    def set_name(self, name: str) -> None:
        if self.is_open:
            self._draft.name = name

    def set_pending(self, key: Optional[str]) -> None:
        if self.is_open:
            self._draft.pending_key = key or ""

    def add_to_chosen(self, key: Optional[str] = None) -> bool:
        """
        Move `key` (or the pending selection) from available to chosen.

        The pending selection is cleared after a successful add.
        """
        if not self.is_open:
            return False
        target = self._draft.pending_key if key is None else key
        if not self._draft.selection.add_to_chosen(target):
            return False
        self._draft.pending_key = ""
        return True

    def remove_from_chosen(self, item: SchemaItem | str | None) -> bool:
        if not self.is_open:
            return False
        return self._draft.selection.remove_from_chosen(item)
