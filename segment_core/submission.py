"""
Segment submission: payload building and fire-and-forget dispatch.

The sink runs on a detached daemon thread. Its outcome is only logged;
nothing waits on it and it never touches composer state.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Iterable, Optional

import requests

from segment_core.logger import get_logger
from segment_core.schemas import SchemaItem, SegmentPayload


logger = get_logger(__name__)

Sink = Callable[[dict], Any]


def build_payload(segment_name: str, chosen: Iterable[SchemaItem]) -> SegmentPayload:
    """
    Map the chosen items, in order, to single-key {key: label} entries.

    No validation: an empty name or empty selection is a legal payload.
    """
    return SegmentPayload(
        segment_name=segment_name,
        schema_items=[{item.key: item.label} for item in chosen],
    )


class WebhookSink:
    """
    POST the payload as JSON to a webhook URL.
    """

    def __init__(self, url: str, session: Optional[requests.Session] = None):
        self.url = url
        self.session = session or requests.Session()

    def __call__(self, payload: dict) -> Any:
        response = self.session.post(
            self.url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            return response.text


class SubmitController:
    """
    Hands payloads to a sink without blocking the caller.
    """

    def __init__(self, sink: Sink):
        self.sink = sink

    def _run(self, payload: dict) -> None:
        try:
            result = self.sink(payload)
        except Exception as exc:
            logger.error("Segment submit failed for %r: %s", payload.get("segment_name"), exc)
            return
        logger.info("Segment submit succeeded for %r: %s", payload.get("segment_name"), result)

    def submit(self, payload: SegmentPayload) -> threading.Thread:
        """
        Start the sink call on a daemon thread and return it unjoined.
        """
        wire = payload.to_wire()
        thread = threading.Thread(
            target=self._run,
            args=(wire,),
            name="segment-submit",
            daemon=True,
        )
        thread.start()
        logger.debug("Dispatched segment %r with %d schemas", wire["segment_name"], len(wire["schema"]))
        return thread
