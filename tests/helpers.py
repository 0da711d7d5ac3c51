"""Test helpers shared across modules."""

import threading


class RecordingSink:
    """Sink that records payloads and signals each call."""

    def __init__(self):
        self.payloads = []
        self.called = threading.Event()

    def __call__(self, payload):
        self.payloads.append(payload)
        self.called.set()
        return {"ok": True}


def keys(items):
    return [item.key for item in items]
