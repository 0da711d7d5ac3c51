"""Shared pytest fixtures."""

import pytest

from segment_core import SchemaItem, SegmentComposer, SubmitController, build_catalog

from helpers import RecordingSink


@pytest.fixture
def catalog():
    return build_catalog([
        SchemaItem(key="k1", label="Name"),
        SchemaItem(key="k2", label="Email"),
        SchemaItem(key="k3", label="Age"),
    ])


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def composer(catalog, sink):
    return SegmentComposer(catalog=catalog, controller=SubmitController(sink))
