import pytest

from segment_core import SchemaItem, Visibility

from helpers import keys


def test_initial_state_is_closed_and_reset(composer):
    assert composer.visibility is Visibility.CLOSED
    assert not composer.is_open
    assert keys(composer.available) == ["k1", "k2", "k3"]
    assert composer.chosen == ()
    assert composer.name == ""
    assert composer.pending_key == ""


def test_scenario_walkthrough(composer, sink):
    composer.open()
    assert keys(composer.available) == ["k1", "k2", "k3"]
    assert composer.chosen == ()

    composer.add_to_chosen("k2")
    assert keys(composer.available) == ["k1", "k3"]
    assert keys(composer.chosen) == ["k2"]

    composer.add_to_chosen("k1")
    assert keys(composer.available) == ["k3"]
    assert keys(composer.chosen) == ["k2", "k1"]

    composer.remove_from_chosen(SchemaItem(key="k2", label="Email"))
    assert keys(composer.available) == ["k3", "k2"]
    assert keys(composer.chosen) == ["k1"]

    composer.set_name("S1")
    handle = composer.submit()
    handle.join(timeout=5)

    assert sink.payloads == [{"segment_name": "S1", "schema": [{"k1": "Name"}]}]
    assert composer.visibility is Visibility.CLOSED
    assert keys(composer.available) == ["k1", "k2", "k3"]
    assert composer.chosen == ()
    assert composer.name == ""


def test_add_empty_key_on_fresh_open_is_noop(composer):
    composer.open()
    assert not composer.add_to_chosen("")
    assert keys(composer.available) == ["k1", "k2", "k3"]
    assert composer.chosen == ()


def test_open_then_cancel_restores_reset_state(composer, sink):
    before = (composer.available, composer.chosen, composer.name)
    composer.open()
    composer.cancel()
    assert composer.visibility is Visibility.CLOSED
    assert (composer.available, composer.chosen, composer.name) == before
    assert sink.payloads == []


def test_cancel_discards_edits_and_restores_catalog(composer):
    composer.open()
    composer.set_name("draft")
    composer.add_to_chosen("k3")
    composer.add_to_chosen("k1")
    composer.remove_from_chosen("k3")
    draft = composer.draft

    composer.cancel()

    assert composer.draft is not draft
    assert keys(composer.available) == ["k1", "k2", "k3"]
    assert composer.chosen == ()
    assert composer.name == ""


def test_add_uses_pending_selection_and_clears_it(composer):
    composer.open()
    composer.set_pending("k2")
    assert composer.add_to_chosen()
    assert composer.pending_key == ""
    assert keys(composer.chosen) == ["k2"]

    # Stale pending state cannot re-add
    assert not composer.add_to_chosen()
    assert keys(composer.chosen) == ["k2"]


def test_failed_add_keeps_pending_selection(composer):
    composer.open()
    composer.add_to_chosen("k1")
    composer.set_pending("k1")
    assert not composer.add_to_chosen()
    assert composer.pending_key == "k1"
    assert keys(composer.chosen) == ["k1"]


def test_edits_ignored_while_closed(composer):
    composer.set_name("ignored")
    composer.set_pending("k1")
    assert not composer.add_to_chosen("k1")
    assert not composer.remove_from_chosen("k1")
    assert composer.name == ""
    assert composer.pending_key == ""
    assert composer.chosen == ()


def test_open_while_open_keeps_draft(composer):
    composer.open()
    composer.add_to_chosen("k1")
    composer.open()
    assert keys(composer.chosen) == ["k1"]


def test_submit_while_closed_dispatches_nothing(composer, sink):
    assert composer.submit() is None
    assert sink.payloads == []


def test_submit_allows_empty_draft(composer, sink):
    composer.open()
    composer.submit().join(timeout=5)
    assert sink.payloads == [{"segment_name": "", "schema": []}]


def test_reopen_after_submit_starts_fresh(composer):
    composer.open()
    composer.set_name("first")
    composer.add_to_chosen("k2")
    composer.remove_from_chosen("k2")
    composer.submit().join(timeout=5)

    composer.open()
    assert composer.is_open
    assert keys(composer.available) == ["k1", "k2", "k3"]
    assert composer.name == ""


def test_draft_is_not_assignable(composer):
    with pytest.raises(AttributeError):
        composer.draft = None
