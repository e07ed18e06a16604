import logging

import pytest

from catalogscope.core.highlight import HighlightController, compute_matches
from catalogscope.core.models import Catalog, HighlightTier, ScrollRequest


RAW = "Alpha; beta\nALPHABET gamma;delta\nalpha"


@pytest.fixture
def controller():
    return HighlightController(Catalog.from_text(RAW))


@pytest.fixture
def scrolls(controller):
    received = []
    controller.add_scroll_listener(received.append)
    return received


def test_catalog_indices(controller):
    assert controller.catalog.tokens == ("Alpha", "beta", "ALPHABET", "gamma", "delta", "alpha")


def test_initial_state_is_empty(controller):
    assert controller.search_text == ""
    assert controller.match_set == frozenset()
    assert controller.locked_set == frozenset()
    assert controller.first_match_index is None
    assert not controller.can_lock
    assert not controller.can_clear_locked


def test_search_is_case_insensitive_substring(controller):
    controller.set_search_text("ALP")
    assert controller.match_set == {0, 2, 5}
    assert controller.first_match_index == 0


def test_first_match_is_smallest_index(controller):
    controller.set_search_text("ta")
    assert controller.match_set == {1, 4}
    assert controller.first_match_index == 1


def test_no_match_has_no_first_index(controller, scrolls):
    controller.set_search_text("zzz")
    assert controller.match_set == frozenset()
    assert controller.first_match_index is None
    assert scrolls == []


def test_empty_search_resets_matches(controller):
    controller.set_search_text("a")
    controller.set_search_text("")
    assert controller.match_set == frozenset()
    assert controller.first_match_index is None


def test_whitespace_search_counts_as_empty_but_is_stored(controller, scrolls):
    controller.set_search_text("   ")
    assert controller.search_text == "   "
    assert controller.match_set == frozenset()
    assert controller.first_match_index is None
    assert scrolls == []


def test_interior_whitespace_is_not_trimmed(controller):
    controller.set_search_text(" alpha")
    assert controller.match_set == frozenset()


def test_scroll_request_on_every_match_recompute(controller, scrolls):
    controller.set_search_text("al")
    controller.set_search_text("alp")
    assert scrolls == [ScrollRequest(0), ScrollRequest(0)]
    assert scrolls[0].smooth and scrolls[0].centered


def test_scroll_request_follows_first_match(controller, scrolls):
    controller.set_search_text("gam")
    assert scrolls == [ScrollRequest(3)]


def test_lock_merges_matches_and_clears_search(controller):
    controller.set_search_text("alpha")
    controller.lock_current_matches()
    assert controller.locked_set == {0, 2, 5}
    assert controller.search_text == ""
    assert controller.match_set == frozenset()
    assert controller.first_match_index is None


def test_lock_is_a_union(controller):
    controller.set_search_text("beta")
    controller.lock_current_matches()
    controller.set_search_text("delta")
    controller.lock_current_matches()
    assert controller.locked_set == {1, 4}


def test_lock_with_no_matches_only_clears_search(controller):
    controller.set_search_text("gamma")
    controller.lock_current_matches()
    controller.set_search_text("nothing")
    controller.lock_current_matches()
    assert controller.locked_set == {3}
    assert controller.search_text == ""


def test_lock_twice_is_idempotent(controller):
    controller.set_search_text("alpha")
    controller.lock_current_matches()
    controller.lock_current_matches()
    assert controller.locked_set == {0, 2, 5}


def test_clear_locked_keeps_search(controller):
    controller.set_search_text("beta")
    controller.lock_current_matches()
    controller.set_search_text("gam")
    controller.clear_locked()
    assert controller.locked_set == frozenset()
    assert controller.search_text == "gam"
    assert controller.match_set == {3}


def test_clear_locked_when_empty(controller):
    controller.clear_locked()
    assert controller.locked_set == frozenset()


def test_render_tier_precedence(controller):
    controller.set_search_text("alpha")
    controller.lock_current_matches()
    controller.set_search_text("ALPHABET")
    assert controller.match_set == {2}
    assert controller.render_tier_of(2) == HighlightTier.LOCKED
    assert controller.render_tier_of(0) == HighlightTier.LOCKED
    assert controller.render_tier_of(1) == HighlightTier.DEFAULT


def test_render_tier_matched(controller):
    controller.set_search_text("gam")
    assert controller.render_tier_of(3) == HighlightTier.MATCHED
    assert controller.render_tier_of(4) == HighlightTier.DEFAULT


def test_render_tier_out_of_range_is_default(controller):
    assert controller.render_tier_of(99) == HighlightTier.DEFAULT
    assert controller.render_tier_of(-1) == HighlightTier.DEFAULT


def test_locks_survive_unrelated_searches(controller):
    controller.set_search_text("delta")
    controller.lock_current_matches()
    controller.set_search_text("gamma")
    assert controller.render_tier_of(4) == HighlightTier.LOCKED
    controller.set_search_text("")
    assert controller.render_tier_of(4) == HighlightTier.LOCKED
    assert controller.locked_set == {4}


def test_render_items_cover_catalog_in_order(controller):
    controller.set_search_text("beta")
    controller.lock_current_matches()
    controller.set_search_text("gam")
    items = list(controller.render_items())
    assert [item.index for item in items] == list(range(6))
    assert [item.text for item in items] == list(controller.catalog)
    assert items[1].tier == HighlightTier.LOCKED
    assert items[2].tier == HighlightTier.DEFAULT
    assert items[3].tier == HighlightTier.MATCHED
    assert items[0].tier == HighlightTier.DEFAULT


def test_duplicates_are_addressed_by_index():
    controller = HighlightController(Catalog.from_text("dup;other;dup"))
    controller.set_search_text("dup")
    assert controller.match_set == {0, 2}
    assert controller.first_match_index == 0


def test_state_listener_receives_snapshots(controller):
    states = []
    controller.add_state_listener(states.append)
    controller.set_search_text("gam")
    controller.lock_current_matches()
    controller.clear_locked()

    assert [s.search_text for s in states] == ["gam", "", ""]
    assert states[0].match_set == {3}
    assert states[0].can_lock
    assert states[1].locked_set == {3}
    assert states[1].can_clear_locked
    assert not states[1].can_lock
    assert states[2].locked_set == frozenset()


def test_removed_listener_is_not_called(controller):
    received = []
    controller.add_scroll_listener(received.append)
    controller.remove_scroll_listener(received.append)
    controller.set_search_text("alpha")
    assert received == []


def test_command_handlers_delegate(controller):
    controller.on_search_text_changed("delta")
    controller.on_lock_command()
    assert controller.locked_set == {4}
    controller.on_clear_locked_command()
    assert controller.locked_set == frozenset()


def test_snapshot_is_detached(controller):
    controller.set_search_text("gam")
    controller.lock_current_matches()
    snapshot = controller.snapshot()
    controller.clear_locked()
    assert snapshot.locked_set == {3}
    assert snapshot.locked_count == 1


def test_transitions_are_logged(controller, caplog):
    with caplog.at_level(logging.DEBUG):
        controller.set_search_text("alpha")
        controller.lock_current_matches()
    assert "3 matches" in caplog.text
    assert "Locked 3 new indices" in caplog.text


def test_compute_matches_empty_catalog():
    result = compute_matches(Catalog(), "a")
    assert result.indices == frozenset()
    assert result.first_index is None
    assert not result.has_matches


def test_compute_matches_counts():
    result = compute_matches(Catalog.from_text("ab;AB;c"), "Ab")
    assert result.indices == {0, 1}
    assert result.count == 2
    assert result.first_index == 0
