"""
Highlight state for the catalog viewer.

Owns the search text and the locked set, and derives the match set and
first match from them. Three tiers are rendered per index:
- Default
- Matched (contains the current search text)
- Locked (frozen by an explicit lock command)

Locked always wins over Matched, which wins over Default.

All handlers run synchronously to completion. Scroll requests are
emitted to listeners after each recomputation that yields a match and
the controller keeps no record of whether they were honoured.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from catalogscope.core.models import (
    Catalog, HighlightState, HighlightTier, MatchResult, RenderItem,
    ScrollRequest
)


ScrollListener = Callable[[ScrollRequest], None]
StateListener = Callable[[HighlightState], None]


def compute_matches(catalog: Catalog, text: str) -> MatchResult:
    """
    Derive the match set for a search text.

    Args:
        catalog: Catalog to search
        text: Search text, compared case-insensitively as a substring

    Returns:
        MatchResult with the matching indices and the smallest of them
    """
    if not text.strip():
        return MatchResult()

    needle = text.lower()
    indices = [
        index for index, token in enumerate(catalog)
        if needle in token.lower()
    ]

    if not indices:
        return MatchResult()

    return MatchResult(frozenset(indices), indices[0])


class HighlightController:
    """
    Search, match and lock state for one catalog session.

    Usage:
        controller = HighlightController(Catalog.from_text(raw))
        controller.add_scroll_listener(view.scroll_to_request)
        controller.set_search_text("abc")
        controller.lock_current_matches()
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._search_text = ""
        self._matches = MatchResult()
        self._locked: set[int] = set()
        self._scroll_listeners: list[ScrollListener] = []
        self._state_listeners: list[StateListener] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def match_set(self) -> frozenset[int]:
        return self._matches.indices

    @property
    def locked_set(self) -> frozenset[int]:
        return frozenset(self._locked)

    @property
    def first_match_index(self) -> Optional[int]:
        """Smallest matching index, or None when nothing matches."""
        return self._matches.first_index

    @property
    def can_lock(self) -> bool:
        return self._matches.has_matches

    @property
    def can_clear_locked(self) -> bool:
        return bool(self._locked)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def add_scroll_listener(self, callback: ScrollListener) -> None:
        """Add a callback receiving scroll-into-view requests."""
        self._scroll_listeners.append(callback)

    def remove_scroll_listener(self, callback: ScrollListener) -> None:
        if callback in self._scroll_listeners:
            self._scroll_listeners.remove(callback)

    def add_state_listener(self, callback: StateListener) -> None:
        """Add a callback notified with a snapshot after every transition."""
        self._state_listeners.append(callback)

    def remove_state_listener(self, callback: StateListener) -> None:
        if callback in self._state_listeners:
            self._state_listeners.remove(callback)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def set_search_text(self, text: str) -> None:
        """Replace the search text and recompute matches."""
        self._search_text = text
        self._recompute()
        logging.debug(
            f"HighlightController - Search {text!r}: "
            f"{self._matches.count} matches, first={self._matches.first_index}"
        )
        self._notify_state()

    def lock_current_matches(self) -> None:
        """
        Merge the current matches into the locked set and clear the search.

        With no matches the locked set is unchanged but the search text
        is still cleared.
        """
        added = self._matches.indices - self._locked
        self._locked |= self._matches.indices
        logging.debug(
            f"HighlightController - Locked {len(added)} new indices "
            f"({len(self._locked)} total)"
        )
        self._search_text = ""
        self._recompute()
        self._notify_state()

    def clear_locked(self) -> None:
        """Empty the locked set. Search text and matches are untouched."""
        if self._locked:
            logging.debug(f"HighlightController - Cleared {len(self._locked)} locked indices")
        self._locked.clear()
        self._notify_state()

    def render_tier_of(self, index: int) -> HighlightTier:
        """Project an index onto its render tier."""
        if index in self._locked:
            return HighlightTier.LOCKED
        if index in self._matches.indices:
            return HighlightTier.MATCHED
        return HighlightTier.DEFAULT

    def render_items(self) -> Iterator[RenderItem]:
        """Yield the render feed for every catalog index in order."""
        for index, token in enumerate(self._catalog):
            yield RenderItem(index, token, self.render_tier_of(index))

    def snapshot(self) -> HighlightState:
        """Get an immutable copy of the current state."""
        return HighlightState(
            search_text=self._search_text,
            match_set=self._matches.indices,
            locked_set=frozenset(self._locked),
            first_match_index=self._matches.first_index,
        )

    # -------------------------------------------------------------------------
    # Command handlers for the rendering side
    # -------------------------------------------------------------------------

    def on_search_text_changed(self, text: str) -> None:
        self.set_search_text(text)

    def on_lock_command(self) -> None:
        self.lock_current_matches()

    def on_clear_locked_command(self) -> None:
        self.clear_locked()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _recompute(self) -> None:
        """Derive matches from the search text and request a scroll."""
        self._matches = compute_matches(self._catalog, self._search_text)

        if self._matches.first_index is not None:
            request = ScrollRequest(self._matches.first_index)
            for callback in list(self._scroll_listeners):
                callback(request)

    def _notify_state(self) -> None:
        state = self.snapshot()
        for callback in list(self._state_listeners):
            callback(state)
