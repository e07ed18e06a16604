"""
Core data models for the catalog viewer.

This module defines the value types shared by the core and the UI:
- The immutable token catalog
- Highlight tiers and their precedence
- Match results and scroll requests
- Render feed items and state snapshots

All models are UI-agnostic and immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, overload

from catalogscope.core.tokenizer import tokenize


# =============================================================================
# Enumerations
# =============================================================================

class HighlightTier(Enum):
    """Render classification of a catalog index."""
    DEFAULT = 0   # Not matched, not locked
    MATCHED = 1   # Matches the current search text
    LOCKED = 2    # Frozen by an explicit lock command
    
    @property
    def label(self) -> str:
        return self.name.capitalize()


# =============================================================================
# Catalog
# =============================================================================

@dataclass(frozen=True)
class Catalog:
    """
    Ordered, immutable sequence of identifier tokens.
    
    The index of a token is its identity. Duplicate tokens are legal and
    are addressed independently by index.
    """
    tokens: tuple[str, ...] = ()
    
    @classmethod
    def from_text(cls, raw: str) -> 'Catalog':
        """Build a catalog by tokenizing raw catalog text."""
        return cls(tokenize(raw))
    
    def __len__(self) -> int:
        return len(self.tokens)
    
    @overload
    def __getitem__(self, index: int) -> str: ...
    
    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...
    
    def __getitem__(self, index):
        return self.tokens[index]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)
    
    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.tokens)


# =============================================================================
# Highlight Models
# =============================================================================

@dataclass(frozen=True)
class MatchResult:
    """Matches derived from a search text against a catalog."""
    indices: frozenset[int] = frozenset()
    first_index: Optional[int] = None
    
    @property
    def count(self) -> int:
        return len(self.indices)
    
    @property
    def has_matches(self) -> bool:
        return bool(self.indices)


@dataclass(frozen=True)
class ScrollRequest:
    """
    Fire-and-forget request to bring a catalog index into view.
    
    The rendering side is expected to no-op a scroll to an element
    that is already centered.
    """
    index: int
    smooth: bool = True
    centered: bool = True


@dataclass(frozen=True)
class RenderItem:
    """One row of the render feed."""
    index: int
    text: str
    tier: HighlightTier


@dataclass(frozen=True)
class HighlightState:
    """Snapshot of the highlight controller state."""
    search_text: str = ""
    match_set: frozenset[int] = frozenset()
    locked_set: frozenset[int] = frozenset()
    first_match_index: Optional[int] = None
    
    @property
    def can_lock(self) -> bool:
        return bool(self.match_set)
    
    @property
    def can_clear_locked(self) -> bool:
        return bool(self.locked_set)
    
    @property
    def match_count(self) -> int:
        return len(self.match_set)
    
    @property
    def locked_count(self) -> int:
        return len(self.locked_set)
