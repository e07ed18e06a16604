"""
Core catalog logic.

Provides:
- The tolerant catalog tokenizer
- Immutable catalog and highlight models
- The highlight controller (search, match, lock)
"""

from catalogscope.core.tokenizer import (
    tokenize,
    iter_tokens,
)
from catalogscope.core.models import (
    Catalog,
    HighlightTier,
    HighlightState,
    MatchResult,
    RenderItem,
    ScrollRequest,
)
from catalogscope.core.highlight import (
    HighlightController,
    compute_matches,
)

__all__ = [
    # Tokenizer
    'tokenize',
    'iter_tokens',
    # Models
    'Catalog',
    'HighlightTier',
    'HighlightState',
    'MatchResult',
    'RenderItem',
    'ScrollRequest',
    # Controller
    'HighlightController',
    'compute_matches',
]
