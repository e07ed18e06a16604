"""
Reusable UI widgets for the catalog viewer.

Provides specialized widgets for:
- Search input with lock controls
- Highlight tier legend
"""

from catalogscope.ui.widgets.search_bar import (
    SearchBar,
    SearchLineEdit,
)
from catalogscope.ui.widgets.tier_legend import (
    TierLegend,
)

__all__ = [
    # Search
    'SearchBar',
    'SearchLineEdit',
    # Legend
    'TierLegend',
]
