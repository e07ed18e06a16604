"""
PyQt6 User Interface module.

Provides the main application window and the catalog view:
- Searchable, highlighted token list
- Lock and clear-locked commands
- Animated scroll to the first match
"""

from catalogscope.ui.main_window import MainWindow
from catalogscope.ui.catalog_view import CatalogView
from catalogscope.ui.catalog_model import CatalogListModel, TierColors, TIER_ROLE

__all__ = [
    'MainWindow',
    'CatalogView',
    'CatalogListModel',
    'TierColors',
    'TIER_ROLE',
]
