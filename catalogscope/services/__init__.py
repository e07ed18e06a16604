"""
Application services.
"""

from catalogscope.services.settings import (
    Theme,
    TierColorSettings,
    ScrollSettings,
    UISettings,
    ViewerSettings,
)

__all__ = [
    'Theme',
    'TierColorSettings',
    'ScrollSettings',
    'UISettings',
    'ViewerSettings',
]
