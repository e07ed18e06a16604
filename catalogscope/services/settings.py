"""
Viewer settings.

Settings live in memory only. They are built from defaults and command
line options, and are never written to disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Theme(Enum):
    """UI theme options."""
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_string(cls, value: str) -> 'Theme':
        """Create from string value."""
        try:
            # Try to match by value
            for theme in cls:
                if theme.value == value.lower():
                    return theme
            # Try to match by name
            return cls[value.upper()]
        except (KeyError, AttributeError):
            return cls.SYSTEM


@dataclass
class TierColorSettings:
    """Colors for the three highlight tiers."""
    default_background: str = "#ffffff"
    default_text: str = "#24292e"
    matched_background: str = "#fff8c5"
    matched_text: str = "#24292e"
    locked_background: str = "#dafbe1"
    locked_text: str = "#116329"

    # Dark theme overrides
    dark_default_background: str = "#282828"
    dark_default_text: str = "#dcdcdc"
    dark_matched_background: str = "#5a5020"
    dark_matched_text: str = "#ffff96"
    dark_locked_background: str = "#1e3a1e"
    dark_locked_text: str = "#96ff96"


@dataclass
class ScrollSettings:
    """Scroll-into-view behaviour."""
    animate: bool = True
    duration_ms: int = 250


@dataclass
class UISettings:
    """User interface settings."""
    theme: Theme = Theme.LIGHT
    font_family: str = "Consolas"
    font_size: int = 10
    window_width: int = 900
    window_height: int = 700
    window_title: str = "Catalog Scope"
    show_legend: bool = True


@dataclass
class ViewerSettings:
    """Main settings container."""
    ui: UISettings = field(default_factory=UISettings)
    colors: TierColorSettings = field(default_factory=TierColorSettings)
    scroll: ScrollSettings = field(default_factory=ScrollSettings)
