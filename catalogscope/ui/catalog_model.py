"""
List model exposing the catalog render feed to Qt views.

Each row is one catalog index with:
- The token as display text
- The highlight tier under TIER_ROLE
- Background and foreground colors for the tier
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from PyQt6.QtCore import Qt, QAbstractListModel, QModelIndex, QObject
from PyQt6.QtGui import QBrush, QColor

from catalogscope.core.highlight import HighlightController
from catalogscope.core.models import HighlightState, HighlightTier
from catalogscope.services.settings import Theme, TierColorSettings


TIER_ROLE = Qt.ItemDataRole.UserRole + 1


@dataclass
class TierColors:
    """Color scheme for the highlight tiers."""
    default_bg: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    default_fg: QColor = field(default_factory=lambda: QColor(36, 41, 46))
    matched_bg: QColor = field(default_factory=lambda: QColor(255, 248, 197))  # #fff8c5
    matched_fg: QColor = field(default_factory=lambda: QColor(36, 41, 46))
    locked_bg: QColor = field(default_factory=lambda: QColor(218, 251, 225))  # #dafbe1
    locked_fg: QColor = field(default_factory=lambda: QColor(17, 99, 41))

    @classmethod
    def from_settings(
        cls,
        settings: TierColorSettings,
        theme: Theme = Theme.LIGHT
    ) -> 'TierColors':
        """Build colors from settings for the given theme."""
        if theme == Theme.DARK:
            return cls(
                default_bg=QColor(settings.dark_default_background),
                default_fg=QColor(settings.dark_default_text),
                matched_bg=QColor(settings.dark_matched_background),
                matched_fg=QColor(settings.dark_matched_text),
                locked_bg=QColor(settings.dark_locked_background),
                locked_fg=QColor(settings.dark_locked_text),
            )
        return cls(
            default_bg=QColor(settings.default_background),
            default_fg=QColor(settings.default_text),
            matched_bg=QColor(settings.matched_background),
            matched_fg=QColor(settings.matched_text),
            locked_bg=QColor(settings.locked_background),
            locked_fg=QColor(settings.locked_text),
        )

    def background(self, tier: HighlightTier) -> QColor:
        if tier == HighlightTier.LOCKED:
            return self.locked_bg
        if tier == HighlightTier.MATCHED:
            return self.matched_bg
        return self.default_bg

    def foreground(self, tier: HighlightTier) -> QColor:
        if tier == HighlightTier.LOCKED:
            return self.locked_fg
        if tier == HighlightTier.MATCHED:
            return self.matched_fg
        return self.default_fg


class CatalogListModel(QAbstractListModel):
    """
    Model with one row per catalog index.

    Rows never move or change count; every controller transition only
    repaints them.
    """

    def __init__(
        self,
        controller: HighlightController,
        colors: Optional[TierColors] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self._controller = controller
        self._colors = colors or TierColors()
        self._controller.add_state_listener(self._on_state_changed)

    @property
    def controller(self) -> HighlightController:
        return self._controller

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._controller.catalog)

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not self._controller.catalog.is_valid_index(index.row()):
            return None

        row = index.row()

        if role == Qt.ItemDataRole.DisplayRole:
            return self._controller.catalog[row]

        elif role == TIER_ROLE:
            return self._controller.render_tier_of(row)

        elif role == Qt.ItemDataRole.BackgroundRole:
            return QBrush(self._colors.background(self._controller.render_tier_of(row)))

        elif role == Qt.ItemDataRole.ForegroundRole:
            return QBrush(self._colors.foreground(self._controller.render_tier_of(row)))

        elif role == Qt.ItemDataRole.ToolTipRole:
            tier = self._controller.render_tier_of(row)
            return f"#{row}: {self._controller.catalog[row]} ({tier.label})"

        return None

    def _on_state_changed(self, state: HighlightState) -> None:
        self._refresh_rows()

    def _refresh_rows(self) -> None:
        count = self.rowCount()
        if count == 0:
            return
        self.dataChanged.emit(self.index(0, 0), self.index(count - 1, 0))
