from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt6.QtGui import QPixmap
from typing import Optional

from catalogscope.core.models import HighlightTier
from catalogscope.ui.catalog_model import TierColors


class TierLegend(QWidget):
    def __init__(self, parent=None, colors: Optional[TierColors] = None):
        super().__init__(parent)

        self._colors = colors or TierColors()
        self._color_boxes = []

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(15, 5, 15, 5)
        self._layout.setSpacing(15)

        self._add_legend_item(self._colors.background(HighlightTier.MATCHED), "Search Match")
        self._add_legend_item(self._colors.background(HighlightTier.LOCKED), "Locked")
        self._layout.addStretch()

    def _add_legend_item(self, color, text):
        """Add a single legend item."""
        color_box = QLabel()
        pixmap = QPixmap(16, 16)
        pixmap.fill(color)
        color_box.setPixmap(pixmap)
        self._layout.addWidget(color_box)
        self._color_boxes.append(color_box)

        label = QLabel(text)
        self._layout.addWidget(label)
