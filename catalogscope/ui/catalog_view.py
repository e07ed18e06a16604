"""
Catalog view combining the search bar and the highlighted token list.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import (
    QAbstractAnimation, QEasingCurve, QPropertyAnimation, pyqtSignal
)
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QListView, QAbstractItemView
)

from catalogscope.core.highlight import HighlightController
from catalogscope.core.models import HighlightState, ScrollRequest
from catalogscope.services.settings import ScrollSettings
from catalogscope.ui.catalog_model import CatalogListModel, TierColors
from catalogscope.ui.widgets.search_bar import SearchBar
from catalogscope.ui.widgets.tier_legend import TierLegend


class CatalogView(QWidget):
    """
    View over one catalog session.

    Wires the search bar commands to the controller and honours the
    controller's scroll requests by centering the requested row.
    """

    # Emitted after every controller transition
    state_changed = pyqtSignal(object)  # HighlightState

    def __init__(
        self,
        controller: HighlightController,
        colors: Optional[TierColors] = None,
        scroll_settings: Optional[ScrollSettings] = None,
        show_legend: bool = True,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._controller = controller
        self._colors = colors or TierColors()
        self._scroll_settings = scroll_settings or ScrollSettings()
        self._show_legend = show_legend
        self._last_scroll_request: Optional[ScrollRequest] = None

        self._setup_ui()
        self._connect_signals()
        self._on_state_changed(controller.snapshot())

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.search_bar = SearchBar()
        layout.addWidget(self.search_bar)

        self.model = CatalogListModel(self._controller, self._colors, self)

        self.list_view = QListView()
        self.list_view.setModel(self.model)
        self.list_view.setUniformItemSizes(True)
        self.list_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.list_view.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.list_view.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        layout.addWidget(self.list_view, 1)

        self.legend = TierLegend(colors=self._colors)
        self.legend.setVisible(self._show_legend)
        layout.addWidget(self.legend)

        self._scroll_animation = QPropertyAnimation(
            self.list_view.verticalScrollBar(), b"value", self
        )
        self._scroll_animation.setDuration(self._scroll_settings.duration_ms)
        self._scroll_animation.setEasingCurve(QEasingCurve.Type.InOutQuad)

    def _connect_signals(self) -> None:
        self.search_bar.search_changed.connect(self._controller.on_search_text_changed)
        self.search_bar.lock_requested.connect(self._controller.on_lock_command)
        self.search_bar.clear_locked_requested.connect(self._controller.on_clear_locked_command)

        self._controller.add_scroll_listener(self.scroll_to_request)
        self._controller.add_state_listener(self._on_state_changed)

    @property
    def controller(self) -> HighlightController:
        return self._controller

    @property
    def last_scroll_request(self) -> Optional[ScrollRequest]:
        """Most recent scroll request received from the controller."""
        return self._last_scroll_request

    def focus_search(self) -> None:
        self.search_bar.focus_search()

    def scroll_to_request(self, request: ScrollRequest) -> None:
        """
        Bring the requested row into view.

        A new request stops any running animation and scrolls from the
        current position, so the last request always wins.
        """
        self._last_scroll_request = request

        if not self._controller.catalog.is_valid_index(request.index):
            logging.warning(f"CatalogView - Scroll request for invalid index {request.index}")
            return

        if self._scroll_animation.state() == QAbstractAnimation.State.Running:
            self._scroll_animation.stop()

        hint = (
            QAbstractItemView.ScrollHint.PositionAtCenter
            if request.centered
            else QAbstractItemView.ScrollHint.EnsureVisible
        )

        scrollbar = self.list_view.verticalScrollBar()
        start = scrollbar.value()
        self.list_view.scrollTo(self.model.index(request.index, 0), hint)
        target = scrollbar.value()

        if start == target:
            return

        if request.smooth and self._scroll_settings.animate:
            scrollbar.setValue(start)
            self._scroll_animation.setStartValue(start)
            self._scroll_animation.setEndValue(target)
            self._scroll_animation.start()

    def _on_state_changed(self, state: HighlightState) -> None:
        self.search_bar.set_state(state)
        self.state_changed.emit(state)
