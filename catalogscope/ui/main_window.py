"""
Main application window for the catalog viewer.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QLabel, QWidget

from catalogscope.core.highlight import HighlightController
from catalogscope.core.models import Catalog, HighlightState
from catalogscope.services.settings import ViewerSettings
from catalogscope.ui.catalog_model import TierColors
from catalogscope.ui.catalog_view import CatalogView


class MainWindow(QMainWindow):
    """
    Main window hosting a single catalog session.

    Menu actions mirror the search bar commands and share its enabled
    state: Lock only while something matches, Clear Locked only while
    something is locked.
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: Optional[ViewerSettings] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._settings = settings or ViewerSettings()
        self._controller = HighlightController(catalog)

        self._setup_ui()
        self._setup_menus()
        self._setup_statusbar()

        self._view.state_changed.connect(self._on_state_changed)
        self._on_state_changed(self._controller.snapshot())

        logging.info(f"MainWindow - Loaded catalog with {len(catalog)} tokens")

    def _setup_ui(self) -> None:
        ui = self._settings.ui
        self.setWindowTitle(ui.window_title)
        self.resize(ui.window_width, ui.window_height)

        colors = TierColors.from_settings(self._settings.colors, ui.theme)
        self._view = CatalogView(
            self._controller,
            colors=colors,
            scroll_settings=self._settings.scroll,
            show_legend=ui.show_legend,
        )
        self._view.list_view.setFont(QFont(ui.font_family, ui.font_size))
        self.setCentralWidget(self._view)

    def _setup_menus(self) -> None:
        """Set up the menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        self._action_exit = QAction("E&xit", self)
        self._action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        self._action_exit.triggered.connect(self.close)
        file_menu.addAction(self._action_exit)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        self._action_find = QAction("&Find...", self)
        self._action_find.setShortcut(QKeySequence.StandardKey.Find)
        self._action_find.triggered.connect(self._view.focus_search)
        edit_menu.addAction(self._action_find)

        edit_menu.addSeparator()

        self._action_lock = QAction("&Lock Matches", self)
        self._action_lock.setShortcut(QKeySequence("Ctrl+L"))
        self._action_lock.triggered.connect(self._on_lock)
        edit_menu.addAction(self._action_lock)

        self._action_clear_locked = QAction("&Clear Locked", self)
        self._action_clear_locked.setShortcut(QKeySequence("Ctrl+Shift+L"))
        self._action_clear_locked.triggered.connect(self._on_clear_locked)
        edit_menu.addAction(self._action_clear_locked)

    def _setup_statusbar(self) -> None:
        self._status_label = QLabel()
        self.statusBar().addPermanentWidget(self._status_label)

    @property
    def controller(self) -> HighlightController:
        return self._controller

    @property
    def view(self) -> CatalogView:
        return self._view

    def _on_lock(self) -> None:
        if self._controller.can_lock:
            self._controller.on_lock_command()

    def _on_clear_locked(self) -> None:
        if self._controller.can_clear_locked:
            self._controller.on_clear_locked_command()

    def _on_state_changed(self, state: HighlightState) -> None:
        self._action_lock.setEnabled(state.can_lock)
        self._action_clear_locked.setEnabled(state.can_clear_locked)
        self._status_label.setText(
            f"{len(self._controller.catalog)} tokens | "
            f"{state.match_count} matched | {state.locked_count} locked"
        )
