"""
Search bar for filtering the catalog.

Provides:
- Incremental search input
- Match and locked counters
- Lock and Clear Locked commands
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QKeyEvent, QPalette
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QLineEdit, QPushButton, QLabel, QFrame
)

from catalogscope.core.models import HighlightState


class SearchLineEdit(QLineEdit):
    """
    Line edit for search input.

    Features:
    - Clear button
    - Visual feedback for matches
    - Return locks the current matches, Escape clears the text
    """

    # Signal when search text changes
    search_requested = pyqtSignal(str)

    # Signal when Return is pressed
    lock_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._match_count = 0

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Setup the widget."""
        self.setPlaceholderText("Search catalog...")
        self.setClearButtonEnabled(True)
        self.setMinimumWidth(200)

        self._update_style()

        self.textChanged.connect(self._on_text_changed)
        self.returnPressed.connect(self.lock_requested.emit)

    def _update_style(self) -> None:
        """Update style based on state."""
        if self._match_count > 0:
            self.setStyleSheet("""
                QLineEdit {
                    background-color: #e0ffe0;
                    border: 1px solid #66cc66;
                }
            """)
        elif self.text().strip() and self._match_count == 0:
            self.setStyleSheet("""
                QLineEdit {
                    background-color: #fff0e0;
                    border: 1px solid #ffaa66;
                }
            """)
        else:
            self.setStyleSheet("")

    def set_match_count(self, count: int) -> None:
        """Set match count for visual feedback."""
        self._match_count = count
        self._update_style()

    def _on_text_changed(self, text: str) -> None:
        self.search_requested.emit(text)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Handle key events."""
        if event.key() == Qt.Key.Key_Escape:
            self.clear()
            return

        super().keyPressEvent(event)


class SearchBar(QFrame):
    """
    Search bar with lock controls.

    The Lock button is enabled only while something matches and the
    Clear Locked button only while something is locked.
    """

    # Signal when search text changes
    search_changed = pyqtSignal(str)

    # Command signals
    lock_requested = pyqtSignal()
    clear_locked_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._state = HighlightState()

        self._setup_ui()
        self._connect_signals()
        self.set_state(self._state)

    def _setup_ui(self) -> None:
        """Setup the widget UI."""
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setAutoFillBackground(True)

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, QColor(250, 250, 250))
        self.setPalette(palette)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(6)

        search_label = QLabel("🔍")
        layout.addWidget(search_label)

        self.search_input = SearchLineEdit()
        self.search_input.setMinimumWidth(250)
        layout.addWidget(self.search_input)

        self.match_label = QLabel()
        self.match_label.setMinimumWidth(90)
        self.match_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.match_label)

        layout.addSpacing(10)

        self.lock_btn = QPushButton("Lock")
        self.lock_btn.setToolTip("Lock current matches (Enter)")
        layout.addWidget(self.lock_btn)

        self.clear_locked_btn = QPushButton("Clear Locked")
        self.clear_locked_btn.setToolTip("Remove all locked highlights")
        layout.addWidget(self.clear_locked_btn)

        self.locked_label = QLabel()
        self.locked_label.setMinimumWidth(80)
        layout.addWidget(self.locked_label)

        layout.addStretch()

    def _connect_signals(self) -> None:
        """Connect widget signals."""
        self.search_input.search_requested.connect(self.search_changed.emit)
        self.search_input.lock_requested.connect(self._on_lock)
        self.lock_btn.clicked.connect(self._on_lock)
        self.clear_locked_btn.clicked.connect(self._on_clear_locked)

    def _on_lock(self) -> None:
        # Return in the input bypasses the button, so check here too
        if self._state.can_lock:
            self.lock_requested.emit()

    def _on_clear_locked(self) -> None:
        if self._state.can_clear_locked:
            self.clear_locked_requested.emit()

    def set_state(self, state: HighlightState) -> None:
        """Reflect controller state in the bar."""
        self._state = state

        # Lock clears the search; keep the input in sync without re-emitting
        if self.search_input.text() != state.search_text:
            self.search_input.blockSignals(True)
            self.search_input.setText(state.search_text)
            self.search_input.blockSignals(False)

        self.lock_btn.setEnabled(state.can_lock)
        self.clear_locked_btn.setEnabled(state.can_clear_locked)
        self.search_input.set_match_count(state.match_count)

        if not state.search_text.strip():
            self.match_label.setText("")
            self.match_label.setStyleSheet("")
        elif state.match_count == 0:
            self.match_label.setText("No matches")
            self.match_label.setStyleSheet("color: #cc6600;")
        else:
            noun = "match" if state.match_count == 1 else "matches"
            self.match_label.setText(f"{state.match_count} {noun}")
            self.match_label.setStyleSheet("color: #006600;")

        if state.locked_count:
            self.locked_label.setText(f"{state.locked_count} locked")
        else:
            self.locked_label.setText("")

    def focus_search(self) -> None:
        """Focus the search input and select all."""
        self.search_input.setFocus()
        self.search_input.selectAll()
