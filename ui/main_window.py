from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFileDialog, QHBoxLayout, QPushButton, QSplitter, QVBoxLayout, QWidget
)

from config import APP_TITLE, ROWS_AFTER, ROWS_BEFORE
from ui.dictionary_panel import DictionaryPanel
from ui.message_bar import MessageBar
from ui.recent_panel import RecentPanel
from ui.styles import PRIMARY_BUTTON_STYLE


class MainWindow(QWidget):
    """Top-level shell: dictionary on the left, recent words on the right, status at the bottom."""

    import_requested = Signal()
    export_requested = Signal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(APP_TITLE)
        self.resize(1000, 700)
        self._build_ui()

    def _build_ui(self):
        lay = QVBoxLayout(self)

        # ---- toolbar ---- #
        bar = QHBoxLayout()
        btn_import = QPushButton("Import CSV…")
        btn_import.setStyleSheet(PRIMARY_BUTTON_STYLE)
        btn_import.clicked.connect(self.import_requested)
        btn_export = QPushButton("Export CSV…")
        btn_export.setStyleSheet(PRIMARY_BUTTON_STYLE)
        btn_export.clicked.connect(self.export_requested)
        bar.addWidget(btn_import)
        bar.addWidget(btn_export)
        bar.addStretch(1)
        lay.addLayout(bar)

        # ---- lists ---- #
        self.split = QSplitter(Qt.Horizontal)
        self.dictionary_panel = DictionaryPanel(ROWS_BEFORE, ROWS_AFTER)
        self.recent_panel = RecentPanel()
        self.split.addWidget(self.dictionary_panel)
        self.split.addWidget(self.recent_panel)
        self.split.setSizes([650, 350])
        lay.addWidget(self.split, 1)

        self.message_bar = MessageBar()
        lay.addWidget(self.message_bar)

    # ------------------------------------------------------------------
    # File pickers
    # ------------------------------------------------------------------
    def ask_import_path(self) -> str:
        path, _ = QFileDialog.getOpenFileName(self, "Import words", "", "CSV files (*.csv)")
        return path

    def ask_export_path(self) -> str:
        path, _ = QFileDialog.getSaveFileName(self, "Export words", "dictionary.csv", "CSV files (*.csv)")
        return path
