from __future__ import annotations

from typing import Iterable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from services.data_sets import Entry
from ui.font import list_word_font, title_font, translation_font, translation_palette


class RecentPanel(QWidget):
    """Right-hand side: the most recently added words."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self):
        lay = QVBoxLayout(self)

        title = QLabel("Recent")
        title.setFont(title_font)
        lay.addWidget(title)

        self._list_container = QWidget()
        self._list_layout = QVBoxLayout(self._list_container)
        self._list_layout.setAlignment(Qt.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._list_container)
        lay.addWidget(scroll, 1)

    def show_entries(self, entries: Iterable[Entry]) -> None:
        # clear old rows
        while self._list_layout.count():
            w = self._list_layout.takeAt(0).widget()
            if w:
                w.deleteLater()

        for entry in entries:
            row = QWidget()
            row_lay = QHBoxLayout(row)
            row_lay.setContentsMargins(4, 2, 4, 2)
            word = QLabel(entry.word)
            word.setFont(list_word_font)
            translation = QLabel(entry.translation)
            translation.setFont(translation_font)
            translation.setPalette(translation_palette)
            row_lay.addWidget(word, 1)
            row_lay.addWidget(translation, 1)
            self._list_layout.addWidget(row)

        self._list_layout.addStretch(1)
