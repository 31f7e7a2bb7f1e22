from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QLineEdit, QMessageBox, QPushButton,
    QVBoxLayout, QWidget
)

from services.data_sets import Entry
from ui.font import list_word_font, translation_font, translation_palette
from ui.styles import (
    FORM_ROW_STYLE, LINE_EDIT_STYLE, LIST_ROW_STYLE, PRIMARY_BUTTON_STYLE, RED_BUTTON_STYLE
)


class _ListRow(QFrame):
    """One dictionary line: word, translation and a delete button."""

    delete_clicked = Signal(str)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("listRow")
        self.setStyleSheet(LIST_ROW_STYLE)
        self._entry: Entry | None = None

        lay = QHBoxLayout(self)
        lay.setContentsMargins(8, 2, 8, 2)
        self.word_label = QLabel("-")
        self.word_label.setFont(list_word_font)
        self.translation_label = QLabel("-")
        self.translation_label.setFont(translation_font)
        self.translation_label.setPalette(translation_palette)
        self.delete_button = QPushButton("Delete")
        self.delete_button.setStyleSheet(RED_BUTTON_STYLE)
        self.delete_button.setFocusPolicy(Qt.NoFocus)
        self.delete_button.clicked.connect(self._on_delete)

        lay.addWidget(self.word_label, 1)
        lay.addWidget(self.translation_label, 1)
        lay.addWidget(self.delete_button)

    def set_entry(self, entry: Entry | None) -> None:
        self._entry = entry
        self.word_label.setText(entry.word if entry else "-")
        self.translation_label.setText(entry.translation if entry else "-")
        self.delete_button.setVisible(entry is not None)

    def _on_delete(self):
        if self._entry is not None:
            self.delete_clicked.emit(self._entry.word)


class DictionaryPanel(QWidget):
    """Word form in the middle of the dictionary, neighbours above and below.

    The panel only renders; :class:`controllers.dictionary_controller.DictionaryController`
    decides what to show.
    """

    # --- outgoing signals --- #
    word_edited = Signal(str)
    translation_edited = Signal(str)
    add_requested = Signal()
    delete_requested = Signal(str)

    def __init__(self, rows_before: int, rows_after: int, parent: QWidget | None = None):
        super().__init__(parent)
        self._rows_before: list[_ListRow] = []
        self._rows_after: list[_ListRow] = []
        self._build_ui(rows_before, rows_after)

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------
    def _build_ui(self, rows_before: int, rows_after: int):
        lay = QVBoxLayout(self)
        lay.setAlignment(Qt.AlignTop)

        for _ in range(rows_before):
            self._rows_before.append(self._add_list_row(lay))

        # ---- form row ---- #
        form = QFrame()
        form.setObjectName("formRow")
        form.setStyleSheet(FORM_ROW_STYLE)
        form_lay = QHBoxLayout(form)

        self.word_input = QLineEdit()
        self.word_input.setPlaceholderText("word")
        self.word_input.setStyleSheet(LINE_EDIT_STYLE)
        self.word_input.textChanged.connect(self.word_edited)

        self.translation_input = QLineEdit()
        self.translation_input.setPlaceholderText("translation")
        self.translation_input.setStyleSheet(LINE_EDIT_STYLE)
        self.translation_input.textEdited.connect(self.translation_edited)
        self.translation_input.returnPressed.connect(self.add_requested)

        self.add_button = QPushButton("Add")
        self.add_button.setStyleSheet(PRIMARY_BUTTON_STYLE)
        self.add_button.setFocusPolicy(Qt.NoFocus)
        self.add_button.clicked.connect(self.add_requested)
        self.add_button.hide()

        form_lay.addWidget(self.word_input, 1)
        form_lay.addWidget(self.translation_input, 1)
        form_lay.addWidget(self.add_button)
        lay.addWidget(form)

        for _ in range(rows_after):
            self._rows_after.append(self._add_list_row(lay))

        lay.addStretch(1)

    def _add_list_row(self, lay: QVBoxLayout) -> _ListRow:
        row = _ListRow()
        row.delete_clicked.connect(self.delete_requested)
        lay.addWidget(row)
        return row

    # ------------------------------------------------------------------
    # Rendering (called by the controller)
    # ------------------------------------------------------------------
    def word_text(self) -> str:
        return self.word_input.text()

    def translation_text(self) -> str:
        return self.translation_input.text()

    def set_translation(self, text: str, enabled: bool) -> None:
        self.translation_input.setText(text)
        self.translation_input.setEnabled(enabled)

    def set_add_visible(self, visible: bool) -> None:
        self.add_button.setVisible(visible)

    def show_rows(self, before: Sequence[Optional[Entry]], after: Sequence[Optional[Entry]]) -> None:
        for row, entry in zip(self._rows_before, before):
            row.set_entry(entry)
        for row, entry in zip(self._rows_after, after):
            row.set_entry(entry)

    def focus_word(self) -> None:
        self.word_input.setFocus()
        self.word_input.selectAll()

    def confirm_delete(self, word: str) -> bool:
        answer = QMessageBox.question(
            self,
            "Delete",
            f'Are you sure you want to delete "{word}"?',
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return answer == QMessageBox.Yes
