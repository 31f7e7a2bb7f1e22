from __future__ import annotations

from PySide6.QtWidgets import QLabel, QWidget

from ui.styles import MESSAGE_BAR_STYLE


class MessageBar(QLabel):
    """One-line progress / status text at the bottom of the window."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setStyleSheet(MESSAGE_BAR_STYLE)

    def set_message(self, msg: str) -> None:
        self.setText(msg)
