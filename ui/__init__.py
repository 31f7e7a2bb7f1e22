from ui.dictionary_panel import DictionaryPanel
from ui.main_window import MainWindow
from ui.message_bar import MessageBar
from ui.recent_panel import RecentPanel

__all__ = [
    "MainWindow",
    "DictionaryPanel",
    "RecentPanel",
    "MessageBar",
]
