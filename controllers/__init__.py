"""Controllers: glue between the Qt panels and the word lists."""

from .app_controller import AppController
from .dictionary_controller import DictionaryController
from .recent_controller import RecentItemsController

__all__: list[str] = [
    "AppController",
    "DictionaryController",
    "RecentItemsController",
]
