# controllers/app_controller.py
from __future__ import annotations

import asyncio
import logging

from controllers.dictionary_controller import DictionaryController
from controllers.recent_controller import RecentItemsController
from controllers.status import LOAD_FAILED, outcome_message
from services.data_sets import Entry
from services.errors import ExchangeError, LoadError
from services.exchange_service import export_csv, import_csv
from services.registry import Data

logger = logging.getLogger(__name__)


class AppController:
    """
    Wires the window's panels to the word lists and performs the initial load.

    ``window`` provides ``message_bar``, ``dictionary_panel``, ``recent_panel``,
    the ``import_requested`` / ``export_requested`` signals and the
    ``ask_import_path`` / ``ask_export_path`` pickers.
    """

    def __init__(self, window, data: Data) -> None:
        self._window = window
        self._data = data
        self.messages = window.message_bar

        self.recent = RecentItemsController(window.recent_panel, data=data.recent_items)
        self.dictionary = DictionaryController(
            window.dictionary_panel,
            data=data.dictionary,
            messages=self.messages,
            on_add=self._on_add,
        )

        window.import_requested.connect(self.import_words)
        window.export_requested.connect(self.export_words)

    # ------------------------------------------------------------------
    # Start-up
    # ------------------------------------------------------------------
    async def start(self) -> bool:
        """Load both lists, then render them. Returns False if loading failed."""
        self.messages.set_message("Loading data")
        try:
            await self._data.load_all()
        except LoadError as exc:
            logger.error("Start-up load failed: %s", exc)
            self.messages.set_message(LOAD_FAILED)
            return False

        self.messages.set_message("ready")
        self.dictionary.refresh()
        self.recent.refresh()
        return True

    # ------------------------------------------------------------------
    # Recent items
    # ------------------------------------------------------------------
    def _on_add(self, entry: Entry) -> None:
        result = self._data.recent_items.add(entry)
        result.add_done_callback(self._report_recent)
        self.recent.refresh()

    def _report_recent(self, fut: asyncio.Future) -> None:
        if fut.cancelled() or fut.exception() is None:
            return
        logger.warning("Recent items not saved: %s", fut.exception())
        self.messages.set_message("failed to save recent items")

    # ------------------------------------------------------------------
    # CSV exchange
    # ------------------------------------------------------------------
    def import_words(self) -> asyncio.Future | None:
        path = self._window.ask_import_path()
        if not path:
            return None
        try:
            entries = import_csv(path)
        except ExchangeError as exc:
            logger.warning("Import failed: %s", exc)
            self.messages.set_message(str(exc))
            return None
        if not entries:
            self.messages.set_message("nothing to import")
            return None

        self.messages.set_message("importing items")
        result = self._data.dictionary.merge(entries)
        result.add_done_callback(self._report_import)
        self.dictionary.refresh()
        return result

    def _report_import(self, fut: asyncio.Future) -> None:
        if fut.cancelled() or fut.exception() is not None:
            self.messages.set_message(outcome_message(fut))
            return
        self.messages.set_message(f"imported {fut.result()} new item(s)")

    def export_words(self) -> int | None:
        path = self._window.ask_export_path()
        if not path:
            return None
        try:
            count = export_csv(self._data.dictionary, path)
        except OSError as exc:
            logger.warning("Export to %s failed: %s", path, exc)
            self.messages.set_message(f"failed to export: {exc}")
            return None
        self.messages.set_message(f"exported {count} item(s)")
        return count


__all__ = ["AppController"]
