from __future__ import annotations

import asyncio

from config import ROWS_AFTER, ROWS_BEFORE
from controllers.status import outcome_message, rejected
from services.data_sets import Entry
from utils import options_filter


class DictionaryController:
    """
    Drives the dictionary panel: shows the neighbourhood of the typed word and
    forwards add / delete intents to the dictionary data set.

    Options (all required): ``data`` (DictionaryDataSet), ``messages``
    (anything with ``set_message``) and ``on_add`` (called with each accepted entry).
    """

    def __init__(self, view, **opts) -> None:
        self._view = view
        self.get_opt = options_filter(opts, {
            "data": "required",
            "messages": "required",
            "on_add": "required",
        })

        # Wire view signals ➜ local handlers
        view.word_edited.connect(self.refresh)
        view.translation_edited.connect(self.enable_add)
        view.add_requested.connect(self.add)
        view.delete_requested.connect(self.delete)

    # --------------------------------------------------------------------- #
    # Intents
    # --------------------------------------------------------------------- #
    def add(self) -> asyncio.Future | None:
        """Add the word in the form to the dictionary."""
        word = self._view.word_text()
        translation = self._view.translation_text()
        if not word.strip() or not translation:
            return None

        entry = Entry(word=word, translation=translation)
        self.get_opt("messages").set_message("adding item")

        result = self.get_opt("data").add(entry)
        result.add_done_callback(self._report)
        if not rejected(result):
            self.get_opt("on_add")(entry)

        self.refresh()
        self._view.focus_word()
        return result

    def delete(self, word: str) -> asyncio.Future | None:
        if not self._view.confirm_delete(word):
            return None

        self.get_opt("messages").set_message("deleting item")
        result = self.get_opt("data").delete(word)
        result.add_done_callback(self._report)

        self.refresh()
        return result

    # --------------------------------------------------------------------- #
    # Rendering
    # --------------------------------------------------------------------- #
    def refresh(self, *_) -> None:
        """Show the words around what is being typed in."""
        word = self._view.word_text()
        hood = self.get_opt("data").neighborhood(word, ROWS_BEFORE, ROWS_AFTER)

        if hood.match is not None:
            self._view.set_translation(hood.match.translation, enabled=False)
        else:
            self._view.set_translation("", enabled=True)
        self._view.set_add_visible(False)

        self._view.show_rows(hood.before, hood.after)

    def enable_add(self, *_) -> None:
        """Add button is only offered once there is a translation."""
        self._view.set_add_visible(bool(self._view.translation_text()))

    def _report(self, fut: asyncio.Future) -> None:
        self.get_opt("messages").set_message(outcome_message(fut))


__all__ = ["DictionaryController"]
