"""services/data_sets.py
-------------------------------------------------
In-memory word lists mirrored to the vocab server.

Each data set owns the full list for one domain and a server endpoint. The
list is mutated synchronously so the UI can redraw right away; persisting is
a full replace (``PUT`` of the whole list) that completes later. A failed
write is reported through the returned future and never rolled back.
"""
from __future__ import annotations

import asyncio
import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional

from config import DICTIONARY_PATH, MAX_RECENT_ITEMS, RECENT_PATH
from repositories.remote_store import RemoteStore
from services.errors import (
    DuplicateWordError,
    LoadError,
    NotLoadedError,
    WordNotFoundError,
    WriteError,
)

logger = logging.getLogger(__name__)


# ---------- Plain data ----------
@dataclass(frozen=True)
class Entry:
    word: str
    translation: str

    @classmethod
    def from_dict(cls, item: Any) -> "Entry":
        if not isinstance(item, dict):
            raise TypeError(f"expected an object, got {type(item).__name__}")
        word, translation = item.get("word"), item.get("translation")
        if not isinstance(word, str) or not isinstance(translation, str):
            raise TypeError(f"entry needs string `word` and `translation`: {item!r}")
        return cls(word=word, translation=translation)

    def to_dict(self) -> dict:
        return {"word": self.word, "translation": self.translation}


@dataclass(frozen=True)
class Neighborhood:
    """Entries around the sorted position of a typed word."""

    match: Optional[Entry]
    before: List[Optional[Entry]]  # nearest entry last
    after: List[Optional[Entry]]   # nearest entry first


def _word(entry: Entry) -> str:
    return entry.word


def _failed(exc: BaseException) -> asyncio.Future:
    fut = asyncio.get_event_loop().create_future()
    fut.set_exception(exc)
    return fut


def _resolved(value: Any) -> asyncio.Future:
    fut = asyncio.get_event_loop().create_future()
    fut.set_result(value)
    return fut


class AbstractDataSet:
    """Manages all data for one domain."""

    url: str = ""  # set by subclasses

    def __init__(self, store: RemoteStore, url: str | None = None) -> None:
        self._store = store
        if url is not None:
            self.url = url
        self.data: list[Entry] | None = None
        self._write_lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        return self.data is not None

    def __len__(self) -> int:
        return len(self.data or [])

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self.data or []))

    def parse(self, entries: list[Entry]) -> list[Entry]:
        """Handle data from the server. Default is to use it as returned."""
        return entries

    # ------------------------------------------------------------------
    # LOAD
    # ------------------------------------------------------------------
    async def load(self) -> list[Entry]:
        """Fetch the whole list.

        A 404 means nothing has been stored yet and loads an empty list. Any
        other failure raises :class:`LoadError` and leaves ``data`` as it was.
        """
        try:
            resp = await self._store.get(self.url)
        except OSError as exc:
            logger.warning("Loading %s failed: %s", self.url, exc)
            raise LoadError(self.url, reason=str(exc)) from exc

        if resp.status == 404:
            logger.info("%s does not exist yet, starting empty", self.url)
            self.data = self.parse([])
            return self.data

        if not resp.ok:
            logger.warning("Loading %s failed with status %s", self.url, resp.status)
            raise LoadError(self.url, resp.status)

        try:
            raw = resp.json()
            if not isinstance(raw, list):
                raise TypeError(f"expected a list, got {type(raw).__name__}")
            entries = [Entry.from_dict(item) for item in raw]
        except (ValueError, TypeError) as exc:
            logger.warning("Malformed payload from %s: %s", self.url, exc)
            raise LoadError(self.url, reason=f"malformed payload ({exc})") from exc

        self.data = self.parse(entries)
        logger.debug("Loaded %d entries from %s", len(self.data), self.url)
        return self.data

    # ------------------------------------------------------------------
    # WRITE (full replace)
    # ------------------------------------------------------------------
    def write(self) -> asyncio.Future:
        """Send the whole list as it is *now*; resolves once the server acknowledged it."""
        if self.data is None:
            return _failed(NotLoadedError(self.url))
        payload = [entry.to_dict() for entry in self.data]
        return asyncio.ensure_future(self._put(payload))

    async def _put(self, payload: list[dict]) -> None:
        # one write in flight per data set, so the latest snapshot lands last
        async with self._write_lock:
            try:
                resp = await self._store.put(self.url, payload)
            except OSError as exc:
                logger.warning("Writing %s failed: %s", self.url, exc)
                raise WriteError(self.url, reason=str(exc)) from exc
        if not resp.ok:
            logger.warning("Writing %s failed with status %s", self.url, resp.status)
            raise WriteError(self.url, resp.status)
        logger.debug("Wrote %d entries to %s", len(payload), self.url)

    def add(self, entry: Entry) -> asyncio.Future:
        raise NotImplementedError


class DictionaryDataSet(AbstractDataSet):
    """Words kept sorted by ``word``; each word appears once."""

    url = DICTIONARY_PATH

    def parse(self, entries: list[Entry]) -> list[Entry]:
        """Sort by word, the server copy may be in any order."""
        return sorted(entries, key=_word)

    # -------- Lookup --------
    def insertion_index(self, word: str) -> int:
        return bisect_left(self.data or [], word, key=_word)

    def find(self, word: str) -> Entry | None:
        data = self.data or []
        index = bisect_left(data, word, key=_word)
        if index < len(data) and data[index].word == word:
            return data[index]
        return None

    def neighborhood(self, word: str, before: int, after: int) -> Neighborhood:
        """Return the entries surrounding where ``word`` sorts.

        Slots past either end of the list are ``None``. An exact match is
        reported separately and not repeated in ``after``.
        """
        data = self.data or []
        index = bisect_left(data, word, key=_word)
        match = data[index] if index < len(data) and data[index].word == word else None

        start = index + (1 if match else 0)
        following = [data[i] if i < len(data) else None for i in range(start, start + after)]
        preceding = [data[i] if i >= 0 else None for i in range(index - before, index)]
        return Neighborhood(match=match, before=preceding, after=following)

    # -------- Mutation --------
    def add(self, entry: Entry) -> asyncio.Future:
        """Insert in sorted position and persist. Existing words are rejected without a request."""
        if self.data is None:
            return _failed(NotLoadedError(self.url))
        index = bisect_left(self.data, entry.word, key=_word)
        if index < len(self.data) and self.data[index].word == entry.word:
            return _failed(DuplicateWordError(entry.word))
        self.data.insert(index, entry)
        return self.write()

    def delete(self, word: str) -> asyncio.Future:
        if self.data is None:
            return _failed(NotLoadedError(self.url))
        index = bisect_left(self.data, word, key=_word)
        if index >= len(self.data) or self.data[index].word != word:
            # the view showed a word the model does not have
            logger.error("Delete of %r out of sync with %s", word, self.url)
            return _failed(WordNotFoundError(word))
        del self.data[index]
        return self.write()

    def merge(self, entries: Iterable[Entry]) -> asyncio.Future:
        """Insert every entry whose word is new, then persist once.

        Resolves to the number of inserted entries. Nothing new means no request.
        """
        if self.data is None:
            return _failed(NotLoadedError(self.url))
        added = 0
        for entry in entries:
            index = bisect_left(self.data, entry.word, key=_word)
            if index < len(self.data) and self.data[index].word == entry.word:
                continue
            self.data.insert(index, entry)
            added += 1
        if not added:
            return _resolved(0)
        return asyncio.ensure_future(_count_after(self.write(), added))


async def _count_after(write: asyncio.Future, added: int) -> int:
    await write
    return added


class RecentItemsDataSet(AbstractDataSet):
    """Most recent first, capped at ``max_items``."""

    url = RECENT_PATH

    def __init__(self, store: RemoteStore, url: str | None = None, *, max_items: int = MAX_RECENT_ITEMS) -> None:
        super().__init__(store, url)
        self.max_items = max_items

    def add(self, entry: Entry) -> asyncio.Future:
        """Add entry and truncate the list to max length."""
        if self.data is None:
            return _failed(NotLoadedError(self.url))
        self.data.insert(0, entry)
        while len(self.data) > self.max_items:
            self.data.pop()
        return self.write()


__all__ = [
    "Entry",
    "Neighborhood",
    "AbstractDataSet",
    "DictionaryDataSet",
    "RecentItemsDataSet",
]
