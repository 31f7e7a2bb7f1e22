# services/errors.py
"""
Error types raised by the service layer. UI code turns them into status messages.
"""
from __future__ import annotations


class VocabError(Exception):
    """Base class for every failure the word lists can report."""


class LoadError(VocabError):
    def __init__(self, url: str, status: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status = status
        detail = f"status {status}" if status is not None else (reason or "no response")
        super().__init__(f"failed to load {url}: {detail}")


class WriteError(VocabError):
    def __init__(self, url: str, status: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status = status
        detail = f"status {status}" if status is not None else (reason or "no response")
        super().__init__(f"failed to write {url}: {detail}")


class NotLoadedError(VocabError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"{url} has not been loaded yet")


class DuplicateWordError(VocabError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"`{word}` is already in the dictionary")


class WordNotFoundError(VocabError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"`{word}` was not found")


class ExchangeError(VocabError):
    """Raised when an imported word list cannot be used."""


__all__ = [
    "VocabError",
    "LoadError",
    "WriteError",
    "NotLoadedError",
    "DuplicateWordError",
    "WordNotFoundError",
    "ExchangeError",
]
