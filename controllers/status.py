# controllers/status.py
"""Turn the outcome of a data-set future into the text shown on the message bar."""
from __future__ import annotations

import asyncio
import logging

from services.errors import (
    DuplicateWordError,
    NotLoadedError,
    VocabError,
    WordNotFoundError,
    WriteError,
)

logger = logging.getLogger(__name__)

SAVED = "all changes saved"
SAVE_FAILED = "failed to save changes"
LOAD_FAILED = "failed to load data"
NOT_LOADED = "data is not loaded yet"


def rejected(fut: asyncio.Future) -> bool:
    """True if ``fut`` already failed, i.e. the data set refused the change without a request."""
    return fut.done() and not fut.cancelled() and fut.exception() is not None


def outcome_message(fut: asyncio.Future) -> str:
    if fut.cancelled():
        return SAVE_FAILED
    exc = fut.exception()
    if exc is None:
        return SAVED
    if isinstance(exc, (DuplicateWordError, WordNotFoundError)):
        return str(exc)
    if isinstance(exc, NotLoadedError):
        return NOT_LOADED
    if isinstance(exc, WriteError):
        return SAVE_FAILED
    if not isinstance(exc, VocabError):
        logger.error("Unexpected failure", exc_info=exc)
    return SAVE_FAILED
