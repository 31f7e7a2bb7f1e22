# services/exchange_service.py
"""
Import / export of word lists as CSV, so a dictionary can be seeded or backed up by hand.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from services.data_sets import Entry
from services.errors import ExchangeError

logger = logging.getLogger(__name__)

COLUMNS = ["word", "translation"]


def _clean(value) -> str:
    """NaN / None / "nan" become an empty string, everything else is stripped text."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    text = str(value).strip()
    return "" if text.lower() == "nan" else text


def export_csv(entries: Iterable[Entry], path: str | Path) -> int:
    """Write entries to ``path``; returns how many rows were written."""
    df = pd.DataFrame([e.to_dict() for e in entries], columns=COLUMNS)
    df.to_csv(path, index=False, encoding="utf-8")
    logger.info("Exported %d entries to %s", len(df), path)
    return len(df)


def import_csv(path: str | Path) -> List[Entry]:
    """Read entries from a CSV with ``word`` and ``translation`` columns.

    Rows without a word are skipped and only the first row for a word is kept.
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=True)
    except (OSError, ValueError) as exc:
        raise ExchangeError(f"cannot read {path}: {exc}") from exc

    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ExchangeError(f"{path} is missing column(s): {', '.join(missing)}")

    entries: List[Entry] = []
    seen: set[str] = set()
    for word, translation in zip(df["word"], df["translation"]):
        word = _clean(word)
        if not word or word in seen:
            continue
        seen.add(word)
        entries.append(Entry(word=word, translation=_clean(translation)))

    logger.info("Imported %d entries from %s", len(entries), path)
    return entries
