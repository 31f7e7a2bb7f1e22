# services/registry.py
"""
The application's word lists, created once at start-up and handed to whoever needs them.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass

from repositories.remote_store import RemoteStore
from services.data_sets import DictionaryDataSet, RecentItemsDataSet


@dataclass
class Data:
    dictionary: DictionaryDataSet
    recent_items: RecentItemsDataSet

    @classmethod
    def create(cls, store: RemoteStore) -> "Data":
        return cls(
            dictionary=DictionaryDataSet(store),
            recent_items=RecentItemsDataSet(store),
        )

    async def load_all(self) -> None:
        """Load both lists concurrently; the first failure is raised."""
        await asyncio.gather(self.dictionary.load(), self.recent_items.load())
