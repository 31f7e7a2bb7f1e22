"""Service package public interface.

Re-export the main service classes so callers can simply do:

    from services import Data, DictionaryDataSet
"""

from .data_sets import DictionaryDataSet, Entry, RecentItemsDataSet
from .registry import Data

__all__: list[str] = [
    "Data",
    "DictionaryDataSet",
    "Entry",
    "RecentItemsDataSet",
]
