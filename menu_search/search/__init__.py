from menu_search.search.entry import SearchEntry
from menu_search.search.exceptions import (
    DuplicateMenuIdError,
    EntryError,
    EntryNotFoundError,
    InactiveEntryError,
    MenuDefinitionError,
    MenuIndexError,
    SearchError,
)
from menu_search.search.indexer import MenuIndexer
from menu_search.search.strategy import MenuSearchStrategy
from menu_search.search.wrapped import WrappedMenuNode

__all__ = [
    "DuplicateMenuIdError",
    "EntryError",
    "EntryNotFoundError",
    "InactiveEntryError",
    "MenuDefinitionError",
    "MenuIndexError",
    "MenuIndexer",
    "MenuSearchStrategy",
    "SearchEntry",
    "SearchError",
    "WrappedMenuNode",
]
