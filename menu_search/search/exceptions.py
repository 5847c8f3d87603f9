"""Custom exceptions for menu indexing and search.

Exception Hierarchy:
    SearchError (base)
        ├── MenuIndexError
        ├── MenuDefinitionError
        │   └── DuplicateMenuIdError
        └── EntryError
            ├── EntryNotFoundError
            └── InactiveEntryError

Usage:
    from menu_search.search.exceptions import MenuIndexError

    try:
        indexer = MenuIndexer(app_menu.menu_items())
    except MenuIndexError as error:
        ...
"""


class SearchError(Exception):
    """Base exception for all menu search operations."""



class MenuIndexError(SearchError):
    """The menu forest could not be read while building the index."""



class MenuDefinitionError(SearchError):
    """Base exception for malformed menu definitions."""



class DuplicateMenuIdError(MenuDefinitionError):
    """Two distinct nodes in one menu tree share an id."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Duplicate menu item id: {item_id}")


class EntryError(SearchError):
    """Base exception for search entry operations."""



class EntryNotFoundError(EntryError):
    """The entry was not produced by this search strategy."""

    def __init__(self, entry_id: str, source: str):
        self.entry_id = entry_id
        self.source = source
        super().__init__(f"Entry {entry_id} is not known to {source}")


class InactiveEntryError(EntryError):
    """The entry's menu node is not currently visible."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Entry {entry_id} is not active")
