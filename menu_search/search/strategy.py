from __future__ import annotations

from typing import Callable, Iterable, Protocol

from menu_search.config.settings import SearchSettings
from menu_search.logging import LoggerFactory
from menu_search.menu.model import MenuNode
from menu_search.search.entry import SearchEntry
from menu_search.search.exceptions import (
    EntryNotFoundError,
    InactiveEntryError,
    MenuIndexError,
)
from menu_search.search.indexer import MenuIndexer


class MenuSource(Protocol):
    def menu_items(self) -> Iterable[MenuNode]:
        ...


class MenuSearchStrategy:
    """Main menu search as seen by a host's search facade.

    The menu is fetched from ``menu_provider`` and indexed on first use.
    """

    def __init__(
        self,
        menu_provider: Callable[[], MenuSource],
        *,
        source: str | None = None,
        settings: SearchSettings | None = None,
    ) -> None:
        self._menu_provider = menu_provider
        self._source = source
        self._settings = settings
        self._indexer: MenuIndexer | None = None
        self._log = LoggerFactory.for_system()

    @property
    def indexer(self) -> MenuIndexer:
        if self._indexer is None:
            try:
                roots = list(self._menu_provider().menu_items())
            except Exception as error:
                raise MenuIndexError(f"Unable to read menu forest: {error}") from error
            self._indexer = MenuIndexer(roots, source=self._source, settings=self._settings)
        return self._indexer

    @property
    def name(self) -> str:
        return self.indexer.source

    def load(self, query: str | None) -> list[SearchEntry]:
        return self.indexer.load(query)

    def invoke(self, entry: SearchEntry) -> None:
        node = self.indexer.node_for(entry)
        if node is None:
            raise EntryNotFoundError(entry.id, self.name)
        if not entry.is_active():
            raise InactiveEntryError(entry.id)
        self._log.info(f"Running menu command {entry.id}")
        node.command()

    def refresh(self) -> None:
        """Drop the current index; the next query re-reads the menu."""
        self._log.debug("Menu index discarded")
        self._indexer = None
