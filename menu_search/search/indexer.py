"""Flat, searchable index over an application menu forest."""

from __future__ import annotations

from typing import Iterable, Iterator

from menu_search.config.settings import SearchSettings
from menu_search.logging import LoggerFactory, operation_context
from menu_search.menu.model import MenuNode
from menu_search.search.entry import SearchEntry
from menu_search.search.exceptions import MenuIndexError
from menu_search.search.wrapped import WrappedMenuNode


class MenuIndexer:
    """Indexes every command-bearing node of a menu forest once, at construction.

    The forest roots are never indexed themselves; traversal starts at their
    immediate children and walks each subtree depth first, pre-order. The
    forest must be acyclic.

    Args:
        roots: Top-level menu nodes, in display order.
        source: Tag stamped on every entry. Defaults to
            ``settings.source_tag``.
        settings: Breadcrumb and tag settings. Defaults to ``SearchSettings()``.

    Raises:
        MenuIndexError: If any part of the forest cannot be read.
    """

    def __init__(
        self,
        roots: Iterable[MenuNode],
        *,
        source: str | None = None,
        settings: SearchSettings | None = None,
    ) -> None:
        self._settings = settings or SearchSettings()
        self.source = source if source is not None else self._settings.source_tag
        self._log = LoggerFactory.for_indexer()
        self._search_log = LoggerFactory.for_search()

        with operation_context("index", strategy=self.source) as log:
            try:
                self._cached = self._build(roots)
            except Exception as error:
                raise MenuIndexError(f"Unable to read menu forest: {error}") from error
            log.info(f"Indexed {len(self._cached)} menu entries")

    def _build(self, roots: Iterable[MenuNode]) -> tuple[SearchEntry, ...]:
        return tuple(
            self._create_entry(top_root, item) for top_root, item in self._collect_targets(roots)
        )

    def _collect_targets(
        self, roots: Iterable[MenuNode]
    ) -> Iterator[tuple[MenuNode, WrappedMenuNode]]:
        seen: set[WrappedMenuNode] = set()
        for root in roots:
            for child in root.children or ():
                for item in self._traverse(WrappedMenuNode(child, root)):
                    if item.is_separator or item.command is None:
                        continue
                    if item in seen:
                        self._log.debug(f"Skipping menu node {item.id} reached twice")
                        continue
                    seen.add(item)
                    yield root, item

    def _traverse(self, item: WrappedMenuNode) -> Iterator[WrappedMenuNode]:
        yield item
        for child in item.children:
            yield from self._traverse(WrappedMenuNode(child, item.node))

    def _create_entry(self, top_root: MenuNode, item: WrappedMenuNode) -> SearchEntry:
        return SearchEntry(
            id=item.id,
            search_text=self._query_string(item),
            label=self._breadcrumb(top_root, item),
            source=self.source,
            node=item.node,
        )

    def _breadcrumb(self, top_root: MenuNode, item: WrappedMenuNode) -> str:
        return self._settings.breadcrumb(
            top_root.caption or "",
            item.caption or "",
            nested=item.parent is not top_root,
        )

    @staticmethod
    def _query_string(item: WrappedMenuNode) -> str:
        return f"{item.caption or ''} {item.description or ''}".lower()

    @property
    def entries(self) -> tuple[SearchEntry, ...]:
        """Every indexed entry, active or not, in traversal order."""
        return self._cached

    def __len__(self) -> int:
        return len(self._cached)

    def node_for(self, entry: SearchEntry) -> MenuNode | None:
        """The menu node behind ``entry``, or None if this index did not build it."""
        if any(cached is entry for cached in self._cached):
            return entry.node
        return None

    def load(self, pattern: str | None) -> list[SearchEntry]:
        """Return the active entries whose search text contains ``pattern``.

        Matching is case-insensitive and substring based. A blank pattern
        matches nothing.
        """
        if pattern is None or not pattern.strip():
            return []
        needle = pattern.strip().lower()
        results = [
            entry for entry in self._cached if entry.matches(needle) and entry.is_active()
        ]
        self._search_log.trace(f"Menu query {needle!r} matched {len(results)} entries")
        return results
