from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from menu_search.menu.model import MenuNode


@dataclass(frozen=True)
class SearchEntry:
    """One searchable, executable menu command.

    ``search_text`` and ``label`` are captured when the entry is built;
    ``is_active()`` reads the visibility of ``node`` on every call.
    """

    id: str
    search_text: str
    label: str
    source: str
    node: MenuNode = field(compare=False, repr=False)

    def is_active(self) -> bool:
        return bool(self.node.visible)

    def matches(self, pattern: str) -> bool:
        """Substring test against an already trimmed, lowercased pattern."""
        return pattern in self.search_text
