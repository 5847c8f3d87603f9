from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from menu_search.menu.model import MenuNode


@dataclass(frozen=True, eq=False)
class WrappedMenuNode:
    """A menu node seen through the path that reached it during traversal.

    Equality and hashing follow the identity of the wrapped node, so the
    same node wrapped under different parents is still the same node, and
    nodes need not be hashable.
    """

    node: MenuNode
    parent: Optional[MenuNode] = None

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def caption(self) -> Optional[str]:
        return self.node.caption

    @property
    def description(self) -> Optional[str]:
        return self.node.description

    @property
    def visible(self) -> bool:
        return self.node.visible

    @property
    def command(self) -> Optional[Callable[[], None]]:
        return self.node.command

    @property
    def is_separator(self) -> bool:
        return self.node.is_separator

    @property
    def children(self) -> Sequence[MenuNode]:
        return self.node.children or ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WrappedMenuNode):
            return NotImplemented
        return self.node is other.node

    def __hash__(self) -> int:
        return hash(id(self.node))
