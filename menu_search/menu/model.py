from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class MenuNode(Protocol):
    """Read-only view of a node in an application menu tree."""

    id: str
    caption: Optional[str]
    description: Optional[str]
    visible: bool
    command: Optional[Callable[[], None]]
    is_separator: bool
    children: Optional[Sequence[MenuNode]]


@dataclass(eq=False)
class MenuItem:
    id: str
    caption: Optional[str] = None
    description: Optional[str] = None
    visible: bool = True
    command: Optional[Callable[[], None]] = None
    is_separator: bool = False
    children: List[MenuItem] = field(default_factory=list)

    def has_children(self) -> bool:
        return bool(self.children)

    def add_child(self, item: MenuItem, index: Optional[int] = None) -> None:
        if index is None:
            self.children.append(item)
        else:
            self.children.insert(index, item)

    def remove_child(self, item: MenuItem) -> None:
        self.children.remove(item)


@dataclass(eq=False)
class AppMenu:
    menu_id: str
    items: List[MenuItem] = field(default_factory=list)

    def menu_items(self) -> List[MenuItem]:
        return list(self.items)
