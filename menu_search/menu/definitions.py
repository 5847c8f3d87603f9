"""Menu hierarchy building helpers.

Hosts that assemble their menus in Python can use these instead of
instantiating ``MenuItem`` directly.
"""

from __future__ import annotations

from typing import Callable, Iterable

from menu_search.menu.model import AppMenu, MenuItem
from menu_search.search.exceptions import DuplicateMenuIdError


def menu_entry(
    id: str,
    caption: str,
    *,
    command: Callable[[], None] | None = None,
    children: Iterable[MenuItem] | None = None,
    description: str | None = None,
    visible: bool = True,
) -> MenuItem:
    child_items = list(children or [])
    if command is None and not child_items:
        raise ValueError("Menu entries must define a command, children, or both.")
    return MenuItem(
        id=id,
        caption=caption,
        description=description,
        visible=visible,
        command=command,
        children=child_items,
    )


def separator(id: str) -> MenuItem:
    return MenuItem(id=id, is_separator=True)


def collect_items(root: MenuItem) -> dict[str, MenuItem]:
    items: dict[str, MenuItem] = {}

    def walk(item: MenuItem) -> None:
        existing = items.get(item.id)
        if existing is item:
            return
        if existing is not None:
            raise DuplicateMenuIdError(item.id)
        items[item.id] = item
        for child in item.children:
            walk(child)

    walk(root)
    return items


def app_menu(menu_id: str, *roots: MenuItem) -> AppMenu:
    # Ids only need to be unique within one root's tree.
    for root in roots:
        collect_items(root)
    return AppMenu(menu_id=menu_id, items=list(roots))
