from menu_search.menu.definitions import app_menu, collect_items, menu_entry, separator
from menu_search.menu.model import AppMenu, MenuItem, MenuNode

__all__ = [
    "AppMenu",
    "MenuItem",
    "MenuNode",
    "app_menu",
    "collect_items",
    "menu_entry",
    "separator",
]
