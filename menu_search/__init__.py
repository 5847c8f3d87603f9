"""Flat, breadcrumb-labelled search over hierarchical application menus."""

from menu_search.__version__ import __version__
from menu_search.config import SearchSettings, load_settings
from menu_search.menu import AppMenu, MenuItem, MenuNode, app_menu, menu_entry, separator
from menu_search.search import MenuIndexer, MenuSearchStrategy, SearchEntry

__all__ = [
    "AppMenu",
    "MenuIndexer",
    "MenuItem",
    "MenuNode",
    "MenuSearchStrategy",
    "SearchEntry",
    "SearchSettings",
    "__version__",
    "app_menu",
    "load_settings",
    "menu_entry",
    "separator",
]
