"""
Pytest configuration and shared fixtures for menu-search tests.

This module provides a small but representative menu forest and a loguru
record capture fixture.
"""

from typing import Dict, List
from unittest.mock import Mock

import pytest
from loguru import logger

from menu_search.menu.model import AppMenu, MenuItem


# ==============================================================================
# Menu Fixtures
# ==============================================================================


@pytest.fixture
def menu_nodes() -> Dict[str, MenuItem]:
    """
    Fixture providing every node of the sample menu forest, keyed by id.

    Layout::

        File
        ├── Open Report          (command)
        ├── ----                 (separator)
        ├── Export               (submenu)
        │   ├── Export as PDF    (command)
        │   └── Export as CSV    (command)
        └── Recent               (command with children)
            └── Recent Report A  (command)
        Tools
        ├── Options              (command)
        └── Developer            (submenu)
            └── Diagnostics      (submenu)
                └── Log Viewer   (command)
    """
    nodes = {
        "open_report": MenuItem(
            id="open_report",
            caption="Open Report",
            description="Open a saved report",
            command=Mock(),
        ),
        "file_separator": MenuItem(id="file_separator", is_separator=True),
        "export_pdf": MenuItem(id="export_pdf", caption="Export as PDF", command=Mock()),
        "export_csv": MenuItem(
            id="export_csv",
            caption="Export as CSV",
            description="Comma Separated Values",
            command=Mock(),
        ),
        "recent_a": MenuItem(id="recent_a", caption="Recent Report A", command=Mock()),
        "options": MenuItem(id="options", caption="Options", command=Mock()),
        "log_viewer": MenuItem(id="log_viewer", caption="Log Viewer", command=Mock()),
    }
    nodes["export"] = MenuItem(
        id="export",
        caption="Export",
        children=[nodes["export_pdf"], nodes["export_csv"]],
    )
    nodes["recent"] = MenuItem(
        id="recent", caption="Recent", command=Mock(), children=[nodes["recent_a"]]
    )
    nodes["file"] = MenuItem(
        id="file",
        caption="File",
        children=[
            nodes["open_report"],
            nodes["file_separator"],
            nodes["export"],
            nodes["recent"],
        ],
    )
    nodes["diagnostics"] = MenuItem(
        id="diagnostics", caption="Diagnostics", children=[nodes["log_viewer"]]
    )
    nodes["developer"] = MenuItem(
        id="developer", caption="Developer", children=[nodes["diagnostics"]]
    )
    nodes["tools"] = MenuItem(
        id="tools", caption="Tools", children=[nodes["options"], nodes["developer"]]
    )
    return nodes


@pytest.fixture
def sample_menu(menu_nodes) -> AppMenu:
    """Fixture providing the sample forest as an AppMenu."""
    return AppMenu(menu_id="mainMenu", items=[menu_nodes["file"], menu_nodes["tools"]])


@pytest.fixture
def expected_ids() -> List[str]:
    """Ids of the indexed entries of the sample menu, in traversal order."""
    return [
        "open_report",
        "export_pdf",
        "export_csv",
        "recent",
        "recent_a",
        "options",
        "log_viewer",
    ]


# ==============================================================================
# Logging Fixtures
# ==============================================================================


@pytest.fixture
def log_records():
    """Capture loguru records synchronously for the duration of a test."""
    records: list = []
    logger.remove()
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)
