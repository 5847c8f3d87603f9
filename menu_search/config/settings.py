"""Breadcrumb and source-tag settings for menu search.

Nothing is read from disk implicitly. Hosts that want a settings file call
``load_settings()`` and pass the result to the indexer or strategy.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from menu_search.logging import LoggerFactory

SETTINGS_PATH = Path(
    os.environ.get(
        "MENU_SEARCH_SETTINGS_PATH",
        Path.home() / ".config" / "menu-search" / "settings.json",
    )
)

DEFAULT_SOURCE_TAG = "searchStrategy.mainMenu"
DEFAULT_BREADCRUMB_SEPARATOR = " > "
DEFAULT_BREADCRUMB_ELLIPSIS = "..."


@dataclass(frozen=True)
class SearchSettings:
    source_tag: str = DEFAULT_SOURCE_TAG
    breadcrumb_separator: str = DEFAULT_BREADCRUMB_SEPARATOR
    breadcrumb_ellipsis: str = DEFAULT_BREADCRUMB_ELLIPSIS

    def breadcrumb(self, top_caption: str, caption: str, *, nested: bool) -> str:
        """``"Top > Item"``, or ``"Top > ... > Item"`` when ``nested``."""
        if nested:
            parts = [top_caption, self.breadcrumb_ellipsis, caption]
        else:
            parts = [top_caption, caption]
        return self.breadcrumb_separator.join(parts)


def load_settings(path: Path | None = None) -> SearchSettings:
    """Read settings from ``path``; missing, corrupt or mistyped values fall back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return SearchSettings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as error:
        LoggerFactory.for_system().warning(f"Ignoring unreadable settings file {path}: {error}")
        return SearchSettings()
    if not isinstance(data, dict):
        return SearchSettings()
    known = {f.name for f in fields(SearchSettings)}
    values = {
        key: value for key, value in data.items() if key in known and isinstance(value, str)
    }
    return SearchSettings(**values)


def save_settings(settings: SearchSettings, path: Path | None = None) -> None:
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2, sort_keys=True), encoding="utf-8")
