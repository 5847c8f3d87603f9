from menu_search.config.settings import SearchSettings, load_settings, save_settings

__all__ = ["SearchSettings", "load_settings", "save_settings"]
