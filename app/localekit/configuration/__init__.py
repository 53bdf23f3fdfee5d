"""Configuration module - public API.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation catalog settings
    get_settings: Cached settings singleton
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
