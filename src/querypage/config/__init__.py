"""Config – 12-factor settings and loaders."""

from querypage.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from querypage.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
