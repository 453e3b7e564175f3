"""Config settings – env-based configuration."""
from querypage.config.settings.base import Settings
from querypage.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
