"""Config settings – env-based export configuration."""
from csvtable.config.settings.base import ExportSettings, Settings
from csvtable.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
