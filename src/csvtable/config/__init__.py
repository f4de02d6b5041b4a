"""Config – encoder strategies and environment-driven export settings."""
from csvtable.config.encoder import (
    DEFAULT_CONFIGURATION,
    BoolEncodingStrategy,
    CustomBool,
    CustomDate,
    DateFormatter,
    DeferredToDate,
    EncoderConfiguration,
    Formatted,
    ISO8601,
    StrftimeFormatter,
)
from csvtable.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExportSettings,
    Settings,
    SettingsLoader,
)

__all__ = [
    "DEFAULT_CONFIGURATION",
    "BoolEncodingStrategy",
    "CustomBool",
    "CustomDate",
    "DateFormatter",
    "DeferredToDate",
    "DotenvSettingsLoader",
    "EncoderConfiguration",
    "EnvSettingsLoader",
    "ExportSettings",
    "Formatted",
    "ISO8601",
    "Settings",
    "SettingsLoader",
    "StrftimeFormatter",
]
