"""Configuration helpers for the Cashpot attachment cache."""

from .settings import Settings, SettingsManager, cache_dir, config_dir, log_dir

__all__ = [
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
