from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "Cashpot"
ENV_PREFIX = "CASHPOT_"
ENV_FILE_NAME = "settings.env"
SNAPSHOT_FILE_NAME = "attachments-cache.json"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    path = cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return _config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Runtime options for the attachment cache.

    ``snapshot_path`` is the durable JSON store restored on startup. When
    ``persist`` is disabled the cache lives in memory for the process only.
    """

    snapshot_path: Path = field(
        default_factory=lambda: _cache_dir() / SNAPSHOT_FILE_NAME
    )
    persist: bool = True
    log_level: str = "INFO"


class SettingsManager:
    """Load and persist cache settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to persisted file."""
        load_dotenv(self._env_file, override=False)

        settings = Settings()

        cache_path = self._get_env("CACHE_PATH")
        if cache_path:
            settings.snapshot_path = Path(cache_path).expanduser()

        persist = self._get_bool("PERSIST")
        if persist is not None:
            settings.persist = persist

        log_level = self._get_env("LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()

        return settings

    def save(self, settings: Settings) -> None:
        """Persist configuration fields to the managed env file."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}CACHE_PATH={settings.snapshot_path}",
            f"{ENV_PREFIX}PERSIST={'true' if settings.persist else 'false'}",
            f"{ENV_PREFIX}LOG_LEVEL={settings.log_level}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None

    def _get_bool(self, name: str) -> bool | None:
        raw = self._get_env(name)
        if raw is None:
            return None
        value = raw.strip().lower()
        if value in _TRUTHY:
            return True
        if value in _FALSY:
            return False
        return None


__all__ = [
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
