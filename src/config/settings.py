"""Configuration manager: load/save YAML config with defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from utils.constants import DEFAULT_CONFIG_PATH, DEFAULT_STORAGE_PATH, USER_DATA_DIR
from utils.exceptions import ConfigurationError
from utils.logging_config import get_logger

logger = get_logger("config.settings")


@dataclass
class StorageConfig:
    backend: str = "json"  # json | sqlite
    default_path: str = ""

    def resolved_path(self) -> Path:
        """Configured storage path, or the default under the user data dir."""
        if self.default_path:
            return Path(self.default_path).expanduser()
        if self.backend == "sqlite":
            return DEFAULT_STORAGE_PATH.with_suffix(".db")
        return DEFAULT_STORAGE_PATH


@dataclass
class LoggingConfig:
    level: str = "INFO"
    console_level: str = "WARNING"


@dataclass
class SearchConfig:
    show_all: bool = True


@dataclass
class AppSettings:
    """Top-level application settings."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


class SettingsManager:
    """Singleton configuration manager.

    Loads settings from YAML files, merging with defaults.
    Persists user overrides to ``~/.heblex/config.yaml``.
    """

    _instance: SettingsManager | None = None

    def __new__(cls, *args: Any, **kwargs: Any) -> SettingsManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, user_config_path: Path | None = None) -> None:
        if hasattr(self, "_initialized") and self._initialized:
            return
        self._settings = AppSettings()
        self._user_config_path = user_config_path or (USER_DATA_DIR / "config.yaml")
        self._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def load(self) -> AppSettings:
        """Load settings from default config, then overlay user config.

        Returns:
            Merged :class:`AppSettings`.
        """
        self._settings = AppSettings()

        if DEFAULT_CONFIG_PATH.exists():
            self._merge_from_yaml(DEFAULT_CONFIG_PATH)

        if self._user_config_path.exists():
            self._merge_from_yaml(self._user_config_path)

        logger.info(
            "Settings loaded (backend=%s, level=%s)",
            self._settings.storage.backend,
            self._settings.logging.level,
        )
        return self._settings

    def save(self) -> None:
        """Persist current settings to user config file."""
        try:
            self._user_config_path.parent.mkdir(parents=True, exist_ok=True)
            data = self._to_dict()
            with open(self._user_config_path, "w", encoding="utf-8") as fh:
                yaml.dump(data, fh, default_flow_style=False, sort_keys=False)
            logger.info("Settings saved to %s", self._user_config_path)
        except OSError as exc:
            raise ConfigurationError(f"Failed to save settings: {exc}") from exc

    def _merge_from_yaml(self, path: Path) -> None:
        """Merge settings from a YAML file into current settings."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Could not load config from %s: %s", path, exc)
            return

        if not isinstance(data, dict):
            return

        # Storage
        if "storage" in data:
            s = data["storage"]
            if isinstance(s, dict):
                self._settings.storage.backend = s.get(
                    "backend", self._settings.storage.backend
                )
                self._settings.storage.default_path = s.get(
                    "default_path", self._settings.storage.default_path
                ) or ""

        # Logging
        if "logging" in data:
            lg = data["logging"]
            if isinstance(lg, dict):
                self._settings.logging.level = lg.get(
                    "level", self._settings.logging.level
                )
                self._settings.logging.console_level = lg.get(
                    "console_level", self._settings.logging.console_level
                )

        # Search
        if "search" in data:
            sr = data["search"]
            if isinstance(sr, dict):
                self._settings.search.show_all = bool(
                    sr.get("show_all", self._settings.search.show_all)
                )

        if self._settings.storage.backend not in ("json", "sqlite"):
            logger.warning(
                "Unknown storage backend %r in %s, using json",
                self._settings.storage.backend, path,
            )
            self._settings.storage.backend = "json"

    def _to_dict(self) -> dict[str, Any]:
        s = self._settings
        return {
            "storage": {
                "backend": s.storage.backend,
                "default_path": s.storage.default_path,
            },
            "logging": {
                "level": s.logging.level,
                "console_level": s.logging.console_level,
            },
            "search": {"show_all": s.search.show_all},
        }
