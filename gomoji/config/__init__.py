"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from gomoji.catalog import SUPPORTED_LOCALES

VALID_LOCALES = SUPPORTED_LOCALES


@dataclass
class Config:
    """User configuration with sensible defaults."""
    locale: str = "es"
    catalog_path: Optional[str] = None  # Catalog document replacing the bundled one
    min_subject_length: int = 3
    max_subject_length: int = 50
    ruler_width: int = 50

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if self.locale not in VALID_LOCALES:
            warnings.append(f"Invalid locale '{self.locale}', using '{defaults.locale}'")
            self.locale = defaults.locale

        if self.catalog_path is not None and not isinstance(self.catalog_path, str):
            warnings.append(f"Invalid catalog_path '{self.catalog_path}', using the bundled catalog")
            self.catalog_path = defaults.catalog_path

        for name in ('min_subject_length', 'max_subject_length', 'ruler_width'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                warnings.append(f"Invalid {name} '{value}', using {getattr(defaults, name)}")
                setattr(self, name, getattr(defaults, name))

        if self.min_subject_length > self.max_subject_length:
            warnings.append(
                f"min_subject_length {self.min_subject_length} exceeds max_subject_length "
                f"{self.max_subject_length}, using {defaults.min_subject_length}-{defaults.max_subject_length}"
            )
            self.min_subject_length = defaults.min_subject_length
            self.max_subject_length = defaults.max_subject_length

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Finds and loads .gomojirc, caching the result."""

    CONFIG_FILENAME = ".gomojirc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "VALID_LOCALES",
]
