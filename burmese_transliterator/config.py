"""Settings loader: defaults, then an optional TOML file, then environment variables."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import tomllib

from .mapping import UNKNOWN_MARKER

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BURMESE_TRANSLIT_CONFIG"
CONFIG_SECTION = "transliterator"

DEFAULT_SETTINGS: dict[str, Any] = {
    "dictionary_path": None,
    "unknown_marker": UNKNOWN_MARKER,
    "passthrough_unknown": False,
    "log_level": "WARNING",
}

ENV_OVERRIDES = {
    "BURMESE_TRANSLIT_DICTIONARY": "dictionary_path",
    "BURMESE_TRANSLIT_UNKNOWN_MARKER": "unknown_marker",
    "BURMESE_TRANSLIT_PASSTHROUGH": "passthrough_unknown",
    "BURMESE_TRANSLIT_LOG_LEVEL": "log_level",
}


class ConfigError(Exception):
    """Raised when a settings file is malformed."""
    pass


@dataclass
class Settings:
    dictionary_path: Optional[str] = None
    unknown_marker: str = UNKNOWN_MARKER
    passthrough_unknown: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.dictionary_path is not None and not isinstance(self.dictionary_path, str):
            raise ConfigError(f"dictionary_path must be a string, got {self.dictionary_path!r}")
        if not isinstance(self.unknown_marker, str):
            raise ConfigError(f"unknown_marker must be a string, got {self.unknown_marker!r}")
        if not isinstance(self.passthrough_unknown, bool):
            raise ConfigError(f"passthrough_unknown must be a boolean, got {self.passthrough_unknown!r}")
        if not isinstance(self.log_level, str):
            raise ConfigError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] in {path} must be a table")

    unknown = set(section) - set(DEFAULT_SETTINGS)
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(sorted(unknown)))
    return {k: v for k, v in section.items() if k in DEFAULT_SETTINGS}


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """
    Load settings.

    Args:
        path: TOML file to read. Falls back to ``$BURMESE_TRANSLIT_CONFIG``;
            with neither set only defaults and environment overrides apply.

    Raises:
        FileNotFoundError: If the chosen config file does not exist.
        ConfigError: If the file cannot be parsed or holds bad values.
    """
    values = dict(DEFAULT_SETTINGS)

    config_path = path or os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        config_path = Path(config_path).expanduser()
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        values.update(_read_config_file(config_path))

    for env_var, key in ENV_OVERRIDES.items():
        raw = os.environ.get(env_var)
        if raw is None:
            continue
        values[key] = _is_truthy(raw) if key == "passthrough_unknown" else raw

    return Settings(**values)
