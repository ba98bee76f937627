"""Configuration loader for docman.

Loads a JSON settings file and returns a validated DocmanConfig instance.
Uses module-level caching so each file is only parsed once per process.

Lookup order when no path is given: the user's config file
(``<user config dir>/docman/config.json``, via ``platformdirs``) if present,
otherwise the built-in ``docman_default.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import platformdirs

from docman.config.models import DocmanConfig

_APP_NAME = "docman"
_USER_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, DocmanConfig] = {}

# Default config path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "docman_default.json"


def user_config_path() -> Path:
    """Return the per-user config file location (may not exist)."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _USER_CONFIG_FILENAME


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """Return *path*, or the user config file if present, or the built-in default."""
    if path is not None:
        return path
    user_path = user_config_path()
    return user_path if user_path.is_file() else _DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> DocmanConfig:
    """Load and validate docman settings from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.
        If ``None``, the user config file or the built-in default is used.

    Returns
    -------
    DocmanConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    pydantic.ValidationError
        If the JSON content does not match the expected schema.
    """
    path = resolve_config_path(path)
    cache_key = str(path.resolve())
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = json.loads(path.read_text(encoding="utf-8"))
    config = DocmanConfig.model_validate(raw)
    _config_cache[cache_key] = config
    return config


def get_config() -> DocmanConfig:
    """Get the active docman configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
