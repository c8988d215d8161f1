"""Manages the fixed paths used by ClipTranslate."""
# src/cliptranslate/paths.py

import os
from pathlib import Path
from typing import Final

CONFIG_FILE_NAMES: Final[list[str]] = ["config.yaml", "config.yml"]
HOME_ENV_VAR: Final[str] = "CLIPTRANSLATE_HOME"
DEFAULT_HOME_SUBDIR: Final[str] = ".cliptranslate"


def get_home_dir() -> Path:
    """
    Return the ClipTranslate home directory.

    The `CLIPTRANSLATE_HOME` environment variable takes precedence over
    `~/.cliptranslate`.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return Path.home() / DEFAULT_HOME_SUBDIR


def get_config_file_path(explicit_path: Path | None = None) -> Path:
    """
    Return the configuration file to use.

    An explicit path wins. Otherwise the first existing `config.yaml` or
    `config.yml` in the home directory is returned, falling back to
    `config.yaml` when neither exists yet.
    """
    if explicit_path is not None:
        return explicit_path.expanduser().resolve()
    home = get_home_dir()
    for name in CONFIG_FILE_NAMES:
        path = home / name
        if path.is_file():
            return path
    return home / CONFIG_FILE_NAMES[0]


def get_log_dir() -> Path:
    """Return the path to the log directory."""
    return get_home_dir() / "logs"


def ensure_dir_exists(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
