"""Where treewipe keeps its files.

Follows the XDG Base Directory layout:

- ``$XDG_CONFIG_HOME/treewipe`` (default ``~/.config/treewipe``) holds
  ``config.toml`` and the optional ``theme.toml`` override.
- ``$XDG_STATE_HOME/treewipe`` (default ``~/.local/state/treewipe``) holds
  ``history.jsonl``.

Nothing here touches the disk except the ``ensure_*`` helpers.
"""

import os
from pathlib import Path

APP_NAME = "treewipe"

CONFIG_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"
HISTORY_FILENAME = "history.jsonl"


def _get_xdg_dir(env_var: str, fallback: str) -> Path:
    """Resolve an XDG base directory and append the app name.

    An unset or empty variable falls back to ``~/<fallback>``.
    """
    base = os.environ.get(env_var) or str(Path.home() / fallback)
    return Path(base) / APP_NAME


def get_config_dir() -> Path:
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME


def get_theme_path() -> Path:
    return get_config_dir() / THEME_FILENAME


def get_history_path() -> Path:
    return get_state_dir() / HISTORY_FILENAME


def _ensure_dir(path: Path, purpose: str) -> Path:
    """Create path and its parents.

    Raises:
        RuntimeError: If the directory cannot be created. A permission
            problem says "Permission denied" so the CLI can print it as is.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        raise RuntimeError(f"Cannot create {purpose} directory {path}: Permission denied") from e
    except OSError as e:
        raise RuntimeError(f"Cannot create {purpose} directory {path}: {e}") from e
    return path


def ensure_config_dir() -> Path:
    """Create the config directory if needed and return it."""
    return _ensure_dir(get_config_dir(), "config")


def ensure_state_dir() -> Path:
    """Create the state directory if needed and return it."""
    return _ensure_dir(get_state_dir(), "state")
