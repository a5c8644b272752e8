"""Color theme for treewipe output.

The bundled palette lives in ``treewipe/data/theme.toml``. Users can
override any subset of it in ``~/.config/treewipe/theme.toml``; a broken
override is reported and ignored rather than breaking the CLI.
"""

import logging
import re
import sys
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from rich.theme import Theme

from treewipe.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

# Rich style name -> (color field, extra style attributes)
_STYLE_MAP: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "deleted": ("deleted", ""),
    "skipped": ("skipped", ""),
    "failed": ("failed", "bold"),
}


class ThemeColors(BaseModel):
    """Palette used by the CLI. Every value is a #RGB or #RRGGBB hex code."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    deleted: str = "#c1ff62"
    skipped: str = "#b2bec3"
    failed: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: ValidationInfo) -> str:
        """Normalize whitespace and reject anything that is not a hex color."""
        name = info.field_name
        if not isinstance(v, str):
            raise ValueError(f"{name}: color must be a string")
        color = v.strip()
        if not color.startswith("#"):
            raise ValueError(f"{name}: color must start with '#'")
        digits = color[1:]
        if len(digits) not in (3, 6):
            raise ValueError(f"{name}: color must be #RGB or #RRGGBB format")
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"{name}: invalid hex color '{color}'")
        return color


def get_bundled_theme_path() -> Path:
    """Location of the theme file shipped with the package."""
    return resources.files("treewipe.data").joinpath("theme.toml")  # type: ignore[return-value]


def _warn(message: str) -> None:
    logger.warning("%s", message)
    print(f"Warning: {message}", file=sys.stderr)


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped. Returns None if the file is missing,
    unreadable or not valid TOML.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        _warn(f"Failed to parse {path}: {e}")
        return None
    except OSError as e:
        logger.warning("Cannot read theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring non-table 'colors' in %s", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the user's overrides onto the bundled palette."""
    colors = _load_toml_colors(Path(get_bundled_theme_path()))
    if colors is None:
        logger.error("Bundled theme is missing or unreadable; using built-in colors")
        colors = {}

    user_path = get_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors = {**colors, **overrides}

    try:
        return ThemeColors(**colors)
    except ValueError as e:
        _warn(f"Invalid theme configuration, using defaults: {e}")
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme from a palette, loading it if not given."""
    palette = (colors or load_theme()).model_dump()
    return Theme(
        {
            style: f"{attrs} {palette[field]}".strip()
            for style, (field, attrs) in _STYLE_MAP.items()
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
