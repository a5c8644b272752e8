"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
import treewipe.core.theme as theme_module
from rich.theme import Theme
from treewipe.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.deleted == "#c1ff62"
        assert colors.failed == "#f53263"

    def test_short_hex_accepted(self) -> None:
        """Three-digit hex codes are valid."""
        assert ThemeColors(skipped="#abc").skipped == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(deleted="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nfailed = "#000000"\n')

        assert _load_toml_colors(theme_file) == {"failed": "#000000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_bundled_theme_matches_defaults(self) -> None:
        """The shipped theme file agrees with the model defaults."""
        colors = _load_toml_colors(Path(get_bundled_theme_path()))

        assert colors is not None
        assert ThemeColors(**colors) == ThemeColors()


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndeleted = "#ff0000"\n')

        with patch("treewipe.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.deleted == "#ff0000"
        assert colors.text == "#ffffff"

    def test_invalid_user_colors_fall_back(self, tmp_path: Path) -> None:
        """Invalid user colors fall back to defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndeleted = "green"\n')

        with patch("treewipe.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_contains_outcome_styles(self) -> None:
        """Generated theme defines the deletion outcome styles."""
        theme = get_rich_theme(ThemeColors())

        for name in ("deleted", "skipped", "failed", "bold_header", "dim"):
            assert name in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        with patch.object(theme_module, "_cached_theme", None):
            first = get_theme()
            second = get_theme()

        assert isinstance(first, Theme)
        assert first is second
