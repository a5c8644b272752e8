"""Unit tests for protected path checking."""

from pathlib import Path

import pytest
from treewipe.filesystem.protected import PROTECTED_PATH_PATTERNS, is_protected_path


class TestIsProtectedPath:
    """Tests for is_protected_path."""

    @pytest.mark.parametrize("path", ["/", "/etc", "/usr", "/var", "/boot"])
    def test_system_roots_protected(self, path: str) -> None:
        """System directories are protected."""
        assert is_protected_path(path) is True

    def test_home_protected(self) -> None:
        """The home directory itself is protected."""
        assert is_protected_path(str(Path.home())) is True

    def test_tilde_is_expanded(self) -> None:
        """A ~ path is expanded before matching."""
        assert is_protected_path("~") is True
        assert is_protected_path("~/.ssh") is True

    def test_ssh_contents_protected(self) -> None:
        """Entries under ~/.ssh are protected."""
        assert is_protected_path(f"{Path.home()}/.ssh/id_ed25519") is True

    def test_subdirectory_of_system_root_not_protected(self) -> None:
        """Only the listed roots are protected, not everything beneath."""
        assert is_protected_path("/var/tmp/build-cache") is False

    def test_regular_path_not_protected(self, tmp_path: Path) -> None:
        """Ordinary scratch directories are not protected."""
        assert is_protected_path(str(tmp_path / "scratch")) is False

    def test_trailing_slash_normalized(self) -> None:
        """A trailing slash does not bypass protection."""
        assert is_protected_path("/etc/") is True

    def test_extra_patterns(self, tmp_path: Path) -> None:
        """User patterns are honored alongside built-ins."""
        keep = tmp_path / "keep-me"
        assert is_protected_path(str(keep)) is False
        assert is_protected_path(str(keep), [f"{tmp_path}/keep-*"]) is True

    def test_patterns_list(self) -> None:
        """Built-in patterns include the filesystem root."""
        assert "/" in PROTECTED_PATH_PATTERNS
