"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from treewipe.filesystem.memory import MemoryFilesystem


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and state directories at a throwaway location.

    Keeps every test away from the real ~/.config and ~/.local/state.
    """
    base = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(base / "state"))
    return base


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Virtual filesystem holding a small project tree.

    /project
    ├── README.md
    ├── build/
    │   ├── app.bin
    │   └── obj/
    │       └── main.o
    └── logs/
        ├── a.log
        └── b.log
    """
    fs = MemoryFilesystem()
    fs.add_file("/project/README.md")
    fs.add_file("/project/build/app.bin")
    fs.add_file("/project/build/obj/main.o")
    fs.add_file("/project/logs/a.log")
    fs.add_file("/project/logs/b.log")
    return fs


@pytest.fixture
def flat_dir(tmp_path: Path) -> Path:
    """Real directory containing three files and no subdirectories."""
    root = tmp_path / "flat"
    root.mkdir()
    for name in ("one.txt", "two.txt", "three.txt"):
        (root / name).write_text(name)
    return root


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    """Real directory tree three levels deep with files at every level."""
    root = tmp_path / "nested"
    (root / "a" / "b").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.txt").write_text("top")
    (root / "a" / "mid.txt").write_text("mid")
    (root / "a" / "b" / "deep.txt").write_text("deep")
    return root
