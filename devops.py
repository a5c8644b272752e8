"""Development tasks for treewipe.

Usage: uv run devops.py <task>
Tasks: fmt, lint, test, clean
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent

# Artifact directories removed by `clean`, relative to the project root
ARTIFACT_DIRS = (".pytest_cache", ".ruff_cache", ".mypy_cache", "htmlcov", "dist", "build")


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True, cwd=ROOT)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    print("Formatting with Ruff...")
    _run([["ruff", "format", "."], ["ruff", "check", "--fix", "."]])


def lint() -> None:
    """Check formatting and lint rules without changing files."""
    _run([["ruff", "format", "--check", "."], ["ruff", "check", "."]])


def test() -> None:
    """Run the test suite with pytest."""
    _run([["uv", "run", "pytest", "-q"]])


def clean() -> None:
    """Erase caches and build artifacts using treewipe itself."""
    from treewipe.eraser import EraseOperator

    roots = [str(ROOT / name) for name in ARTIFACT_DIRS]
    for pattern in ("__pycache__", "*.egg-info"):
        roots += [str(p) for p in ROOT.rglob(pattern) if p.is_dir() and ".venv" not in p.parts]

    reports = EraseOperator().erase(roots)
    erased = [r.root for r in reports if r.complete]
    failed = [r for r in reports if not r and not r.result.skipped]

    for report in failed:
        print(f"Could not erase {report.root}: {report.result.error}", file=sys.stderr)
    print(f"Erased {len(erased)} artifact director{'y' if len(erased) == 1 else 'ies'}.")
    if failed:
        sys.exit(1)


TASKS = {"fmt": format_code, "lint": lint, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
