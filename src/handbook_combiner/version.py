"""Version reporting for the installed distribution.

The version comes from the package metadata. Build info (commit count, date,
short hash) is appended only when running from a git source checkout,
i.e. an editable install; a wheel installed into site-packages has none.
"""

import os
import subprocess
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "handbook-combiner"

# src/handbook_combiner/version.py -> checkout root (only meaningful for src layout)
_CHECKOUT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def package_version() -> str:
    """Return the installed distribution version, or '0+unknown' when not installed."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0+unknown"


def source_checkout(path: str = _CHECKOUT_DIR) -> str | None:
    """Return *path* if it looks like this project's source checkout, else None.

    A checkout has both a .git entry and a pyproject.toml next to src/.
    """
    if os.path.exists(os.path.join(path, ".git")) and os.path.isfile(os.path.join(path, "pyproject.toml")):
        return path
    return None


def _git(checkout: str, *args: str) -> str | None:
    try:
        result = subprocess.run(
            ["git", "-C", checkout, *args],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def build_info(checkout: str) -> str | None:
    """Return 'build <n> (<date> g<sha>[+dirty])' for a checkout, or None if git fails."""
    commit = _git(checkout, "rev-parse", "--short", "HEAD")
    if not commit:
        return None
    count = _git(checkout, "rev-list", "--count", "HEAD") or "0"
    date = _git(checkout, "log", "-1", "--format=%cs") or "unknown"
    dirty = "+dirty" if _git(checkout, "status", "--porcelain") else ""
    return f"build {count} ({date} g{commit}{dirty})"


def get_version(checkout: str | None = None) -> str:
    """Return the package version, plus git build info when run from a source checkout."""
    current = package_version()
    checkout = checkout or source_checkout()
    if not checkout:
        return current
    info = build_info(checkout)
    return f"{current} {info}" if info else current
