"""Filesystem cache directory management and file freshness checks.

Provides helpers for locating the trs2crs cache directory and deciding
whether a cached data file needs refreshing.  These are pure-Python
utilities with no JAX dependency.

The cache root is determined by the ``TRS2CRS_CACHE`` environment variable.
If unset, it defaults to ``~/.cache/trs2crs``.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

_ENV_VAR = "TRS2CRS_CACHE"
_DEFAULT_SUBDIR = ".cache/trs2crs"


def get_cache_dir(subdirectory: str | None = None) -> Path:
    """Return the trs2crs cache directory, creating it if needed.

    The root is ``$TRS2CRS_CACHE`` if set, otherwise ``~/.cache/trs2crs``.
    An optional *subdirectory* is appended and also created.

    Args:
        subdirectory: Optional subdirectory to append (e.g. ``"eop"``).

    Returns:
        Resolved :class:`~pathlib.Path` to the cache directory.
    """
    env = os.environ.get(_ENV_VAR)
    root = Path(env) if env is not None else Path.home() / _DEFAULT_SUBDIR

    if subdirectory is not None:
        root = root / subdirectory

    root.mkdir(parents=True, exist_ok=True)
    return root


def get_eop_cache_dir() -> Path:
    """Return the EOP cache directory (``<cache>/eop``)."""
    return get_cache_dir("eop")


def file_age_seconds(filepath: str | Path) -> float:
    """Return the age of *filepath* in seconds since last modification.

    Args:
        filepath: Path to the file.

    Returns:
        Seconds elapsed since the file was last modified.

    Raises:
        FileNotFoundError: If *filepath* does not exist.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"No such file: '{filepath}'")
    return max(0.0, time.time() - filepath.stat().st_mtime)


def file_age_days(filepath: str | Path) -> float:
    """Return the age of *filepath* in days since last modification."""
    return file_age_seconds(filepath) / 86400.0


def is_file_stale(filepath: str | Path, max_age_seconds: float) -> bool:
    """Check whether *filepath* is missing or older than *max_age_seconds*.

    Args:
        filepath: Path to the file.
        max_age_seconds: Maximum acceptable age in seconds.

    Returns:
        ``True`` if the file is missing or stale.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        return True
    return file_age_seconds(filepath) > max_age_seconds
