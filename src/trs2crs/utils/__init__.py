"""Shared utility functions for trs2crs.

Provides filesystem cache management for downloaded data files.
"""

from trs2crs.utils.caching import (
    file_age_days,
    file_age_seconds,
    get_cache_dir,
    get_eop_cache_dir,
    is_file_stale,
)

__all__ = [
    "file_age_days",
    "file_age_seconds",
    "get_cache_dir",
    "get_eop_cache_dir",
    "is_file_stale",
]
