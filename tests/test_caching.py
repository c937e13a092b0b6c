"""Tests for trs2crs.utils.caching module."""

import os
import time
from pathlib import Path

import pytest

from trs2crs.utils.caching import (
    file_age_days,
    file_age_seconds,
    get_cache_dir,
    get_eop_cache_dir,
    is_file_stale,
)

# ---------------------------------------------------------------------------
# get_cache_dir
# ---------------------------------------------------------------------------


class TestGetCacheDir:
    """Tests for get_cache_dir()."""

    def test_default_path(self, monkeypatch, tmp_path):
        """Default cache lives under ~/.cache/trs2crs."""
        monkeypatch.delenv("TRS2CRS_CACHE", raising=False)
        monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
        result = get_cache_dir()
        assert result == tmp_path / ".cache" / "trs2crs"
        assert result.is_dir()

    def test_env_override(self, monkeypatch, tmp_path):
        """TRS2CRS_CACHE env var overrides the default."""
        custom = tmp_path / "custom_cache"
        monkeypatch.setenv("TRS2CRS_CACHE", str(custom))
        result = get_cache_dir()
        assert result == custom
        assert result.is_dir()

    def test_subdirectory_creation(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRS2CRS_CACHE", str(tmp_path / "cache"))
        result = get_cache_dir("tables")
        assert result == tmp_path / "cache" / "tables"
        assert result.is_dir()

    def test_idempotent(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRS2CRS_CACHE", str(tmp_path / "cache"))
        assert get_cache_dir("sub") == get_cache_dir("sub")

    def test_eop_cache_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRS2CRS_CACHE", str(tmp_path))
        result = get_eop_cache_dir()
        assert result == tmp_path / "eop"
        assert result.is_dir()


# ---------------------------------------------------------------------------
# file_age_seconds / file_age_days
# ---------------------------------------------------------------------------


class TestFileAge:
    """Tests for file_age_seconds and file_age_days."""

    def test_recent_file(self, tmp_path):
        f = tmp_path / "recent.txt"
        f.write_text("hello")
        assert 0 <= file_age_seconds(f) < 5

    def test_old_file(self, tmp_path):
        """Backdating mtime makes the file appear old."""
        f = tmp_path / "old.txt"
        f.write_text("hello")
        old_time = time.time() - 3600
        os.utime(f, (old_time, old_time))
        assert 3590 < file_age_seconds(f) < 3700

    def test_age_days(self, tmp_path):
        f = tmp_path / "day_old.txt"
        f.write_text("hello")
        old_time = time.time() - 86400
        os.utime(f, (old_time, old_time))
        assert 0.99 < file_age_days(f) < 1.1

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            file_age_seconds(tmp_path / "nope.txt")

    def test_string_path(self, tmp_path):
        f = tmp_path / "str_path.txt"
        f.write_text("hello")
        assert file_age_seconds(str(f)) >= 0


# ---------------------------------------------------------------------------
# is_file_stale
# ---------------------------------------------------------------------------


class TestIsFileStale:
    """Tests for is_file_stale."""

    def test_missing_file_is_stale(self, tmp_path):
        assert is_file_stale(tmp_path / "missing.txt", max_age_seconds=9999) is True

    def test_old_file_is_stale(self, tmp_path):
        f = tmp_path / "old.txt"
        f.write_text("data")
        old_time = time.time() - 7200
        os.utime(f, (old_time, old_time))
        assert is_file_stale(f, max_age_seconds=3600) is True

    def test_fresh_file_not_stale(self, tmp_path):
        f = tmp_path / "fresh.txt"
        f.write_text("data")
        assert is_file_stale(f, max_age_seconds=3600) is False
