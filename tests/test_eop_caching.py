"""Tests for EOP caching and download functionality."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from conftest import FINALS_LINES
from trs2crs.eop import EOPTable, download_standard_eop_file, load_cached_eop
from trs2crs.eop._download import IERS_STANDARD_URL

_FINALS_TEXT = "\n".join(FINALS_LINES) + "\n"


def _backdate(path: Path, days: float) -> None:
    old_time = path.stat().st_mtime - days * 86400
    os.utime(path, (old_time, old_time))


# ---------------------------------------------------------------------------
# download_standard_eop_file tests
# ---------------------------------------------------------------------------


class TestDownloadStandardEOPFile:
    """Tests for download_standard_eop_file."""

    @pytest.mark.ci
    def test_download_success(self, tmp_path: Path) -> None:
        """Actual download from IERS produces a loadable file."""
        dest = tmp_path / "finals.all.iau2000.txt"
        result = download_standard_eop_file(dest)
        assert result.exists()
        assert result.stat().st_size > 0

    def test_download_writes_response(self, tmp_path: Path) -> None:
        """Parent directories are created and the response text is written."""
        dest = tmp_path / "deep" / "nested" / "finals.txt"
        assert not dest.parent.exists()

        with patch("trs2crs.eop._download.httpx.Client") as mock_client_cls:
            mock_response = mock_client_cls.return_value.__enter__.return_value.get.return_value
            mock_response.text = _FINALS_TEXT
            mock_response.raise_for_status.return_value = None

            result = download_standard_eop_file(dest)

        assert result == dest.resolve()
        assert dest.read_text(encoding="utf-8") == _FINALS_TEXT
        assert not dest.with_name("finals.txt.part").exists()

    def test_invalid_response_keeps_existing_file(self, tmp_path: Path) -> None:
        """A response with no EOP records raises and leaves the cache untouched."""
        dest = tmp_path / "finals.txt"
        dest.write_text(_FINALS_TEXT, encoding="utf-8")

        with patch("trs2crs.eop._download.httpx.Client") as mock_client_cls:
            mock_response = mock_client_cls.return_value.__enter__.return_value.get.return_value
            mock_response.text = "<html>maintenance</html>\n"
            mock_response.raise_for_status.return_value = None

            with pytest.raises(ValueError, match="No EOP records"):
                download_standard_eop_file(dest)

        assert dest.read_text(encoding="utf-8") == _FINALS_TEXT

    def test_http_error_propagates(self, tmp_path: Path) -> None:
        request = httpx.Request("GET", IERS_STANDARD_URL)
        error = httpx.HTTPStatusError(
            "404", request=request, response=httpx.Response(404, request=request)
        )
        with patch("trs2crs.eop._download.httpx.Client") as mock_client_cls:
            mock_response = mock_client_cls.return_value.__enter__.return_value.get.return_value
            mock_response.raise_for_status.side_effect = error

            with pytest.raises(httpx.HTTPStatusError):
                download_standard_eop_file(tmp_path / "finals.txt")

        assert not (tmp_path / "finals.txt").exists()

    def test_download_default_url(self) -> None:
        """Default URL points to IERS data centre."""
        assert "iers.org" in IERS_STANDARD_URL
        assert "finals.all.iau2000.txt" in IERS_STANDARD_URL


# ---------------------------------------------------------------------------
# load_cached_eop tests
# ---------------------------------------------------------------------------


class TestLoadCachedEOP:
    """Tests for load_cached_eop."""

    def test_fresh_file_reused(self, finals_path: Path) -> None:
        """A fresh cached file is loaded without downloading."""
        with patch("trs2crs.eop._providers.download_standard_eop_file") as mock_dl:
            eop = load_cached_eop(finals_path, max_age_days=7.0)
            mock_dl.assert_not_called()

        assert isinstance(eop, EOPTable)
        assert eop.mjd_min == 60249

    def test_stale_file_triggers_download(self, finals_path: Path) -> None:
        _backdate(finals_path, 30)

        with patch("trs2crs.eop._providers.download_standard_eop_file") as mock_dl:
            mock_dl.return_value = finals_path
            eop = load_cached_eop(finals_path, max_age_days=7.0)
            mock_dl.assert_called_once_with(finals_path)

        assert isinstance(eop, EOPTable)

    def test_missing_file_triggers_download(self, tmp_path: Path) -> None:
        dest = tmp_path / "finals.all.iau2000.txt"

        def fake_download(fp: Path) -> Path:
            fp.write_text(_FINALS_TEXT, encoding="utf-8")
            return fp

        with patch(
            "trs2crs.eop._providers.download_standard_eop_file", side_effect=fake_download
        ) as mock_dl:
            eop = load_cached_eop(dest)
            mock_dl.assert_called_once()

        assert len(eop) == 3

    def test_failed_download_uses_stale_file(self, finals_path: Path) -> None:
        """A stale copy is used when the refresh fails."""
        _backdate(finals_path, 30)

        with patch(
            "trs2crs.eop._providers.download_standard_eop_file",
            side_effect=httpx.ConnectError("network error"),
        ):
            eop = load_cached_eop(finals_path, max_age_days=7.0)

        assert eop.mjd_max == 60672

    def test_failed_download_without_cache_raises(self, tmp_path: Path) -> None:
        dest = tmp_path / "finals.all.iau2000.txt"

        with patch(
            "trs2crs.eop._providers.download_standard_eop_file",
            side_effect=httpx.ConnectError("network error"),
        ), pytest.raises(httpx.ConnectError):
            load_cached_eop(dest)

    def test_invalid_download_without_cache_raises(self, tmp_path: Path) -> None:
        with patch(
            "trs2crs.eop._providers.download_standard_eop_file",
            side_effect=ValueError("No EOP records in response"),
        ), pytest.raises(ValueError, match="No EOP records"):
            load_cached_eop(tmp_path / "finals.all.iau2000.txt")

    def test_default_filepath(self, monkeypatch, tmp_path: Path) -> None:
        """When filepath is None, the default cache location is used."""
        monkeypatch.setenv("TRS2CRS_CACHE", str(tmp_path))
        expected = tmp_path / "eop" / "finals.all.iau2000.txt"

        with (
            patch("trs2crs.eop._providers.is_file_stale", return_value=False) as mock_stale,
            patch("trs2crs.eop._providers.load_eop_from_file") as mock_load,
        ):
            load_cached_eop()

        assert Path(mock_stale.call_args[0][0]) == expected
        mock_load.assert_called_once_with(expected)

    def test_custom_max_age(self, finals_path: Path) -> None:
        _backdate(finals_path, 2)

        with patch("trs2crs.eop._providers.download_standard_eop_file") as mock_dl:
            load_cached_eop(finals_path, max_age_days=3.0)
            mock_dl.assert_not_called()

        with patch("trs2crs.eop._providers.download_standard_eop_file") as mock_dl:
            mock_dl.return_value = finals_path
            load_cached_eop(finals_path, max_age_days=1.0)
            mock_dl.assert_called_once()
