"""Download IERS Earth Orientation Parameter files.

Provides a helper to fetch the latest ``finals.all.iau2000.txt`` from
the IERS data centre.  Network errors are propagated to the caller so
that :func:`~trs2crs.eop.load_cached_eop` can decide on fallback
behaviour.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from trs2crs.eop._parsers import parse_standard_line

logger = logging.getLogger(__name__)

IERS_STANDARD_URL: str = (
    "https://datacenter.iers.org/data/latestVersion/finals.all.iau2000.txt"
)
"""Default URL for the IERS Standard Bulletin A finals file."""

STANDARD_FILENAME: str = "finals.all.iau2000.txt"
"""Canonical filename used for cached EOP data."""

_DEFAULT_TIMEOUT: float = 120.0
"""Default HTTP timeout in seconds."""


def download_standard_eop_file(
    filepath: str | Path,
    *,
    url: str = IERS_STANDARD_URL,
    timeout: float = _DEFAULT_TIMEOUT,
) -> Path:
    """Download an IERS standard EOP file to *filepath*.

    Creates parent directories if they do not exist.  The response is
    checked for at least one parseable record and then written through a
    temporary sibling file, so a failed or truncated download never
    clobbers an existing cache file.

    Args:
        filepath: Destination path for the downloaded file.
        url: URL to fetch.  Defaults to :data:`IERS_STANDARD_URL`.
        timeout: HTTP timeout in seconds.  Defaults to 120.

    Returns:
        Resolved :class:`~pathlib.Path` to the written file.

    Raises:
        httpx.HTTPStatusError: If the server returns a non-2xx status.
        httpx.TransportError: On network-level failures (DNS, timeout, etc.).
        ValueError: If the response holds no parseable EOP record.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading EOP data from %s", url)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        response = client.get(url)
        response.raise_for_status()

    text = response.text
    if not any(parse_standard_line(line) is not None for line in text.splitlines()):
        raise ValueError(f"No EOP records in response from {url}")

    partial = filepath.with_name(filepath.name + ".part")
    partial.write_text(text, encoding="utf-8")
    partial.replace(filepath)
    logger.info("EOP data written to %s", filepath)
    return filepath.resolve()
