"""Factory functions for creating EOPTable instances.

Provides convenience constructors for common EOP configurations:

- :func:`static_eop`: Constant EOP values over a range of days (useful
  for testing or when specific values are known).
- :func:`load_eop_from_file`: Load from an IERS standard format file.
- :func:`load_eop_from_csv`: Load from a semicolon-separated IERS CSV file.
- :func:`load_cached_eop`: Load from a local cache, downloading fresh data
  from IERS when stale.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from trs2crs.eop._download import STANDARD_FILENAME, download_standard_eop_file
from trs2crs.eop._parsers import parse_csv_file, parse_standard_file
from trs2crs.eop._types import EOPRecord, EOPTable, OffsetKind, StaticEOPTable, UT1Mode
from trs2crs.utils.caching import get_eop_cache_dir, is_file_stale

logger = logging.getLogger(__name__)

_DEFAULT_MAX_AGE_DAYS: float = 7.0
"""Default maximum age for cached EOP data in days."""


def static_eop(
    xp: float = 0.0,
    yp: float = 0.0,
    ut1_minus_tai: float = 0.0,
    dx: float = 0.0,
    dy: float = 0.0,
    mjd_min: int = 0,
    mjd_max: int = 99999,
    ut1_mode: UT1Mode = UT1Mode.UT1,
    offset_kind: OffsetKind = OffsetKind.CIP,
) -> EOPTable:
    """Create an EOPTable with constant values across an MJD range.

    Every day in ``[mjd_min, mjd_max]`` returns the same record, so
    interpolation returns the constant everywhere inside the range.

    Args:
        xp: Polar motion x-component [rad]. Default: 0.0.
        yp: Polar motion y-component [rad]. Default: 0.0.
        ut1_minus_tai: UT1-TAI [s]. Default: 0.0.
        dx: First celestial pole offset [rad]. Default: 0.0.
        dy: Second celestial pole offset [rad]. Default: 0.0.
        mjd_min: First valid MJD. Default: 0.
        mjd_max: Last valid MJD. Default: 99999.
        ut1_mode: Flavour of the UT1 value. Default: ``UT1Mode.UT1``.
        offset_kind: Meaning of ``dx``, ``dy``. Default: ``OffsetKind.CIP``.

    Returns:
        EOPTable with constant values.

    Examples:
        ```python
        from trs2crs.eop import static_eop
        eop = static_eop(ut1_minus_tai=-36.9)
        eop.lookup(59569)
        ```
    """
    return StaticEOPTable(
        EOPRecord(xp, yp, ut1_minus_tai, dx, dy),
        mjd_min=mjd_min,
        mjd_max=mjd_max,
        ut1_mode=ut1_mode,
        offset_kind=offset_kind,
    )


def load_eop_from_file(
    filepath: str | Path,
    *,
    ut1_mode: UT1Mode = UT1Mode.UT1,
    offset_kind: OffsetKind = OffsetKind.CIP,
) -> EOPTable:
    """Load EOP data from an IERS standard format file.

    Args:
        filepath: Path to an IERS standard format file
            (e.g. ``finals.all.iau2000.txt``).
        ut1_mode: Flavour of the tabulated UT1. The finals files carry the
            full UT1. Default: ``UT1Mode.UT1``
        offset_kind: Meaning of the offset columns. ``finals.all.iau2000``
            files carry ``(dX, dY)``. Default: ``OffsetKind.CIP``

    Returns:
        EOPTable with daily records.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid EOP data is found.

    Examples:
        ```python
        from trs2crs.eop import load_eop_from_file
        eop = load_eop_from_file("path/to/finals.all.iau2000.txt")
        ```
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")

    logger.info("Loading EOP data from %s", filepath)
    return EOPTable.from_records(
        *parse_standard_file(filepath), ut1_mode=ut1_mode, offset_kind=offset_kind
    )


def load_eop_from_csv(
    filepath: str | Path,
    *,
    ut1_mode: UT1Mode = UT1Mode.UT1,
    offset_kind: OffsetKind = OffsetKind.CIP,
    **columns: str,
) -> EOPTable:
    """Load EOP data from a semicolon-separated IERS CSV file.

    Args:
        filepath: Path to the CSV file.
        ut1_mode: Flavour of the tabulated UT1. Default: ``UT1Mode.UT1``
        offset_kind: Meaning of the offset columns. Default: ``OffsetKind.CIP``
        **columns: Column name overrides passed to the CSV parser
            (``mjd_column``, ``x_pole_column``, ``y_pole_column``,
            ``ut1_utc_column``, ``dx_column``, ``dy_column``).

    Returns:
        EOPTable with the file's records.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If required columns are missing or no rows are valid.

    Examples:
        ```python
        from trs2crs.eop import OffsetKind, load_eop_from_csv
        eop = load_eop_from_csv("eopc04.1962-now.csv",
                                offset_kind=OffsetKind.NUTATION,
                                dx_column="dPsi", dy_column="dEpsilon")
        ```
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")

    logger.info("Loading EOP data from %s", filepath)
    return EOPTable.from_records(
        *parse_csv_file(filepath, **columns), ut1_mode=ut1_mode, offset_kind=offset_kind
    )


def load_cached_eop(
    filepath: str | Path | None = None,
    *,
    max_age_days: float = _DEFAULT_MAX_AGE_DAYS,
) -> EOPTable:
    """Load EOP data from a local cache, downloading fresh data when stale.

    Checks whether the cached file at *filepath* exists and is younger than
    *max_age_days*.  If the file is missing or stale, a fresh copy of
    ``finals.all.iau2000.txt`` is downloaded from IERS.  When the download
    fails but a stale copy exists, the stale copy is used.

    Args:
        filepath: Path to the cached EOP file.  When ``None`` (the default),
            uses ``<cache_dir>/eop/finals.all.iau2000.txt``.
        max_age_days: Maximum acceptable age of the cached file in days.
            Defaults to 7.

    Returns:
        EOPTable loaded from the cached (or freshly downloaded) file.

    Raises:
        httpx.HTTPError: If the download fails and no cached file exists.
        ValueError: If the download or the cached file holds no EOP data
            and no usable cached file exists.

    Examples:
        ```python
        from trs2crs.eop import load_cached_eop

        # Uses default cache location and 7-day refresh
        eop = load_cached_eop()

        # Custom path and 1-day refresh
        eop = load_cached_eop("/tmp/eop_cache/finals.txt", max_age_days=1.0)
        ```
    """
    filepath = get_eop_cache_dir() / STANDARD_FILENAME if filepath is None else Path(filepath)

    if is_file_stale(filepath, max_age_days * 86400.0):
        try:
            download_standard_eop_file(filepath)
        except (httpx.HTTPError, ValueError):
            if not filepath.exists():
                raise
            logger.warning(
                "Failed to download EOP data; using stale cache file %s.",
                filepath,
                exc_info=True,
            )

    return load_eop_from_file(filepath)
