"""Parsers for IERS Earth Orientation Parameter data files.

Supports two layouts:

- the IERS standard fixed-width format (``finals.all.iau2000.txt``,
  Bulletin A/B), parsed line by line;
- the semicolon-separated CSV files of the IERS data centre (EOP 14/20
  C04 and finals CSV), read with :mod:`polars`.

Both return parallel lists with the polar motion and pole offsets in
radians and UT1 expressed as UT1-TAI in seconds, which stays continuous
across leap seconds and interpolates cleanly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jax.numpy as jnp
import polars as pl

from trs2crs.constants import AS2RAD, MAS2RAD
from trs2crs.time import leap_seconds_tai_utc

logger = logging.getLogger(__name__)

# Column ranges for IERS standard format (0-indexed Python slices)
_MJD_RANGE = slice(6, 15)
_PM_X_RANGE = slice(17, 27)
_PM_Y_RANGE = slice(36, 46)
_UT1_UTC_RANGE = slice(58, 68)
_DX_RANGE = slice(96, 106)
_DY_RANGE = slice(115, 125)
_STANDARD_LINE_LENGTH = 187

EOPColumns = tuple[list[int], list[float], list[float], list[float], list[float], list[float]]


def _ut1_minus_tai(mjds: list[float], ut1_utcs: list[float]) -> list[float]:
    tai_utc = leap_seconds_tai_utc(jnp.asarray(mjds, dtype=jnp.float64)).tolist()
    return [ut1_utc - leap for ut1_utc, leap in zip(ut1_utcs, tai_utc)]


def parse_standard_line(
    line: str,
) -> tuple[int, float, float, float, float, float] | None:
    """Parse a single line from an IERS standard format EOP file.

    Lines shorter than 187 characters are padded with spaces (prediction
    lines may have trailing whitespace trimmed). Lines longer than 187
    characters or lines where required fields (MJD, PM_X, PM_Y, UT1-UTC)
    cannot be parsed are skipped (returns None).  Missing pole offsets
    are returned as zero.

    Args:
        line: A single line from the IERS standard format file.

    Returns:
        Tuple of (mjd, pm_x [rad], pm_y [rad], ut1_utc [s],
        dX [rad], dY [rad]), or None if the line cannot be parsed.
    """
    if len(line) > _STANDARD_LINE_LENGTH:
        return None

    line = line.ljust(_STANDARD_LINE_LENGTH)

    try:
        mjd = float(line[_MJD_RANGE].strip())
        pm_x = float(line[_PM_X_RANGE].strip()) * AS2RAD
        pm_y = float(line[_PM_Y_RANGE].strip()) * AS2RAD
        ut1_utc = float(line[_UT1_UTC_RANGE].strip())
    except ValueError:
        return None

    try:
        dX = float(line[_DX_RANGE].strip()) * MAS2RAD
    except ValueError:
        dX = 0.0

    try:
        dY = float(line[_DY_RANGE].strip()) * MAS2RAD
    except ValueError:
        dY = 0.0

    return int(round(mjd)), pm_x, pm_y, ut1_utc, dX, dY


def parse_standard_file(filepath: str | Path) -> EOPColumns:
    """Parse an entire IERS standard format EOP file.

    Reads all valid lines and returns parallel lists of EOP values.
    Lines that cannot be parsed (e.g. empty prediction lines at the
    end of the file) are skipped.

    Args:
        filepath: Path to the IERS standard format file.

    Returns:
        Tuple of 6 lists: (mjd, pm_x, pm_y, ut1_minus_tai, dX, dY).
        Units match :func:`parse_standard_line`, with UT1-UTC converted
        to UT1-TAI.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid lines were parsed.
    """
    columns: EOPColumns = ([], [], [], [], [], [])

    with open(filepath) as f:
        for line in f:
            result = parse_standard_line(line.rstrip("\n"))
            if result is not None:
                for column, value in zip(columns, result):
                    column.append(value)

    if not columns[0]:
        raise ValueError(f"No valid EOP data found in {filepath}")

    columns[3][:] = _ut1_minus_tai(columns[0], columns[3])
    logger.info("Parsed %d EOP records from %s", len(columns[0]), filepath)
    return columns


def parse_csv_file(
    filepath: str | Path,
    *,
    mjd_column: str = "MJD",
    x_pole_column: str = "x_pole",
    y_pole_column: str = "y_pole",
    ut1_utc_column: str = "UT1-UTC",
    dx_column: str = "dX",
    dy_column: str = "dY",
) -> EOPColumns:
    """Parse a semicolon-separated IERS EOP CSV file.

    Rows missing any of the MJD, pole or UT1-UTC values are dropped;
    missing pole offsets become zero.  The offset columns are optional.

    Args:
        filepath: Path to the CSV file.
        mjd_column: Name of the MJD column. Default: ``"MJD"``
        x_pole_column: Name of the x pole column [arcsec]. Default: ``"x_pole"``
        y_pole_column: Name of the y pole column [arcsec]. Default: ``"y_pole"``
        ut1_utc_column: Name of the UT1-UTC column [s]. Default: ``"UT1-UTC"``
        dx_column: Name of the first pole offset column [mas]. Default: ``"dX"``
        dy_column: Name of the second pole offset column [mas]. Default: ``"dY"``

    Returns:
        Tuple of 6 lists: (mjd, pm_x, pm_y, ut1_minus_tai, dX, dY) in
        radians and seconds.

    Raises:
        ValueError: If a required column is missing or no rows remain.
    """
    df = pl.read_csv(filepath, separator=";", infer_schema_length=10000)

    required = [mjd_column, x_pole_column, y_pole_column, ut1_utc_column]
    missing = [name for name in required if name not in df.columns]
    if missing:
        raise ValueError(f"EOP CSV {filepath} is missing columns: {missing}")

    offsets = []
    for name in (dx_column, dy_column):
        if name in df.columns:
            offsets.append(pl.col(name).cast(pl.Float64).fill_null(0.0))
        else:
            offsets.append(pl.lit(0.0, dtype=pl.Float64))

    df = (
        df.select(
            pl.col(mjd_column).cast(pl.Float64).alias("mjd"),
            pl.col(x_pole_column).cast(pl.Float64).alias("pm_x"),
            pl.col(y_pole_column).cast(pl.Float64).alias("pm_y"),
            pl.col(ut1_utc_column).cast(pl.Float64).alias("ut1_utc"),
            offsets[0].alias("dX"),
            offsets[1].alias("dY"),
        )
        .drop_nulls(["mjd", "pm_x", "pm_y", "ut1_utc"])
        .sort("mjd")
    )
    if df.height == 0:
        raise ValueError(f"No valid EOP data found in {filepath}")

    mjds = df["mjd"].to_list()
    columns: EOPColumns = (
        [int(round(m)) for m in mjds],
        [v * AS2RAD for v in df["pm_x"].to_list()],
        [v * AS2RAD for v in df["pm_y"].to_list()],
        _ut1_minus_tai(mjds, df["ut1_utc"].to_list()),
        [v * MAS2RAD for v in df["dX"].to_list()],
        [v * MAS2RAD for v in df["dY"].to_list()],
    )
    logger.info("Parsed %d EOP records from %s", df.height, filepath)
    return columns
