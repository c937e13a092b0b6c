# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "trs2crs"]
#
# [tool.uv.sources]
# trs2crs = { path = ".." }
# ///
"""Print the terrestrial-to-celestial rotation and its EOP partials at an epoch.

Loads Earth orientation parameters from the local cache (downloading the IERS
``finals.all.iau2000.txt`` file when the cache is stale), or from a file given
on the command line, and evaluates the CIO-based rotation together with the
partial derivatives with respect to polar motion, UT1 and the CIP offsets.

Requires trs2crs to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/rotation_at_epoch.py [OPTIONS] EPOCH

Examples:
    # Rotation at noon UTC with the cached IERS data
    uv run examples/rotation_at_epoch.py 2024-03-01T12:00:00

    # IAU 2000 model, classical CIP route, all partials
    uv run examples/rotation_at_epoch.py 2024-03-01T12:00:00 --model iau2000 \\
        --route classical --partials

    # Local C04 CSV with nutation offsets, epoch in TT
    uv run examples/rotation_at_epoch.py 2020-06-01T00:00:00 --scale TT \\
        --eop-file eopc04.1962-now.csv --offsets nutation
"""

import enum
import logging
import sys
import time
from pathlib import Path
from typing import Annotated

import jax.numpy as jnp
import typer

from trs2crs import set_dtype
from trs2crs.composer import RotationComposer
from trs2crs.config import CIPRoute, NutationModel, TransformConfig
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.eop import OffsetKind, UT1Mode, load_cached_eop, load_eop_from_csv, load_eop_from_file
from trs2crs.errors import DataGapError

set_dtype(jnp.float64)


class Scale(enum.StrEnum):
    """Time scale of the epoch argument."""

    UTC = "UTC"
    TAI = "TAI"
    TT = "TT"


def _format_matrix(matrix, indent: str = "  ") -> str:
    rows = []
    for row in matrix.tolist():
        rows.append(indent + " ".join(f"{value:+.15f}" for value in row))
    return "\n".join(rows)


def main(
    epoch: Annotated[str, typer.Argument(help="Epoch, ISO 8601 (YYYY-MM-DDTHH:MM:SS)")],
    scale: Annotated[Scale, typer.Option(help="Time scale of the epoch")] = Scale.UTC,
    model: Annotated[NutationModel, typer.Option(help="Precession-nutation model")] = (
        NutationModel.IAU2006
    ),
    route: Annotated[CIPRoute, typer.Option(help="Source of the CIP coordinates")] = (
        CIPRoute.SERIES
    ),
    eop_file: Annotated[
        Path | None,
        typer.Option(help="EOP file (IERS standard format, or .csv); default: cached IERS data"),
    ] = None,
    offsets: Annotated[
        OffsetKind, typer.Option(help="Meaning of the offset columns of --eop-file")
    ] = OffsetKind.CIP,
    tide_free: Annotated[
        bool, typer.Option(help="Treat tabulated UT1 as UT1R (zonal tides removed)")
    ] = False,
    no_fcn: Annotated[bool, typer.Option(help="Do not substitute the FCN model")] = False,
    partials: Annotated[bool, typer.Option(help="Also print all EOP partials")] = False,
    verbose: Annotated[bool, typer.Option(help="Log cache and download activity")] = False,
) -> None:
    """Compute the TRS to CRS rotation at EPOCH."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    # ── Stage 1: Load EOP ────────────────────────────────────────────────
    ut1_mode = UT1Mode.UT1R if tide_free else UT1Mode.UT1
    t0 = time.perf_counter()
    if eop_file is None:
        table = load_cached_eop()
    elif eop_file.suffix.lower() == ".csv":
        table = load_eop_from_csv(eop_file, ut1_mode=ut1_mode, offset_kind=offsets)
    else:
        table = load_eop_from_file(eop_file, ut1_mode=ut1_mode, offset_kind=offsets)
    print(f"Loaded {table!r} in {time.perf_counter() - t0:.2f}s")

    # ── Stage 2: Compose the rotation ────────────────────────────────────
    config = TransformConfig(model=model, cip_route=route, apply_fcn=not no_fcn)
    composer = RotationComposer(table, config)
    when = Epoch(epoch, scale=TimeScale[scale.value])

    t0 = time.perf_counter()
    try:
        result = composer.compute_rotation(
            when, want_xpole=partials, want_ypole=partials, want_ut1=partials,
            want_dx=partials, want_dy=partials,
        )
    except DataGapError as err:
        print(f"ERROR: {err}")
        sys.exit(1)
    elapsed = time.perf_counter() - t0

    print(f"\nEpoch: {when}")
    print(f"  Model: {model.value}, CIP route: {route.value}")
    print(f"  Polar motion: xp = {result.xpole:.7f} arcsec, yp = {result.ypole:.7f} arcsec")
    print(f"  GMST: {result.gmst:.12f} rad")
    print(f"  Computed in {elapsed * 1e3:.1f} ms")
    print("\nTRS -> CRS rotation:")
    print(_format_matrix(result.rotation))

    for name, matrix in result.partials().items():
        unit = "per s" if name == "ut1" else "per rad"
        print(f"\ndR/d{name} ({unit}):")
        print(_format_matrix(matrix))

    print("\nDone.")


if __name__ == "__main__":
    typer.run(main)
