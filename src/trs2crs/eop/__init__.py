"""Earth Orientation Parameters (EOP): tables, providers and interpolation.

Provides integer-day keyed EOP tables, loaders for the IERS file
formats, and the :class:`EOPCorrector` that interpolates a table with
the tidal and libration corrections applied.

Typical usage::

    from trs2crs.eop import EOPCorrector, load_cached_eop
    corrector = EOPCorrector(load_cached_eop())
    record = corrector.corrected_eop(epoch)
"""

from trs2crs.eop._corrector import EOPCorrector
from trs2crs.eop._download import IERS_STANDARD_URL, download_standard_eop_file
from trs2crs.eop._providers import (
    load_cached_eop,
    load_eop_from_csv,
    load_eop_from_file,
    static_eop,
)
from trs2crs.eop._types import EOPRecord, EOPTable, OffsetKind, StaticEOPTable, UT1Mode

__all__ = [
    "EOPCorrector",
    "EOPRecord",
    "EOPTable",
    "IERS_STANDARD_URL",
    "OffsetKind",
    "StaticEOPTable",
    "UT1Mode",
    "download_standard_eop_file",
    "load_cached_eop",
    "load_eop_from_csv",
    "load_eop_from_file",
    "static_eop",
]
