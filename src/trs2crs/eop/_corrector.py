"""Interpolation of tabulated EOP with tidal and libration corrections.

:class:`EOPCorrector` turns the daily records of an
:class:`~trs2crs.eop.EOPTable` into the parameters at an arbitrary
epoch.  For tables of tide-free UT1 (``UT1Mode.UT1R``) it follows the
IERS recommendation: remove the diurnal and semidiurnal effects at the
two tabulated days, interpolate linearly, restore the effects at the
requested epoch, and add the long-period zonal tide effect on UT1.  The
diurnal corrections come from a two-point
:class:`~trs2crs.windowed_cache.WindowedCache` and the zonal ones from a
three-point cache.

A missing record raises :class:`~trs2crs.errors.DataGapError` instead of
silently returning zeros.
"""

from __future__ import annotations

import functools
import logging
import math

from trs2crs.epoch import Epoch, TimeScale
from trs2crs.eop._types import EOPRecord, EOPTable, UT1Mode
from trs2crs.errors import DataGapError
from trs2crs.tides import diurnal_correction, zonal_correction
from trs2crs.windowed_cache import WindowedCache

logger = logging.getLogger(__name__)


def _diurnal_at_day(day: int) -> tuple[float, float, float]:
    return diurnal_correction(Epoch.from_day_seconds(day, 0.0, TimeScale.UTC))


class EOPCorrector:
    """Earth orientation parameters at arbitrary epochs.

    Args:
        table: Tabulated parameters.
        diurnal_half_step: Half step of the diurnal correction cache
            [days]. Default: ``0.015``
        zonal_half_step: Half step of the zonal correction cache [days].
            Default: ``0.05``

    Raises:
        ConfigurationError: If either half step is not positive.

    Examples:
        ```python
        from trs2crs.epoch import Epoch
        from trs2crs.eop import EOPCorrector, static_eop

        corrector = EOPCorrector(static_eop(ut1_minus_tai=-37.1))
        record = corrector.corrected_eop(Epoch(2020, 1, 1, 12))
        ```
    """

    def __init__(self, table: EOPTable, diurnal_half_step: float = 0.015,
                 zonal_half_step: float = 0.05) -> None:
        self._table = table
        self._diurnal = WindowedCache("diurnal", diurnal_correction, diurnal_half_step, n_points=2)
        self._zonal = WindowedCache("zonal", zonal_correction, zonal_half_step, n_points=3)
        # Bracket days repeat for every query within one table interval
        self._bracket_diurnal = functools.lru_cache(maxsize=16)(_diurnal_at_day)

    @property
    def table(self) -> EOPTable:
        """Tabulated parameters."""
        return self._table

    @property
    def diurnal_cache(self) -> WindowedCache:
        """Cache of ``(dxp, dyp, dut1)`` diurnal corrections."""
        return self._diurnal

    @property
    def zonal_cache(self) -> WindowedCache:
        """Cache of ``(dut1, dlod, domega)`` zonal corrections."""
        return self._zonal

    def _record(self, day: int) -> EOPRecord:
        record = self._table.lookup(day)
        if record is None:
            raise DataGapError(
                f"No EOP data for MJD {day} (table covers "
                f"{self._table.mjd_min}-{self._table.mjd_max})",
                day,
            )
        return record

    def brackets(self, epoch: Epoch) -> tuple[int, int, float]:
        """Bracketing table days and the interpolation weight.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            tuple[int, int, float]: ``(day0, day1, alpha)`` with
                ``alpha = (epoch - day0) / interval_days``.
        """
        utc = epoch.to_scale(TimeScale.UTC)
        interval = self._table.interval_days
        origin = self._table.mjd_min
        steps = math.floor((utc.mjd() - origin) / interval)
        day0 = int(round(origin + steps * interval))
        day1 = int(round(origin + (steps + 1) * interval))
        alpha = (utc - Epoch.from_day_seconds(day0, 0.0, TimeScale.UTC)) / interval
        return day0, day1, alpha

    def corrected_eop(self, epoch: Epoch) -> EOPRecord:
        """Interpolated and tide-corrected parameters at ``epoch``.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            EOPRecord: ``xp, yp`` [rad], ``ut1_minus_tai`` [s] and the two
                pole offsets [rad].

        Raises:
            DataGapError: If a bracketing record is missing.
            ValueError: If ``epoch`` is a UT1 epoch.
        """
        utc = epoch.to_scale(TimeScale.UTC)
        day0, day1, alpha = self.brackets(utc)
        if alpha == 0.0:
            # On a tabulated day the next record is not needed
            day1 = day0
        r0 = self._record(day0)
        r1 = self._record(day1)

        def lerp(a: float, b: float) -> float:
            return a + alpha * (b - a)

        if self._table.ut1_mode is not UT1Mode.UT1R:
            return EOPRecord(*(lerp(a, b) for a, b in zip(r0, r1)))

        b0 = self._bracket_diurnal(day0)
        b1 = self._bracket_diurnal(day1)
        dxp, dyp, dut1 = self._diurnal.interpolate(utc)
        zonal_ut1, _, _ = self._zonal.interpolate(utc)

        return EOPRecord(
            xp=lerp(r0.xp - b0[0], r1.xp - b1[0]) + dxp,
            yp=lerp(r0.yp - b0[1], r1.yp - b1[1]) + dyp,
            ut1_minus_tai=(lerp(r0.ut1_minus_tai - b0[2], r1.ut1_minus_tai - b1[2])
                           + dut1 + zonal_ut1),
            dpsi_bias=lerp(r0.dpsi_bias, r1.dpsi_bias),
            deps_bias=lerp(r0.deps_bias, r1.deps_bias),
        )

    def zonal_rates(self, epoch: Epoch) -> tuple[float, float]:
        """Zonal tide effect on the length of day and rotation rate.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            tuple[float, float]: ``(dlod, domega)`` in seconds and radians
                per second.
        """
        _, dlod, domega = self._zonal.interpolate(epoch.to_scale(TimeScale.UTC))
        return dlod, domega
