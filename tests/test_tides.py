"""Tests for tidal and libration EOP corrections and the FCN model.

Reference values for the individual tables come from the test cases of the
IERS Conventions software (PMUT1_OCEANS, PMSDNUT2, UTLIBR).
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from trs2crs import tides
from trs2crs._tide_data import OCEAN_POLE_TERMS, OCEAN_UT1_TERMS
from trs2crs.constants import D2PI, MJD2000, OMEGA_EARTH, UAS2RAD
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.fcn import FCN_PERIOD, FCN_SIGMA_RATE, FCNCorrection, fcn_offsets
from trs2crs.tides import diurnal_correction, tidal_arguments, zonal_correction


def _centuries(mjd: float) -> float:
    return (mjd - MJD2000) / 36525.0


# ---------------------------------------------------------------------------
# Individual tables
# ---------------------------------------------------------------------------


class TestTideTables:
    """Each table against the IERS reference implementation."""

    def test_tidal_arguments_shape(self) -> None:
        args = tidal_arguments(0.1)
        assert args.shape == (6,)
        assert 0.0 <= float(args[0]) < D2PI

    def test_ocean_pole(self) -> None:
        args = tidal_arguments(_centuries(47100.0))
        x, y = tides._OCEAN_POLE.evaluate(args)
        assert float(x) == pytest.approx(-162.8386373279636530, rel=1e-6)
        assert float(y) == pytest.approx(117.7907525842668974, rel=1e-6)

    def test_ocean_ut1(self) -> None:
        args = tidal_arguments(_centuries(47100.0))
        ut1 = tides._OCEAN_UT1.evaluate(args)[0]
        assert float(ut1) == pytest.approx(-23.39092370609808214, rel=1e-6)

    def test_ocean_rows_ascend_in_frequency(self) -> None:
        """Ocean rows are ordered by frequency and share one argument list."""
        step = np.asarray(tidal_arguments(1e-7)) - np.asarray(tidal_arguments(0.0))
        rates = np.mod(step + math.pi, D2PI) - math.pi
        pole = np.array([row[4:] for row in OCEAN_POLE_TERMS])
        ut1 = np.array([row[2:] for row in OCEAN_UT1_TERMS])
        np.testing.assert_array_equal(pole, ut1)
        assert np.all(np.diff(pole @ rates) > 0.0)

    def test_diurnal_ocean_pole_is_prograde(self) -> None:
        diurnal = np.array([row[:4] for row in OCEAN_POLE_TERMS if row[4] == 1])
        assert len(diurnal) == 41
        np.testing.assert_allclose(diurnal[:, 2], -diurnal[:, 1], atol=0.011)
        np.testing.assert_allclose(diurnal[:, 3], diurnal[:, 0], atol=0.011)

    def test_libration_pole(self) -> None:
        args = tidal_arguments(_centuries(54335.0))
        x, y = tides._LIBRATION_POLE.evaluate(args)
        assert float(x) == pytest.approx(24.83144238273364834, rel=1e-6)
        assert float(y) == pytest.approx(-14.09240692041837661, rel=1e-6)

    def test_libration_ut1(self) -> None:
        args = tidal_arguments(_centuries(44239.1))
        ut1, lod = tides._LIBRATION_UT1.evaluate(args)
        assert float(ut1) == pytest.approx(2.441143834386761746, rel=1e-6)
        assert float(lod) == pytest.approx(-14.78971247349449492, rel=1e-6)


# ---------------------------------------------------------------------------
# Combined corrections
# ---------------------------------------------------------------------------


class TestDiurnalCorrection:
    """Tests for diurnal_correction."""

    def test_sum_of_tables(self) -> None:
        """Pole and UT1 corrections are the ocean plus libration sums in SI units."""
        epoch = Epoch.from_day_seconds(58849, 30000.0, TimeScale.UTC)
        args = tidal_arguments(epoch.julian_centuries())
        pole = tides._OCEAN_POLE.evaluate(args) + tides._LIBRATION_POLE.evaluate(args)
        ut1 = tides._OCEAN_UT1.evaluate(args)[0] + tides._LIBRATION_UT1.evaluate(args)[0]
        dxp, dyp, dut1 = diurnal_correction(epoch)
        assert dxp == pytest.approx(float(pole[0]) * UAS2RAD, rel=1e-12)
        assert dyp == pytest.approx(float(pole[1]) * UAS2RAD, rel=1e-12)
        assert dut1 == pytest.approx(float(ut1) * 1.0e-6, rel=1e-12)

    def test_magnitudes(self) -> None:
        """Sub-daily effects stay below two milliarcseconds and 0.2 ms."""
        for k in range(24):
            dxp, dyp, dut1 = diurnal_correction(Epoch.from_day_seconds(60000, 3600.0 * k))
            assert abs(dxp) < 2.0e-3 * 4.848e-6
            assert abs(dyp) < 2.0e-3 * 4.848e-6
            assert abs(dut1) < 2.0e-4

    def test_varies_within_a_day(self) -> None:
        a = diurnal_correction(Epoch.from_day_seconds(60000, 0.0))
        b = diurnal_correction(Epoch.from_day_seconds(60000, 6 * 3600.0))
        assert a != b

    def test_scale_independent(self) -> None:
        """The same instant in TT gives the UTC result."""
        utc = Epoch.from_day_seconds(60000, 1000.0, TimeScale.UTC)
        assert diurnal_correction(utc.to_scale(TimeScale.TT)) == pytest.approx(
            diurnal_correction(utc), rel=1e-9, abs=1e-20
        )


class TestZonalCorrection:
    """Tests for zonal_correction."""

    def test_rate_consistent_with_lod(self) -> None:
        dut1, dlod, domega = zonal_correction(Epoch(2020, 1, 1))
        assert domega == pytest.approx(-OMEGA_EARTH * dlod / 86400.0, rel=1e-14)

    def test_magnitudes(self) -> None:
        for year in (1990, 2000, 2010, 2020):
            dut1, dlod, _ = zonal_correction(Epoch(year, 1, 1))
            assert abs(dut1) < 0.3
            assert abs(dlod) < 3.0e-3

    def test_slowly_varying(self) -> None:
        """Long-period effects change little over an hour."""
        a = zonal_correction(Epoch(2020, 1, 1, 0))
        b = zonal_correction(Epoch(2020, 1, 1, 1))
        assert abs(a[0] - b[0]) < 1.0e-4


# ---------------------------------------------------------------------------
# Free core nutation
# ---------------------------------------------------------------------------


class TestFCN:
    """Tests for fcn_offsets."""

    def test_returns_named_tuple(self) -> None:
        assert isinstance(fcn_offsets(Epoch(2010, 1, 1)), FCNCorrection)

    def test_zero_phase_at_j2000(self) -> None:
        """At J2000.0 the offsets equal the interpolated amplitudes."""
        fcn = fcn_offsets(Epoch.from_mjd(MJD2000))
        frac = 0.5 / 366.0
        x_cos = -88.83 + (-97.26 + 88.83) * frac
        x_sin = 149.24 + (150.67 - 149.24) * frac
        assert fcn.dx == pytest.approx(x_cos * UAS2RAD, rel=1e-9)
        assert fcn.dy == pytest.approx(x_sin * UAS2RAD, rel=1e-9)

    def test_rotation_with_fcn_period(self) -> None:
        mjd = 53736.0
        fcn = fcn_offsets(Epoch.from_mjd(mjd))
        phi = D2PI / FCN_PERIOD * (mjd - MJD2000)
        x_cos, x_sin = -90.28, 174.76
        expected_dx = x_cos * math.cos(phi) - x_sin * math.sin(phi)
        expected_dy = x_sin * math.cos(phi) + x_cos * math.sin(phi)
        assert fcn.dx == pytest.approx(expected_dx * UAS2RAD, rel=1e-9)
        assert fcn.dy == pytest.approx(expected_dy * UAS2RAD, rel=1e-9)
        assert fcn.sigma == pytest.approx(2.21 * UAS2RAD, rel=1e-9)

    def test_magnitude(self) -> None:
        for year in range(1985, 2030, 5):
            fcn = fcn_offsets(Epoch(year, 1, 1))
            assert math.hypot(fcn.dx, fcn.dy) < 400.0 * UAS2RAD

    def test_amplitude_held_after_table(self) -> None:
        """Amplitude stays at the last row; the uncertainty grows linearly."""
        late = fcn_offsets(Epoch.from_mjd(56658.0 + 1000.0))
        later = fcn_offsets(Epoch.from_mjd(56658.0 + 2000.0))
        amplitude = math.hypot(-5.60, 178.95) * UAS2RAD
        assert math.hypot(late.dx, late.dy) == pytest.approx(amplitude, rel=1e-9)
        assert later.sigma - late.sigma == pytest.approx(
            FCN_SIGMA_RATE * 1000.0 * UAS2RAD, rel=1e-9
        )

    def test_amplitude_held_before_table(self) -> None:
        early = fcn_offsets(Epoch.from_mjd(40000.0))
        amplitude = math.hypot(4.55, -36.58) * UAS2RAD
        assert math.hypot(early.dx, early.dy) == pytest.approx(amplitude, rel=1e-9)
