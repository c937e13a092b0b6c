"""Tests for nutation angles, CIP coordinates and the CIO locator.

Reference values are the SOFA ``t_sofa_c`` checks at 2006-01-01 TT
(MJD 53736.0), where the series-based and classical routes are both
exercised.
"""

from __future__ import annotations

import math
import warnings

import pytest

from trs2crs.config import NutationModel
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.errors import NumericDomainWarning
from trs2crs.fcn import fcn_offsets
from trs2crs.nutation import CIPAngles, NutationEvaluator, cip_angles
from trs2crs.windowed_cache import CacheState

_X06 = 0.5791308486706011000e-3
_Y06 = 0.4020579816732961219e-4


@pytest.fixture
def tt_2006() -> Epoch:
    return Epoch.from_day_seconds(53736, 0.0, TimeScale.TT)


# ---------------------------------------------------------------------------
# Nutation angles
# ---------------------------------------------------------------------------


class TestNutationAngles:
    """Tests for the nutation series and their cache."""

    def test_iau2000a(self, tt_2006: Epoch) -> None:
        dpsi, deps = NutationEvaluator(NutationModel.IAU2000).nutation_series(tt_2006)
        assert dpsi == pytest.approx(-0.9630909107115518431e-5, abs=5e-11)
        assert deps == pytest.approx(0.4063239174001678710e-4, abs=5e-11)

    def test_iau2006a(self, tt_2006: Epoch) -> None:
        dpsi, deps = NutationEvaluator(NutationModel.IAU2006).nutation_series(tt_2006)
        assert dpsi == pytest.approx(-0.9630912025820308797e-5, abs=5e-11)
        assert deps == pytest.approx(0.4063238496887249798e-4, abs=5e-11)

    def test_cached_matches_series(self, tt_2006: Epoch) -> None:
        """Interpolated angles stay within a few microarcseconds of the series."""
        nut = NutationEvaluator()
        for k in range(12):
            epoch = tt_2006 + 0.07 * k
            cached = nut.nutation_angles(epoch)
            direct = nut.nutation_series(epoch)
            assert cached == pytest.approx(direct, abs=5e-11)
        assert nut.cache.state is CacheState.READY

    def test_cache_keyed_on_tt(self, tt_2006: Epoch) -> None:
        """A UTC query fills the cache with TT samples."""
        nut = NutationEvaluator()
        nut.nutation_angles(tt_2006.to_scale(TimeScale.UTC))
        assert all(s.epoch.scale is TimeScale.TT for s in nut.cache.samples)

    def test_cache_half_step(self) -> None:
        assert NutationEvaluator(half_step=0.25).cache.half_step == 0.25


# ---------------------------------------------------------------------------
# CIP coordinates and CIO locator
# ---------------------------------------------------------------------------


class TestCIPSeries:
    """Tests for the X, Y and s series."""

    def test_xy06(self, tt_2006: Epoch) -> None:
        x, y = NutationEvaluator(NutationModel.IAU2006).cip_xy(tt_2006)
        assert x == pytest.approx(_X06, abs=1e-12)
        assert y == pytest.approx(_Y06, abs=1e-12)

    def test_s06(self, tt_2006: Epoch) -> None:
        s = NutationEvaluator(NutationModel.IAU2006).cio_locator(tt_2006, _X06, _Y06)
        assert s == pytest.approx(-0.1220032213076463117e-7, abs=1e-14)

    def test_s00(self, tt_2006: Epoch) -> None:
        s = NutationEvaluator(NutationModel.IAU2000).cio_locator(tt_2006, _X06, _Y06)
        assert s == pytest.approx(-0.1220036263270905693e-7, abs=1e-14)

    def test_iau2000_xy_close_to_iau2006(self, tt_2006: Epoch) -> None:
        x00, y00 = NutationEvaluator(NutationModel.IAU2000).cip_xy(tt_2006)
        assert x00 == pytest.approx(_X06, abs=1e-9)
        assert y00 == pytest.approx(_Y06, abs=1e-9)

    def test_cip_coordinates(self, tt_2006: Epoch) -> None:
        nut = NutationEvaluator()
        x, y, s = nut.cip_coordinates(tt_2006)
        assert (x, y) == nut.cip_xy(tt_2006)
        assert s == nut.cio_locator(tt_2006, x, y)

    def test_scale_of_input(self, tt_2006: Epoch) -> None:
        """UTC and TT inputs for the same instant agree."""
        nut = NutationEvaluator()
        x_tt, y_tt = nut.cip_xy(tt_2006)
        x_utc, y_utc = nut.cip_xy(tt_2006.to_scale(TimeScale.UTC))
        assert x_utc == pytest.approx(x_tt, abs=1e-15)
        assert y_utc == pytest.approx(y_tt, abs=1e-15)


# ---------------------------------------------------------------------------
# Celestial pole offsets
# ---------------------------------------------------------------------------


class TestCIPOffsets:
    """Tests for the FCN substitution of negligible pole offsets."""

    def test_offsets_kept_above_threshold(self, tt_2006: Epoch) -> None:
        nut = NutationEvaluator()
        assert nut.cip_offsets(tt_2006, 1.0e-7, -2.0e-7) == (1.0e-7, -2.0e-7)

    def test_fcn_when_either_negligible(self, tt_2006: Epoch) -> None:
        nut = NutationEvaluator()
        fcn = fcn_offsets(tt_2006)
        assert nut.cip_offsets(tt_2006, 0.0, 1.0e-7) == (fcn.dx, fcn.dy)
        assert nut.cip_offsets(tt_2006, 1.0e-7, 0.0) == (fcn.dx, fcn.dy)

    def test_fcn_disabled(self, tt_2006: Epoch) -> None:
        nut = NutationEvaluator(apply_fcn=False)
        assert nut.cip_offsets(tt_2006, 0.0, 0.0) == (0.0, 0.0)

    def test_custom_threshold(self, tt_2006: Epoch) -> None:
        nut = NutationEvaluator(fcn_threshold=1.0e-6)
        fcn = fcn_offsets(tt_2006)
        assert nut.cip_offsets(tt_2006, 1.0e-7, 1.0e-7) == (fcn.dx, fcn.dy)


# ---------------------------------------------------------------------------
# CIP spherical angles
# ---------------------------------------------------------------------------


class TestCIPAngles:
    """Tests for cip_angles."""

    def test_reconstructs_xy(self) -> None:
        angles = cip_angles(_X06, _Y06)
        assert isinstance(angles, CIPAngles)
        assert math.sin(angles.d) * math.cos(angles.e) == pytest.approx(_X06, rel=1e-14)
        assert math.sin(angles.d) * math.sin(angles.e) == pytest.approx(_Y06, rel=1e-13)

    def test_partials_finite_difference(self) -> None:
        h = 1.0e-10
        base = cip_angles(_X06, _Y06)
        px, mx = cip_angles(_X06 + h, _Y06), cip_angles(_X06 - h, _Y06)
        py, my = cip_angles(_X06, _Y06 + h), cip_angles(_X06, _Y06 - h)
        assert base.de_dx == pytest.approx((px.e - mx.e) / (2 * h), rel=1e-5)
        assert base.de_dy == pytest.approx((py.e - my.e) / (2 * h), rel=1e-5)
        assert base.dd_dx == pytest.approx((px.d - mx.d) / (2 * h), rel=1e-5)
        assert base.dd_dy == pytest.approx((py.d - my.d) / (2 * h), rel=1e-5)

    def test_pole_is_zero(self) -> None:
        assert cip_angles(0.0, 0.0) == CIPAngles(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def test_outside_unit_disk_warns(self) -> None:
        with pytest.warns(NumericDomainWarning):
            angles = cip_angles(1.0, 0.5)
        assert math.isfinite(angles.d)
        assert angles.d == pytest.approx(math.pi / 2, abs=1e-5)

    def test_near_unit_circle_warns(self) -> None:
        """Z close to zero is flagged even though the radius is valid."""
        with pytest.warns(NumericDomainWarning, match="close to zero"):
            angles = cip_angles(0.6, 0.8 - 1e-9)
        assert angles.d == pytest.approx(math.pi / 2, abs=1e-4)

    def test_inside_unit_disk_no_warning(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            cip_angles(0.3, 0.4)

    def test_nan_propagates(self) -> None:
        assert math.isnan(cip_angles(float("nan"), 0.1).d)
