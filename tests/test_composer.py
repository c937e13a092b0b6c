"""Tests for the TRS to CRS rotation composer.

The reference matrix is the CIO-based IAU 2006/2000A celestial-to-terrestrial
matrix of the SOFA cookbook example (2007-04-05 12:00 UTC), together with
the SOFA ERA, GMST and CIP test values.  Partials are checked against
central differences of fresh composers.
"""

from __future__ import annotations

import math

import jax.numpy as jnp
import numpy as np
import pytest

from trs2crs.config import CIPRoute, NutationModel, TransformConfig
from trs2crs.constants import AS2RAD, DERA_DUT1, TT_TAI
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.eop import OffsetKind, UT1Mode, static_eop
from trs2crs.errors import ConfigurationError, DataGapError
from trs2crs.composer import FrameTransformResult, RotationComposer
from trs2crs.nutation import NutationEvaluator
from trs2crs.precession import FrameBuilder

_SOFA_RC2T = np.array(
    [
        [+0.973104317697535, +0.230363826239128, -0.000703163482198],
        [-0.230363800456037, +0.973104570632801, +0.000118545366625],
        [+0.000711560162668, +0.000046626403995, +0.999999745754024],
    ]
)

# Base values of the finite-difference tests
_XP = 0.12 * AS2RAD
_YP = 0.38 * AS2RAD
_UT1_TAI = -37.15
_DX = 1.0e-7
_DY = -1.2e-7


def _rotation(epoch: Epoch, **overrides) -> np.ndarray:
    values = {"xp": _XP, "yp": _YP, "ut1_minus_tai": _UT1_TAI, "dx": _DX, "dy": _DY}
    values.update(overrides)
    composer = RotationComposer(static_eop(**values))
    return np.asarray(composer.compute_rotation(epoch).rotation)


def _central_difference(epoch: Epoch, name: str, base: float, h: float) -> np.ndarray:
    plus = _rotation(epoch, **{name: base + h})
    minus = _rotation(epoch, **{name: base - h})
    return (plus - minus) / (2.0 * h)


@pytest.fixture
def composer(sample_eop) -> RotationComposer:
    return RotationComposer(sample_eop)


# ---------------------------------------------------------------------------
# Reference values
# ---------------------------------------------------------------------------


class TestSOFAReference:
    """Comparison with the SOFA cookbook CIO-based example."""

    @pytest.fixture
    def sofa_table(self):
        return static_eop(
            xp=0.0349282 * AS2RAD,
            yp=0.4833163 * AS2RAD,
            ut1_minus_tai=-0.072073685 - 33.0,
            dx=0.1750e-3 * AS2RAD,
            dy=-0.2259e-3 * AS2RAD,
        )

    def test_series_route(self, sofa_table) -> None:
        composer = RotationComposer(sofa_table, TransformConfig(apply_fcn=False))
        result = composer.compute_rotation(Epoch(2007, 4, 5, 12))
        np.testing.assert_allclose(np.asarray(result.crs_to_trs()), _SOFA_RC2T, rtol=0, atol=1e-11)

    def test_classical_route(self, sofa_table) -> None:
        config = TransformConfig(apply_fcn=False, cip_route=CIPRoute.CLASSICAL)
        result = RotationComposer(sofa_table, config).compute_rotation(Epoch(2007, 4, 5, 12))
        np.testing.assert_allclose(np.asarray(result.crs_to_trs()), _SOFA_RC2T, rtol=0, atol=1e-11)

    def test_reported_pole(self, sofa_table) -> None:
        result = RotationComposer(sofa_table).compute_rotation(Epoch(2007, 4, 5, 12))
        assert result.xpole == pytest.approx(0.0349282, rel=1e-12)
        assert result.ypole == pytest.approx(0.4833163, rel=1e-12)


def _r2(theta: float) -> np.ndarray:
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])


def _r3(psi: float) -> np.ndarray:
    c, s = math.cos(psi), math.sin(psi)
    return np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])


def _sofa_c2t(x: float, y: float, s: float, era: float, sp: float) -> np.ndarray:
    """Celestial-to-terrestrial matrix built as SOFA ``c2ixys``, ``pom00`` and ``c2tcio`` do."""
    e = math.atan2(y, x)
    d = math.atan(math.sqrt((x * x + y * y) / (1.0 - x * x - y * y)))
    rc2i = _r3(-(e + s)) @ _r2(d) @ _r3(e)
    return _r3(sp) @ _r3(era) @ rc2i


class TestPublishedReferences:
    """Published ERA, GMST and CIP values reached through the composer.

    With ``UT1 - TAI = TT - TAI`` the UT1 and TT dates coincide, so the
    SOFA test dates can be used directly.  With no polar motion the third
    column of the rotation is the CIP unit vector ``(X, Y, Z)``.
    """

    # SOFA xy06 / s06 and xys06a at 2400000.5 + 53736.0 TT
    _X06 = 0.5791308486706011000e-3
    _Y06 = 0.4020579816732961219e-4
    _S06 = -0.1220032213076463117e-7
    _X06A = 0.5791308482835292617e-3
    _Y06A = 0.4020580099454020310e-4

    @staticmethod
    def _result(day: int, seconds: float, **config):
        table = static_eop(ut1_minus_tai=TT_TAI)
        composer = RotationComposer(table, TransformConfig(apply_fcn=False, **config))
        return composer.compute_rotation(Epoch.from_day_seconds(day, seconds, TimeScale.TT))

    @pytest.mark.parametrize("model", list(NutationModel))
    def test_gmst_at_j2000(self, model) -> None:
        """At J2000.0 GMST is ERA (SOFA era00(2451545.0, 0.0)) plus 0.014506 arcsec."""
        result = self._result(51544, 43200.0, model=model)
        assert result.gmst == pytest.approx(4.894961212823058751 + 0.014506 * AS2RAD, abs=1e-12)

    @pytest.mark.parametrize(
        "model,expected",
        [
            (NutationModel.IAU2000, 1.754174972210740592),
            (NutationModel.IAU2006, 1.754174971870091203),
        ],
    )
    def test_gmst(self, model, expected) -> None:
        """SOFA gmst00 / gmst06 at 2400000.5 + 53736.0."""
        assert self._result(53736, 0.0, model=model).gmst == pytest.approx(expected, abs=1e-12)

    def test_series_cip(self) -> None:
        rotation = np.asarray(self._result(53736, 0.0).rotation)
        assert rotation[0, 2] == pytest.approx(self._X06, abs=1e-12)
        assert rotation[1, 2] == pytest.approx(self._Y06, abs=1e-12)

    def test_classical_cip(self) -> None:
        rotation = np.asarray(self._result(53736, 0.0, cip_route=CIPRoute.CLASSICAL).rotation)
        assert rotation[0, 2] == pytest.approx(self._X06A, abs=1e-11)
        assert rotation[1, 2] == pytest.approx(self._Y06A, abs=1e-11)

    def test_full_matrix(self) -> None:
        """The rotation matches the SOFA construction from published X, Y, s and era00."""
        du = (2400000.5 + 53736.0) - 2451545.0
        era = 2.0 * math.pi * math.fmod(0.5 + 0.7790572732640 + 0.00273781191135448 * du, 1.0)
        sp = -47.0e-6 * ((53736.0 - 51544.5) / 36525.0) * AS2RAD
        expected = _sofa_c2t(self._X06, self._Y06, self._S06, era, sp).T
        rotation = np.asarray(self._result(53736, 0.0).rotation)
        np.testing.assert_allclose(rotation, expected, rtol=0, atol=1e-11)



# ---------------------------------------------------------------------------
# Rotation properties
# ---------------------------------------------------------------------------


class TestRotation:
    """Structural properties of the composed rotation."""

    def test_orthonormal(self, composer, epoch_2020) -> None:
        r = composer.compute_rotation(epoch_2020).rotation
        assert jnp.allclose(r @ r.T, jnp.eye(3), atol=1e-13)
        assert float(jnp.linalg.det(r)) == pytest.approx(1.0, abs=1e-14)

    def test_result_type(self, composer, epoch_2020) -> None:
        result = composer.compute_rotation(epoch_2020)
        assert isinstance(result, FrameTransformResult)
        assert result.epoch == epoch_2020
        assert result.rotation.shape == (3, 3)
        assert 0.0 <= result.gmst < 2.0 * np.pi

    def test_crs_to_trs_is_transpose(self, composer, epoch_2020) -> None:
        result = composer.compute_rotation(epoch_2020)
        assert jnp.allclose(result.crs_to_trs() @ result.rotation, jnp.eye(3), atol=1e-13)

    def test_repeatable(self, composer, epoch_2020) -> None:
        """A second call at the same epoch reuses warm caches and agrees."""
        first = composer.compute_rotation(epoch_2020).rotation
        second = composer.compute_rotation(epoch_2020).rotation
        assert jnp.array_equal(first, second)

    def test_scale_of_input(self, composer, epoch_2020) -> None:
        """The same instant given in TT yields the UTC rotation."""
        utc = composer.compute_rotation(epoch_2020).rotation
        tt = RotationComposer(composer.eop_corrector.table).compute_rotation(
            epoch_2020.to_scale(TimeScale.TT)
        ).rotation
        assert jnp.allclose(utc, tt, atol=1e-12)

    def test_last_result(self, composer, epoch_2020) -> None:
        assert composer.last_result is None
        result = composer.compute_rotation(epoch_2020)
        assert composer.last_result is result

    def test_no_partials_by_default(self, composer, epoch_2020) -> None:
        result = composer.compute_rotation(epoch_2020)
        assert result.partials() == {}
        assert result.d_ut1 is None

    def test_partials_keys(self, composer, epoch_2020) -> None:
        result = composer.compute_rotation(
            epoch_2020, want_xpole=True, want_ypole=True, want_ut1=True,
            want_dx=True, want_dy=True,
        )
        assert set(result.partials()) == {"xpole", "ypole", "ut1", "dx", "dy"}

    def test_selected_partials(self, composer, epoch_2020) -> None:
        result = composer.compute_rotation(epoch_2020, want_ut1=True, want_dy=True)
        assert set(result.partials()) == {"ut1", "dy"}

    def test_partials_do_not_change_rotation(self, composer, epoch_2020) -> None:
        plain = composer.compute_rotation(epoch_2020).rotation
        full = composer.compute_rotation(
            epoch_2020, want_xpole=True, want_ypole=True, want_ut1=True,
            want_dx=True, want_dy=True,
        ).rotation
        assert jnp.allclose(plain, full, atol=0.0)


# ---------------------------------------------------------------------------
# Partial derivatives
# ---------------------------------------------------------------------------


class TestPartials:
    """Analytic partials against central differences."""

    def test_xpole(self, epoch_2020) -> None:
        analytic = RotationComposer(static_eop(_XP, _YP, _UT1_TAI, _DX, _DY)).compute_rotation(
            epoch_2020, want_xpole=True
        ).d_xpole
        numeric = _central_difference(epoch_2020, "xp", _XP, 1.0e-7)
        np.testing.assert_allclose(np.asarray(analytic), numeric, rtol=1e-6, atol=1e-8)

    def test_ypole(self, epoch_2020) -> None:
        analytic = RotationComposer(static_eop(_XP, _YP, _UT1_TAI, _DX, _DY)).compute_rotation(
            epoch_2020, want_ypole=True
        ).d_ypole
        numeric = _central_difference(epoch_2020, "yp", _YP, 1.0e-7)
        np.testing.assert_allclose(np.asarray(analytic), numeric, rtol=1e-6, atol=1e-8)

    def test_ut1(self, epoch_2020) -> None:
        analytic = RotationComposer(static_eop(_XP, _YP, _UT1_TAI, _DX, _DY)).compute_rotation(
            epoch_2020, want_ut1=True
        ).d_ut1
        numeric = _central_difference(epoch_2020, "ut1_minus_tai", _UT1_TAI, 1.0e-3)
        np.testing.assert_allclose(np.asarray(analytic), numeric, rtol=1e-6, atol=1e-10)

    def test_dx(self, epoch_2020) -> None:
        analytic = RotationComposer(static_eop(_XP, _YP, _UT1_TAI, _DX, _DY)).compute_rotation(
            epoch_2020, want_dx=True
        ).d_dx
        numeric = _central_difference(epoch_2020, "dx", _DX, 1.0e-8)
        np.testing.assert_allclose(np.asarray(analytic), numeric, rtol=1e-6, atol=1e-7)

    def test_dy(self, epoch_2020) -> None:
        analytic = RotationComposer(static_eop(_XP, _YP, _UT1_TAI, _DX, _DY)).compute_rotation(
            epoch_2020, want_dy=True
        ).d_dy
        numeric = _central_difference(epoch_2020, "dy", _DY, 1.0e-8)
        np.testing.assert_allclose(np.asarray(analytic), numeric, rtol=1e-6, atol=1e-7)

    def test_ut1_partial_norm(self, composer, epoch_2020) -> None:
        """dR/dUT1 is an orthogonal sandwich of the R3 derivative scaled by the ERA rate."""
        d_ut1 = composer.compute_rotation(epoch_2020, want_ut1=True).d_ut1
        norm = float(jnp.linalg.norm(d_ut1))
        assert norm == pytest.approx(np.sqrt(2.0) * DERA_DUT1, rel=1e-9)


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


class TestConfigurations:
    """Model variants, CIP routes and table metadata."""

    def test_routes_agree(self, sample_eop, epoch_2020) -> None:
        series = RotationComposer(sample_eop).compute_rotation(epoch_2020).rotation
        config = TransformConfig(cip_route=CIPRoute.CLASSICAL)
        classical = RotationComposer(sample_eop, config).compute_rotation(epoch_2020).rotation
        assert jnp.allclose(series, classical, atol=2e-9)

    def test_models_agree(self, sample_eop, epoch_2020) -> None:
        r06 = RotationComposer(sample_eop).compute_rotation(epoch_2020).rotation
        config = TransformConfig(model=NutationModel.IAU2000)
        r00 = RotationComposer(sample_eop, config).compute_rotation(epoch_2020).rotation
        assert jnp.allclose(r06, r00, atol=5e-8)
        assert not jnp.allclose(r06, r00, atol=1e-14)

    def test_nutation_offsets_converted(self, epoch_2020) -> None:
        """Offsets tabulated in (ddpsi, ddeps) match the equivalent (dX, dY)."""
        ddpsi, ddeps = 3.0e-7, -2.0e-7
        t = epoch_2020.to_scale(TimeScale.TT).julian_centuries()
        dx, dy = FrameBuilder().cip_offsets_from_nutation(t, ddpsi, ddeps)

        nut_table = static_eop(_XP, _YP, _UT1_TAI, ddpsi, ddeps,
                               offset_kind=OffsetKind.NUTATION)
        cip_table = static_eop(_XP, _YP, _UT1_TAI, dx, dy)
        r_nut = RotationComposer(nut_table).compute_rotation(epoch_2020).rotation
        r_cip = RotationComposer(cip_table).compute_rotation(epoch_2020).rotation
        assert jnp.allclose(r_nut, r_cip, atol=1e-15)

    def test_fcn_substitution(self, epoch_2020) -> None:
        """Zero offsets are replaced by the FCN model unless disabled."""
        table = static_eop(_XP, _YP, _UT1_TAI)
        with_fcn = RotationComposer(table).compute_rotation(epoch_2020).rotation
        config = TransformConfig(apply_fcn=False)
        without = RotationComposer(table, config).compute_rotation(epoch_2020).rotation
        assert not jnp.allclose(with_fcn, without, atol=1e-12)
        assert jnp.allclose(with_fcn, without, atol=1e-6)

    def test_ut1r_table(self, epoch_2020) -> None:
        """Tide-free tables get the tidal effects restored."""
        plain = static_eop(_XP, _YP, _UT1_TAI, _DX, _DY)
        tide_free = static_eop(_XP, _YP, _UT1_TAI, _DX, _DY, ut1_mode=UT1Mode.UT1R)
        r_plain = RotationComposer(plain).compute_rotation(epoch_2020).rotation
        r_tides = RotationComposer(tide_free).compute_rotation(epoch_2020).rotation
        assert jnp.allclose(r_tides @ r_tides.T, jnp.eye(3), atol=1e-13)
        assert not jnp.allclose(r_plain, r_tides, atol=1e-12)

    def test_injected_evaluators(self, sample_eop) -> None:
        nutation = NutationEvaluator(NutationModel.IAU2006)
        builder = FrameBuilder(NutationModel.IAU2006)
        composer = RotationComposer(sample_eop, nutation=nutation, frame_builder=builder)
        assert composer.nutation is nutation
        assert composer.frame_builder is builder

    def test_mismatched_nutation_model(self, sample_eop) -> None:
        with pytest.raises(ConfigurationError, match="nutation evaluator"):
            RotationComposer(sample_eop, nutation=NutationEvaluator(NutationModel.IAU2000))

    def test_mismatched_frame_builder_model(self, sample_eop) -> None:
        config = TransformConfig(model=NutationModel.IAU2000)
        with pytest.raises(ConfigurationError, match="frame builder"):
            RotationComposer(sample_eop, config,
                             nutation=NutationEvaluator(NutationModel.IAU2000),
                             frame_builder=FrameBuilder(NutationModel.IAU2006))

    def test_caches_follow_config(self, sample_eop) -> None:
        config = TransformConfig(nutation_half_step=0.25, diurnal_half_step=0.02,
                                 zonal_half_step=0.1)
        composer = RotationComposer(sample_eop, config)
        assert composer.config is config
        assert composer.nutation.cache.half_step == 0.25
        assert composer.eop_corrector.diurnal_cache.half_step == 0.02
        assert composer.eop_corrector.zonal_cache.half_step == 0.1


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    """Failure modes."""

    def test_outside_table(self, epoch_2020) -> None:
        table = static_eop(mjd_min=50000, mjd_max=50010)
        composer = RotationComposer(table)
        with pytest.raises(DataGapError):
            composer.compute_rotation(epoch_2020)
        assert composer.last_result is None

    def test_ut1_epoch_rejected(self, composer) -> None:
        with pytest.raises(ValueError, match="UT1-TAI"):
            composer.compute_rotation(Epoch.from_day_seconds(59000, 0.0, TimeScale.UT1))

    def test_last_table_day(self) -> None:
        """The final tabulated day is inside the table."""
        table = static_eop(_XP, _YP, _UT1_TAI, _DX, _DY, mjd_min=58999, mjd_max=59001)
        result = RotationComposer(table).compute_rotation(Epoch.from_day_seconds(59001, 0.0))
        assert result.xpole == pytest.approx(0.12, rel=1e-12)
        with pytest.raises(DataGapError, match="MJD 59002"):
            RotationComposer(table).compute_rotation(Epoch.from_day_seconds(59001, 1.0))
