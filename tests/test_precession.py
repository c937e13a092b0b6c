"""Tests for precession, the classical frame builder and Earth rotation.

Reference values are the SOFA ``t_sofa_c`` checks of ``obl06``,
``gmst00``, ``gmst06``, ``era00``, ``sp00``, ``xys00a`` and ``xys06a``.
"""

from __future__ import annotations

import jax.numpy as jnp
import pytest

from trs2crs.config import NutationModel
from trs2crs.constants import AS2RAD, DERA_DUT1, MJD2000
from trs2crs.earth_rotation import earth_rotation_angle, tio_locator
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.nutation import NutationEvaluator
from trs2crs.precession import (
    DEPS_BIAS,
    DPSI_BIAS,
    DRA0,
    FrameBuilder,
    frame_bias_matrix,
    greenwich_mean_sidereal_time,
    mean_obliquity,
    precession_angles,
    precession_matrix,
)


def _centuries(mjd: float) -> float:
    return (mjd - MJD2000) / 36525.0


_T_2006 = _centuries(53736.0)


# ---------------------------------------------------------------------------
# Precession quantities
# ---------------------------------------------------------------------------


class TestPrecession:
    """Tests for precession angles, obliquity and the bias matrix."""

    def test_obliquity_at_j2000(self) -> None:
        assert float(mean_obliquity(0.0, NutationModel.IAU2006)) == pytest.approx(
            84381.406 * AS2RAD, rel=1e-15
        )
        assert float(mean_obliquity(0.0, NutationModel.IAU2000)) == pytest.approx(
            84381.448 * AS2RAD, rel=1e-15
        )

    def test_obl06(self) -> None:
        eps = mean_obliquity(_centuries(54388.0), NutationModel.IAU2006)
        assert float(eps) == pytest.approx(0.4090749229387258204, abs=1e-12)

    def test_angles_at_j2000(self) -> None:
        angles = precession_angles(0.0, NutationModel.IAU2006)
        assert float(angles.psi_a) == 0.0
        assert float(angles.chi_a) == 0.0
        assert float(angles.omega_a) == pytest.approx(angles.eps0, rel=1e-15)
        assert float(angles.eps_a) == pytest.approx(angles.eps0, rel=1e-15)

    def test_precession_identity_at_j2000(self) -> None:
        p = precession_matrix(precession_angles(0.0, NutationModel.IAU2006))
        assert jnp.allclose(p, jnp.eye(3), atol=1e-15)

    def test_frame_bias_small_angles(self) -> None:
        """Off-diagonal terms carry the three bias angles."""
        eps0 = 84381.406 * AS2RAD
        b = frame_bias_matrix(eps0)
        xi0 = DPSI_BIAS * jnp.sin(eps0)
        assert float(b[0, 1]) == pytest.approx(DRA0, rel=1e-6)
        assert float(b[2, 0]) == pytest.approx(xi0, rel=1e-6)
        assert float(b[2, 1]) == pytest.approx(DEPS_BIAS, rel=1e-6)
        assert jnp.allclose(b @ b.T, jnp.eye(3), atol=1e-15)


# ---------------------------------------------------------------------------
# Classical frame builder
# ---------------------------------------------------------------------------


class TestFrameBuilder:
    """Tests for FrameBuilder."""

    @pytest.mark.parametrize(
        "model,x_ref,y_ref",
        [
            (NutationModel.IAU2000, 0.5791308472168152904e-3, 0.4020595661591500259e-4),
            (NutationModel.IAU2006, 0.5791308482835292617e-3, 0.4020580099454020310e-4),
        ],
    )
    def test_classical_cip(self, model, x_ref, y_ref) -> None:
        """X, Y from the bias-precession-nutation matrix match SOFA xys00a/xys06a."""
        tt = Epoch.from_day_seconds(53736, 0.0, TimeScale.TT)
        dpsi, deps = NutationEvaluator(model).nutation_series(tt)
        bpn = FrameBuilder(model).build(_T_2006, dpsi, deps)
        assert float(bpn.cip_x) == pytest.approx(x_ref, abs=1e-11)
        assert float(bpn.cip_y) == pytest.approx(y_ref, abs=1e-11)

    @pytest.mark.parametrize("model", list(NutationModel))
    def test_classical_matches_series(self, model) -> None:
        tt = Epoch.from_day_seconds(60000, 43200.0, TimeScale.TT)
        nut = NutationEvaluator(model)
        dpsi, deps = nut.nutation_series(tt)
        bpn = FrameBuilder(model).build(tt.julian_centuries(), dpsi, deps)
        x, y = nut.cip_xy(tt)
        assert float(bpn.cip_x) == pytest.approx(x, abs=1e-9)
        assert float(bpn.cip_y) == pytest.approx(y, abs=1e-9)

    def test_matrix_orthonormal(self) -> None:
        bpn = FrameBuilder().build(0.2, -1.5e-5, 4.0e-5)
        assert jnp.allclose(bpn.matrix @ bpn.matrix.T, jnp.eye(3), atol=1e-14)

    def test_partials_not_requested(self) -> None:
        bpn = FrameBuilder().build(0.2, -1.5e-5, 4.0e-5)
        assert bpn.d_dpsi is None
        assert bpn.d_deps is None

    def test_dpsi_partial_finite_difference(self) -> None:
        builder = FrameBuilder()
        t, dpsi, deps, h = 0.2, -1.5e-5, 4.0e-5, 1.0e-7
        bpn = builder.build(t, dpsi, deps, want_dpsi=True)
        numeric = (builder.build(t, dpsi + h, deps).matrix
                   - builder.build(t, dpsi - h, deps).matrix) / (2 * h)
        assert jnp.allclose(bpn.d_dpsi, numeric, rtol=1e-6, atol=1e-8)

    def test_deps_partial_finite_difference(self) -> None:
        builder = FrameBuilder()
        t, dpsi, deps, h = 0.2, -1.5e-5, 4.0e-5, 1.0e-7
        bpn = builder.build(t, dpsi, deps, want_deps=True)
        numeric = (builder.build(t, dpsi, deps + h).matrix
                   - builder.build(t, dpsi, deps - h).matrix) / (2 * h)
        assert jnp.allclose(bpn.d_deps, numeric, rtol=1e-6, atol=1e-8)

    def test_nutation_offsets_to_cip(self) -> None:
        """Offsets in (dpsi, deps) move X, Y like the full matrix does."""
        builder = FrameBuilder()
        t, dpsi, deps = _T_2006, -9.6e-6, 4.06e-5
        ddpsi, ddeps = 2.0e-9, -1.0e-9
        base = builder.build(t, dpsi, deps)
        moved = builder.build(t, dpsi + ddpsi, deps + ddeps)
        dx, dy = builder.cip_offsets_from_nutation(t, ddpsi, ddeps)
        assert dx == pytest.approx(float(moved.cip_x - base.cip_x), abs=1e-13)
        assert dy == pytest.approx(float(moved.cip_y - base.cip_y), abs=1e-13)

    def test_model_property(self) -> None:
        assert FrameBuilder(NutationModel.IAU2000).model is NutationModel.IAU2000


# ---------------------------------------------------------------------------
# Earth rotation
# ---------------------------------------------------------------------------


class TestEarthRotation:
    """Tests for the Earth rotation angle, GMST and the TIO locator."""

    def test_era00(self) -> None:
        ut1 = Epoch.from_day_seconds(54388, 0.0, TimeScale.UT1)
        assert float(earth_rotation_angle(ut1)) == pytest.approx(0.4022837240028158102, abs=1e-12)

    def test_era_at_j2000(self) -> None:
        ut1 = Epoch.from_day_seconds(51544, 43200.0, TimeScale.UT1)
        assert float(earth_rotation_angle(ut1)) == pytest.approx(4.894961212823058, abs=1e-12)

    def test_era_requires_ut1(self) -> None:
        with pytest.raises(ValueError, match="UT1"):
            earth_rotation_angle(Epoch(2020, 1, 1))

    def test_era_rate(self) -> None:
        """One UT1 second advances ERA by the sidereal rate."""
        a = Epoch.from_day_seconds(60000, 1000.0, TimeScale.UT1)
        b = Epoch.from_day_seconds(60000, 1001.0, TimeScale.UT1)
        rate = float(earth_rotation_angle(b) - earth_rotation_angle(a))
        assert rate == pytest.approx(DERA_DUT1, rel=1e-8)

    @pytest.mark.parametrize("day", [51544, 54388, 58849, 60000, 62502])
    def test_era_resolves_sub_millisecond_steps(self, day) -> None:
        """A 0.1 ms UT1 step moves ERA by the sidereal rate without quantization."""
        step = 1e-4
        epochs = [Epoch.from_day_seconds(day, 3600.0 + k * step, TimeScale.UT1) for k in range(3)]
        era = [float(earth_rotation_angle(e)) for e in epochs]
        for lower, upper in zip(era, era[1:]):
            assert upper - lower == pytest.approx(DERA_DUT1 * step, rel=5e-5)

    @pytest.mark.parametrize(
        "model,expected",
        [
            (NutationModel.IAU2000, 1.754174972210740592),
            (NutationModel.IAU2006, 1.754174971870091203),
        ],
    )
    def test_gmst(self, model, expected) -> None:
        era = earth_rotation_angle(Epoch.from_day_seconds(53736, 0.0, TimeScale.UT1))
        gmst = greenwich_mean_sidereal_time(era, _T_2006, model)
        assert float(gmst) == pytest.approx(expected, abs=1e-12)

    def test_sp00(self) -> None:
        assert float(tio_locator(_centuries(52541.0))) == pytest.approx(
            -0.6216698469981019309e-11, abs=1e-20
        )
