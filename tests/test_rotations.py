"""Tests for elementary rotations and rotation chains."""

from __future__ import annotations

import jax.numpy as jnp
import pytest

from trs2crs.rotations import (
    Rx,
    Ry,
    Rz,
    chain_partial,
    chain_product,
    chain_value,
    dRx,
    dRy,
    dRz,
    rotation_factor,
)

_ROTATIONS = [(Rx, dRx), (Ry, dRy), (Rz, dRz)]


# ---------------------------------------------------------------------------
# Elementary rotations
# ---------------------------------------------------------------------------


class TestElementaryRotations:
    """Tests for Rx, Ry, Rz and their derivatives."""

    @pytest.mark.parametrize("rot,drot", _ROTATIONS)
    def test_orthonormal(self, rot, drot) -> None:
        """Every elementary rotation is orthonormal with unit determinant."""
        r = rot(0.7)
        assert jnp.allclose(r @ r.T, jnp.eye(3), atol=1e-15)
        assert float(jnp.linalg.det(r)) == pytest.approx(1.0, abs=1e-15)

    def test_rz_passive_convention(self) -> None:
        """R3(90 deg) maps the x-axis onto minus the y-axis."""
        v = Rz(jnp.pi / 2) @ jnp.array([1.0, 0.0, 0.0])
        assert jnp.allclose(v, jnp.array([0.0, -1.0, 0.0]), atol=1e-15)

    def test_rx_passive_convention(self) -> None:
        """R1(90 deg) maps the y-axis onto minus the z-axis."""
        v = Rx(jnp.pi / 2) @ jnp.array([0.0, 1.0, 0.0])
        assert jnp.allclose(v, jnp.array([0.0, 0.0, -1.0]), atol=1e-15)

    @pytest.mark.parametrize("rot,drot", _ROTATIONS)
    def test_inverse_is_negative_angle(self, rot, drot) -> None:
        """R(-a) undoes R(a)."""
        assert jnp.allclose(rot(-0.3) @ rot(0.3), jnp.eye(3), atol=1e-15)

    @pytest.mark.parametrize("rot,drot", _ROTATIONS)
    def test_derivative_matches_finite_difference(self, rot, drot) -> None:
        """Derivative matrices agree with a central difference."""
        angle, h = 0.4, 1.0e-6
        numeric = (rot(angle + h) - rot(angle - h)) / (2.0 * h)
        assert jnp.allclose(drot(angle), numeric, atol=1e-9)


# ---------------------------------------------------------------------------
# Rotation factors and chains
# ---------------------------------------------------------------------------


class TestRotationChains:
    """Tests for rotation_factor, chain_value and chain_partial."""

    def test_factor_without_derivative(self) -> None:
        """Derivative is only computed on request."""
        factor = rotation_factor(3, 0.2)
        assert factor.derivative is None
        assert jnp.allclose(factor.matrix, Rz(0.2))

    def test_factor_with_derivative(self) -> None:
        factor = rotation_factor(1, 0.2, with_derivative=True)
        assert jnp.allclose(factor.derivative, dRx(0.2))

    def test_invalid_axis_raises(self) -> None:
        with pytest.raises(ValueError, match="axis"):
            rotation_factor(4, 0.1)

    def test_chain_value_left_to_right(self) -> None:
        """Chain multiplies factors in list order."""
        factors = [rotation_factor(3, 0.1), rotation_factor(2, 0.2), rotation_factor(1, 0.3)]
        expected = Rz(0.1) @ Ry(0.2) @ Rx(0.3)
        assert jnp.allclose(chain_value(factors), expected, atol=1e-15)

    def test_chain_product_single(self) -> None:
        assert jnp.allclose(chain_product([Rx(0.5)]), Rx(0.5))

    def test_chain_partial_finite_difference(self) -> None:
        """Partial of a chain matches a finite difference of the middle angle."""
        h = 1.0e-6

        def chain(angle):
            return chain_value(
                [rotation_factor(3, 0.1), rotation_factor(2, angle), rotation_factor(1, 0.3)]
            )

        factors = [
            rotation_factor(3, 0.1),
            rotation_factor(2, 0.2, with_derivative=True),
            rotation_factor(1, 0.3),
        ]
        numeric = (chain(0.2 + h) - chain(0.2 - h)) / (2.0 * h)
        assert jnp.allclose(chain_partial(factors, 1), numeric, atol=1e-9)

    def test_chain_partial_scale(self) -> None:
        """Scale multiplies the substituted product."""
        factors = [rotation_factor(3, 0.1, with_derivative=True), rotation_factor(1, 0.3)]
        assert jnp.allclose(chain_partial(factors, 0, -2.0), -2.0 * dRz(0.1) @ Rx(0.3))

    def test_chain_partial_requires_derivative(self) -> None:
        factors = [rotation_factor(3, 0.1), rotation_factor(1, 0.3)]
        with pytest.raises(ValueError, match="without its derivative"):
            chain_partial(factors, 0)
