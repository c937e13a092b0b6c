"""Frame bias, precession and the classical bias-precession-nutation matrix.

The classical (equinox based) route to the celestial intermediate pole
builds ``Q = N P B`` from elementary rotations:

- ``B``: frame bias between the GCRS and the mean J2000.0 frame,
  ``Rx(-deps_bias) Ry(dpsi_bias sin(eps0)) Rz(dra0)``.
- ``P``: precession in the four-rotation form
  ``Rz(chi_A) Rx(-omega_A) Rz(-psi_A) Rx(eps0)``.
- ``N``: nutation ``Rx(-(eps_A + deps)) Rz(-dpsi) Rx(eps_A)``.

The CIP coordinates are the bottom row of ``Q``: ``X = Q[2, 0]`` and
``Y = Q[2, 1]``.

Precession angles are polynomials in TT Julian centuries ``t``.  The
IAU 2000 angles are the Lieske (1977) expressions with the IAU 2000
precession-rate corrections; the IAU 2006 angles are those of Capitaine
et al. (2003, P03).

References:

    1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010, Section 5.6.
    2. D. D. McCarthy and G. Petit, *IERS Technical Note 32*, 2003, Section 5.4.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from trs2crs.config import NutationModel
from trs2crs.constants import AS2RAD, D2PI
from trs2crs.harmonic import evaluate_polynomial
from trs2crs.rotations import Rx, Ry, Rz, chain_partial, chain_value, rotation_factor

# Frame bias [rad]
DPSI_BIAS = -0.041775 * AS2RAD
DEPS_BIAS = -0.0068192 * AS2RAD
DRA0 = -0.0146 * AS2RAD

# Polynomial coefficients [arcsec], lowest power first
_EPS0_2000 = 84381.448
_EPS0_2006 = 84381.406

_PSI_A_2000 = (0.0, 5038.7784 - 0.29965, -1.07259, -0.001147)
_OMEGA_A_2000 = (_EPS0_2000, -0.02524, 0.05127, -0.007726)
_CHI_A_2000 = (0.0, 10.5526, -2.38064, -0.001125)
_EPS_A_2000 = (_EPS0_2000, -46.8150 - 0.02524, -0.00059, 0.001813)

_PSI_A_2006 = (0.0, 5038.481507, -1.0790069, -0.00114045, 0.000132851, -0.0000000951)
_OMEGA_A_2006 = (_EPS0_2006, -0.025754, 0.0512623, -0.00772503, -0.000000467, 0.0000003337)
_CHI_A_2006 = (0.0, 10.556403, -2.3814292, -0.00121197, 0.000170663, -0.0000000560)
_EPS_A_2006 = (_EPS0_2006, -46.836769, -0.0001831, 0.00200340, -0.000000576, -0.0000000434)

# Precession in right ascension added to ERA to give GMST [arcsec]
_GMST_2000 = (0.014506, 4612.15739966, 1.39667721, -0.00009344, 0.00001882)
_GMST_2006 = (0.014506, 4612.156534, 1.3915817, -0.00000044, -0.000029956, -0.0000000368)

_COEFFS = {
    NutationModel.IAU2000: (_EPS0_2000, _PSI_A_2000, _OMEGA_A_2000, _CHI_A_2000, _EPS_A_2000),
    NutationModel.IAU2006: (_EPS0_2006, _PSI_A_2006, _OMEGA_A_2006, _CHI_A_2006, _EPS_A_2006),
}

_GMST_COEFFS = {
    NutationModel.IAU2000: _GMST_2000,
    NutationModel.IAU2006: _GMST_2006,
}


class PrecessionAngles(NamedTuple):
    """Precession angles of a model at an epoch, all in radians.

    Attributes:
        eps0: Obliquity of the ecliptic at J2000.0.
        psi_a: Luni-solar precession in longitude.
        omega_a: Inclination of the mean equator on the ecliptic of J2000.0.
        chi_a: Planetary precession along the equator.
        eps_a: Mean obliquity of the ecliptic of date.
    """

    eps0: float
    psi_a: Array
    omega_a: Array
    chi_a: Array
    eps_a: Array


class BPNResult(NamedTuple):
    """Classical bias-precession-nutation matrix and its nutation partials.

    Attributes:
        matrix: ``Q = N P B``, GCRS to true equator and equinox of date.
        d_dpsi: ``dQ / d dpsi`` or ``None``.
        d_deps: ``dQ / d deps`` or ``None``.
        angles: Precession angles used.
    """

    matrix: Array
    d_dpsi: Array | None
    d_deps: Array | None
    angles: PrecessionAngles

    @property
    def cip_x(self) -> Array:
        """CIP coordinate X, ``Q[2, 0]``."""
        return self.matrix[2, 0]

    @property
    def cip_y(self) -> Array:
        """CIP coordinate Y, ``Q[2, 1]``."""
        return self.matrix[2, 1]


def precession_angles(t: ArrayLike, model: NutationModel) -> PrecessionAngles:
    """Precession angles of the given model.

    Args:
        t: TT Julian centuries since J2000.0.
        model: Model variant.

    Returns:
        PrecessionAngles: Angles in radians.
    """
    eps0, psi_a, omega_a, chi_a, eps_a = _COEFFS[model]
    return PrecessionAngles(
        eps0 * AS2RAD,
        evaluate_polynomial(psi_a, t) * AS2RAD,
        evaluate_polynomial(omega_a, t) * AS2RAD,
        evaluate_polynomial(chi_a, t) * AS2RAD,
        evaluate_polynomial(eps_a, t) * AS2RAD,
    )


def mean_obliquity(t: ArrayLike, model: NutationModel) -> Array:
    """Mean obliquity of the ecliptic of date.

    For IAU 2000 this is the IAU 1980 obliquity plus the IAU 2000
    precession-rate correction; for IAU 2006 it is the P03 obliquity.

    Args:
        t: TT Julian centuries since J2000.0.
        model: Model variant.

    Returns:
        Array: Mean obliquity [rad].
    """
    return evaluate_polynomial(_COEFFS[model][4], t) * AS2RAD


def greenwich_mean_sidereal_time(era: ArrayLike, t: ArrayLike, model: NutationModel) -> Array:
    """Greenwich mean sidereal time consistent with the model's precession.

    Args:
        era: Earth rotation angle [rad].
        t: TT Julian centuries since J2000.0.
        model: Model variant.

    Returns:
        Array: GMST in ``[0, 2 pi)`` [rad].

    References:

        1. N. Capitaine et al., *Expressions for IAU 2000 precession quantities*, 2003, A&A 412.
    """
    return jnp.mod(era + evaluate_polynomial(_GMST_COEFFS[model], t) * AS2RAD, D2PI)


def frame_bias_matrix(eps0: float) -> Array:
    """Frame bias matrix ``B`` from the GCRS to the mean J2000.0 frame.

    Args:
        eps0: Obliquity of the ecliptic at J2000.0 [rad].

    Returns:
        Array: 3x3 matrix.
    """
    return Rx(-DEPS_BIAS) @ Ry(DPSI_BIAS * jnp.sin(eps0)) @ Rz(DRA0)


def precession_matrix(angles: PrecessionAngles) -> Array:
    """Precession matrix ``P`` from the mean J2000.0 frame to the mean frame of date.

    Args:
        angles: Precession angles.

    Returns:
        Array: 3x3 matrix.
    """
    return Rz(angles.chi_a) @ Rx(-angles.omega_a) @ Rz(-angles.psi_a) @ Rx(angles.eps0)


class FrameBuilder:
    """Builds the classical bias-precession-nutation matrix for one model.

    Args:
        model: Model variant. Default: ``NutationModel.IAU2006``

    Examples:
        ```python
        from trs2crs.config import NutationModel
        from trs2crs.precession import FrameBuilder

        builder = FrameBuilder(NutationModel.IAU2006)
        bpn = builder.build(0.07, -1.5e-5, 4.0e-5, want_dpsi=True)
        x, y = bpn.cip_x, bpn.cip_y
        ```
    """

    def __init__(self, model: NutationModel = NutationModel.IAU2006) -> None:
        self._model = model

    @property
    def model(self) -> NutationModel:
        """Model variant."""
        return self._model

    def build(self, t: ArrayLike, dpsi: ArrayLike, deps: ArrayLike,
              want_dpsi: bool = False, want_deps: bool = False) -> BPNResult:
        """Build ``Q = N P B`` and, on request, its nutation partials.

        Args:
            t: TT Julian centuries since J2000.0.
            dpsi: Nutation in longitude [rad].
            deps: Nutation in obliquity [rad].
            want_dpsi: Also return ``dQ / d dpsi``. Default: ``False``
            want_deps: Also return ``dQ / d deps``. Default: ``False``

        Returns:
            BPNResult: Matrix, optional partials and the precession angles.
        """
        angles = precession_angles(t, self._model)
        pb = precession_matrix(angles) @ frame_bias_matrix(angles.eps0)

        nutation = [
            rotation_factor(1, -(angles.eps_a + deps), with_derivative=want_deps),
            rotation_factor(3, -dpsi, with_derivative=want_dpsi),
            rotation_factor(1, angles.eps_a),
        ]
        matrix = chain_value(nutation) @ pb
        d_dpsi = chain_partial(nutation, 1, -1.0) @ pb if want_dpsi else None
        d_deps = chain_partial(nutation, 0, -1.0) @ pb if want_deps else None
        return BPNResult(matrix, d_dpsi, d_deps, angles)

    def cip_offsets_from_nutation(self, t: ArrayLike, ddpsi: float,
                                  ddeps: float) -> tuple[float, float]:
        """Convert celestial pole offsets in (dpsi, deps) to offsets in (X, Y).

        Uses the first-order relation of the IERS Conventions (2010),
        Eq. (5.27).

        Args:
            t: TT Julian centuries since J2000.0.
            ddpsi: Offset in longitude [rad].
            ddeps: Offset in obliquity [rad].

        Returns:
            tuple[float, float]: ``(dX, dY)`` [rad].
        """
        angles = precession_angles(t, self._model)
        sin_eps = jnp.sin(angles.eps_a)
        k = angles.psi_a * jnp.cos(angles.eps0) - angles.chi_a
        dx = ddpsi * sin_eps + k * ddeps
        dy = ddeps - k * sin_eps * ddpsi
        return float(dx), float(dy)
