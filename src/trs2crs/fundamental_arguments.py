"""Fundamental arguments of the nutation theory (IERS Conventions 2003).

The fourteen arguments are, in order::

    l, l', F, D, Om, L_Me, L_Ve, L_E, L_Ma, L_J, L_Sa, L_U, L_Ne, p_A

The five Delaunay arguments are quartic polynomials in arcseconds,
reduced modulo one turn before conversion to radians.  The planetary
mean longitudes are linear in radians and reduced modulo 2*pi; the
general precession p_A is left unreduced.  This is the argument order of
every series table in the package.

All functions are pure; a NaN input propagates to the output.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from trs2crs.config import get_dtype
from trs2crs.constants import AS2RAD, D2PI, TURNAS
from trs2crs.harmonic import evaluate_polynomial

ARGUMENT_NAMES: tuple[str, ...] = (
    "l", "l'", "F", "D", "Om",
    "L_Me", "L_Ve", "L_E", "L_Ma", "L_J", "L_Sa", "L_U", "L_Ne", "p_A",
)
"""Names of the fundamental arguments, in table column order."""

# Delaunay arguments [arcsec], coefficients of t^0 .. t^4
_DELAUNAY_COEFFS: tuple[tuple[float, ...], ...] = (
    (485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470),  # l
    (1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149),  # l'
    (335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417),  # F
    (1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169),  # D
    (450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939),  # Om
)

# Planetary mean longitudes [rad], coefficients of t^0 .. t^1
_PLANETARY_COEFFS: tuple[tuple[float, float], ...] = (
    (4.402608842, 2608.7903141574),  # Mercury
    (3.176146697, 1021.3285546211),  # Venus
    (1.753470314, 628.3075849991),  # Earth
    (6.203480913, 334.0612426700),  # Mars
    (0.599546497, 52.9690962641),  # Jupiter
    (0.874016757, 21.3299104960),  # Saturn
    (5.481293872, 7.4781598567),  # Uranus
    (5.311886287, 3.8133035638),  # Neptune
)

# General accumulated precession in longitude [rad], t^1 .. t^2
_PRECESSION_COEFFS: tuple[float, float] = (0.024381750, 0.00000538691)


def delaunay_arguments(t: ArrayLike) -> Array:
    """Delaunay arguments ``(l, l', F, D, Om)``.

    Args:
        t: TDB (or TT) Julian centuries since J2000.0.

    Returns:
        Array of shape ``(5,)`` in radians.

    References:

        1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010, Eq. (5.43).
    """
    t = jnp.asarray(t, dtype=get_dtype())
    return jnp.stack(
        [jnp.fmod(evaluate_polynomial(c, t), TURNAS) * AS2RAD for c in _DELAUNAY_COEFFS]
    )


def planetary_arguments(t: ArrayLike) -> Array:
    """Planetary mean longitudes Mercury..Neptune and the general precession.

    Args:
        t: TDB (or TT) Julian centuries since J2000.0.

    Returns:
        Array of shape ``(9,)`` in radians.
    """
    t = jnp.asarray(t, dtype=get_dtype())
    longitudes = [jnp.fmod(a0 + a1 * t, D2PI) for a0, a1 in _PLANETARY_COEFFS]
    p1, p2 = _PRECESSION_COEFFS
    longitudes.append((p1 + p2 * t) * t)
    return jnp.stack(longitudes)


def fundamental_arguments(t: ArrayLike) -> Array:
    """All fourteen fundamental arguments, in table column order.

    Args:
        t: TDB (or TT) Julian centuries since J2000.0.

    Returns:
        Array of shape ``(14,)`` in radians.

    Examples:
        ```python
        from trs2crs.fundamental_arguments import fundamental_arguments
        args = fundamental_arguments(0.07)
        ```
    """
    return jnp.concatenate([delaunay_arguments(t), planetary_arguments(t)])
