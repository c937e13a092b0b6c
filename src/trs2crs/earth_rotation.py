"""Earth rotation angle and the TIO locator.

The Earth rotation angle (ERA) is the angle between the celestial and
terrestrial intermediate origins, linear in UT1 (IERS Conventions 2010,
Eq. 5.15).  The TIO locator ``s'`` positions the terrestrial
intermediate origin on the equator of the CIP.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from trs2crs.config import get_dtype
from trs2crs.constants import AS2RAD, D2PI, DJ00, ERA_J2000
from trs2crs.epoch import Epoch, TimeScale

_TIO_RATE = -47.0e-6
"""Rate of the TIO locator. Units: *arcsec/century*"""

# Fractional part of ERA_RATE, kept separate to avoid cancellation
_ERA_EXCESS = 0.00273781191135448


def earth_rotation_angle(epoch: Epoch) -> Array:
    """Earth rotation angle (IAU 2000).

    The two-part Julian Date of the epoch keeps the day fraction separate
    from the large day count, preserving microsecond resolution.

    Args:
        epoch: Epoch in the UT1 time scale.

    Returns:
        Array: ERA in ``[0, 2 pi)`` [rad].

    Raises:
        ValueError: If ``epoch`` is not a UT1 epoch.

    References:

        1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010, Eq. (5.15).
    """
    if epoch.scale is not TimeScale.UT1:
        raise ValueError(f"Earth rotation angle needs a UT1 epoch, got {epoch.scale.value}")
    jd1, jd2 = epoch.jd_split()
    dtype = get_dtype()
    jd1 = jnp.asarray(jd1, dtype=dtype)
    jd2 = jnp.asarray(jd2, dtype=dtype)

    # DJ00 comes off the day-count part, which subtracts exactly
    t = (jd1 - DJ00) + jd2
    f = jnp.fmod(jd1, 1.0) + jnp.fmod(jd2, 1.0)
    return jnp.mod(D2PI * (f + ERA_J2000 + _ERA_EXCESS * t), D2PI)


def tio_locator(t: ArrayLike) -> Array:
    """TIO locator ``s'``.

    Args:
        t: TT Julian centuries since J2000.0.

    Returns:
        Array: ``s'`` [rad].
    """
    return jnp.asarray(t, dtype=get_dtype()) * _TIO_RATE * AS2RAD
