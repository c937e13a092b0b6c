"""Tidal and libration corrections to the Earth orientation parameters.

Two correction groups feed the EOP interpolation:

- **Diurnal** (:func:`diurnal_correction`): ocean tide effects on polar
  motion and UT1 (IERS Conventions 2010, Section 8.2) plus the diurnal
  libration in polar motion and the semidiurnal libration in UT1
  (Section 5.5.1).  These vary within hours and are removed from the
  tabulated daily values before interpolation.
- **Zonal** (:func:`zonal_correction`): long-period zonal tide effects on
  UT1 and the length of day, and the matching change in the Earth
  rotation rate.

Both are functions of a UTC epoch.  The diurnal argument ``gamma =
GMST + pi`` is evaluated from the UTC date, which differs from the UT1
date by under a second and changes the sub-daily terms by far less than
their table precision.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from trs2crs._tide_data import (
    LIBRATION_POLE_TERMS,
    LIBRATION_UT1_TERMS,
    OCEAN_POLE_TERMS,
    OCEAN_UT1_TERMS,
    ZONAL_TERMS,
)
from trs2crs.config import get_dtype
from trs2crs.constants import AS2RAD, OMEGA_EARTH, SECONDS_PER_DAY, TURNAS, UAS2RAD
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.fundamental_arguments import delaunay_arguments
from trs2crs.harmonic import HarmonicSeries

_OCEAN_POLE = HarmonicSeries(OCEAN_POLE_TERMS, n_args=6, channels=2)
_OCEAN_UT1 = HarmonicSeries(OCEAN_UT1_TERMS, n_args=6)
_LIBRATION_POLE = HarmonicSeries(LIBRATION_POLE_TERMS, n_args=6, channels=2)
_LIBRATION_UT1 = HarmonicSeries(LIBRATION_UT1_TERMS, n_args=6, channels=2)
_ZONAL = HarmonicSeries(ZONAL_TERMS, n_args=5, channels=2)


def tidal_arguments(t: float) -> Array:
    """Arguments ``(gamma, l, l', F, D, Om)`` of the diurnal tide tables.

    Args:
        t: Julian centuries since J2000.0.

    Returns:
        Array: Shape ``(6,)`` [rad].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    # GMST (IAU 1982) in seconds of time, converted to arcseconds, plus 180 deg
    gmst = (67310.54841
            + (876600.0 * 3600.0 + 8640184.812866) * t
            + 0.093104 * t * t
            - 6.2e-6 * t * t * t)
    gamma = jnp.mod(gmst * 15.0 + 648000.0, TURNAS) * AS2RAD
    return jnp.concatenate([gamma[None], delaunay_arguments(t)])


def _utc_centuries(epoch: Epoch) -> float:
    return epoch.to_scale(TimeScale.UTC).julian_centuries()


def diurnal_correction(epoch: Epoch) -> tuple[float, float, float]:
    """Diurnal/semidiurnal ocean tide and libration corrections.

    Args:
        epoch: Epoch of evaluation (UTC, TAI or TT).

    Returns:
        tuple[float, float, float]: ``(dxp, dyp, dut1)`` with the pole
            corrections in radians and the UT1 correction in seconds.

    Examples:
        ```python
        from trs2crs.epoch import Epoch
        from trs2crs.tides import diurnal_correction

        dxp, dyp, dut1 = diurnal_correction(Epoch(2020, 1, 1))
        ```
    """
    args = tidal_arguments(_utc_centuries(epoch))
    pole = _OCEAN_POLE.evaluate(args) + _LIBRATION_POLE.evaluate(args)
    ut1 = _OCEAN_UT1.evaluate(args)[0] + _LIBRATION_UT1.evaluate(args)[0]
    return (float(pole[0] * UAS2RAD), float(pole[1] * UAS2RAD), float(ut1 * 1.0e-6))


def zonal_correction(epoch: Epoch) -> tuple[float, float, float]:
    """Long-period zonal tide corrections to UT1, LOD and rotation rate.

    Args:
        epoch: Epoch of evaluation (UTC, TAI or TT).

    Returns:
        tuple[float, float, float]: ``(dut1, dlod, domega)`` in seconds,
            seconds, and radians per second.
    """
    args = delaunay_arguments(_utc_centuries(epoch))
    dut1, dlod = _ZONAL.evaluate(args) * 1.0e-6
    domega = -OMEGA_EARTH * dlod / SECONDS_PER_DAY
    return (float(dut1), float(dlod), float(domega))
