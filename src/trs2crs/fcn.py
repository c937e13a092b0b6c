"""Empirical free core nutation (FCN) model.

The FCN is a retrograde free mode of the Earth's fluid core with a
period near -430 sidereal days.  It is not part of the IAU 2000A
nutation series, so when an EOP table does not supply the celestial pole
offsets the empirical model of Lambert is used in their place:

    dX = A_c cos(phi) - A_s sin(phi)
    dY = A_s cos(phi) + A_c sin(phi)

with ``phi = 2 pi (MJD - 51544.5) / P`` and yearly amplitudes
interpolated linearly in time.  Amplitudes are held at the first or last
table value outside the tabulated span; the uncertainty keeps growing
past the last row.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp

from trs2crs._fcn_data import FCN_TABLE
from trs2crs.config import get_dtype
from trs2crs.constants import D2PI, MJD2000, UAS2RAD
from trs2crs.epoch import Epoch

FCN_PERIOD = -430.21
"""FCN period in days (retrograde)."""

FCN_SIGMA_RATE = 0.1325
"""Growth of the FCN amplitude uncertainty after the last table row. Units: *uas/day*"""


class FCNCorrection(NamedTuple):
    """Free core nutation offsets of the CIP.

    Attributes:
        dx: Offset in X [rad].
        dy: Offset in Y [rad].
        sigma: One-sigma uncertainty of either offset [rad].
    """

    dx: float
    dy: float
    sigma: float


def fcn_offsets(epoch: Epoch) -> FCNCorrection:
    """Evaluate the empirical FCN offsets of the CIP.

    Args:
        epoch: Epoch of evaluation. The date is taken in the epoch's own
            time scale; the model cannot resolve the difference.

    Returns:
        FCNCorrection: Offsets and uncertainty in radians.

    Examples:
        ```python
        from trs2crs.epoch import Epoch
        from trs2crs.fcn import fcn_offsets

        fcn = fcn_offsets(Epoch(2010, 6, 1))
        ```
    """
    dtype = get_dtype()
    table = jnp.asarray(FCN_TABLE, dtype=dtype)
    mjd = epoch.mjd()

    x_cos = jnp.interp(mjd, table[:, 0], table[:, 1])
    x_sin = jnp.interp(mjd, table[:, 0], table[:, 2])
    sigma = jnp.interp(mjd, table[:, 0], table[:, 3])
    last_mjd, last_sigma = FCN_TABLE[-1][0], FCN_TABLE[-1][3]
    if mjd > last_mjd:
        sigma = last_sigma + FCN_SIGMA_RATE * (mjd - last_mjd)

    phi = D2PI / FCN_PERIOD * (mjd - MJD2000)
    dx = x_cos * jnp.cos(phi) - x_sin * jnp.sin(phi)
    dy = x_sin * jnp.cos(phi) + x_cos * jnp.sin(phi)
    return FCNCorrection(float(dx * UAS2RAD), float(dy * UAS2RAD), float(sigma * UAS2RAD))
