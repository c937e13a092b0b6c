"""Nutation angles, CIP coordinates and the CIO locator.

:class:`NutationEvaluator` evaluates, for one model variant:

- the nutation angles ``(dpsi, deps)``: the IAU 2000A luni-solar and
  planetary series, or the IAU 2000A_R06 series for IAU 2006, read
  through a three-point :class:`~trs2crs.windowed_cache.WindowedCache`;
- the CIP coordinates ``(X, Y)`` from their polynomial plus Poisson
  series developments;
- the CIO locator ``s`` from the tabulated ``s + XY/2``;
- the celestial pole offsets ``(dX, dY)``, substituting the empirical
  free core nutation when the supplied offsets are negligible.

:func:`cip_angles` maps ``(X, Y)`` onto the spherical angles ``(E, D)``
of the CIP together with their partials.

All series arguments are TT Julian centuries since J2000.0.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import NamedTuple

from trs2crs import _cip_data, _nutation_data
from trs2crs.config import NutationModel
from trs2crs.constants import UAS2RAD
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.errors import NumericDomainWarning
from trs2crs.fcn import fcn_offsets
from trs2crs.fundamental_arguments import fundamental_arguments
from trs2crs.harmonic import PoissonSeries
from trs2crs.windowed_cache import WindowedCache

logger = logging.getLogger(__name__)

# Largest X^2 + Y^2 accepted by cip_angles
_R2_MAX = 1.0 - 1.0e-12

# Smallest Z = sqrt(1 - X^2 - Y^2) accepted without a warning
_Z_MIN = 1.0e-3


class _ModelSeries(NamedTuple):
    dpsi: PoissonSeries
    deps: PoissonSeries
    x: PoissonSeries
    y: PoissonSeries
    s_xy2: PoissonSeries


def _model_series(model: NutationModel) -> _ModelSeries:
    if model is NutationModel.IAU2000:
        nutation = (_nutation_data.PSI2000_TERMS, _nutation_data.EPS2000_TERMS)
        x = (_cip_data.X2000_POLYNOMIAL, _cip_data.X2000_TERMS)
        y = (_cip_data.Y2000_POLYNOMIAL, _cip_data.Y2000_TERMS)
        s = (_cip_data.S2000_POLYNOMIAL, _cip_data.S2000_TERMS)
    else:
        nutation = (_nutation_data.PSI2006_TERMS, _nutation_data.EPS2006_TERMS)
        x = (_cip_data.X2006_POLYNOMIAL, _cip_data.X2006_TERMS)
        y = (_cip_data.Y2006_POLYNOMIAL, _cip_data.Y2006_TERMS)
        s = (_cip_data.S2006_POLYNOMIAL, _cip_data.S2006_TERMS)
    return _ModelSeries(
        dpsi=PoissonSeries((), nutation[0], scale=UAS2RAD),
        deps=PoissonSeries((), nutation[1], scale=UAS2RAD),
        x=PoissonSeries(*x, scale=UAS2RAD),
        y=PoissonSeries(*y, scale=UAS2RAD),
        s_xy2=PoissonSeries(*s, scale=UAS2RAD),
    )


_SERIES: dict[NutationModel, _ModelSeries] = {}


def _series_for(model: NutationModel) -> _ModelSeries:
    series = _SERIES.get(model)
    if series is None:
        series = _model_series(model)
        _SERIES[model] = series
    return series


class CIPAngles(NamedTuple):
    """Spherical angles of the CIP in the GCRS and their partials.

    ``X = sin(D) cos(E)`` and ``Y = sin(D) sin(E)``.

    Attributes:
        e: Azimuth ``E`` of the CIP [rad].
        d: Polar distance ``D`` of the CIP [rad].
        de_dx: ``dE/dX``.
        de_dy: ``dE/dY``.
        dd_dx: ``dD/dX``.
        dd_dy: ``dD/dY``.
    """

    e: float
    d: float
    de_dx: float
    de_dy: float
    dd_dx: float
    dd_dy: float


def cip_angles(x: float, y: float) -> CIPAngles:
    """Map the CIP coordinates onto the spherical angles ``(E, D)``.

    At the GCRS pole (``X = Y = 0``) the azimuth is undefined; ``E`` and
    every partial are returned as zero.  If ``X**2 + Y**2 >= 1`` the
    radius is clamped just below one and a
    :class:`~trs2crs.errors.NumericDomainWarning` is issued.  The same
    warning is issued when ``Z = sqrt(1 - X**2 - Y**2)`` drops below
    ``1e-3``, where the declination partials grow without bound.

    Args:
        x: CIP coordinate X.
        y: CIP coordinate Y.

    Returns:
        CIPAngles: Angles and partials.
    """
    x = float(x)
    y = float(y)
    r2 = x * x + y * y
    if r2 == 0.0:
        return CIPAngles(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    message = None
    if r2 >= 1.0:
        message = f"CIP radius squared {r2} outside [0, 1), clamped"
        r2 = _R2_MAX
    elif 1.0 - r2 < _Z_MIN * _Z_MIN:
        message = f"CIP Z component {math.sqrt(1.0 - r2):.3e} close to zero"
    if message is not None:
        logger.warning(message)
        warnings.warn(message, NumericDomainWarning, stacklevel=2)

    e = math.atan2(y, x)
    v = math.sqrt(r2)
    z = math.sqrt(1.0 - r2)
    d = math.atan(v / z)
    return CIPAngles(
        e=e,
        d=d,
        de_dx=-y / r2,
        de_dy=x / r2,
        dd_dx=x / (z * v),
        dd_dy=y / (z * v),
    )


class NutationEvaluator:
    """Evaluates the nutation and CIP series of one model variant.

    Args:
        model: Model variant. Default: ``NutationModel.IAU2006``
        half_step: Half step of the nutation-angle cache [days].
            Default: ``0.125``
        apply_fcn: Substitute the free core nutation for negligible pole
            offsets. Default: ``True``
        fcn_threshold: Offset magnitude below which the free core
            nutation is substituted [rad]. Default: ``1e-9``

    Raises:
        ConfigurationError: If ``half_step`` is not positive.

    Examples:
        ```python
        from trs2crs.epoch import Epoch
        from trs2crs.nutation import NutationEvaluator

        nut = NutationEvaluator()
        dpsi, deps = nut.nutation_angles(Epoch(2020, 1, 1))
        x, y, s = nut.cip_coordinates(Epoch(2020, 1, 1))
        ```
    """

    def __init__(self, model: NutationModel = NutationModel.IAU2006, half_step: float = 0.125,
                 apply_fcn: bool = True, fcn_threshold: float = 1.0e-9) -> None:
        self._model = model
        self._series = _series_for(model)
        self._apply_fcn = apply_fcn
        self._fcn_threshold = fcn_threshold
        self._cache = WindowedCache("nutation", self.nutation_series, half_step, n_points=3)

    @property
    def model(self) -> NutationModel:
        """Model variant."""
        return self._model

    @property
    def cache(self) -> WindowedCache:
        """Nutation-angle cache."""
        return self._cache

    @staticmethod
    def _centuries(epoch: Epoch) -> float:
        return epoch.to_scale(TimeScale.TT).julian_centuries()

    def nutation_series(self, epoch: Epoch) -> tuple[float, float]:
        """Evaluate the nutation series directly, bypassing the cache.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            tuple[float, float]: ``(dpsi, deps)`` [rad].
        """
        t = self._centuries(epoch)
        args = fundamental_arguments(t)
        return (float(self._series.dpsi.evaluate(t, args)),
                float(self._series.deps.evaluate(t, args)))

    def nutation_angles(self, epoch: Epoch) -> tuple[float, float]:
        """Nutation in longitude and obliquity, interpolated from the cache.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            tuple[float, float]: ``(dpsi, deps)`` [rad].
        """
        dpsi, deps = self._cache.interpolate(epoch.to_scale(TimeScale.TT))
        return dpsi, deps

    def cip_xy(self, epoch: Epoch) -> tuple[float, float]:
        """CIP coordinates from the X, Y series, without pole offsets.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            tuple[float, float]: ``(X, Y)``.
        """
        t = self._centuries(epoch)
        args = fundamental_arguments(t)
        return (float(self._series.x.evaluate(t, args)),
                float(self._series.y.evaluate(t, args)))

    def cio_locator(self, epoch: Epoch, x: float, y: float) -> float:
        """CIO locator ``s`` consistent with the given CIP coordinates.

        Args:
            epoch: Epoch (UTC, TAI or TT).
            x: CIP coordinate X.
            y: CIP coordinate Y.

        Returns:
            float: ``s`` [rad].
        """
        t = self._centuries(epoch)
        s_xy2 = float(self._series.s_xy2.evaluate(t, fundamental_arguments(t)))
        return s_xy2 - 0.5 * x * y

    def cip_coordinates(self, epoch: Epoch) -> tuple[float, float, float]:
        """CIP coordinates and CIO locator from the series.

        Args:
            epoch: Epoch (UTC, TAI or TT).

        Returns:
            tuple[float, float, float]: ``(X, Y, s)``.
        """
        x, y = self.cip_xy(epoch)
        return x, y, self.cio_locator(epoch, x, y)

    def cip_offsets(self, epoch: Epoch, dx: float, dy: float) -> tuple[float, float]:
        """Celestial pole offsets to apply, with the FCN substitution.

        When the free core nutation is enabled and either offset is
        smaller than the threshold, the table offsets are treated as
        missing and replaced by the empirical FCN model.

        Args:
            epoch: Epoch (UTC, TAI or TT).
            dx: Tabulated offset in X [rad].
            dy: Tabulated offset in Y [rad].

        Returns:
            tuple[float, float]: ``(dX, dY)`` [rad].
        """
        if self._apply_fcn and (abs(dx) < self._fcn_threshold or abs(dy) < self._fcn_threshold):
            fcn = fcn_offsets(epoch)
            logger.debug("Using FCN pole offsets at %s: dX=%.3e dY=%.3e", epoch, fcn.dx, fcn.dy)
            return fcn.dx, fcn.dy
        return dx, dy
