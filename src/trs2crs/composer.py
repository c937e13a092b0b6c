"""Terrestrial-to-celestial rotation with Earth orientation partials.

:class:`RotationComposer` is the entry point of the package.  For an
epoch it assembles the CIO-based rotation from the terrestrial to the
celestial reference system as a chain of eight elementary rotations,
left to right::

    R = R3(-E) R2(-D) R3(E) R3(s) R3(-ERA) R3(-s') R2(xp) R1(yp)

where ``(E, D)`` are the spherical angles of the celestial intermediate
pole (CIP), ``s`` and ``s'`` the CIO and TIO locators, ``ERA`` the Earth
rotation angle and ``(xp, yp)`` the polar motion.  ``R`` is the
transpose of the IERS celestial-to-terrestrial matrix.

Partial derivatives with respect to ``xp``, ``yp``, UT1 and the CIP
offsets ``(dX, dY)`` are formed by substituting the derivative of the
affected factor into the chain; the CIP offsets enter through ``E``,
``D`` and ``s``.

Each composer owns its EOP corrector and nutation evaluator, and with
them the three interpolation caches, so composers can be used from
separate threads without sharing state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from jax import Array

from trs2crs.config import CIPRoute, TransformConfig
from trs2crs.constants import DERA_DUT1, RAD2AS
from trs2crs.earth_rotation import earth_rotation_angle, tio_locator
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.eop import EOPCorrector, EOPTable, OffsetKind
from trs2crs.errors import ConfigurationError
from trs2crs.nutation import NutationEvaluator, cip_angles
from trs2crs.precession import FrameBuilder, greenwich_mean_sidereal_time
from trs2crs.rotations import chain_partial, chain_value, rotation_factor

logger = logging.getLogger(__name__)

# Chain positions of the factors that carry partials
_E_NEG, _D, _E_POS, _S, _ERA, _SP, _XP, _YP = range(8)


@dataclass(frozen=True)
class FrameTransformResult:
    """Rotation from the TRS to the CRS at one epoch, with partials.

    Partials that were not requested are ``None``.  UT1 partials are per
    second of UT1; every other partial is per radian.

    Attributes:
        epoch: Epoch the rotation was computed for.
        rotation: TRS to CRS rotation, shape ``(3, 3)``.
        xpole: Polar motion x used [arcsec].
        ypole: Polar motion y used [arcsec].
        gmst: Greenwich mean sidereal time [rad].
        d_xpole: ``dR / d xp``.
        d_ypole: ``dR / d yp``.
        d_ut1: ``dR / d UT1``.
        d_dx: ``dR / d dX``.
        d_dy: ``dR / d dY``.
    """

    epoch: Epoch
    rotation: Array
    xpole: float
    ypole: float
    gmst: float
    d_xpole: Array | None = field(default=None)
    d_ypole: Array | None = field(default=None)
    d_ut1: Array | None = field(default=None)
    d_dx: Array | None = field(default=None)
    d_dy: Array | None = field(default=None)

    def crs_to_trs(self) -> Array:
        """Return the inverse (transpose) rotation, CRS to TRS."""
        return self.rotation.T

    def partials(self) -> dict[str, Array]:
        """Return the computed partials keyed by parameter name.

        Returns:
            dict[str, Array]: Subset of ``xpole, ypole, ut1, dx, dy``.
        """
        candidates = {
            "xpole": self.d_xpole,
            "ypole": self.d_ypole,
            "ut1": self.d_ut1,
            "dx": self.d_dx,
            "dy": self.d_dy,
        }
        return {name: value for name, value in candidates.items() if value is not None}


class RotationComposer:
    """Computes the TRS to CRS rotation and its EOP partials.

    Args:
        eop_table: Earth orientation parameter table.
        config: Transformation options. Default: ``TransformConfig()``
        nutation: Nutation evaluator to use instead of building one from
            ``config``.
        frame_builder: Frame builder to use instead of building one from
            ``config``.

    Raises:
        ConfigurationError: If the nutation evaluator or frame builder
            was built for a different model than ``config.model``.

    Examples:
        ```python
        from trs2crs import Epoch, RotationComposer
        from trs2crs.eop import load_cached_eop

        composer = RotationComposer(load_cached_eop())
        result = composer.compute_rotation(Epoch(2024, 3, 1, 12), want_ut1=True)
        ```
    """

    def __init__(self, eop_table: EOPTable, config: TransformConfig | None = None, *,
                 nutation: NutationEvaluator | None = None,
                 frame_builder: FrameBuilder | None = None) -> None:
        config = config if config is not None else TransformConfig()
        if nutation is None:
            nutation = NutationEvaluator(config.model, config.nutation_half_step,
                                         config.apply_fcn, config.fcn_threshold)
        if frame_builder is None:
            frame_builder = FrameBuilder(config.model)
        for name, part in (("nutation evaluator", nutation), ("frame builder", frame_builder)):
            if part.model is not config.model:
                raise ConfigurationError(
                    f"{name} uses {part.model.value}, composer is configured "
                    f"for {config.model.value}"
                )

        self._config = config
        self._nutation = nutation
        self._frames = frame_builder
        self._eop = EOPCorrector(eop_table, config.diurnal_half_step, config.zonal_half_step)
        self._last_result: FrameTransformResult | None = None

    @property
    def config(self) -> TransformConfig:
        """Transformation options."""
        return self._config

    @property
    def eop_corrector(self) -> EOPCorrector:
        """EOP corrector owning the diurnal and zonal caches."""
        return self._eop

    @property
    def nutation(self) -> NutationEvaluator:
        """Nutation evaluator owning the nutation-angle cache."""
        return self._nutation

    @property
    def frame_builder(self) -> FrameBuilder:
        """Classical frame builder."""
        return self._frames

    @property
    def last_result(self) -> FrameTransformResult | None:
        """Result of the most recent successful :meth:`compute_rotation`."""
        return self._last_result

    def _cip_xy(self, tt: Epoch, t: float) -> tuple[float, float]:
        if self._config.cip_route is CIPRoute.SERIES:
            return self._nutation.cip_xy(tt)

        dpsi, deps = self._nutation.nutation_angles(tt)
        bpn = self._frames.build(t, dpsi, deps)
        x, y = float(bpn.cip_x), float(bpn.cip_y)
        if logger.isEnabledFor(logging.DEBUG):
            xs, ys = self._nutation.cip_xy(tt)
            logger.debug("Classical CIP minus series at %s: dX=%.3e dY=%.3e rad",
                         tt, x - xs, y - ys)
        return x, y

    def compute_rotation(self, epoch: Epoch, want_xpole: bool = False, want_ypole: bool = False,
                         want_ut1: bool = False, want_dx: bool = False,
                         want_dy: bool = False) -> FrameTransformResult:
        """Compute the TRS to CRS rotation at ``epoch``.

        Args:
            epoch: Epoch (UTC, TAI or TT).
            want_xpole: Compute ``dR / d xp``. Default: ``False``
            want_ypole: Compute ``dR / d yp``. Default: ``False``
            want_ut1: Compute ``dR / d UT1``. Default: ``False``
            want_dx: Compute ``dR / d dX``. Default: ``False``
            want_dy: Compute ``dR / d dY``. Default: ``False``

        Returns:
            FrameTransformResult: Rotation and requested partials.

        Raises:
            DataGapError: If the EOP table does not cover ``epoch``.
            ValueError: If ``epoch`` is a UT1 epoch.
        """
        eop = self._eop.corrected_eop(epoch)

        tt = epoch.to_scale(TimeScale.TT)
        t = tt.julian_centuries()
        ut1 = epoch.to_scale(TimeScale.UT1, eop.ut1_minus_tai)
        era = earth_rotation_angle(ut1)
        sp = tio_locator(t)

        dx, dy = eop.dpsi_bias, eop.deps_bias
        if self._eop.table.offset_kind is OffsetKind.NUTATION:
            dx, dy = self._frames.cip_offsets_from_nutation(t, dx, dy)
        dx, dy = self._nutation.cip_offsets(tt, dx, dy)

        x, y = self._cip_xy(tt, t)
        x += dx
        y += dy
        s = self._nutation.cio_locator(tt, x, y)
        cip = cip_angles(x, y)

        want_cip = want_dx or want_dy
        factors = [
            rotation_factor(3, -cip.e, want_cip),
            rotation_factor(2, -cip.d, want_cip),
            rotation_factor(3, cip.e, want_cip),
            rotation_factor(3, s, want_cip),
            rotation_factor(3, -era, want_ut1),
            rotation_factor(3, -sp),
            rotation_factor(2, eop.xp, want_xpole),
            rotation_factor(1, eop.yp, want_ypole),
        ]
        rotation = chain_value(factors)

        d_dx = d_dy = None
        if want_cip:
            d_e = chain_partial(factors, _E_NEG, -1.0) + chain_partial(factors, _E_POS)
            d_d = chain_partial(factors, _D, -1.0)
            d_s = chain_partial(factors, _S)
            if want_dx:
                d_dx = d_e * cip.de_dx + d_d * cip.dd_dx - d_s * (0.5 * y)
            if want_dy:
                d_dy = d_e * cip.de_dy + d_d * cip.dd_dy - d_s * (0.5 * x)

        result = FrameTransformResult(
            epoch=epoch,
            rotation=rotation,
            xpole=eop.xp * RAD2AS,
            ypole=eop.yp * RAD2AS,
            gmst=float(greenwich_mean_sidereal_time(era, t, self._config.model)),
            d_xpole=chain_partial(factors, _XP) if want_xpole else None,
            d_ypole=chain_partial(factors, _YP) if want_ypole else None,
            d_ut1=chain_partial(factors, _ERA, -DERA_DUT1) if want_ut1 else None,
            d_dx=d_dx,
            d_dy=d_dy,
        )
        self._last_result = result
        return result
