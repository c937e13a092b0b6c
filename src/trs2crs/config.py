"""Module-wide precision and transformation configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
for the series tables and rotation matrices.  Unlike most JAX code the
default is ``jnp.float64``: the nutation and CIP series carry
microarcsecond terms that float32 cannot resolve, so 64-bit mode
(``jax_enable_x64``) is switched on when this module is imported.

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Cached series arrays are
keyed by dtype, so a later change simply rebuilds them.

:class:`TransformConfig` bundles the construction-time options of a
:class:`~trs2crs.composer.RotationComposer` and validates them once.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import jax
import jax.numpy as jnp

from trs2crs.errors import ConfigurationError

_VALID_DTYPES = (jnp.float32, jnp.float64)

jax.config.update("jax_enable_x64", True)

_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for trs2crs.

    Must be called **before** any ``jax.jit`` compilation.  If *dtype* is
    ``jnp.float64``, JAX's 64-bit mode is enabled via
    ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: ``jnp.float32`` or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


class NutationModel(enum.Enum):
    """Precession-nutation model variant.

    Selected once per composer and threaded through the nutation
    evaluator and frame builder.

    Attributes:
        IAU2000: IAU 2000A nutation with IAU 2000 precession and the
            IERS 2003 CIP/CIO series.
        IAU2006: IAU 2000A_R06 nutation with IAU 2006 precession and the
            IERS 2010 CIP/CIO series.
    """

    IAU2000 = "iau2000"
    IAU2006 = "iau2006"


class CIPRoute(enum.Enum):
    """How the CIP coordinates X, Y are obtained.

    Attributes:
        CLASSICAL: Extract X, Y from the bias-precession-nutation matrix
            built from the nutation angles.
        SERIES: Evaluate the dedicated X, Y series directly.
    """

    CLASSICAL = "classical"
    SERIES = "series"


@dataclass(frozen=True)
class TransformConfig:
    """Construction-time options for the TRS to CRS transformation.

    Resolved at construction time (Python values), following the same
    pattern as a force-model configuration: the composer reads these
    once and never re-validates them per call.

    Attributes:
        model: Precession-nutation model variant.
        cip_route: Source of the CIP coordinates X, Y.
        nutation_half_step: Half window of the nutation-angle cache [days].
        diurnal_half_step: Half window of the diurnal pole/UT1 correction
            cache [days].
        zonal_half_step: Half window of the zonal-tide cache [days].
        apply_fcn: Substitute the free-core-nutation model when the
            tabulated CIP offsets are negligible.
        fcn_threshold: Magnitude below which a CIP offset counts as
            negligible [rad].

    Examples:
        ```python
        from trs2crs.config import CIPRoute, NutationModel, TransformConfig

        cfg = TransformConfig(model=NutationModel.IAU2000,
                              cip_route=CIPRoute.CLASSICAL)
        ```
    """

    model: NutationModel = NutationModel.IAU2006
    cip_route: CIPRoute = CIPRoute.SERIES
    nutation_half_step: float = 0.125
    diurnal_half_step: float = 0.015
    zonal_half_step: float = 0.05
    apply_fcn: bool = True
    fcn_threshold: float = 1.0e-9

    def __post_init__(self) -> None:
        if not isinstance(self.model, NutationModel):
            raise ConfigurationError(
                f"model must be a NutationModel, got {self.model!r}"
            )
        if not isinstance(self.cip_route, CIPRoute):
            raise ConfigurationError(
                f"cip_route must be a CIPRoute, got {self.cip_route!r}"
            )
        for name in ("nutation_half_step", "diurnal_half_step", "zonal_half_step"):
            value = getattr(self, name)
            if not value > 0.0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if self.fcn_threshold < 0.0:
            raise ConfigurationError(
                f"fcn_threshold must be non-negative, got {self.fcn_threshold}"
            )
