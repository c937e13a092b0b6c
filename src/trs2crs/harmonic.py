"""Evaluation of trigonometric series over integer argument multipliers.

Every tidal, nutation and CIP table in the package has the same shape:
a row is a set of sine/cosine amplitude pairs (one pair per output
channel) followed by integer multipliers of a fixed argument vector.
:class:`HarmonicSeries` sums such a table; :class:`PoissonSeries` adds the
tiers by power of ``t`` and the polynomial part used by the nutation and
CIP developments.

Tables are kept as the Python tuples they are declared as and turned
into ``jax.numpy`` arrays on first use, once per active dtype.  The
arrays are stored last row first, so the smallest terms lead the input
to the reduction.  ``jnp.sum`` may add them pairwise, so the exact
accumulation order is left to XLA.
"""

from __future__ import annotations

from collections.abc import Sequence

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from trs2crs.config import get_dtype
from trs2crs.constants import D2PI


def evaluate_polynomial(coeffs: Sequence[float], t: ArrayLike) -> Array:
    """Evaluate a polynomial by Horner's rule.

    Args:
        coeffs: Coefficients, lowest power first.
        t: Polynomial variable.

    Returns:
        Array: ``sum_p coeffs[p] * t**p``.
    """
    t = jnp.asarray(t, dtype=get_dtype())
    value = jnp.zeros_like(t)
    for c in reversed(tuple(coeffs)):
        value = value * t + c
    return value


class HarmonicSeries:
    """Sum of ``S sin(a) + C cos(a)`` terms with ``a = m . args``.

    Args:
        rows: Table rows ``(S_1, C_1, ..., S_k, C_k, m_1, ..., m_n)``.
        n_args: Number of argument multipliers ``n`` per row.
        channels: Number of amplitude pairs ``k`` per row. Default: ``1``

    Raises:
        ValueError: If a row does not have ``2 * channels + n_args`` entries.

    Examples:
        ```python
        from trs2crs.harmonic import HarmonicSeries

        series = HarmonicSeries([(1.0, 0.0, 1, 0), (0.0, 2.0, 0, 1)], n_args=2)
        series.evaluate([0.3, 0.1])  # sin(0.3) + 2 cos(0.1)
        ```
    """

    def __init__(self, rows: Sequence[Sequence[float]], n_args: int, channels: int = 1) -> None:
        width = 2 * channels + n_args
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Series row {i} has {len(row)} entries, expected {width}"
                )
        self._rows = tuple(tuple(row) for row in rows)
        self._n_args = n_args
        self._channels = channels
        self._arrays: dict = {}

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def n_args(self) -> int:
        """Number of argument multipliers per row."""
        return self._n_args

    @property
    def channels(self) -> int:
        """Number of output channels."""
        return self._channels

    def _tables(self) -> tuple[Array, Array, Array]:
        dtype = get_dtype()
        tables = self._arrays.get(dtype)
        if tables is None:
            k = self._channels
            table = jnp.asarray(self._rows[::-1], dtype=dtype).reshape(len(self._rows), -1)
            sin_amp = table[:, 0:2 * k:2]
            cos_amp = table[:, 1:2 * k:2]
            multipliers = table[:, 2 * k:]
            tables = (multipliers, sin_amp, cos_amp)
            self._arrays[dtype] = tables
        return tables

    def evaluate(self, args: ArrayLike) -> Array:
        """Sum the series at the given arguments.

        Args:
            args: Argument vector of length ``n_args`` [rad].

        Returns:
            Array: Shape ``(channels,)``, in the units of the amplitudes.
        """
        if not self._rows:
            return jnp.zeros(self._channels, dtype=get_dtype())
        multipliers, sin_amp, cos_amp = self._tables()
        args = jnp.asarray(args, dtype=get_dtype())
        phase = jnp.mod(multipliers @ args, D2PI)
        terms = jnp.sin(phase)[:, None] * sin_amp + jnp.cos(phase)[:, None] * cos_amp
        # Row order only; XLA picks the reduction tree
        return jnp.sum(terms, axis=0)


class PoissonSeries:
    """Polynomial plus a mixed secular-periodic (Poisson) series.

    The value at time ``t`` is::

        scale * (sum_p poly[p] t^p + sum_j t^j * tier_j(args))

    where every tier is a single-channel :class:`HarmonicSeries` over the
    fourteen fundamental arguments.  The polynomial is added after the
    periodic terms.

    Args:
        polynomial: Polynomial coefficients, lowest power first.
        tiers: Table rows per power of ``t`` (tier 0 first).
        n_args: Number of argument multipliers per row. Default: ``14``
        scale: Multiplier converting the table units to the output units.
            Default: ``1.0``
    """

    def __init__(self, polynomial: Sequence[float], tiers: Sequence[Sequence[Sequence[float]]],
                 n_args: int = 14, scale: float = 1.0) -> None:
        self._polynomial = tuple(polynomial)
        self._tiers = tuple(HarmonicSeries(rows, n_args) for rows in tiers)
        self._scale = scale

    @property
    def n_terms(self) -> int:
        """Total number of periodic terms across all tiers."""
        return sum(len(tier) for tier in self._tiers)

    def evaluate(self, t: ArrayLike, args: ArrayLike) -> Array:
        """Evaluate the series.

        Args:
            t: Julian centuries of TT since J2000.0.
            args: Fundamental arguments at ``t`` [rad].

        Returns:
            Array: Scalar value in output units.
        """
        t = jnp.asarray(t, dtype=get_dtype())
        periodic = jnp.zeros((), dtype=get_dtype())
        for tier in reversed(self._tiers):
            periodic = periodic * t + tier.evaluate(args)[0]
        polynomial = evaluate_polynomial(self._polynomial, t)
        return self._scale * (periodic + polynomial)
