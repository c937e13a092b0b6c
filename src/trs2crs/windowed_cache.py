"""Sliding-window interpolation of slowly varying corrections.

The nutation angles and the tidal EOP corrections are expensive series
but smooth over hours.  A :class:`WindowedCache` keeps two or three
equally spaced samples of such a function and interpolates between them,
sliding the window by one sample when successive queries advance past
its end.

Interpolation error for the three-point variant is ``O(h^3)`` times the
third derivative of the underlying function; for the two-point variant
it is ``O(h^2)`` times the second derivative.

Thread-safe via an internal lock around the read-modify-write of the
samples.
"""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Callable, Sequence
from typing import NamedTuple

from trs2crs.epoch import Epoch
from trs2crs.errors import ConfigurationError

logger = logging.getLogger(__name__)


class CacheState(enum.Enum):
    """Lifecycle state of a :class:`WindowedCache`."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


class CorrectionSample(NamedTuple):
    """One bracket point of a :class:`WindowedCache`.

    Attributes:
        epoch: Sample epoch.
        values: Function value at ``epoch``, one float per channel.
    """

    epoch: Epoch
    values: tuple[float, ...]


class WindowedCache:
    """Lazily rebuilt window of samples with linear or quadratic interpolation.

    A two-point cache spans ``[t - h, t + h]`` around the query that built
    it; a three-point cache holds ``t - h, t, t + h``.  Queries inside the
    window only interpolate.  A query at most ``h`` past either end slides
    the window by one sample spacing, evaluating a single new sample; any
    other query rebuilds the window around itself.

    Args:
        name: Label used in log messages.
        function: Function of an epoch returning the sample values.
        half_step: Half step ``h`` [days]. Must be positive.
        n_points: Number of samples, 2 or 3. Default: ``3``

    Raises:
        ConfigurationError: If ``half_step`` is not positive or
            ``n_points`` is not 2 or 3.

    Examples:
        ```python
        from trs2crs.epoch import Epoch
        from trs2crs.windowed_cache import WindowedCache

        cache = WindowedCache("demo", lambda e: (e.mjd() ** 2,), half_step=0.125)
        cache.interpolate(Epoch(2020, 1, 1, 6))
        ```
    """

    def __init__(self, name: str, function: Callable[[Epoch], Sequence[float]],
                 half_step: float, n_points: int = 3) -> None:
        if not half_step > 0.0:
            raise ConfigurationError(
                f"Cache '{name}' half step must be positive, got {half_step}"
            )
        if n_points not in (2, 3):
            raise ConfigurationError(
                f"Cache '{name}' must hold 2 or 3 samples, got {n_points}"
            )
        self._name = name
        self._function = function
        self._half_step = float(half_step)
        self._n_points = n_points
        # Sample spacing: the two-point window spans two half steps
        self._spacing = self._half_step if n_points == 3 else 2.0 * self._half_step
        self._samples: list[CorrectionSample] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Label of the cache."""
        return self._name

    @property
    def half_step(self) -> float:
        """Half step ``h`` [days]."""
        return self._half_step

    @property
    def n_points(self) -> int:
        """Number of samples held when ready."""
        return self._n_points

    @property
    def state(self) -> CacheState:
        """Current lifecycle state."""
        return CacheState.READY if self._samples else CacheState.UNINITIALIZED

    @property
    def samples(self) -> tuple[CorrectionSample, ...]:
        """Snapshot of the current samples, earliest first."""
        with self._lock:
            return tuple(self._samples)

    def reset(self) -> None:
        """Drop all samples, returning the cache to ``UNINITIALIZED``."""
        with self._lock:
            self._samples = []

    def _sample(self, epoch: Epoch) -> CorrectionSample:
        return CorrectionSample(epoch, tuple(float(v) for v in self._function(epoch)))

    def _rebuild(self, epoch: Epoch) -> None:
        if self._n_points == 3:
            offsets = (-self._half_step, 0.0, self._half_step)
        else:
            offsets = (-self._half_step, self._half_step)
        self._samples = [self._sample(epoch + dt) for dt in offsets]
        logger.debug("Cache '%s' rebuilt around %s", self._name, epoch)

    def _update(self, epoch: Epoch) -> None:
        if not self._samples or self._samples[0].epoch.scale is not epoch.scale:
            self._rebuild(epoch)
            return

        lower = self._samples[0].epoch
        upper = self._samples[-1].epoch
        if lower <= epoch <= upper:
            return

        if epoch > upper and epoch - upper <= self._half_step:
            self._samples = self._samples[1:] + [self._sample(upper + self._spacing)]
            logger.debug("Cache '%s' slid forward to %s", self._name, self._samples[-1].epoch)
        elif epoch < lower and lower - epoch <= self._half_step:
            self._samples = [self._sample(lower - self._spacing)] + self._samples[:-1]
            logger.debug("Cache '%s' slid backward to %s", self._name, self._samples[0].epoch)
        else:
            self._rebuild(epoch)

    def interpolate(self, epoch: Epoch) -> tuple[float, ...]:
        """Return the interpolated function value at ``epoch``.

        Args:
            epoch: Query epoch. A change of time scale between queries
                rebuilds the window.

        Returns:
            tuple[float, ...]: Interpolated values, one per channel.
        """
        with self._lock:
            self._update(epoch)
            samples = tuple(self._samples)

        if len(samples) == 2:
            (t1, y1), (t2, y2) = samples
            alpha = (epoch - t1) / (t2 - t1)
            return tuple(a + alpha * (b - a) for a, b in zip(y1, y2))

        (t1, y1), (t2, y2), (_, y3) = samples
        x = (epoch - t2) / (t2 - t1)
        return tuple(
            b + 0.5 * x * (c - a) + x * x * (0.5 * (c + a) - b)
            for a, b, c in zip(y1, y2, y3)
        )
