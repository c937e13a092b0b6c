"""Tests for the sliding-window interpolation cache."""

from __future__ import annotations

import math
import threading

import pytest

from trs2crs.epoch import Epoch, TimeScale
from trs2crs.errors import ConfigurationError
from trs2crs.windowed_cache import CacheState, CorrectionSample, WindowedCache

_PERIOD = 13.66


class _Counting:
    """Fortnightly sinusoid that counts its evaluations."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, epoch: Epoch) -> tuple[float, float]:
        self.calls += 1
        phase = 2.0 * math.pi * epoch.mjd() / _PERIOD
        return math.sin(phase), math.cos(phase)


@pytest.fixture
def t0() -> Epoch:
    return Epoch.from_day_seconds(58849, 21600.0, TimeScale.TT)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    """Tests for WindowedCache construction."""

    @pytest.mark.parametrize("half_step", [0.0, -0.1])
    def test_non_positive_half_step_raises(self, half_step: float) -> None:
        with pytest.raises(ConfigurationError, match="half step"):
            WindowedCache("bad", _Counting(), half_step)

    @pytest.mark.parametrize("n_points", [1, 4])
    def test_unsupported_point_count_raises(self, n_points: int) -> None:
        with pytest.raises(ConfigurationError, match="2 or 3"):
            WindowedCache("bad", _Counting(), 0.1, n_points=n_points)

    def test_starts_uninitialized(self) -> None:
        cache = WindowedCache("demo", _Counting(), 0.125)
        assert cache.state is CacheState.UNINITIALIZED
        assert cache.samples == ()
        assert cache.name == "demo"
        assert cache.half_step == 0.125
        assert cache.n_points == 3


# ---------------------------------------------------------------------------
# Three-point window
# ---------------------------------------------------------------------------


class TestThreePoint:
    """Tests for the quadratic (three-point) window."""

    def test_first_query_builds_centred_window(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        assert func.calls == 3
        assert cache.state is CacheState.READY
        epochs = [s.epoch for s in cache.samples]
        assert epochs[0] - t0 == pytest.approx(-0.125)
        assert epochs[1] == t0
        assert epochs[2] - t0 == pytest.approx(0.125)

    def test_exact_at_samples(self, t0: Epoch) -> None:
        """Interpolating at a sample epoch returns the sample."""
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        for sample in cache.samples:
            values = cache.interpolate(sample.epoch)
            assert values == pytest.approx(sample.values, abs=1e-15)

    def test_matches_direct_evaluation(self, t0: Epoch) -> None:
        """Interpolated values track the function within the cubic error bound."""
        cache = WindowedCache("q", _Counting(), 0.125)
        reference = _Counting()
        for k in range(40):
            epoch = t0 + 0.05 * k
            assert cache.interpolate(epoch) == pytest.approx(reference(epoch), abs=2e-5)

    def test_queries_inside_window_do_not_evaluate(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        cache.interpolate(t0 + 0.1)
        cache.interpolate(t0 - 0.1)
        assert func.calls == 3

    def test_slide_forward(self, t0: Epoch) -> None:
        """A query within one half step past the window adds one sample."""
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        cache.interpolate(t0 + 0.1875)
        assert func.calls == 4
        epochs = [s.epoch for s in cache.samples]
        assert epochs[0] == t0
        assert epochs[2] - t0 == pytest.approx(0.25)

    def test_slide_backward(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        cache.interpolate(t0 - 0.1875)
        assert func.calls == 4
        epochs = [s.epoch for s in cache.samples]
        assert epochs[0] - t0 == pytest.approx(-0.25)
        assert epochs[2] == t0

    def test_far_query_rebuilds(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        far = t0 + 10.0
        cache.interpolate(far)
        assert func.calls == 6
        assert cache.samples[1].epoch == far

    def test_scale_change_rebuilds(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        cache.interpolate(t0.to_scale(TimeScale.TAI))
        assert func.calls == 6
        assert cache.samples[0].epoch.scale is TimeScale.TAI

    def test_slide_equals_rebuild(self, t0: Epoch) -> None:
        """Slid and freshly built windows give the same interpolant inside both."""
        slid = WindowedCache("a", _Counting(), 0.125)
        slid.interpolate(t0)
        slid.interpolate(t0 + 0.2)
        fresh = WindowedCache("b", _Counting(), 0.125)
        fresh.interpolate(t0 + 0.125)
        epoch = t0 + 0.14
        assert slid.interpolate(epoch) == pytest.approx(fresh.interpolate(epoch), abs=1e-15)

    def test_reset(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("q", func, 0.125)
        cache.interpolate(t0)
        cache.reset()
        assert cache.state is CacheState.UNINITIALIZED
        cache.interpolate(t0)
        assert func.calls == 6


# ---------------------------------------------------------------------------
# Two-point window
# ---------------------------------------------------------------------------


class TestTwoPoint:
    """Tests for the linear (two-point) window."""

    def test_window_spans_two_half_steps(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("lin", func, 0.015, n_points=2)
        cache.interpolate(t0)
        assert func.calls == 2
        lower, upper = (s.epoch for s in cache.samples)
        assert t0 - lower == pytest.approx(0.015)
        assert upper - t0 == pytest.approx(0.015)

    def test_linear_interpolation(self, t0: Epoch) -> None:
        cache = WindowedCache("lin", _Counting(), 0.015, n_points=2)
        cache.interpolate(t0)
        (e1, y1), (e2, y2) = cache.samples
        epoch = t0 + 0.005
        alpha = (epoch - e1) / (e2 - e1)
        expected = tuple(a + alpha * (b - a) for a, b in zip(y1, y2))
        assert cache.interpolate(epoch) == pytest.approx(expected, abs=1e-15)

    def test_slide_forward_by_full_spacing(self, t0: Epoch) -> None:
        func = _Counting()
        cache = WindowedCache("lin", func, 0.015, n_points=2)
        cache.interpolate(t0)
        cache.interpolate(t0 + 0.0225)
        assert func.calls == 3
        lower, upper = (s.epoch for s in cache.samples)
        assert lower - t0 == pytest.approx(0.015)
        assert upper - t0 == pytest.approx(0.045)

    def test_matches_direct_evaluation(self, t0: Epoch) -> None:
        cache = WindowedCache("lin", _Counting(), 0.015, n_points=2)
        reference = _Counting()
        for k in range(30):
            epoch = t0 + 0.01 * k
            assert cache.interpolate(epoch) == pytest.approx(reference(epoch), abs=5e-5)


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestThreadSafety:
    """Concurrent queries leave the cache consistent."""

    def test_concurrent_interpolation(self, t0: Epoch) -> None:
        cache = WindowedCache("mt", _Counting(), 0.125)
        reference = _Counting()
        errors: list[str] = []

        def worker(offset: float) -> None:
            for k in range(50):
                epoch = t0 + offset + 0.01 * k
                got = cache.interpolate(epoch)
                want = reference(epoch)
                if any(abs(g - w) > 2e-5 for g, w in zip(got, want)):
                    errors.append(f"{epoch}: {got} != {want}")

        threads = [threading.Thread(target=worker, args=(0.3 * i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        samples = cache.samples
        assert len(samples) == 3
        assert isinstance(samples[0], CorrectionSample)
