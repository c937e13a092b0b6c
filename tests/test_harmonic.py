"""Tests for polynomial, harmonic and Poisson series evaluation."""

from __future__ import annotations

import math
import random

import jax.numpy as jnp
import pytest

from trs2crs._tide_data import OCEAN_POLE_TERMS
from trs2crs.harmonic import HarmonicSeries, PoissonSeries, evaluate_polynomial

# ---------------------------------------------------------------------------
# evaluate_polynomial
# ---------------------------------------------------------------------------


class TestEvaluatePolynomial:
    """Tests for evaluate_polynomial."""

    def test_lowest_power_first(self) -> None:
        assert float(evaluate_polynomial((1.0, 2.0, 3.0), 2.0)) == pytest.approx(17.0)

    def test_constant(self) -> None:
        assert float(evaluate_polynomial((4.5,), 10.0)) == pytest.approx(4.5)

    def test_empty_is_zero(self) -> None:
        assert float(evaluate_polynomial((), 3.0)) == 0.0


# ---------------------------------------------------------------------------
# HarmonicSeries
# ---------------------------------------------------------------------------


class TestHarmonicSeries:
    """Tests for HarmonicSeries."""

    def test_two_terms(self) -> None:
        """Sine and cosine amplitudes apply to their own argument combination."""
        series = HarmonicSeries([(1.0, 0.0, 1, 0), (0.0, 2.0, 0, 1)], n_args=2)
        value = series.evaluate([0.3, 0.1])
        assert value.shape == (1,)
        assert float(value[0]) == pytest.approx(math.sin(0.3) + 2.0 * math.cos(0.1), rel=1e-14)

    def test_multiplier_combination(self) -> None:
        series = HarmonicSeries([(1.5, -0.5, 2, -1)], n_args=2)
        phase = 2 * 0.7 - 0.2
        expected = 1.5 * math.sin(phase) - 0.5 * math.cos(phase)
        assert float(series.evaluate([0.7, 0.2])[0]) == pytest.approx(expected, rel=1e-14)

    def test_channels(self) -> None:
        """Each channel has its own amplitude pair."""
        series = HarmonicSeries([(1.0, 0.0, 0.0, 3.0, 1)], n_args=1, channels=2)
        value = series.evaluate([0.4])
        assert value.shape == (2,)
        assert float(value[0]) == pytest.approx(math.sin(0.4))
        assert float(value[1]) == pytest.approx(3.0 * math.cos(0.4))

    def test_metadata(self) -> None:
        series = HarmonicSeries(OCEAN_POLE_TERMS, n_args=6, channels=2)
        assert len(series) == len(OCEAN_POLE_TERMS)
        assert series.n_args == 6
        assert series.channels == 2

    def test_bad_row_width_raises(self) -> None:
        with pytest.raises(ValueError, match="row 1"):
            HarmonicSeries([(1.0, 0.0, 1), (1.0, 0.0)], n_args=1)

    def test_empty_series_is_zero(self) -> None:
        series = HarmonicSeries([], n_args=3, channels=2)
        assert jnp.allclose(series.evaluate([0.1, 0.2, 0.3]), jnp.zeros(2))

    def test_row_order_independent(self) -> None:
        """Shuffling the rows leaves the sum unchanged to rounding."""
        rows = list(OCEAN_POLE_TERMS)
        random.Random(42).shuffle(rows)
        args = jnp.array([1.3, 0.2, 2.9, 0.8, 4.1, 5.5])
        reference = HarmonicSeries(OCEAN_POLE_TERMS, n_args=6, channels=2).evaluate(args)
        shuffled = HarmonicSeries(rows, n_args=6, channels=2).evaluate(args)
        assert jnp.allclose(shuffled, reference, rtol=1e-12, atol=1e-12)

    def test_tables_laid_out_last_row_first(self) -> None:
        rows = [(1.0, 0.0, 1, 0), (0.1, 0.0, 0, 1), (0.01, 0.0, 2, 3)]
        multipliers, sin_amp, _ = HarmonicSeries(rows, n_args=2)._tables()
        assert sin_amp[:, 0].tolist() == [0.01, 0.1, 1.0]
        assert multipliers[0].tolist() == [2.0, 3.0]

    def test_large_argument_reduced(self) -> None:
        """Phases beyond 2 pi give the same value as the reduced phase."""
        series = HarmonicSeries([(1.0, 1.0, 1)], n_args=1)
        near = series.evaluate([0.5])
        far = series.evaluate([0.5 + 2.0 * math.pi * 1000])
        assert float(far[0]) == pytest.approx(float(near[0]), abs=1e-10)


# ---------------------------------------------------------------------------
# PoissonSeries
# ---------------------------------------------------------------------------


class TestPoissonSeries:
    """Tests for PoissonSeries."""

    def test_tiers_scale_with_powers_of_t(self) -> None:
        """Tier j is multiplied by t**j and the polynomial is added."""
        tiers = (
            ((2.0, 0.0, 1),),
            ((0.0, 3.0, 1),),
        )
        series = PoissonSeries((1.0, 0.5), tiers, n_args=1, scale=10.0)
        t, a = 0.2, 0.9
        expected = 10.0 * (2.0 * math.sin(a) + t * 3.0 * math.cos(a) + 1.0 + 0.5 * t)
        assert float(series.evaluate(t, [a])) == pytest.approx(expected, rel=1e-14)

    def test_n_terms(self) -> None:
        tiers = (((1.0, 0.0, 1), (1.0, 0.0, 2)), ((1.0, 0.0, 1),))
        assert PoissonSeries((), tiers, n_args=1).n_terms == 3

    def test_polynomial_only(self) -> None:
        series = PoissonSeries((1.0, 2.0), (), n_args=1)
        assert float(series.evaluate(3.0, [0.0])) == pytest.approx(7.0)
