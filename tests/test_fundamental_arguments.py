"""Tests for the fundamental arguments of nutation theory.

Reference values are the SOFA ``t_sofa_c`` checks of the ``fa*03``
functions at ``t = 0.8`` Julian centuries.
"""

from __future__ import annotations

import jax.numpy as jnp
import pytest

from trs2crs.fundamental_arguments import (
    ARGUMENT_NAMES,
    delaunay_arguments,
    fundamental_arguments,
    planetary_arguments,
)

_T = 0.80

_EXPECTED = {
    "l": 5.132369751108684150,
    "l'": 6.226797973505507345,
    "F": 0.2597711366745499518,
    "D": 1.946709205396925672,
    "Om": -5.973618440951302183,
    "L_Me": 5.417338184297289661,
    "L_Ve": 3.424900460533758000,
    "L_E": 1.744713738913081846,
    "L_Ma": 3.275506840277781492,
    "L_J": 5.275711665202481138,
    "L_Sa": 5.371574539440827046,
    "L_U": 5.180636450180413523,
    "L_Ne": 2.079343830860413523,
    "p_A": 0.1950884762240000000e-1,
}


class TestFundamentalArguments:
    """Tests for delaunay_arguments, planetary_arguments and fundamental_arguments."""

    def test_shapes(self) -> None:
        assert delaunay_arguments(_T).shape == (5,)
        assert planetary_arguments(_T).shape == (9,)
        assert fundamental_arguments(_T).shape == (14,)

    def test_names_match_length(self) -> None:
        assert len(ARGUMENT_NAMES) == 14

    @pytest.mark.parametrize("index,name", list(enumerate(ARGUMENT_NAMES)))
    def test_sofa_reference(self, index: int, name: str) -> None:
        """Each argument matches the SOFA test value."""
        args = fundamental_arguments(_T)
        assert float(args[index]) == pytest.approx(_EXPECTED[name], abs=1e-12)

    def test_concatenation_order(self) -> None:
        """Full vector is the Delaunay arguments followed by the planetary ones."""
        args = fundamental_arguments(0.1)
        assert jnp.allclose(args[:5], delaunay_arguments(0.1), rtol=0, atol=0)
        assert jnp.allclose(args[5:], planetary_arguments(0.1), rtol=0, atol=0)

    def test_nan_propagates(self) -> None:
        assert bool(jnp.all(jnp.isnan(fundamental_arguments(jnp.nan))))
