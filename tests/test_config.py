"""Tests for the trs2crs.config module."""

import dataclasses

import jax
import jax.numpy as jnp
import pytest

from trs2crs.config import (
    CIPRoute,
    NutationModel,
    TransformConfig,
    get_dtype,
    set_dtype,
)
from trs2crs.errors import ConfigurationError
from trs2crs.rotations import Rz


@pytest.fixture(autouse=True)
def reset_dtype():
    """Run each test in float32 and restore float64 afterwards."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_float32_active(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_roundtrip(self):
        for dtype in (jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True

    def test_rotation_follows_dtype(self):
        assert Rz(0.1).dtype == jnp.float32
        set_dtype(jnp.float64)
        assert Rz(0.1).dtype == jnp.float64


class TestTransformConfig:
    def test_defaults(self):
        cfg = TransformConfig()
        assert cfg.model is NutationModel.IAU2006
        assert cfg.cip_route is CIPRoute.SERIES
        assert cfg.nutation_half_step == 0.125
        assert cfg.diurnal_half_step == 0.015
        assert cfg.zonal_half_step == 0.05
        assert cfg.apply_fcn is True

    def test_frozen(self):
        cfg = TransformConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.model = NutationModel.IAU2000

    @pytest.mark.parametrize(
        "field", ["nutation_half_step", "diurnal_half_step", "zonal_half_step"]
    )
    @pytest.mark.parametrize("value", [0.0, -0.1])
    def test_non_positive_half_step_raises(self, field, value):
        with pytest.raises(ConfigurationError, match=field):
            TransformConfig(**{field: value})

    def test_negative_fcn_threshold_raises(self):
        with pytest.raises(ConfigurationError, match="fcn_threshold"):
            TransformConfig(fcn_threshold=-1.0)

    def test_model_must_be_enum(self):
        with pytest.raises(ConfigurationError, match="NutationModel"):
            TransformConfig(model="iau2006")

    def test_route_must_be_enum(self):
        with pytest.raises(ConfigurationError, match="CIPRoute"):
            TransformConfig(cip_route="series")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            TransformConfig(zonal_half_step=0.0)
