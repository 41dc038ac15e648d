"""Tests for the radjax.config module."""

import jax
import jax.numpy as jnp
import pytest

from radjax.config import get_dtype, get_reflection_epsilon, set_dtype
from radjax.electromagnetism import (
    CannonballRadiationPressureTargetModel,
    SpecularDiffuseMixReflectionLaw,
    compute_mirrorlike_reflection,
)
from radjax.geometry import position_spherical_to_cartesian

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
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


class TestReflectionEpsilon:
    def test_float32_tolerance(self):
        set_dtype(jnp.float32)
        assert get_reflection_epsilon() == 1e-6

    def test_float64_tolerance(self):
        set_dtype(jnp.float64)
        assert get_reflection_epsilon() == 1e-12

    def test_float16_tolerance(self):
        set_dtype(jnp.float16)
        assert get_reflection_epsilon() == 1e-3

    def test_bfloat16_tolerance(self):
        set_dtype(jnp.bfloat16)
        assert get_reflection_epsilon() == 1e-3


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_mirror_reflection_dtype_float64(self):
        set_dtype(jnp.float64)
        r = compute_mirrorlike_reflection(
            jnp.array([1.0, 0.0, -1.0]), jnp.array([0.0, 0.0, 1.0])
        )
        assert r.dtype == jnp.float64

    def test_reaction_vector_dtype_float32(self):
        law = SpecularDiffuseMixReflectionLaw(0.2, 0.4, 0.4)
        rv = law.evaluate_reaction_vector(
            jnp.array([0.0, 0.0, 1.0]), jnp.array([0.0, 0.0, -1.0])
        )
        assert rv.dtype == jnp.float32

    def test_cannonball_force_dtype_float64(self):
        set_dtype(jnp.float64)
        model = CannonballRadiationPressureTargetModel(1.0, 1.0)
        f = model.evaluate_radiation_pressure_force(1367.0, jnp.array([1.0, 0.0, 0.0]))
        assert f.dtype == jnp.float64

    def test_spherical_dtype_float64(self):
        set_dtype(jnp.float64)
        x = position_spherical_to_cartesian(jnp.array([1.0, 0.5, 0.5]))
        assert x.dtype == jnp.float64
