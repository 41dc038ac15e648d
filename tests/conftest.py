import jax.numpy as jnp
import pytest

from radjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Run each test in float64.

    Force comparisons against reference values use tolerances far below
    float32 resolution.  Worker processes (pytest-xdist) start in the
    default float32, so the dtype is set per test; test_config.py
    overrides this with its own float32 fixture.
    """
    set_dtype(jnp.float64)
