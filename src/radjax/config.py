"""Module-wide floating-point precision configuration.

radjax evaluates reflection laws and forces in a single configurable
float dtype.  The default is ``jnp.float32`` so models run on GPU/TPU
out of the box; orbit work usually wants ``jnp.float64``, which turns on
JAX's 64-bit mode (``jax_enable_x64``) as a side effect.

Set the dtype before building target models and before any JIT
compilation: fixed panel normals and areas are converted when a model is
constructed, and under JIT ``get_dtype()`` is read once during tracing.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

logger = logging.getLogger(__name__)

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    if dtype != _dtype:
        logger.debug("Switching radjax float dtype from %s to %s", _dtype, dtype)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype (default ``jnp.float32``)."""
    return _dtype


def get_reflection_epsilon() -> float:
    """Relative tolerance for deciding that an observer sees the mirror image.

    A specular contribution is only returned when the observer direction
    matches the mirrored incoming direction to within this tolerance,
    relative to the shorter of the two vectors:

    - ``float64``:  1e-12
    - ``float32``:  1e-6
    - ``float16``, ``bfloat16``: 1e-3

    Returns:
        float: Relative tolerance.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    return 1e-3
