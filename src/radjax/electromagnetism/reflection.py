"""Geometric reflection of rays off a flat surface."""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from radjax.config import get_dtype


def compute_mirrorlike_reflection(
    incoming_direction: ArrayLike,
    surface_normal: ArrayLike,
) -> Array:
    """Direction of a ray after perfect (mirror-like) reflection.

    A ray that does not strike the front face of the surface, i.e. one
    travelling parallel to it or away from it, has no physical reflection
    and the zero vector is returned.

    Args:
        incoming_direction: Direction of travel of the incident ray,
            shape ``(3,)``.
        surface_normal: Unit outward normal of the surface, shape ``(3,)``.

    Returns:
        jax.Array: Reflected direction, shape ``(3,)``, or zeros if the ray
            is not incident on the front face.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism import compute_mirrorlike_reflection
        d = jnp.array([1.0, 0.0, -1.0]) / jnp.sqrt(2.0)
        compute_mirrorlike_reflection(d, jnp.array([0.0, 0.0, 1.0]))
        ```
    """
    _float = get_dtype()
    d = jnp.asarray(incoming_direction, dtype=_float)
    n = jnp.asarray(surface_normal, dtype=_float)

    d_dot_n = jnp.dot(d, n)
    mirrored = d - _float(2.0) * d_dot_n * n

    return jnp.where(d_dot_n >= _float(0.0), jnp.zeros_like(d), mirrored)
