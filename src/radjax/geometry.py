"""Geometry helpers for building panel models.

Provides spherical-to-Cartesian conversion, a near-uniform point lattice
on the unit sphere (used to tessellate convex bodies into panels), the
elementary rotation matrices, and a time-dependent surface normal
provider for articulated panels.

All inputs and outputs use SI base units (metres, radians, seconds).

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, p. 27.
    2. E. B. Saff and A. B. J. Kuijlaars, *Distributing many points on a
       sphere*, The Mathematical Intelligencer 19, 1997.
"""

from __future__ import annotations

from collections.abc import Callable

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from radjax.config import get_dtype


def position_spherical_to_cartesian(
    x_sph: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert spherical coordinates to Cartesian coordinates.

    Accepts a single point of shape ``(3,)`` or a batch of shape
    ``(N, 3)``.

    Args:
        x_sph: Spherical coordinates ``[radius, polar, azimuth]``.  The
            polar angle is measured from the +z axis, the azimuth from the
            +x axis towards +y.  Angles in *rad* (or *deg* if
            ``use_degrees=True``).
        use_degrees: If ``True``, interpret the angles as degrees.

    Returns:
        jax.Array: Cartesian position ``[x, y, z]``, same leading shape as
            the input.

    Example:
        >>> import jax.numpy as jnp
        >>> from radjax.geometry import position_spherical_to_cartesian
        >>> x = position_spherical_to_cartesian(jnp.array([2.0, 0.0, 0.0]))
        >>> float(x[2])
        2.0
    """
    x_sph = jnp.asarray(x_sph, dtype=get_dtype())

    radius = x_sph[..., 0]
    polar = x_sph[..., 1]
    azimuth = x_sph[..., 2]

    if use_degrees:
        polar = jnp.deg2rad(polar)
        azimuth = jnp.deg2rad(azimuth)

    x = radius * jnp.sin(polar) * jnp.cos(azimuth)
    y = radius * jnp.sin(polar) * jnp.sin(azimuth)
    z = radius * jnp.cos(polar)

    return jnp.stack([x, y, z], axis=-1)


def evenly_spaced_sphere_points(n: int) -> tuple[Array, Array]:
    """Generate ``n`` near-uniformly distributed points on the unit sphere.

    The points lie on a staggered spiral: the polar angles split the
    sphere into ``n`` bands of equal area (each point at the centre of its
    band) and consecutive azimuths advance by the golden angle.  Every
    point therefore represents an equal share ``4*pi/n`` of the surface.

    Args:
        n: Number of points.  Must be at least 1.

    Returns:
        tuple[jax.Array, jax.Array]: ``(polar_angles, azimuth_angles)`` in
            *rad*, each of shape ``(n,)``.

    Raises:
        ValueError: If *n* is less than 1.

    Examples:
        ```python
        from radjax.geometry import evenly_spaced_sphere_points
        polar, azimuth = evenly_spaced_sphere_points(100)
        ```
    """
    if n < 1:
        raise ValueError(f"Number of points must be at least 1, got {n}")

    _float = get_dtype()
    k = jnp.arange(n, dtype=_float)

    h = _float(-1.0) + (_float(2.0) * k + _float(1.0)) / _float(n)
    polar = jnp.arccos(h)

    golden_angle = jnp.pi * (_float(3.0) - jnp.sqrt(_float(5.0)))
    azimuth = jnp.mod(k * golden_angle, _float(2.0) * jnp.pi)

    return polar, azimuth


def _cos_sin(angle: ArrayLike, use_degrees: bool) -> tuple[Array, Array]:
    angle = jnp.asarray(angle, dtype=get_dtype())
    if use_degrees:
        angle = jnp.deg2rad(angle)
    return jnp.cos(angle), jnp.sin(angle)


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation by *angle* about the x-axis.

    Maps vector components from the original frame into a frame rotated
    counter-clockwise by *angle*.  The transpose rotates a vector instead.

    Args:
        angle: Rotation angle in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret *angle* as degrees.

    Returns:
        jax.Array: Rotation matrix, shape ``(3, 3)``.
    """
    c, s = _cos_sin(angle, use_degrees)
    return jnp.array([[1.0, 0.0, 0.0],
                      [0.0,   c,   s],
                      [0.0,  -s,   c]], dtype=get_dtype())


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation by *angle* about the y-axis.  See :func:`Rx`."""
    c, s = _cos_sin(angle, use_degrees)
    return jnp.array([[  c, 0.0,  -s],
                      [0.0, 1.0, 0.0],
                      [  s, 0.0,   c]], dtype=get_dtype())


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation by *angle* about the z-axis.  See :func:`Rx`."""
    c, s = _cos_sin(angle, use_degrees)
    return jnp.array([[  c,   s, 0.0],
                      [ -s,   c, 0.0],
                      [0.0, 0.0, 1.0]], dtype=get_dtype())


_ROTATIONS = {"x": Rx, "y": Ry, "z": Rz}


def rotating_normal_function(
    normal: ArrayLike,
    axis: str,
    rate: float,
    angle_0: float = 0.0,
) -> Callable[[float], Array]:
    """Create a surface normal provider for a panel spinning about a body axis.

    The returned callable gives the normal at time ``t`` as *normal*
    rotated by ``angle_0 + rate * t`` about *axis* (right-handed, i.e. a
    positive angle turns +x towards +y for the z-axis).  Useful for solar
    arrays and other articulated panels.

    Args:
        normal: Unit normal at zero rotation angle, shape ``(3,)``.
        axis: Rotation axis, one of ``"x"``, ``"y"`` or ``"z"``.
        rate: Rotation rate [rad/s].
        angle_0: Rotation angle at ``t = 0`` [rad].

    Returns:
        A callable ``normal_function(t) -> Array`` returning shape ``(3,)``.

    Raises:
        ValueError: If *axis* is not one of ``"x"``, ``"y"``, ``"z"``.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.geometry import rotating_normal_function
        n = rotating_normal_function(jnp.array([1.0, 0.0, 0.0]), "z", 1e-3)
        n(0.0)
        ```
    """
    if axis not in _ROTATIONS:
        raise ValueError(f"axis must be 'x', 'y' or 'z', got '{axis}'")

    _float = get_dtype()
    _normal = jnp.asarray(normal, dtype=_float)
    _rotation = _ROTATIONS[axis]

    def normal_function(t: float) -> Array:
        # Elementary matrices rotate the frame; the transpose rotates the vector
        return _rotation(_float(angle_0) + _float(rate) * _float(t)).T @ _normal

    return normal_function
