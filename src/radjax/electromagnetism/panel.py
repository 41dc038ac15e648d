"""Flat surface element of a paneled radiation pressure target."""

from __future__ import annotations

from collections.abc import Callable

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from radjax.config import get_dtype
from radjax.electromagnetism.reflection_law import ReflectionLaw


def _unit_norm_tolerance() -> float:
    # Loose enough for normals normalized in a lower precision than the active dtype
    return max(1e-6, 10.0 * float(jnp.finfo(get_dtype()).eps))


class Panel:
    """Flat panel with an area, a (possibly time-varying) normal and a reflection law.

    The surface normal is either a fixed unit vector or a callable
    ``normal(t) -> Array`` supplied by an attitude or articulation model.
    It must be expressed in the frame in which forces are evaluated.  The
    area and reflection law are fixed for the panel's lifetime; the
    reflection law is shared, not copied, so many panels may reference one
    instance.

    This is a plain Python class (not a JAX pytree); owning target models
    evaluate the normal provider and stack the results into arrays.

    Args:
        area: Panel area [m^2].  Must be positive.
        surface_normal: Unit outward normal, shape ``(3,)``, or a callable
            returning it for a given time [s].
        reflection_law: Reflection law of the panel surface.

    Raises:
        ValueError: If *area* is not positive, or a fixed normal does not
            have shape ``(3,)`` or is not of unit length.  Callable normals
            are not checked; they must return unit vectors.
        TypeError: If *reflection_law* is not a :class:`ReflectionLaw`.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism import Panel, SpecularDiffuseMixReflectionLaw
        law = SpecularDiffuseMixReflectionLaw(0.2, 0.4, 0.4)
        panel = Panel(1.0, jnp.array([0.0, 0.0, 1.0]), law)
        panel.surface_normal(0.0)
        ```
    """

    __slots__ = ("_area", "_surface_normal_function", "_reflection_law")

    def __init__(
        self,
        area: float,
        surface_normal: ArrayLike | Callable[[float], Array],
        reflection_law: ReflectionLaw,
    ) -> None:
        if not area > 0.0:
            raise ValueError(f"Panel area must be positive, got {area}")
        if not isinstance(reflection_law, ReflectionLaw):
            raise TypeError(
                f"reflection_law must be a ReflectionLaw, "
                f"got {type(reflection_law).__name__}"
            )

        if callable(surface_normal):
            normal_function = surface_normal
        else:
            normal = jnp.asarray(surface_normal, dtype=get_dtype())
            if normal.shape != (3,):
                raise ValueError(
                    f"Surface normal must have shape (3,), got {normal.shape}"
                )
            norm = float(jnp.linalg.norm(normal))
            if not abs(norm - 1.0) <= _unit_norm_tolerance():
                raise ValueError(f"Surface normal must be a unit vector, got norm {norm}")

            def normal_function(t: float) -> Array:
                return normal

        self._area = float(area)
        self._surface_normal_function = normal_function
        self._reflection_law = reflection_law

    @property
    def area(self) -> float:
        """Panel area [m^2]."""
        return self._area

    @property
    def reflection_law(self) -> ReflectionLaw:
        """Reflection law shared with other panels of the same material."""
        return self._reflection_law

    @property
    def surface_normal_function(self) -> Callable[[float], Array]:
        """Provider of the surface normal as a function of time."""
        return self._surface_normal_function

    def surface_normal(self, t: float) -> Array:
        """Evaluate the surface normal at time *t* [s].

        Returns:
            jax.Array: Unit normal, shape ``(3,)``.
        """
        return self._surface_normal_function(t)

    def __repr__(self) -> str:
        return f"Panel(area={self._area:.6g}, reflection_law={self._reflection_law!r})"
