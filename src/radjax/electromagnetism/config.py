"""Configuration dataclasses for radiation pressure target models.

Provides :class:`CannonballTargetSettings` for a single equivalent surface
and :class:`PaneledTargetSettings` (built from :class:`PanelSettings`) for
a paneled body.  Settings are static descriptions; they are turned into
stateful model objects by
:func:`~radjax.electromagnetism.factory.create_radiation_pressure_target_model`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import jax.numpy as jnp
import numpy as np
from jax import Array

from radjax.config import get_dtype
from radjax.electromagnetism.reflection_law import ReflectionLaw
from radjax.geometry import evenly_spaced_sphere_points, position_spherical_to_cartesian

_FACE_NORMALS = (
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
)


@dataclass(frozen=True)
class CannonballTargetSettings:
    """Settings of a cannonball (single equivalent surface) target.

    Defaults represent a generic small satellite.

    Args:
        reference_area: Sun-facing cross-sectional area [m^2].
        radiation_pressure_coefficient: Radiation pressure coefficient
            [dimensionless].
    """

    reference_area: float = 10.0
    radiation_pressure_coefficient: float = 1.3

    def __post_init__(self) -> None:
        if not self.reference_area > 0.0:
            raise ValueError(
                f"reference_area must be positive, got {self.reference_area}"
            )
        if not self.radiation_pressure_coefficient >= 0.0:
            raise ValueError(
                f"radiation_pressure_coefficient must be non-negative, "
                f"got {self.radiation_pressure_coefficient}"
            )


@dataclass(frozen=True)
class PanelSettings:
    """Settings of a single panel.

    A fixed normal is stored as a tuple of floats so that settings stay
    hashable and comparable; a callable normal is kept as is.

    Args:
        area: Panel area [m^2].
        surface_normal: Unit outward normal ``(x, y, z)`` or a callable
            ``normal(t) -> Array``.
        reflection_law: Reflection law of the panel surface.
    """

    area: float
    surface_normal: tuple[float, float, float] | Callable[[float], Array]
    reflection_law: ReflectionLaw

    def __post_init__(self) -> None:
        if not self.area > 0.0:
            raise ValueError(f"Panel area must be positive, got {self.area}")
        if not isinstance(self.reflection_law, ReflectionLaw):
            raise TypeError(
                f"reflection_law must be a ReflectionLaw, "
                f"got {type(self.reflection_law).__name__}"
            )
        if not callable(self.surface_normal):
            normal = tuple(float(x) for x in np.asarray(self.surface_normal).ravel())
            if len(normal) != 3:
                raise ValueError(
                    f"Surface normal must have 3 components, got {len(normal)}"
                )
            object.__setattr__(self, "surface_normal", normal)


@dataclass(frozen=True)
class PaneledTargetSettings:
    """Settings of a paneled target.

    Args:
        panels: Panel settings, in the order the panels are indexed.

    Examples:
        ```python
        from radjax.electromagnetism import (
            PaneledTargetSettings,
            reflection_law_from_specular_and_diffuse_reflectivity,
        )
        law = reflection_law_from_specular_and_diffuse_reflectivity(0.0, 1.0)
        settings = PaneledTargetSettings.sphere(1.0, 1000, law)
        len(settings.panels)
        ```
    """

    panels: tuple[PanelSettings, ...]

    def __post_init__(self) -> None:
        panels = tuple(self.panels)
        if not panels:
            raise ValueError("Paneled target settings require at least one panel")
        for panel in panels:
            if not isinstance(panel, PanelSettings):
                raise TypeError(f"Expected PanelSettings, got {type(panel).__name__}")
        object.__setattr__(self, "panels", panels)

    @staticmethod
    def sphere(
        radius: float,
        n_panels: int,
        reflection_law: ReflectionLaw,
    ) -> PaneledTargetSettings:
        """Preset: sphere tessellated into equal-area panels.

        Panel normals point radially outward from near-uniformly
        distributed points (see
        :func:`~radjax.geometry.evenly_spaced_sphere_points`) and the
        panel areas sum to ``4 * pi * radius**2``.

        Args:
            radius: Sphere radius [m].
            n_panels: Number of panels.
            reflection_law: Reflection law shared by all panels.

        Returns:
            PaneledTargetSettings: Settings of the tessellated sphere.

        Raises:
            ValueError: If *radius* is not positive or *n_panels* < 1.
        """
        if not radius > 0.0:
            raise ValueError(f"radius must be positive, got {radius}")

        polar, azimuth = evenly_spaced_sphere_points(n_panels)
        unit_points = jnp.stack([jnp.ones_like(polar), polar, azimuth], axis=-1)
        normals = np.asarray(position_spherical_to_cartesian(unit_points)).tolist()
        panel_area = 4.0 * np.pi * radius**2 / n_panels

        return PaneledTargetSettings(
            tuple(
                PanelSettings(panel_area, tuple(normal), reflection_law)
                for normal in normals
            )
        )

    @staticmethod
    def box_wing(
        length_x: float,
        length_y: float,
        length_z: float,
        bus_reflection_law: ReflectionLaw,
        solar_array_area: float = 0.0,
        solar_array_reflection_law: ReflectionLaw | None = None,
        sun_direction_function: Callable[[float], Array] | None = None,
        attitude_function: Callable[[float], Array] | None = None,
    ) -> PaneledTargetSettings:
        """Preset: box-shaped bus with an optional sun-tracking solar array.

        The bus contributes one panel per face (``+x, -x, +y, -y, +z,
        -z`` in that order).  The solar array is modelled as two panels of
        equal area, the front facing the Sun and the back facing away, so
        it is always illuminated on its front side.

        Args:
            length_x: Bus dimension along the body x-axis [m].
            length_y: Bus dimension along the body y-axis [m].
            length_z: Bus dimension along the body z-axis [m].
            bus_reflection_law: Reflection law of all bus faces.
            solar_array_area: Area of the solar array [m^2].  ``0`` omits
                the array.
            solar_array_reflection_law: Reflection law of the solar array
                (front and back).  Defaults to *bus_reflection_law*.
            sun_direction_function: Unit vector from the body to the Sun
                as a function of time, in the evaluation frame.  Required
                when *solar_array_area* is positive.
            attitude_function: Rotation matrix from the body frame to the
                evaluation frame as a function of time.  If ``None``, the
                body frame is the evaluation frame.

        Returns:
            PaneledTargetSettings: Settings with 6 or 8 panels.

        Raises:
            ValueError: If a dimension is not positive, *solar_array_area*
                is negative, or the array lacks a Sun direction.
        """
        for name, value in (("length_x", length_x), ("length_y", length_y), ("length_z", length_z)):
            if not value > 0.0:
                raise ValueError(f"{name} must be positive, got {value}")
        if not solar_array_area >= 0.0:
            raise ValueError(
                f"solar_array_area must be non-negative, got {solar_array_area}"
            )
        if solar_array_area > 0.0 and sun_direction_function is None:
            raise ValueError(
                "sun_direction_function must be provided when solar_array_area is positive"
            )

        face_areas = (
            length_y * length_z,
            length_y * length_z,
            length_x * length_z,
            length_x * length_z,
            length_x * length_y,
            length_x * length_y,
        )

        panels = []
        for area, normal in zip(face_areas, _FACE_NORMALS):
            if attitude_function is not None:
                normal = _body_fixed_normal_function(normal, attitude_function)
            panels.append(PanelSettings(area, normal, bus_reflection_law))

        if solar_array_area > 0.0:
            array_law = solar_array_reflection_law
            if array_law is None:
                array_law = bus_reflection_law
            panels.append(PanelSettings(solar_array_area, sun_direction_function, array_law))
            panels.append(
                PanelSettings(
                    solar_array_area,
                    lambda t: -jnp.asarray(sun_direction_function(t)),
                    array_law,
                )
            )

        return PaneledTargetSettings(tuple(panels))


def _body_fixed_normal_function(
    normal: tuple[float, float, float],
    attitude_function: Callable[[float], Array],
) -> Callable[[float], Array]:
    _normal = jnp.asarray(normal, dtype=get_dtype())

    def normal_function(t: float) -> Array:
        return jnp.asarray(attitude_function(t)) @ _normal

    return normal_function
