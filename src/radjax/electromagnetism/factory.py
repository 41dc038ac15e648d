"""Radiation pressure model factory.

Turns the static settings of :mod:`radjax.electromagnetism.config` into
stateful target and acceleration model objects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from jax.typing import ArrayLike

from radjax.electromagnetism.acceleration import RadiationPressureAcceleration
from radjax.electromagnetism.config import CannonballTargetSettings, PaneledTargetSettings
from radjax.electromagnetism.panel import Panel
from radjax.electromagnetism.target_model import (
    CannonballRadiationPressureTargetModel,
    PaneledRadiationPressureTargetModel,
    RadiationPressureTargetModel,
)

logger = logging.getLogger(__name__)


def create_radiation_pressure_target_model(
    settings: CannonballTargetSettings | PaneledTargetSettings,
) -> RadiationPressureTargetModel:
    """Create a radiation pressure target model from its settings.

    For paneled targets, value-equal reflection laws are deduplicated so
    that all panels with the same optical properties share one law
    instance.

    Args:
        settings: Cannonball or paneled target settings.

    Returns:
        RadiationPressureTargetModel: A new, never-updated target model.

    Raises:
        TypeError: If *settings* is of an unsupported type.

    Examples:
        ```python
        from radjax.electromagnetism.config import CannonballTargetSettings
        from radjax.electromagnetism.factory import create_radiation_pressure_target_model
        model = create_radiation_pressure_target_model(CannonballTargetSettings())
        ```
    """
    if isinstance(settings, CannonballTargetSettings):
        return CannonballRadiationPressureTargetModel(
            settings.reference_area, settings.radiation_pressure_coefficient
        )

    if isinstance(settings, PaneledTargetSettings):
        shared_laws = {}
        panels = []
        for panel_settings in settings.panels:
            law = shared_laws.setdefault(
                panel_settings.reflection_law, panel_settings.reflection_law
            )
            panels.append(Panel(panel_settings.area, panel_settings.surface_normal, law))

        n_instances = len({id(p.reflection_law) for p in settings.panels})
        if n_instances > len(shared_laws):
            logger.info(
                "Deduplicated %d reflection law instances into %d shared laws",
                n_instances,
                len(shared_laws),
            )
        return PaneledRadiationPressureTargetModel(panels)

    raise TypeError(
        f"Unsupported target settings type: {type(settings).__name__}. "
        f"Expected CannonballTargetSettings or PaneledTargetSettings"
    )


def create_radiation_pressure_acceleration(
    source_position_function: Callable[[float], ArrayLike],
    accelerated_body_position_function: Callable[[float], ArrayLike],
    irradiance_function: Callable[[float], ArrayLike],
    mass_function: Callable[[float], ArrayLike],
    settings: CannonballTargetSettings | PaneledTargetSettings | None = None,
) -> RadiationPressureAcceleration:
    """Create a radiation pressure acceleration model.

    Args:
        source_position_function: Position of the radiation source [m] as
            a function of time [s].
        accelerated_body_position_function: Position of the accelerated
            body [m] as a function of time [s].
        irradiance_function: Irradiance at the accelerated body [W/m^2] as
            a function of time [s].
        mass_function: Mass of the accelerated body [kg] as a function of
            time [s].
        settings: Target settings.  Defaults to
            ``CannonballTargetSettings()``.

    Returns:
        RadiationPressureAcceleration: Acceleration model owning a new
            target model.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism.factory import create_radiation_pressure_acceleration
        acceleration = create_radiation_pressure_acceleration(
            lambda t: jnp.zeros(3),
            lambda t: jnp.array([1.496e11, 0.0, 0.0]),
            lambda t: 1367.0,
            lambda t: 1000.0,
        )
        acceleration.update_members(0.0)
        ```
    """
    if settings is None:
        settings = CannonballTargetSettings()

    return RadiationPressureAcceleration(
        source_position_function,
        accelerated_body_position_function,
        irradiance_function,
        mass_function,
        create_radiation_pressure_target_model(settings),
    )
