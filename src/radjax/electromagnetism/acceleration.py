"""Radiation pressure acceleration on a body.

:class:`RadiationPressureAcceleration` connects a radiation pressure
target model to the environment: it pulls the source and target
positions, the irradiance at the target and the target's mass from
time-dependent providers, asks the target model for the force and divides
by the mass.

Results are cached per evaluation time.  Multi-stage integrators call
``update_members(t)`` several times with the same *t*; only the first call
computes, later calls leave the cached acceleration untouched so repeated
evaluations are bit-identical.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from radjax.config import get_dtype
from radjax.constants import C_LIGHT
from radjax.electromagnetism.target_model import RadiationPressureTargetModel

logger = logging.getLogger(__name__)


class RadiationPressureAcceleration:
    """Acceleration due to radiation pressure from a single source.

    All providers take the current time [s] as their only argument.
    Positions must be in the frame of the target model's panel normals.

    Args:
        source_position_function: Position of the radiation source [m].
        accelerated_body_position_function: Position of the accelerated
            body [m].
        irradiance_function: Irradiance from the source at the accelerated
            body [W/m^2], already attenuated for distance (and shadow, if
            modelled by the caller).
        mass_function: Mass of the accelerated body [kg].
        target_model: Radiation pressure target model of the accelerated
            body.

    Raises:
        TypeError: If a provider is not callable or *target_model* is not a
            :class:`RadiationPressureTargetModel`.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism import (
            CannonballRadiationPressureTargetModel,
            RadiationPressureAcceleration,
        )
        acceleration = RadiationPressureAcceleration(
            lambda t: jnp.zeros(3),
            lambda t: jnp.array([1.496e11, 0.0, 0.0]),
            lambda t: 1367.0,
            lambda t: 100.0,
            CannonballRadiationPressureTargetModel(1.0, 1.3),
        )
        acceleration.update_members(0.0)
        a = acceleration.get_acceleration()
        ```
    """

    def __init__(
        self,
        source_position_function: Callable[[float], ArrayLike],
        accelerated_body_position_function: Callable[[float], ArrayLike],
        irradiance_function: Callable[[float], ArrayLike],
        mass_function: Callable[[float], ArrayLike],
        target_model: RadiationPressureTargetModel,
    ) -> None:
        providers = {
            "source_position_function": source_position_function,
            "accelerated_body_position_function": accelerated_body_position_function,
            "irradiance_function": irradiance_function,
            "mass_function": mass_function,
        }
        for name, provider in providers.items():
            if not callable(provider):
                raise TypeError(f"{name} must be callable, got {type(provider).__name__}")
        if not isinstance(target_model, RadiationPressureTargetModel):
            raise TypeError(
                f"target_model must be a RadiationPressureTargetModel, "
                f"got {type(target_model).__name__}"
            )

        self._source_position_function = source_position_function
        self._accelerated_body_position_function = accelerated_body_position_function
        self._irradiance_function = irradiance_function
        self._mass_function = mass_function
        self._target_model = target_model

        self._current_time = math.nan
        self._current_acceleration = None
        self._current_unit_vector_to_source = None
        self._current_distance_to_source = None
        self._current_irradiance = None
        self._current_mass = None

    def update_members(self, current_time: float = math.nan) -> None:
        """Update the cached acceleration to *current_time* [s].

        Does nothing if the acceleration was already computed for
        *current_time*.  A NaN time (the default) always recomputes.

        Args:
            current_time: Current simulation time [s].
        """
        if self._current_time == current_time:
            return

        _float = get_dtype()
        vector_to_source = jnp.asarray(
            self._source_position_function(current_time), dtype=_float
        ) - jnp.asarray(self._accelerated_body_position_function(current_time), dtype=_float)
        distance_to_source = jnp.linalg.norm(vector_to_source)
        unit_vector_to_source = vector_to_source / distance_to_source

        irradiance = jnp.asarray(self._irradiance_function(current_time), dtype=_float)
        mass = jnp.asarray(self._mass_function(current_time), dtype=_float)

        self._target_model.update_members(current_time)
        force = self._target_model.evaluate_radiation_pressure_force(
            irradiance, -unit_vector_to_source
        )

        self._current_acceleration = force / mass
        self._current_unit_vector_to_source = unit_vector_to_source
        self._current_distance_to_source = distance_to_source
        self._current_irradiance = irradiance
        self._current_mass = mass
        self._current_time = current_time

        logger.debug(
            "Updated radiation pressure acceleration at t=%s (distance %s m, irradiance %s W/m^2)",
            current_time,
            distance_to_source,
            irradiance,
        )

    def get_acceleration(self) -> Array:
        """Acceleration computed by the last update [m/s^2].

        Returns:
            jax.Array: Acceleration, shape ``(3,)``.

        Raises:
            RuntimeError: If :meth:`update_members` was never called.
        """
        if self._current_acceleration is None:
            raise RuntimeError(
                "Radiation pressure acceleration not computed; call update_members first"
            )
        return self._current_acceleration

    # ------------------------------------------------------------------
    # Cached quantities of the last update
    # ------------------------------------------------------------------

    @property
    def current_time(self) -> float:
        """Time of the last update [s], NaN if never updated."""
        return self._current_time

    @property
    def target_model(self) -> RadiationPressureTargetModel:
        """Target model of the accelerated body."""
        return self._target_model

    @property
    def current_unit_vector_to_source(self) -> Array | None:
        """Unit vector from the accelerated body to the source."""
        return self._current_unit_vector_to_source

    @property
    def current_distance_to_source(self) -> Array | None:
        """Distance from the accelerated body to the source [m]."""
        return self._current_distance_to_source

    @property
    def current_irradiance(self) -> Array | None:
        """Irradiance at the accelerated body [W/m^2]."""
        return self._current_irradiance

    @property
    def current_radiation_pressure(self) -> Array | None:
        """Radiation pressure at the accelerated body [N/m^2]."""
        if self._current_irradiance is None:
            return None
        return self._current_irradiance / get_dtype()(C_LIGHT)

    @property
    def current_mass(self) -> Array | None:
        """Mass of the accelerated body [kg]."""
        return self._current_mass
