"""Radiation pressure target models.

A target model converts the irradiance arriving from a source and the
direction in which it travels into the force exerted on the target body.
Two variants are provided:

- :class:`CannonballRadiationPressureTargetModel`: a single equivalent
  surface with a reference area and a radiation pressure coefficient.
- :class:`PaneledRadiationPressureTargetModel`: a collection of flat
  panels, each with its own area, orientation and reflection law.

Both follow the same lifecycle.  ``update_members(t)`` is called once per
evaluation time before any force is requested; it refreshes time-dependent
state (such as panel normals) only when *t* differs from the time of the
previous update.  A NaN time always triggers an update, which is the
convention for single-shot evaluations outside a propagation.

All vectors (panel normals, incoming direction, returned force) are
expressed in one common frame.  Forces are in *N*, irradiance in *W/m^2*.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods and
       Applications*, 2012, Sec. 3.4.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from radjax.config import get_dtype
from radjax.constants import C_LIGHT
from radjax.electromagnetism.panel import Panel

logger = logging.getLogger(__name__)


class RadiationPressureTargetModel(ABC):
    """Interface for radiation pressure target models.

    Instances keep a per-instance time cache and must not be shared
    between concurrently propagated arcs.
    """

    def __init__(self) -> None:
        self._current_time = math.nan

    @property
    def current_time(self) -> float:
        """Time of the last update [s], NaN if never updated."""
        return self._current_time

    def update_members(self, current_time: float = math.nan) -> None:
        """Update time-dependent members to *current_time* [s].

        Does nothing if the model was already updated to *current_time*.
        A NaN time (the default) always forces an update.

        Args:
            current_time: Current simulation time [s].
        """
        # NaN never compares equal, so NaN times always recompute
        if not self._current_time == current_time:
            self._update_members(current_time)
            self._current_time = current_time

    def _update_members(self, current_time: float) -> None:
        """Refresh time-dependent state.  No-op for time-invariant models."""

    @abstractmethod
    def evaluate_radiation_pressure_force(
        self,
        irradiance: ArrayLike,
        source_to_target_direction: ArrayLike,
    ) -> Array:
        """Radiation pressure force on the target [N].

        Args:
            irradiance: Irradiance at the target [W/m^2].
            source_to_target_direction: Unit vector along which the
                radiation travels, shape ``(3,)``.

        Returns:
            jax.Array: Force, shape ``(3,)``.
        """


class CannonballRadiationPressureTargetModel(RadiationPressureTargetModel):
    """Single equivalent surface ("cannonball") target model.

    The force is directed along the incident radiation and given by
    ``(irradiance / c) * reference_area * radiation_pressure_coefficient``.
    The model has no time-dependent state.

    Args:
        reference_area: Sun-facing cross-sectional area [m^2].  Must be
            positive.
        radiation_pressure_coefficient: Radiation pressure coefficient
            [dimensionless], typically in ``[0, 2]``.  Must be
            non-negative.

    Raises:
        ValueError: If an argument is outside its valid range.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism import CannonballRadiationPressureTargetModel
        model = CannonballRadiationPressureTargetModel(1.0, 1.3)
        model.update_members()
        f = model.evaluate_radiation_pressure_force(1367.0, jnp.array([1.0, 0.0, 0.0]))
        ```
    """

    def __init__(
        self,
        reference_area: float,
        radiation_pressure_coefficient: float,
    ) -> None:
        super().__init__()
        if not reference_area > 0.0:
            raise ValueError(
                f"reference_area must be positive, got {reference_area}"
            )
        if not radiation_pressure_coefficient >= 0.0:
            raise ValueError(
                f"radiation_pressure_coefficient must be non-negative, "
                f"got {radiation_pressure_coefficient}"
            )
        self._reference_area = float(reference_area)
        self._radiation_pressure_coefficient = float(radiation_pressure_coefficient)

    @property
    def reference_area(self) -> float:
        """Reference area [m^2]."""
        return self._reference_area

    @property
    def radiation_pressure_coefficient(self) -> float:
        """Radiation pressure coefficient [dimensionless]."""
        return self._radiation_pressure_coefficient

    def evaluate_radiation_pressure_force(
        self,
        irradiance: ArrayLike,
        source_to_target_direction: ArrayLike,
    ) -> Array:
        _float = get_dtype()
        d = jnp.asarray(source_to_target_direction, dtype=_float)
        radiation_pressure = jnp.asarray(irradiance, dtype=_float) / _float(C_LIGHT)

        return (
            radiation_pressure
            * _float(self._reference_area)
            * _float(self._radiation_pressure_coefficient)
            * d
        )

    def __repr__(self) -> str:
        return (
            f"CannonballRadiationPressureTargetModel("
            f"reference_area={self._reference_area:.6g}, "
            f"radiation_pressure_coefficient={self._radiation_pressure_coefficient:.6g})"
        )


class PaneledRadiationPressureTargetModel(RadiationPressureTargetModel):
    """Target model built from flat panels.

    Every panel contributes ``(irradiance / c) * area * cos(incidence) *
    reaction``, where ``reaction`` comes from the panel's reflection law
    and ``area * cos(incidence)`` is the area the panel presents to the
    incoming radiation.  Panels facing away from the source contribute
    exactly zero, which is how the back side of a convex body is shadowed
    without any visibility computation.  Shadowing of one panel by another
    is not modelled.

    Panels with value-equal reflection laws are evaluated together in one
    vectorized call; each still uses its own normal.

    Args:
        panels: Panels making up the target.  The order does not affect
            the total force but fixes the indices of per-panel
            diagnostics.

    Raises:
        ValueError: If *panels* is empty.
        TypeError: If an element of *panels* is not a :class:`Panel`.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism import (
            Panel,
            PaneledRadiationPressureTargetModel,
            SpecularDiffuseMixReflectionLaw,
        )
        law = SpecularDiffuseMixReflectionLaw(0.2, 0.4, 0.4)
        model = PaneledRadiationPressureTargetModel([
            Panel(1.0, jnp.array([0.0, 0.0, 1.0]), law),
        ])
        model.update_members()
        f = model.evaluate_radiation_pressure_force(1000.0, jnp.array([0.0, 0.0, -1.0]))
        ```
    """

    def __init__(self, panels: Sequence[Panel]) -> None:
        super().__init__()
        panels = tuple(panels)
        if not panels:
            raise ValueError("A paneled target model requires at least one panel")
        for panel in panels:
            if not isinstance(panel, Panel):
                raise TypeError(f"Expected Panel, got {type(panel).__name__}")

        groups = {}
        for index, panel in enumerate(panels):
            groups.setdefault(panel.reflection_law, []).append(index)

        self._panels = panels
        self._areas = jnp.asarray([panel.area for panel in panels], dtype=get_dtype())
        self._law_groups = tuple(
            (law, jnp.asarray(indices, dtype=jnp.int32))
            for law, indices in groups.items()
        )
        self._surface_normals = None
        self._panel_forces = None

        logger.debug(
            "Created paneled target model with %d panels and %d distinct reflection laws",
            len(panels),
            len(self._law_groups),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _update_members(self, current_time: float) -> None:
        normals = [panel.surface_normal(current_time) for panel in self._panels]
        self._surface_normals = jnp.stack(normals).astype(get_dtype())
        self._panel_forces = None

    def evaluate_radiation_pressure_force(
        self,
        irradiance: ArrayLike,
        source_to_target_direction: ArrayLike,
    ) -> Array:
        if self._surface_normals is None:
            self.update_members()

        _float = get_dtype()
        d = jnp.asarray(source_to_target_direction, dtype=_float)
        radiation_pressure = jnp.asarray(irradiance, dtype=_float) / _float(C_LIGHT)
        normals = self._surface_normals

        if len(self._law_groups) == 1:
            law, _ = self._law_groups[0]
            reactions = jax.vmap(law.evaluate_reaction_vector, in_axes=(0, None))(normals, d)
        else:
            reactions = jnp.zeros_like(normals)
            for law, indices in self._law_groups:
                group_reactions = jax.vmap(law.evaluate_reaction_vector, in_axes=(0, None))(
                    normals[indices], d
                )
                reactions = reactions.at[indices].set(group_reactions)

        cos_in = jnp.maximum(normals @ -d, _float(0.0))
        effective_areas = self._areas * cos_in

        panel_forces = radiation_pressure * effective_areas[:, None] * reactions
        self._panel_forces = panel_forces

        return jnp.sum(panel_forces, axis=0)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    @property
    def panels(self) -> tuple[Panel, ...]:
        """Panels of the target, in construction order."""
        return self._panels

    @property
    def number_of_panels(self) -> int:
        """Number of panels."""
        return len(self._panels)

    @property
    def surface_normals(self) -> Array | None:
        """Panel normals of the last update, shape ``(N, 3)``.  ``None`` before the first update."""
        return self._surface_normals

    @property
    def panel_forces(self) -> Array | None:
        """Per-panel forces of the last evaluation [N], shape ``(N, 3)``.

        ``None`` if no force was evaluated since the last update.
        """
        return self._panel_forces

    def get_panel_force(self, index: int) -> Array:
        """Force on a single panel from the last evaluation [N].

        Args:
            index: Panel index.

        Returns:
            jax.Array: Force, shape ``(3,)``.

        Raises:
            RuntimeError: If no force was evaluated since the last update.
            IndexError: If *index* is out of range.
        """
        if self._panel_forces is None:
            raise RuntimeError(
                "No panel forces available; call evaluate_radiation_pressure_force first"
            )
        if not -len(self._panels) <= index < len(self._panels):
            raise IndexError(
                f"Panel index {index} out of range for {len(self._panels)} panels"
            )
        return self._panel_forces[index]

    def __repr__(self) -> str:
        return (
            f"PaneledRadiationPressureTargetModel(number_of_panels={len(self._panels)}, "
            f"reflection_laws={len(self._law_groups)})"
        )
