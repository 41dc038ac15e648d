"""Reflection laws describing how a surface scatters incident radiation.

A reflection law provides two quantities:

- the *reflected fraction* (bidirectional reflectance) towards an
  observer, used for brightness and albedo diagnostics, and
- the *reaction vector*, the force exerted on a unit area of the surface
  per unit of incident radiation pressure, used for radiation pressure.

:class:`SpecularDiffuseMixReflectionLaw` splits incident radiation into a
specularly reflected, a diffusely (Lambertian) reflected and an absorbed
part, optionally re-emitting the absorbed energy instantaneously as
Lambertian thermal radiation.

Reflection laws are frozen dataclasses: immutable after construction,
compared and hashed by value, and safe to share between panels and
threads.

References:
    1. C. J. Wetterer et al., *Refining space object radiation pressure
       modeling with bidirectional reflectance distribution functions*,
       Journal of Guidance, Control, and Dynamics, 2014.
    2. O. Montenbruck et al., *Enhanced solar radiation pressure modeling
       for Galileo satellites*, Journal of Geodesy, 2015.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from radjax.config import get_dtype, get_reflection_epsilon
from radjax.constants import LAMBERTIAN_FACTOR
from radjax.electromagnetism.reflection import compute_mirrorlike_reflection

_SUM_TOLERANCE = 1e-12
"""Allowed deviation of the summed optical coefficients from one."""


class ReflectionLaw(ABC):
    """Interface for surface reflection laws.

    Directions are unit vectors expressed in the same frame as the surface
    normal.  *incoming_direction* is the direction of travel of the
    radiation (from the source towards the surface) and
    *observer_direction* points from the surface towards the observer.
    """

    @abstractmethod
    def evaluate_reflected_fraction(
        self,
        surface_normal: ArrayLike,
        incoming_direction: ArrayLike,
        observer_direction: ArrayLike,
    ) -> Array:
        """Fraction of incident radiation reflected towards the observer [1/sr]."""

    @abstractmethod
    def evaluate_reaction_vector(
        self,
        surface_normal: ArrayLike,
        incoming_direction: ArrayLike,
    ) -> Array:
        """Reaction vector of the surface for the given incidence."""


@dataclass(frozen=True)
class SpecularDiffuseMixReflectionLaw(ReflectionLaw):
    """Mix of specular reflection, Lambertian diffuse reflection and absorption.

    Args:
        absorptivity: Fraction of incident energy absorbed [dimensionless].
        specular_reflectivity: Fraction of incident energy reflected
            specularly [dimensionless].
        diffuse_reflectivity: Fraction of incident energy reflected
            diffusely [dimensionless].
        with_instantaneous_lambertian_reradiation: If ``True``, absorbed
            energy is re-emitted immediately as Lambertian radiation,
            adding a reaction along the inward normal.

    Raises:
        ValueError: If a coefficient lies outside ``[0, 1]`` or the three
            coefficients do not sum to one.

    Examples:
        ```python
        import jax.numpy as jnp
        from radjax.electromagnetism import SpecularDiffuseMixReflectionLaw
        law = SpecularDiffuseMixReflectionLaw(0.2, 0.4, 0.4)
        law.evaluate_reaction_vector(
            jnp.array([0.0, 0.0, 1.0]), jnp.array([0.0, 0.0, -1.0])
        )
        ```
    """

    absorptivity: float
    specular_reflectivity: float
    diffuse_reflectivity: float
    with_instantaneous_lambertian_reradiation: bool = False

    def __post_init__(self) -> None:
        # Plain Python scalars keep the law hashable when built from jax arrays
        object.__setattr__(
            self,
            "with_instantaneous_lambertian_reradiation",
            bool(self.with_instantaneous_lambertian_reradiation),
        )
        for name in ("absorptivity", "specular_reflectivity", "diffuse_reflectivity"):
            value = float(getattr(self, name))
            object.__setattr__(self, name, value)
            if not -_SUM_TOLERANCE <= value <= 1.0 + _SUM_TOLERANCE:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

        total = self.absorptivity + self.specular_reflectivity + self.diffuse_reflectivity
        if abs(total - 1.0) > _SUM_TOLERANCE:
            raise ValueError(
                f"absorptivity + specular_reflectivity + diffuse_reflectivity "
                f"must equal 1, got {total}"
            )

    def evaluate_reflected_fraction(
        self,
        surface_normal: ArrayLike,
        incoming_direction: ArrayLike,
        observer_direction: ArrayLike,
    ) -> Array:
        """Bidirectional reflectance towards an observer [1/sr].

        Zero if the radiation strikes the back face or the observer is
        behind the surface.  The diffuse part ``diffuse_reflectivity / pi``
        is seen from every direction in front of the surface.  The
        specular part ``specular_reflectivity / cos(incidence)`` is only
        added when the observer lies on the mirrored path of the incident
        radiation; this is a Dirac-delta idealization, so the match uses
        the dtype-adaptive tolerance of
        :func:`~radjax.config.get_reflection_epsilon` and the result is
        meant for diagnostics rather than integration over directions.

        Args:
            surface_normal: Unit outward surface normal, shape ``(3,)``.
            incoming_direction: Direction of travel of the incident
                radiation, shape ``(3,)``.
            observer_direction: Direction from the surface to the
                observer, shape ``(3,)``.

        Returns:
            jax.Array: Reflected fraction (scalar, >= 0).
        """
        _float = get_dtype()
        n = jnp.asarray(surface_normal, dtype=_float)
        d_in = jnp.asarray(incoming_direction, dtype=_float)
        d_obs = jnp.asarray(observer_direction, dtype=_float)

        cos_in = jnp.dot(n, -d_in)
        cos_obs = jnp.dot(n, d_obs)
        is_front = (cos_in > _float(0.0)) & (cos_obs > _float(0.0))

        # Wetterer (2014) Eq. 4
        diffuse_reflectance = _float(self.diffuse_reflectivity) / _float(jnp.pi)

        mirror = compute_mirrorlike_reflection(d_in, n)
        mismatch = jnp.linalg.norm(d_obs - mirror)
        scale = jnp.minimum(jnp.linalg.norm(d_obs), jnp.linalg.norm(mirror))
        is_mirrored = mismatch <= _float(get_reflection_epsilon()) * scale

        safe_cos_in = jnp.where(is_front, cos_in, _float(1.0))
        specular_reflectance = jnp.where(
            is_mirrored,
            _float(self.specular_reflectivity) / safe_cos_in,
            _float(0.0),
        )

        return jnp.where(
            is_front, diffuse_reflectance + specular_reflectance, _float(0.0)
        )

    def evaluate_reaction_vector(
        self,
        surface_normal: ArrayLike,
        incoming_direction: ArrayLike,
    ) -> Array:
        """Reaction vector for radiation incident on the surface.

        Scaled by the incident radiation pressure (irradiance divided by
        the speed of light) and the illuminated area, this is the force
        on the surface.  Radiation arriving at the back face (incidence at
        or beyond grazing) produces exactly zero.

        Args:
            surface_normal: Unit outward surface normal, shape ``(3,)``.
            incoming_direction: Direction of travel of the incident
                radiation, shape ``(3,)``.

        Returns:
            jax.Array: Reaction vector, shape ``(3,)``.
        """
        _float = get_dtype()
        n = jnp.asarray(surface_normal, dtype=_float)
        d_in = jnp.asarray(incoming_direction, dtype=_float)

        absorptivity = _float(self.absorptivity)
        specular = _float(self.specular_reflectivity)
        diffuse = _float(self.diffuse_reflectivity)
        lambertian = _float(LAMBERTIAN_FACTOR)

        cos_in = jnp.dot(n, -d_in)

        # Montenbruck (2015) Eq. 5
        reaction_from_incidence = (absorptivity + diffuse) * d_in
        reaction_from_reflection = -(lambertian * diffuse + _float(2.0) * specular * cos_in) * n
        reaction = reaction_from_incidence + reaction_from_reflection

        if self.with_instantaneous_lambertian_reradiation:
            # Absorbed energy leaves like diffusely reflected light
            reaction = reaction - (lambertian * absorptivity) * n

        return jnp.where(cos_in > _float(0.0), reaction, jnp.zeros_like(reaction))


def reflection_law_from_specular_and_diffuse_reflectivity(
    specular_reflectivity: float,
    diffuse_reflectivity: float,
    with_instantaneous_lambertian_reradiation: bool = False,
) -> SpecularDiffuseMixReflectionLaw:
    """Create a mix reflection law, absorbing whatever is not reflected.

    Args:
        specular_reflectivity: Specular reflectivity [dimensionless].
        diffuse_reflectivity: Diffuse reflectivity [dimensionless].
        with_instantaneous_lambertian_reradiation: Re-emit absorbed energy
            as Lambertian radiation.

    Returns:
        SpecularDiffuseMixReflectionLaw: Law with
            ``absorptivity = 1 - specular - diffuse``.

    Raises:
        ValueError: If the reflectivities sum to more than one.
    """
    absorptivity = _complement(specular_reflectivity, diffuse_reflectivity)
    return SpecularDiffuseMixReflectionLaw(
        absorptivity,
        specular_reflectivity,
        diffuse_reflectivity,
        with_instantaneous_lambertian_reradiation,
    )


def reflection_law_from_absorptivity_and_diffuse_reflectivity(
    absorptivity: float,
    diffuse_reflectivity: float,
    with_instantaneous_lambertian_reradiation: bool = False,
) -> SpecularDiffuseMixReflectionLaw:
    """Create a mix reflection law, reflecting specularly what is left.

    Args:
        absorptivity: Absorptivity [dimensionless].
        diffuse_reflectivity: Diffuse reflectivity [dimensionless].
        with_instantaneous_lambertian_reradiation: Re-emit absorbed energy
            as Lambertian radiation.

    Returns:
        SpecularDiffuseMixReflectionLaw: Law with
            ``specular_reflectivity = 1 - absorptivity - diffuse``.

    Raises:
        ValueError: If absorptivity and diffuse reflectivity sum to more
            than one.
    """
    specular_reflectivity = _complement(absorptivity, diffuse_reflectivity)
    return SpecularDiffuseMixReflectionLaw(
        absorptivity,
        specular_reflectivity,
        diffuse_reflectivity,
        with_instantaneous_lambertian_reradiation,
    )


def _complement(first: float, second: float) -> float:
    remainder = 1.0 - first - second
    # Round-off below zero, e.g. 1 - 0.9 - 0.1
    if -_SUM_TOLERANCE <= remainder < 0.0:
        return 0.0
    return remainder
