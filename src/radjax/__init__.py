"""
radjax models radiation pressure forces on bodies of arbitrary geometry, implemented in JAX.
"""

from .constants import (
    C_LIGHT,
    AU,
    SOLAR_CONSTANT,
    P_SUN,
    LAMBERTIAN_FACTOR,
)

from .config import set_dtype, get_dtype, get_reflection_epsilon

from .geometry import (
    Rx,
    Ry,
    Rz,
    position_spherical_to_cartesian,
    evenly_spaced_sphere_points,
    rotating_normal_function,
)

from .electromagnetism import (
    compute_mirrorlike_reflection,
    ReflectionLaw,
    SpecularDiffuseMixReflectionLaw,
    reflection_law_from_specular_and_diffuse_reflectivity,
    reflection_law_from_absorptivity_and_diffuse_reflectivity,
    Panel,
    RadiationPressureTargetModel,
    CannonballRadiationPressureTargetModel,
    PaneledRadiationPressureTargetModel,
    RadiationPressureAcceleration,
    CannonballTargetSettings,
    PanelSettings,
    PaneledTargetSettings,
    create_radiation_pressure_target_model,
    create_radiation_pressure_acceleration,
)

__all__ = [
    # Constants
    "C_LIGHT",
    "AU",
    "SOLAR_CONSTANT",
    "P_SUN",
    "LAMBERTIAN_FACTOR",
    # Config
    "set_dtype",
    "get_dtype",
    "get_reflection_epsilon",
    # Geometry
    "Rx",
    "Ry",
    "Rz",
    "position_spherical_to_cartesian",
    "evenly_spaced_sphere_points",
    "rotating_normal_function",
    # Electromagnetism
    "compute_mirrorlike_reflection",
    "ReflectionLaw",
    "SpecularDiffuseMixReflectionLaw",
    "reflection_law_from_specular_and_diffuse_reflectivity",
    "reflection_law_from_absorptivity_and_diffuse_reflectivity",
    "Panel",
    "RadiationPressureTargetModel",
    "CannonballRadiationPressureTargetModel",
    "PaneledRadiationPressureTargetModel",
    "RadiationPressureAcceleration",
    "CannonballTargetSettings",
    "PanelSettings",
    "PaneledTargetSettings",
    "create_radiation_pressure_target_model",
    "create_radiation_pressure_acceleration",
]
