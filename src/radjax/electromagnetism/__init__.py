"""Radiation pressure models for bodies of arbitrary exterior geometry.

Provides the building blocks of a radiation pressure perturbation:

- **Reflection**: mirror-like reflection of a ray off a surface
- **Reflection laws**: specular/diffuse/absorption mix with optional
  instantaneous Lambertian re-radiation
- **Panels**: flat surface elements with area, normal and reflection law
- **Target models**: cannonball and paneled force models
- **Acceleration**: cached radiation pressure acceleration for propagation
- **Settings and factory**: declarative target descriptions
"""

from .acceleration import RadiationPressureAcceleration
from .config import CannonballTargetSettings, PanelSettings, PaneledTargetSettings
from .factory import (
    create_radiation_pressure_acceleration,
    create_radiation_pressure_target_model,
)
from .panel import Panel
from .reflection import compute_mirrorlike_reflection
from .reflection_law import (
    ReflectionLaw,
    SpecularDiffuseMixReflectionLaw,
    reflection_law_from_absorptivity_and_diffuse_reflectivity,
    reflection_law_from_specular_and_diffuse_reflectivity,
)
from .target_model import (
    CannonballRadiationPressureTargetModel,
    PaneledRadiationPressureTargetModel,
    RadiationPressureTargetModel,
)

__all__ = [
    # Reflection
    "compute_mirrorlike_reflection",
    # Reflection laws
    "ReflectionLaw",
    "SpecularDiffuseMixReflectionLaw",
    "reflection_law_from_specular_and_diffuse_reflectivity",
    "reflection_law_from_absorptivity_and_diffuse_reflectivity",
    # Panels
    "Panel",
    # Target models
    "RadiationPressureTargetModel",
    "CannonballRadiationPressureTargetModel",
    "PaneledRadiationPressureTargetModel",
    # Acceleration
    "RadiationPressureAcceleration",
    # Settings and factory
    "CannonballTargetSettings",
    "PanelSettings",
    "PaneledTargetSettings",
    "create_radiation_pressure_target_model",
    "create_radiation_pressure_acceleration",
]
