"""
The `constants` module defines the physical constants used by the radiation pressure models.
"""

# Physical Constants
"""
Speed of light in vacuum. Units: *m/s*

References:

1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2010
"""
C_LIGHT = 299792458.0  # [m/s] Exact definition Vallado

"""
Astronomical Unit. Equal to the mean distance of the Earth from the sun.
TDB-compatible value. Units: *m*

References:

1. P. Gérard and B. Luzum, *IERS Technical Note 36*, 2010
"""
AU = 1.49597870700e11  # [m] Astronomical Unit IAU 2010

# Sun Constants
"""
Solar constant, the total solar irradiance at 1 AU. [W/m^2]

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
Applications*, 2012, Eq. (3.69).
"""
SOLAR_CONSTANT = 1367.0  # [W/m^2]

"""
Nominal solar radiation pressure at 1 AU. [N/m^2]

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
Applications*, 2012.
"""
P_SUN = 4.560e-6  # [N/m^2] (~1367 W/m^2) Solar radiation pressure at 1 AU

# Reflection Constants
"""
Lambertian diffuse reflection yields a normal reaction of 2/3 of the
reflected momentum. [dimensionless]

References:

1. O. Montenbruck et al., *Enhanced solar radiation pressure modeling for
Galileo satellites*, Journal of Geodesy, 2015.
"""
LAMBERTIAN_FACTOR = 2.0 / 3.0
