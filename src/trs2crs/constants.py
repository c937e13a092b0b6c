"""
The `constants` module defines the mathematical, time and Earth-rotation constants used by the
terrestrial-to-celestial transformation.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Two times pi. Units: *rad*
"""
D2PI = 6.283185307179586476925287

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 4.848136811095359935899141e-6

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
Constant to convert microarcseconds to radians. Units: *rad/uas*
"""
UAS2RAD = AS2RAD * 1.0e-6

"""
Constant to convert milliarcseconds to radians. Units: *rad/mas*
"""
MAS2RAD = AS2RAD * 1.0e-3

"""
Arcseconds in a full circle. Units: *as*
"""
TURNAS = 1296000.0

# Time Constants

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
DJ00 = 2451545.0

"""
Modified Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
MJD2000 = 51544.5

"""
Days per Julian century. Units: *days*
"""
DJC = 36525.0

"""
Seconds per day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0

"""
Offset of Terrestrial Time from International Atomic Time. Units: *s*
"""
TT_TAI = 32.184

# Earth Rotation Constants

"""
Ratio of the Earth rotation angle rate to the UT1 day rate. Units: *turns/UT1 day*

References:

1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010, Eq. (5.15)
"""
ERA_RATE = 1.00273781191135448

"""
Earth rotation angle at J2000.0 UT1. Units: *turns*

References:

1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010, Eq. (5.15)
"""
ERA_J2000 = 0.7790572732640

"""
Rate of change of the Earth rotation angle with UT1. Units: *rad/s*
"""
DERA_DUT1 = D2PI * ERA_RATE / SECONDS_PER_DAY

"""
Nominal Earth rotation rate. Units: *rad/s*

References:

1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010, Ch. 8
"""
OMEGA_EARTH = 7.292115e-5
