"""Compute the position of the sun and related radiometric quantities for a location and local time.

This package implements the NOAA low-precision solar position algorithm, a truncated series approximation of the
sun's orbit that is accurate to about a minute of time and a few hundredths of a degree for dates near the present.
From a location and a local time it computes the solar declination, the equation of time, the hour-angle, the
zenith and azimuth angles (optionally corrected for atmospheric refraction), the air mass, the extraterrestrial
irradiance and the times of solar noon, sunrise and sunset.

Usage
_____

Locations and times are immutable value types. Times are local calendar instants carrying their UTC offset (and
daylight-saving offset) in hours.

>>> from solarcalc import GeoLocation, TimePoint, computeSolarZenith, computeSunrise
>>>
>>> boulder = GeoLocation(40.0150, -105.2705)
>>> time = TimePoint(2023, 6, 21, 12, 0, 0, utcOffset=-7, dstOffset=1)
>>> zenith = computeSolarZenith(boulder, time)
>>> sunrise = computeSunrise(boulder, time) # local decimal hours

A SolarCalculator binds the computations to a single location.

>>> from solarcalc import SolarCalculator
>>>
>>> calculator = SolarCalculator(boulder)
>>> angles = calculator.angles(time)
>>> print(angles.declination, angles.azimuth)

Angles the algorithm can't define, like the sunrise hour-angle during polar day or night, or the azimuth of a sun
exactly overhead, are returned as nan rather than raising an exception. Malformed inputs raise InvalidInputError.
"""

import logging

__all__ = []

# import subpackages
from .core import *
__all__ += core.__all__
from .sun import *
__all__ += sun.__all__
from .util import *
__all__ += util.__all__

# import modules
from .calculator import SolarCalculator
__all__ += ['SolarCalculator']

logging.getLogger(__name__).addHandler(logging.NullHandler())
