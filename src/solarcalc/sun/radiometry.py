from solarcalc.core.juliandate import computeJulianCentury
from solarcalc.sun.orbital import computeRadiusVector
from solarcalc.sun.position import computeSolarZenith
from solarcalc.util.constants import SOLAR_CONSTANT
from solarcalc.util.trig import sinD, cosD

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from solarcalc.core.location import GeoLocation
    from solarcalc.core.timepoint import TimePoint


def computeAirMassFromZenith(zenith: float) -> float:
    """Computes the relative optical air mass for a solar zenith angle in degrees. The sun below the horizon
    (zenith >= 90) returns 0, which is a sentinel rather than a physical air mass."""

    if not zenith < 90:
        return 0.0

    c = cosD(zenith)
    numerator = 1.002432 * pow(c, 2) + 0.148386 * c + 0.0096467
    denominator = pow(c, 3) + 0.149864 * pow(c, 2) + 0.0102963 * c + 0.000303978

    return numerator / denominator


def computeAirMass(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Air mass along the refracted line of sight.

    return computeAirMassFromZenith(computeSolarZenith(geo, time))


def computeExtraterrestrialIrradiance(time: 'TimePoint') -> float:
    """Computes the solar irradiance at the top of the atmosphere in W/m^2, from the day of the year in UTC. The
    conversion to UTC works on a copy, time is never modified."""

    dayOfYear = time.utcDayOfYear()
    theta = 360 * dayOfYear / 365

    return SOLAR_CONSTANT * (1.00011 + 0.034221 * cosD(theta) + 0.00128 * sinD(theta)
                             + 0.000719 * cosD(2 * theta) + 0.000077 * sinD(2 * theta))


def computeSunDistance(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Returns the Earth-sun distance in astronomical units.

    return computeRadiusVector(computeJulianCentury(geo, time))
