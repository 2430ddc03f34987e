from math import degrees

from pyevspace import Vector, vang

from solarcalc.core.exceptions import InvalidInputError
from solarcalc.sun.position import computeSolarDeclination, computeHourAngle
from solarcalc.util.trig import sinD, cosD

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from solarcalc.core.location import GeoLocation
    from solarcalc.core.timepoint import TimePoint


def computeSunVector(geo: 'GeoLocation', time: 'TimePoint') -> Vector:
    """Computes the unit vector pointing to the sun in the topocentric south-east-zenith (SEZ) reference frame. No
    refraction correction is applied."""

    declination = computeSolarDeclination(geo, time)
    hourAngle = computeHourAngle(geo, time)

    south = sinD(geo.latitude) * cosD(declination) * cosD(hourAngle) - cosD(geo.latitude) * sinD(declination)
    east = -cosD(declination) * sinD(hourAngle)
    zenith = sinD(geo.latitude) * sinD(declination) + cosD(geo.latitude) * cosD(declination) * cosD(hourAngle)

    return Vector(south, east, zenith)


def computeSurfaceNormal(tilt: float, surfaceAzimuth: float) -> Vector:
    """Computes the unit normal of a surface in the SEZ reference frame. Tilt is measured from horizontal and the
    azimuth the surface faces is measured from due south, positive toward the west, both in degrees."""

    if not 0 <= tilt <= 180:
        raise InvalidInputError(f'tilt must be between 0 and 180, not {tilt}')

    return Vector(sinD(tilt) * cosD(surfaceAzimuth), -sinD(tilt) * sinD(surfaceAzimuth), cosD(tilt))


def computeIncidenceAngle(geo: 'GeoLocation', time: 'TimePoint', tilt: float, surfaceAzimuth: float) -> float:
    """Computes the angle in degrees between the sun and the normal of a tilted surface. Angles greater than 90
    degrees mean the sun is behind the surface."""

    normal = computeSurfaceNormal(tilt, surfaceAzimuth)
    sunVector = computeSunVector(geo, time)

    return degrees(vang(sunVector, normal))
