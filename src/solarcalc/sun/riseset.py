import logging
from enum import IntEnum
from math import isnan, nan

from solarcalc.core.exceptions import InvalidInputError
from solarcalc.core.juliandate import computeUtcOffset
from solarcalc.sun.position import computeSolarDeclination, computeEquationOfTime
from solarcalc.util.constants import SUNRISE_ZENITH, MINUTES_PER_DAY, MINUTES_PER_HOUR, MINUTES_PER_DEGREE, \
    DEGREES_PER_HOUR
from solarcalc.util.helpers import safeDivide
from solarcalc.util.trig import cosD, tanD, acosD

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from solarcalc.core.location import GeoLocation
    from solarcalc.core.timepoint import TimePoint

logger = logging.getLogger(__name__)

_NOON_MINUTES = MINUTES_PER_DAY / 2


class RiseSet(IntEnum):
    SUNRISE = 1
    SUNSET = -1


SUNRISE = RiseSet.SUNRISE
SUNSET = RiseSet.SUNSET


def computeSolarNoon(geo: 'GeoLocation', time: 'TimePoint') -> float:
    """Computes solar noon on the day of time in minutes after UTC midnight.

    The first pass seeds the clock from the longitude alone, the second re-evaluates the equation of time at the first
    estimate. Exactly two passes are made, this is the NOAA approximation and is not iterated to convergence."""

    seeded = time.withTimeDecimal(geo.longitude / DEGREES_PER_HOUR)
    eqTime = computeEquationOfTime(geo, seeded)
    solarNoonUtc = _NOON_MINUTES - MINUTES_PER_DEGREE * geo.longitude - eqTime

    seeded = seeded.withTimeDecimal(solarNoonUtc / MINUTES_PER_HOUR - 12)
    eqTime = computeEquationOfTime(geo, seeded)

    return _NOON_MINUTES - MINUTES_PER_DEGREE * geo.longitude - eqTime


def computeSolarNoonLocal(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Returns solar noon in local decimal hours.

    return computeSolarNoon(geo, time) / MINUTES_PER_HOUR + computeUtcOffset(geo, time)


def computeSunriseHourAngle(geo: 'GeoLocation', time: 'TimePoint') -> float:
    """Computes the hour-angle of sunrise in degrees, the negative of which is the hour-angle of sunset. Returns nan if
    the sun doesn't rise or set on the day of time at the location."""

    declination = computeSolarDeclination(geo, time)
    ratio = safeDivide(cosD(SUNRISE_ZENITH), cosD(geo.latitude) * cosD(declination))

    return acosD(ratio - tanD(geo.latitude) * tanD(declination))


def _computeRiseSetMinutes(geo: 'GeoLocation', time: 'TimePoint', direction: RiseSet) -> float:
    eqTime = computeEquationOfTime(geo, time)
    hourAngle = computeSunriseHourAngle(geo, time) * direction
    delta = -geo.longitude - hourAngle

    return _NOON_MINUTES + MINUTES_PER_DEGREE * delta - eqTime


def computeSunriseSunset(geo: 'GeoLocation', time: 'TimePoint', direction: RiseSet | int) -> float:
    """Computes the time of sunrise or sunset on the day of time, in local decimal hours. Direction is SUNRISE (+1) or
    SUNSET (-1).

    Starting from solar noon, the time is estimated and then refined once at the estimate, two passes in total. If the
    estimate is nan the second pass is made at midnight of the same day. The result is nan if the sun is up or down
    all day (polar day or night)."""

    try:
        direction = RiseSet(direction)
    except ValueError:
        raise InvalidInputError(f'direction must be SUNRISE (1) or SUNSET (-1), not {direction}') from None

    noon = computeSolarNoon(geo, time)
    seeded = time.withTimeDecimal(noon / MINUTES_PER_HOUR)
    timeUtc = _computeRiseSetMinutes(geo, seeded, direction)

    # A nan estimate re-seeds at midnight, the second pass can still find the first or last sunrise of a season.
    seeded = seeded.withTimeDecimal(0 if isnan(timeUtc) else timeUtc / MINUTES_PER_HOUR)
    timeUtc = _computeRiseSetMinutes(geo, seeded, direction)
    if isnan(timeUtc):
        logger.debug('no %s at %s on %s', direction.name.lower(), geo, time)
        return nan

    return timeUtc / MINUTES_PER_HOUR + computeUtcOffset(geo, seeded)


def computeSunrise(geo: 'GeoLocation', time: 'TimePoint') -> float:
    return computeSunriseSunset(geo, time, SUNRISE)


def computeSunset(geo: 'GeoLocation', time: 'TimePoint') -> float:
    return computeSunriseSunset(geo, time, SUNSET)


def computeDayLength(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Hours between sunrise and sunset, nan during polar day or night.

    return computeSunset(geo, time) - computeSunrise(geo, time)


def isDaylight(geo: 'GeoLocation', time: 'TimePoint') -> bool:
    """Returns True if time falls between sunrise and sunset of its day. During polar day or night both times are nan
    and this is always False."""

    sunrise = computeSunrise(geo, time)
    sunset = computeSunset(geo, time)

    return sunrise < time.timeDecimal() < sunset
