from math import floor

from solarcalc.util.constants import J2000_JD, DAYS_PER_CENTURY, HOURS_PER_DAY

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from solarcalc.core.location import GeoLocation
    from solarcalc.core.timepoint import TimePoint


def computeJulianDay(time: 'TimePoint') -> float:
    """Returns the Julian day number at 0 hours of the calendar day of time. The time of day is not included."""

    year = time.year
    month = time.month
    if month <= 2:
        year -= 1
        month += 12

    A = floor(year / 100)
    B = 2 - A + floor(A / 4)

    return floor(365.25 * (year + 4716)) + floor(30.6001 * (month + 1)) + time.day + B - 1524.5


def computeTimeDecimal(time: 'TimePoint') -> float:
    return time.timeDecimal()


def computeUtcOffset(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Returns hours, with the daylight-saving offset only if the location observes it.

    return time.utcOffsetHours(geo.useDaylightSaving)


def computeJulianCentury(geo: 'GeoLocation', time: 'TimePoint') -> float:
    """Computes the number of Julian centuries since J2000.0 at a local time. The offset to UTC is taken from time, with
    its daylight-saving part only applied if geo uses daylight-saving."""

    jd = computeJulianDay(time)
    dayFraction = (time.timeDecimal() - computeUtcOffset(geo, time)) / HOURS_PER_DAY

    return (jd + dayFraction - J2000_JD) / DAYS_PER_CENTURY
