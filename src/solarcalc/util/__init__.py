from .constants import (
    J2000_JD,
    DAYS_PER_CENTURY,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MINUTES_PER_DAY,
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
    MILLISECONDS_PER_HOUR,
    DEGREES_PER_HOUR,
    MINUTES_PER_DEGREE,
    ARCSECONDS_PER_DEGREE,
    SOLAR_CONSTANT,
    SUNRISE_ZENITH,
)

from .helpers import (
    wrapDegrees,
    signum,
    safeDivide,
    computeHourMinSec,
)

from .trig import (
    sinD,
    cosD,
    tanD,
    asinD,
    acosD,
)

__all__ = (
    # constants.py
    'J2000_JD',
    'DAYS_PER_CENTURY',
    'HOURS_PER_DAY',
    'MINUTES_PER_HOUR',
    'MINUTES_PER_DAY',
    'SECONDS_PER_MINUTE',
    'SECONDS_PER_HOUR',
    'MILLISECONDS_PER_HOUR',
    'DEGREES_PER_HOUR',
    'MINUTES_PER_DEGREE',
    'ARCSECONDS_PER_DEGREE',
    'SOLAR_CONSTANT',
    'SUNRISE_ZENITH',

    # helpers.py
    'wrapDegrees',
    'signum',
    'safeDivide',
    'computeHourMinSec',

    # trig.py
    'sinD',
    'cosD',
    'tanD',
    'asinD',
    'acosD',
)
