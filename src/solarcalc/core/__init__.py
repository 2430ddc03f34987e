from .exceptions import (
    SolarCalcException,
    InvalidInputError,
)

from .juliandate import (
    computeJulianDay,
    computeTimeDecimal,
    computeUtcOffset,
    computeJulianCentury,
)

from .location import (
    GeoLocation,
)

from .timepoint import (
    TimePoint,
)

__all__ = (
    # exceptions.py
    'SolarCalcException',
    'InvalidInputError',

    # juliandate.py
    'computeJulianDay',
    'computeTimeDecimal',
    'computeUtcOffset',
    'computeJulianCentury',

    # location.py
    'GeoLocation',

    # timepoint.py
    'TimePoint',
)
