import json
from math import isfinite
from numbers import Real

from solarcalc.core.exceptions import InvalidInputError


def _checkReal(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f'{name} must be a real number, not {type(value).__name__}')
    if not isfinite(value):
        raise InvalidInputError(f'{name} must be finite, not {value}')

    return float(value)


class GeoLocation:
    """An immutable geographic location. Latitude is north positive and longitude is east positive, both in degrees.
    The useDaylightSaving flag decides if a TimePoint's daylight-saving offset is applied when converting its local
    time to UTC."""

    __slots__ = '_lat', '_lng', '_dst'

    def __init__(self, latitude: float, longitude: float, useDaylightSaving: bool = True):
        latitude = _checkReal('latitude', latitude)
        longitude = _checkReal('longitude', longitude)
        if latitude < -90 or latitude > 90:
            raise InvalidInputError(f'latitude must be between -90 and 90, not {latitude}')
        if longitude < -180 or longitude > 180:
            raise InvalidInputError(f'longitude must be between -180 and 180, not {longitude}')

        self._lat = latitude
        self._lng = longitude
        self._dst = bool(useDaylightSaving)

    def __str__(self) -> str:
        return f'latitude: {self._lat}, longitude: {self._lng}, daylight-saving: {self._dst}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._lat}, {self._lng}, {self._dst})'

    def __eq__(self, other: 'GeoLocation') -> bool:
        if isinstance(other, GeoLocation):
            return (self._lat, self._lng, self._dst) == (other._lat, other._lng, other._dst)
        return NotImplemented

    def __hash__(self):
        return hash((self._lat, self._lng, self._dst))

    def __reduce__(self):
        return self.__class__, (self._lat, self._lng, self._dst)

    def toDict(self) -> dict:
        return {"latitude": self._lat, "longitude": self._lng, "useDaylightSaving": self._dst}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    # read-only properties
    @property
    def latitude(self) -> float:
        return self._lat

    @property
    def longitude(self) -> float:
        return self._lng

    @property
    def useDaylightSaving(self) -> bool:
        return self._dst
