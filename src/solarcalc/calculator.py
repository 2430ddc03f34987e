from solarcalc.core.juliandate import computeJulianCentury
from solarcalc.core.location import GeoLocation
from solarcalc.sun.position import computeSolarDeclination, computeEquationOfTime, computeHourAngle, \
    computeSolarZenith, computeSolarElevation, computeSolarAzimuth, computeSolarAngles, SolarAngles
from solarcalc.sun.radiometry import computeAirMass, computeExtraterrestrialIrradiance, computeSunDistance
from solarcalc.sun.riseset import computeSolarNoonLocal, computeSunriseSunset, computeSunrise, computeSunset, \
    computeDayLength, isDaylight, RiseSet
from solarcalc.sun.vector import computeSunVector, computeIncidenceAngle

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from pyevspace import Vector
    from solarcalc.core.timepoint import TimePoint


class SolarCalculator:
    """Binds the solar computations to a single location. The location is immutable, so one calculator can be shared
    freely, and each method only needs the time."""

    __slots__ = '_geo',

    def __init__(self, geo: GeoLocation):
        if not isinstance(geo, GeoLocation):
            raise TypeError(f'geo must be a GeoLocation, not {type(geo).__name__}')
        self._geo = geo

    @classmethod
    def fromCoordinates(cls, latitude: float, longitude: float, useDaylightSaving: bool = True) -> 'SolarCalculator':
        return cls(GeoLocation(latitude, longitude, useDaylightSaving))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._geo!r})'

    @property
    def location(self) -> GeoLocation:
        return self._geo

    def julianCentury(self, time: 'TimePoint') -> float:
        return computeJulianCentury(self._geo, time)

    def declination(self, time: 'TimePoint') -> float:
        return computeSolarDeclination(self._geo, time)

    def equationOfTime(self, time: 'TimePoint') -> float:
        return computeEquationOfTime(self._geo, time)

    def hourAngle(self, time: 'TimePoint') -> float:
        return computeHourAngle(self._geo, time)

    def zenith(self, time: 'TimePoint', refraction: bool = True) -> float:
        return computeSolarZenith(self._geo, time, refraction)

    def elevation(self, time: 'TimePoint', refraction: bool = True) -> float:
        return computeSolarElevation(self._geo, time, refraction)

    def azimuth(self, time: 'TimePoint') -> float:
        return computeSolarAzimuth(self._geo, time)

    def angles(self, time: 'TimePoint', refraction: bool = True) -> SolarAngles:
        return computeSolarAngles(self._geo, time, refraction)

    def airMass(self, time: 'TimePoint') -> float:
        return computeAirMass(self._geo, time)

    @staticmethod
    def extraterrestrialIrradiance(time: 'TimePoint') -> float:
        return computeExtraterrestrialIrradiance(time)

    def sunDistance(self, time: 'TimePoint') -> float:
        return computeSunDistance(self._geo, time)

    def solarNoon(self, time: 'TimePoint') -> float:
        return computeSolarNoonLocal(self._geo, time)

    def sunriseSunset(self, time: 'TimePoint', direction: RiseSet | int) -> float:
        return computeSunriseSunset(self._geo, time, direction)

    def sunrise(self, time: 'TimePoint') -> float:
        return computeSunrise(self._geo, time)

    def sunset(self, time: 'TimePoint') -> float:
        return computeSunset(self._geo, time)

    def dayLength(self, time: 'TimePoint') -> float:
        return computeDayLength(self._geo, time)

    def isDaylight(self, time: 'TimePoint') -> bool:
        return isDaylight(self._geo, time)

    def sunVector(self, time: 'TimePoint') -> 'Vector':
        return computeSunVector(self._geo, time)

    def incidenceAngle(self, time: 'TimePoint', tilt: float, surfaceAzimuth: float) -> float:
        return computeIncidenceAngle(self._geo, time, tilt, surfaceAzimuth)
