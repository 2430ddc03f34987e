import json
from math import degrees, nan

from solarcalc.core.juliandate import computeJulianCentury, computeUtcOffset
from solarcalc.sun.orbital import OrbitalState
from solarcalc.util.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR, MINUTES_PER_DEGREE, ARCSECONDS_PER_DEGREE
from solarcalc.util.helpers import signum, safeDivide
from solarcalc.util.trig import sinD, cosD, tanD, asinD, acosD

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from solarcalc.core.location import GeoLocation
    from solarcalc.core.timepoint import TimePoint


class SolarAngles:
    """The angles describing the sun's position from a location at one instant. Declination, hour-angle, zenith and
    azimuth are in degrees, the equation of time is in minutes. Azimuth is measured from due south, positive toward
    the west."""

    __slots__ = '_declination', '_equationOfTime', '_hourAngle', '_zenith', '_azimuth'

    def __init__(self, declination: float, equationOfTime: float, hourAngle: float, zenith: float, azimuth: float):
        self._declination = declination
        self._equationOfTime = equationOfTime
        self._hourAngle = hourAngle
        self._zenith = zenith
        self._azimuth = azimuth

    def __str__(self) -> str:
        return f'declination: {self._declination}, equation-of-time: {self._equationOfTime}, ' \
               f'hour-angle: {self._hourAngle}, zenith: {self._zenith}, azimuth: {self._azimuth}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._declination}, {self._equationOfTime}, {self._hourAngle}, ' \
               f'{self._zenith}, {self._azimuth})'

    def toDict(self) -> dict:
        return {"declination": self._declination, "equationOfTime": self._equationOfTime,
                "hourAngle": self._hourAngle, "zenith": self._zenith, "azimuth": self._azimuth}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def declination(self) -> float:
        return self._declination

    @property
    def equationOfTime(self) -> float:
        return self._equationOfTime

    @property
    def hourAngle(self) -> float:
        return self._hourAngle

    @property
    def zenith(self) -> float:
        return self._zenith

    @property
    def elevation(self) -> float:
        return 90 - self._zenith

    @property
    def azimuth(self) -> float:
        return self._azimuth


def _computeOrbitalState(geo: 'GeoLocation', time: 'TimePoint') -> OrbitalState:
    return OrbitalState(computeJulianCentury(geo, time))


def _declinationFromState(state: OrbitalState) -> float:
    sint = sinD(state.obliquityCorrection) * sinD(state.apparentLongitude)
    return asinD(sint)


def _equationOfTimeFromState(state: OrbitalState) -> float:
    l0 = state.meanLongitude
    e = state.eccentricity
    m = state.meanAnomaly

    y = tanD(state.obliquityCorrection / 2)
    y *= y
    sin2l0 = sinD(2 * l0)
    sinm = sinD(m)
    cos2l0 = cosD(2 * l0)
    sin4l0 = sinD(4 * l0)
    sin2m = sinD(2 * m)
    eqTime = y * sin2l0 - 2 * e * sinm + 4 * e * y * sinm * cos2l0 - 0.5 * y * y * sin4l0 - 1.25 * e * e * sin2m

    # eqTime is in radians of hour-angle, 4 minutes of time to each degree.
    return degrees(eqTime) * MINUTES_PER_DEGREE


def _trueSolarTimeFromEquation(geo: 'GeoLocation', time: 'TimePoint', eqTime: float) -> float:
    offset = computeUtcOffset(geo, time)
    solarTimeFix = eqTime + MINUTES_PER_DEGREE * geo.longitude - MINUTES_PER_HOUR * offset
    trueSolarTime = time.timeDecimal() * MINUTES_PER_HOUR + solarTimeFix

    return trueSolarTime % MINUTES_PER_DAY


def _hourAngleFromTrueSolarTime(trueSolarTime: float) -> float:
    # trueSolarTime is in [0, 1440), so the hour-angle is in [-180, 180).
    return trueSolarTime / MINUTES_PER_DEGREE - 180


def _zenithFromAngles(geo: 'GeoLocation', declination: float, hourAngle: float) -> float:
    csz = sinD(geo.latitude) * sinD(declination) + cosD(geo.latitude) * cosD(declination) * cosD(hourAngle)
    return acosD(csz)


def _azimuthFromAngles(geo: 'GeoLocation', declination: float, hourAngle: float, zenith: float) -> float:
    # cos(90) isn't exactly zero in floating point, but a pole has no azimuth.
    if abs(geo.latitude) == 90:
        return nan

    numerator = cosD(zenith) * sinD(geo.latitude) - sinD(declination)
    denominator = sinD(zenith) * cosD(geo.latitude)

    return signum(hourAngle) * acosD(safeDivide(numerator, denominator))


def computeSolarDeclination(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Returns the solar declination in degrees.

    return _declinationFromState(_computeOrbitalState(geo, time))


def computeEquationOfTime(geo: 'GeoLocation', time: 'TimePoint') -> float:
    """Computes the equation of time in minutes, the amount true solar time is ahead of mean solar time."""

    return _equationOfTimeFromState(_computeOrbitalState(geo, time))


def computeTrueSolarTime(geo: 'GeoLocation', time: 'TimePoint') -> float:
    """Computes the true (sundial) solar time at the location in minutes after solar midnight, in [0, 1440)."""

    eqTime = computeEquationOfTime(geo, time)
    return _trueSolarTimeFromEquation(geo, time, eqTime)


def computeHourAngle(geo: 'GeoLocation', time: 'TimePoint') -> float:
    # Returns the hour-angle in degrees, negative before solar noon.

    return _hourAngleFromTrueSolarTime(computeTrueSolarTime(geo, time))


def computeRefractionCorrection(elevation: float) -> float:
    """Computes the empirical atmospheric refraction correction in degrees for an unrefracted solar elevation in
    degrees. The correction is piecewise and is not continuous at the boundaries of each piece."""

    te = tanD(elevation)
    if elevation <= -0.575:
        correction = -20.774 / te
    elif elevation <= 5:
        correction = 1735 + elevation * (-518.2 + elevation * (103.4 + elevation * (-12.79 + elevation * 0.711)))
    elif elevation <= 85:
        correction = 58.1 / te - 0.07 / pow(te, 3) + 0.000086 / pow(te, 5)
    else:
        correction = 0

    return correction / ARCSECONDS_PER_DEGREE


def computeSolarZenith(geo: 'GeoLocation', time: 'TimePoint', refraction: bool = True) -> float:
    """Computes the solar zenith angle in degrees. If refraction is True the apparent zenith, corrected for
    atmospheric refraction, is returned."""

    state = _computeOrbitalState(geo, time)
    declination = _declinationFromState(state)
    hourAngle = _hourAngleFromTrueSolarTime(_trueSolarTimeFromEquation(geo, time, _equationOfTimeFromState(state)))
    zenith = _zenithFromAngles(geo, declination, hourAngle)

    if refraction:
        zenith -= computeRefractionCorrection(90 - zenith)

    return zenith


def computeSolarElevation(geo: 'GeoLocation', time: 'TimePoint', refraction: bool = True) -> float:
    return 90 - computeSolarZenith(geo, time, refraction)


def computeSolarAzimuth(geo: 'GeoLocation', time: 'TimePoint') -> float:
    """Computes the solar azimuth in degrees measured from due south, negative toward the east (morning) and positive
    toward the west (afternoon). The zenith used here is never corrected for refraction. The result is nan when the
    sun is exactly overhead or the location is at a pole."""

    state = _computeOrbitalState(geo, time)
    declination = _declinationFromState(state)
    hourAngle = _hourAngleFromTrueSolarTime(_trueSolarTimeFromEquation(geo, time, _equationOfTimeFromState(state)))
    zenith = _zenithFromAngles(geo, declination, hourAngle)

    return _azimuthFromAngles(geo, declination, hourAngle, zenith)


def computeSolarAngles(geo: 'GeoLocation', time: 'TimePoint', refraction: bool = True) -> SolarAngles:
    """Computes all the solar angles from a single evaluation of the orbital elements. The refraction flag only
    applies to the zenith, the azimuth is always computed from the unrefracted zenith."""

    state = _computeOrbitalState(geo, time)
    declination = _declinationFromState(state)
    eqTime = _equationOfTimeFromState(state)
    hourAngle = _hourAngleFromTrueSolarTime(_trueSolarTimeFromEquation(geo, time, eqTime))
    zenith = _zenithFromAngles(geo, declination, hourAngle)
    azimuth = _azimuthFromAngles(geo, declination, hourAngle, zenith)

    if refraction:
        zenith -= computeRefractionCorrection(90 - zenith)

    return SolarAngles(declination, eqTime, hourAngle, zenith, azimuth)
