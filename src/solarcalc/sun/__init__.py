from .orbital import (
    computeMeanLongitude,
    computeMeanAnomaly,
    computeEccentricity,
    computeEquationOfCenter,
    computeTrueLongitude,
    computeTrueAnomaly,
    computeRadiusVector,
    computeApparentLongitude,
    computeMeanObliquity,
    computeObliquityCorrection,
    OrbitalState,
)

from .position import (
    SolarAngles,
    computeSolarDeclination,
    computeEquationOfTime,
    computeTrueSolarTime,
    computeHourAngle,
    computeRefractionCorrection,
    computeSolarZenith,
    computeSolarElevation,
    computeSolarAzimuth,
    computeSolarAngles,
)

from .radiometry import (
    computeAirMassFromZenith,
    computeAirMass,
    computeExtraterrestrialIrradiance,
    computeSunDistance,
)

from .riseset import (
    RiseSet,
    SUNRISE,
    SUNSET,
    computeSolarNoon,
    computeSolarNoonLocal,
    computeSunriseHourAngle,
    computeSunriseSunset,
    computeSunrise,
    computeSunset,
    computeDayLength,
    isDaylight,
)

from .vector import (
    computeSunVector,
    computeSurfaceNormal,
    computeIncidenceAngle,
)

__all__ = (
    # orbital.py
    'computeMeanLongitude',
    'computeMeanAnomaly',
    'computeEccentricity',
    'computeEquationOfCenter',
    'computeTrueLongitude',
    'computeTrueAnomaly',
    'computeRadiusVector',
    'computeApparentLongitude',
    'computeMeanObliquity',
    'computeObliquityCorrection',
    'OrbitalState',

    # position.py
    'SolarAngles',
    'computeSolarDeclination',
    'computeEquationOfTime',
    'computeTrueSolarTime',
    'computeHourAngle',
    'computeRefractionCorrection',
    'computeSolarZenith',
    'computeSolarElevation',
    'computeSolarAzimuth',
    'computeSolarAngles',

    # radiometry.py
    'computeAirMassFromZenith',
    'computeAirMass',
    'computeExtraterrestrialIrradiance',
    'computeSunDistance',

    # riseset.py
    'RiseSet',
    'SUNRISE',
    'SUNSET',
    'computeSolarNoon',
    'computeSolarNoonLocal',
    'computeSunriseHourAngle',
    'computeSunriseSunset',
    'computeSunrise',
    'computeSunset',
    'computeDayLength',
    'isDaylight',

    # vector.py
    'computeSunVector',
    'computeSurfaceNormal',
    'computeIncidenceAngle',
)
