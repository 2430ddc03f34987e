from solarcalc.util.helpers import wrapDegrees
from solarcalc.util.trig import sinD, cosD


# All functions take the time as Julian centuries since J2000.0 and return degrees unless noted.

def computeMeanLongitude(century: float) -> float:
    # Geometric mean longitude of the sun, wrapped into [0, 360).

    return wrapDegrees(280.46646 + century * (36000.76983 + 0.0003032 * century))


def computeMeanAnomaly(century: float) -> float:
    # Geometric mean anomaly of the sun, not wrapped.

    return 357.52911 + century * (35999.05029 - 0.0001537 * century)


def computeEccentricity(century: float) -> float:
    # Eccentricity of the Earth's orbit, unitless.

    return 0.016708634 - century * (0.000042037 + 0.0000001267 * century)


def computeEquationOfCenter(century: float) -> float:
    anomaly = computeMeanAnomaly(century)

    return sinD(anomaly) * (1.914602 - century * (0.004817 + 0.000014 * century)) \
        + sinD(2 * anomaly) * (0.019993 - 0.000101 * century) \
        + sinD(3 * anomaly) * 0.000289


def computeTrueLongitude(century: float) -> float:
    return computeMeanLongitude(century) + computeEquationOfCenter(century)


def computeTrueAnomaly(century: float) -> float:
    return computeMeanAnomaly(century) + computeEquationOfCenter(century)


def computeRadiusVector(century: float) -> float:
    # Distance from the Earth to the sun in astronomical units.

    eccentricity = computeEccentricity(century)
    trueAnomaly = computeTrueAnomaly(century)

    return (1.000001018 * (1 - eccentricity * eccentricity)) / (1 + eccentricity * cosD(trueAnomaly))


def _computeAscendingNode(century: float) -> float:
    # Longitude of the moon's ascending node, used by the first order nutation and aberration terms.

    return 125.04 - 1934.136 * century


def computeApparentLongitude(century: float) -> float:
    """Computes the apparent longitude of the sun, the true longitude corrected for nutation and aberration."""

    omega = _computeAscendingNode(century)
    return computeTrueLongitude(century) - 0.00569 - 0.00478 * sinD(omega)


def computeMeanObliquity(century: float) -> float:
    """Computes the mean obliquity of the ecliptic. The polynomial gives the arc-seconds beyond 23 degrees and 26
    arc-minutes."""

    seconds = 21.448 - century * (46.8150 + century * (0.00059 - century * 0.001813))
    return 23 + (26 + seconds / 60) / 60


def computeObliquityCorrection(century: float) -> float:
    omega = _computeAscendingNode(century)
    return computeMeanObliquity(century) + 0.00256 * cosD(omega)


class OrbitalState:
    """Every orbital element of the sun needed by the position computations, evaluated once for a single Julian
    century value."""

    __slots__ = '_century', '_meanLongitude', '_meanAnomaly', '_eccentricity', '_equationOfCenter', \
        '_apparentLongitude', '_meanObliquity', '_obliquityCorrection'

    def __init__(self, century: float):
        self._century = century
        self._meanLongitude = computeMeanLongitude(century)
        self._meanAnomaly = computeMeanAnomaly(century)
        self._eccentricity = computeEccentricity(century)
        self._equationOfCenter = computeEquationOfCenter(century)

        omega = _computeAscendingNode(century)
        self._apparentLongitude = self._meanLongitude + self._equationOfCenter - 0.00569 - 0.00478 * sinD(omega)
        self._meanObliquity = computeMeanObliquity(century)
        self._obliquityCorrection = self._meanObliquity + 0.00256 * cosD(omega)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._century})'

    @property
    def century(self) -> float:
        return self._century

    @property
    def meanLongitude(self) -> float:
        return self._meanLongitude

    @property
    def meanAnomaly(self) -> float:
        return self._meanAnomaly

    @property
    def eccentricity(self) -> float:
        return self._eccentricity

    @property
    def equationOfCenter(self) -> float:
        return self._equationOfCenter

    @property
    def trueLongitude(self) -> float:
        return self._meanLongitude + self._equationOfCenter

    @property
    def trueAnomaly(self) -> float:
        return self._meanAnomaly + self._equationOfCenter

    @property
    def radiusVector(self) -> float:
        e = self._eccentricity
        return (1.000001018 * (1 - e * e)) / (1 + e * cosD(self.trueAnomaly))

    @property
    def apparentLongitude(self) -> float:
        return self._apparentLongitude

    @property
    def meanObliquity(self) -> float:
        return self._meanObliquity

    @property
    def obliquityCorrection(self) -> float:
        return self._obliquityCorrection
