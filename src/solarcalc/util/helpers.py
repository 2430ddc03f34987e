from math import nan

from solarcalc.util.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE


def wrapDegrees(angle: float) -> float:
    """Wraps an angle in degrees into [0, 360)."""

    return angle % 360.0


def signum(value: float) -> int:
    # Zero will return 0.

    if value > 0:
        return 1
    elif value < 0:
        return -1
    return 0


def safeDivide(numerator: float, denominator: float) -> float:
    """Divides two floats, returning nan rather than raising when the denominator is zero."""

    if denominator == 0:
        return nan
    return numerator / denominator


def computeHourMinSec(timeDecimal: float) -> (int, int, int):
    """Splits decimal hours into whole hours, minutes and seconds, truncating toward zero. Negative values give
    negative components."""

    # Round away float noise first so 10.333... hours gives 20 minutes and not 19:59.
    totalSeconds = int(round(abs(timeDecimal) * SECONDS_PER_HOUR, 6))
    hour, remainder = divmod(totalSeconds, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)

    if timeDecimal < 0:
        return -hour, -minute, -second
    return hour, minute, second
