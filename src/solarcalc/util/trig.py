from math import sin, cos, tan, asin, acos, radians, degrees, nan

__all__ = ['sinD', 'cosD', 'tanD', 'asinD', 'acosD']


def sinD(angle: float) -> float:
    return sin(radians(angle))


def cosD(angle: float) -> float:
    return cos(radians(angle))


def tanD(angle: float) -> float:
    return tan(radians(angle))


def asinD(value: float) -> float:
    """Inverse sine in degrees. Returns nan instead of raising when value is outside [-1, 1]."""

    if -1.0 <= value <= 1.0:
        return degrees(asin(value))
    return nan


def acosD(value: float) -> float:
    """Inverse cosine in degrees. Returns nan instead of raising when value is outside [-1, 1]."""

    if -1.0 <= value <= 1.0:
        return degrees(acos(value))
    return nan
