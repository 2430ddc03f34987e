import calendar
import datetime
import json
from math import isfinite
from numbers import Integral, Real

from solarcalc.core.exceptions import InvalidInputError
from solarcalc.util.constants import MINUTES_PER_HOUR, SECONDS_PER_HOUR, MILLISECONDS_PER_HOUR
from solarcalc.util.helpers import computeHourMinSec


def _checkInteger(name: str, value, lower: int, upper: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(f'{name} must be an integer, not {type(value).__name__}')
    if value < lower or value > upper:
        raise InvalidInputError(f'{name} must be between {lower} and {upper}, not {value}')

    return int(value)


def _checkOffset(name: str, value, bound: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f'{name} must be a real number, not {type(value).__name__}')
    if not isfinite(value) or value < -bound or value > bound:
        raise InvalidInputError(f'{name} must be between -{bound} and {bound} hours, not {value}')

    return float(value)


class TimePoint:
    """An immutable calendar instant in local time. The utcOffset is the standard offset of the local zone from UTC
    and dstOffset is the additional daylight-saving offset in effect, both in hours. Seconds are whole seconds.

    Instances are never modified, methods that change the time return a new TimePoint."""

    __slots__ = '_year', '_month', '_day', '_hour', '_minute', '_second', '_utcOffset', '_dstOffset'

    def __init__(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0,
                 utcOffset: float = 0.0, dstOffset: float = 0.0):
        self._year = _checkInteger('year', year, 1, 9999)
        self._month = _checkInteger('month', month, 1, 12)
        self._day = _checkInteger('day', day, 1, calendar.monthrange(self._year, self._month)[1])
        self._hour = _checkInteger('hour', hour, 0, 23)
        self._minute = _checkInteger('minute', minute, 0, 59)
        self._second = _checkInteger('second', second, 0, 59)
        self._utcOffset = _checkOffset('utcOffset', utcOffset, 14)
        self._dstOffset = _checkOffset('dstOffset', dstOffset, 2)

    @classmethod
    def fromDatetime(cls, date: datetime.datetime) -> 'TimePoint':
        """Creates a new TimePoint from a Python datetime.datetime instance. Naive datetimes are taken as UTC, aware
        ones have their offset split into the standard and daylight-saving parts. Microseconds are dropped."""

        if date.tzinfo is None or date.utcoffset() is None:
            return cls(date.year, date.month, date.day, date.hour, date.minute, date.second)

        hour = datetime.timedelta(hours=1)
        dst = date.dst() or datetime.timedelta(0)
        utcOffset = (date.utcoffset() - dst) / hour

        return cls(date.year, date.month, date.day, date.hour, date.minute, date.second, utcOffset, dst / hour)

    @classmethod
    def fromMilliseconds(cls, year: int, month: int, day: int, hour: int, minute: int, second: int,
                         zoneOffset: int, dstOffset: int = 0) -> 'TimePoint':
        """Creates a new TimePoint with the zone and daylight-saving offsets given in milliseconds."""

        return cls(year, month, day, hour, minute, second,
                   zoneOffset / MILLISECONDS_PER_HOUR, dstOffset / MILLISECONDS_PER_HOUR)

    def __str__(self) -> str:
        offset = self.utcOffsetHours()
        offsetString = str(offset) if offset < 0 else '+' + str(offset)
        return f'{self._year:04d}/{self._month:02d}/{self._day:02d} ' \
               f'{self._hour:02d}:{self._minute:02d}:{self._second:02d} {offsetString} UTC'

    def __repr__(self) -> str:
        return f'TimePoint({self._year}, {self._month}, {self._day}, {self._hour}, {self._minute}, {self._second}, ' \
               f'{self._utcOffset}, {self._dstOffset})'

    def _key(self) -> tuple:
        return (self._year, self._month, self._day, self._hour, self._minute, self._second, self._utcOffset,
                self._dstOffset)

    def __eq__(self, other: 'TimePoint') -> bool:
        if isinstance(other, TimePoint):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def __reduce__(self):
        return self.__class__, self._key()

    def toDict(self) -> dict:
        return {"year": self._year, "month": self._month, "day": self._day, "hour": self._hour,
                "minute": self._minute, "second": self._second, "utcOffset": self._utcOffset,
                "dstOffset": self._dstOffset}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    # read-only properties
    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def utcOffset(self) -> float:
        return self._utcOffset

    @property
    def dstOffset(self) -> float:
        return self._dstOffset

    def timeDecimal(self) -> float:
        """Returns the local time of day in decimal hours."""

        return self._hour + self._minute / MINUTES_PER_HOUR + self._second / SECONDS_PER_HOUR

    def utcOffsetHours(self, useDaylightSaving: bool = True) -> float:
        if useDaylightSaving:
            return self._dstOffset + self._utcOffset
        return self._utcOffset

    def withTimeDecimal(self, timeDecimal: float) -> 'TimePoint':
        """Returns a copy with the time of day replaced by timeDecimal hours. Values outside [0, 24) roll into the
        neighbouring day, and a negative value also advances the day of the month by one, so a time that wrapped
        backwards past midnight stays on the same calendar day."""

        if isinstance(timeDecimal, bool) or not isinstance(timeDecimal, Real) or not isfinite(timeDecimal):
            raise InvalidInputError(f'timeDecimal must be a finite number, not {timeDecimal}')

        hour, minute, second = computeHourMinSec(timeDecimal)
        moment = datetime.datetime(self._year, self._month, self._day)
        try:
            if timeDecimal < 0:
                moment += datetime.timedelta(days=1)
            moment += datetime.timedelta(hours=hour, minutes=minute, seconds=second)
        except OverflowError:
            raise InvalidInputError(f'timeDecimal {timeDecimal} moves {self} outside years 1 to 9999') from None

        return TimePoint(moment.year, moment.month, moment.day, moment.hour, moment.minute, moment.second,
                         self._utcOffset, self._dstOffset)

    def toDatetime(self) -> datetime.datetime:
        """Converts the TimePoint to an aware datetime.datetime with a fixed offset."""

        timezone = datetime.timezone(datetime.timedelta(hours=self.utcOffsetHours()))
        return datetime.datetime(self._year, self._month, self._day, self._hour, self._minute, self._second,
                                 tzinfo=timezone)

    def toUtc(self) -> 'TimePoint':
        """Returns a new TimePoint for the same instant expressed in UTC. The calling instance is left untouched."""

        moment = self.toDatetime().astimezone(datetime.timezone.utc)
        return TimePoint(moment.year, moment.month, moment.day, moment.hour, moment.minute, moment.second)

    def dayOfYear(self) -> int:
        return datetime.date(self._year, self._month, self._day).timetuple().tm_yday

    def utcDayOfYear(self) -> int:
        return self.toUtc().dayOfYear()
