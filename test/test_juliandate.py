import unittest

from solarcalc.core.juliandate import computeJulianDay, computeJulianCentury, computeUtcOffset, computeTimeDecimal
from solarcalc.core.location import GeoLocation
from solarcalc.core.timepoint import TimePoint

values = ((2000, 1, 1),
          (1999, 1, 1),
          (1988, 6, 19),
          (1988, 1, 27),
          (1987, 6, 19),
          (1987, 1, 27),
          (1900, 1, 1),
          (1600, 12, 31),
          (1600, 1, 1))

answers = (2451544.5, 2451179.5, 2447331.5, 2447187.5, 2446965.5, 2446822.5, 2415020.5, 2305812.5, 2305447.5)


class TestJulianDay(unittest.TestCase):

    def testValues(self):
        for args, answer in zip(values, answers):
            with self.subTest(date=args, number=answer):
                self.assertEqual(computeJulianDay(TimePoint(*args)), answer)

    def testTimeOfDayIgnored(self):
        # Only the calendar day counts, the time and offsets are added by computeJulianCentury.
        self.assertEqual(computeJulianDay(TimePoint(2000, 1, 1, 23, 59, 59, -7, 1)), 2451544.5)


class TestJulianCentury(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.geo = GeoLocation(40.015, -105.2705)
        cls.geoNoDst = GeoLocation(40.015, -105.2705, False)

    def testEpoch(self):
        self.assertEqual(computeJulianCentury(self.geo, TimePoint(2000, 1, 1, 12)), 0.0)
        # The same instant in a local timezone.
        self.assertEqual(computeJulianCentury(self.geo, TimePoint(2000, 1, 1, 5, 0, 0, -7)), 0.0)
        self.assertAlmostEqual(computeJulianCentury(self.geo, TimePoint(2100, 1, 1, 12)), 1.0, 12)
        self.assertAlmostEqual(computeJulianCentury(self.geo, TimePoint(2023, 6, 21, 12)), 8572 / 36525, 12)

    def testOffsets(self):
        daylight = TimePoint(2023, 6, 21, 13, 0, 0, -7, 1)
        standard = TimePoint(2023, 6, 21, 13, 0, 0, -6, 0)
        utc = TimePoint(2023, 6, 21, 19, 0, 0)

        self.assertEqual(computeUtcOffset(self.geo, daylight), -6.0)
        self.assertEqual(computeUtcOffset(self.geoNoDst, daylight), -7.0)
        self.assertEqual(computeTimeDecimal(daylight), 13.0)

        self.assertEqual(computeJulianCentury(self.geo, daylight), computeJulianCentury(self.geo, standard))
        self.assertAlmostEqual(computeJulianCentury(self.geo, daylight), computeJulianCentury(self.geo, utc), 12)
        # Ignoring daylight-saving puts the instant an hour later.
        later = TimePoint(2023, 6, 21, 20, 0, 0)
        self.assertAlmostEqual(computeJulianCentury(self.geoNoDst, daylight), computeJulianCentury(self.geo, later),
                               12)
        difference = computeJulianCentury(self.geoNoDst, daylight) - computeJulianCentury(self.geo, daylight)
        self.assertAlmostEqual(difference * 36525 * 24, 1.0, 6)
