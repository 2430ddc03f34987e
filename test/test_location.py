import pickle
import unittest

from solarcalc.core.exceptions import InvalidInputError, SolarCalcException
from solarcalc.core.location import GeoLocation


class TestGeoLocation(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.geo = GeoLocation(40.015, -105.2705)

    def testInitialization(self):
        self.assertEqual(self.geo.latitude, 40.015)
        self.assertEqual(self.geo.longitude, -105.2705)
        # Daylight-saving is used by default.
        self.assertTrue(self.geo.useDaylightSaving)
        self.assertFalse(GeoLocation(40.015, -105.2705, False).useDaylightSaving)

        # Integers are accepted and stored as floats.
        geo = GeoLocation(0, 180)
        self.assertIsInstance(geo.latitude, float)
        self.assertEqual(geo.longitude, 180.0)

    def testOutOfRange(self):
        for latitude, longitude in ((-90.1, 0), (91, 0), (0, 180.5), (0, -181)):
            with self.subTest(latitude=latitude, longitude=longitude):
                with self.assertRaises(InvalidInputError):
                    GeoLocation(latitude, longitude)

        # The poles themselves are valid.
        GeoLocation(90, 0)
        GeoLocation(-90, 0)

    def testMalformed(self):
        for value in (float('nan'), float('inf'), '40', None, True):
            with self.subTest(value=value):
                with self.assertRaises(InvalidInputError):
                    GeoLocation(value, 0)

    def testExceptionHierarchy(self):
        with self.assertRaises(ValueError):
            GeoLocation(100, 0)
        with self.assertRaises(SolarCalcException) as context:
            GeoLocation(100, 0)
        self.assertEqual(context.exception.message, 'latitude must be between -90 and 90, not 100.0')

    def testImmutable(self):
        with self.assertRaises(AttributeError):
            self.geo.latitude = 10
        with self.assertRaises(AttributeError):
            self.geo.useDaylightSaving = False
        with self.assertRaises(AttributeError):
            self.geo.elevation = 1.5
        self.assertEqual(self.geo.latitude, 40.015)

    def testEquality(self):
        self.assertEqual(self.geo, GeoLocation(40.015, -105.2705, True))
        self.assertNotEqual(self.geo, GeoLocation(40.015, -105.2705, False))
        self.assertEqual(hash(self.geo), hash(GeoLocation(40.015, -105.2705)))
        self.assertEqual(pickle.loads(pickle.dumps(self.geo)), self.geo)

    def testString(self):
        self.assertEqual(str(self.geo), 'latitude: 40.015, longitude: -105.2705, daylight-saving: True')
        self.assertEqual(repr(self.geo), 'GeoLocation(40.015, -105.2705, True)')

    def testJson(self):
        json = '{"latitude": 40.015, "longitude": -105.2705, "useDaylightSaving": true}'
        self.assertEqual(self.geo.toJson(), json)
