import unittest
from math import isnan, nan

from solarcalc.util.helpers import wrapDegrees, signum, safeDivide, computeHourMinSec
from solarcalc.util.trig import sinD, cosD, tanD, asinD, acosD


class TestHelpers(unittest.TestCase):

    def test_wrapDegrees(self):
        self.assertAlmostEqual(wrapDegrees(45), 45)
        self.assertAlmostEqual(wrapDegrees(-30), 330)
        self.assertAlmostEqual(wrapDegrees(720), 0)
        self.assertAlmostEqual(wrapDegrees(-725), 355)
        self.assertAlmostEqual(wrapDegrees(36281.2365932), 281.2365932)

    def test_signum(self):
        self.assertEqual(signum(-5), -1)
        self.assertEqual(signum(1.2345), 1)
        self.assertEqual(signum(0), 0)
        self.assertEqual(signum(nan), 0)

    def test_safeDivide(self):
        self.assertEqual(safeDivide(1, 4), 0.25)
        self.assertTrue(isnan(safeDivide(1, 0)))
        self.assertTrue(isnan(safeDivide(0, 0.0)))

    def test_hourMinSec(self):
        self.assertEqual(computeHourMinSec(10.5), (10, 30, 0))
        self.assertEqual(computeHourMinSec(10 + 20 / 60), (10, 20, 0))
        self.assertEqual(computeHourMinSec(7 + 7 / 60 + 45 / 3600), (7, 7, 45))
        self.assertEqual(computeHourMinSec(25.25), (25, 15, 0))
        # Components truncate toward zero.
        self.assertEqual(computeHourMinSec(-1.5), (-1, -30, 0))
        self.assertEqual(computeHourMinSec(0.9999), (0, 59, 59))


class TestTrig(unittest.TestCase):

    def testForward(self):
        self.assertAlmostEqual(sinD(30), 0.5)
        self.assertAlmostEqual(cosD(60), 0.5)
        self.assertAlmostEqual(tanD(45), 1.0)
        self.assertAlmostEqual(sinD(-90), -1.0)

    def testInverse(self):
        self.assertAlmostEqual(asinD(0.5), 30)
        self.assertAlmostEqual(acosD(-1), 180)
        self.assertAlmostEqual(acosD(1), 0)

    def testOutOfDomain(self):
        self.assertTrue(isnan(asinD(1.0000001)))
        self.assertTrue(isnan(acosD(-2)))
        self.assertTrue(isnan(acosD(nan)))
        self.assertTrue(isnan(asinD(nan)))
