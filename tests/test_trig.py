"""
Tests for inverse trigonometry and the circular mean.
"""

import math
import unittest

from planeangle import Degrees, Radians, acos, asin, atan, atan2, mean_angle


class TestInverseSineCosine(unittest.TestCase):
    """Test asin and acos."""

    def test_outside_domain(self):
        """Test that values outside [-1, 1] have no angle."""
        for value in (2.0, -1.5, 1.0000001, math.inf, math.nan):
            with self.subTest(value=value):
                self.assertIsNone(asin(value))
                self.assertIsNone(acos(value))

    def test_asin_boundaries(self):
        """Test asin at the ends and middle of its domain."""
        self.assertEqual(asin(1.0).value, math.pi / 2)
        self.assertEqual(asin(-1.0).value, -math.pi / 2)
        self.assertEqual(asin(0.0).value, 0.0)

    def test_acos_boundaries(self):
        """Test acos at the ends and middle of its domain."""
        self.assertEqual(acos(1.0).value, 0.0)
        self.assertEqual(acos(-1.0).value, math.pi)
        self.assertEqual(acos(0.0).value, math.pi / 2)

    def test_results_are_radians(self):
        """Test that results are tagged radians."""
        self.assertIsInstance(asin(0.5), Radians)
        self.assertIsInstance(acos(0.5), Radians)
        self.assertAlmostEqual(asin(0.5).in_degrees(), 30.0)
        self.assertAlmostEqual(acos(0.5).in_degrees(), 60.0)

    def test_domain_rejection_is_logged(self):
        """Test that a rejected value leaves a debug record."""
        with self.assertLogs("planeangle.trig", level="DEBUG") as captured:
            asin(3.0)
        self.assertIn("asin(3.0)", captured.output[0])


class TestArctangent(unittest.TestCase):
    """Test atan and atan2."""

    def test_atan(self):
        """Test atan values and limits."""
        self.assertAlmostEqual(atan(1.0).value, math.pi / 4)
        self.assertEqual(atan(0.0).value, 0.0)
        self.assertEqual(atan(math.inf).value, math.pi / 2)
        self.assertEqual(atan(-math.inf).value, -math.pi / 2)
        self.assertIsInstance(atan(1.0), Radians)

    def test_atan2_quadrants(self):
        """Test atan2 in all four quadrants."""
        self.assertAlmostEqual(atan2(1.0, 1.0).in_degrees(), 45.0)
        self.assertAlmostEqual(atan2(1.0, -1.0).in_degrees(), 135.0)
        self.assertAlmostEqual(atan2(-1.0, -1.0).in_degrees(), -135.0)
        self.assertAlmostEqual(atan2(-1.0, 1.0).in_degrees(), -45.0)

    def test_atan2_edge_cases(self):
        """Test atan2 on the axes and signed zeros."""
        self.assertEqual(atan2(1.0, 0.0).value, math.pi / 2)
        self.assertEqual(atan2(0.0, -1.0).value, math.pi)
        self.assertEqual(atan2(-0.0, -1.0).value, -math.pi)
        self.assertEqual(atan2(0.0, 0.0).value, 0.0)
        self.assertIsInstance(atan2(0.0, 0.0), Radians)


class TestMeanAngle(unittest.TestCase):
    """Test the circular mean."""

    def test_examples(self):
        """Test the mean of a few sets of angles."""
        self.assertAlmostEqual(mean_angle([Degrees(90.0)]).in_degrees(), 90.0, places=6)
        self.assertAlmostEqual(mean_angle([Degrees(90.0), Degrees(90.0)]).in_degrees(), 90.0, places=6)
        self.assertAlmostEqual(
            mean_angle([Degrees(90.0), Degrees(180.0), Degrees(270.0)]).in_degrees(), 180.0, places=6
        )
        self.assertAlmostEqual(mean_angle([Degrees(20.0), Degrees(350.0)]).in_degrees(), 5.0, places=6)

    def test_wraparound(self):
        """Test that 350° and 10° average to 0° rather than 180°."""
        mean = mean_angle([Degrees(350.0), Degrees(10.0)])
        self.assertLess(mean.min_dist(Degrees(0.0)).in_degrees(), 1e-9)

    def test_result_is_normalized_radians(self):
        """Test that the mean is a normalized radian angle."""
        mean = mean_angle([Degrees(-100.0), Degrees(-80.0)])
        self.assertIsInstance(mean, Radians)
        self.assertTrue(0.0 <= mean.value < 2.0 * math.pi)
        self.assertAlmostEqual(mean.in_degrees(), 270.0, places=6)

    def test_mixed_units(self):
        """Test the mean of angles given in different units."""
        mean = mean_angle([Radians(math.pi / 2), Degrees(90.0)])
        self.assertAlmostEqual(mean.in_degrees(), 90.0, places=6)

    def test_generator_input(self):
        """Test that any iterable is accepted."""
        mean = mean_angle(Degrees(d) for d in (30.0, 60.0))
        self.assertAlmostEqual(mean.in_degrees(), 45.0, places=6)

    def test_empty_input(self):
        """Test that an empty collection has no mean."""
        with self.assertRaises(ValueError):
            mean_angle([])
        with self.assertRaises(ValueError):
            mean_angle(iter(()))


if __name__ == "__main__":
    unittest.main()
