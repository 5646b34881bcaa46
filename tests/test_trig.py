"""
Tests for trigonometric evaluation and rendering.
"""

import math
import unittest

import numpy as np

from typetrig import degrees, eighth, gradians, half, quarter, radians, trig, turns


class TestTrigonometry(unittest.TestCase):
    """Test sin, cos and tan on angles."""

    def test_consistent_across_units(self):
        """Test the same angle in different units gives the same result."""
        self.assertAlmostEqual(degrees(180).sin(), radians(math.pi).sin())
        self.assertAlmostEqual(gradians(200).cos(), turns(0.5).cos())
        self.assertAlmostEqual(degrees(45).tan(), eighth().tan())

    def test_known_values(self):
        """Test textbook values."""
        self.assertAlmostEqual(degrees(30).sin(), 0.5)
        self.assertAlmostEqual(degrees(60).cos(), 0.5)
        self.assertAlmostEqual(gradians(50).tan(), 1.0)
        self.assertAlmostEqual(turns(0.75).sin(), -1.0)

    def test_float32_result(self):
        """Test float32 angles evaluate in float32."""
        self.assertIs(type(degrees(np.float32(30)).sin()), np.float32)


class TestFreeFunctions(unittest.TestCase):
    """Test the module-level trig functions."""

    def test_forward(self):
        """Test sin, cos, tan delegate to the angle."""
        self.assertAlmostEqual(trig.sin(degrees(180)), trig.sin(radians(math.pi)))
        self.assertAlmostEqual(trig.cos(gradians(200)), trig.cos(turns(0.5)))
        self.assertAlmostEqual(trig.tan(degrees(45)), 1.0)

    def test_inverse(self):
        """Test asin, acos, atan return radians."""
        self.assertTrue(trig.asin(1.0).isclose(quarter()))
        self.assertTrue(trig.acos(-1.0).isclose(half()))
        self.assertTrue(trig.atan(1.0).isclose(eighth()))

    def test_inverse_negative_is_normalized(self):
        """Test negative inverse results are wrapped into [0, 2π)."""
        self.assertTrue(trig.asin(-1.0).isclose(radians(1.5 * math.pi)))


class TestDisplay(unittest.TestCase):
    """Test unit-suffixed rendering."""

    def test_str(self):
        """Test each unit suffix."""
        self.assertEqual(str(degrees(90)), "90.0°")
        self.assertEqual(str(radians(1)), "1.0 rad")
        self.assertEqual(str(gradians(50)), "50.0 gon")
        self.assertEqual(str(turns(0.5)), "0.5 turns")

    def test_format_spec(self):
        """Test format specs apply to the value."""
        self.assertEqual(f"{degrees(90)}", "90.0°")
        self.assertEqual(f"{radians(math.pi):.3f}", "3.142 rad")
        self.assertEqual(format(turns(0.25), ".2f"), "0.25 turns")


if __name__ == '__main__':
    unittest.main()
