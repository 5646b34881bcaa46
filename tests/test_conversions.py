"""
Tests for conversions between angle units.
"""

import math
import unittest

import numpy as np

from typetrig import (
    Angle,
    AngleFloat,
    Degrees,
    Gradians,
    Radians,
    Turns,
    UnsupportedVariantOperation,
    degrees,
    gradians,
    half,
    radians,
    turns,
)


class TestConversionFactors(unittest.TestCase):
    """Test the unit-pair scale factors."""

    def test_degrees_to_others(self):
        """Test converting a quarter turn given in degrees."""
        quarter_turn = degrees(90)
        self.assertAlmostEqual(quarter_turn.to_radians().value, math.pi / 2)
        self.assertAlmostEqual(quarter_turn.to_gradians().value, 100.0)
        self.assertAlmostEqual(quarter_turn.to_turns().value, 0.25)

    def test_radians_to_others(self):
        """Test converting π radians."""
        self.assertAlmostEqual(radians(math.pi).to_degrees().value, 180.0)
        self.assertAlmostEqual(radians(math.pi).to_gradians().value, 200.0)
        self.assertAlmostEqual(radians(math.pi).to_turns().value, 0.5)

    def test_gradians_to_others(self):
        """Test converting 100 gon."""
        self.assertAlmostEqual(gradians(100).to_degrees().value, 90.0)
        self.assertAlmostEqual(gradians(100).to_radians().value, math.pi / 2)
        self.assertAlmostEqual(gradians(100).to_turns().value, 0.25)

    def test_turns_to_others(self):
        """Test converting a quarter turn."""
        self.assertEqual(turns(0.25).to_degrees(), degrees(90))
        self.assertEqual(turns(0.25).to_gradians(), gradians(100))
        self.assertAlmostEqual(turns(0.25).to_radians().value, math.pi / 2)

    def test_same_unit_is_identity(self):
        """Test converting into the same unit keeps the value."""
        self.assertEqual(degrees(90).to_degrees(), degrees(90))
        self.assertEqual(radians(1).to_radians(), radians(1))
        self.assertEqual(gradians(50).to_gradians(), gradians(50))
        self.assertEqual(turns(0.5).to_turns(), turns(0.5))

    def test_result_types(self):
        """Test each conversion returns its target variant."""
        angle = degrees(45)
        self.assertIsInstance(angle.to_radians(), Radians)
        self.assertIsInstance(angle.to_degrees(), Degrees)
        self.assertIsInstance(angle.to_gradians(), Gradians)
        self.assertIsInstance(angle.to_turns(), Turns)

    def test_to_dispatch(self):
        """Test the generic to() dispatches to the matching conversion."""
        self.assertEqual(turns(0.25).to(Degrees), degrees(90))
        self.assertEqual(turns(0.25).to(Gradians), gradians(100))

    def test_to_non_variant_is_unsupported(self):
        """Test converting to a base class is refused."""
        with self.assertRaises(UnsupportedVariantOperation):
            degrees(1).to(AngleFloat)
        with self.assertRaises(UnsupportedVariantOperation):
            degrees(1).to(Angle)

    def test_float32_conversion_keeps_precision(self):
        """Test float32 angles convert to float32 angles."""
        converted = degrees(np.float32(90)).to_radians()
        self.assertIs(converted.dtype, np.float32)
        self.assertAlmostEqual(float(converted), math.pi / 2, places=6)


class TestRoundTrip(unittest.TestCase):
    """Test unit → unit → unit round-trips."""

    def test_negative_degrees_round_trip(self):
        """Test degrees → radians → degrees."""
        self.assertTrue(degrees(-5.0).to_radians().to_degrees().isclose(degrees(-5.0)))

    def test_negative_radians_round_trip(self):
        """Test radians → degrees → radians."""
        self.assertTrue(radians(-5.0).to_degrees().to_radians().isclose(radians(-5.0)))

    def test_multi_hop_round_trip(self):
        """Test chains through all four units in several orders."""
        self.assertTrue(half().to_degrees().to_gradians().to_turns().to_radians().isclose(half()))
        self.assertTrue(half().to_turns().to_gradians().to_degrees().to_radians().isclose(half()))
        self.assertTrue(half().to_gradians().to_degrees().to_turns().to_radians().isclose(half()))

    def test_isclose_wraps_at_period(self):
        """Test values either side of zero are close on the circle."""
        self.assertTrue(degrees(359.9999999999).isclose(degrees(0)))
        self.assertFalse(degrees(359).isclose(degrees(0)))
        self.assertFalse(degrees(0).isclose(radians(0)))


if __name__ == '__main__':
    unittest.main()
