"""Typesafe trigonometry with a variety of angle formats.

typetrig represents planar angles as a closed family of variants (radians,
degrees, gradians, turns, and clock-face hour/minute/second) and provides
normalization, conversion between units, mixed-unit arithmetic and
trigonometric evaluation on top of NumPy floating scalars.

Framework Components:
    Angle Algebra (typetrig.angle):
        • Radians, Degrees, Gradians, Turns: numeric variants wrapped into [0, period)
        • ClockFace: hour/minute/second payload with no numeric conversions
        • Constructors radians(), degrees(), gradians(), turns(), clock_face()
        • Constants half(), quarter(), sixth(), eighth()

    Free Functions (typetrig.trig):
        • sin, cos, tan over any numeric angle
        • asin, acos, atan returning radians

    Configuration (typetrig.config):
        • Supported scalar precisions (float32, float64) and defaults
        • Comparison tolerances

    Errors (typetrig.errors):
        • UnsupportedVariantOperation for operations a variant does not define

Example:
    >>> from typetrig import degrees, radians, half, sin
    >>> degrees(100) + degrees(100)
    Degrees(200.0)
    >>> half().to_degrees().to_gradians().to_turns().to_radians().isclose(half())
    True
    >>> round(float(sin(degrees(30))), 6)
    0.5
"""

from .angle import (
    Angle,
    AngleFloat,
    ClockFace,
    Degrees,
    Gradians,
    NumericAngle,
    Radians,
    Turns,
    clock_face,
    degrees,
    eighth,
    gradians,
    half,
    quarter,
    radians,
    sixth,
    turns,
)
from .errors import UnsupportedVariantOperation
from .trig import acos, asin, atan, cos, sin, tan

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "AngleFloat",
    "Radians",
    "Degrees",
    "Gradians",
    "Turns",
    "ClockFace",
    "NumericAngle",
    "radians",
    "degrees",
    "gradians",
    "turns",
    "clock_face",
    "half",
    "quarter",
    "sixth",
    "eighth",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "UnsupportedVariantOperation",
]
