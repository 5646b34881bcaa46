"""Typesafe angle variants.

This package implements the angle tagged union: a closed family of four
numeric variants plus one structured variant, with normalization, conversion,
mixed-unit arithmetic, trigonometry and rendering.

Architecture:
    - angle_base: Angle root class with variant registry and structural comparison
    - angle_float: AngleFloat, the single-number variant base
    - angle_units: Radians, Degrees, Gradians, Turns and their constructors
    - angle_clock: ClockFace, the hour/minute/second variant

Variant order (used for ordering across variants):
    Radians < Degrees < Gradians < Turns < ClockFace

Example:
    >>> from typetrig.angle import degrees, radians
    >>> degrees(100) + radians(0)
    Degrees(100.0)
    >>> degrees(-90)
    Degrees(270.0)
"""

# angle_units must be imported before angle_clock to fix the variant order
from .angle_base import Angle
from .angle_float import AngleFloat
from .angle_units import (
    Degrees,
    Gradians,
    NumericAngle,
    Radians,
    Turns,
    degrees,
    eighth,
    gradians,
    half,
    quarter,
    radians,
    sixth,
    turns,
)
from .angle_clock import ClockFace, clock_face  # isort: skip

__all__ = [
    # Base classes
    "Angle",
    "AngleFloat",
    # Variants
    "Radians",
    "Degrees",
    "Gradians",
    "Turns",
    "ClockFace",
    "NumericAngle",
    # Constructors
    "radians",
    "degrees",
    "gradians",
    "turns",
    "clock_face",
    # Constants
    "half",
    "quarter",
    "sixth",
    "eighth",
]
