"""Numeric angle units: radians, degrees, gradians and turns.

Each unit stores its value in its own scale, wrapped into ``[0, PERIOD)``.
Conversion between units multiplies by the ratio of their periods, so the
whole conversion table follows from the four periods below.

These units are commonly used for:
- Radians: trigonometry and calculus
- Degrees: headings, bearings and user-facing input
- Gradians: surveying (a right angle is 100 gon)
- Turns: rotations counted in whole revolutions

Classes:
    Radians: Angle in radians, period 2π.
    Degrees: Angle in degrees, period 360.
    Gradians: Angle in gradians, period 400.
    Turns: Angle in turns, period 1.

Type Aliases:
    NumericAngle: Union type for all numeric variants.

Example:
    >>> heading = degrees(450)
    >>> print(heading)  # "90.0°"
    >>> print(heading.to_turns())  # "0.25 turns"
    >>> print(degrees(100) + degrees(300))  # "40.0°"
"""

from __future__ import annotations

from math import pi

import numpy as np

from ..config import BASE_TYPE, DEGREES_PER_TURN, GRADIANS_PER_TURN, TWO_PI
from .angle_float import AngleFloat


class Radians(AngleFloat):
    """Angle in radians, normalized into ``[0, 2π)``.

    Attributes:
        PERIOD (float): 2π, one full turn in radians.
        SUFFIX (str): " rad".
    """

    __slots__ = ()

    PERIOD = TWO_PI
    SUFFIX = " rad"
    CONVERTER = "to_radians"


class Degrees(AngleFloat):
    """Angle in degrees, normalized into ``[0, 360)``.

    Attributes:
        PERIOD (float): 360.0, one full turn in degrees.
        SUFFIX (str): "°".
    """

    __slots__ = ()

    PERIOD = DEGREES_PER_TURN
    SUFFIX = "°"
    CONVERTER = "to_degrees"


class Gradians(AngleFloat):
    """Angle in gradians (gon), normalized into ``[0, 400)``.

    Attributes:
        PERIOD (float): 400.0, one full turn in gradians.
        SUFFIX (str): " gon".
    """

    __slots__ = ()

    PERIOD = GRADIANS_PER_TURN
    SUFFIX = " gon"
    CONVERTER = "to_gradians"


class Turns(AngleFloat):
    """Angle in turns, normalized into ``[0, 1)``.

    Negative input is floored like every other unit: ``turns(-0.25)`` is
    ``Turns(0.75)``.
    """

    __slots__ = ()

    PERIOD = 1.0
    SUFFIX = " turns"
    CONVERTER = "to_turns"


NumericAngle = Radians | Degrees | Gradians | Turns


def radians(x: BASE_TYPE, dtype: type[np.floating] | None = None) -> Radians:
    """Return an angle in radians holding ``x mod 2π``."""
    return Radians(x, dtype)


def degrees(x: BASE_TYPE, dtype: type[np.floating] | None = None) -> Degrees:
    """Return an angle in degrees holding ``x mod 360``."""
    return Degrees(x, dtype)


def gradians(x: BASE_TYPE, dtype: type[np.floating] | None = None) -> Gradians:
    """Return an angle in gradians holding ``x mod 400``."""
    return Gradians(x, dtype)


def turns(x: BASE_TYPE, dtype: type[np.floating] | None = None) -> Turns:
    """Return an angle in turns holding ``x mod 1``."""
    return Turns(x, dtype)


# Fixed fractions of a full turn, always in radians
def half(dtype: type[np.floating] | None = None) -> Radians:
    """One half of the domain. In radians, this is π."""
    return Radians(pi, dtype)


def quarter(dtype: type[np.floating] | None = None) -> Radians:
    """One quarter of the domain. In radians, this is π/2."""
    return Radians(pi / 2, dtype)


def sixth(dtype: type[np.floating] | None = None) -> Radians:
    """One sixth of the domain. In radians, this is π/3."""
    return Radians(pi / 3, dtype)


def eighth(dtype: type[np.floating] | None = None) -> Radians:
    """One eighth of the domain. In radians, this is π/4."""
    return Radians(pi / 4, dtype)
