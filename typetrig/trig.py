"""Free-function trigonometry over angles.

The forward functions take an angle of any numeric unit; the inverse
functions take a raw scalar and return the result as radians.

Example:
    >>> from typetrig import trig
    >>> from typetrig.angle import degrees
    >>> float(trig.sin(degrees(90)))
    1.0
    >>> trig.acos(1.0)
    Radians(0.0)
"""

from __future__ import annotations

import numpy as np

from .angle import Angle, Radians, radians
from .config import BASE_TYPE


def sin(a: Angle) -> np.floating:
    """Calculate the sine."""
    return a.sin()


def cos(a: Angle) -> np.floating:
    """Calculate the cosine."""
    return a.cos()


def tan(a: Angle) -> np.floating:
    """Calculate the tangent."""
    return a.tan()


def asin(s: BASE_TYPE) -> Radians:
    """Calculate the arcsine (in radians)."""
    return radians(np.arcsin(s))


def acos(s: BASE_TYPE) -> Radians:
    """Calculate the arccosine (in radians)."""
    return radians(np.arccos(s))


def atan(s: BASE_TYPE) -> Radians:
    """Calculate the arctangent (in radians)."""
    return radians(np.arctan(s))
