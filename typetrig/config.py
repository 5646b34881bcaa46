"""Global configuration and scalar type definitions for the angle algebra.

This module centralizes the numeric precision standards and the handful of
constants shared by every angle variant. It establishes which scalar types
may carry an angle payload, the default precision used when a caller passes
a plain Python number, and the tolerances used for approximate comparison.

Type Definitions:
    BASE_TYPE: Union of acceptable raw inputs for the constructors.
    SCALAR_TYPES: NumPy floating types an angle payload may be stored as.

Example:
    >>> from typetrig.config import DEFAULT_DTYPE, resolve_dtype
    >>> import numpy as np
    >>> resolve_dtype(1.5)
    <class 'numpy.float64'>
    >>> resolve_dtype(np.float32(1.5))
    <class 'numpy.float32'>
"""

from __future__ import annotations

from math import pi

import numpy as np

BASE_TYPE = int | float | np.floating
Number = int | float | np.integer | np.floating

SCALAR_TYPES: tuple[type[np.floating], ...] = (np.float32, np.float64)
DEFAULT_DTYPE: type[np.floating] = np.float64

# Length of one full turn in each unit
TWO_PI = 2.0 * pi
DEGREES_PER_TURN = 360.0
GRADIANS_PER_TURN = 400.0

ABS_TOL = 1e-9
REL_TOL = 1e-9


def resolve_dtype(value: BASE_TYPE, dtype: type[np.floating] | None = None) -> type[np.floating]:
    """Pick the scalar type an angle payload is stored as.

    An explicit ``dtype`` wins, then the precision of ``value`` when it is
    already a supported NumPy scalar, then ``DEFAULT_DTYPE``.

    Raises:
        TypeError: If ``dtype`` is not one of ``SCALAR_TYPES``.
    """
    if dtype is not None:
        dtype = np.dtype(dtype).type
        if dtype not in SCALAR_TYPES:
            msg = f"unsupported angle scalar type: {dtype!r}"
            raise TypeError(msg)
        return dtype
    value_type = type(value)
    if value_type in SCALAR_TYPES:
        return value_type
    return DEFAULT_DTYPE
