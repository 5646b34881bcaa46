"""Numeric angle variants with range normalization and cross-unit arithmetic.

This module provides the AngleFloat class, which serves as the foundation for
every angle variant whose payload is a single number. It combines a NumPy
floating scalar with a unit period, normalizes the value into ``[0, period)``
at construction time, and converts between units by the ratio of their
periods.

Key Features:
- Flooring normalization into the canonical range of each unit
- Conversion between any two numeric units, re-normalized on arrival
- Mixed-unit arithmetic where the left operand decides the result unit
- Trigonometric evaluation through radians
- Unit-suffixed string representations

Classes:
    AngleFloat: Base class for all single-number angle variants.

Example:
    >>> class Degrees(AngleFloat):
    ...     PERIOD = 360.0
    ...     SUFFIX = "°"
    ...     CONVERTER = "to_degrees"
    ...
    >>> heading = Degrees(-90)
    >>> print(heading)  # "270.0°"
    >>> heading.to_radians().isclose(Radians(3 * pi / 2))  # True
"""

from __future__ import annotations

import math
import operator
from typing import Callable, ClassVar

import numpy as np

from ..config import ABS_TOL, BASE_TYPE, REL_TOL, Number, resolve_dtype
from .angle_base import Angle


class AngleFloat(Angle):
    """Base class for type-safe angles holding one normalized scalar.

    The payload is stored in the variant's own unit, never in a shared base
    unit, so ``Degrees(90).value`` is ``90.0``.

    Attributes:
        PERIOD (ClassVar[float]): Span of one full turn in this unit.
        SUFFIX (ClassVar[str]): Text appended when rendering.
        CONVERTER (ClassVar[str]): Name of the ``to_*`` method targeting this unit.
        value (numpy.floating): Normalized payload.
    """

    __slots__ = ("value",)

    IS_VARIANT = False
    PERIOD: ClassVar[float] = 1.0
    SUFFIX: ClassVar[str] = ""
    CONVERTER: ClassVar[str] = ""

    def __new__(cls, value: BASE_TYPE, dtype: type[np.floating] | None = None):
        """Create a new angle with its value wrapped into ``[0, PERIOD)``.

        Args:
            value: Raw numeric value in this unit.
            dtype: Scalar precision; inferred from ``value`` when omitted.

        Returns:
            AngleFloat: New normalized instance.
        """
        if not cls.IS_VARIANT:
            msg = f"{cls.__name__} is not an angle variant"
            raise TypeError(msg)
        scalar_type = resolve_dtype(value, dtype)
        obj = object.__new__(cls)
        object.__setattr__(obj, "value", cls._normalize(scalar_type(value)))
        return obj

    @classmethod
    def _normalize(cls, scalar: np.floating) -> np.floating:
        scalar_type = type(scalar)
        period = scalar_type(cls.PERIOD)
        with np.errstate(invalid="ignore"):
            wrapped = np.mod(scalar, period)
        # rounding can land a tiny negative input exactly on the period
        if wrapped >= period:
            wrapped = scalar_type(0.0)
        return wrapped

    @property
    def dtype(self) -> type[np.floating]:
        """Scalar type of the payload."""
        return type(self.value)

    def _payload(self) -> tuple[np.floating]:
        return (self.value,)

    def __float__(self) -> float:
        return float(self.value)

    def isclose(self, other: Angle, *, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        """Approximate equality that treats ``0`` and ``PERIOD`` as neighbours.

        Args:
            other: Angle to compare against; must be the same variant.
            rel_tol: Relative tolerance.
            abs_tol: Absolute tolerance.

        Returns:
            bool: True if the values are within tolerance on the circle.
        """
        if type(self) is not type(other):
            return False
        a, b = float(self.value), float(other.value)
        if math.isnan(a) or math.isnan(b):
            return False
        gap = abs(a - b)
        gap = min(gap, self.PERIOD - gap)
        return gap <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    # -------------------------------- Conversions --------------------------------
    def _convert(self, target: type[AngleFloat]) -> AngleFloat:
        if target is type(self):
            return target(self.value)
        scalar_type = self.dtype
        factor = scalar_type(target.PERIOD) / scalar_type(self.PERIOD)
        return target(self.value * factor)

    def to_radians(self) -> AngleFloat:
        """Convert to radians.

        Returns:
            AngleFloat: Equivalent ``Radians`` value.
        """
        return self._convert(self.variant("Radians"))

    def to_degrees(self) -> AngleFloat:
        """Convert to degrees.

        Returns:
            AngleFloat: Equivalent ``Degrees`` value.
        """
        return self._convert(self.variant("Degrees"))

    def to_gradians(self) -> AngleFloat:
        """Convert to gradians.

        Returns:
            AngleFloat: Equivalent ``Gradians`` value.
        """
        return self._convert(self.variant("Gradians"))

    def to_turns(self) -> AngleFloat:
        """Convert to turns.

        Returns:
            AngleFloat: Equivalent ``Turns`` value.
        """
        return self._convert(self.variant("Turns"))

    # -------------------------------- Arithmetic Operations --------------------------------
    def _combine(
        self,
        other: Angle | Number,
        op: Callable[[np.floating, np.floating], np.floating],
        name: str,
        allow_scalar: bool = False,
    ) -> AngleFloat:
        if isinstance(other, AngleFloat):
            rhs = other.to(type(self)).value
        elif allow_scalar and isinstance(other, Number) and not isinstance(other, bool):
            rhs = other
        else:
            self._unsupported(name, other)
        scalar_type = self.dtype
        try:
            rhs = scalar_type(rhs)
        except OverflowError:
            # integers beyond float range saturate like float overflow
            rhs = scalar_type(math.inf if rhs > 0 else -math.inf)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = op(self.value, rhs)
        return type(self)(result)

    def add(self, other: Angle) -> AngleFloat:
        """Add another angle, expressed in this angle's unit.

        Args:
            other: Numeric angle of any unit.

        Returns:
            AngleFloat: Normalized sum in this angle's unit.

        Raises:
            UnsupportedVariantOperation: If other is not a numeric angle.
        """
        return self._combine(other, operator.add, "add")

    def subtract(self, other: Angle) -> AngleFloat:
        """Subtract another angle, expressed in this angle's unit.

        Args:
            other: Numeric angle of any unit.

        Returns:
            AngleFloat: Normalized difference in this angle's unit.

        Raises:
            UnsupportedVariantOperation: If other is not a numeric angle.
        """
        return self._combine(other, operator.sub, "subtract")

    def multiply(self, other: Angle | Number) -> AngleFloat:
        """Multiply by another angle's value in this unit, or by a scale factor.

        Args:
            other: Numeric angle of any unit, or a real number.

        Returns:
            AngleFloat: Normalized product in this angle's unit.

        Raises:
            UnsupportedVariantOperation: If other is neither a numeric angle nor a number.
        """
        return self._combine(other, operator.mul, "multiply", allow_scalar=True)

    def divide(self, other: Angle | Number) -> AngleFloat:
        """Divide by another angle's value in this unit, or by a scale factor.

        Division by zero yields a NaN payload.

        Args:
            other: Numeric angle of any unit, or a real number.

        Returns:
            AngleFloat: Normalized quotient in this angle's unit.

        Raises:
            UnsupportedVariantOperation: If other is neither a numeric angle nor a number.
        """
        return self._combine(other, operator.truediv, "divide", allow_scalar=True)

    def __rmul__(self, k: Number) -> AngleFloat:
        """Right-side multiplication by a scalar.

        Args:
            k: Numeric scale factor.

        Returns:
            AngleFloat: Angle scaled by the factor.
        """
        return self.multiply(k)

    # -------------------------------- Trigonometry --------------------------------
    def sin(self) -> np.floating:
        """Sine of the angle."""
        return np.sin(self.to_radians().value)

    def cos(self) -> np.floating:
        """Cosine of the angle."""
        return np.cos(self.to_radians().value)

    def tan(self) -> np.floating:
        """Tangent of the angle."""
        return np.tan(self.to_radians().value)

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return the value followed by the unit suffix (e.g. "90.0°")."""
        return f"{self.value}{self.SUFFIX}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return f"{format(float(self.value), format_spec)}{self.SUFFIX}"

    def __repr__(self) -> str:
        """Return the constructor call that rebuilds this angle.

        Returns:
            str: e.g. "Degrees(90.0)" or "Degrees(90.0, dtype=float32)".
        """
        if self.dtype is np.float64:
            return f"{type(self).__name__}({float(self.value)!r})"
        return f"{type(self).__name__}({float(self.value)!r}, dtype={self.dtype.__name__})"
