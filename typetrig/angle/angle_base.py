"""Root of the angle variant family.

This module provides the fundamental Angle class that every angle variant
derives from. It implements a variant registry using automatic subclass
registration, which gives the family a closed, ordered set of cases, and it
defines structural equality, ordering and hashing over (variant, payload).

Every operation of the algebra (conversion, arithmetic, trigonometry,
rendering) has an entry point here whose default behaviour is to refuse the
call with UnsupportedVariantOperation. Numeric variants override them; the
structured ClockFace variant inherits the refusals, so a new variant is
unsupported everywhere until it opts in.

Key Concepts:
- IS_VARIANT: False on intermediate bases that are not cases of the union
- VARIANT_INDEX: Declaration order of the variant, used for ordering
- VARIANTS: Registry of every concrete variant by class name
- Structural Equality: Degrees(0) and Radians(0) are different values

Classes:
    Angle: Abstract base class for all angle variants.

Example:
    >>> class Spin(Angle):
    ...     pass  # Registered as Angle.VARIANTS["Spin"]
    >>> class SpinBase(Angle):
    ...     IS_VARIANT = False  # Shared behaviour only, not registered
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..config import ABS_TOL, REL_TOL
from ..errors import UnsupportedVariantOperation

logger = logging.getLogger(__name__)


class Angle(ABC):
    """Base class for all angle variants.

    Instances are immutable; the payload is fixed at construction time and
    every operation returns a new value.

    Attributes:
        VARIANTS (ClassVar[dict[str, type[Angle]]]): Registered variants.
        VARIANT_INDEX (ClassVar[int]): Position of the variant in the union.
        IS_VARIANT (ClassVar[bool]): Whether the class is a case of the union.
    """

    __slots__ = ()
    __array_priority__ = 1000
    __array_ufunc__ = None

    VARIANTS: ClassVar[dict[str, type[Angle]]] = {}
    VARIANT_INDEX: ClassVar[int] = -1
    IS_VARIANT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Register concrete subclasses as variants of the union.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("IS_VARIANT", True):
            return
        cls.IS_VARIANT = True
        cls.VARIANT_INDEX = len(Angle.VARIANTS)
        Angle.VARIANTS[cls.__name__] = cls

    @classmethod
    def variant(cls, name: str) -> type[Angle]:
        """Look up a registered variant by class name.

        Raises:
            KeyError: If no variant of that name exists.
        """
        return Angle.VARIANTS[name]

    @abstractmethod
    def _payload(self) -> tuple[Any, ...]:
        """Return the payload fields compared by equality, ordering and hashing."""

    def _unsupported(self, operation: str, *others: Any):
        names = [type(self).__name__] + [
            o.__name__ if isinstance(o, type) else type(o).__name__ for o in others
        ]
        logger.debug("Refusing %s for %s", operation, names)
        raise UnsupportedVariantOperation(operation, *names)

    # -------------------------------- Immutability --------------------------------
    def __setattr__(self, name: str, value: Any):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        return (type(self), self._payload())

    # -------------------------------- Structural Comparison --------------------------------
    def _sort_key(self) -> tuple[Any, ...]:
        return (self.VARIANT_INDEX, *self._payload())

    def __eq__(self, other: object) -> bool:
        """Structural equality: same variant and equal payload.

        Returns:
            bool: True only if both angles are the same variant holding equal values.
        """
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload()))

    def __lt__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def isclose(self, other: Angle, *, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        """Approximate structural equality.

        Both angles must be the same variant; payload fields are then compared
        pairwise with :func:`math.isclose`.

        Args:
            other: Angle to compare against.
            rel_tol: Relative tolerance.
            abs_tol: Absolute tolerance.

        Returns:
            bool: True if the payloads agree within tolerance.
        """
        if type(self) is not type(other):
            return False
        return all(
            math.isclose(float(a), float(b), rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self._payload(), other._payload())
        )

    # -------------------------------- Conversions --------------------------------
    def to(self, variant: type[Angle]) -> Angle:
        """Convert to the given variant class.

        Args:
            variant: Target variant, e.g. ``Degrees``.

        Returns:
            Angle: New angle expressed in the target variant.

        Raises:
            UnsupportedVariantOperation: If either side has no conversion.
        """
        converter = getattr(variant, "CONVERTER", None)
        if not converter:
            self._unsupported("conversion", variant)
        return getattr(self, converter)()

    def to_radians(self) -> Angle:
        self._unsupported("to_radians")

    def to_degrees(self) -> Angle:
        self._unsupported("to_degrees")

    def to_gradians(self) -> Angle:
        self._unsupported("to_gradians")

    def to_turns(self) -> Angle:
        self._unsupported("to_turns")

    # -------------------------------- Arithmetic Operations --------------------------------
    def add(self, other: Angle) -> Angle:
        self._unsupported("add", other)

    def subtract(self, other: Angle) -> Angle:
        self._unsupported("subtract", other)

    def multiply(self, other: Angle) -> Angle:
        self._unsupported("multiply", other)

    def divide(self, other: Angle) -> Angle:
        self._unsupported("divide", other)

    def __add__(self, other: Angle) -> Angle:
        return self.add(other)

    def __sub__(self, other: Angle) -> Angle:
        return self.subtract(other)

    def __mul__(self, other: Angle) -> Angle:
        return self.multiply(other)

    def __truediv__(self, other: Angle) -> Angle:
        return self.divide(other)

    def __radd__(self, other: Any) -> Angle:
        self._unsupported("add", other)

    def __rsub__(self, other: Any) -> Angle:
        self._unsupported("subtract", other)

    def __rmul__(self, other: Any) -> Angle:
        self._unsupported("multiply", other)

    def __rtruediv__(self, other: Any) -> Angle:
        self._unsupported("divide", other)

    # -------------------------------- Trigonometry --------------------------------
    def sin(self):
        self._unsupported("sin")

    def cos(self):
        self._unsupported("cos")

    def tan(self):
        self._unsupported("tan")

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        self._unsupported("display")

    def __format__(self, format_spec: str) -> str:
        self._unsupported("format")
