"""Clock-face angle variant.

ClockFace records an angle the way it reads off the face of a clock: as
separate hour, minute and second fields. The fields are stored verbatim with
no range normalization, and the variant is deliberately disconnected from the
numeric units; converting, combining, evaluating or rendering a ClockFace
raises UnsupportedVariantOperation. Structural equality, ordering, hashing
and ``repr`` are available.

Classes:
    ClockFace: Hour/minute/second angle payload.

Example:
    >>> face = clock_face(10, 30, 0)
    >>> face
    ClockFace(hour=10.0, minute=30.0, second=0.0)
    >>> face == ClockFace.from_str("10:30:00")
    True
"""

from __future__ import annotations

import numpy as np

from ..config import BASE_TYPE, resolve_dtype
from .angle_base import Angle


class ClockFace(Angle):
    """An angle as it would appear on a clock.

    Attributes:
        hour (numpy.floating): The hours portion.
        minute (numpy.floating): The minutes portion.
        second (numpy.floating): The seconds portion.
    """

    __slots__ = ("hour", "minute", "second")

    def __new__(
        cls,
        hour: BASE_TYPE,
        minute: BASE_TYPE,
        second: BASE_TYPE,
        dtype: type[np.floating] | None = None,
    ):
        scalar_type = resolve_dtype(hour, dtype)
        obj = object.__new__(cls)
        object.__setattr__(obj, "hour", scalar_type(hour))
        object.__setattr__(obj, "minute", scalar_type(minute))
        object.__setattr__(obj, "second", scalar_type(second))
        return obj

    @classmethod
    def from_str(cls, time_str: str, dtype: type[np.floating] | None = None) -> ClockFace:
        """Create a ClockFace from a "HH:MM:SS" or "HH:MM" formatted string.

        Args:
            time_str (str): Clock reading, fields separated by colons.
            dtype: Scalar precision of the fields.

        Returns:
            ClockFace: Instance holding the parsed fields.

        Raises:
            ValueError: If the string does not have two or three numeric fields.
        """
        parts = time_str.strip().split(":")
        if len(parts) not in (2, 3):
            msg = f"expected HH:MM[:SS], got {time_str!r}"
            raise ValueError(msg)
        if len(parts) == 2:
            parts.append("0")
        h, m, s = map(float, parts)
        return cls(h, m, s, dtype)

    def _payload(self) -> tuple[np.floating, np.floating, np.floating]:
        return (self.hour, self.minute, self.second)

    def __repr__(self) -> str:
        return (
            f"ClockFace(hour={float(self.hour)!r}, minute={float(self.minute)!r}, "
            f"second={float(self.second)!r})"
        )


def clock_face(
    hour: BASE_TYPE,
    minute: BASE_TYPE,
    second: BASE_TYPE,
    dtype: type[np.floating] | None = None,
) -> ClockFace:
    """Return an angle as it would appear on a clock."""
    return ClockFace(hour, minute, second, dtype)
