"""Exceptions raised by the angle algebra."""

from __future__ import annotations


class UnsupportedVariantOperation(TypeError):
    """An operation was invoked on, or against, a variant that does not define it.

    Raised for every conversion, arithmetic, trigonometric or rendering call
    that involves a ``ClockFace`` value, and for operands the operator table
    does not cover (e.g. adding a string to an angle).

    Attributes:
        operation (str): Name of the attempted operation.
        variants (tuple[str, ...]): Names of the operand types involved.
    """

    def __init__(self, operation: str, *variants: str):
        self.operation = operation
        self.variants = variants
        msg = f"{operation} is not supported for {', '.join(variants)}"
        super().__init__(msg)
