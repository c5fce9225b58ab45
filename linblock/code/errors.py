"""Exceptions raised by the generator-matrix engine."""

from __future__ import annotations


class LinearCodeError(ValueError):
    """Base class for every precondition failure in linblock."""


class InvalidDimension(LinearCodeError):
    pass


class ShapeMismatch(LinearCodeError):
    pass


class MissingRow(LinearCodeError):
    pass


class NonStandardForm(LinearCodeError):
    """Supplied matrix has no contiguous identity block."""


class NonBinaryEntry(LinearCodeError):
    pass


class LengthMismatch(LinearCodeError):
    pass


class UnknownCodeword(LinearCodeError):
    """Vector is not a codeword of this generator matrix."""


__all__ = [
    "LinearCodeError",
    "InvalidDimension",
    "ShapeMismatch",
    "MissingRow",
    "NonStandardForm",
    "NonBinaryEntry",
    "LengthMismatch",
    "UnknownCodeword",
]
