"""Generator-matrix engine, standard-form validator, parity-check derivation."""

from .errors import (
    LinearCodeError,
    InvalidDimension,
    ShapeMismatch,
    MissingRow,
    NonStandardForm,
    NonBinaryEntry,
    LengthMismatch,
    UnknownCodeword,
)
from .gf2 import multiply, matmul
from .standard_form import find_identity_block, is_standard_form
from .parity import ParityCheckMatrix, derive_parity_check
from .generator import GeneratorMatrix, build_generator_matrix

__all__ = [
    "LinearCodeError",
    "InvalidDimension",
    "ShapeMismatch",
    "MissingRow",
    "NonStandardForm",
    "NonBinaryEntry",
    "LengthMismatch",
    "UnknownCodeword",
    "multiply",
    "matmul",
    "find_identity_block",
    "is_standard_form",
    "ParityCheckMatrix",
    "derive_parity_check",
    "GeneratorMatrix",
    "build_generator_matrix",
]
