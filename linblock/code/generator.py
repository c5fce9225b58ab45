"""Generator-matrix engine: construction, encode/decode table, parity checks."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

import numpy as np

from .. import config
from . import gf2
from .errors import (
    InvalidDimension,
    LengthMismatch,
    MissingRow,
    NonStandardForm,
    ShapeMismatch,
    UnknownCodeword,
)
from .parity import ParityCheckMatrix, derive_parity_check
from .standard_form import find_identity_block

logger = logging.getLogger(__name__)


# ------------------------------
# Helper functions
# ------------------------------

def _check_dimensions(length: int, dimension: int) -> None:
    if length < 1:
        raise InvalidDimension(f"length must be at least 1, got {length}")
    if dimension < 1:
        raise InvalidDimension(f"dimension must be at least 1, got {dimension}")
    if length < dimension:
        raise InvalidDimension(f"length {length} is smaller than dimension {dimension}")


def _validate_supplied(matrix, length: int, dimension: int) -> np.ndarray:
    if isinstance(matrix, np.ndarray) and matrix.ndim != 2:
        raise ShapeMismatch(f"matrix must be 2D, got {matrix.ndim}D")
    rows = list(matrix)
    if len(rows) != dimension:
        raise ShapeMismatch(f"matrix has {len(rows)} rows, expected dimension {dimension}")
    for r, row in enumerate(rows):
        if row is None:
            raise MissingRow(f"matrix row {r} is missing")
        if np.ndim(row) != 1:
            raise ShapeMismatch(f"matrix row {r} is not a 1D sequence of bits")
        if len(row) != length:
            raise ShapeMismatch(f"matrix row {r} has {len(row)} columns, expected length {length}")
    return gf2.as_bits([list(row) for row in rows], "matrix")


def _enumerate_messages(dimension: int) -> np.ndarray:
    """All 2**k messages in increasing numeric order, most significant bit first."""

    values = np.arange(1 << dimension, dtype=np.int64)
    shifts = np.arange(dimension - 1, -1, -1, dtype=np.int64)
    return ((values[:, None] >> shifts) & 1).astype(np.int8)


def _to_key(bits: np.ndarray) -> str:
    return (np.asarray(bits, dtype=np.uint8) + ord("0")).tobytes().decode("ascii")


def build_generator_matrix(
    length: int,
    dimension: int,
    matrix: Optional[Sequence[Sequence[int]]] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[np.ndarray, int]:
    """Return ``(G, offset)`` where ``offset`` is the identity block's first column.

    Square codes are always the identity. Without a supplied matrix the result
    is ``[I | R]`` with ``R`` drawn from ``rng``; a supplied matrix is checked
    for shape, missing rows and a contiguous identity block.
    """

    _check_dimensions(length, dimension)

    if length == dimension:
        if matrix is not None:
            logger.debug("square %dx%d code, supplied matrix ignored", dimension, length)
        return gf2.identity(dimension), 0

    if matrix is None:
        if rng is None:
            rng = np.random.default_rng()
        standard = gf2.identity(dimension)
        random_part = gf2.random_matrix(dimension, length - dimension, rng)
        logger.debug("generated random %dx%d generator matrix", dimension, length)
        return np.hstack([standard, random_part]), 0

    generator = _validate_supplied(matrix, length, dimension)
    offset = find_identity_block(generator)
    if offset is None:
        raise NonStandardForm(
            f"matrix has no contiguous {dimension}x{dimension} identity block; "
            "a parity-check matrix cannot be derived"
        )
    logger.debug("supplied matrix accepted, identity block at column %d", offset)
    return generator, offset


# ------------------------------
# Engine
# ------------------------------

class GeneratorMatrix:
    """Binary (n, k) linear block code defined by a k x n generator matrix.

    The full translation table (codeword -> message) is built once at
    construction by encoding every one of the 2**k messages, so ``dimension``
    is capped by ``max_dimension``. Instances are immutable after
    ``__init__`` and safe to share for reading.
    """

    def __init__(
        self,
        length: int,
        dimension: int,
        matrix: Optional[Sequence[Sequence[int]]] = None,
        *,
        rng: Optional[np.random.Generator] = None,
        max_dimension: Optional[int] = None,
    ) -> None:
        if max_dimension is None:
            max_dimension = config.DEFAULTS.max_dimension
        if dimension > max_dimension:
            raise InvalidDimension(
                f"dimension {dimension} exceeds max_dimension {max_dimension} "
                f"(translation table would hold 2**{dimension} entries)"
            )

        generator, offset = build_generator_matrix(length, dimension, matrix, rng)
        generator.setflags(write=False)

        self._length = length
        self._dimension = dimension
        self._matrix = generator
        self._offset = offset
        self._messages, self._codewords, table = self._build_translation_table()
        self._table: Mapping[str, np.ndarray] = MappingProxyType(table)

    # ---- properties ----

    @property
    def length(self) -> int:
        return self._length

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def matrix(self) -> np.ndarray:
        # A view of a non-writeable owner cannot be made writeable again.
        return self._matrix.view()

    @property
    def identity_offset(self) -> int:
        return self._offset

    @property
    def translation_table(self) -> Mapping[str, np.ndarray]:
        return self._table

    def __repr__(self) -> str:
        return f"GeneratorMatrix(length={self._length}, dimension={self._dimension})"

    # ---- codec ----

    def _check_vector(self, vector, expected: int, name: str) -> np.ndarray:
        arr = np.asarray(vector)
        if arr.ndim != 1 or arr.size != expected:
            raise LengthMismatch(f"{name} must be a 1D vector of length {expected}, got shape {arr.shape}")
        return gf2.as_bits(arr, name)

    def encode(self, vector) -> np.ndarray:
        """Encode a length-k message into a length-n codeword."""

        message = self._check_vector(vector, self._dimension, "message")
        return np.fromiter(
            (gf2.multiply(column, message) for column in self._matrix.T),
            dtype=np.int8,
            count=self._length,
        )

    def decode(self, vector) -> np.ndarray:
        """Return the message whose codeword is exactly ``vector``.

        No error correction is attempted; a corrupted word raises
        ``UnknownCodeword``.
        """

        codeword = self._check_vector(vector, self._length, "codeword")
        key = _to_key(codeword)
        try:
            message = self._table[key]
        except KeyError:
            raise UnknownCodeword(f"{key} is not a codeword of this code") from None
        return message.copy()

    def codewords(self) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        """Yield (message, codeword) pairs in increasing message order."""

        for message, codeword in zip(self._messages, self._codewords):
            yield message.copy(), codeword.copy()

    def _build_translation_table(self):
        messages = _enumerate_messages(self._dimension)
        codewords = gf2.matmul(messages, self._matrix)
        messages.setflags(write=False)
        codewords.setflags(write=False)

        table = {}
        for message, codeword in zip(messages, codewords):
            table[_to_key(codeword)] = message
        if len(table) != messages.shape[0]:
            raise NonStandardForm("generator matrix does not map messages to distinct codewords")
        logger.debug("translation table built with %d entries", len(table))
        return messages, codewords, table

    # ---- parity check ----

    def parity_check_matrix(self) -> ParityCheckMatrix:
        """Derive H from the generator matrix; recomputed on every call."""

        return ParityCheckMatrix(derive_parity_check(self._matrix, self._offset))


__all__ = ["GeneratorMatrix", "build_generator_matrix"]
