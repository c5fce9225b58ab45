"""Arithmetic over GF(2) on int8 numpy arrays."""

from __future__ import annotations

import numpy as np

from .errors import NonBinaryEntry


def as_bits(values, name: str = "vector") -> np.ndarray:
    """Return ``values`` as an int8 array, rejecting anything but 0/1."""

    arr = np.asarray(values)
    if arr.size and not np.isin(arr, (0, 1)).all():
        raise NonBinaryEntry(f"{name} must contain only 0 and 1")
    return arr.astype(np.int8)


def multiply(a: np.ndarray, b: np.ndarray) -> int:
    """Dot product of two binary vectors, reduced mod 2."""

    a = np.asarray(a)
    b = np.asarray(b)
    if a.ndim != 1 or b.ndim != 1:
        raise ValueError("multiply expects 1D vectors")
    if a.size != b.size:
        raise ValueError(f"vector lengths differ: {a.size} != {b.size}")
    return int(np.dot(a.astype(np.int64), b.astype(np.int64)) & 1)


def matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return ((np.asarray(a, dtype=np.int64) @ np.asarray(b, dtype=np.int64)) & 1).astype(np.int8)


def xor(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.bitwise_xor(np.asarray(a, dtype=np.int8), np.asarray(b, dtype=np.int8))


def identity(size: int) -> np.ndarray:
    return np.eye(size, dtype=np.int8)


def random_matrix(rows: int, cols: int, rng: np.random.Generator) -> np.ndarray:
    """Draw a ``rows x cols`` matrix of independent uniform bits."""

    return rng.integers(0, 2, size=(rows, cols), dtype=np.int8)


__all__ = ["as_bits", "multiply", "matmul", "xor", "identity", "random_matrix"]
