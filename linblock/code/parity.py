"""Parity-check matrix derivation and its container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from . import gf2
from .errors import ShapeMismatch


@dataclass(frozen=True, eq=False)
class ParityCheckMatrix:
    """Read-only wrapper around a finished (n - k) x n binary matrix."""

    matrix: np.ndarray

    def __post_init__(self) -> None:
        matrix = gf2.as_bits(self.matrix, "parity-check matrix")
        if matrix.ndim != 2:
            raise ShapeMismatch("parity-check matrix must be 2D")
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix.view())

    @property
    def shape(self) -> Tuple[int, int]:
        return self.matrix.shape

    def to_list(self) -> List[List[int]]:
        return self.matrix.tolist()


def derive_parity_check(generator: np.ndarray, offset: int = 0) -> np.ndarray:
    """Return H for a generator matrix whose identity block starts at `offset`.

    With G = [I | P] the result is [P^T | I]. When the identity block sits
    elsewhere, the columns it occupies receive P^T and the remaining columns
    receive the (n - k) identity, which keeps G @ H^T = 0 over GF(2).
    """

    generator = np.asarray(generator)
    if generator.ndim != 2:
        raise ValueError("generator must be 2D")
    k, n = generator.shape
    if not 0 <= offset <= n - k:
        raise ValueError(f"identity offset {offset} out of range for a {k}x{n} matrix")

    if n == k:
        return gf2.identity(n)

    identity_cols = np.arange(offset, offset + k)
    other_cols = np.setdiff1d(np.arange(n), identity_cols)

    other = generator[:, other_cols]
    twisted = other.T
    parity = np.zeros((n - k, n), dtype=np.int8)
    parity[:, identity_cols] = twisted
    parity[:, other_cols] = gf2.identity(n - k)
    return parity


__all__ = ["ParityCheckMatrix", "derive_parity_check"]
