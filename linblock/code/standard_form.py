"""Detection of a contiguous identity block inside a generator matrix."""

from __future__ import annotations

from typing import Optional

import numpy as np


def _is_unit_column(column: np.ndarray, position: int) -> bool:
    # Exactly one set bit, located at `position`.
    return int(column.sum()) == 1 and column[position] == 1


def find_identity_block(matrix: np.ndarray) -> Optional[int]:
    """Return the first column of a k x k identity block, or None.

    Columns are scanned left to right while tracking the row where the next
    lone 1 is expected. A column that does not match resets the expected row
    to 0 and the search resumes at the following column, so the block may sit
    at the start, the end, or anywhere in between.
    """

    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError("matrix must be 2D")
    rows, cols = matrix.shape
    if rows == 0:
        return None

    position = 0
    for col in range(cols):
        if _is_unit_column(matrix[:, col], position):
            position += 1
            if position == rows:
                return col - rows + 1
        else:
            position = 0
    return None


def is_standard_form(matrix: np.ndarray) -> bool:
    return find_identity_block(matrix) is not None


__all__ = ["find_identity_block", "is_standard_form"]
