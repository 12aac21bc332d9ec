# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


def find_pivot_row(A: np.ndarray, from_row: int, col: int) -> Optional[int]:
    """Index of the first row at or below `from_row` with A[row, col] != 0."""
    for row in range(from_row, A.shape[0]):
        if A[row, col]:
            return row
    return None


def upper_triangle(A: np.ndarray) -> np.ndarray:
    """
    Forward elimination on an m by n matrix A without pivot scaling.

    Unlike textbook elimination the pivot row is ADDED into row j instead
    of being swapped with it. Adding a row leaves the determinant unchanged,
    so the product of the diagonal is det(A) with no permutation sign.

    Parameters
    ----------
    A : np.ndarray               (m, n)
        Input matrix, left untouched.

    Returns
    -------
    U : np.ndarray               (m, n)
        Copy of A with zeros below the main diagonal (up to the rounding
        of the element type). Columns without a pivot are left as they are.
    """
    if not isinstance(A, np.ndarray) or A.ndim != 2:
        raise TypeError("A must be a 2-D NumPy ndarray")

    U = A.copy()
    m, n = U.shape

    for col in range(n - 1):
        pivot_row = find_pivot_row(U, col, col)
        if pivot_row is None:
            # Nothing to eliminate with, column is zero at and below col
            logger.debug(f"upper_triangle: no pivot in column {col}, skipping")
            continue

        if pivot_row != col:
            logger.debug(f"upper_triangle: adding row {pivot_row} into row {col}")
            U[col] += U[pivot_row]

        pivot = U[col, col]
        for row in range(col + 1, m):
            if U[row, col]:
                multiplier = U[row, col] / pivot
                U[row] -= U[col] * multiplier

    return U


def diagonal_product(U: np.ndarray):
    """
    Product of the main diagonal of a square U, stopping early once the
    running product is exactly zero.
    """
    result = U.dtype.type(1)
    for i in range(min(U.shape)):
        result = result * U[i, i]
        if result == 0:
            break
    return result
