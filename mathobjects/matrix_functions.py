# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elimination import diagonal_product, upper_triangle
from .exceptions import (
    DegenerateMinorError,
    NotSquareError,
    OutOfRangeError,
    SingularMatrixError,
)
from .utils import COFACTOR_WARN_SIZE

logger = logging.getLogger(__name__)


def _require_square(A: np.ndarray, what: str) -> int:
    m, n = A.shape
    if m != n:
        raise NotSquareError(
            f"The {what} is undefined for non-square matrices, got {m}x{n}",
            shape=(m, n),
        )
    return n


def det(A: np.ndarray):
    """
    Calculate the determinant of n-by-n matrix A using elimination
    """
    _require_square(A, "determinant")
    return diagonal_product(upper_triangle(A))


def minor(A: np.ndarray, row: int, col: int) -> np.ndarray:
    """
    Submatrix of A with `row` and `col` removed, remaining rows and
    columns kept in order.
    """
    m, n = A.shape
    if m == 1 or n == 1:
        raise DegenerateMinorError(
            f"A {m}x{n} matrix has no minor matrices", shape=(m, n)
        )
    if not (0 <= row < m and 0 <= col < n):
        raise OutOfRangeError(
            f"Out of range: rows = {m}, row = {row}, columns = {n}, column = {col}",
            index=(row, col),
            shape=(m, n),
        )
    return A[np.arange(m) != row][:, np.arange(n) != col]


def complements(A: np.ndarray) -> np.ndarray:
    """
    Matrix of algebraic complements (cofactors) of a square A:

        C[i, j] = (-1)^(i + j) * det(minor(A, i, j))

    Each cofactor costs one elimination, O(n^5) overall. The single
    cofactor of a 1x1 matrix is the determinant of the empty minor, 1.
    """
    n = _require_square(A, "complements matrix")
    if n == 1:
        return np.ones_like(A)

    logger.debug(f"complements: expanding {n * n} cofactors of a {n}x{n} matrix")
    C = np.empty_like(A)
    for i in range(n):
        for j in range(n):
            cofactor = det(minor(A, i, j))
            C[i, j] = -cofactor if (i + j) % 2 else cofactor
    return C


def adj(A: np.ndarray) -> np.ndarray:
    """
    Adjugate (classical adjoint) of a square matrix A, the transpose of
    its complements matrix.
    """
    return complements(A).T.copy()


def inverse(A: np.ndarray) -> np.ndarray:
    """
    Inverse of a square A by the adjugate method: adj(A) / det(A).

    Raises
    ------
    NotSquareError      : A is not square
    SingularMatrixError : det(A) is exactly zero
    """
    n = _require_square(A, "inverse")
    d = det(A)
    if d == 0:
        raise SingularMatrixError(
            "Inverse matrix can not be calculated from matrix with det = 0",
            determinant=d,
        )
    if n > COFACTOR_WARN_SIZE:
        logger.warning(
            f"inverse(): cofactor expansion of a {n}x{n} matrix is O(n^5)"
        )
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return adj(A) / d
