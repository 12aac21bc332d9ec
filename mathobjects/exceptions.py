# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for mathobjects.

Everything raised on purpose by the library derives from `MathObjectsError`,
and each kind also derives from the closest builtin exception, so code that
already catches `ValueError` / `IndexError` keeps working.
"""

from typing import Optional, Tuple

Shape = Tuple[int, int]


class MathObjectsError(Exception):
    """Base exception for all mathobjects errors."""


class InvalidDimensionError(MathObjectsError, ValueError):
    """A matrix or vector dimension is zero."""


class RaggedInputError(MathObjectsError, ValueError):
    """
    Nested rows passed to the matrix constructor have different lengths.

    Attributes:
        row: index of the first offending row
        expected: length of the first row
        actual: length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class OutOfRangeError(MathObjectsError, IndexError):
    """Checked element access outside of the container bounds."""

    def __init__(self, message: str, index=None, shape=None):
        super().__init__(message)
        self.index = index
        self.shape = shape


class SizeMismatchError(MathObjectsError, ValueError):
    """
    Element-wise operation between differently sized operands.

    Attributes:
        left_shape, right_shape: shapes of the two operands
    """

    def __init__(self, message: str, left_shape=None, right_shape=None):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class InnerSizeMismatchError(MathObjectsError, ValueError):
    """Matrix product where left.columns != right.rows."""

    def __init__(
        self,
        message: str,
        left_shape: Optional[Shape] = None,
        right_shape: Optional[Shape] = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(MathObjectsError, ValueError):
    """Operation defined only for square matrices."""

    def __init__(self, message: str, shape: Optional[Shape] = None):
        super().__init__(message)
        self.shape = shape


class DegenerateMinorError(MathObjectsError, ValueError):
    """Minor requested from a matrix with a dimension equal to 1."""

    def __init__(self, message: str, shape: Optional[Shape] = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(MathObjectsError, ArithmeticError):
    """Base class for failures arising from the numbers themselves."""


class SingularMatrixError(NumericalError):
    """
    Inverse requested for a matrix whose determinant is exactly zero.

    Attributes:
        determinant: the determinant that was computed
    """

    def __init__(self, message: str, determinant=None):
        super().__init__(message)
        self.determinant = determinant
