# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrix value type.

Elements are kept in one contiguous row-major NumPy array; element
(row, column) lives at ``row * columns + column``. The linear algebra is
delegated to the ndarray functions in `elimination` and `matrix_functions`.

Operator summary
----------------
- ``a + b``, ``a - b``      element-wise, shapes must match
- ``a * b``, ``a @ b``      matrix product when ``b`` is a Matrix
- ``a * s``, ``s * a``, ``a / s``  scalar scaling
- ``-a``                    negated copy, ``+a`` plain copy
- ``a.T``                   transpose

Every operator has an in-place form (``+=``, ``-=``, ``*=``, ``@=``, ``/=``)
that mutates the receiver; the plain form clones first and never aliases
its inputs.
"""

import logging
import operator
from typing import Iterator, Tuple

import numpy as np

from . import matrix_functions
from .elimination import upper_triangle
from .exceptions import (
    InnerSizeMismatchError,
    InvalidDimensionError,
    OutOfRangeError,
    RaggedInputError,
    SizeMismatchError,
)
from .utils import (
    DEFAULT_DTYPE,
    EPS,
    RTOL,
    element_array,
    element_dtype,
    fill_from_tokens,
    format_element,
    is_scalar,
    iter_tokens,
    widened,
)
from .vector import Vector

logger = logging.getLogger(__name__)


def _check_dimension(value, name: str) -> int:
    value = operator.index(value)
    if value < 1:
        raise InvalidDimensionError(f"Matrix {name} can not be {value}")
    return value


class Matrix:
    """
    Dense rows x columns matrix with value semantics.

    Parameters
    ----------
    rows : sequence of sequences
        Nested rows, e.g. ``[[1, 2], [3, 4]]``, or a 2-D ndarray. All rows
        must have the length of the first one.
    dtype : numpy dtype, optional
        Element type: float, complex or object. Integer and boolean types,
        inferred or requested, are promoted to float64. In-place operators
        widen the element type when the operand needs it (a float matrix
        times 1j becomes complex).

    Raises
    ------
    InvalidDimensionError : no rows, or an empty first row
    RaggedInputError      : rows of different lengths
    """

    __hash__ = None
    # make NumPy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, rows, dtype=None):
        rows = [list(row) for row in rows]
        if not rows:
            raise InvalidDimensionError("Matrix sizes can not be 0")

        columns = len(rows[0])
        if not columns:
            raise InvalidDimensionError("Matrix sizes can not be 0")

        for i, row in enumerate(rows):
            if len(row) != columns:
                raise RaggedInputError(
                    f"Row {i} has {len(row)} elements, expected {columns}",
                    row=i,
                    expected=columns,
                    actual=len(row),
                )

        grid = element_array(rows, dtype)
        if grid.ndim != 2:
            raise TypeError("Matrix elements must be scalars")
        self._assign(grid)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def _wrap(cls, grid: np.ndarray) -> "Matrix":
        """Adopt a validated 2-D array without copying it."""
        result = cls.__new__(cls)
        result._assign(grid)
        return result

    @classmethod
    def zeros(cls, rows: int, columns: int, dtype=None) -> "Matrix":
        """rows x columns matrix of zeros."""
        rows = _check_dimension(rows, "rows")
        columns = _check_dimension(columns, "columns")
        dtype = element_dtype(DEFAULT_DTYPE if dtype is None else dtype)
        return cls._wrap(np.zeros((rows, columns), dtype=dtype))

    @classmethod
    def identity(cls, size: int = 3, diagonal=1, dtype=None) -> "Matrix":
        """size x size matrix with `diagonal` on the main diagonal."""
        size = _check_dimension(size, "size")
        dtype = element_array([diagonal], dtype).dtype
        grid = np.zeros((size, size), dtype=dtype)
        grid[np.diag_indices(size)] = diagonal
        return cls._wrap(grid)

    @classmethod
    def from_vector(cls, vector: Vector, as_column: bool = False) -> "Matrix":
        """1 x N row (or N x 1 column when `as_column`) copy of `vector`."""
        data = vector.to_numpy()
        shape = (data.size, 1) if as_column else (1, data.size)
        return cls._wrap(data.reshape(shape))

    def _assign(self, grid: np.ndarray) -> None:
        self._rows, self._columns = grid.shape
        self._data = np.ascontiguousarray(grid).reshape(-1)

    # ------------------------------------------------------------------
    # Shape & element access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def _grid(self) -> np.ndarray:
        # writable row-major view onto _data
        return self._data.reshape(self._rows, self._columns)

    def _check_index(self, row, column) -> Tuple[int, int]:
        row, column = operator.index(row), operator.index(column)
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise OutOfRangeError(
                f"Out of range: rows = {self._rows}, row = {row}, "
                f"columns = {self._columns}, column = {column}",
                index=(row, column),
                shape=self.shape,
            )
        return row, column

    def get(self, row: int, column: int):
        row, column = self._check_index(row, column)
        return self._data[row * self._columns + column]

    def set(self, row: int, column: int, value) -> None:
        row, column = self._check_index(row, column)
        self._data[row * self._columns + column] = value

    def __getitem__(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be (row, column) pairs")
        return self.get(*key)

    def __setitem__(self, key, value):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be (row, column) pairs")
        self.set(*key, value)

    def __iter__(self) -> Iterator:
        """Elements in row-major order."""
        return iter(self._data.tolist())

    def __reversed__(self) -> Iterator:
        return reversed(self._data.tolist())

    def tolist(self) -> list:
        return self._grid.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._grid.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._grid, dtype=dtype)

    # ------------------------------------------------------------------
    # Text I/O
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()})"

    def __str__(self) -> str:
        return "\n".join(
            "{" + " ".join(format_element(x) for x in row) + "}" for row in self._grid
        )

    def read(self, source) -> int:
        """
        Read rows * columns elements row by row from `source` (a string,
        a text stream or an iterable of tokens).

        Reading stops quietly when the input is exhausted or a token does
        not parse; elements read so far keep their new values and the rest
        keep their old ones. Float matrices parse tokens with `float`,
        complex ones with `complex`, and object matrices with `Fraction`
        (so `1/3` reads exactly).

        Returns
        -------
        int : number of elements filled, ``rows * columns`` on success
        """
        return fill_from_tokens(self._data, iter_tokens(source))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._data == other._data))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def isclose(self, other: "Matrix", rtol: float = RTOL, atol: float = EPS) -> bool:
        """Same shape and element-wise equal within tolerance."""
        return self.shape == other.shape and bool(
            np.allclose(self._grid, other._grid, rtol=rtol, atol=atol)
        )

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------
    def clone(self) -> "Matrix":
        return self._wrap(self._grid.copy())

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def __pos__(self):
        return self.clone()

    def negate(self) -> "Matrix":
        return self * -1

    def __neg__(self):
        return self.negate()

    # ------------------------------------------------------------------
    # In-place arithmetic
    # ------------------------------------------------------------------
    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise SizeMismatchError(
                f"Sizes mismatch: rows = {self._rows}, other.rows = {other._rows}, "
                f"columns = {self._columns}, other.columns = {other._columns}",
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def _check_inner_sizes(self, other: "Matrix") -> None:
        if self._columns != other._rows:
            raise InnerSizeMismatchError(
                f"Inner sizes mismatch: columns = {self._columns}, "
                f"other.rows = {other._rows}",
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._data = widened(self._data, other._data)
        self._data += other._data
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._data = widened(self._data, other._data)
        self._data -= other._data
        return self

    def __imatmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_inner_sizes(other)
        product = self._grid @ other._grid
        if product.shape != self.shape:
            logger.debug(f"matrix product reshapes {self.shape} -> {product.shape}")
        self._assign(product)
        return self

    def __imul__(self, other):
        if isinstance(other, Matrix):
            return self.__imatmul__(other)
        if not is_scalar(other):
            return NotImplemented
        self._data = widened(self._data, other)
        self._data *= other
        return self

    def __itruediv__(self, value):
        if not is_scalar(value):
            return NotImplemented
        self._data = widened(self._data, value)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            self._data /= value
        return self

    # ------------------------------------------------------------------
    # Allocating arithmetic: clone, then the in-place form
    # ------------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.clone()
        result += other
        return result

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.clone()
        result -= other
        return result

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.clone()
        result @= other
        return result

    def __mul__(self, other):
        if not (isinstance(other, Matrix) or is_scalar(other)):
            return NotImplemented
        result = self.clone()
        result *= other
        return result

    def __rmul__(self, value):
        if not is_scalar(value):
            return NotImplemented
        return self * value

    def __truediv__(self, value):
        if not is_scalar(value):
            return NotImplemented
        result = self.clone()
        result /= value
        return result

    def add(self, other: "Matrix") -> "Matrix":
        return self + other

    def subtract(self, other: "Matrix") -> "Matrix":
        return self - other

    def multiply(self, other) -> "Matrix":
        """Matrix product when `other` is a Matrix, scaling otherwise."""
        result = self.__mul__(other)
        if result is NotImplemented:
            raise TypeError(f"can not multiply Matrix by {type(other).__name__}")
        return result

    def divide(self, value) -> "Matrix":
        result = self.__truediv__(value)
        if result is NotImplemented:
            raise TypeError(f"can not divide Matrix by {type(value).__name__}")
        return result

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------
    def transpose(self) -> "Matrix":
        return self._wrap(self._grid.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def minor_matrix(self, row: int, column: int) -> "Matrix":
        """Matrix with `row` and `column` removed."""
        row, column = operator.index(row), operator.index(column)
        return self._wrap(matrix_functions.minor(self._grid, row, column))

    def upper_triangle(self) -> "Matrix":
        """
        Zeros below the main diagonal by forward elimination, adding the
        pivot row into place instead of swapping rows.
        """
        return self._wrap(upper_triangle(self._grid))

    def determinant(self):
        return matrix_functions.det(self._grid)

    def complements_matrix(self) -> "Matrix":
        """
        Matrix of algebraic complements (cofactors).

        A 1x1 matrix has no minor matrix, so its single cofactor is taken
        as the determinant of the empty minor, 1, rather than raising
        DegenerateMinorError.
        """
        return self._wrap(matrix_functions.complements(self._grid))

    def adjugate(self) -> "Matrix":
        return self._wrap(matrix_functions.adj(self._grid))

    def inverse(self) -> "Matrix":
        """
        adjugate() / determinant(). Raises NotSquareError for non-square
        input and SingularMatrixError when the determinant is exactly zero.
        A 1x1 matrix [[a]] inverts to [[1 / a]], see complements_matrix().
        """
        return self._wrap(matrix_functions.inverse(self._grid))

    # ------------------------------------------------------------------
    # Resizing
    # ------------------------------------------------------------------
    def set_rows(self, rows: int) -> None:
        """
        Change the row count in place, dropping trailing rows or appending
        rows of zeros.
        """
        rows = _check_dimension(rows, "rows")
        grid = np.zeros((rows, self._columns), dtype=self.dtype)
        keep = min(rows, self._rows)
        grid[:keep] = self._grid[:keep]
        logger.debug(f"set_rows: {self.shape} -> {grid.shape}")
        self._assign(grid)

    def set_columns(self, columns: int) -> None:
        """
        Change the column count in place, dropping trailing columns or
        appending columns of zeros.
        """
        columns = _check_dimension(columns, "columns")
        grid = np.zeros((self._rows, columns), dtype=self.dtype)
        keep = min(columns, self._columns)
        grid[:, :keep] = self._grid[:, :keep]
        logger.debug(f"set_columns: {self.shape} -> {grid.shape}")
        self._assign(grid)
