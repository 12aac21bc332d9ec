# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector value type
"""

import math
import operator

import numpy as np

from .exceptions import InvalidDimensionError, OutOfRangeError, SizeMismatchError
from .utils import (
    element_array,
    fill_from_tokens,
    format_element,
    is_scalar,
    iter_tokens,
    widened,
)


class Vector:
    """
    Fixed-length sequence of numbers with value semantics.

    Indexing is always bounds checked. `abs(v)` is the Euclidean length and
    `v * w` between two vectors is their dot product.
    """

    __hash__ = None
    __array_ufunc__ = None

    def __init__(self, values, dtype=None):
        data = element_array(list(values), dtype)
        if data.ndim != 1:
            raise TypeError("Vector values must be a flat sequence of numbers")
        if data.size == 0:
            raise InvalidDimensionError("Vector size can not be 0")
        self._data = data

    @classmethod
    def filled(cls, size: int = 3, value=0, dtype=None) -> "Vector":
        if size < 1:
            raise InvalidDimensionError("Vector size can not be 0")
        return cls([value] * size, dtype)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.size

    def _check_index(self, pos) -> int:
        pos = operator.index(pos)
        if not 0 <= pos < self._data.size:
            raise OutOfRangeError(
                f"pos >= size, pos = {pos}, size = {self._data.size}",
                index=pos,
                shape=(self._data.size,),
            )
        return pos

    def at(self, pos):
        return self._data[self._check_index(pos)]

    def __getitem__(self, pos):
        return self.at(pos)

    def __setitem__(self, pos, value):
        self._data[self._check_index(pos)] = value

    def __iter__(self):
        return iter(self._data.tolist())

    def __reversed__(self):
        return reversed(self._data.tolist())

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()})"

    def __str__(self) -> str:
        return "[" + ", ".join(format_element(x) for x in self._data) + "]"

    def read(self, source) -> int:
        """
        Fill the vector from text tokens, leaving the tail unchanged if
        the input runs out or a token does not parse.
        """
        return fill_from_tokens(self._data, iter_tokens(source))

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.size == other._data.size and bool(
            np.all(self._data == other._data)
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def resize(self, new_size: int, value=0) -> None:
        """Change the size, discarding the tail or padding with `value`."""
        if new_size < 1:
            raise InvalidDimensionError("Vector size can not be 0")
        data = np.full(new_size, value, dtype=self._data.dtype)
        keep = min(new_size, self._data.size)
        data[:keep] = self._data[:keep]
        self._data = data

    def extend(self, new_size: int, value=0) -> None:
        """Grow to `new_size`, padding with `value`. Never shrinks."""
        if new_size > self._data.size:
            self.resize(new_size, value)

    def copy(self) -> "Vector":
        result = self.__class__.__new__(self.__class__)
        result._data = self._data.copy()
        return result

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._data = widened(self._data, other._data)
        self.extend(other.size)
        self._data[: other.size] += other._data
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._data = widened(self._data, other._data)
        self.extend(other.size)
        self._data[: other.size] -= other._data
        return self

    def __imul__(self, value):
        if not is_scalar(value):
            return NotImplemented
        self._data = widened(self._data, value)
        self._data *= value
        return self

    def __itruediv__(self, value):
        if not is_scalar(value):
            return NotImplemented
        self._data = widened(self._data, value)
        with np.errstate(divide="ignore", invalid="ignore"):
            self._data /= value
        return self

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        if not is_scalar(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, value):
        if not is_scalar(value):
            return NotImplemented
        return self * value

    def __truediv__(self, value):
        if not is_scalar(value):
            return NotImplemented
        result = self.copy()
        result /= value
        return result

    def __neg__(self):
        return self * -1

    def __pos__(self):
        return self.copy()

    def dot(self, other: "Vector"):
        """Scalar (dot) product of two equally sized vectors."""
        if self._data.size != other._data.size:
            raise SizeMismatchError(
                f"size != other.size, size = {self._data.size}, "
                f"other.size = {other._data.size}",
                left_shape=(self._data.size,),
                right_shape=(other._data.size,),
            )
        return self._data @ other._data

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(sum(abs(x) ** 2 for x in self._data.tolist()))

    def __abs__(self) -> float:
        return self.norm()
