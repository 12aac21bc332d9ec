# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
mathobjects
===========

Small numeric value types for textbook linear algebra on dense matrices.

Public API
~~~~~~~~~~
- Value types
    - `Matrix`, `Vector`
- Matrix functions on 2-D ndarrays
    - `det`, `minor`, `complements`, `adj`, `inverse`
- Elimination
    - `upper_triangle`, `find_pivot_row`, `diagonal_product`
- Errors
    - `MathObjectsError` and its subclasses

Example
-------
>>> from mathobjects import Matrix
>>> A = Matrix([[1, 2], [3, 4]])
>>> float(A.determinant())
-2.0
>>> print(A.inverse())
{-2 1}
{1.5 -0.5}
"""

from importlib.metadata import version as _pkg_version

from .elimination import diagonal_product, find_pivot_row, upper_triangle
from .exceptions import (
    DegenerateMinorError,
    InnerSizeMismatchError,
    InvalidDimensionError,
    MathObjectsError,
    NotSquareError,
    NumericalError,
    OutOfRangeError,
    RaggedInputError,
    SingularMatrixError,
    SizeMismatchError,
)
from .matrix import Matrix
from .matrix_functions import adj, complements, det, inverse, minor
from .vector import Vector

__all__ = [
    "Matrix",
    "Vector",
    "det",
    "minor",
    "complements",
    "adj",
    "inverse",
    "upper_triangle",
    "find_pivot_row",
    "diagonal_product",
    "MathObjectsError",
    "InvalidDimensionError",
    "RaggedInputError",
    "OutOfRangeError",
    "SizeMismatchError",
    "InnerSizeMismatchError",
    "NotSquareError",
    "DegenerateMinorError",
    "NumericalError",
    "SingularMatrixError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show mathobjects”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
