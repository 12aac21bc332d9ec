# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from fractions import Fraction
from typing import Iterable, Iterator

import numpy as np

EPS: float = 1e-12
RTOL: float = 1e-9

DEFAULT_DTYPE = np.float64

# Above this size the O(n^5) cofactor inverse is logged as a warning.
COFACTOR_WARN_SIZE: int = 8


def element_dtype(dtype) -> np.dtype:
    """
    Normalise a requested element dtype. Integer and boolean types are
    promoted to DEFAULT_DTYPE; only float, complex and object remain.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in "biu":
        return np.dtype(DEFAULT_DTYPE)
    if dtype.kind not in "fcO":
        raise TypeError(f"unsupported element type: {dtype}")
    return dtype


def element_array(values, dtype=None) -> np.ndarray:
    """
    Build a 1-D or 2-D element array from `values`.

    Integer and boolean element types, inferred or requested, are promoted
    to DEFAULT_DTYPE; float, complex and object keep their type.
    """
    if dtype is not None:
        return np.array(values, dtype=element_dtype(dtype))
    arr = np.array(values)
    return arr.astype(element_dtype(arr.dtype), copy=False)


def widened(data: np.ndarray, other) -> np.ndarray:
    """
    `data` converted to the common type of itself and `other` (an array or
    a scalar), so an in-place update with `other` can not fail to cast.
    """
    if isinstance(other, np.ndarray):
        other = other.dtype
    elif not isinstance(other, (bool, int, float, complex, np.generic)):
        # Fraction and other Python numbers only fit in object arrays
        other = np.asarray(other).dtype
    dtype = np.result_type(data.dtype, other)
    if dtype == data.dtype:
        return data
    return data.astype(dtype)


def is_scalar(value) -> bool:
    return isinstance(value, (numbers.Number, np.generic))


def format_element(value) -> str:
    """Format one element compactly, `%g` style for floats."""
    if isinstance(value, (float, np.floating)):
        return f"{value:g}"
    if isinstance(value, (complex, np.complexfloating)):
        return str(complex(value))
    return str(value)


def iter_tokens(source) -> Iterator:
    """
    Yield whitespace separated tokens from a string, a text stream
    (anything with .read()) or an iterable of ready-made tokens.
    """
    if isinstance(source, str):
        yield from source.split()
    elif hasattr(source, "read"):
        for line in source:
            yield from line.split()
    else:
        yield from source


def parse_token(token, dtype: np.dtype):
    """
    Parse a single token for an array of `dtype`; raises ValueError.

    Object arrays hold exact values, so their tokens are read as
    fractions (`2`, `1.5`, `1/3`).
    """
    if dtype.kind == "c":
        return complex(token)
    if dtype.kind == "O":
        return Fraction(token)
    return float(token)


def fill_from_tokens(data: np.ndarray, tokens: Iterable) -> int:
    """
    Best-effort fill of the flat array `data` from `tokens`.

    Stops at the first missing or unparsable token; already written
    elements keep their new values. Returns the number of elements written.
    """
    filled = 0
    tokens = iter(tokens)
    for i in range(data.size):
        try:
            data[i] = parse_token(next(tokens), data.dtype)
        except (StopIteration, ValueError, TypeError):
            break
        filled += 1
    return filled


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    # enforce upper-triangular
    U = np.triu(U)
    # replace any accidental zeros on the diagonal
    diag = rng.uniform(low if low != 0 else 1, high, size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(U)


def random_nonsingular(n, seed=None) -> np.ndarray:
    """
    Random n by n matrix A = L U with a unit lower-triangular L, so that
    det(A) is the product of U's diagonal and never zero.
    """
    rng = np.random.default_rng(seed)
    L = np.tril(rng.uniform(-1, 1, size=(n, n)), k=-1) + np.eye(n)
    diag = rng.uniform(1, 2, size=n) * rng.choice([-1.0, 1.0], size=n)
    U = np.triu(rng.uniform(-1, 1, size=(n, n)), k=1) + np.diag(diag)
    return L @ U
