# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from mathobjects import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def singular_3x3():
    """Third row is the sum of the first two."""
    return Matrix([[1, 2, 3], [4, 5, 6], [5, 7, 9]])
