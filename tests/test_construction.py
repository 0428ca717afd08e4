# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densematrix.construction import (
    copy_matrix,
    fill,
    from_array,
    gaussian,
    identity,
    uniform,
    zeros,
)
from densematrix.errors import InvalidRange, InvalidShape, SizeMismatch


@pytest.mark.parametrize("rows,cols", [(1, 1), (4, 3), (2, 9)])
def test_zeros(rows, cols):
    m = zeros(rows, cols)
    assert m.shape == (rows, cols)
    assert np.all(m.storage == 0.0)


@pytest.mark.parametrize("n", [1, 2, 5])
def test_identity(n):
    m = identity(n)
    for i in range(n):
        for j in range(n):
            assert m.get(i, j) == (1.0 if i == j else 0.0)


def test_identity_must_be_square():
    assert identity(3, 3).shape == (3, 3)
    with pytest.raises(InvalidShape):
        identity(3, 4)
    with pytest.raises(InvalidShape):
        identity(0)


def test_uniform_range_and_reproducibility():
    a = uniform(20, 30, -2.0, 3.0, seed=7)
    b = uniform(20, 30, -2.0, 3.0, seed=7)
    assert a.storage.dtype == np.float32
    assert np.all(a.storage >= -2.0) and np.all(a.storage <= 3.0)
    assert np.array_equal(a.storage, b.storage)


def test_uniform_degenerate_range():
    m = uniform(3, 3, 1.5, 1.5, seed=0)
    assert np.all(m.storage == 1.5)


def test_uniform_rejects_inverted_range():
    with pytest.raises(InvalidRange):
        uniform(2, 2, 1.0, 0.0)


@pytest.mark.parametrize("rows,cols", [(200, 200), (1, 1), (3, 5)])
def test_gaussian_shape(rows, cols):
    m = gaussian(rows, cols, seed=rows + cols)
    assert m.shape == (rows, cols)
    assert np.all(np.isfinite(m.storage))


def test_gaussian_moments():
    m = gaussian(200, 200, seed=1234)
    x = m.storage.astype(np.float64)
    assert abs(x.mean()) < 0.03
    assert abs(x.std() - 1.0) < 0.03


def test_gaussian_seeded_is_reproducible():
    assert np.array_equal(gaussian(4, 4, seed=3).storage, gaussian(4, 4, seed=3).storage)


def test_from_array_row_major():
    m = from_array([1, 2, 3, 4, 5, 6], 2, 3)
    assert m.get(0, 2) == 3.0
    assert m.get(1, 0) == 4.0


def test_from_array_accepts_nested_and_generators():
    assert from_array([[1, 2], [3, 4]], 2, 2).get(1, 0) == 3.0
    assert from_array((float(i) for i in range(4)), 1, 4).get(0, 3) == 3.0


def test_from_array_copies_input():
    src = np.arange(4, dtype=np.float32)
    m = from_array(src, 2, 2)
    src[0] = 42
    assert m.get(0, 0) == 0.0


def test_from_array_size_mismatch():
    with pytest.raises(SizeMismatch):
        from_array([1, 2, 3], 2, 2)


def test_copy_matrix_is_deep():
    a = from_array([1, 2, 3, 4], 2, 2)
    b = copy_matrix(a)
    b.set(0, 0, 9.0)
    assert a.get(0, 0) == 1.0
    assert b.shape == a.shape


def test_fill():
    m = zeros(2, 3)
    fill(m, 2.5)
    assert np.all(m.storage == 2.5)


@pytest.mark.parametrize("values", [[[1, 2], [3]], [[1, 2], [3, [4]]]])
def test_from_array_ragged_input(values):
    with pytest.raises(SizeMismatch):
        from_array(values, 2, 2)
