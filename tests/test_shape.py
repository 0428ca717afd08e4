# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densematrix.construction import from_array
from densematrix.errors import IndexOutOfBounds, InvalidShape, SizeMismatch
from densematrix.shape import get_col, get_row, get_slice, reshape, reshape_inplace


def _m23():
    return from_array([1, 2, 3, 4, 5, 6], 2, 3)


@pytest.mark.parametrize("r,c", [(3, 2), (1, 6), (6, 1), (2, 3)])
def test_reshape_preserves_row_major_order(r, c):
    m = _m23()
    out = reshape(m, r, c)
    assert out.shape == (r, c)
    assert out.storage.tolist() == [1, 2, 3, 4, 5, 6]
    out.set(0, 0, -1.0)
    assert m.get(0, 0) == 1.0


@pytest.mark.parametrize("r,c", [(4, 2), (1, 5), (7, 1)])
def test_reshape_size_mismatch(r, c):
    m = _m23()
    with pytest.raises(SizeMismatch):
        reshape(m, r, c)
    with pytest.raises(SizeMismatch):
        reshape_inplace(m, r, c)
    assert m.shape == (2, 3)


def test_reshape_rejects_non_positive():
    with pytest.raises(InvalidShape):
        reshape(_m23(), -2, -3)


def test_reshape_inplace_reuses_storage():
    m = _m23()
    buf = m.storage
    reshape_inplace(m, 3, 2)
    assert m.shape == (3, 2)
    assert m.storage is buf
    assert m.get(2, 1) == 6.0
    assert m.get(1, 0) == 3.0


def test_get_row_and_col():
    m = _m23()
    r = get_row(m, 1)
    c = get_col(m, 2)
    assert r.shape == (1, 3) and r.storage.tolist() == [4, 5, 6]
    assert c.shape == (2, 1) and c.storage.tolist() == [3, 6]
    r.set(0, 0, 0.0)
    assert m.get(1, 0) == 4.0


def test_get_row_col_out_of_bounds():
    m = _m23()
    with pytest.raises(IndexOutOfBounds):
        get_row(m, 2)
    with pytest.raises(IndexOutOfBounds):
        get_col(m, -1)


def test_get_slice():
    m = from_array(np.arange(16), 4, 4)
    s = get_slice(m, 1, 3, 2, 4)
    assert s.shape == (2, 2)
    assert s.to_numpy().tolist() == [[6, 7], [10, 11]]


@pytest.mark.parametrize(
    "bounds",
    [(0, 0, 0, 1), (1, 0, 0, 1), (0, 5, 0, 1), (-1, 1, 0, 1), (0, 1, 2, 2), (0, 1, 0, 5)],
)
def test_get_slice_invalid_bounds(bounds):
    m = from_array(np.arange(16), 4, 4)
    with pytest.raises(IndexOutOfBounds):
        get_slice(m, *bounds)


def test_reshape_inplace_int32_product_does_not_wrap():
    m = from_array(np.zeros(131073), 1, 131073)
    # 65537 * 65537 wraps to 131073 in int32 arithmetic
    with pytest.raises(SizeMismatch):
        reshape_inplace(m, np.int32(65537), np.int32(65537))
    with pytest.raises(SizeMismatch):
        reshape(m, np.int32(65537), np.int32(65537))
    assert m.shape == (1, 131073)


def test_reshape_inplace_stores_python_ints():
    m = _m23()
    reshape_inplace(m, np.int64(3), np.int64(2))
    assert type(m.rows) is int and type(m.cols) is int


@pytest.mark.parametrize("bounds", [(0.0, 1, 0, 1), (0, 1.5, 0, 1), (0, 1, None, 1)])
def test_get_slice_non_integer_bounds(bounds):
    with pytest.raises(IndexOutOfBounds):
        get_slice(_m23(), *bounds)


def test_get_row_non_integer_index():
    with pytest.raises(IndexOutOfBounds):
        get_row(_m23(), 0.5)
