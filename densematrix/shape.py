# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Reshaping and sub-region extraction

Every extraction is an independent copy.
"""

from typing import Tuple

from .errors import IndexOutOfBounds, SizeMismatch
from .matrix import Matrix, allocate, check_shape
from .utils import is_index


def _check_reshape(m: Matrix, new_rows: int, new_cols: int) -> Tuple[int, int]:
    new_rows, new_cols = check_shape(new_rows, new_cols)
    if new_rows * new_cols != m.size:
        raise SizeMismatch(
            f"cannot reshape {m.rows}x{m.cols} into {new_rows}x{new_cols}"
        )
    return new_rows, new_cols


def reshape(m: Matrix, new_rows: int, new_cols: int) -> Matrix:
    """Row-major order is preserved; the result owns its storage."""
    new_rows, new_cols = _check_reshape(m, new_rows, new_cols)
    out = allocate(new_rows, new_cols)
    out.storage[:] = m.storage
    return out


def reshape_inplace(m: Matrix, new_rows: int, new_cols: int) -> None:
    """
    Reinterpret the existing buffer with new dimensions.

    Storage is always contiguous and row-major, so an element-count-preserving
    reshape never needs to move or reallocate anything.
    """
    new_rows, new_cols = _check_reshape(m, new_rows, new_cols)
    m._set_shape(new_rows, new_cols)


def get_slice(m: Matrix, r_start: int, r_end: int, c_start: int, c_end: int) -> Matrix:
    """
    Copy of the half-open block [r_start, r_end) x [c_start, c_end).

    Raises
    ------
    IndexOutOfBounds : unless 0 <= r_start < r_end <= rows and likewise
        for columns.
    """
    if not all(is_index(i) for i in (r_start, r_end, c_start, c_end)):
        raise IndexOutOfBounds(
            f"slice bounds must be non-negative integers, got "
            f"({r_start}, {r_end}, {c_start}, {c_end})"
        )
    if not (r_start < r_end <= m.rows):
        raise IndexOutOfBounds(
            f"row range [{r_start}, {r_end}) invalid for {m.rows} rows"
        )
    if not (c_start < c_end <= m.cols):
        raise IndexOutOfBounds(
            f"column range [{c_start}, {c_end}) invalid for {m.cols} columns"
        )
    out = allocate(r_end - r_start, c_end - c_start)
    out.grid()[:] = m.grid()[r_start:r_end, c_start:c_end]
    return out


def get_row(m: Matrix, r: int) -> Matrix:
    """1 x cols copy of row r."""
    return get_slice(m, r, r + 1, 0, m.cols)


def get_col(m: Matrix, c: int) -> Matrix:
    """rows x 1 copy of column c."""
    return get_slice(m, 0, m.rows, c, c + 1)
