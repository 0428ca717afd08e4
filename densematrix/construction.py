# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Constructors

All of them go through `allocate`, so shape validation and allocation
failure behave identically everywhere.
"""

from typing import Iterable, Optional

import numpy as np

from .errors import InvalidRange, InvalidShape, SizeMismatch
from .matrix import Matrix, allocate
from .utils import DTYPE


def zeros(rows: int, cols: int) -> Matrix:
    m = allocate(rows, cols)
    m.storage.fill(0.0)
    return m


def identity(n: int, cols: Optional[int] = None) -> Matrix:
    """
    n-by-n identity. Passing a `cols` different from `n` is an error,
    identity matrices are square.
    """
    if cols is not None and cols != n:
        raise InvalidShape(f"identity must be square, got ({n}, {cols})")
    m = zeros(n, n)
    m.storage[:: n + 1] = 1.0
    return m


def uniform(
    rows: int, cols: int, low: float = 0.0, high: float = 1.0, seed=None
) -> Matrix:
    """
    Matrix with entries drawn uniformly from [low, high).

    Parameters
    ----------
    low, high : float
        Range bounds; low == high yields a constant matrix.
    seed : int | np.random.Generator | None
        Passed to `np.random.default_rng`.

    Raises
    ------
    InvalidRange : if low > high.
    """
    if low > high:
        raise InvalidRange(f"low ({low}) must not exceed high ({high})")
    m = allocate(rows, cols)
    rng = np.random.default_rng(seed)
    m.storage[:] = rng.uniform(low, high, size=m.size)
    return m


def gaussian(rows: int, cols: int, seed=None) -> Matrix:
    """
    Matrix of standard-normal entries using the Box-Muller transform.

    Pairs of independent uniforms (u1, u2) on (0, 1] x [0, 1) map to

        z0 = sqrt(-2 ln u1) * cos(2 pi u2)
        z1 = sqrt(-2 ln u1) * sin(2 pi u2)

    which are independent N(0, 1). One pair is drawn per two elements; the
    surplus sample for odd sizes is discarded.
    """
    m = allocate(rows, cols)
    rng = np.random.default_rng(seed)
    pairs = (m.size + 1) // 2
    # 1 - U maps [0, 1) onto (0, 1] so log never sees zero
    u1 = 1.0 - rng.random(pairs)
    u2 = rng.random(pairs)
    radius = np.sqrt(-2.0 * np.log(u1))
    theta = 2.0 * np.pi * u2
    z = np.concatenate((radius * np.cos(theta), radius * np.sin(theta)))
    m.storage[:] = z[: m.size]
    return m


def from_array(values: Iterable[float], rows: int, cols: int) -> Matrix:
    """
    Copy `values` (row-major) into a new rows-by-cols matrix.

    Multi-dimensional input is flattened in row-major order first.

    Raises
    ------
    SizeMismatch : if len(values) != rows * cols, or nested input is ragged.
    """
    m = allocate(rows, cols)
    if isinstance(values, Matrix):
        values = values.storage
    elif not isinstance(values, (np.ndarray, list, tuple)):
        values = list(values)
    try:
        flat = np.asarray(values, dtype=DTYPE).ravel()
    except ValueError as e:
        # ragged nesting has no row-major flattening
        raise SizeMismatch(f"values do not form a rectangular sequence: {e}") from e
    if flat.size != m.size:
        raise SizeMismatch(
            f"got {flat.size} values for a {rows}x{cols} matrix ({m.size} needed)"
        )
    m.storage[:] = flat
    return m


def copy_matrix(m: Matrix) -> Matrix:
    """Deep copy; the result shares no storage with `m`."""
    out = allocate(m.rows, m.cols)
    out.storage[:] = m.storage
    return out


def fill(m: Matrix, value: float) -> None:
    m.storage.fill(value)
