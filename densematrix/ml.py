# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Machine-learning helpers: elementwise activation application, bias
broadcasting and argmax.
"""

from typing import Callable

import numpy as np

from .construction import copy_matrix
from .errors import EmptyMatrix, ShapeMismatch
from .matrix import Matrix
from .utils import DTYPE

ScalarFn = Callable[[float], float]


def apply_function_inplace(a: Matrix, f: ScalarFn) -> None:
    """
    Replace every element x with f(x), visiting in row-major order.

    All results are computed before any are written, so if `f` raises the
    matrix is left untouched.
    """
    values = np.fromiter((f(float(x)) for x in a.storage), dtype=DTYPE, count=a.size)
    a.storage[:] = values


def apply_function(a: Matrix, f: ScalarFn) -> Matrix:
    out = copy_matrix(a)
    apply_function_inplace(out, f)
    return out


def _check_bias(m: Matrix, bias: Matrix) -> None:
    if bias.rows != 1 or bias.cols != m.cols:
        raise ShapeMismatch(
            f"bias must be 1x{m.cols} for a {m.rows}x{m.cols} matrix, got {bias.shape}"
        )


def broadcast_add_inplace(m: Matrix, bias: Matrix) -> None:
    """Add the single-row `bias` to every row of `m`."""
    _check_bias(m, bias)
    G = m.grid()
    G += bias.storage


def broadcast_add(m: Matrix, bias: Matrix) -> Matrix:
    _check_bias(m, bias)
    out = copy_matrix(m)
    broadcast_add_inplace(out, bias)
    return out


def argmax(a: Matrix) -> int:
    """
    Flat row-major index of the largest element; ties go to the first
    occurrence. A NaN, if present, wins (numpy semantics).
    """
    data = a.storage
    if data.size == 0:
        raise EmptyMatrix("argmax of an empty matrix")
    return int(np.argmax(data))
