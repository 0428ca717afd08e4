# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise and scalar arithmetic

Each operation has an in-place form that mutates its first operand and an
allocating form that copies, then delegates to the in-place form. In-place
forms validate before touching the destination.
"""

import numpy as np

from .construction import copy_matrix
from .matrix import Matrix, check_same_shape


def add_inplace(dest: Matrix, src: Matrix) -> None:
    check_same_shape(dest, src, "add")
    np.add(dest.storage, src.storage, out=dest.storage)


def add(a: Matrix, b: Matrix) -> Matrix:
    check_same_shape(a, b, "add")
    out = copy_matrix(a)
    add_inplace(out, b)
    return out


def subtract_inplace(dest: Matrix, src: Matrix) -> None:
    check_same_shape(dest, src, "subtract")
    np.subtract(dest.storage, src.storage, out=dest.storage)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    check_same_shape(a, b, "subtract")
    out = copy_matrix(a)
    subtract_inplace(out, b)
    return out


def hadamard_inplace(dest: Matrix, src: Matrix) -> None:
    """Elementwise product dest *= src."""
    check_same_shape(dest, src, "hadamard")
    np.multiply(dest.storage, src.storage, out=dest.storage)


def hadamard(a: Matrix, b: Matrix) -> Matrix:
    check_same_shape(a, b, "hadamard")
    out = copy_matrix(a)
    hadamard_inplace(out, b)
    return out


def scalar_multiply_inplace(a: Matrix, s: float) -> None:
    np.multiply(a.storage, np.float32(s), out=a.storage)


def scalar_multiply(a: Matrix, s: float) -> Matrix:
    out = copy_matrix(a)
    scalar_multiply_inplace(out, s)
    return out


def scalar_add_inplace(a: Matrix, s: float) -> None:
    np.add(a.storage, np.float32(s), out=a.storage)


def scalar_add(a: Matrix, s: float) -> Matrix:
    out = copy_matrix(a)
    scalar_add_inplace(out, s)
    return out


def equal_with_tolerance(a: Matrix, b: Matrix, tol: float = 0.0) -> bool:
    """
    True iff shapes match and every |a[i] - b[i]| <= tol.
    NaN entries never compare equal.
    """
    if a.shape != b.shape:
        return False
    diff = np.abs(a.storage - b.storage)
    return bool(np.all(diff <= tol))
