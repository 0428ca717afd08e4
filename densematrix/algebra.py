# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix algebra

Products, transpose, the cofactor family (minor, determinant, cofactor
matrix, adjoint, inverse) and elementary row operations.

The determinant is computed by Laplace expansion along the first row. That
is O(n!) and only suitable for small matrices; `determinant_elimination` in
`densematrix.elimination` is an O(n^3) alternative whose rounding behaviour
near singularity differs, so it is never substituted automatically.
"""

import logging

import numpy as np

from .arithmetic import scalar_multiply_inplace
from .construction import zeros
from .errors import IndexOutOfBounds, InvalidShape, ShapeMismatch, SingularMatrix
from .matrix import Matrix, allocate
from .utils import COFACTOR_WARN_SIZE, SINGULAR_EPS, is_index

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------
def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a @ b.

    Every output element is accumulated in float32 over k = 0 .. a.cols-1
    in that order (no compensated summation). The k loop is vectorised over
    the whole output as one rank-1 update per step.
    """
    if a.cols != b.rows:
        raise ShapeMismatch(
            f"multiply: {a.rows}x{a.cols} and {b.rows}x{b.cols} are not conformable"
        )
    out = zeros(a.rows, b.cols)
    O = out.grid()
    A, B = a.grid(), b.grid()
    for k in range(a.cols):
        O += np.outer(A[:, k], B[k, :])
    return out


def _is_vector(m: Matrix) -> bool:
    return m.rows == 1 or m.cols == 1


def dot_product(a: Matrix, b: Matrix) -> float:
    """
    Scalar product of two vectors (1xN or Nx1, orientations may differ)
    holding the same number of elements.
    """
    if not (_is_vector(a) and _is_vector(b)) or a.size != b.size:
        raise ShapeMismatch(
            f"dot_product needs two vectors of equal length, got {a.shape} and {b.shape}"
        )
    return float(np.dot(a.storage, b.storage))


def transpose(a: Matrix) -> Matrix:
    out = allocate(a.cols, a.rows)
    out.grid()[:] = a.grid().T
    return out


# ---------------------------------------------------------------------
# Cofactor family
# ---------------------------------------------------------------------
def require_square(a: Matrix, op: str) -> int:
    m, n = a.shape
    if m != n:
        raise InvalidShape(f"{op} is undefined for non-square ({m}x{n}) matrices")
    return n


def _minor(A: np.ndarray, i: int, j: int) -> np.ndarray:
    n = A.shape[0]
    return A[np.arange(n) != i][:, np.arange(n) != j]


def _det(A: np.ndarray) -> float:
    """Laplace expansion along row 0 on a float64 array."""
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    total = 0.0
    for j in range(n):
        sign = -1.0 if j & 1 else 1.0
        total += sign * A[0, j] * _det(_minor(A, 0, j))
    return float(total)


def minor(a: Matrix, i: int, j: int) -> Matrix:
    """
    The (n-1)x(n-1) matrix left after deleting row i and column j.

    Raises
    ------
    InvalidShape : if a is not square, or is 1x1.
    IndexOutOfBounds : if i or j is not in [0, n).
    """
    n = require_square(a, "minor")
    if n == 1:
        raise InvalidShape("a 1x1 matrix has no minors")
    if not (is_index(i) and is_index(j) and i < n and j < n):
        raise IndexOutOfBounds(f"minor ({i}, {j}) outside {n}x{n} matrix")
    out = allocate(n - 1, n - 1)
    out.grid()[:] = _minor(a.grid(), i, j)
    return out


def determinant(a: Matrix) -> float:
    """
    Determinant by cofactor expansion along the first row.

        det(A) = sum_j (-1)^j * A[0, j] * det(minor(A, 0, j))

    with 1x1 and 2x2 closed forms as base cases. Products are accumulated in
    double precision.

    Raises
    ------
    InvalidShape : if a is not square.
    """
    n = require_square(a, "determinant")
    if n > COFACTOR_WARN_SIZE:
        logger.warning(f"determinant(): cofactor expansion on {n}x{n} is O(n!)")
    return _det(a.grid().astype(np.float64))


def cofactor_matrix(a: Matrix) -> Matrix:
    """C[i, j] = (-1)^(i+j) * det(minor(a, i, j)); [[1]] for a 1x1 input."""
    n = require_square(a, "cofactor_matrix")
    out = allocate(n, n)
    if n == 1:
        out.storage[0] = 1.0
        return out
    if n - 1 > COFACTOR_WARN_SIZE:
        logger.warning(f"cofactor_matrix(): {n * n} expansions of size {n - 1} are O(n!)")

    A = a.grid().astype(np.float64)
    C = out.grid()
    for i in range(n):
        for j in range(n):
            sign = -1.0 if (i + j) & 1 else 1.0
            C[i, j] = sign * _det(_minor(A, i, j))
    return out


def adjoint(a: Matrix) -> Matrix:
    """Classical adjugate: transpose of the cofactor matrix."""
    require_square(a, "adjoint")
    return transpose(cofactor_matrix(a))


def inverse(a: Matrix, tol: float = SINGULAR_EPS) -> Matrix:
    """
    Inverse via adj(A) / det(A).

    Parameters
    ----------
    tol : float
        Absolute singularity threshold; |det(A)| <= tol is rejected.

    Raises
    ------
    InvalidShape : if a is not square.
    SingularMatrix : if the determinant is within `tol` of zero.
    """
    require_square(a, "inverse")
    d = determinant(a)
    if abs(d) <= tol:
        logger.debug(f"inverse(): |det| = {abs(d):.3e} <= {tol:.1e}, rejecting")
        raise SingularMatrix(f"matrix is singular (det = {d})")
    out = adjoint(a)
    scalar_multiply_inplace(out, 1.0 / d)
    return out


# ---------------------------------------------------------------------
# Elementary row operations (in place)
# ---------------------------------------------------------------------
def _check_row(m: Matrix, r: int) -> None:
    if not (is_index(r) and r < m.rows):
        raise IndexOutOfBounds(f"row {r} outside [0, {m.rows})")


def swap_rows(m: Matrix, r1: int, r2: int) -> None:
    _check_row(m, r1)
    _check_row(m, r2)
    if r1 == r2:
        return
    G = m.grid()
    G[[r1, r2]] = G[[r2, r1]]


def scale_row(m: Matrix, r: int, scalar: float) -> None:
    """Row r *= scalar. A zero scalar is allowed."""
    _check_row(m, r)
    m.grid()[r] *= np.float32(scalar)


def add_scaled_row(m: Matrix, target: int, source: int, scale: float) -> None:
    """
    Row target += scale * row source.

    The source row is snapshotted first, so target == source yields
    row *= (1 + scale).
    """
    _check_row(m, target)
    _check_row(m, source)
    G = m.grid()
    src = G[source].copy()
    G[target] += np.float32(scale) * src
