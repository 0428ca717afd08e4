# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Tuple

import numpy as np

from .algebra import add_scaled_row, require_square, swap_rows
from .construction import copy_matrix
from .matrix import Matrix
from .utils import permutation_sign, scale_tol

logger = logging.getLogger(__name__)


def forward_eliminate(A: Matrix) -> Tuple[Matrix, List[int], List[int]]:
    """
    Row-echelon reduction with partial pivoting on a copy of A, carried out
    with the elementary row operations only.

    Returns
    -------
    U      : Matrix
        Upper-trapezoidal row-echelon form of A (float32).
    pivots : list[int]
        Column indices where pivots were placed; len = rank(A).
    perm   : list[int]
        Final row order: row i of U comes from original row perm[i].
    """
    U = copy_matrix(A)
    m, n = U.shape
    G = U.grid()
    pivot_tol = scale_tol(G)

    perm = list(range(m))
    pivots: List[int] = []

    row = 0
    for col in range(n):
        if row == m:
            break
        # Largest magnitude at or below the current row gives the most
        # stable pivot
        col_slice = np.abs(G[row:, col])
        max_idx = int(col_slice.argmax())
        if col_slice[max_idx] <= pivot_tol:
            logger.debug(f"forward_eliminate(): column {col} is numerically zero")
            continue

        pivot_row = row + max_idx
        if pivot_row != row:
            swap_rows(U, row, pivot_row)
            perm[row], perm[pivot_row] = perm[pivot_row], perm[row]
        pivots.append(col)

        pivot = float(G[row, col])
        for r in range(row + 1, m):
            factor = float(G[r, col]) / pivot
            if factor != 0.0:
                add_scaled_row(U, r, row, -factor)

        row += 1

    return U, pivots, perm


def determinant_elimination(A: Matrix) -> float:
    """
    Determinant of a square matrix via Gaussian elimination, O(n^3).

    det(A) = sign(perm) * prod(diag(U)). A rank-deficient matrix (a column
    with no usable pivot) returns exactly 0.0. Rounding differs from the
    cofactor `determinant` near singularity, so the two are not
    interchangeable bit for bit.
    """
    n = require_square(A, "determinant")
    U, pivots, perm = forward_eliminate(A)
    if len(pivots) < n:
        return 0.0
    sign = permutation_sign(perm)
    diag_prod = float(np.prod(np.diag(U.grid()).astype(np.float64)))
    return sign * diag_prod
