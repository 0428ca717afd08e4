# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

DTYPE = np.float32

# Machine epsilon of the storage type
EPS: float = float(np.finfo(DTYPE).eps)

# |det| at or below this is treated as singular by inverse()
SINGULAR_EPS: float = 1e-9

# Cofactor expansion is O(n!); warn above this size
COFACTOR_WARN_SIZE: int = 8


def scale_tol(A: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    return EPS * max(1.0, float(np.linalg.norm(A, ord=np.inf)))


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or -1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n - #cycles
    return -1.0 if swaps & 1 else 1.0


def is_dimension(n) -> bool:
    """True for a positive integer (bools excluded)."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        return False
    return n > 0


def is_index(n) -> bool:
    """True for a non-negative integer (bools excluded)."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        return False
    return n >= 0
