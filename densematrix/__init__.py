# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

Dense, row-major, single-precision matrices with the linear-algebra and
machine-learning primitives a small neural-network-from-scratch project
needs.

Public API
~~~~~~~~~~
- Storage
    - `Matrix`, `allocate`, `release`, `get_rows`, `get_cols`
- Construction
    - `zeros`, `identity`, `uniform`, `gaussian`, `from_array`,
      `copy_matrix`, `fill`
- Shape
    - `reshape`, `reshape_inplace`, `get_row`, `get_col`, `get_slice`
- Arithmetic (each with an `_inplace` twin)
    - `add`, `subtract`, `hadamard`, `scalar_multiply`, `scalar_add`,
      `equal_with_tolerance`
- Linear algebra
    - `multiply`, `dot_product`, `transpose`, `minor`, `determinant`,
      `determinant_elimination`, `cofactor_matrix`, `adjoint`, `inverse`
    - `swap_rows`, `scale_row`, `add_scaled_row`
- ML support
    - `apply_function`, `broadcast_add` (+ `_inplace`), `argmax`,
      `get_activation`
- Diagnostics
    - `print_matrix`, `print_shape`, `format_matrix`

Example
-------
>>> import densematrix as dm
>>> A = dm.from_array([1, 2, 3, 4], 2, 2)
>>> dm.determinant(A)
-2.0
>>> dm.equal_with_tolerance(dm.multiply(A, dm.inverse(A)), dm.identity(2), 1e-6)
True
"""

from importlib.metadata import version as _pkg_version

from .activations import ACTIVATIONS, get_activation
from .algebra import (
    add_scaled_row,
    adjoint,
    cofactor_matrix,
    determinant,
    dot_product,
    inverse,
    minor,
    multiply,
    scale_row,
    swap_rows,
    transpose,
)
from .arithmetic import (
    add,
    add_inplace,
    equal_with_tolerance,
    hadamard,
    hadamard_inplace,
    scalar_add,
    scalar_add_inplace,
    scalar_multiply,
    scalar_multiply_inplace,
    subtract,
    subtract_inplace,
)
from .construction import (
    copy_matrix,
    fill,
    from_array,
    gaussian,
    identity,
    uniform,
    zeros,
)
from .diagnostics import format_matrix, print_matrix, print_shape
from .elimination import determinant_elimination
from .errors import (
    AllocationFailure,
    EmptyMatrix,
    IndexOutOfBounds,
    InvalidRange,
    InvalidShape,
    MatrixError,
    ShapeMismatch,
    SingularMatrix,
    SizeMismatch,
    UseAfterRelease,
)
from .matrix import Matrix, allocate, get_cols, get_rows, release
from .ml import (
    apply_function,
    apply_function_inplace,
    argmax,
    broadcast_add,
    broadcast_add_inplace,
)
from .shape import get_col, get_row, get_slice, reshape, reshape_inplace

__all__ = [
    "Matrix",
    "allocate",
    "release",
    "get_rows",
    "get_cols",
    "zeros",
    "identity",
    "uniform",
    "gaussian",
    "from_array",
    "copy_matrix",
    "fill",
    "reshape",
    "reshape_inplace",
    "get_row",
    "get_col",
    "get_slice",
    "add",
    "add_inplace",
    "subtract",
    "subtract_inplace",
    "hadamard",
    "hadamard_inplace",
    "scalar_multiply",
    "scalar_multiply_inplace",
    "scalar_add",
    "scalar_add_inplace",
    "equal_with_tolerance",
    "multiply",
    "dot_product",
    "transpose",
    "minor",
    "determinant",
    "determinant_elimination",
    "cofactor_matrix",
    "adjoint",
    "inverse",
    "swap_rows",
    "scale_row",
    "add_scaled_row",
    "apply_function",
    "apply_function_inplace",
    "broadcast_add",
    "broadcast_add_inplace",
    "argmax",
    "ACTIVATIONS",
    "get_activation",
    "format_matrix",
    "print_matrix",
    "print_shape",
    "MatrixError",
    "InvalidShape",
    "ShapeMismatch",
    "SizeMismatch",
    "IndexOutOfBounds",
    "InvalidRange",
    "SingularMatrix",
    "AllocationFailure",
    "EmptyMatrix",
    "UseAfterRelease",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show densematrix", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see warnings only if they
# deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
