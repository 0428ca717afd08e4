# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy

Every error raised by the package derives from `MatrixError` and from the
closest builtin exception, so callers may catch either.
"""


class MatrixError(Exception):
    """Base class for all densematrix errors."""


class InvalidShape(MatrixError, ValueError):
    """Non-positive dimensions, or a non-square matrix where one is required."""


class ShapeMismatch(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class SizeMismatch(MatrixError, ValueError):
    """Element counts disagree (reshape, from_array)."""


class IndexOutOfBounds(MatrixError, IndexError):
    pass


class InvalidRange(MatrixError, ValueError):
    """Malformed parameter range, e.g. low > high."""


class SingularMatrix(MatrixError, ArithmeticError):
    pass


class AllocationFailure(MatrixError, MemoryError):
    """Backing storage could not be obtained."""


class EmptyMatrix(MatrixError, ValueError):
    # unreachable while rows >= 1 and cols >= 1
    pass


class UseAfterRelease(MatrixError, RuntimeError):
    """A matrix was used (or released) after `release()`."""
