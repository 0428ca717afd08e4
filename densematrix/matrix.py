# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Storage core

A `Matrix` is a (rows, cols) pair plus a flat, row-major float32 buffer:
element (r, c) lives at index r * cols + c. Nothing here ever hands out a
view of another matrix's storage; every operation that is not explicitly
in-place returns a freshly allocated matrix.
"""

import logging
from typing import Tuple

import numpy as np

from .errors import (
    AllocationFailure,
    IndexOutOfBounds,
    InvalidShape,
    ShapeMismatch,
    UseAfterRelease,
)
from .utils import DTYPE, is_dimension, is_index

logger = logging.getLogger(__name__)


def _allocate_storage(n: int) -> np.ndarray:
    """
    Allocate-or-fail primitive underneath every constructor.

    Raises
    ------
    AllocationFailure : if the buffer cannot be obtained. Callers are not
        expected to recover from this; embedders that must never abort
        should catch it at their own boundary.
    """
    try:
        return np.empty(n, dtype=DTYPE)
    except (MemoryError, ValueError) as e:  # numpy reports oversize as ValueError
        logger.error(f"could not allocate {n} float32 elements")
        raise AllocationFailure(f"could not allocate {n} elements") from e


def check_shape(rows, cols) -> Tuple[int, int]:
    """
    Validate a pair of dimensions and return them as Python ints, so that
    products of numpy integers never wrap around.
    """
    if not (is_dimension(rows) and is_dimension(cols)):
        raise InvalidShape(
            f"dimensions must be positive integers, got ({rows!r}, {cols!r})"
        )
    return int(rows), int(cols)


class Matrix:
    """
    Dense row-major single-precision matrix.

    Use the constructors in `densematrix.construction` (or `allocate`)
    rather than instantiating directly. `Matrix(rows, cols, storage)`
    copies `storage`, so the new matrix never shares a buffer with anything.

    Attributes
    ----------
    rows, cols : int
        Dimensions, both >= 1.
    storage : np.ndarray  (rows*cols,) float32
        The live backing buffer. Writing to it mutates the matrix.
    """

    __slots__ = ("_rows", "_cols", "_storage")

    def __init__(self, rows: int, cols: int, storage: np.ndarray):
        rows, cols = check_shape(rows, cols)
        if storage.dtype != DTYPE or storage.ndim != 1:
            raise TypeError("storage must be a 1-D float32 ndarray")
        if storage.size != rows * cols:
            raise InvalidShape(
                f"storage holds {storage.size} elements, expected {rows * cols}"
            )
        self._rows = rows
        self._cols = cols
        self._storage = _allocate_storage(storage.size)
        self._storage[:] = storage

    @classmethod
    def _adopt(cls, rows: int, cols: int, buffer: np.ndarray) -> "Matrix":
        # takes ownership of a freshly allocated buffer without copying;
        # callers have already validated the shape
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._storage = buffer
        return m

    # -----------------------------------------------------------------
    # lifecycle
    # -----------------------------------------------------------------
    def _live(self) -> np.ndarray:
        if self._storage is None:
            raise UseAfterRelease("matrix has been released")
        return self._storage

    @property
    def released(self) -> bool:
        return self._storage is None

    def release(self) -> None:
        """Free the storage. Releasing twice is an error."""
        self._live()
        self._storage = None

    # -----------------------------------------------------------------
    # shape / buffer access
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        self._live()
        return self._rows

    @property
    def cols(self) -> int:
        self._live()
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        self._live()
        return self._rows, self._cols

    @property
    def size(self) -> int:
        return self._live().size

    @property
    def storage(self) -> np.ndarray:
        return self._live()

    def grid(self) -> np.ndarray:
        """(rows, cols) view onto the live storage, for internal use."""
        return self._live().reshape(self._rows, self._cols)

    def _set_shape(self, rows: int, cols: int) -> None:
        # caller has already checked rows * cols == size
        self._rows = int(rows)
        self._cols = int(cols)

    def to_numpy(self) -> np.ndarray:
        """Independent (rows, cols) float32 copy of the contents."""
        return self.grid().copy()

    # -----------------------------------------------------------------
    # element access
    # -----------------------------------------------------------------
    def _offset(self, r: int, c: int) -> int:
        self._live()
        if not (is_index(r) and is_index(c) and r < self._rows and c < self._cols):
            raise IndexOutOfBounds(
                f"index ({r}, {c}) outside {self._rows}x{self._cols} matrix"
            )
        return int(r) * self._cols + int(c)

    def get(self, r: int, c: int) -> float:
        return float(self._storage[self._offset(r, c)])

    def set(self, r: int, c: int, value: float) -> None:
        self._storage[self._offset(r, c)] = value

    def __getitem__(self, key: Tuple[int, int]) -> float:
        r, c = key
        return self.get(r, c)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        r, c = key
        self.set(r, c, value)

    def __repr__(self) -> str:
        if self._storage is None:
            return f"{self.__class__.__name__}(<released>)"
        return f"{self.__class__.__name__}({self._rows}x{self._cols})"

    def __str__(self) -> str:
        from .diagnostics import format_matrix

        return format_matrix(self)


def allocate(rows: int, cols: int) -> Matrix:
    """
    Allocate a rows-by-cols matrix with uninitialised contents.

    Raises
    ------
    InvalidShape : if either dimension is not a positive integer.
    AllocationFailure : if the storage cannot be obtained.
    """
    rows, cols = check_shape(rows, cols)
    return Matrix._adopt(rows, cols, _allocate_storage(rows * cols))


def release(m: Matrix) -> None:
    m.release()


def get_rows(m: Matrix) -> int:
    return m.rows


def get_cols(m: Matrix) -> int:
    return m.cols


def check_same_shape(a: Matrix, b: Matrix, op: str) -> None:
    if a.shape != b.shape:
        raise ShapeMismatch(f"{op}: shapes {a.shape} and {b.shape} differ")
