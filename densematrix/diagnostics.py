# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Human-readable output
"""

import sys

from .matrix import Matrix


def format_shape(m: Matrix) -> str:
    return f"({m.rows} x {m.cols})"


def format_matrix(m: Matrix, precision: int = 4) -> str:
    """
    Header line with the shape followed by one bracketed line per row, e.g.

        Matrix (2 x 2)
        [     1.0000     2.0000 ]
        [     3.0000     4.0000 ]
    """
    G = m.grid()
    width = precision + 6
    lines = [f"Matrix {format_shape(m)}"]
    for row in G:
        cells = " ".join(f"{float(v):{width}.{precision}f}" for v in row)
        lines.append(f"[ {cells} ]")
    return "\n".join(lines)


def print_matrix(m: Matrix, file=None, precision: int = 4) -> None:
    print(format_matrix(m, precision=precision), file=file or sys.stdout)


def print_shape(m: Matrix, file=None) -> None:
    print(f"Shape: {format_shape(m)}", file=file or sys.stdout)
