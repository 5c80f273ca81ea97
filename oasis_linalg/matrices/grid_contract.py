################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Capability contract shared by grids, vectors and their checked wrappers

Binary operations read their operand only through this contract, so an
unchecked grid, a checked wrapper or any other object exposing ``rows``,
``columns`` and ``get`` can be used as an operand.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Protocol
from typing import runtime_checkable


# Mutable row-major storage addressed as buffer[r][c]
GridBuffer = MutableSequence[MutableSequence[float]]

# Mutable storage for a single line of values
LineBuffer = MutableSequence[float]


@runtime_checkable
class GridLike(Protocol):
    """Read access to a rectangular table of floats."""

    def rows(self) -> int: ...

    def columns(self) -> int: ...

    def get(self, r: int, c: int) -> float: ...


@runtime_checkable
class VectorLike(GridLike, Protocol):
    """Read access to a one-dimensional grid with a derived orientation."""

    def length(self) -> int: ...

    def is_row(self) -> bool: ...

    def get_at(self, i: int) -> float: ...


def format_shape(grid: GridLike) -> str:
    """Return the shape formatted as ``RxC``."""
    return f"{grid.rows()}x{grid.columns()}"
