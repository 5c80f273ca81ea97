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
One-dimensional grids with a derived orientation

A vector is a grid with ``min(rows, columns) == 1``. Its orientation is
recomputed from the current shape on every access:

    - row-oriented when ``columns > rows`` (shape ``1 x n``, n > 1)
    - column-oriented otherwise (shape ``n x 1``, including ``1 x 1``)

Index ``i`` maps to ``(0, i)`` for a row vector and ``(i, 0)`` for a column
vector. Transposing flips orientation and keeps element order.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Optional
from typing import TypeVar

from oasis_linalg.matrices.grid import Grid
from oasis_linalg.matrices.grid_contract import GridBuffer
from oasis_linalg.matrices.grid_contract import GridLike
from oasis_linalg.matrices.grid_contract import LineBuffer
from oasis_linalg.matrices.grid_contract import VectorLike


VectorT = TypeVar("VectorT", bound="Vector")


class Orientation(enum.Enum):
    ROW = "row"
    COLUMN = "column"


def _is_row_shape(grid: GridLike) -> bool:
    return grid.columns() > grid.rows()


def _line_buffer(values: LineBuffer) -> GridBuffer:
    # An empty line is stored as a 0x0 grid
    return [values] if len(values) else []


def _as_row(grid: Grid) -> Grid:
    if not _is_row_shape(grid):
        grid.transpose()
    return grid


def _as_column(grid: Grid) -> Grid:
    if _is_row_shape(grid):
        grid.transpose()
    return grid


class Vector(Grid):
    """Grid restricted to a single row or column."""

    def __init__(self, length: int = 0) -> None:
        """Create a zero-filled row vector that owns its buffer."""
        super().__init__()
        self._bind(_line_buffer([0.0] * length), owns_buffer=True)

    @classmethod
    def view(  # type: ignore[override]
        cls: type[VectorT], values: LineBuffer
    ) -> VectorT:
        """Return a row vector that aliases the caller's sequence."""
        return cls._wrap(_line_buffer(values), owns_buffer=False)

    @classmethod
    def from_values(cls: type[VectorT], values: Sequence[float]) -> VectorT:
        """Return a row vector that owns a copy of the values."""
        row: LineBuffer = [float(value) for value in values]
        return cls._wrap(_line_buffer(row), owns_buffer=True)

    @classmethod
    def column(cls: type[VectorT], values: Sequence[float]) -> VectorT:
        """Return a column vector that owns a copy of the values."""
        return cls._wrap([[float(value)] for value in values], owns_buffer=True)

    @classmethod
    def from_grid(cls: type[VectorT], grid: GridLike) -> VectorT:
        """Copy a single-row or single-column grid into a vector.

        The copy keeps the grid's orientation. Any other shape yields an empty
        vector.
        """
        if grid.rows() == 1:
            return cls.from_values([grid.get(0, c) for c in range(grid.columns())])
        if grid.columns() == 1:
            return cls.column([grid.get(r, 0) for r in range(grid.rows())])
        return cls()

    def length(self) -> int:
        return max(self._rows, self._columns)

    def orientation(self) -> Orientation:
        return Orientation.ROW if _is_row_shape(self) else Orientation.COLUMN

    def is_row(self) -> bool:
        return _is_row_shape(self)

    def is_column(self) -> bool:
        return not _is_row_shape(self)

    def get(self, r: int, c: Optional[int] = None) -> float:
        """Return element (r, c), or the value at index r when c is omitted."""
        if c is None:
            return self.get_at(r)
        return super().get(r, c)

    def set(  # type: ignore[override]
        self: VectorT, r: int, c: float, value: Optional[float] = None
    ) -> VectorT:
        """Set element (r, c), or the value at index r when called as set(i, v)."""
        if value is None:
            return self.set_at(r, c)
        return super().set(r, int(c), value)

    def get_at(self, i: int) -> float:
        """Return the value at index i along the vector."""
        if self.is_row():
            return self.get(0, i)
        return self.get(i, 0)

    def set_at(self: VectorT, i: int, value: float) -> VectorT:
        """Set the value at index i along the vector."""
        if self.is_row():
            return self.set(0, i, value)
        return self.set(i, 0, value)

    def set_values_at(self: VectorT, i: int, values: Sequence[float]) -> VectorT:
        """Write ``values[n]`` at index ``i + n``."""
        for n, value in enumerate(values):
            self.set_at(i + n, value)
        return self

    def rebind_values(self: VectorT, values: LineBuffer) -> VectorT:
        """Replace the storage with a row view of the caller's sequence."""
        self._bind(_line_buffer(values), owns_buffer=False)
        return self

    def tolist_values(self) -> list[float]:
        """Return the elements in index order."""
        return [self.get_at(i) for i in range(self.length())]

    def _aligned(self, other: GridLike) -> GridLike:
        # Vector operands with the other orientation are combined through a
        # transposed copy so the caller's operand is never touched
        if isinstance(other, VectorLike) and other.is_row() != self.is_row():
            return Grid.copy_of(other).transpose()
        return other

    def add(self: VectorT, other: GridLike) -> VectorT:
        return super().add(self._aligned(other))

    def subtract(self: VectorT, other: GridLike) -> VectorT:
        return super().subtract(self._aligned(other))

    def dot_multiply(self: VectorT, other: GridLike) -> VectorT:
        return super().dot_multiply(self._aligned(other))

    def dot_divide(self: VectorT, other: GridLike) -> VectorT:
        return super().dot_divide(self._aligned(other))

    def outer(self, v: VectorLike) -> Grid:
        """Return the ``length() x v.length()`` outer product.

        A column copy of this vector is multiplied by a row copy of v, so
        ``result[i][j] = self[i] * v[j]``.
        """
        if self.length() == 0 or v.length() == 0:
            return Grid()
        left: Grid = _as_column(Grid.copy_of(self))
        right: Grid = _as_row(Grid.copy_of(v))
        return left.multiply(right)

    def inner(self, v: VectorLike) -> float:
        """Return the inner product ``sum_i self[i] * v[i]``.

        A row copy of this vector is multiplied by a column copy of v and the
        single resulting value is returned.
        """
        if self.length() == 0 or v.length() == 0:
            return 0.0
        left: Grid = _as_row(Grid.copy_of(self))
        right: Grid = _as_column(Grid.copy_of(v))
        return left.multiply(right).get(0, 0)
