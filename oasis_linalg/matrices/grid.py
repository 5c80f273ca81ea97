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
Dense grid of doubles without dimension checks

A grid stores ``rows x columns`` IEEE-754 doubles as a row-major buffer of
rows. Element (r, c) lives at ``buffer[r][c]``. The buffer is any mutable
nested sequence: nested lists, or a 2-D numpy array.

Ownership:
    - ``Grid.zeros``, ``Grid.from_rows``, ``Grid.copy_of`` and ``copy()``
      build a grid that owns an independent buffer.
    - ``Grid.view`` and ``rebind`` alias a caller-supplied buffer. Writes
      through the grid are visible to the caller and vice versa.
    - Shape-changing operations (``transpose`` and ``multiply``) replace the
      buffer with a new owned one, ending any aliasing.

Shape invariants:
    - ``rows >= 0`` and ``columns >= 0``
    - ``rows == 0`` implies ``columns == 0``
    - every row holds exactly ``columns`` values

No operation validates indices or shapes. Invalid input gives an IndexError
or a silently wrong result. Use ``SafeGrid`` for checked access.

Mutating operations return the grid itself so calls can be chained:

    grid.transpose().scale(2.0).add(other)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import COMPARE_ATOL
from oasis_linalg.config.linalg_params import COMPARE_RTOL
from oasis_linalg.matrices.float_ops import ieee_divide
from oasis_linalg.matrices.float_ops import ieee_reciprocal
from oasis_linalg.matrices.grid_contract import GridBuffer
from oasis_linalg.matrices.grid_contract import GridLike


_LOG: logging.Logger = logging.getLogger(__name__)

GridT = TypeVar("GridT", bound="Grid")


class Grid:
    """Rectangular table of doubles with in-place arithmetic."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        """Create a zero-filled grid that owns its buffer."""
        self._data: GridBuffer = []
        self._rows: int = 0
        self._columns: int = 0
        self._owns_buffer: bool = True
        self._bind([[0.0] * columns for _ in range(rows)], owns_buffer=True)

    @classmethod
    def zeros(cls: type[GridT], rows: int, columns: int) -> GridT:
        """Return a zero-filled grid of the given shape."""
        return cls._wrap([[0.0] * columns for _ in range(rows)], owns_buffer=True)

    @classmethod
    def view(cls: type[GridT], buffer: GridBuffer) -> GridT:
        """Return a grid that aliases the caller's buffer."""
        return cls._wrap(buffer, owns_buffer=False)

    @classmethod
    def from_rows(cls: type[GridT], values: Sequence[Sequence[float]]) -> GridT:
        """Return a grid that owns a copy of the nested values."""
        return cls._wrap(
            [[float(value) for value in row] for row in values], owns_buffer=True
        )

    @classmethod
    def copy_of(cls: type[GridT], other: GridLike) -> GridT:
        """Return a deep copy of any grid-like container."""
        return cls._wrap(
            [
                [float(other.get(r, c)) for c in range(other.columns())]
                for r in range(other.rows())
            ],
            owns_buffer=True,
        )

    @classmethod
    def from_numpy(cls: type[GridT], array: NDArray[np.float64]) -> GridT:
        """Return a grid that owns a copy of a 2-D array."""
        mat: NDArray[np.float64] = np.asarray(array, dtype=np.float64)
        if mat.ndim != 2:
            raise ValueError(f"array must be 2D, got {mat.ndim}D")
        return cls._wrap(mat.tolist(), owns_buffer=True)

    @classmethod
    def _wrap(cls: type[GridT], buffer: GridBuffer, owns_buffer: bool) -> GridT:
        grid: GridT = cls.__new__(cls)
        grid._bind(buffer, owns_buffer)
        return grid

    def _bind(self, buffer: GridBuffer, owns_buffer: bool) -> None:
        self._data = buffer
        self._rows = len(buffer)
        self._columns = len(buffer[0]) if self._rows else 0
        self._owns_buffer = owns_buffer

    def _replace(self, buffer: GridBuffer) -> None:
        old_rows: int = self._rows
        old_columns: int = self._columns
        self._bind(buffer, owns_buffer=True)
        _LOG.debug(
            "Replaced %dx%d storage with %dx%d",
            old_rows,
            old_columns,
            self._rows,
            self._columns,
        )

    def rows(self) -> int:
        return self._rows

    def columns(self) -> int:
        return self._columns

    def shape(self) -> tuple[int, int]:
        """Return the (rows, columns) shape."""
        return (self._rows, self._columns)

    def owns_buffer(self) -> bool:
        """Return True unless the grid aliases a caller-supplied buffer."""
        return self._owns_buffer

    def get(self, r: int, c: int) -> float:
        return float(self._data[r][c])

    def get_row(self, r: int) -> list[float]:
        """Return a copy of row r."""
        row: Sequence[float] = self._data[r]
        return [float(row[c]) for c in range(self._columns)]

    def get_column(self, c: int) -> list[float]:
        """Return a copy of column c."""
        return [float(self._data[r][c]) for r in range(self._rows)]

    def set(self: GridT, r: int, c: int, value: float) -> GridT:
        self._data[r][c] = value
        return self

    def set_row(self: GridT, r: int, values: Sequence[float]) -> GridT:
        """Overwrite row r with the first ``columns`` values."""
        row = self._data[r]
        for c in range(self._columns):
            row[c] = values[c]
        return self

    def set_column(self: GridT, c: int, values: Sequence[float]) -> GridT:
        """Overwrite column c with the first ``rows`` values."""
        for r in range(self._rows):
            self._data[r][c] = values[r]
        return self

    def set_block(
        self: GridT, r: int, c: int, block: Sequence[Sequence[float]]
    ) -> GridT:
        """Write ``block[i][j]`` into (r + i, c + j)."""
        for i, line in enumerate(block):
            target = self._data[r + i]
            for j, value in enumerate(line):
                target[c + j] = value
        return self

    def rebind(self: GridT, buffer: GridBuffer) -> GridT:
        """Replace the storage with the caller's buffer, aliasing it."""
        self._bind(buffer, owns_buffer=False)
        return self

    def transpose(self: GridT) -> GridT:
        """Replace the grid with its ``columns x rows`` transpose."""
        out: GridBuffer = [
            [float(self._data[r][c]) for r in range(self._rows)]
            for c in range(self._columns)
        ]
        self._replace(out)
        return self

    def inverse(self: GridT) -> GridT:
        raise NotImplementedError("Grid inverse is not supported")

    def scale(self: GridT, a: float) -> GridT:
        """Multiply every element by a."""
        for r in range(self._rows):
            row = self._data[r]
            for c in range(self._columns):
                row[c] = a * row[c]
        return self

    def divide(self: GridT, a: float) -> GridT:
        """Scale by the IEEE reciprocal of a."""
        return self.scale(ieee_reciprocal(a))

    def add(self: GridT, other: GridLike) -> GridT:
        for r in range(self._rows):
            row = self._data[r]
            for c in range(self._columns):
                row[c] = row[c] + other.get(r, c)
        return self

    def subtract(self: GridT, other: GridLike) -> GridT:
        for r in range(self._rows):
            row = self._data[r]
            for c in range(self._columns):
                row[c] = row[c] - other.get(r, c)
        return self

    def multiply(self: GridT, other: GridLike) -> GridT:
        """Replace the grid with the matrix product ``self * other``.

        For an ``m x n`` grid and an ``n x p`` operand the result is
        ``m x p`` with ``result[i][j] = sum_k self[i][k] * other[k][j]``.
        """
        inner: int = self._columns
        out_columns: int = other.columns()
        out: GridBuffer = [[0.0] * out_columns for _ in range(self._rows)]
        for r in range(self._rows):
            row = self._data[r]
            for c in range(out_columns):
                total: float = 0.0
                for k in range(inner):
                    total += row[k] * other.get(k, c)
                out[r][c] = total
        self._replace(out)
        return self

    def dot_multiply(self: GridT, other: GridLike) -> GridT:
        """Multiply elementwise by other."""
        for r in range(self._rows):
            row = self._data[r]
            for c in range(self._columns):
                row[c] = row[c] * other.get(r, c)
        return self

    def dot_divide(self: GridT, other: GridLike) -> GridT:
        """Divide elementwise by other, following IEEE semantics for zeros."""
        zero_divisors: int = 0
        for r in range(self._rows):
            row = self._data[r]
            for c in range(self._columns):
                divisor: float = other.get(r, c)
                if divisor == 0.0:
                    zero_divisors += 1
                row[c] = ieee_divide(row[c], divisor)
        if zero_divisors:
            _LOG.debug("Elementwise division met %d zero divisors", zero_divisors)
        return self

    def __iadd__(self: GridT, other: GridLike) -> GridT:
        return self.add(other)

    def __isub__(self: GridT, other: GridLike) -> GridT:
        return self.subtract(other)

    def __imul__(self: GridT, a: float) -> GridT:
        return self.scale(a)

    def __itruediv__(self: GridT, a: float) -> GridT:
        return self.divide(a)

    def __imatmul__(self: GridT, other: GridLike) -> GridT:
        return self.multiply(other)

    def copy(self: GridT) -> GridT:
        """Return a deep copy that owns an independent buffer."""
        return type(self).copy_of(self)

    def tolist(self) -> list[list[float]]:
        """Return the elements as a new nested list."""
        return [self.get_row(r) for r in range(self._rows)]

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the elements as a new float64 array."""
        return np.array(self.tolist(), dtype=np.float64).reshape(
            (self._rows, self._columns)
        )

    def allclose(
        self,
        other: GridLike,
        atol: float = COMPARE_ATOL,
        rtol: float = COMPARE_RTOL,
    ) -> bool:
        """Return True if other has the same shape and values within tolerance."""
        if (other.rows(), other.columns()) != self.shape():
            return False
        return bool(
            np.allclose(
                self.to_numpy(),
                Grid.copy_of(other).to_numpy(),
                atol=atol,
                rtol=rtol,
                equal_nan=True,
            )
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"
