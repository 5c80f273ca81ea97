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
Dimension-checked decorator around a vector

Elementwise operations compare lengths when the operand is a vector, so a row
vector and a column vector of the same length combine. A plain grid operand is
compared by shape instead. Multiplication is only accepted when the product is
still a single row or column.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional
from typing import TypeVar

from oasis_linalg.config.linalg_params import ZERO_DIVISION
from oasis_linalg.matrices import dimension_checking
from oasis_linalg.matrices.grid import Grid
from oasis_linalg.matrices.grid_contract import GridBuffer
from oasis_linalg.matrices.grid_contract import GridLike
from oasis_linalg.matrices.grid_contract import LineBuffer
from oasis_linalg.matrices.grid_contract import VectorLike
from oasis_linalg.matrices.safe_grid import SafeGrid
from oasis_linalg.matrices.safe_grid import unwrap
from oasis_linalg.matrices.vector import Orientation
from oasis_linalg.matrices.vector import Vector


SafeVectorT = TypeVar("SafeVectorT", bound="SafeVector")


def unwrap_vector(v: VectorLike) -> VectorLike:
    """Return the unchecked vector behind a checked wrapper."""
    if isinstance(v, SafeVector):
        return v.unwrap()
    return v


class SafeVector(SafeGrid):
    """Vector wrapper that validates every access and operation."""

    _CORE: type[Grid] = Vector

    def __init__(self, vector: Vector, *, zero_division: str = ZERO_DIVISION) -> None:
        """Wrap a vector.

        Raises:
            NullOperandError: If vector is None
            TypeError: If vector is not a Vector
            VectorDimensionError: If the vector is neither empty nor a single
                row or column
        """
        vector = dimension_checking.require_operand(vector, "vector")
        if not isinstance(vector, Vector):
            raise TypeError(f"Expected a Vector, got {type(vector).__name__}")
        self._admit(vector)
        super().__init__(vector, zero_division=zero_division)
        self._vector: Vector = vector

    @classmethod
    def _admit(cls, grid: GridLike) -> None:
        dimension_checking.check_vector_shape(grid)

    @classmethod
    def zeros(  # type: ignore[override]
        cls: type[SafeVectorT], length: int, *, zero_division: str = ZERO_DIVISION
    ) -> SafeVectorT:
        """Return a checked zero-filled row vector."""
        dimension_checking.check_shape(1, length)
        return cls(Vector(length), zero_division=zero_division)

    @classmethod
    def view(  # type: ignore[override]
        cls: type[SafeVectorT],
        values: LineBuffer,
        *,
        zero_division: str = ZERO_DIVISION,
    ) -> SafeVectorT:
        """Return a checked row vector that aliases the caller's sequence."""
        values = dimension_checking.require_operand(values, "array")
        return cls._build(Vector.view(values), zero_division)

    @classmethod
    def from_values(
        cls: type[SafeVectorT],
        values: Sequence[float],
        *,
        zero_division: str = ZERO_DIVISION,
    ) -> SafeVectorT:
        """Return a checked row vector that owns a copy of the values."""
        values = dimension_checking.require_operand(values, "array")
        return cls._build(Vector.from_values(values), zero_division)

    @classmethod
    def column(
        cls: type[SafeVectorT],
        values: Sequence[float],
        *,
        zero_division: str = ZERO_DIVISION,
    ) -> SafeVectorT:
        """Return a checked column vector that owns a copy of the values."""
        values = dimension_checking.require_operand(values, "array")
        return cls._build(Vector.column(values), zero_division)

    @classmethod
    def from_grid(
        cls: type[SafeVectorT], grid: GridLike, *, zero_division: str = ZERO_DIVISION
    ) -> SafeVectorT:
        """Copy a single-row or single-column grid into a checked vector.

        Raises:
            VectorDimensionError: If the grid is not a single row or column
        """
        dimension_checking.check_is_line(grid)
        return cls._build(Vector.from_grid(unwrap(grid)), zero_division)

    def unwrap(self) -> Vector:
        """Return the wrapped, unchecked vector."""
        return self._vector

    def length(self) -> int:
        return self._vector.length()

    def orientation(self) -> Orientation:
        return self._vector.orientation()

    def is_row(self) -> bool:
        return self._vector.is_row()

    def is_column(self) -> bool:
        return self._vector.is_column()

    def get(self, r: int, c: Optional[int] = None) -> float:
        """Return element (r, c), or the value at index r when c is omitted."""
        if c is None:
            return self.get_at(r)
        return super().get(r, c)

    def set(  # type: ignore[override]
        self: SafeVectorT, r: int, c: float, value: Optional[float] = None
    ) -> SafeVectorT:
        """Set element (r, c), or the value at index r when called as set(i, v)."""
        if value is None:
            return self.set_at(r, c)
        return super().set(r, int(c), value)

    def get_at(self, i: int) -> float:
        dimension_checking.check_vector_index(self, i)
        return self._vector.get_at(i)

    def set_at(self: SafeVectorT, i: int, value: float) -> SafeVectorT:
        dimension_checking.check_vector_index(self, i)
        self._vector.set_at(i, value)
        return self

    def set_values_at(
        self: SafeVectorT, i: int, values: Sequence[float]
    ) -> SafeVectorT:
        dimension_checking.check_vector_block(self, i, values)
        self._vector.set_values_at(i, values)
        return self

    def rebind(self: SafeVectorT, buffer: GridBuffer) -> SafeVectorT:
        dimension_checking.check_rectangular(buffer)
        self._admit(Grid.view(buffer))
        self._vector.rebind(buffer)
        return self

    def rebind_values(self: SafeVectorT, values: LineBuffer) -> SafeVectorT:
        values = dimension_checking.require_operand(values, "array")
        self._vector.rebind_values(values)
        return self

    def tolist_values(self) -> list[float]:
        return self._vector.tolist_values()

    def _check_same_size(self, other: GridLike) -> None:
        if isinstance(other, VectorLike):
            dimension_checking.check_equal_length(self, other)
        else:
            dimension_checking.check_equal_shape(self, other)

    def add(self: SafeVectorT, other: GridLike) -> SafeVectorT:
        self._check_same_size(other)
        self._vector.add(unwrap(other))
        return self

    def subtract(self: SafeVectorT, other: GridLike) -> SafeVectorT:
        self._check_same_size(other)
        self._vector.subtract(unwrap(other))
        return self

    def dot_multiply(self: SafeVectorT, other: GridLike) -> SafeVectorT:
        self._check_same_size(other)
        self._vector.dot_multiply(unwrap(other))
        return self

    def dot_divide(self: SafeVectorT, other: GridLike) -> SafeVectorT:
        self._check_same_size(other)
        self._check_zero_divisors(other)
        self._vector.dot_divide(unwrap(other))
        return self

    def multiply(self: SafeVectorT, other: GridLike) -> SafeVectorT:
        dimension_checking.check_multiply_shape(self, other)
        dimension_checking.check_vector_product(self, other)
        self._vector.multiply(unwrap(other))
        return self

    def inner(self, v: VectorLike) -> float:
        """Return the inner product after checking that the lengths agree."""
        dimension_checking.check_equal_length(self, v)
        return self._vector.inner(unwrap_vector(v))

    def outer(self, v: VectorLike) -> SafeGrid:
        """Return the outer product as a checked grid with the same policy."""
        v = dimension_checking.require_operand(v, "vector")
        return SafeGrid(
            self._vector.outer(unwrap_vector(v)), zero_division=self._zero_division
        )
