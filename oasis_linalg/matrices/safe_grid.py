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
Dimension-checked decorator around a grid

SafeGrid holds no data of its own. Every public call validates its arguments
through ``dimension_checking`` and then delegates to the wrapped Grid, so the
arithmetic result is always the same as the unchecked grid's. All checks run
before the wrapped grid is touched, so a rejected call leaves it unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import COMPARE_ATOL
from oasis_linalg.config.linalg_params import COMPARE_RTOL
from oasis_linalg.config.linalg_params import ZERO_DIVISION
from oasis_linalg.config.linalg_params import ZERO_DIVISION_IEEE
from oasis_linalg.config.linalg_params import ZERO_DIVISION_RAISE
from oasis_linalg.matrices import dimension_checking
from oasis_linalg.matrices.grid import Grid
from oasis_linalg.matrices.grid_contract import GridBuffer
from oasis_linalg.matrices.grid_contract import GridLike


_LOG: logging.Logger = logging.getLogger(__name__)

SafeGridT = TypeVar("SafeGridT", bound="SafeGrid")


def unwrap(other: GridLike) -> GridLike:
    """Return the unchecked grid behind a checked wrapper."""
    if isinstance(other, SafeGrid):
        return other.unwrap()
    return other


class SafeGrid:
    """Grid wrapper that validates every access and operation."""

    # Unchecked type built by the convenience constructors
    _CORE: type[Grid] = Grid

    def __init__(self, grid: Grid, *, zero_division: str = ZERO_DIVISION) -> None:
        """Wrap a grid.

        Args:
            grid: Unchecked grid that holds the data
            zero_division: "ieee" to keep infinities and NaNs from division by
                zero, "raise" to reject such divisions

        Raises:
            NullOperandError: If grid is None
            ValueError: If zero_division is not a known policy
        """
        if zero_division not in {ZERO_DIVISION_IEEE, ZERO_DIVISION_RAISE}:
            raise ValueError(f"Unknown zero-division policy: {zero_division}")
        self._grid: Grid = dimension_checking.require_operand(grid, "grid")
        self._zero_division: str = zero_division

    @classmethod
    def _admit(cls, grid: GridLike) -> None:
        """Check that a freshly built core has an acceptable shape."""

    @classmethod
    def _build(cls: type[SafeGridT], core: Grid, zero_division: str) -> SafeGridT:
        cls._admit(core)
        return cls(core, zero_division=zero_division)

    @classmethod
    def zeros(
        cls: type[SafeGridT],
        rows: int,
        columns: int,
        *,
        zero_division: str = ZERO_DIVISION,
    ) -> SafeGridT:
        """Return a checked zero-filled grid of the given shape."""
        dimension_checking.check_shape(rows, columns)
        return cls._build(cls._CORE.zeros(rows, columns), zero_division)

    @classmethod
    def view(
        cls: type[SafeGridT], buffer: GridBuffer, *, zero_division: str = ZERO_DIVISION
    ) -> SafeGridT:
        """Return a checked grid that aliases the caller's buffer."""
        dimension_checking.check_rectangular(buffer)
        return cls._build(cls._CORE.view(buffer), zero_division)

    @classmethod
    def from_rows(
        cls: type[SafeGridT],
        values: Sequence[Sequence[float]],
        *,
        zero_division: str = ZERO_DIVISION,
    ) -> SafeGridT:
        """Return a checked grid that owns a copy of the nested values."""
        dimension_checking.check_rectangular(values)
        return cls._build(cls._CORE.from_rows(values), zero_division)

    @classmethod
    def copy_of(
        cls: type[SafeGridT], other: GridLike, *, zero_division: str = ZERO_DIVISION
    ) -> SafeGridT:
        """Return a checked deep copy of any grid-like container."""
        other = dimension_checking.require_operand(other, "grid")
        return cls._build(cls._CORE.copy_of(unwrap(other)), zero_division)

    @classmethod
    def from_numpy(
        cls: type[SafeGridT],
        array: NDArray[np.float64],
        *,
        zero_division: str = ZERO_DIVISION,
    ) -> SafeGridT:
        """Return a checked grid that owns a copy of a 2-D array."""
        array = dimension_checking.require_operand(array, "array")
        return cls._build(cls._CORE.from_numpy(array), zero_division)

    def unwrap(self) -> Grid:
        """Return the wrapped, unchecked grid."""
        return self._grid

    def zero_division(self) -> str:
        return self._zero_division

    def rows(self) -> int:
        return self._grid.rows()

    def columns(self) -> int:
        return self._grid.columns()

    def shape(self) -> tuple[int, int]:
        return self._grid.shape()

    def owns_buffer(self) -> bool:
        return self._grid.owns_buffer()

    def get(self, r: int, c: int) -> float:
        dimension_checking.check_index(self, r, c)
        return self._grid.get(r, c)

    def get_row(self, r: int) -> list[float]:
        dimension_checking.check_row(self, r)
        return self._grid.get_row(r)

    def get_column(self, c: int) -> list[float]:
        dimension_checking.check_column(self, c)
        return self._grid.get_column(c)

    def set(self: SafeGridT, r: int, c: int, value: float) -> SafeGridT:
        dimension_checking.check_index(self, r, c)
        self._grid.set(r, c, value)
        return self

    def set_row(self: SafeGridT, r: int, values: Sequence[float]) -> SafeGridT:
        dimension_checking.check_row(self, r)
        dimension_checking.check_line_length(self.columns(), values, "row")
        self._grid.set_row(r, values)
        return self

    def set_column(self: SafeGridT, c: int, values: Sequence[float]) -> SafeGridT:
        dimension_checking.check_column(self, c)
        dimension_checking.check_line_length(self.rows(), values, "column")
        self._grid.set_column(c, values)
        return self

    def set_block(
        self: SafeGridT, r: int, c: int, block: Sequence[Sequence[float]]
    ) -> SafeGridT:
        dimension_checking.check_block(self, r, c, block)
        self._grid.set_block(r, c, block)
        return self

    def rebind(self: SafeGridT, buffer: GridBuffer) -> SafeGridT:
        dimension_checking.check_rectangular(buffer)
        self._grid.rebind(buffer)
        return self

    def transpose(self: SafeGridT) -> SafeGridT:
        self._grid.transpose()
        return self

    def inverse(self: SafeGridT) -> SafeGridT:
        self._grid.inverse()
        return self

    def scale(self: SafeGridT, a: float) -> SafeGridT:
        self._grid.scale(a)
        return self

    def divide(self: SafeGridT, a: float) -> SafeGridT:
        if a == 0.0:
            self._check_zero_division("Cannot divide a grid by zero")
        self._grid.divide(a)
        return self

    def add(self: SafeGridT, other: GridLike) -> SafeGridT:
        dimension_checking.check_equal_shape(self, other)
        self._grid.add(unwrap(other))
        return self

    def subtract(self: SafeGridT, other: GridLike) -> SafeGridT:
        dimension_checking.check_equal_shape(self, other)
        self._grid.subtract(unwrap(other))
        return self

    def multiply(self: SafeGridT, other: GridLike) -> SafeGridT:
        dimension_checking.check_multiply_shape(self, other)
        self._grid.multiply(unwrap(other))
        return self

    def dot_multiply(self: SafeGridT, other: GridLike) -> SafeGridT:
        dimension_checking.check_equal_shape(self, other)
        self._grid.dot_multiply(unwrap(other))
        return self

    def dot_divide(self: SafeGridT, other: GridLike) -> SafeGridT:
        dimension_checking.check_equal_shape(self, other)
        self._check_zero_divisors(other)
        self._grid.dot_divide(unwrap(other))
        return self

    def _check_zero_division(self, message: str) -> None:
        if self._zero_division == ZERO_DIVISION_RAISE:
            _LOG.debug("Rejected division by zero on a %dx%d grid", *self.shape())
            raise ZeroDivisionError(message)

    def _check_zero_divisors(self, other: GridLike) -> None:
        if self._zero_division != ZERO_DIVISION_RAISE:
            return
        source: GridLike = unwrap(other)
        for r in range(source.rows()):
            for c in range(source.columns()):
                if source.get(r, c) == 0.0:
                    self._check_zero_division(
                        f"Cannot divide elementwise by zero at ({r}, {c})"
                    )

    def __iadd__(self: SafeGridT, other: GridLike) -> SafeGridT:
        return self.add(other)

    def __isub__(self: SafeGridT, other: GridLike) -> SafeGridT:
        return self.subtract(other)

    def __imul__(self: SafeGridT, a: float) -> SafeGridT:
        return self.scale(a)

    def __itruediv__(self: SafeGridT, a: float) -> SafeGridT:
        return self.divide(a)

    def __imatmul__(self: SafeGridT, other: GridLike) -> SafeGridT:
        return self.multiply(other)

    def copy(self: SafeGridT) -> SafeGridT:
        """Return a checked deep copy with the same zero-division policy."""
        return type(self)(self._grid.copy(), zero_division=self._zero_division)

    def tolist(self) -> list[list[float]]:
        return self._grid.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        return self._grid.to_numpy()

    def allclose(
        self,
        other: GridLike,
        atol: float = COMPARE_ATOL,
        rtol: float = COMPARE_RTOL,
    ) -> bool:
        other = dimension_checking.require_operand(other, "grid")
        return self._grid.allclose(unwrap(other), atol=atol, rtol=rtol)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._grid!r})"
