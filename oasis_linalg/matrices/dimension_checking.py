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
Dimension checks for grids and vectors

Every function here either returns normally or raises the matching dimension
error. None of them mutate their arguments, so a checked operation can run
all of its checks before touching any storage.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from typing import Optional
from typing import TypeVar

from oasis_linalg.matrices.dimension_errors import GridDimensionError
from oasis_linalg.matrices.dimension_errors import NullOperandError
from oasis_linalg.matrices.dimension_errors import VectorDimensionError
from oasis_linalg.matrices.grid_contract import GridLike
from oasis_linalg.matrices.grid_contract import VectorLike
from oasis_linalg.matrices.grid_contract import format_shape


T = TypeVar("T")


def require_operand(value: Optional[T], what: str) -> T:
    """Return the value, raising NullOperandError if it is None."""
    if value is None:
        raise NullOperandError(f"Cannot access a null {what}")
    return value


def check_index(grid: GridLike, r: int, c: int) -> None:
    """Check that (r, c) addresses an element of the grid."""
    row_error: bool = r < 0 or r >= grid.rows()
    column_error: bool = c < 0 or c >= grid.columns()
    if row_error and column_error:
        raise GridDimensionError(
            f"Row ({r}) and column ({c}) are not in the range of this grid's "
            f"dimensions ({format_shape(grid)})"
        )
    if row_error:
        raise GridDimensionError(
            f"Row ({r}) is not in the range of this grid's dimensions "
            f"({format_shape(grid)})"
        )
    if column_error:
        raise GridDimensionError(
            f"Column ({c}) is not in the range of this grid's dimensions "
            f"({format_shape(grid)})"
        )


def check_row(grid: GridLike, r: int) -> None:
    """Check that r addresses a row of the grid."""
    if r < 0 or r >= grid.rows():
        raise GridDimensionError(
            f"Row ({r}) is not in the range of this grid's dimensions "
            f"({format_shape(grid)})"
        )


def check_column(grid: GridLike, c: int) -> None:
    """Check that c addresses a column of the grid."""
    if c < 0 or c >= grid.columns():
        raise GridDimensionError(
            f"Column ({c}) is not in the range of this grid's dimensions "
            f"({format_shape(grid)})"
        )


def check_vector_index(vector: VectorLike, i: int) -> None:
    """Check that i addresses an element of the vector."""
    if i < 0 or i >= vector.length():
        raise VectorDimensionError(
            f"Index ({i}) is not in the range of this vector's dimensions "
            f"(length: {vector.length()})"
        )


def check_line_length(
    expected: int, values: Optional[Sequence[Any]], axis: str
) -> None:
    """Check that a row or column of values has exactly the expected length.

    Args:
        expected: Number of elements in the destination line
        values: Values to be written, may be None
        axis: "row" when writing a row, "column" when writing a column

    Raises:
        NullOperandError: If values is None
        GridDimensionError: If the lengths differ
    """
    values = require_operand(values, "array")
    counted: str = "columns" if axis == "row" else "rows"
    if len(values) != expected:
        raise GridDimensionError(
            f"Array length ({len(values)}) needs to be the same as the number "
            f"of {counted} in the grid ({expected})"
        )


def check_rectangular(buffer: Optional[Sequence[Sequence[Any]]]) -> None:
    """Check that every row of a nested buffer has the same length."""
    buffer = require_operand(buffer, "array")
    if len(buffer) == 0:
        return
    width: int = len(buffer[0])
    for index, row in enumerate(buffer):
        if row is None:
            raise NullOperandError(f"Cannot access a null array at row {index}")
        if len(row) != width:
            raise GridDimensionError(
                f"Array is not rectangular: row {index} has length {len(row)}, "
                f"expected {width}"
            )


def check_block(
    grid: GridLike, r: int, c: int, block: Optional[Sequence[Sequence[Any]]]
) -> None:
    """Check that a block written at (r, c) fits inside the grid."""
    check_index(grid, r, c)
    block = require_operand(block, "array")
    check_rectangular(block)
    if r + len(block) > grid.rows():
        raise GridDimensionError(
            "Row insertion plus array rows exceeds dimensions of grid "
            f"[{r} + {len(block)} > {grid.rows()}]"
        )
    if len(block) != 0 and c + len(block[0]) > grid.columns():
        raise GridDimensionError(
            "Column insertion plus array columns exceeds dimensions of grid "
            f"[{c} + {len(block[0])} > {grid.columns()}]"
        )


def check_vector_block(
    vector: VectorLike, i: int, values: Optional[Sequence[Any]]
) -> None:
    """Check that values written from index i fit inside the vector."""
    check_vector_index(vector, i)
    values = require_operand(values, "array")
    if i + len(values) > vector.length():
        raise VectorDimensionError(
            "Index insertion plus array length exceeds dimensions of vector "
            f"[{i} + {len(values)} > {vector.length()}]"
        )


def check_equal_shape(a: GridLike, b: Optional[GridLike]) -> None:
    """Check that two grids have the same rows and columns."""
    b = require_operand(b, "grid")
    if a.rows() != b.rows() or a.columns() != b.columns():
        raise GridDimensionError(
            f"Grid dimensions do not agree: ({format_shape(a)}) and "
            f"({format_shape(b)})"
        )


def check_equal_length(u: VectorLike, v: Optional[VectorLike]) -> None:
    """Check that two vectors have the same length, ignoring orientation."""
    v = require_operand(v, "vector")
    if u.length() != v.length():
        raise VectorDimensionError(
            f"Vector dimensions do not agree: {u.length()} and {v.length()}"
        )


def check_multiply_shape(a: GridLike, b: Optional[GridLike]) -> None:
    """Check that a can be matrix-multiplied by b."""
    b = require_operand(b, "grid")
    if a.columns() != b.rows():
        raise GridDimensionError(
            "Grid dimensions do not agree for multiplying "
            f"({format_shape(a)} and {format_shape(b)}): columns of first must "
            f"equal rows of second ({a.columns()} != {b.rows()})"
        )


def check_vector_product(vector: VectorLike, b: GridLike) -> None:
    """Check that multiplying a vector by b leaves a vector."""
    if min(vector.rows(), b.columns()) > 1:
        raise VectorDimensionError(
            f"Multiplying a {format_shape(vector)} vector by a {format_shape(b)} "
            f"grid does not produce a vector ({vector.rows()}x{b.columns()})"
        )


def check_is_line(grid: Optional[GridLike]) -> None:
    """Check that a grid has a single row or a single column."""
    grid = require_operand(grid, "grid")
    if grid.rows() != 1 and grid.columns() != 1:
        raise VectorDimensionError(
            f"Grid ({format_shape(grid)}) is not a single row or column"
        )


def check_shape(rows: int, columns: int) -> None:
    """Check that a requested grid shape is non-negative."""
    if rows < 0 or columns < 0:
        raise GridDimensionError(
            f"Grid dimensions must be non-negative, got {rows}x{columns}"
        )


def check_vector_shape(grid: Optional[GridLike]) -> None:
    """Check that a grid is empty or has exactly one row or one column."""
    grid = require_operand(grid, "grid")
    if grid.rows() == 0 and grid.columns() == 0:
        return
    if min(grid.rows(), grid.columns()) != 1:
        raise VectorDimensionError(
            f"Grid ({format_shape(grid)}) is not a vector: one dimension must be 1"
        )
