################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the unchecked vector."""

from __future__ import annotations

import math

import numpy as np

from oasis_linalg.matrices.grid import Grid
from oasis_linalg.matrices.vector import Orientation
from oasis_linalg.matrices.vector import Vector


def test_inner_known_value() -> None:
    """Ensure the inner product of two row vectors is the sum of products."""
    u: Vector = Vector.from_values([1.0, 2.0, 3.0])
    v: Vector = Vector.from_values([4.0, 5.0, 6.0])
    assert u.inner(v) == 32.0


def test_inner_is_symmetric_across_orientations() -> None:
    u: Vector = Vector.from_values([1.5, -2.0, 0.25])
    v: Vector = Vector.column([4.0, 0.5, 8.0])
    assert math.isclose(u.inner(v), v.inner(u))
    assert u.is_row()
    assert v.is_column()


def test_outer_known_value() -> None:
    """Ensure the outer product is self[i] * v[j]."""
    u: Vector = Vector.from_values([1.0, 2.0])
    v: Vector = Vector.from_values([3.0, 4.0])
    result: Grid = u.outer(v)
    assert result.tolist() == [[3.0, 4.0], [6.0, 8.0]]
    assert u.tolist_values() == [1.0, 2.0]
    assert u.is_row()


def test_outer_transpose_swaps_operands() -> None:
    u: Vector = Vector.from_values([1.0, 2.0, 3.0])
    v: Vector = Vector.column([-1.0, 0.5])
    forward: Grid = u.outer(v)
    assert forward.shape() == (3, 2)
    assert forward.transpose().allclose(v.outer(u))


def test_orientation_is_derived_from_shape() -> None:
    """Ensure orientation follows the current shape."""
    v: Vector = Vector.from_values([1.0, 2.0, 3.0])
    assert v.orientation() == Orientation.ROW
    v.transpose()
    assert v.orientation() == Orientation.COLUMN
    assert v.shape() == (3, 1)
    assert v.tolist_values() == [1.0, 2.0, 3.0]


def test_single_element_is_column() -> None:
    v: Vector = Vector.from_values([5.0])
    assert v.shape() == (1, 1)
    assert v.is_column()
    assert v.length() == 1


def test_index_access_follows_orientation() -> None:
    v: Vector = Vector.column([1.0, 2.0, 3.0])
    v.set_at(2, 9.0)
    assert v.get(2, 0) == 9.0
    assert v.get_at(2) == 9.0
    v.transpose()
    assert v.get(0, 2) == 9.0
    assert v.get_at(2) == 9.0


def test_set_values_at_writes_consecutive_indices() -> None:
    v: Vector = Vector(4)
    v.set_values_at(1, [7.0, 8.0])
    assert v.tolist_values() == [0.0, 7.0, 8.0, 0.0]


def test_mixed_orientation_leaves_operand_untouched() -> None:
    """Ensure combining a row with a column does not transpose the column."""
    u: Vector = Vector.from_values([1.0, 2.0, 3.0])
    v: Vector = Vector.column([10.0, 20.0, 30.0])
    u.add(v)
    assert u.tolist_values() == [11.0, 22.0, 33.0]
    assert u.is_row()
    assert v.shape() == (3, 1)
    assert v.tolist_values() == [10.0, 20.0, 30.0]
    u.subtract(v).dot_multiply(v)
    assert u.tolist_values() == [10.0, 40.0, 90.0]
    assert v.shape() == (3, 1)


def test_dot_divide_follows_ieee() -> None:
    v: Vector = Vector.from_values([1.0, 0.0, 6.0])
    v.dot_divide(Vector.column([0.0, 0.0, 3.0]))
    values: list[float] = v.tolist_values()
    assert values[0] == math.inf
    assert math.isnan(values[1])
    assert values[2] == 2.0


def test_view_aliases_values() -> None:
    """Ensure a vector view writes through to the caller's list."""
    values: list[float] = [1.0, 2.0, 3.0]
    v: Vector = Vector.view(values)
    v.set_at(1, 9.0)
    assert values[1] == 9.0
    values[2] = -1.0
    assert v.get_at(2) == -1.0


def test_rebind_values_aliases_new_storage() -> None:
    v: Vector = Vector(2)
    values: list[float] = [4.0, 5.0, 6.0]
    v.rebind_values(values)
    assert v.length() == 3
    assert not v.owns_buffer()
    v.set_at(0, 0.0)
    assert values[0] == 0.0


def test_empty_vector() -> None:
    """Ensure empty vectors have no elements and empty products."""
    empty: Vector = Vector()
    assert empty.length() == 0
    assert empty.shape() == (0, 0)
    assert Vector.from_values([]).length() == 0
    assert empty.inner(Vector()) == 0.0
    assert empty.outer(Vector()).shape() == (0, 0)


def test_from_grid_keeps_orientation() -> None:
    row: Vector = Vector.from_grid(Grid.from_rows([[1.0, 2.0, 3.0]]))
    column: Vector = Vector.from_grid(Grid.from_rows([[1.0], [2.0]]))
    other: Vector = Vector.from_grid(Grid(2, 2))
    assert row.is_row()
    assert column.is_column()
    assert column.tolist_values() == [1.0, 2.0]
    assert other.length() == 0


def test_multiply_by_grid() -> None:
    """Ensure a row vector times a matrix stays a row vector."""
    v: Vector = Vector.from_values([1.0, 2.0])
    v.multiply(Grid.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))
    assert v.shape() == (1, 3)
    assert v.tolist_values() == [9.0, 12.0, 15.0]


def test_copy_keeps_type() -> None:
    v: Vector = Vector.column([1.0, 2.0])
    duplicate: Vector = v.copy()
    assert isinstance(duplicate, Vector)
    assert duplicate.is_column()
    duplicate.set_at(0, 3.0)
    assert v.get_at(0) == 1.0


def test_matches_numpy() -> None:
    a: np.ndarray = np.array([0.5, -1.25, 3.0, 2.0])
    b: np.ndarray = np.array([4.0, 0.75, -2.0, 1.5])
    u: Vector = Vector.from_values(a.tolist())
    v: Vector = Vector.from_values(b.tolist())
    assert math.isclose(u.inner(v), float(np.dot(a, b)))
    assert np.allclose(u.outer(v).to_numpy(), np.outer(a, b))


def test_index_get_and_set() -> None:
    """Ensure get(i) and set(i, v) follow orientation."""
    v: Vector = Vector.from_values([1.0, 2.0, 3.0])
    v.set(1, 7.0)
    assert v.get(1) == 7.0
    assert v.get(0, 1) == 7.0
    v.transpose()
    v.set(2, 8.0)
    assert v.get(2, 0) == 8.0
    assert v.tolist_values() == [1.0, 7.0, 8.0]
