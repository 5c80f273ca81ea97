################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the unchecked grid."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from oasis_linalg.matrices.grid import Grid


def _sample() -> Grid:
    return Grid.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_multiply_known_product() -> None:
    """Ensure a 2x2 product matches hand-computed values."""
    a: Grid = Grid.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b: Grid = Grid.from_rows([[5.0, 6.0], [7.0, 8.0]])
    a.multiply(b)
    assert a.tolist() == [[19.0, 22.0], [43.0, 50.0]]


def test_multiply_changes_shape() -> None:
    """Ensure an m x n by n x p product is m x p with summed products."""
    left: np.ndarray = np.arange(6.0).reshape((2, 3))
    right: np.ndarray = np.arange(12.0).reshape((3, 4)) - 5.0
    grid: Grid = Grid.from_numpy(left)
    grid.multiply(Grid.from_numpy(right))
    assert grid.shape() == (2, 4)
    assert np.allclose(grid.to_numpy(), left @ right)


def test_transpose_twice_restores() -> None:
    """Ensure transposing twice gives back the original elements."""
    grid: Grid = _sample()
    grid.transpose()
    assert grid.shape() == (3, 2)
    assert grid.tolist() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]
    grid.transpose()
    assert grid.tolist() == _sample().tolist()


def test_view_aliases_buffer() -> None:
    """Ensure writes through a view reach the caller's buffer and back."""
    buffer: list[list[float]] = [[1.0, 2.0], [3.0, 4.0]]
    grid: Grid = Grid.view(buffer)
    assert not grid.owns_buffer()
    grid.set(0, 1, 7.0)
    assert buffer[0][1] == 7.0
    buffer[1][0] = 8.0
    assert grid.get(1, 0) == 8.0


def test_view_of_numpy_array() -> None:
    """Ensure a 2-D numpy array can back a grid view."""
    array: np.ndarray = np.zeros((2, 2))
    grid: Grid = Grid.view(array)  # type: ignore[arg-type]
    grid.set(1, 1, 5.0)
    assert array[1, 1] == 5.0
    assert grid.shape() == (2, 2)


def test_copies_do_not_alias() -> None:
    """Ensure owned constructors and copies are independent of their source."""
    values: list[list[float]] = [[1.0, 2.0], [3.0, 4.0]]
    grid: Grid = Grid.from_rows(values)
    grid.set(0, 0, 9.0)
    assert values[0][0] == 1.0
    duplicate: Grid = grid.copy()
    duplicate.set(1, 1, -1.0)
    assert grid.get(1, 1) == 4.0
    assert duplicate.owns_buffer()


def test_transpose_ends_aliasing() -> None:
    """Ensure a shape-changing operation replaces an aliased buffer."""
    buffer: list[list[float]] = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    grid: Grid = Grid.view(buffer)
    grid.transpose()
    assert grid.owns_buffer()
    grid.set(0, 0, 100.0)
    assert buffer[0][0] == 1.0


def test_rebind_replaces_storage() -> None:
    """Ensure rebinding adopts the new buffer's shape and aliases it."""
    grid: Grid = Grid(2, 2)
    buffer: list[list[float]] = [[1.0], [2.0], [3.0]]
    grid.rebind(buffer)
    assert grid.shape() == (3, 1)
    grid.set(2, 0, 0.5)
    assert buffer[2][0] == 0.5


def test_empty_grid_is_canonical() -> None:
    """Ensure a grid with no rows also has no columns."""
    assert Grid().shape() == (0, 0)
    assert Grid(0, 5).shape() == (0, 0)
    assert Grid.zeros(0, 3).to_numpy().shape == (0, 0)


def test_scale_round_trip() -> None:
    """Ensure scaling by a and then 1/a restores the grid."""
    grid: Grid = _sample()
    grid.scale(2.5).scale(1.0 / 2.5)
    assert grid.allclose(_sample())


def test_add_subtract_round_trip() -> None:
    """Ensure adding then subtracting the same grid restores it."""
    other: Grid = Grid.from_rows([[0.1, -0.2, 0.3], [10.0, 20.0, -30.0]])
    grid: Grid = _sample()
    grid.add(other).subtract(other)
    assert grid.allclose(_sample())


def test_elementwise_multiply() -> None:
    """Ensure dot_multiply is the Hadamard product."""
    grid: Grid = _sample()
    grid.dot_multiply(Grid.from_rows([[2.0, 2.0, 2.0], [0.0, 1.0, -1.0]]))
    assert grid.tolist() == [[2.0, 4.0, 6.0], [0.0, 5.0, -6.0]]


def test_dot_divide_follows_ieee() -> None:
    """Ensure elementwise division by zero gives infinities and NaN."""
    grid: Grid = Grid.from_rows([[1.0, -1.0], [0.0, 4.0]])
    grid.dot_divide(Grid.from_rows([[0.0, 0.0], [0.0, 2.0]]))
    assert grid.get(0, 0) == math.inf
    assert grid.get(0, 1) == -math.inf
    assert math.isnan(grid.get(1, 0))
    assert grid.get(1, 1) == 2.0


def test_divide_by_zero_follows_ieee() -> None:
    """Ensure scalar division by zero does not raise."""
    grid: Grid = Grid.from_rows([[1.0, -2.0], [0.0, 3.0]])
    grid.divide(0.0)
    assert grid.get(0, 0) == math.inf
    assert grid.get(0, 1) == -math.inf
    assert math.isnan(grid.get(1, 0))


def test_divide_by_scalar() -> None:
    grid: Grid = _sample()
    grid.divide(2.0)
    assert grid.allclose(Grid.from_rows([[0.5, 1.0, 1.5], [2.0, 2.5, 3.0]]))


def test_inverse_is_not_supported() -> None:
    with pytest.raises(NotImplementedError):
        _sample().inverse()


def test_set_row_column_and_block() -> None:
    """Ensure bulk writes land at the expected positions."""
    grid: Grid = Grid(3, 3)
    grid.set_row(0, [1.0, 2.0, 3.0])
    grid.set_column(2, [7.0, 8.0, 9.0])
    grid.set_block(1, 0, [[4.0, 5.0], [6.0, 0.5]])
    assert grid.tolist() == [
        [1.0, 2.0, 7.0],
        [4.0, 5.0, 8.0],
        [6.0, 0.5, 9.0],
    ]
    assert grid.get_row(1) == [4.0, 5.0, 8.0]
    assert grid.get_column(2) == [7.0, 8.0, 9.0]


def test_operations_chain() -> None:
    """Ensure mutating operations return the grid itself."""
    grid: Grid = _sample()
    result: Grid = grid.transpose().scale(2.0).add(Grid(3, 2))
    assert result is grid
    assert grid.tolist() == [[2.0, 8.0], [4.0, 10.0], [6.0, 12.0]]


def test_in_place_operators() -> None:
    """Ensure the augmented assignment operators mutate in place."""
    grid: Grid = Grid.from_rows([[1.0, 2.0], [3.0, 4.0]])
    original: Grid = grid
    grid += Grid.from_rows([[1.0, 1.0], [1.0, 1.0]])
    grid -= Grid.from_rows([[1.0, 1.0], [1.0, 1.0]])
    grid *= 2.0
    grid /= 2.0
    grid @= Grid.from_rows([[5.0, 6.0], [7.0, 8.0]])
    assert grid is original
    assert grid.tolist() == [[19.0, 22.0], [43.0, 50.0]]


def test_from_numpy_rejects_non_matrix() -> None:
    with pytest.raises(ValueError):
        Grid.from_numpy(np.zeros(3))


def test_allclose_requires_same_shape() -> None:
    grid: Grid = _sample()
    assert not grid.allclose(grid.copy().transpose())
    assert grid.allclose(Grid.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0 + 1e-12]]))


def test_replacing_storage_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Ensure replacing storage is reported at debug level."""
    caplog.set_level(logging.DEBUG, logger="oasis_linalg.matrices.grid")
    _sample().transpose()
    assert "Replaced 2x3 storage with 3x2" in caplog.text
