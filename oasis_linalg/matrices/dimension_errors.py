################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by dimension-checked grids and vectors."""

from __future__ import annotations


class DimensionError(ValueError):
    """Raised when an index or shape does not fit a container."""


class GridDimensionError(DimensionError):
    """Raised when a grid access or operation has incompatible dimensions.

    Covers out-of-range row or column access, row/column/block length
    mismatches on bulk writes, shape mismatches on elementwise operations and
    incompatible inner dimensions on matrix multiplication.
    """


class VectorDimensionError(DimensionError):
    """Raised when a vector access or operation has incompatible lengths.

    Covers out-of-range index access, length mismatches on elementwise vector
    operations and index-block insertion that would overflow the vector.
    """


class NullOperandError(TypeError):
    """Raised when None is passed where an array, block or container is required."""
