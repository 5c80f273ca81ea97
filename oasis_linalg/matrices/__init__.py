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
Dense grids and vectors, unchecked and dimension-checked
"""

from __future__ import annotations

from oasis_linalg.matrices.dimension_errors import DimensionError
from oasis_linalg.matrices.dimension_errors import GridDimensionError
from oasis_linalg.matrices.dimension_errors import NullOperandError
from oasis_linalg.matrices.dimension_errors import VectorDimensionError
from oasis_linalg.matrices.grid import Grid
from oasis_linalg.matrices.grid_contract import GridLike
from oasis_linalg.matrices.grid_contract import VectorLike
from oasis_linalg.matrices.safe_grid import SafeGrid
from oasis_linalg.matrices.safe_vector import SafeVector
from oasis_linalg.matrices.vector import Orientation
from oasis_linalg.matrices.vector import Vector


__all__ = [
    "DimensionError",
    "Grid",
    "GridDimensionError",
    "GridLike",
    "NullOperandError",
    "Orientation",
    "SafeGrid",
    "SafeVector",
    "Vector",
    "VectorDimensionError",
    "VectorLike",
]
