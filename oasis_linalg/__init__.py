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
Row-major grids and vectors of doubles with optional dimension checking
"""

from __future__ import annotations

from oasis_linalg.config.linalg_config import LinalgConfig
from oasis_linalg.config.linalg_config import LinalgConfigError
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError
from oasis_linalg.matrices import DimensionError
from oasis_linalg.matrices import Grid
from oasis_linalg.matrices import GridDimensionError
from oasis_linalg.matrices import GridLike
from oasis_linalg.matrices import NullOperandError
from oasis_linalg.matrices import Orientation
from oasis_linalg.matrices import SafeGrid
from oasis_linalg.matrices import SafeVector
from oasis_linalg.matrices import Vector
from oasis_linalg.matrices import VectorDimensionError
from oasis_linalg.matrices import VectorLike


__all__ = [
    "DimensionError",
    "Grid",
    "GridDimensionError",
    "GridLike",
    "LinalgConfig",
    "LinalgConfigError",
    "LinalgParams",
    "LinalgParamsError",
    "NullOperandError",
    "Orientation",
    "SafeGrid",
    "SafeVector",
    "Vector",
    "VectorDimensionError",
    "VectorLike",
]
