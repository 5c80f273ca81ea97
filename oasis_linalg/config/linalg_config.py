################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper and container factory."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional
from typing import Union

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError
from oasis_linalg.matrices import dimension_checking
from oasis_linalg.matrices.grid import Grid
from oasis_linalg.matrices.grid_contract import GridLike
from oasis_linalg.matrices.safe_grid import SafeGrid
from oasis_linalg.matrices.safe_grid import unwrap
from oasis_linalg.matrices.safe_vector import SafeVector
from oasis_linalg.matrices.vector import Vector


class LinalgConfigError(Exception):
    """Raised when linear-algebra configuration validation fails."""


@dataclass(frozen=True)
class LinalgConfig:
    """Convenience wrapper around linear-algebra parameters."""

    params: LinalgParams

    def __init__(self, params: LinalgParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> LinalgConfig:
        """Return a configuration built from the default parameters."""
        return cls(LinalgParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except LinalgParamsError as exc:
            raise LinalgConfigError(str(exc)) from exc

    def safe_by_default(self) -> bool:
        return self.params.safety.safe_by_default

    def zero_division(self) -> str:
        return self.params.safety.zero_division

    def make_grid(
        self, values: Sequence[Sequence[float]], *, safe: Optional[bool] = None
    ) -> Union[Grid, SafeGrid]:
        """Build a grid that owns a copy of the nested values.

        Args:
            values: Row-major nested values
            safe: Wrap the grid with dimension checks, or None to follow
                safety.safe_by_default
        """
        if self._use_safe(safe):
            return SafeGrid.from_rows(values, zero_division=self.zero_division())
        return Grid.from_rows(values)

    def make_zeros(
        self, rows: int, columns: int, *, safe: Optional[bool] = None
    ) -> Union[Grid, SafeGrid]:
        """Build a zero-filled grid of the given shape."""
        if self._use_safe(safe):
            return SafeGrid.zeros(rows, columns, zero_division=self.zero_division())
        return Grid.zeros(rows, columns)

    def make_vector(
        self, values: Sequence[float], *, safe: Optional[bool] = None
    ) -> Union[Vector, SafeVector]:
        """Build a row vector that owns a copy of the values."""
        if self._use_safe(safe):
            return SafeVector.from_values(values, zero_division=self.zero_division())
        return Vector.from_values(values)

    def checked(self, grid: GridLike) -> SafeGrid:
        """Wrap an unchecked grid or vector with the configured policy.

        Vectors are wrapped as SafeVector, other grids as SafeGrid. A checked
        container is rewrapped so it follows this configuration.
        """
        grid = dimension_checking.require_operand(grid, "grid")
        core: GridLike = unwrap(grid)
        if isinstance(core, Vector):
            return SafeVector(core, zero_division=self.zero_division())
        if isinstance(core, Grid):
            return SafeGrid(core, zero_division=self.zero_division())
        return SafeGrid(Grid.copy_of(core), zero_division=self.zero_division())

    def grids_close(self, a: GridLike, b: GridLike) -> bool:
        """Compare two grids using the configured tolerances."""
        return Grid.copy_of(unwrap(a)).allclose(
            unwrap(b),
            atol=self.params.comparison.atol,
            rtol=self.params.comparison.rtol,
        )

    def _use_safe(self, safe: Optional[bool]) -> bool:
        if safe is None:
            return self.params.safety.safe_by_default
        return safe
