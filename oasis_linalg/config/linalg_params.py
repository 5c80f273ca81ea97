################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for grids and vectors."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Wrap containers built by the factory with dimension checks
SAFE_BY_DEFAULT: bool = True
# Division-by-zero policy for checked containers
ZERO_DIVISION: str = "ieee"

# Keep IEEE infinities and NaNs from division by zero
ZERO_DIVISION_IEEE: str = "ieee"
# Reject division by zero before mutating the container
ZERO_DIVISION_RAISE: str = "raise"

# Absolute tolerance for approximate grid comparisons
COMPARE_ATOL: float = 1e-9
# Relative tolerance for approximate grid comparisons
COMPARE_RTOL: float = 1e-9


class LinalgParamsError(Exception):
    """Raised when linear-algebra parameters are invalid."""


def _require_non_negative(value: float, name: str) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise LinalgParamsError(f"{name} must be a number")
    if not math.isfinite(value) or value < 0.0:
        raise LinalgParamsError(f"{name} must be finite and non-negative")


def _require_bool(value: Any, name: str) -> None:
    if not isinstance(value, bool):
        raise LinalgParamsError(f"{name} must be a bool")


@dataclass(frozen=True)
class SafetyParams:
    """Dimension-checking parameters."""

    # Wrap containers built by the factory with dimension checks
    safe_by_default: bool = SAFE_BY_DEFAULT
    # Division-by-zero policy for checked containers
    zero_division: str = ZERO_DIVISION


@dataclass(frozen=True)
class ComparisonParams:
    """Tolerances for approximate comparisons."""

    # Absolute tolerance
    atol: float = COMPARE_ATOL
    # Relative tolerance
    rtol: float = COMPARE_RTOL


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for grids and vectors."""

    safety: SafetyParams = field(default_factory=SafetyParams)
    comparison: ComparisonParams = field(default_factory=ComparisonParams)

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(safety=SafetyParams(), comparison=ComparisonParams())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LinalgParams:
        """Build a parameter tree from nested mappings.

        Missing namespaces and keys keep their defaults. Unknown namespaces or
        keys are rejected.

        Raises:
            LinalgParamsError: If a namespace or key is unknown
        """
        sections: dict[str, type[Any]] = {
            "safety": SafetyParams,
            "comparison": ComparisonParams,
        }
        changes: dict[str, Any] = {}
        for namespace, values in data.items():
            if namespace not in sections:
                raise LinalgParamsError(f"Unknown parameter namespace: {namespace}")
            if not isinstance(values, Mapping):
                raise LinalgParamsError(f"{namespace} must be a mapping")
            section: type[Any] = sections[namespace]
            known: set[str] = {item.name for item in fields(section)}
            for key in values:
                if key not in known:
                    raise LinalgParamsError(f"Unknown parameter: {namespace}.{key}")
            changes[namespace] = section(**dict(values))
        return cls.defaults().replace(**changes)

    def replace(self, **changes: Any) -> LinalgParams:
        """Return a copy with the given namespaces replaced."""
        return replace(self, **changes)

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_bool(self.safety.safe_by_default, "safety.safe_by_default")
        if self.safety.zero_division not in {ZERO_DIVISION_IEEE, ZERO_DIVISION_RAISE}:
            raise LinalgParamsError(
                f"safety.zero_division must be '{ZERO_DIVISION_IEEE}' or "
                f"'{ZERO_DIVISION_RAISE}'"
            )
        _require_non_negative(self.comparison.atol, "comparison.atol")
        _require_non_negative(self.comparison.rtol, "comparison.rtol")
