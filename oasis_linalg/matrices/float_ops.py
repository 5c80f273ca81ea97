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
IEEE-754 double-precision helpers

Python's float division raises ``ZeroDivisionError`` for a zero divisor. Grid
arithmetic instead follows IEEE semantics, where ``x / 0`` is ``+-inf`` and
``0 / 0`` is ``nan``. Division is therefore routed through numpy float64
scalars with the floating-point warnings silenced.
"""

from __future__ import annotations

import numpy as np


def ieee_divide(a: float, b: float) -> float:
    """Return a / b with IEEE semantics for zero divisors."""
    if b != 0.0:
        return a / b
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))


def ieee_reciprocal(a: float) -> float:
    """Return 1 / a with IEEE semantics for a zero argument."""
    return ieee_divide(1.0, a)
