################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for IEEE division helpers."""

from __future__ import annotations

import math

from oasis_linalg.matrices.float_ops import ieee_divide
from oasis_linalg.matrices.float_ops import ieee_reciprocal


def test_finite_division() -> None:
    assert ieee_divide(6.0, 3.0) == 2.0
    assert ieee_reciprocal(4.0) == 0.25


def test_division_by_zero_is_signed_infinity() -> None:
    """Ensure a zero divisor gives an infinity with the IEEE sign."""
    assert ieee_divide(1.0, 0.0) == math.inf
    assert ieee_divide(-1.0, 0.0) == -math.inf
    assert ieee_divide(1.0, -0.0) == -math.inf
    assert ieee_reciprocal(0.0) == math.inf


def test_zero_over_zero_is_nan() -> None:
    assert math.isnan(ieee_divide(0.0, 0.0))
