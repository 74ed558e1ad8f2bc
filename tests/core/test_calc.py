"""Tests for koshi_easing.core.calc module.

Covers:
- restricted: clamps both sides, None leaves a side unbounded.
- is_in_range: inclusive bounds.
- difference: signed distance.
- lerp: t=0, t=0.5, t=1, negative t, t>1.
- value_eased: maps eased progress onto a range.
- escaped: rubber-band overshoot past a clamp bound.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import pytest

from koshi_easing.core.calc import (
    restricted,
    is_in_range,
    difference,
    lerp,
    value_eased,
    escaped,
)


# =====================================================================
# restricted
# =====================================================================

class TestRestricted:

    def test_inside_unchanged(self):
        assert restricted(0.5, 0.0, 1.0) == 0.5

    def test_clamps_low(self):
        assert restricted(-3.0, 0.0, 1.0) == 0.0

    def test_clamps_high(self):
        assert restricted(3.0, 0.0, 1.0) == 1.0

    def test_none_min_unbounded(self):
        assert restricted(-1000.0, None, 1.0) == -1000.0

    def test_none_max_unbounded(self):
        assert restricted(1000.0, 0.0, None) == 1000.0

    def test_fully_unbounded(self):
        assert restricted(42.0, None, None) == 42.0


# =====================================================================
# is_in_range
# =====================================================================

class TestIsInRange:

    def test_bounds_inclusive(self):
        assert is_in_range(0.0, 0.0, 1.0)
        assert is_in_range(1.0, 0.0, 1.0)

    def test_outside(self):
        assert not is_in_range(-0.01, 0.0, 1.0)
        assert not is_in_range(1.01, 0.0, 1.0)


# =====================================================================
# difference / lerp
# =====================================================================

class TestDifferenceAndLerp:

    def test_difference_signed(self):
        assert difference(1.0, 1.2) == pytest.approx(0.2)
        assert difference(0.0, -0.5) == pytest.approx(-0.5)

    def test_lerp_boundaries(self):
        assert lerp(10.0, 20.0, 0.0) == pytest.approx(10.0)
        assert lerp(10.0, 20.0, 1.0) == pytest.approx(20.0)

    def test_lerp_midpoint(self):
        assert lerp(10.0, 20.0, 0.5) == pytest.approx(15.0)

    def test_lerp_extrapolates(self):
        assert lerp(0.0, 10.0, -0.5) == pytest.approx(-5.0)
        assert lerp(0.0, 10.0, 1.5) == pytest.approx(15.0)


# =====================================================================
# value_eased / escaped
# =====================================================================

class TestValueEased:

    def test_uses_easing(self):
        assert value_eased(0.5, 0.0, 100.0, lambda p: p * p) == pytest.approx(25.0)

    def test_reverse_direction(self):
        assert value_eased(1.0, 100.0, 0.0, lambda p: p) == pytest.approx(0.0)


class TestEscaped:

    def test_zero_amp_is_hard_clamp(self):
        assert escaped(100.0, 150.0, 0.0) == pytest.approx(100.0)

    def test_half_amp(self):
        assert escaped(100.0, 150.0, 0.5) == pytest.approx(125.0)

    def test_full_amp_restores_original(self):
        assert escaped(0.0, -40.0, 1.0) == pytest.approx(-40.0)
