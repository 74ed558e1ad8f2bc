"""Verify all modules import correctly."""

import sys
import os
import pytest

# Ensure package is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class TestCoreImports:
    """Test that core modules import with only numpy."""

    def test_import_bezier(self):
        from koshi_easing.core.bezier import BezierCurve, bezier_easing, cubic_bezier_point
        assert callable(bezier_easing)
        assert callable(cubic_bezier_point)

    def test_import_formulas(self):
        from koshi_easing.core.formulas import BASE_IN, BASE_OUT
        assert isinstance(BASE_IN, dict)
        assert isinstance(BASE_OUT, dict)

    def test_import_registry(self):
        from koshi_easing.core.registry import CurveRegistry, easing
        assert isinstance(easing, CurveRegistry)

    def test_import_range_easing(self):
        from koshi_easing.core.range_easing import within_range
        assert callable(within_range)

    def test_import_core_package(self):
        from koshi_easing.core import (
            BezierCurve, CurveRegistry, within_range, list_easings, sample_easing,
            InvalidEasingName, InvalidControlPoints,
        )
        assert issubclass(InvalidEasingName, ValueError)


class TestPackageImports:
    """Test the public facade."""

    def test_public_api(self):
        import koshi_easing
        for name in koshi_easing.__all__:
            assert hasattr(koshi_easing, name), name

    def test_get_easing(self):
        from koshi_easing import get_easing
        assert get_easing("linear")(0.3) == pytest.approx(0.3)

    def test_get_easing_unknown(self):
        from koshi_easing import get_easing, InvalidEasingName
        with pytest.raises(InvalidEasingName):
            get_easing("nonexistent")

    def test_register_bezier_facade(self, monkeypatch):
        import koshi_easing
        from koshi_easing import get_easing, register_bezier
        from koshi_easing.core.registry import build_default_registry

        local = build_default_registry()
        monkeypatch.setattr(koshi_easing, "easing", local)
        assert register_bezier("test-imports-curve", 0.3, 0.0, 0.7, 1.0) is True
        assert register_bezier("test-imports-curve", 0.0, 1.0, 0.0, 1.0) is False
        assert get_easing("test-imports-curve")(0.5) == pytest.approx(0.5, abs=1e-5)
        assert "test-imports-curve" in local
        assert "test-imports-curve" not in koshi_easing.core.easing
