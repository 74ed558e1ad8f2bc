"""Shared fixtures for the koshi_easing test suite."""

import sys
import os
import pytest
import numpy as np

# Ensure the package root is importable
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from koshi_easing.core.registry import CurveRegistry, build_default_registry


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def registry():
    """Freshly built default registry, isolated from the shared one."""
    return build_default_registry()


@pytest.fixture
def empty_registry():
    """Registry with nothing registered."""
    return CurveRegistry()


# ---------------------------------------------------------------------------
# Progress grids
# ---------------------------------------------------------------------------

@pytest.fixture
def progress_grid():
    """21 evenly spaced progress values covering [0, 1]."""
    return np.linspace(0.0, 1.0, 21)
