import os
import sys
import pytest
from typing import Any, Dict

import numpy as np

# Ensure local package import works for pytest collection.
_TEST_DIR = os.path.dirname(__file__)
_PKG_ROOT = os.path.abspath(os.path.join(_TEST_DIR, ".."))
if _PKG_ROOT not in sys.path:
    sys.path.insert(0, _PKG_ROOT)

from se3cov.common.geometry.se3_numpy import rotvec_to_rotmat, se3_from_rt  # noqa: E402


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def base_config_path() -> str:
    """Path to the shipped base configuration."""
    return os.path.join(_PKG_ROOT, "config", "se3cov_base.yaml")


@pytest.fixture
def base_config(base_config_path) -> Dict[str, Any]:
    """Raw base configuration dict."""
    import yaml
    with open(base_config_path) as f:
        return yaml.safe_load(f) or {}


# =============================================================================
# Test Utility Fixtures
# =============================================================================


@pytest.fixture
def numpy_seed():
    """Set numpy random seed for reproducible tests."""
    np.random.seed(42)
    yield


@pytest.fixture
def identity_pose():
    """Return identity SE(3) pose as 4x4 homogeneous matrix."""
    return np.eye(4, dtype=np.float64)


@pytest.fixture
def random_pose():
    """Generate a random SE(3) pose for testing."""
    rng = np.random.default_rng(42)
    R = rotvec_to_rotmat(rng.normal(size=3) * 0.5)
    t = rng.normal(size=3)
    return se3_from_rt(R, t)


@pytest.fixture
def random_spd():
    """Factory for random symmetric positive definite matrices."""
    def _make(n: int = 6, seed: int = 0, scale: float = 1.0) -> np.ndarray:
        rng = np.random.default_rng(seed)
        M = rng.normal(size=(n, n))
        return scale * (M @ M.T + 0.1 * np.eye(n))
    return _make
