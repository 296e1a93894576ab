"""
SE(3) rigid-transform primitives on 4x4 homogeneous matrices.

Pose representation: T = [[R, t], [0, 1]] where
- R: 3x3 rotation (orthonormal, det = +1)
- t: translation in R^3

Tangent convention: xi = (theta, rho)
- theta: orientation component (rotation vector direction)
- rho: position component

This ordering determines the block layout of the adjoint and of every
6x6 covariance handled by the package.

Numerical Policy:
    ROTATION_EPSILON = 1e-10 selects the small-angle branch of Rodrigues.
    It affects the computational path only, not the mathematical result.

References:
- Barfoot (2017): State Estimation for Robotics
- Barfoot & Furgale (2014): Associating Uncertainty with Three-Dimensional
  Poses for Use in Estimation Problems
"""

from __future__ import annotations

import math

import numpy as np


# =============================================================================
# Numerical Constants (stability, not policy)
# =============================================================================

# Small-angle threshold for Rodrigues: ~sqrt(machine_epsilon) with margin
ROTATION_EPSILON: float = 1e-10


# =============================================================================
# so(3) helpers
# =============================================================================


def skew(v: np.ndarray) -> np.ndarray:
    """Skew-symmetric matrix from 3-vector (hat operator)."""
    v = np.asarray(v, dtype=float).reshape(-1)
    if len(v) != 3:
        raise ValueError(f"Expected 3-vector, got shape {v.shape}")
    return np.array([
        [0.0, -v[2], v[1]],
        [v[2], 0.0, -v[0]],
        [-v[1], v[0], 0.0]
    ], dtype=float)


def unskew(S: np.ndarray) -> np.ndarray:
    """Extract 3-vector from skew-symmetric matrix (vee operator)."""
    S = np.asarray(S, dtype=float)
    return np.array([S[2, 1], S[0, 2], S[1, 0]], dtype=float)


def rotvec_to_rotmat(rotvec: np.ndarray) -> np.ndarray:
    """
    Convert rotation vector (axis-angle) to rotation matrix.
    Uses Rodrigues' formula: R = I + sin(θ)[ω]_× + (1-cos(θ))[ω]_×²

    Only used to build poses; SE(3) exp/log are not part of this package.
    """
    rotvec = np.asarray(rotvec, dtype=float).reshape(-1)
    theta = np.linalg.norm(rotvec)

    if theta < ROTATION_EPSILON:
        # First-order Taylor, error O(θ²)
        return np.eye(3, dtype=float) + skew(rotvec)

    K = skew(rotvec / theta)
    return np.eye(3, dtype=float) + math.sin(theta) * K + (1.0 - math.cos(theta)) * (K @ K)


# =============================================================================
# SE(3) construction and access
# =============================================================================


def _as_pose(T: np.ndarray) -> np.ndarray:
    T = np.asarray(T, dtype=float)
    if T.shape != (4, 4):
        raise ValueError(f"Expected 4x4 homogeneous matrix, got shape {T.shape}")
    return T


def se3_identity() -> np.ndarray:
    """Identity transform."""
    return np.eye(4, dtype=float)


def se3_from_rt(R: np.ndarray, t: np.ndarray) -> np.ndarray:
    """
    Build a homogeneous transform from rotation and translation.

    Args:
        R: 3x3 rotation matrix
        t: 3-vector translation

    Returns:
        4x4 homogeneous matrix
    """
    R = np.asarray(R, dtype=float)
    t = np.asarray(t, dtype=float).reshape(-1)
    if R.shape != (3, 3):
        raise ValueError(f"Expected 3x3 rotation, got shape {R.shape}")
    if len(t) != 3:
        raise ValueError(f"Expected 3D translation, got shape {t.shape}")

    T = np.eye(4, dtype=float)
    T[:3, :3] = R
    T[:3, 3] = t
    return T


def se3_rotation(T: np.ndarray) -> np.ndarray:
    """Rotation block of T (copy)."""
    return _as_pose(T)[:3, :3].copy()


def se3_translation(T: np.ndarray) -> np.ndarray:
    """Translation column of T (copy)."""
    return _as_pose(T)[:3, 3].copy()


# =============================================================================
# SE(3) group operations
# =============================================================================


def se3_compose(T1: np.ndarray, T2: np.ndarray) -> np.ndarray:
    """
    Compose two SE(3) transforms: T_result = T1 ∘ T2.

    Exact group operation (matrix product in homogeneous form).
    """
    return _as_pose(T1) @ _as_pose(T2)


def se3_inverse(T: np.ndarray) -> np.ndarray:
    """
    Compute inverse of SE(3) transform: T_inv such that T ∘ T_inv = I.

    T_inv = [R^T, -R^T t]
    """
    T = _as_pose(T)
    R_inv = T[:3, :3].T
    return se3_from_rt(R_inv, -R_inv @ T[:3, 3])


def se3_adjoint(T: np.ndarray) -> np.ndarray:
    """
    Compute adjoint representation of SE(3) transform.

    Adjoint is used for covariance transport:
        Cov(T * x) = Adjoint(T) * Cov(x) * Adjoint(T)^T

    For xi = (theta, rho) ordering:
        Ad = [R,        0]
             [[t]_× R,  R]

    Args:
        T: 4x4 homogeneous transform

    Returns:
        6x6 adjoint matrix
    """
    T = _as_pose(T)
    R = T[:3, :3]

    Ad = np.zeros((6, 6), dtype=float)
    Ad[:3, :3] = R
    Ad[3:6, :3] = skew(T[:3, 3]) @ R
    Ad[3:6, 3:6] = R
    return Ad


def se3_equal(T1: np.ndarray, T2: np.ndarray, atol: float = 1e-12) -> bool:
    """Element-wise pose equality within absolute tolerance."""
    return bool(np.allclose(_as_pose(T1), _as_pose(T2), rtol=0.0, atol=atol))


def se3_to_string(T: np.ndarray, precision: int = 6) -> str:
    """Fixed-format rendering of the 4x4 matrix, one row per line."""
    T = _as_pose(T)
    rows = [" ".join(f"{v: .{precision}f}" for v in row) for row in T]
    return "\n".join(rows)
