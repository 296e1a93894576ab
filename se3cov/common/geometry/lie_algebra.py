"""
Lie-algebra operators used by SE(3) uncertainty compounding.

Bracket ("double angle bracket") operators from Barfoot & Furgale (2014):

    <<A>>    = -tr(A) I + A
    <<A, B>> = <<A>> <<B>> + <<B A>>

Both are pure functions of 3x3 matrices; <<.>> is linear and <<.,.>> is
bilinear.

The curly-wedge operator builds the se(3) adjoint-algebra matrix ad(xi)
for xi = (theta, rho):

    xi^⋏ = [θ^,  0 ]
           [ρ^,  θ^]
"""

from __future__ import annotations

import numpy as np

from se3cov.common.geometry.blocks import from_corners
from se3cov.common.geometry.se3_numpy import skew


def bracket1(A: np.ndarray) -> np.ndarray:
    """<<A>> = -tr(A) I + A."""
    A = np.asarray(A, dtype=float)
    return -np.trace(A) * np.eye(3, dtype=float) + A


def bracket2(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """<<A, B>> = <<A>> <<B>> + <<B A>>."""
    A = np.asarray(A, dtype=float)
    B = np.asarray(B, dtype=float)
    return bracket1(A) @ bracket1(B) + bracket1(B @ A)


def curly_wedge(xi: np.ndarray) -> np.ndarray:
    """
    Adjoint-algebra matrix ad(xi) of a 6D tangent vector.

    Args:
        xi: tangent vector (theta, rho)

    Returns:
        6x6 matrix with top-left = bottom-right = skew(theta),
        bottom-left = skew(rho), top-right = 0
    """
    xi = np.asarray(xi, dtype=float).reshape(-1)
    if len(xi) != 6:
        raise ValueError(f"Expected 6D tangent vector, got shape {xi.shape}")

    theta_hat = skew(xi[:3])
    return from_corners(
        theta_theta=theta_hat,
        theta_rho=np.zeros((3, 3), dtype=float),
        rho_theta=skew(xi[3:6]),
        rho_rho=theta_hat,
    )
