"""
3x3 corner access for 6x6 tangent-space matrices.

Block layout follows xi = (theta, rho):

    M = [M_θθ, M_θρ]
        [M_ρθ, M_ρρ]
"""

from __future__ import annotations

from enum import Enum

import numpy as np


class Corner(Enum):
    """Named 3x3 corner of a 6x6 matrix, as (row, col) offsets."""

    THETA_THETA = (0, 0)  # top-left
    THETA_RHO = (0, 3)    # top-right
    RHO_THETA = (3, 0)    # bottom-left
    RHO_RHO = (3, 3)      # bottom-right


def corner(M: np.ndarray, which: Corner) -> np.ndarray:
    """Return a 3x3 copy of the selected corner of M."""
    r, c = which.value
    return np.array(M[r:r + 3, c:c + 3], dtype=float)


def from_corners(
    theta_theta: np.ndarray,
    theta_rho: np.ndarray,
    rho_theta: np.ndarray,
    rho_rho: np.ndarray,
) -> np.ndarray:
    """Assemble a 6x6 matrix from its four 3x3 corners."""
    M = np.zeros((6, 6), dtype=float)
    for which, block in (
        (Corner.THETA_THETA, theta_theta),
        (Corner.THETA_RHO, theta_rho),
        (Corner.RHO_THETA, rho_theta),
        (Corner.RHO_RHO, rho_rho),
    ):
        r, c = which.value
        M[r:r + 3, c:c + 3] = block
    return M
