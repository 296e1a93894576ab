"""
Second-order SE(3) uncertainty compounding via adjoint transport.

Given a current state (T_1, Σ_1) and an independent increment (T_2, Σ_2):

    T'  = T_1 T_2
    Σ'  = Σ_1 + Ad(T_1) Σ_2 Ad(T_1)^T

The increment covariance is expressed in the frame of T_2 and is moved
into the frame of Σ_1 by the adjoint similarity transform. Linear in the
increment, so exact only as Σ_2 -> 0 relative to group curvature.

Reference: Barfoot & Furgale (2014), Sec. IV-A.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from se3cov.common.geometry.se3_numpy import se3_adjoint, se3_compose


def transport_covariance(T: np.ndarray, cov: np.ndarray) -> np.ndarray:
    """
    Re-express a tangent covariance through the adjoint of T.

    Returns Ad(T) @ cov @ Ad(T).T
    """
    Ad = se3_adjoint(T)
    return Ad @ np.asarray(cov, dtype=float) @ Ad.T


def compound_2nd_order(
    T_1: np.ndarray,
    cov_1: np.ndarray,
    T_2: np.ndarray,
    cov_2: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Second-order compounding of two uncorrelated uncertain poses.

    Args:
        T_1: current pose (4x4)
        cov_1: current covariance (6x6, theta-rho ordering)
        T_2: pose increment (4x4)
        cov_2: increment covariance (6x6, in the frame of T_2)

    Returns:
        (T_1 T_2, Σ_1 + Ad(T_1) Σ_2 Ad(T_1)^T)
    """
    cov_1 = np.asarray(cov_1, dtype=float)
    return se3_compose(T_1, T_2), cov_1 + transport_covariance(T_1, cov_2)
