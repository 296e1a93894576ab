"""
Fourth-order SE(3) uncertainty compounding.

Adds the second-order-in-covariance terms of the closed-form BCH
expansion to the adjoint transport of adjoint_transport.py:

    Σ' = Σ_1 + Σ_2' + 1/12 (A_1 Σ_2' + Σ_2' A_1^T + A_2 Σ_1 + Σ_1 A_2^T) + 1/4 B

with Σ_2' = Ad(T_1) Σ_2 Ad(T_1)^T,

    A = [<<Σ_θθ>>,          0       ]
        [<<Σ_ρθ + Σ_θρ>>,   <<Σ_θθ>> ]

    B = [B_φφ, B_ρφ^T]
        [B_ρφ, B_ρρ  ]

    B_ρρ = <<Σ1_θθ, Σ2_ρρ>> + <<Σ1_θρ, Σ2_ρθ>> + <<Σ1_ρθ, Σ2_θρ>> + <<Σ1_ρρ, Σ2_θθ>>
    B_ρφ = <<Σ1_θθ, Σ2_θρ>> + <<Σ1_ρθ, Σ2_θθ>>
    B_φφ = <<Σ1_θθ, Σ2_θθ>>

Blocks follow the theta-rho ordering of this package, which swaps the
rho-phi ordering used in the reference. B_ρφ deviates from the printed
book version (Barfoot 2017, p. 265) and follows the paper.

Reference: Barfoot & Furgale (2014), Sec. IV-B.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from se3cov.common import constants
from se3cov.common.geometry.blocks import Corner, corner, from_corners
from se3cov.common.geometry.lie_algebra import bracket1, bracket2
from se3cov.common.geometry.se3_numpy import se3_compose
from se3cov.backend.operators.adjoint_transport import transport_covariance


def _correction_matrix(sigma_tt: np.ndarray, sigma_cross: np.ndarray) -> np.ndarray:
    A_tt = bracket1(sigma_tt)
    return from_corners(
        theta_theta=A_tt,
        theta_rho=np.zeros((3, 3), dtype=float),
        rho_theta=bracket1(sigma_cross),
        rho_rho=A_tt,
    )


def correction_matrix_current(sigma_1: np.ndarray) -> np.ndarray:
    """A_1, built from the current covariance with cross term Σ_ρθ + Σ_θρ."""
    return _correction_matrix(
        corner(sigma_1, Corner.THETA_THETA),
        corner(sigma_1, Corner.RHO_THETA) + corner(sigma_1, Corner.THETA_RHO),
    )


def correction_matrix_increment(sigma_2: np.ndarray) -> np.ndarray:
    """A_2, built from the transported increment with cross term Σ_ρθ + Σ_ρθ^T."""
    # TODO: validate against Barfoot & Furgale (2014) eq. 55; A_1 uses
    # Σ_ρθ + Σ_θρ and the two only agree for symmetric Σ_2'.
    sigma_rt = corner(sigma_2, Corner.RHO_THETA)
    return _correction_matrix(corner(sigma_2, Corner.THETA_THETA), sigma_rt + sigma_rt.T)


def cross_term_matrix(sigma_1: np.ndarray, sigma_2: np.ndarray) -> np.ndarray:
    """
    B, the bilinear cross term between the two operands.

    Symmetric whenever both inputs are symmetric.
    """
    s1_tt = corner(sigma_1, Corner.THETA_THETA)
    s1_tr = corner(sigma_1, Corner.THETA_RHO)
    s1_rt = corner(sigma_1, Corner.RHO_THETA)
    s1_rr = corner(sigma_1, Corner.RHO_RHO)

    s2_tt = corner(sigma_2, Corner.THETA_THETA)
    s2_tr = corner(sigma_2, Corner.THETA_RHO)
    s2_rt = corner(sigma_2, Corner.RHO_THETA)
    s2_rr = corner(sigma_2, Corner.RHO_RHO)

    B_rho_rho = (
        bracket2(s1_tt, s2_rr)
        + bracket2(s1_tr, s2_rt)
        + bracket2(s1_rt, s2_tr)
        + bracket2(s1_rr, s2_tt)
    )
    B_rho_phi = bracket2(s1_tt, s2_tr) + bracket2(s1_rt, s2_tt)
    B_phi_phi = bracket2(s1_tt, s2_tt)

    return from_corners(
        theta_theta=B_phi_phi,
        theta_rho=B_rho_phi.T,
        rho_theta=B_rho_phi,
        rho_rho=B_rho_rho,
    )


def fourth_order_covariance(sigma_1: np.ndarray, sigma_2: np.ndarray) -> np.ndarray:
    """
    Fourth-order combination of two covariances in a common frame.

    Args:
        sigma_1: current covariance
        sigma_2: increment covariance already transported by Ad(T_1)
    """
    sigma_1 = np.asarray(sigma_1, dtype=float)
    sigma_2 = np.asarray(sigma_2, dtype=float)

    A_1 = correction_matrix_current(sigma_1)
    A_2 = correction_matrix_increment(sigma_2)
    B = cross_term_matrix(sigma_1, sigma_2)

    return (
        sigma_1
        + sigma_2
        + constants.FOURTH_ORDER_A_COEFF * (A_1 @ sigma_2 + sigma_2 @ A_1.T + A_2 @ sigma_1 + sigma_1 @ A_2.T)
        + constants.FOURTH_ORDER_B_COEFF * B
    )


def compound_4th_order(
    T_1: np.ndarray,
    cov_1: np.ndarray,
    T_2: np.ndarray,
    cov_2: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Fourth-order compounding of two uncorrelated uncertain poses.

    Pose update is identical to compound_2nd_order.

    Returns:
        (T_1 T_2, Σ')
    """
    sigma_2 = transport_covariance(T_1, cov_2)
    return se3_compose(T_1, T_2), fourth_order_covariance(cov_1, sigma_2)
