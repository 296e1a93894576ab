"""
se3cov: Gaussian uncertainty compounding on SE(3).

Usage:
    from se3cov import SE3Cov

    x = SE3Cov(T_1, cov_1)
    y = x.compound_4th_order(T_2, cov_2)
    z = x * SE3Cov(T_2, cov_2)  # second order
"""

from se3cov.se3_cov import SE3Cov
from se3cov.common.geometry.lie_algebra import bracket1, bracket2, curly_wedge
from se3cov.backend.chain import compound_chain
from se3cov.backend.diagnostics import covariance_diagnostics

__version__ = "0.1.0"

__all__ = [
    "SE3Cov",
    "bracket1",
    "bracket2",
    "curly_wedge",
    "compound_chain",
    "covariance_diagnostics",
]
