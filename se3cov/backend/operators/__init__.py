"""
Compounding operators.

- adjoint_transport: second-order compounding (adjoint covariance transport)
- fourth_order: fourth-order compounding (BCH correction terms)
"""

from se3cov.backend.operators.adjoint_transport import (
    transport_covariance,
    compound_2nd_order,
)

from se3cov.backend.operators.fourth_order import (
    correction_matrix_current,
    correction_matrix_increment,
    cross_term_matrix,
    fourth_order_covariance,
    compound_4th_order,
)

__all__ = [
    # Second order
    "transport_covariance",
    "compound_2nd_order",
    # Fourth order
    "correction_matrix_current",
    "correction_matrix_increment",
    "cross_term_matrix",
    "fourth_order_covariance",
    "compound_4th_order",
]
