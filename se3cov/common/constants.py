"""
se3cov constants.

Coefficients of the fourth-order compounding formula are fixed by the
closed-form expansion (Barfoot & Furgale 2014, Sec. IV-B); tolerances are
diagnostic defaults only and never alter a compounding result.
"""

# =============================================================================
# Tangent layout, xi = (theta, rho)
# =============================================================================

TANGENT_DIM = 6

# =============================================================================
# Fourth-order compounding coefficients
# =============================================================================

FOURTH_ORDER_A_COEFF = 1.0 / 12.0  # multiplies the A_1/A_2 correction
FOURTH_ORDER_B_COEFF = 1.0 / 4.0   # multiplies the B cross term

# =============================================================================
# Compounding orders
# =============================================================================

ORDER_2ND = "2nd"
ORDER_4TH = "4th"
COMPOUNDING_ORDERS = (ORDER_2ND, ORDER_4TH)

# Approximation trigger names carried by OpReport
TRIGGER_LINEARIZATION = "linearization"
TRIGGER_TRUNCATED_BCH = "truncated_bch_series"

# =============================================================================
# Diagnostic defaults
# =============================================================================

SYMMETRY_TOL_DEFAULT = 1e-9  # max |Σ - Σ^T| accepted as symmetric
PSD_TOL_DEFAULT = 1e-12  # min eigenvalue >= -tol accepted as PSD
