"""
Covariance sanity diagnostics.

Read-only checks that a caller can run on a compounding result. Nothing
here projects, symmetrizes or clamps; a failing check is reported, not
fixed.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from se3cov.common import constants


def covariance_diagnostics(
    cov: np.ndarray,
    symmetry_tol: float = constants.SYMMETRY_TOL_DEFAULT,
    psd_tol: float = constants.PSD_TOL_DEFAULT,
) -> Dict[str, Any]:
    """
    Summarize symmetry and definiteness of a covariance.

    Args:
        cov: square covariance matrix
        symmetry_tol: largest |Σ - Σ^T| entry still treated as symmetric
        psd_tol: smallest eigenvalue >= -psd_tol still treated as PSD

    Returns:
        Dict with symmetry_error, min_eigenvalue, trace, is_finite,
        is_symmetric, is_psd. Non-finite input reports NaN for the first two
        and fails every check.
    """
    cov = np.asarray(cov, dtype=float)
    trace = float(np.trace(cov))

    # inf/nan entries break eigvalsh; an overflowed covariance fails both checks
    if not np.all(np.isfinite(cov)):
        return {
            "symmetry_error": float("nan"),
            "min_eigenvalue": float("nan"),
            "trace": trace,
            "is_finite": False,
            "is_symmetric": False,
            "is_psd": False,
        }

    symmetry_error = float(np.max(np.abs(cov - cov.T)))
    # Eigenvalues of the symmetric part; the skew part has no effect on x^T Σ x
    min_eigenvalue = float(np.min(np.linalg.eigvalsh(0.5 * (cov + cov.T))))

    return {
        "symmetry_error": symmetry_error,
        "min_eigenvalue": min_eigenvalue,
        "trace": trace,
        "is_finite": True,
        "is_symmetric": symmetry_error <= symmetry_tol,
        "is_psd": min_eigenvalue >= -psd_tol,
    }
