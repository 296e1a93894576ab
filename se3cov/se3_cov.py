"""
SE3Cov: an SE(3) pose paired with its tangent-space covariance.

The pose and the covariance are held side by side (composition, no
inheritance from a pose type). Covariance convention is xi = (theta, rho):

    Σ = E[xi xi^T] = [Σ_θθ, Σ_θρ]
                     [Σ_ρθ, Σ_ρρ]

Instances are immutable values. Every compounding method returns a new
SE3Cov and leaves both operands untouched, including mul() and `*`.

Preconditions (not checked): Σ symmetric PSD, rotation block orthonormal
with det +1. Long chains of ill-conditioned covariances may lose PSD-ness;
this is a limitation of the approximation and is not clamped. See
se3cov.backend.diagnostics for sanity checks.

Reference: Barfoot & Furgale (2014), "Associating Uncertainty with
Three-Dimensional Poses for Use in Estimation Problems".
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from se3cov.common import constants
from se3cov.common.geometry.se3_numpy import se3_identity, se3_to_string
from se3cov.backend.operators.adjoint_transport import compound_2nd_order
from se3cov.backend.operators.fourth_order import compound_4th_order


def _frozen(a: np.ndarray) -> np.ndarray:
    view = a.view()
    view.flags.writeable = False
    return view


class SE3Cov:
    """Uncertain SE(3) pose (4x4 pose + 6x6 covariance)."""

    __slots__ = ("_pose", "_covariance")

    def __init__(
        self,
        pose: Optional[np.ndarray | "SE3Cov"] = None,
        covariance: Optional[np.ndarray] = None,
    ):
        """
        Construct an uncertain pose.

        SE3Cov()                 identity pose, identity covariance
        SE3Cov(T, cov)           explicit pose and covariance
        SE3Cov(other)            copy of another SE3Cov
        """
        if isinstance(pose, SE3Cov):
            if covariance is not None:
                raise TypeError("Copy construction takes no covariance argument")
            covariance = pose._covariance
            pose = pose._pose

        if pose is None:
            pose = se3_identity()
        if covariance is None:
            covariance = np.eye(constants.TANGENT_DIM, dtype=float)

        self._pose = np.array(pose, dtype=float).reshape(4, 4)
        self._covariance = np.array(covariance, dtype=float).reshape(
            constants.TANGENT_DIM, constants.TANGENT_DIM
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def pose(self) -> np.ndarray:
        """Read-only view of the 4x4 pose."""
        return _frozen(self._pose)

    def covariance(self) -> np.ndarray:
        """Read-only view of the 6x6 covariance."""
        return _frozen(self._covariance)

    def T(self) -> np.ndarray:
        """Writable copy of the 4x4 pose."""
        return self._pose.copy()

    # -------------------------------------------------------------------------
    # Compounding
    # -------------------------------------------------------------------------

    def _increment(self, increment, covariance):
        if isinstance(increment, SE3Cov):
            if covariance is not None:
                raise TypeError("SE3Cov increment already carries a covariance")
            return increment._pose, increment._covariance
        if covariance is None:
            raise TypeError("Pose increment requires an increment covariance")
        return increment, covariance

    def compound_2nd_order(self, increment, covariance: Optional[np.ndarray] = None) -> "SE3Cov":
        """
        Second-order compounding with an independent increment.

        Args:
            increment: SE3Cov, or a 4x4 pose increment
            covariance: increment covariance, required iff increment is a pose

        Returns:
            New SE3Cov (T T_2, Σ + Ad(T) Σ_2 Ad(T)^T)
        """
        T_2, cov_2 = self._increment(increment, covariance)
        T, cov = compound_2nd_order(self._pose, self._covariance, T_2, cov_2)
        return SE3Cov(T, cov)

    def compound_4th_order(self, increment, covariance: Optional[np.ndarray] = None) -> "SE3Cov":
        """
        Fourth-order compounding with an independent increment.

        Same arguments as compound_2nd_order; adds the 1/12 A and 1/4 B
        correction terms to the covariance.
        """
        T_2, cov_2 = self._increment(increment, covariance)
        T, cov = compound_4th_order(self._pose, self._covariance, T_2, cov_2)
        return SE3Cov(T, cov)

    def compound(self, increment, covariance: Optional[np.ndarray] = None, order: str = constants.ORDER_2ND) -> "SE3Cov":
        """Compound with the named order ("2nd" or "4th")."""
        if order == constants.ORDER_2ND:
            return self.compound_2nd_order(increment, covariance)
        if order == constants.ORDER_4TH:
            return self.compound_4th_order(increment, covariance)
        raise ValueError(f"Unknown compounding order {order!r}, expected one of {constants.COMPOUNDING_ORDERS}")

    def mul(self, rhs: "SE3Cov") -> "SE3Cov":
        """Default compounding, same as compound_2nd_order."""
        return self.compound_2nd_order(rhs)

    def __mul__(self, rhs: "SE3Cov") -> "SE3Cov":
        if not isinstance(rhs, SE3Cov):
            return NotImplemented
        return self.compound_2nd_order(rhs)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Pose as text."""
        return se3_to_string(self._pose)

    def dump(self) -> str:
        """Pose and covariance as multi-line text."""
        with np.printoptions(precision=6, suppress=True, linewidth=200):
            cov_text = str(self._covariance)
        return "Pose:\n" + self.to_string() + "\nCovariance:\n" + cov_text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SE3Cov(pose={self._pose.tolist()!r}, covariance={self._covariance.tolist()!r})"
