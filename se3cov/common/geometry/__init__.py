"""
Geometry package for se3cov.

Modules:
- se3_numpy: SE(3) primitives on 4x4 homogeneous matrices (NumPy)
- blocks: 3x3 corner access for 6x6 tangent-space matrices
- lie_algebra: bracket operators and curly-wedge

Usage:
    from se3cov.common.geometry import (
        se3_compose,
        se3_adjoint,
        skew,
        bracket1,
        bracket2,
        curly_wedge,
    )
"""

from __future__ import annotations

from se3cov.common.geometry.se3_numpy import (
    # Constants
    ROTATION_EPSILON,
    # SO(3) operations
    skew,
    unskew,
    rotvec_to_rotmat,
    # SE(3) operations
    se3_identity,
    se3_from_rt,
    se3_rotation,
    se3_translation,
    se3_compose,
    se3_inverse,
    se3_adjoint,
    se3_equal,
    se3_to_string,
)

from se3cov.common.geometry.blocks import Corner, corner, from_corners

from se3cov.common.geometry.lie_algebra import bracket1, bracket2, curly_wedge

__all__ = [
    # Constants
    "ROTATION_EPSILON",
    # SO(3) operations
    "skew",
    "unskew",
    "rotvec_to_rotmat",
    # SE(3) operations
    "se3_identity",
    "se3_from_rt",
    "se3_rotation",
    "se3_translation",
    "se3_compose",
    "se3_inverse",
    "se3_adjoint",
    "se3_equal",
    "se3_to_string",
    # Block access
    "Corner",
    "corner",
    "from_corners",
    # Lie algebra
    "bracket1",
    "bracket2",
    "curly_wedge",
]
