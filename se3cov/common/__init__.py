"""
Common package for se3cov.

Shared constants, parameter models and audit reports.

Subpackages:
- geometry/: SE(3) primitives, block access, Lie-algebra operators
"""

from se3cov.common.op_report import OpReport
from se3cov.common import constants

__all__ = [
    "OpReport",
    "constants",
]
