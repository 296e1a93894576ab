"""Pydantic parameter models for se3cov."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from se3cov.common import constants


class CompoundingParams(BaseModel):
    """Parameters for chained compounding and its diagnostics."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    order: Literal["2nd", "4th"] = constants.ORDER_2ND
    symmetry_tol: float = Field(constants.SYMMETRY_TOL_DEFAULT, gt=0.0)
    psd_tol: float = Field(constants.PSD_TOL_DEFAULT, ge=0.0)
    emit_report: bool = True
