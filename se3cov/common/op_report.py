"""
Operator Report for audit compliance.

Every compounding operator that approximates emits an OpReport that:
1. Declares the family mapping (family_in → family_out)
2. Lists all approximation triggers (linearization, series truncation)
3. States whether the result is closed-form
4. Carries diagnostic metrics of the produced covariance
"""

import json
import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class OpReport:
    """
    Audit-compliant operation report.

    Attributes:
        name: Operator name (e.g., "CompoundChainSE3")
        exact: True if operation is exact (no approximation)
        approximation_triggers: List of what caused approximation
        family_in: Input distribution family
        family_out: Output distribution family
        closed_form: True if no iterative solver was used
        solver_used: Name of solver if iterative
        metrics: Additional metrics for debugging
        notes: Human-readable explanation
        timestamp: When the report was generated
    """
    name: str
    exact: bool
    approximation_triggers: list[str] = field(default_factory=list)
    family_in: str = ""
    family_out: str = ""
    closed_form: bool = False
    solver_used: Optional[str] = None
    metrics: dict = field(default_factory=dict)
    notes: Optional[str] = None
    timestamp: float = field(default_factory=time.time)

    def validate(self) -> None:
        """
        Validate the report satisfies audit requirements.

        Raises ValueError if validation fails.
        """
        # Exact operations cannot have approximation triggers
        if self.exact and self.approximation_triggers:
            raise ValueError("Exact op cannot declare approximation triggers.")

        # Approximations must say what they approximate
        if not self.exact and not self.approximation_triggers:
            raise ValueError("Approximate op must declare at least one approximation trigger.")

        # Closed-form ops should not have iterative solver
        if self.closed_form and self.solver_used is not None:
            raise ValueError("Closed-form op must not list a solver.")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "exact": self.exact,
            "approximation_triggers": list(self.approximation_triggers),
            "family_in": self.family_in,
            "family_out": self.family_out,
            "closed_form": self.closed_form,
            "solver_used": self.solver_used,
            "metrics": dict(self.metrics),
            "notes": self.notes,
            "timestamp": self.timestamp,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)
