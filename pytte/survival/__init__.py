"""
Survival estimation for ADaM time-to-event tables.

Public API:
    km_est(data, strata=None, ...) -> KMSolution
"""

from pytte.survival.design import (
    AVAL,
    CNSR,
    OVERALL_LABEL,
    PARAM,
    PARAMCD,
    TTEDesign,
)
from pytte.survival.solution import KMSolution
from pytte.survival.solvers import km_est

__all__ = [
    "km_est",
    "KMSolution",
    "TTEDesign",
    "AVAL",
    "CNSR",
    "PARAM",
    "PARAMCD",
    "OVERALL_LABEL",
]
