"""
PyTTE: Kaplan-Meier analysis and plotting for ADaM time-to-event data.

Fits survival curves on BDS time-to-event tables (e.g. ADTTE) with
lifelines and renders them, optionally transformed, with altair.

Submodules:
    survival: km_est() on AVAL/CNSR with optional strata
    plotting: plot() / plot_km() with named curve transformations
"""

__version__ = "0.1.0"

from pytte.core.exceptions import (
    PyTTEError,
    ValidationError,
    DataNotFoundError,
    MissingColumnError,
    ColumnTypeError,
)
from pytte.survival import km_est, KMSolution
from pytte.plotting import plot, plot_km, SurvivalChart, Transform

__all__ = [
    "__version__",
    "km_est",
    "KMSolution",
    "plot",
    "plot_km",
    "SurvivalChart",
    "Transform",
    "PyTTEError",
    "ValidationError",
    "DataNotFoundError",
    "MissingColumnError",
    "ColumnTypeError",
]
