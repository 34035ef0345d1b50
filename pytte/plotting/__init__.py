"""
Plotting of fitted survival curves with altair.

Public API:
    plot(obj, **options) -> chart (type dispatched)
    plot_km(solution, ...) -> SurvivalChart
    Transform: curve transformations accepted by ``fun``
"""

from pytte.plotting.chart import LEGEND_POSITIONS, NEJM_PALETTE, SurvivalChart
from pytte.plotting.plot import plot, plot_km
from pytte.plotting.ticks import pretty
from pytte.plotting.transforms import TRANSFORMS, Transform, resolve_transform

__all__ = [
    "plot",
    "plot_km",
    "SurvivalChart",
    "Transform",
    "TRANSFORMS",
    "resolve_transform",
    "pretty",
    "LEGEND_POSITIONS",
    "NEJM_PALETTE",
]
