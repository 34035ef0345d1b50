"""
Public API for plotting fitted objects.

    plot(obj, **options)         → dispatches on the type of obj
    plot_km(solution, ...)       → SurvivalChart

Each function validates its options, resolves the curve transformation
and its axis defaults, and hands a tidy table to the chart builder.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import singledispatch
from numbers import Real

import numpy as np

from pytte.core.exceptions import ValidationError
from pytte.plotting.chart import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LEGEND_POSITIONS,
    SurvivalChart,
    build_chart,
)
from pytte.plotting.ticks import pretty
from pytte.plotting.tidy import transform_estimates
from pytte.plotting.transforms import resolve_transform
from pytte.survival.solution import KMSolution


@singledispatch
def plot(obj, **options):
    """Plot a fitted object.

    ``KMSolution`` renders through :func:`plot_km`. Other objects fall
    back to their own ``plot()`` method when they have one.

    Raises
    ------
    ValidationError
        If no plot is available for the type of ``obj``.
    """
    own_plot = getattr(obj, "plot", None)
    if callable(own_plot):
        return own_plot(**options)
    raise ValidationError(
        f"No plot method available for objects of type {type(obj).__name__}"
    )


@plot.register
def _plot_km_solution(obj: KMSolution, **options) -> SurvivalChart:
    return plot_km(obj, **options)


def plot_km(
    solution: KMSolution,
    y_label: str | None = None,
    x_label: str | None = None,
    x_units: str | None = None,
    x_ticks=None,
    y_ticks=None,
    fun="surv",
    legend_position="right",
    *,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> SurvivalChart:
    """Plot Kaplan-Meier curves, optionally transformed.

    Parameters
    ----------
    solution : KMSolution
        Result of :func:`pytte.km_est`.
    y_label : str or None
        Y-axis label. Defaults to the label of the ``fun`` transform;
        required when ``fun`` is a function.
    x_label : str or None
        X-axis label. Defaults to the PARAM of the fit, else "time".
    x_units : str or None
        Appended to the default x label as "label (units)".
    x_ticks, y_ticks : array-like or None
        Axis breaks; also set the axis limits. Proposed when None.
    fun : str, Transform or callable
        Transformation of S(t):

        - "surv": survival probability
        - "log": log(S)
        - "event": failure probability, 1 - S
        - "cloglog": log(-log(S))
        - "pct": 100 S
        - "logpct": log(100 S)
        - "cumhaz": cumulative hazard, -log(S)
    legend_position : str or (x, y)
        One of "top", "bottom", "left", "right", "none", or relative
        coordinates inside the plot area.
    width, height : int
        Plot area size in pixels.

    Returns
    -------
    SurvivalChart

    Examples
    --------
    >>> fit = km_est(adtte, strata="TRTP")
    >>> plot_km(fit, fun="pct")
    >>> plot_km(fit, fun="cloglog", legend_position="bottom")
    """
    if not isinstance(solution, KMSolution):
        raise ValidationError(
            f"solution: expected a KMSolution, got {type(solution).__name__}"
        )
    _check_legend_position(legend_position)

    transform = resolve_transform(fun, y_label)
    curves = transform_estimates(solution.to_frame(), transform)

    if x_label is None:
        x_label = solution.param if solution.param is not None else "time"
        if x_units is not None:
            x_label = f"{x_label} ({x_units})"

    if x_ticks is None:
        x_ticks = pretty(solution.time, 10)
    if y_ticks is None:
        y_ticks = transform.y_ticks(curves.ymin, curves.ymax)

    return build_chart(
        curves.frame,
        strata=list(solution.strata),
        x_label=x_label,
        y_label=transform.y_label,
        x_ticks=np.asarray(x_ticks, dtype=np.float64),
        y_ticks=np.asarray(y_ticks, dtype=np.float64),
        legend_position=legend_position,
        with_ribbons="est_lower" in curves.columns,
        width=width,
        height=height,
    )


def _check_legend_position(position) -> None:
    if isinstance(position, str):
        if position not in LEGEND_POSITIONS:
            raise ValidationError(
                f"Invalid legend position given: {position!r}. "
                f"Expected one of {', '.join(LEGEND_POSITIONS)} or (x, y) coordinates"
            )
        return

    is_numeric = (
        isinstance(position, (Sequence, np.ndarray))
        and all(isinstance(v, Real) and not isinstance(v, bool) for v in position)
    )
    if not is_numeric:
        raise ValidationError(
            f"Invalid legend position given: {position!r}"
        )
    if len(position) != 2:
        raise ValidationError(
            f"Invalid legend position coordinates given: expected 2 values, "
            f"got {len(position)}"
        )
