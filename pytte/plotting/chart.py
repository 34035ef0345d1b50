"""
Altair chart construction for survival curves.

The chart is a layer of confidence ribbons and step lines over a tidy
table with columns time, est, est_lower, est_upper and strata.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import numpy as np
import pandas as pd
from numpy.typing import NDArray

LEGEND_POSITIONS = ("top", "bottom", "left", "right", "none")

# NEJM palette (ggsci "default" NEJM scheme)
NEJM_PALETTE = (
    "#BC3C29", "#0072B5", "#E18727", "#20854E",
    "#7876B1", "#6F99AD", "#FFDC91", "#EE4C97",
)

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400


class SurvivalChart(alt.LayerChart):
    """A LayerChart holding survival curves.

    Behaves and serializes exactly like ``alt.LayerChart``; the subclass
    only marks the chart as a survival plot.
    """


def build_chart(
    frame: pd.DataFrame,
    *,
    strata: Sequence[str],
    x_label: str,
    y_label: str,
    x_ticks: NDArray,
    y_ticks: NDArray,
    legend_position,
    with_ribbons: bool,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> SurvivalChart:
    """Render transformed curves as a step chart, one line per stratum."""
    palette = alt.Scale(domain=list(strata), range=list(NEJM_PALETTE))

    base = alt.Chart().encode(
        x=alt.X("time:Q", title=x_label, **_axis_options(x_ticks)),
    )

    y_options = dict(title=y_label, **_axis_options(y_ticks, label_format=".2f"))

    line = base.mark_line(interpolate="step-after", clip=True).encode(
        y=alt.Y("est:Q", **y_options),
        color=alt.Color(
            "strata:N",
            title="strata",
            scale=palette,
            legend=_legend(legend_position, width, height),
        ),
    )

    layers = [line]
    if with_ribbons:
        ribbon = base.mark_area(
            interpolate="step-after", opacity=0.2, clip=True,
        ).encode(
            y=alt.Y("est_lower:Q", **y_options),
            y2=alt.Y2("est_upper:Q"),
            fill=alt.Fill("strata:N", scale=palette, legend=None),
        )
        layers.insert(0, ribbon)

    chart = SurvivalChart(data=frame, layer=layers).properties(
        width=width, height=height,
    )
    return _theme_bw(chart)


def _axis_options(ticks: NDArray, label_format: str | None = None) -> dict:
    """Breaks, labels and limits for one positional channel."""
    axis = {} if label_format is None else {"format": label_format}
    ticks = np.asarray(ticks, dtype=np.float64)
    if ticks.size == 0:
        return {"axis": alt.Axis(**axis)}
    values = [float(v) for v in ticks]
    return {
        "axis": alt.Axis(values=values, **axis),
        "scale": alt.Scale(domain=[min(values), max(values)], nice=False, zero=False),
    }


def _legend(position, width: int, height: int) -> alt.Legend | None:
    if isinstance(position, str):
        if position == "none":
            return None
        return alt.Legend(orient=position)
    # relative (x, y) inside the plot area, origin bottom-left
    x, y = (float(v) for v in position)
    return alt.Legend(orient="none", legendX=x * width, legendY=(1 - y) * height)


def _theme_bw(chart: SurvivalChart) -> SurvivalChart:
    """White background, light grid and a black panel border."""
    return (
        chart.configure(background="white")
        .configure_view(stroke="black", strokeWidth=1)
        .configure_axis(grid=True, gridColor="#EBEBEB", domainColor="black", tickColor="black")
        .configure_legend(symbolType="stroke")
    )
