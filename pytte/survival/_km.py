"""
Kaplan-Meier curves through lifelines.

lifelines does the estimation: KaplanMeierFitter for S(t) and its
pointwise confidence interval, NelsonAalenFitter for the cumulative
hazard. This module only lines their outputs up on the survfit time grid
(times with at least one event or censoring) and anchors each curve at 0.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from lifelines import KaplanMeierFitter, NelsonAalenFitter
from numpy.typing import NDArray

from pytte.core.compute.timing import Timer


def fit_stratum(
    durations: NDArray,
    events: NDArray,
    *,
    alpha: float,
    fit_options: dict[str, Any],
    timer: Timer,
) -> dict[str, NDArray]:
    """Fit one stratum and return its anchored curve.

    Parameters
    ----------
    durations : NDArray
        Time to event or censoring.
    events : NDArray
        Event indicator (1=event, 0=censored).
    alpha : float
        1 - confidence level.
    fit_options : dict
        Passed to ``KaplanMeierFitter.fit`` and ``NelsonAalenFitter.fit``;
        a ``timeline`` is extended with the observed times.
    timer : Timer
        Receives 'kaplan_meier' and 'nelson_aalen' sections.

    Returns
    -------
    dict
        Arrays keyed time, survival, n_risk, n_events, n_censored,
        ci_lower, ci_upper, cumhaz. Row 0 is the time-zero anchor.
    """
    fit_options = _with_observed_times(fit_options, durations)

    kmf = KaplanMeierFitter(alpha=alpha)
    naf = NelsonAalenFitter(alpha=alpha, nelson_aalen_smoothing=False)

    with timer.section("kaplan_meier"):
        kmf.fit(durations, event_observed=events, **fit_options)
    with timer.section("nelson_aalen"):
        naf.fit(durations, event_observed=events, **fit_options)

    table = kmf.event_table
    at_times = table[table["removed"] > 0]
    times = at_times.index.to_numpy(dtype=np.float64)

    ci = kmf.confidence_interval_survival_function_

    curve = {
        "time": times,
        "survival": _step_values(kmf.survival_function_.iloc[:, 0], times),
        "n_risk": at_times["at_risk"].to_numpy(dtype=np.float64),
        "n_events": at_times["observed"].to_numpy(dtype=np.float64),
        "n_censored": at_times["censored"].to_numpy(dtype=np.float64),
        "ci_lower": _step_values(ci.iloc[:, 0], times),
        "ci_upper": _step_values(ci.iloc[:, 1], times),
        "cumhaz": _step_values(naf.cumulative_hazard_.iloc[:, 0], times),
    }
    initial_at_risk = float(table["at_risk"].iloc[0]) if len(table) else 0.0
    return _anchor_at_zero(curve, initial_at_risk)


def _with_observed_times(fit_options: dict[str, Any], durations: NDArray) -> dict[str, Any]:
    """Extend a caller ``timeline`` with every observed time.

    lifelines evaluates the fitted functions on the timeline only, and
    the curves are read back at the event and censoring times.
    """
    timeline = fit_options.get("timeline")
    if timeline is None:
        return fit_options
    options = dict(fit_options)
    options["timeline"] = np.union1d(
        np.asarray(timeline, dtype=np.float64).ravel(), durations,
    )
    return options


def _anchor_at_zero(curve: dict[str, NDArray], n_risk: float) -> dict[str, NDArray]:
    """Prepend the (0, S=1) point every curve starts from."""
    start = {
        "time": 0.0,
        "survival": 1.0,
        "n_risk": n_risk,
        "n_events": 0.0,
        "n_censored": 0.0,
        "ci_lower": 1.0,
        "ci_upper": 1.0,
        "cumhaz": 0.0,
    }
    return {
        key: np.concatenate([[start[key]], values])
        for key, values in curve.items()
    }


def _step_values(series: pd.Series, times: NDArray) -> NDArray:
    """Right-continuous step function values of ``series`` at ``times``."""
    if len(times) == 0:
        return np.empty(0, dtype=np.float64)
    stepped = series.reindex(times, method="ffill")
    return stepped.to_numpy(dtype=np.float64)

