"""
Apply a curve transformation to a tidy survival table.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np
import pandas as pd

from pytte.plotting.transforms import ResolvedTransform, Transform

INFINITE_ROWS_WARNING = "NAs introduced by y-axis transformation."

_TRANSFORMED = {"surv": "est", "lower": "est_lower", "upper": "est_upper"}


@dataclass(frozen=True)
class TransformedCurves:
    frame: pd.DataFrame
    columns: tuple[str, ...]   # transformed columns present in frame
    ymin: float
    ymax: float
    warnings: tuple[str, ...]


def transform_estimates(
    frame: pd.DataFrame,
    transform: ResolvedTransform,
) -> TransformedCurves:
    """Add est, est_lower and est_upper columns to ``frame``.

    The estimate is always transformed; the bounds only when both lower
    and upper are present. A -inf produced by a log transform of S(t) = 0
    is replaced by the smallest finite value of the same column. Under
    cloglog, rows whose estimate is still infinite are dropped with a
    warning.

    Parameters
    ----------
    frame : pd.DataFrame
        Tidy table from ``KMSolution.to_frame()``.
    transform : ResolvedTransform

    Returns
    -------
    TransformedCurves
    """
    out = frame.copy()
    sources = ["surv"]
    if "lower" in out.columns and "upper" in out.columns:
        sources += ["lower", "upper"]

    columns = []
    for source in sources:
        target = _TRANSFORMED[source]
        out[target] = _replace_neg_inf(transform(out[source].to_numpy()))
        columns.append(target)

    finite = out[columns].to_numpy(dtype=np.float64)
    finite = finite[np.isfinite(finite)]
    ymin = float(finite.min()) if finite.size else np.nan
    ymax = float(finite.max()) if finite.size else np.nan

    issues = []
    if transform.name is Transform.CLOGLOG:
        infinite = np.isinf(out["est"].to_numpy(dtype=np.float64))
        if infinite.any():
            warnings.warn(INFINITE_ROWS_WARNING, UserWarning, stacklevel=3)
            issues.append(INFINITE_ROWS_WARNING)
            out = out.loc[~infinite].reset_index(drop=True)

    return TransformedCurves(
        frame=out,
        columns=tuple(columns),
        ymin=ymin,
        ymax=ymax,
        warnings=tuple(issues),
    )


def _replace_neg_inf(values: np.ndarray) -> np.ndarray:
    """Replace -inf by the column's minimum finite value, if it has one."""
    values = values.copy()
    neg_inf = np.isneginf(values)
    finite = values[np.isfinite(values)]
    if neg_inf.any() and finite.size:
        values[neg_inf] = finite.min()
    return values
