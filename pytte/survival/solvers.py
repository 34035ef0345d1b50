"""
Public API for survival estimation.

    km_est(data, strata) → KMSolution

Validates the ADaM table, creates a TTEDesign, delegates each stratum to
lifelines and wraps the stacked curves in a Solution.
"""

from __future__ import annotations

import warnings

import numpy as np

from pytte.core.compute.timing import Timer
from pytte.core.exceptions import ValidationError
from pytte.core.result import Result
from pytte.core.validation import check_in_open_interval
from pytte.survival._common import KMParams
from pytte.survival._km import fit_stratum
from pytte.survival.design import AVAL, CNSR, TTEDesign
from pytte.survival.solution import KMSolution

# Options holding one value per row; given by column name so they follow
# the row filtering and the split into strata.
ROW_OPTIONS = ("weights", "entry")

_CURVE_KEYS = (
    "time", "survival", "n_risk", "n_events", "n_censored",
    "ci_lower", "ci_upper", "cumhaz",
)


def km_est(
    data,
    strata=None,
    *,
    conf_level: float = 0.95,
    **fit_options,
) -> KMSolution:
    """Kaplan-Meier analysis of an ADaM BDS time-to-event table.

    Fits ``Surv(AVAL, 1-CNSR) ~ strata``: AVAL is the time to event or
    censoring and CNSR the ADaM censoring flag (1 = censored), so the
    event indicator is ``1 - CNSR``. The data is expected to be filtered
    on one PARAM/PARAMCD; PARAM/PARAMCD may also be used as strata.

    Estimation is done by lifelines:

    - S(t) by ``KaplanMeierFitter``, with its pointwise confidence
      interval at ``conf_level``;
    - the cumulative hazard by ``NelsonAalenFitter`` without tie
      smoothing, ``H(t) = cumsum(d / n)``.

    Each curve is anchored at time 0 (S = 1).

    Parameters
    ----------
    data : pd.DataFrame
        Time-to-event table, e.g. ADTTE. Rows with missing AVAL or CNSR
        (and, when stratifying, missing strata values) are removed.
    strata : str, sequence of str or None
        Stratification columns, e.g. "TRTP". None gives an overall
        analysis with a single "Overall" stratum.
    conf_level : float
        Confidence level for the pointwise interval (default 0.95).
    **fit_options
        Passed verbatim to lifelines' ``fit``. ``weights`` and ``entry``
        name a column of ``data``.

    Returns
    -------
    KMSolution

    Examples
    --------
    >>> km_est(adtte)
    >>> km_est(adtte, strata="TRTP")
    >>> km_est(adtte, strata=["TRTP", "SEX"])
    >>> km_est(adtte[adtte["SEX"] == "F"], conf_level=0.9)
    """
    design = TTEDesign.from_adam(data, strata)

    check_in_open_interval(conf_level, 0.0, 1.0, "conf_level")

    if "alpha" in fit_options:
        raise ValidationError(
            "alpha: set the interval through conf_level instead"
        )

    for key in ROW_OPTIONS:
        if key in fit_options and fit_options[key] is not None:
            column = fit_options[key]
            if not isinstance(column, str) or column not in design.data.columns:
                raise ValidationError(
                    f"{key}: expected the name of a column in data, got {column!r}"
                )

    metadata, warnings_list = design.parameter_metadata()
    for message in warnings_list:
        warnings.warn(message, UserWarning, stacklevel=2)

    timer = Timer()
    timer.start()

    curves = {}
    for label, rows in design.groups():
        options = _stratum_options(rows, fit_options)
        curves[label] = fit_stratum(
            rows[AVAL].to_numpy(dtype=np.float64),
            1.0 - rows[CNSR].to_numpy(dtype=np.float64),
            alpha=1.0 - conf_level,
            fit_options=options,
            timer=timer,
        )

    timer.stop()

    stacked = {
        key: np.concatenate([curve[key] for curve in curves.values()])
        for key in _CURVE_KEYS
    }
    strata_counts = {label: len(curve["time"]) for label, curve in curves.items()}
    strata_labels = np.repeat(
        np.array(list(strata_counts), dtype=object),
        list(strata_counts.values()),
    )

    params = KMParams(
        **stacked,
        strata_labels=strata_labels,
        strata=strata_counts,
        conf_level=conf_level,
        n_observations=design.n,
        n_events_total=design.n_events,
        metadata=metadata,
    )

    call = {
        "formula": design.formula,
        "strata": list(design.strata) or None,
        "conf_level": conf_level,
        **fit_options,
    }

    result = Result(
        params=params,
        info={
            "method": "Kaplan-Meier",
            "formula": design.formula,
            "call": call,
            "n_dropped": design.n_dropped,
        },
        timing=timer.result(),
        backend_name="lifelines",
        warnings=tuple(warnings_list),
    )

    return KMSolution(_result=result)


def _stratum_options(rows, fit_options: dict) -> dict:
    """Resolve row options to the stratum's column values."""
    options = dict(fit_options)
    for key in ROW_OPTIONS:
        if isinstance(options.get(key), str):
            options[key] = rows[options[key]].to_numpy(dtype=np.float64)
    return options
