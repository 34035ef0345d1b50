"""
Solution wrapper for Kaplan-Meier results.

KMSolution wraps a Result[KMParams] and exposes survfit-style properties,
a tidy table for plotting and an R-style summary().
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from pytte.core.result import Result
from pytte.survival._common import KMParams
from pytte.survival.design import PARAM, PARAMCD


class KMSolution:
    """Fitted Kaplan-Meier curves (one per stratum).

    Properties mirror R's survfit() output, with every curve starting at
    time 0.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[KMParams]) -> None:
        self._result = _result

    # -- Properties delegating to KMParams --

    @property
    def time(self):
        """Time points: 0, then every event or censoring time, per stratum."""
        return self._result.params.time

    @property
    def survival(self):
        """S(t) at each time point."""
        return self._result.params.survival

    @property
    def n_risk(self):
        """Number at risk just before each time point."""
        return self._result.params.n_risk

    @property
    def n_events(self):
        return self._result.params.n_events

    @property
    def n_censored(self):
        return self._result.params.n_censored

    @property
    def ci_lower(self):
        """Lower confidence bound for S(t)."""
        return self._result.params.ci_lower

    @property
    def ci_upper(self):
        """Upper confidence bound for S(t)."""
        return self._result.params.ci_upper

    @property
    def cumhaz(self):
        """Nelson-Aalen cumulative hazard."""
        return self._result.params.cumhaz

    @property
    def strata(self) -> dict[str, int]:
        """Stratum label -> number of rows in its curve, in row order."""
        return dict(self._result.params.strata)

    @property
    def strata_labels(self):
        """Stratum label of each row."""
        return self._result.params.strata_labels

    @property
    def param(self) -> str | None:
        """PARAM of the analysed rows, if known."""
        return self._result.params.metadata.get(PARAM)

    @property
    def paramcd(self) -> str | None:
        """PARAMCD of the analysed rows, if known."""
        return self._result.params.metadata.get(PARAMCD)

    @property
    def metadata(self) -> dict[str, str]:
        return dict(self._result.params.metadata)

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_events_total(self) -> int:
        return self._result.params.n_events_total

    @property
    def formula(self) -> str:
        return self._result.info["formula"]

    @property
    def call(self) -> dict:
        """Resolved formula and options the fit was produced with."""
        return dict(self._result.info["call"])

    @property
    def median_survival(self) -> dict[str, float | None]:
        """Median survival per stratum (smallest t where S(t) <= 0.5)."""
        medians = {}
        for label in self.strata:
            mask = self.strata_labels == label
            time, surv = self.time[mask], self.survival[mask]
            idx = surv <= 0.5
            medians[label] = float(time[idx][0]) if idx.any() else None
        return medians

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    def to_frame(self) -> pd.DataFrame:
        """Tidy table with one row per time point and stratum.

        Columns: time, n_risk, n_event, n_censor, surv, lower, upper,
        cumhaz, strata.
        """
        return pd.DataFrame({
            "time": self.time,
            "n_risk": self.n_risk,
            "n_event": self.n_events,
            "n_censor": self.n_censored,
            "surv": self.survival,
            "lower": self.ci_lower,
            "upper": self.ci_upper,
            "cumhaz": self.cumhaz,
            "strata": pd.Categorical(
                self.strata_labels, categories=list(self.strata)
            ),
        })

    def summary(self) -> str:
        """R-style summary of the Kaplan-Meier fit."""
        lines = []
        lines.append(f"Call: km_est({self.formula})")
        lines.append("")
        lines.append(
            f"  n={self.n_observations}, "
            f"events={self.n_events_total}"
        )
        if self.param is not None:
            lines.append(f"  PARAM: {self.param}")

        ci_pct = int(round(self.conf_level * 100))
        medians = self.median_survival
        for label, m in self.strata.items():
            lines.append("")
            median = medians[label]
            median_str = f"{median:.4g}" if median is not None else "NA"
            lines.append(f"  {label}: median survival = {median_str}")
            lines.append(
                f"  {'time':>8s}  {'n.risk':>8s}  {'n.event':>8s}  "
                f"{'survival':>10s}  {f'lower {ci_pct}%':>10s}  "
                f"{f'upper {ci_pct}%':>10s}"
            )

            rows = np.flatnonzero(self.strata_labels == label)
            # Show up to 20 rows per stratum
            for i in rows[:20]:
                lines.append(
                    f"  {self.time[i]:8.4g}  {self.n_risk[i]:8.0f}  "
                    f"{self.n_events[i]:8.0f}  {self.survival[i]:10.6f}  "
                    f"{self.ci_lower[i]:10.6f}  {self.ci_upper[i]:10.6f}"
                )
            if m > 20:
                lines.append(f"  ... ({m - 20} more rows)")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"KMSolution(n={self.n_observations}, "
            f"events={self.n_events_total}, "
            f"strata={list(self.strata)})"
        )
