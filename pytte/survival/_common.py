"""
Parameter payloads for survival analysis results.

Each dataclass is a frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from numpy.typing import NDArray


@dataclass(frozen=True)
class KMParams:
    """Kaplan-Meier survival curves, all strata stacked.

    Rows of every array line up; ``strata`` gives how many consecutive
    rows belong to each stratum, in order.
    """

    time: NDArray                # (m,) 0 anchor, then event/censoring times
    survival: NDArray            # (m,) S(t)
    n_risk: NDArray              # (m,) number at risk just before t
    n_events: NDArray            # (m,) events at t
    n_censored: NDArray          # (m,) censored at t
    ci_lower: NDArray            # (m,) lower CI for S(t)
    ci_upper: NDArray            # (m,) upper CI for S(t)
    cumhaz: NDArray              # (m,) Nelson-Aalen H(t)
    strata_labels: NDArray       # (m,) stratum label of each row
    strata: dict[str, int]       # label -> rows in that stratum's curve
    conf_level: float            # confidence level (e.g. 0.95)
    n_observations: int          # analysed rows
    n_events_total: int          # total events
    metadata: dict[str, str] = field(default_factory=dict)  # PARAM / PARAMCD
