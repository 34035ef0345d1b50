"""
Named transformations of a survival curve.

Each Transform maps to the function applied to S(t), the default y-axis
label and the rule proposing default y ticks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pytte.core.exceptions import ValidationError
from pytte.plotting.ticks import pretty

TickRule = Callable[[float, float], NDArray]


class Transform(str, Enum):
    """Curve transformations accepted by ``fun``."""

    SURV = "surv"
    LOG = "log"
    EVENT = "event"
    CLOGLOG = "cloglog"
    PCT = "pct"
    LOGPCT = "logpct"
    CUMHAZ = "cumhaz"


@dataclass(frozen=True)
class TransformSpec:
    func: Callable[[NDArray], NDArray]
    y_label: str
    y_ticks: TickRule


def _fixed(low: float, high: float) -> TickRule:
    return lambda ymin, ymax: pretty([low, high], 5)


def data_range_ticks(ymin: float, ymax: float) -> NDArray:
    """Ticks over the observed range, rounded to whole numbers."""
    return pretty(np.round([ymin, ymax]), 5)


TRANSFORMS: dict[Transform, TransformSpec] = {
    Transform.SURV: TransformSpec(
        lambda y: y, "Survival probability", _fixed(0, 1)),
    Transform.LOG: TransformSpec(
        np.log, "log(Survival probability)", data_range_ticks),
    Transform.EVENT: TransformSpec(
        lambda y: 1 - y, "Failure probability", _fixed(0, 1)),
    Transform.CLOGLOG: TransformSpec(
        lambda y: np.log(-np.log(y)), "log(-log(Survival probability))", data_range_ticks),
    Transform.PCT: TransformSpec(
        lambda y: y * 100, "Survival probability (%)", _fixed(0, 100)),
    Transform.LOGPCT: TransformSpec(
        lambda y: np.log(y * 100), "log(Survival probability (%))", _fixed(0, 5)),
    # MLE of the cumulative hazard, H(t) = -log(S(t))
    Transform.CUMHAZ: TransformSpec(
        lambda y: -np.log(y), "cumulative hazard", data_range_ticks),
}


@dataclass(frozen=True)
class ResolvedTransform:
    func: Callable[[NDArray], NDArray]
    y_label: str
    y_ticks: TickRule
    name: Transform | None  # None for a caller-supplied function

    def __call__(self, values) -> NDArray:
        y = np.asarray(values, dtype=np.float64)
        # log(0) -> -inf is handled by the caller
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.asarray(self.func(y), dtype=np.float64)


def resolve_transform(fun, y_label: str | None = None) -> ResolvedTransform:
    """Look up ``fun`` and fill in the y label.

    Parameters
    ----------
    fun : str, Transform or callable
        A Transform name, or a function applied elementwise to S(t).
    y_label : str or None
        Overrides the default label. Required when ``fun`` is callable.

    Raises
    ------
    ValidationError
        Unrecognized name, callable without y_label, or any other type.
    """
    if isinstance(fun, str):
        try:
            name = Transform(fun)
        except ValueError:
            valid = ", ".join(t.value for t in Transform)
            raise ValidationError(
                f"Unrecognized fun argument: {fun!r}. Expected one of {valid}"
            ) from None
        spec = TRANSFORMS[name]
        return ResolvedTransform(
            func=spec.func,
            y_label=spec.y_label if y_label is None else y_label,
            y_ticks=spec.y_ticks,
            name=name,
        )

    if callable(fun):
        if y_label is None:
            raise ValidationError(
                "No Y label defined. No default is available when `fun` is a function."
            )
        return ResolvedTransform(
            func=fun, y_label=y_label, y_ticks=data_range_ticks, name=None,
        )

    raise ValidationError(
        f"fun should be a string or a function, got {type(fun).__name__}"
    )
