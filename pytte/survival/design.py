"""
TTEDesign: immutable container for an ADaM time-to-event table.

Wraps a filtered copy of an ADTTE-like table together with the requested
strata. Validates inputs at construction time, so downstream code trusts
clean data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pytte.core.exceptions import ValidationError
from pytte.core.validation import (
    check_binary,
    check_columns_present,
    check_dataframe,
    check_non_negative,
    check_numeric_column,
)

AVAL = "AVAL"
CNSR = "CNSR"
PARAM = "PARAM"
PARAMCD = "PARAMCD"
OVERALL_LABEL = "Overall"


@dataclass(frozen=True)
class TTEDesign:
    """Immutable time-to-event analysis table.

    Parameters
    ----------
    data : pd.DataFrame
        Filtered copy of the input: no missing AVAL, CNSR or strata values.
    strata : tuple of str
        Stratification columns, empty for an overall analysis.
    n_dropped : int
        Rows removed because of missing values.
    """

    data: pd.DataFrame
    strata: tuple[str, ...]
    n_dropped: int

    @classmethod
    def from_adam(cls, data, strata=None) -> TTEDesign:
        """Create and validate a time-to-event design.

        Parameters
        ----------
        data : pd.DataFrame or mapping
            BDS table with at least AVAL and CNSR.
        strata : str, sequence of str or None
            Stratification columns, e.g. "TRTP" or ["TRTP", "SEX"].

        Returns
        -------
        TTEDesign

        Raises
        ------
        DataNotFoundError
            If no data is given.
        MissingColumnError
            If strata, CNSR or AVAL columns are absent.
        ColumnTypeError
            If AVAL or CNSR is not numeric.
        ValidationError
            If CNSR is not 0/1, AVAL is negative, or no rows remain.
        """
        df = check_dataframe(data, "data")
        strata_cols = _normalize_strata(strata)

        check_columns_present(df, [*strata_cols, CNSR, AVAL], "data")
        check_numeric_column(df, AVAL, "Analysis variable")
        check_numeric_column(df, CNSR, "Censor variable")

        n_before = len(df)
        df = df.dropna(subset=[AVAL, CNSR])
        if strata_cols:
            df = df.dropna(subset=list(strata_cols))

        if len(df) == 0:
            raise ValidationError(
                "data: no rows left after removing missing AVAL, CNSR and strata values"
            )

        check_binary(df[CNSR], CNSR)
        check_non_negative(df[AVAL], AVAL)

        return cls(
            data=df.reset_index(drop=True),
            strata=strata_cols,
            n_dropped=n_before - len(df),
        )

    @property
    def n(self) -> int:
        """Number of analysed rows."""
        return len(self.data)

    @property
    def time(self) -> NDArray:
        return self.data[AVAL].to_numpy(dtype=np.float64)

    @property
    def event(self) -> NDArray:
        """Event indicator, 1 - CNSR."""
        return 1.0 - self.data[CNSR].to_numpy(dtype=np.float64)

    @property
    def n_events(self) -> int:
        return int(np.sum(self.event))

    @property
    def formula(self) -> str:
        """Model formula, e.g. ``Surv(AVAL, 1-CNSR) ~ TRTP + SEX``."""
        rhs = " + ".join(self.strata) if self.strata else "1"
        return f"Surv({AVAL}, 1-{CNSR}) ~ {rhs}"

    def groups(self) -> Iterator[tuple[str, pd.DataFrame]]:
        """Yield ``(label, rows)`` per stratum in sorted level order.

        Labels follow ``"TRTP=Placebo, SEX=F"``. An overall analysis has a
        single "Overall" group, and a stratified analysis that only finds
        one level combination is labelled by the level value(s) alone.
        """
        if not self.strata:
            yield OVERALL_LABEL, self.data
            return

        grouped = list(
            self.data.groupby(list(self.strata), sort=True, observed=True)
        )
        single = len(grouped) == 1
        for key, rows in grouped:
            values = key if isinstance(key, tuple) else (key,)
            if single:
                label = ", ".join(str(v) for v in values)
            else:
                label = ", ".join(
                    f"{col}={v}" for col, v in zip(self.strata, values)
                )
            yield label, rows

    def parameter_metadata(self) -> tuple[dict[str, str], list[str]]:
        """Collect PARAM/PARAMCD descriptors for the analysed rows.

        Only reported when neither column is a stratification variable.

        Returns
        -------
        metadata : dict
            ``{"PARAM": ..., "PARAMCD": ...}`` for the columns present.
        warnings : list of str
            One entry per column holding more than one distinct value.
        """
        metadata: dict[str, str] = {}
        warnings: list[str] = []
        if PARAM in self.strata or PARAMCD in self.strata:
            return metadata, warnings

        for col in (PARAM, PARAMCD):
            if col not in self.data.columns:
                continue
            values = pd.unique(self.data[col].dropna())
            metadata[col] = ", ".join(str(v) for v in values)
            if len(values) > 1:
                warnings.append(
                    f"{col} holds {len(values)} distinct values; "
                    f"filter the data on a single parameter before analysis"
                )
        return metadata, warnings


def _normalize_strata(strata) -> tuple[str, ...]:
    if strata is None:
        return ()
    if isinstance(strata, str):
        return (strata,)
    strata_cols = tuple(strata)
    if not all(isinstance(s, str) for s in strata_cols):
        raise ValidationError(
            f"strata: expected column names, got {list(strata_cols)}"
        )
    return strata_cols
