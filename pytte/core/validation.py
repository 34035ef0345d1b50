"""
Input validation utilities for PyTTE.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except DataFrame construction on mappings)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from pytte.core.exceptions import (
    ColumnTypeError,
    DataNotFoundError,
    MissingColumnError,
    ValidationError,
)


def check_dataframe(data: Any, name: str) -> pd.DataFrame:
    """
    Validate and convert input to a pandas DataFrame.

    DataFrames are copied so later filtering never touches the caller's
    table. Mappings of columns and lists of records are converted.

    Args:
        data: Input to validate
        name: Parameter name for error messages

    Returns:
        A DataFrame owned by the caller of this function

    Raises:
        DataNotFoundError: If data is None
        ValidationError: If data cannot be interpreted as a table
    """
    if data is None:
        raise DataNotFoundError(f"{name}: no data supplied")

    if isinstance(data, pd.DataFrame):
        return data.copy()

    if isinstance(data, (str, bytes)) or np.isscalar(data):
        raise ValidationError(
            f"{name}: expected a table, got {type(data).__name__}"
        )

    try:
        return pd.DataFrame(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to DataFrame: {e}") from e


def check_columns_present(
    df: pd.DataFrame,
    columns: Sequence[str],
    name: str,
) -> None:
    """
    Verify all required columns exist.

    Args:
        df: Table to check
        columns: Required column names
        name: Parameter name for error messages

    Raises:
        MissingColumnError: If any column is absent
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MissingColumnError(
            f"Following columns are missing from `{name}`: {' '.join(missing)}.",
            missing=tuple(missing),
            available=tuple(str(c) for c in df.columns),
        )


def check_numeric_column(df: pd.DataFrame, column: str, label: str) -> None:
    """
    Verify a column has a numeric dtype.

    Booleans are rejected: a censoring flag stored as True/False is
    ambiguous about which value means "censored".

    Args:
        df: Table holding the column
        column: Column name
        label: Human readable role of the column, e.g. "Analysis variable"

    Raises:
        ColumnTypeError: If the column is not numeric
    """
    dtype = df[column].dtype
    if pd.api.types.is_bool_dtype(dtype) or not pd.api.types.is_numeric_dtype(dtype):
        raise ColumnTypeError(
            f"{label}, {column}, is not numeric.",
            column=column,
            dtype=str(dtype),
        )


def check_binary(values: ArrayLike, name: str) -> None:
    """
    Verify values are 0/1, ignoring missing values.

    Args:
        values: Values to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any non-missing value is not 0 or 1
    """
    arr = np.asarray(values, dtype=np.float64)
    unique = np.unique(arr[~np.isnan(arr)])
    if not np.all(np.isin(unique, [0.0, 1.0])):
        raise ValidationError(
            f"{name}: must contain only 0 and 1, got unique values: {unique}"
        )


def check_non_negative(values: ArrayLike, name: str) -> None:
    """
    Verify no value is negative.

    Args:
        values: Values to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any value is negative
    """
    arr = np.asarray(values, dtype=np.float64)
    n_negative = int(np.sum(arr < 0))
    if n_negative > 0:
        raise ValidationError(
            f"{name}: must be non-negative, got {n_negative} negative values "
            f"(min={np.nanmin(arr)})"
        )


def check_in_open_interval(value: float, low: float, high: float, name: str) -> None:
    """
    Verify low < value < high.

    Raises:
        ValidationError: If value is not a real number or lies outside the
            open interval
    """
    if not isinstance(value, Real) or isinstance(value, bool):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__}"
        )
    if not (low < value < high):
        raise ValidationError(
            f"{name}: must be in ({low}, {high}), got {value}"
        )
