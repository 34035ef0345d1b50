"""
Core infrastructure for PyTTE.

This module provides shared abstractions used by the survival and
plotting submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from pytte.core.result import Result
from pytte.core.exceptions import (
    PyTTEError,
    ValidationError,
    DataNotFoundError,
    MissingColumnError,
    ColumnTypeError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyTTEError",
    "ValidationError",
    "DataNotFoundError",
    "MissingColumnError",
    "ColumnTypeError",
]
