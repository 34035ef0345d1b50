"""
Exception hierarchy for PyTTE.

All exceptions inherit from PyTTEError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable and name the offending input
    - Never catch and re-raise with less information
"""


class PyTTEError(Exception):
    """Base exception for all PyTTE errors."""
    pass


class ValidationError(PyTTEError):
    """
    Input validation failed.

    Raised when user-provided inputs or options fail validation checks.
    """
    pass


class DataNotFoundError(ValidationError):
    """
    No analysis table was supplied.
    """
    pass


class MissingColumnError(ValidationError):
    """
    Required columns are absent from a table.

    Attributes:
        missing: Names of the required columns that were not found
        available: Column names present in the table
    """

    def __init__(
        self,
        message: str,
        missing: tuple[str, ...] = (),
        available: tuple[str, ...] = ()
    ):
        super().__init__(message)
        self.missing = tuple(missing)
        self.available = tuple(available)


class ColumnTypeError(ValidationError):
    """
    A required column has the wrong dtype.

    Attributes:
        column: Name of the offending column
        dtype: The dtype found, as a string
    """

    def __init__(
        self,
        message: str,
        column: str | None = None,
        dtype: str | None = None
    ):
        super().__init__(message)
        self.column = column
        self.dtype = dtype
