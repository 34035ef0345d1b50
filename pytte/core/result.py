"""
Generic result container for PyTTE computations.

The Result class is the envelope every fitted object wraps. It keeps the
estimated curves, the metadata describing how they were produced, timing
and any non-fatal issues together.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, formula, options)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for survival computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (curves, metadata)
        info: Structured metadata (method, formula, options)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the estimator that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=KMParams(...),
        ...     info={'method': 'Kaplan-Meier', 'formula': 'Surv(AVAL, 1-CNSR) ~ 1'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='lifelines'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
