"""
Exception hierarchy for pybagging.

All exceptions inherit from PyBaggingError so callers can catch any
library-specific error in one place.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Per-iteration fit failures are records, not exceptions
"""

from __future__ import annotations

from dataclasses import dataclass


class PyBaggingError(Exception):
    """Base exception for all pybagging errors."""
    pass


class ValidationError(PyBaggingError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, before any
    computation starts.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when y and X
    disagree on the number of observations, or when a fitter returns
    coefficient vectors of different lengths across bootstrap samples.
    """
    pass


class NumericalError(PyBaggingError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically p)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


@dataclass(frozen=True)
class SampleFitFailure:
    """
    Diagnostic record of one discarded bootstrap iteration.

    Not an exception: failed iterations are absorbed by the engine and
    reported through BaggingSolution.failures.

    Attributes:
        iteration: Zero-based bootstrap iteration index
        reason: Human-readable description of why the fit was rejected
    """
    iteration: int
    reason: str

    def __str__(self) -> str:
        return f"iteration {self.iteration}: {self.reason}"


class AllSamplesFailedError(NumericalError):
    """
    No bootstrap iteration produced an acceptable fit.

    Attributes:
        R: Number of bootstrap iterations attempted
        failures: Diagnostic records, one per attempted iteration
    """

    def __init__(
        self,
        message: str,
        R: int,
        failures: tuple[SampleFitFailure, ...] = (),
    ):
        super().__init__(message)
        self.R = R
        self.failures = failures
