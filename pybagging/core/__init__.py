"""
Core infrastructure for pybagging.

Shared abstractions and utilities used by the domain submodules
(bagging, regression, selection).

Key components:
    protocols: Backend, ModelFitter, FitResultLike protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and linear algebra primitives
"""

from pybagging.core.protocols import Backend, ModelFitter, FitResultLike
from pybagging.core.result import Result
from pybagging.core.exceptions import (
    PyBaggingError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    SampleFitFailure,
    AllSamplesFailedError,
)

__all__ = [
    # Protocols
    "Backend",
    "ModelFitter",
    "FitResultLike",
    # Result
    "Result",
    # Exceptions
    "PyBaggingError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "SampleFitFailure",
    "AllSamplesFailedError",
]
