"""
Core protocols for pybagging.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape plugs in, including user code that
never imports pybagging.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a
    Result wrapping a domain-specific parameter payload.

    Backends are stateless: all configuration is passed via the design
    or at construction time. This makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_qr', 'cpu_lasso', 'cpu_bagging', 'cpu_svd'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...


@runtime_checkable
class FitResultLike(Protocol):
    """
    What a model fitter must hand back for one bootstrap sample.

    Only these two attributes are ever read by the bagging engine.
    """

    @property
    def coefficients(self) -> Any:
        ...

    @property
    def fitted_values(self) -> Any:
        ...


@runtime_checkable
class ModelFitter(Protocol):
    """
    A modeling strategy the bagging engine can drive.

    One operation: fit(response, predictors) -> coefficients and fitted
    values. Ordinary least squares, the lasso and user-defined models all
    plug in through this interface.
    """

    def fit(self, y: Any, X: Any) -> FitResultLike:
        ...
