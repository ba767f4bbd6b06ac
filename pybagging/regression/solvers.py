"""
Solver dispatch for regression.

This module provides the fit() and lasso() functions (public API) and
backend selection.
"""

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pybagging.core.exceptions import ValidationError
from pybagging.core.validation import check_positive_int
from pybagging.regression.design import Design
from pybagging.regression.solution import LinearSolution, LassoSolution
from pybagging.regression.backends.cpu import CPUQRBackend
from pybagging.regression.backends.cpu_lasso import CPULassoBackend


BackendChoice = Literal['auto', 'cpu']

_SUPPORTED_FAMILIES = ('gaussian',)


def fit(
    X: ArrayLike,
    y: ArrayLike,
    *,
    intercept: bool = False,
    backend: BackendChoice = 'auto',
) -> LinearSolution:
    """
    Fit a linear regression model by ordinary least squares.

    Solves min_β ||y - Mβ||² where M is X, with a leading column of ones
    when intercept=True.

    Args:
        X: Predictor matrix (n x p). Any array-like or a pandas DataFrame.
        y: Response vector (n,).
        intercept: Prepend an intercept; coefficients then have length p+1.
        backend: 'auto' or 'cpu' (both use the CPU QR backend).

    Returns:
        LinearSolution with coefficients, fitted values, diagnostics

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If X and y have inconsistent dimensions
        SingularMatrixError: If the model matrix is rank-deficient

    Example:
        >>> result = fit(X, y, intercept=True)
        >>> print(result.summary())
    """
    design = Design.from_arrays(X, y, intercept=intercept)
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return LinearSolution(_result=result, _design=design)


def lasso(
    X: ArrayLike,
    y: ArrayLike,
    *,
    alpha: float | None = None,
    family: str = 'gaussian',
    intercept: bool = True,
    cv: int = 5,
    max_iter: int = 10000,
    tol: float = 1e-4,
    seed: int | None = None,
) -> LassoSolution:
    """
    Fit an L1-penalized linear model.

    With alpha given, a single fit at that penalty. With alpha=None the
    penalty is chosen by cv-fold cross-validation over the regularization
    path and the model is refit on all data at the chosen value.

    Args:
        X: Predictor matrix (n x p).
        y: Response vector (n,).
        alpha: Penalty strength (>= 0), or None for cross-validation.
        family: Error family. Only 'gaussian' is supported.
        intercept: Fit an unpenalized intercept; it is returned first.
        cv: Number of cross-validation folds (>= 2, <= n).
        max_iter: Maximum coordinate descent sweeps.
        tol: Coordinate descent tolerance.
        seed: Random state forwarded to the solver.

    Returns:
        LassoSolution

    Raises:
        ValidationError: For unsupported family or invalid tuning values
    """
    if family not in _SUPPORTED_FAMILIES:
        raise ValidationError(
            f"family: expected one of {_SUPPORTED_FAMILIES}, got {family!r}"
        )
    if alpha is not None and not alpha >= 0:
        raise ValidationError(f"alpha: must be >= 0, got {alpha}")
    max_iter = check_positive_int(max_iter, 'max_iter')
    if not tol > 0:
        raise ValidationError(f"tol: must be > 0, got {tol}")

    design = Design.from_arrays(X, y, intercept=intercept)

    if alpha is None:
        cv = check_positive_int(cv, 'cv')
        if cv < 2 or cv > design.n:
            raise ValidationError(
                f"cv: must be between 2 and n={design.n}, got {cv}"
            )

    result = CPULassoBackend().solve(
        design, alpha=alpha, cv=cv, max_iter=max_iter, tol=tol, seed=seed,
    )

    if result.warnings:
        warnings.warn(
            "; ".join(result.warnings),
            RuntimeWarning,
            stacklevel=2,
        )

    return LassoSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate OLS backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUQRBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
