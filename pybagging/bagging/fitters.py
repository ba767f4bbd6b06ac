"""
Model fitters the bagging engine can drive.

A fitter is anything with fit(y, X) returning an object that exposes
`coefficients` and `fitted_values` (see pybagging.core.protocols). Plain
callables are adapted with FunctionFitter; as_fitter() does this
automatically.

Provided fitters:
    OLSFitter: ordinary least squares (QR)
    LassoFitter: L1-penalized least squares, fixed or cross-validated alpha
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pybagging.core.exceptions import ValidationError
from pybagging.core.protocols import ModelFitter
from pybagging.regression.solvers import fit as ols_fit, lasso


@dataclass(frozen=True)
class FitResult:
    """
    Coefficients and fitted values from one model fit.

    coefficients has length p, or p+1 when the fitter puts an intercept
    first. fitted_values has one entry per row passed to the fitter.
    """
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]


class FunctionFitter:
    """
    Adapt a plain callable ``func(y, X)`` to the ModelFitter protocol.

    The callable may return a FitResult, any object with `coefficients`
    and `fitted_values` attributes, a mapping with those keys, or a
    ``(coefficients, fitted_values)`` pair.
    """

    def __init__(self, func: Callable[[Any, Any], Any]):
        if not callable(func):
            raise ValidationError(
                f"fitting_function: expected a callable, got {type(func).__name__}"
            )
        self._func = func

    def fit(self, y, X):
        return self._func(y, X)

    def __repr__(self) -> str:
        name = getattr(self._func, '__name__', repr(self._func))
        return f"FunctionFitter({name})"


class OLSFitter:
    """Ordinary least squares via QR decomposition."""

    def __init__(self, intercept: bool = True):
        self.intercept = intercept

    def fit(self, y, X) -> FitResult:
        sol = ols_fit(X, y, intercept=self.intercept)
        return FitResult(
            coefficients=sol.coefficients,
            fitted_values=sol.fitted_values,
        )

    def __repr__(self) -> str:
        return f"OLSFitter(intercept={self.intercept})"


class LassoFitter:
    """
    Lasso fitter.

    With alpha=None each bootstrap sample gets its own cross-validated
    penalty, which is the usual choice for stability-style importance
    scores but multiplies the cost by the number of folds.
    """

    def __init__(
        self,
        alpha: float | None = None,
        *,
        intercept: bool = True,
        cv: int = 5,
        max_iter: int = 10000,
        tol: float = 1e-4,
        seed: int | None = None,
    ):
        self.alpha = alpha
        self.intercept = intercept
        self.cv = cv
        self.max_iter = max_iter
        self.tol = tol
        self.seed = seed

    def fit(self, y, X) -> FitResult:
        sol = lasso(
            X, y,
            alpha=self.alpha,
            intercept=self.intercept,
            cv=self.cv,
            max_iter=self.max_iter,
            tol=self.tol,
            seed=self.seed,
        )
        return FitResult(
            coefficients=sol.coefficients,
            fitted_values=sol.fitted_values,
        )

    def __repr__(self) -> str:
        return f"LassoFitter(alpha={self.alpha!r}, intercept={self.intercept})"


def as_fitter(obj: Any) -> ModelFitter:
    """
    Return obj as a ModelFitter.

    Objects with a callable `fit` attribute are used as-is; other
    callables are wrapped in FunctionFitter.

    Raises:
        ValidationError: If obj is neither
    """
    if callable(getattr(obj, 'fit', None)):
        return obj
    if callable(obj):
        return FunctionFitter(obj)
    raise ValidationError(
        "fitting_function: expected a callable or an object with a fit(y, X) "
        f"method, got {type(obj).__name__}"
    )


def unpack_fit_result(raw: Any) -> tuple[Any, Any]:
    """
    Extract (coefficients, fitted_values) from whatever a fitter returned.

    Missing pieces come back as None; validity is judged by the caller.
    """
    if raw is None:
        return None, None
    if hasattr(raw, 'coefficients') or hasattr(raw, 'fitted_values'):
        return (
            getattr(raw, 'coefficients', None),
            getattr(raw, 'fitted_values', None),
        )
    if isinstance(raw, Mapping):
        return raw.get('coefficients'), raw.get('fitted_values')
    if isinstance(raw, (tuple, list)) and len(raw) == 2:
        return raw[0], raw[1]
    return None, None
