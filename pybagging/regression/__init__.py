"""
Linear models: ordinary least squares and the lasso.

Public API:
    fit(X, y, ...) -> LinearSolution
    lasso(X, y, ...) -> LassoSolution

Both entry points validate inputs, build a Design, dispatch to a CPU
backend and wrap the result.

Example:
    >>> from pybagging.regression import fit, lasso
    >>> ols = fit(X, y, intercept=True)
    >>> l1 = lasso(X, y)            # penalty chosen by cross-validation
    >>> print(l1.summary())
"""

from pybagging.regression.design import Design
from pybagging.regression.solution import (
    LinearSolution,
    LinearParams,
    LassoSolution,
    LassoParams,
)
from pybagging.regression.solvers import fit, lasso

__all__ = [
    "fit",
    "lasso",
    "Design",
    "LinearSolution",
    "LinearParams",
    "LassoSolution",
    "LassoParams",
]
