"""
Solver dispatch for bootstrap aggregation.

Provides bagging_perform() (public API) and backend selection.
"""

from __future__ import annotations

import warnings
from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from pybagging.core.exceptions import ValidationError
from pybagging.bagging.design import BaggingDesign
from pybagging.bagging.solution import BaggingSolution
from pybagging.bagging.backends.cpu import CPUBaggingBackend


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: str = 'auto'):
    """Select backend for bagging. Only a CPU backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUBaggingBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'auto' or 'cpu'."
    )


def bagging_perform(
    y: ArrayLike,
    X: ArrayLike,
    fitting_function,
    R: int,
    *,
    seed: int | np.random.Generator | None = None,
    backend: BackendChoice = 'auto',
) -> BaggingSolution:
    """
    Bootstrap-aggregate an arbitrary model fitter.

    Draws R bootstrap samples of the n observations, fits the model on
    each, and averages the accepted fits.

    Samples whose fit has no coefficients, whose fitted values do not have
    length n, or whose fitter raised a numerical error are discarded and
    recorded in ``failures``; the run always attempts exactly R samples.

    Statistics:
        coefficients: mean over accepted samples
        standard_error: sample sd over accepted samples / sqrt(R)
        t_values: coefficients / standard_error
        p_values: 2 * P(T > |t|), T ~ t(n - p - 1)
        predictions: per-slot mean of the recorded fitted values
        variable_importance: non-zero count / R

    Degenerate statistics are reported as NaN with a RuntimeWarning:
    standard errors (and t/p-values) of coefficients with fewer than two
    accepted samples, and all p-values when n - p - 1 <= 0.

    Parameters
    ----------
    y : array-like
        Response, length n.
    X : array-like or pandas.DataFrame
        Predictors, n x p. DataFrame column names label the coefficients.
    fitting_function : ModelFitter or callable
        Object with fit(y, X), or callable (y, X), returning something
        exposing ``coefficients`` and ``fitted_values``. X is passed as
        an ndarray.
    R : int
        Number of bootstrap samples, >= 1.
    seed : int, numpy.random.Generator or None
        Source of randomness. A Generator is consumed in place.
    backend : str
        'auto' (default) or 'cpu'.

    Returns
    -------
    BaggingSolution
        Mapping with keys coefficients, standard_error, t_values,
        p_values, predictions, variable_importance.

    Raises
    ------
    ValidationError
        Invalid inputs (R <= 0, empty data, non-numeric or non-finite
        values). DimensionError when len(y) != nrow(X) or accepted fits
        disagree on coefficient length.
    AllSamplesFailedError
        No bootstrap sample produced an acceptable fit.
    """
    design = BaggingDesign.for_bagging(y, X, fitting_function, R, seed=seed)

    be = _get_backend(backend)
    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return BaggingSolution(_result=result, _design=design)
