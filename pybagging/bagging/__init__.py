"""
Bootstrap aggregation (bagging) of arbitrary model fitters.

Wraps any fitter returning coefficients and fitted values, refits it on
R bootstrap samples and reports averaged coefficients, bootstrap standard
errors, t/p-values, averaged predictions and selection-frequency
importance scores.

Usage:
    from pybagging.bagging import bagging_perform, OLSFitter, LassoFitter

    result = bagging_perform(y, X, OLSFitter(), R=200, seed=42)
    result["coefficients"]
    result["variable_importance"]
    print(result.summary())

    # Any callable (y, X) -> (coefficients, fitted_values) also works
    result = bagging_perform(y, X, my_fit, R=100)
"""

from pybagging.bagging.solvers import bagging_perform
from pybagging.bagging.design import BaggingDesign
from pybagging.bagging.solution import BaggingSolution, SUMMARY_KEYS
from pybagging.bagging.fitters import (
    FitResult,
    FunctionFitter,
    OLSFitter,
    LassoFitter,
    as_fitter,
)
from pybagging.bagging._resample import bootstrap_indices

__all__ = [
    "bagging_perform",
    "BaggingDesign",
    "BaggingSolution",
    "SUMMARY_KEYS",
    "FitResult",
    "FunctionFitter",
    "OLSFitter",
    "LassoFitter",
    "as_fitter",
    "bootstrap_indices",
]
