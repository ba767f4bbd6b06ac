"""
Design class for bootstrap aggregation.

BaggingDesign encapsulates all inputs the backend needs to run a bagging
job. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pybagging.bagging.fitters import as_fitter
from pybagging.core.protocols import ModelFitter
from pybagging.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_finite,
    check_consistent_length,
    check_min_samples,
    check_positive_int,
)


@dataclass(frozen=True)
class BaggingDesign:
    """
    Frozen design for bootstrap aggregation.

    Attributes:
        y: Response, shape (n,).
        X: Predictors, shape (n, p).
        names: Predictor names, length p.
        fitter: ModelFitter called once per bootstrap sample.
        R: Number of bootstrap iterations.
        seed: Random seed, or an existing numpy Generator.
    """
    y: NDArray[np.floating[Any]]
    X: NDArray[np.floating[Any]]
    names: tuple[str, ...]
    fitter: ModelFitter
    R: int
    seed: int | np.random.Generator | None

    @classmethod
    def for_bagging(
        cls,
        y,
        X,
        fitting_function,
        R: int,
        *,
        seed: int | np.random.Generator | None = None,
    ) -> BaggingDesign:
        """
        Create a bagging design with validation.

        Args:
            y: Response, 1D array-like of length n.
            X: Predictors, n x p array-like or pandas DataFrame. A 1D X is
                a single predictor.
            fitting_function: ModelFitter, or callable (y, X) -> fit result.
            R: Number of bootstrap iterations. Must be >= 1.
            seed: Random seed or numpy Generator.

        Returns:
            Validated BaggingDesign.

        Raises:
            ValidationError: If inputs are invalid.
            DimensionError: If y and X disagree on n.
        """
        R = check_positive_int(R, 'R')

        names = None
        if hasattr(X, 'columns'):
            names = tuple(str(c) for c in X.columns)

        y_arr = check_array(y, 'y').copy()
        X_arr = check_array(X, 'X').copy()

        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)

        check_1d(y_arr, 'y')
        check_2d(X_arr, 'X')
        check_consistent_length(y_arr, X_arr, names=('y', 'X'))
        check_min_samples(y_arr, 1, 'y')
        check_finite(y_arr, 'y')
        check_finite(X_arr, 'X')

        p = X_arr.shape[1]
        if names is None:
            names = tuple(f"x{j + 1}" for j in range(p))

        y_arr.flags.writeable = False
        X_arr.flags.writeable = False

        return cls(
            y=y_arr,
            X=X_arr,
            names=names,
            fitter=as_fitter(fitting_function),
            R=R,
            seed=seed,
        )

    @property
    def n(self) -> int:
        """Number of observations."""
        return self.y.shape[0]

    @property
    def p(self) -> int:
        """Number of predictors (intercept not counted)."""
        return self.X.shape[1]
