"""
Regression Design.

Design holds X (predictor matrix) and y (response) for the regression
backends, validated once at construction. Backends trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pybagging.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class Design:
    """
    Regression design specification.

    Immutable after construction. The predictor matrix never contains an
    intercept column: intercept handling is a backend concern, recorded in
    the `intercept` flag.

    Construction:
        Design.from_arrays(X, y)
        Design.from_arrays(X, y, intercept=True)
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _intercept: bool
    _names: tuple[str, ...]

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        *,
        intercept: bool = False,
    ) -> Design:
        """
        Build Design directly from array-likes.

        A pandas DataFrame for X keeps its column names; otherwise
        predictors are named x1..xp.
        """
        names = None
        if hasattr(X, 'columns'):
            names = tuple(str(c) for c in X.columns)

        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_min_samples(X_arr, 1, 'X')

        n, p = X_arr.shape
        if names is None:
            names = tuple(f"x{j + 1}" for j in range(p))

        return cls(
            _X=X_arr,
            _y=y_arr,
            _n=n,
            _p=p,
            _intercept=bool(intercept),
            _names=names,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Predictor matrix (n x p), no intercept column."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of predictors (intercept not counted)."""
        return self._p

    @property
    def intercept(self) -> bool:
        """Whether the model includes an intercept."""
        return self._intercept

    @property
    def names(self) -> tuple[str, ...]:
        """Predictor names."""
        return self._names

    @property
    def coef_names(self) -> tuple[str, ...]:
        """Coefficient labels, intercept first when present."""
        if self._intercept:
            return ('(Intercept)',) + self._names
        return self._names

    def model_matrix(self) -> NDArray[np.floating[Any]]:
        """X with a leading column of ones when the model has an intercept."""
        if self._intercept:
            return np.column_stack([np.ones(self._n), self._X])
        return self._X
