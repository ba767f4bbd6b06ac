"""
Common data structures for bootstrap aggregation.

AccumulatedState is the per-run scratch space the backend fills while
looping over bootstrap samples. BaggingParams is the immutable payload
wrapped by Result[P] and exposed through BaggingSolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pybagging.core.exceptions import DimensionError, SampleFitFailure


@dataclass(frozen=True)
class BaggingParams:
    """
    Parameter payload for bagging results.

    - coefficients: mean coefficient per position, shape (k,)
    - standard_error: sd / sqrt(R), shape (k,)
    - t_values, p_values: shape (k,)
    - predictions: averaged fitted value per observation slot, shape (n,)
    - variable_importance: non-zero count / R, shape (k,)
    - coefficient_samples: accepted coefficient rows, NaN rows for
      discarded iterations, shape (R, k)
    - fitted_samples: fitted values by iteration column, NaN for
      discarded iterations, shape (n, R)
    """
    coefficients: NDArray[np.floating[Any]]
    standard_error: NDArray[np.floating[Any]]
    t_values: NDArray[np.floating[Any]]
    p_values: NDArray[np.floating[Any]]
    predictions: NDArray[np.floating[Any]]
    variable_importance: NDArray[np.floating[Any]]
    coefficient_samples: NDArray[np.floating[Any]]
    fitted_samples: NDArray[np.floating[Any]]
    nonzero_counts: NDArray[np.int64]
    R: int
    n_accepted: int
    df: int
    failures: tuple[SampleFitFailure, ...] = ()


class AccumulatedState:
    """
    Mutable accumulator owned by exactly one bagging run.

    Every iteration writes only its own slot: row i of the coefficient
    store and column i of the fitted-value matrix. The coefficient store
    is allocated on the first accepted sample, once its length k is known.
    """

    def __init__(self, n: int, R: int):
        self.n = n
        self.R = R
        self.fitted = np.full((n, R), np.nan, dtype=np.float64)
        self.accepted = np.zeros(R, dtype=bool)
        self.coefs: NDArray[np.floating[Any]] | None = None
        self.nonzero: NDArray[np.int64] | None = None
        self.failures: list[SampleFitFailure] = []

    @property
    def k(self) -> int | None:
        return None if self.coefs is None else self.coefs.shape[1]

    @property
    def n_accepted(self) -> int:
        return int(self.accepted.sum())

    def record_failure(self, iteration: int, reason: str) -> None:
        self.failures.append(SampleFitFailure(iteration=iteration, reason=reason))

    def accept(
        self,
        iteration: int,
        coefficients: NDArray[np.floating[Any]],
        fitted_values: NDArray[np.floating[Any]],
    ) -> None:
        """
        Store one accepted sample.

        Raises:
            DimensionError: If the coefficient length differs from the
                length fixed by the first accepted sample
        """
        if self.coefs is None:
            k = coefficients.shape[0]
            self.coefs = np.full((self.R, k), np.nan, dtype=np.float64)
            self.nonzero = np.zeros(k, dtype=np.int64)
        elif coefficients.shape[0] != self.k:
            raise DimensionError(
                f"fitting_function returned {coefficients.shape[0]} coefficients "
                f"at iteration {iteration}, but {self.k} on earlier samples"
            )

        self.coefs[iteration] = coefficients
        self.fitted[:, iteration] = fitted_values
        self.accepted[iteration] = True
        self.nonzero += (coefficients != 0) & ~np.isnan(coefficients)


def column_moments(
    M: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.int64], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    NaN-aware count, mean and sample sd (ddof=1) of each column of M.

    Values are shifted by the first observed value of their column before
    summing, so a column of identical values has exactly that value as its
    mean and exactly zero sd. Columns with no values get NaN mean; columns
    with fewer than two values get NaN sd.
    """
    valid = ~np.isnan(M)
    count = valid.sum(axis=0)
    m = M.shape[1]

    first = np.argmax(valid, axis=0)
    shift = M[first, np.arange(m)] if M.shape[0] > 0 else np.zeros(m)
    shift = np.where(count > 0, shift, 0.0)

    dev = np.where(valid, M - shift, 0.0)
    with np.errstate(divide='ignore', invalid='ignore'):
        mean_dev = dev.sum(axis=0) / count
        mean = np.where(count > 0, shift + mean_dev, np.nan)
        resid = np.where(valid, dev - mean_dev, 0.0)
        var = (resid ** 2).sum(axis=0) / (count - 1)
        sd = np.where(count >= 2, np.sqrt(var), np.nan)

    return count, mean, sd
