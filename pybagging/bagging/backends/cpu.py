"""
CPU backend for bootstrap aggregation.

CPUBaggingBackend: sequential resample / fit / accumulate loop followed by
a single reduction pass.
"""

from __future__ import annotations

import numpy as np
from scipy import stats

from pybagging.core.result import Result
from pybagging.core.compute.timing import Timer
from pybagging.core.exceptions import AllSamplesFailedError, NumericalError
from pybagging.bagging._common import AccumulatedState, BaggingParams, column_moments
from pybagging.bagging._resample import bootstrap_indices
from pybagging.bagging.design import BaggingDesign
from pybagging.bagging.fitters import unpack_fit_result


class CPUBaggingBackend:
    """
    CPU backend for bagging.

    Each iteration draws an ordinary bootstrap sample, calls the fitter on
    the projected (y, X) and either accepts the result into its own slot
    or records a SampleFitFailure. Failures never stop the run.
    """

    @property
    def name(self) -> str:
        return 'cpu_bagging'

    def solve(self, design: BaggingDesign) -> Result[BaggingParams]:
        """
        Run bagging and return Result[BaggingParams].

        Raises:
            AllSamplesFailedError: If no iteration was accepted
            DimensionError: If accepted fits disagree on coefficient length
        """
        timer = Timer()
        timer.start()

        y = design.y
        X = design.X
        R = design.R
        n, p = design.n, design.p
        rng = np.random.default_rng(design.seed)

        state = AccumulatedState(n, R)

        for b in range(R):
            with timer.section('resample'):
                indices = bootstrap_indices(n, rng)
                y_b = y[indices]
                X_b = X[indices]

            with timer.section('model_fits'):
                try:
                    raw = design.fitter.fit(y_b, X_b)
                except (NumericalError, np.linalg.LinAlgError) as e:
                    state.record_failure(b, f"{type(e).__name__}: {e}")
                    continue

            with timer.section('accumulate'):
                self._accumulate(state, b, raw)

        if state.n_accepted == 0:
            raise AllSamplesFailedError(
                f"All {R} bootstrap samples failed; no summary can be produced. "
                f"First failure: {state.failures[0]}",
                R=R,
                failures=tuple(state.failures),
            )

        warnings_list: list[str] = []

        with timer.section('reduction'):
            params = self._reduce(state, n, p, warnings_list)

        timer.stop()

        return Result(
            params=params,
            info={
                'n': n,
                'p': p,
                'k': state.k,
                'R': R,
                'n_accepted': state.n_accepted,
                'n_failed': len(state.failures),
                'df': params.df,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _accumulate(self, state: AccumulatedState, b: int, raw) -> None:
        """Validate one fit result and store it, or record why it was dropped."""
        coefficients, fitted_values = unpack_fit_result(raw)

        if coefficients is None:
            state.record_failure(b, "fit result has no coefficients")
            return
        try:
            coefficients = np.ravel(np.asarray(coefficients, dtype=np.float64))
        except (TypeError, ValueError) as e:
            state.record_failure(b, f"coefficients are not numeric: {e}")
            return
        if coefficients.size == 0:
            state.record_failure(b, "coefficient vector is empty")
            return

        if fitted_values is None:
            state.record_failure(b, "fit result has no fitted values")
            return
        try:
            fitted_values = np.ravel(np.asarray(fitted_values, dtype=np.float64))
        except (TypeError, ValueError) as e:
            state.record_failure(b, f"fitted values are not numeric: {e}")
            return
        if fitted_values.shape[0] != state.n:
            state.record_failure(
                b,
                f"fitted values have length {fitted_values.shape[0]}, "
                f"expected {state.n}",
            )
            return

        state.accept(b, coefficients, fitted_values)

    def _reduce(
        self,
        state: AccumulatedState,
        n: int,
        p: int,
        warnings_list: list[str],
    ) -> BaggingParams:
        """Collapse the accumulated samples into summary statistics."""
        R = state.R

        count, mean, sd = column_moments(state.coefs)
        se = sd / np.sqrt(R)

        n_undefined = int(np.sum(count < 2))
        if n_undefined > 0:
            warnings_list.append(
                f"Standard errors undefined for {n_undefined} of {len(count)} "
                f"coefficients (fewer than 2 accepted samples); reported as NaN"
            )

        with np.errstate(divide='ignore', invalid='ignore'):
            t_values = mean / se

        df = n - p - 1
        if df > 0:
            p_values = 2.0 * stats.t.sf(np.abs(t_values), df)
        else:
            p_values = np.full_like(t_values, np.nan)
            warnings_list.append(
                f"Residual degrees of freedom n - p - 1 = {df} <= 0; "
                f"p-values reported as NaN"
            )

        _, predictions, _ = column_moments(state.fitted.T)
        importance = state.nonzero / R

        return BaggingParams(
            coefficients=mean,
            standard_error=se,
            t_values=t_values,
            p_values=p_values,
            predictions=predictions,
            variable_importance=importance,
            coefficient_samples=state.coefs,
            fitted_samples=state.fitted,
            nonzero_counts=state.nonzero,
            R=R,
            n_accepted=state.n_accepted,
            df=df,
            failures=tuple(state.failures),
        )
