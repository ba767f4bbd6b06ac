"""
CPU backend for the lasso.

Delegates the regularization-path solve to scikit-learn's coordinate
descent: Lasso for a fixed penalty, LassoCV when the penalty is chosen by
K-fold cross-validation along the path.

Objective (gaussian family):
    (1 / (2n)) ||y - β₀ - Xβ||² + α ||β||₁
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import Lasso, LassoCV

from pybagging.core.result import Result
from pybagging.core.compute.timing import Timer
from pybagging.regression.design import Design
from pybagging.regression.solution import LassoParams


class CPULassoBackend:
    """CPU backend using scikit-learn coordinate descent."""

    @property
    def name(self) -> str:
        return 'cpu_lasso'

    def solve(
        self,
        design: Design,
        alpha: float | None = None,
        cv: int = 5,
        max_iter: int = 10000,
        tol: float = 1e-4,
        seed: int | None = None,
    ) -> Result[LassoParams]:
        """Fit the lasso.

        Args:
            design: Design object with X and y
            alpha: Penalty strength. None selects it by cross-validation.
            cv: Number of cross-validation folds (alpha=None only)
            max_iter: Maximum coordinate descent sweeps
            tol: Coordinate descent tolerance
            seed: Random state forwarded to scikit-learn

        Returns:
            Result[LassoParams]
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        warnings_list: list[str] = []

        with timer.section('coordinate_descent'):
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter('always', ConvergenceWarning)
                if alpha is None:
                    model = LassoCV(
                        cv=cv,
                        fit_intercept=design.intercept,
                        max_iter=max_iter,
                        tol=tol,
                        random_state=seed,
                    )
                else:
                    model = Lasso(
                        alpha=alpha,
                        fit_intercept=design.intercept,
                        max_iter=max_iter,
                        tol=tol,
                        random_state=seed,
                    )
                model.fit(X, y)

            for w in caught:
                if issubclass(w.category, ConvergenceWarning):
                    warnings_list.append(
                        f"Coordinate descent did not converge: {w.message}"
                    )
                else:
                    warnings.warn_explicit(
                        w.message, w.category, w.filename, w.lineno,
                    )

        with timer.section('fitted_values'):
            slopes = np.asarray(model.coef_, dtype=np.float64)
            if design.intercept:
                coefficients = np.concatenate([[float(model.intercept_)], slopes])
            else:
                coefficients = slopes
            fitted_values = np.asarray(model.predict(X), dtype=np.float64)

        timer.stop()

        chosen_alpha = float(model.alpha_) if alpha is None else float(alpha)
        params = LassoParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            alpha=chosen_alpha,
            n_iter=int(np.max(model.n_iter_)),
            cv_selected=alpha is None,
        )

        info: dict[str, Any] = {
            'method': 'coordinate_descent',
            'family': 'gaussian',
            'intercept': design.intercept,
        }
        if alpha is None:
            info['cv_folds'] = cv
            info['n_alphas'] = len(model.alphas_)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
