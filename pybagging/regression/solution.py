"""
Regression solution types.

Contains the parameter payloads and user-facing solution wrappers for
ordinary least squares and the lasso.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pybagging.core.result import Result

if TYPE_CHECKING:
    from pybagging.regression.design import Design


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing OLS results.

    Wraps the backend Result and provides accessors for all regression
    outputs including standard errors and t-statistics.
    """
    _result: Result[LinearParams]
    _design: 'Design'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients, intercept first when the model has one."""
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of coefficients.

        SE(β) = sqrt(diag(σ² (X'X)⁻¹)). NaN when no residual degrees of
        freedom remain.
        """
        if self._standard_errors is not None:
            return self._standard_errors

        k = len(self.coefficients)
        df = self.df_residual
        if df <= 0:
            self._standard_errors = np.full(k, np.nan, dtype=np.float64)
            return self._standard_errors

        sigma_sq = self.rss / df
        M = self._design.model_matrix()
        try:
            XtX_inv = np.linalg.inv(M.T @ M)
            self._standard_errors = np.sqrt(sigma_sq * np.diag(XtX_inv))
        except np.linalg.LinAlgError:
            self._standard_errors = np.full(k, np.nan, dtype=np.float64)
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients."""
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / self.standard_errors
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def names(self) -> tuple[str, ...]:
        return self._design.coef_names

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Linear Regression Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Predictors: {self._design.p}",
            f"Rank: {self.rank}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'':<14} {'Estimate':>14} {'Std.Error':>12} {'t value':>10}",
            "-" * 60,
        ]

        for name, coef, se, t in zip(
            self.names, self.coefficients, self.standard_errors, self.t_statistics
        ):
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            lines.append(f"{name:<14} {coef:14.6f} {se_str} {t_str}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"rank={self.rank}, r_squared={self.r_squared:.4f})"
        )


@dataclass(frozen=True)
class LassoParams:
    """
    Parameter payload for the lasso.

    coefficients carries the intercept first when the model has one.
    """
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    alpha: float
    n_iter: int
    cv_selected: bool


@dataclass
class LassoSolution:
    """User-facing lasso results."""
    _result: Result[LassoParams]
    _design: 'Design'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    @property
    def alpha(self) -> float:
        """Penalty strength used for the final fit."""
        return self._result.params.alpha

    @property
    def cv_selected(self) -> bool:
        """True when alpha was chosen by cross-validation."""
        return self._result.params.cv_selected

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        """Coefficients without the intercept."""
        if self._design.intercept:
            return self.coefficients[1:]
        return self.coefficients

    @property
    def selected(self) -> NDArray[np.intp]:
        """Column indices of predictors with non-zero coefficients."""
        return np.flatnonzero(self.slopes)

    @property
    def n_nonzero(self) -> int:
        return int(np.count_nonzero(self.slopes))

    @property
    def names(self) -> tuple[str, ...]:
        return self._design.coef_names

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        how = "cross-validated" if self.cv_selected else "fixed"
        lines = [
            "Lasso Regression Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Predictors: {self._design.p}",
            f"Penalty (alpha, {how}): {self.alpha:.6g}",
            f"Non-zero coefficients: {self.n_nonzero}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for name, coef in zip(self.names, self.coefficients):
            coef_str = f"{coef:14.6f}" if coef != 0 else f"{'.':>14}"
            lines.append(f"{name:<14} {coef_str}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LassoSolution(n={self._design.n}, p={self._design.p}, "
            f"alpha={self.alpha:.4g}, n_nonzero={self.n_nonzero})"
        )
