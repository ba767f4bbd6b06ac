"""
Solution wrapper for bagging results.

BaggingSolution wraps Result[BaggingParams]. It is a read-only mapping
over the six summary fields and adds metadata accessors, percentile
intervals, a DataFrame view and R-style summary output.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pybagging.core.exceptions import SampleFitFailure, ValidationError
from pybagging.core.result import Result
from pybagging.bagging._common import BaggingParams

if TYPE_CHECKING:
    from pybagging.bagging.design import BaggingDesign


SUMMARY_KEYS = (
    'coefficients',
    'standard_error',
    't_values',
    'p_values',
    'predictions',
    'variable_importance',
)


@dataclass(eq=False)
class BaggingSolution(Mapping):
    """
    User-facing bagging results.

    Mapping keys: coefficients, standard_error, t_values, p_values,
    predictions, variable_importance.
    """
    _result: Result[BaggingParams]
    _design: 'BaggingDesign'

    # --- Mapping protocol ---

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        if key not in SUMMARY_KEYS:
            raise KeyError(
                f"BaggingSolution has no field {key!r}. Available: {SUMMARY_KEYS}"
            )
        return getattr(self._result.params, key)

    def __iter__(self) -> Iterator[str]:
        return iter(SUMMARY_KEYS)

    def __len__(self) -> int:
        return len(SUMMARY_KEYS)

    # --- Summary fields ---

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Mean coefficient across accepted samples, shape (k,)."""
        return self._result.params.coefficients

    @property
    def standard_error(self) -> NDArray[np.floating[Any]]:
        """Bootstrap sd divided by sqrt(R), shape (k,)."""
        return self._result.params.standard_error

    @property
    def t_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.t_values

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from t with n - p - 1 df."""
        return self._result.params.p_values

    @property
    def predictions(self) -> NDArray[np.floating[Any]]:
        """Averaged fitted value per observation slot, shape (n,)."""
        return self._result.params.predictions

    @property
    def variable_importance(self) -> NDArray[np.floating[Any]]:
        """Fraction of the R samples with a non-zero coefficient, shape (k,)."""
        return self._result.params.variable_importance

    # --- Bootstrap detail ---

    @property
    def coefficient_samples(self) -> NDArray[np.floating[Any]]:
        """Per-iteration coefficients, NaN rows for discarded iterations, (R, k)."""
        return self._result.params.coefficient_samples

    @property
    def fitted_samples(self) -> NDArray[np.floating[Any]]:
        """Per-iteration fitted values, NaN columns for discarded iterations, (n, R)."""
        return self._result.params.fitted_samples

    @property
    def R(self) -> int:
        """Number of bootstrap iterations attempted."""
        return self._result.params.R

    @property
    def n_accepted(self) -> int:
        return self._result.params.n_accepted

    @property
    def n_failed(self) -> int:
        return len(self._result.params.failures)

    @property
    def failures(self) -> tuple[SampleFitFailure, ...]:
        """Diagnostics for every discarded iteration, in iteration order."""
        return self._result.params.failures

    @property
    def df(self) -> int:
        """Degrees of freedom n - p - 1 used for the p-values."""
        return self._result.params.df

    @property
    def names(self) -> tuple[str, ...]:
        """Coefficient labels, with '(Intercept)' first when k == p + 1."""
        k = len(self.coefficients)
        p = self._design.p
        if k == p:
            return self._design.names
        if k == p + 1:
            return ('(Intercept)',) + self._design.names
        return tuple(f"b{j}" for j in range(k))

    # --- Metadata ---

    @property
    def seed(self) -> int | np.random.Generator | None:
        return self._design.seed

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

    # --- Derived output ---

    def conf_int(self, level: float = 0.95) -> NDArray[np.floating[Any]]:
        """
        Percentile intervals from the accepted bootstrap coefficients.

        CI = [Q(alpha/2), Q(1 - alpha/2)] per coefficient, shape (k, 2).
        Coefficients with no accepted values get NaN bounds.
        """
        if not 0.0 < level < 1.0:
            raise ValidationError(f"level: must be in (0, 1), got {level}")
        alpha = 1.0 - level
        samples = self.coefficient_samples
        k = samples.shape[1]
        ci = np.full((k, 2), np.nan, dtype=np.float64)

        for j in range(k):
            col = samples[:, j]
            col = col[~np.isnan(col)]
            if len(col) == 0:
                continue
            ci[j, 0] = np.quantile(col, alpha / 2.0)
            ci[j, 1] = np.quantile(col, 1.0 - alpha / 2.0)

        return ci

    def to_dict(self) -> dict[str, NDArray[np.floating[Any]]]:
        """Plain dict of the six summary fields."""
        return {key: self[key] for key in SUMMARY_KEYS}

    def to_frame(self) -> pd.DataFrame:
        """Per-coefficient table indexed by coefficient name."""
        return pd.DataFrame(
            {
                'estimate': self.coefficients,
                'std_error': self.standard_error,
                't_value': self.t_values,
                'p_value': self.p_values,
                'importance': self.variable_importance,
            },
            index=pd.Index(self.names, name='term'),
        )

    # --- Display ---

    def summary(self) -> str:
        """
        R-style coefficient table.

        Produces:
            BOOTSTRAP AGGREGATED MODEL

            Bootstrap samples: 100 (98 accepted, 2 discarded)

                         Estimate  Std. Error   t value  Pr(>|t|)  Importance
            (Intercept)   1.23456     0.01234    100.04    <2e-16        1.00
        """
        lines = [
            "\nBOOTSTRAP AGGREGATED MODEL\n",
            f"Bootstrap samples: {self.R} "
            f"({self.n_accepted} accepted, {self.n_failed} discarded)",
            f"Observations: {self._design.n}, predictors: {self._design.p}, "
            f"df: {self.df}",
            "",
            f"{'':<14} {'Estimate':>12} {'Std. Error':>12} {'t value':>10} "
            f"{'Pr(>|t|)':>10} {'Importance':>11}",
        ]

        for name, est, se, t, pv, imp in zip(
            self.names, self.coefficients, self.standard_error,
            self.t_values, self.p_values, self.variable_importance,
        ):
            lines.append(
                f"{name:<14} {_fmt(est, '12.5f')} {_fmt(se, '12.5f')} "
                f"{_fmt(t, '10.3f')} {_fmt_p(pv)} {imp:11.2f}"
            )

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BaggingSolution(R={self.R}, k={len(self.coefficients)}, "
            f"accepted={self.n_accepted}, backend={self.backend_name!r})"
        )


def _fmt(value: float, spec: str) -> str:
    width = int(spec.split('.')[0])
    if np.isnan(value):
        return f"{'NA':>{width}}"
    return f"{value:{spec}}"


def _fmt_p(p: float) -> str:
    if np.isnan(p):
        return f"{'NA':>10}"
    if p < 2e-16:
        return f"{'<2e-16':>10}"
    return f"{p:10.4g}"
