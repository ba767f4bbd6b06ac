"""
Tests for BaggingSolution: mapping access, intervals, tabular and text output.
"""

import numpy as np
import pandas as pd
import pytest

from pybagging.bagging import SUMMARY_KEYS, OLSFitter, bagging_perform
from pybagging.core.exceptions import ValidationError


@pytest.fixture
def solution(simple_regression_data):
    X, y, _ = simple_regression_data
    return bagging_perform(y, X, OLSFitter(), R=40, seed=3)


def constant_fit(y, X):
    return np.array([2.0, 0.0]), np.full(len(y), 2.0)


# ═══════════════════════════════════════════════════════════════════════
# Mapping protocol
# ═══════════════════════════════════════════════════════════════════════


class TestMapping:

    def test_keys_in_order(self, solution):
        assert tuple(solution) == SUMMARY_KEYS
        assert len(solution) == 6

    def test_getitem_matches_properties(self, solution):
        np.testing.assert_array_equal(solution['coefficients'], solution.coefficients)
        np.testing.assert_array_equal(solution['p_values'], solution.p_values)
        np.testing.assert_array_equal(
            solution['variable_importance'], solution.variable_importance,
        )

    def test_unknown_key(self, solution):
        with pytest.raises(KeyError, match="coefficient_samples"):
            solution['coefficient_samples']

    def test_dict_conversion(self, solution):
        d = dict(solution)
        assert set(d) == set(SUMMARY_KEYS)
        assert solution.to_dict().keys() == d.keys()

    def test_get_default(self, solution):
        assert solution.get('nope') is None
        assert 'predictions' in solution


# ═══════════════════════════════════════════════════════════════════════
# Percentile intervals
# ═══════════════════════════════════════════════════════════════════════


class TestConfInt:

    def test_shape_and_order(self, solution):
        ci = solution.conf_int()
        assert ci.shape == (4, 2)
        assert np.all(ci[:, 0] <= ci[:, 1])

    def test_contains_mean(self, solution):
        ci = solution.conf_int(0.99)
        assert np.all(ci[:, 0] <= solution.coefficients)
        assert np.all(solution.coefficients <= ci[:, 1])

    def test_wider_at_higher_level(self, solution):
        narrow = solution.conf_int(0.5)
        wide = solution.conf_int(0.95)
        assert np.all(wide[:, 0] <= narrow[:, 0])
        assert np.all(wide[:, 1] >= narrow[:, 1])

    def test_matches_quantiles(self, solution):
        ci = solution.conf_int(0.9)
        samples = solution.coefficient_samples
        np.testing.assert_allclose(ci[:, 0], np.quantile(samples, 0.05, axis=0))
        np.testing.assert_allclose(ci[:, 1], np.quantile(samples, 0.95, axis=0))

    def test_degenerate_interval(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = bagging_perform(y, X, constant_fit, R=10, seed=0)
        np.testing.assert_array_equal(result.conf_int(), [[2.0, 2.0], [0.0, 0.0]])

    @pytest.mark.parametrize("level", [0.0, 1.0, 1.5, -0.1])
    def test_invalid_level(self, solution, level):
        with pytest.raises(ValidationError, match="level"):
            solution.conf_int(level)


# ═══════════════════════════════════════════════════════════════════════
# DataFrame and text output
# ═══════════════════════════════════════════════════════════════════════


class TestToFrame:

    def test_columns_and_index(self, solution):
        df = solution.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == [
            'estimate', 'std_error', 't_value', 'p_value', 'importance',
        ]
        assert df.index.name == 'term'
        assert list(df.index) == ['(Intercept)', 'x1', 'x2', 'x3']

    def test_values(self, solution):
        df = solution.to_frame()
        np.testing.assert_array_equal(df['estimate'].to_numpy(), solution.coefficients)
        np.testing.assert_array_equal(
            df['importance'].to_numpy(), solution.variable_importance,
        )

    def test_generic_names_when_k_unrelated_to_p(self, simple_regression_data):
        X, y, _ = simple_regression_data
        fit = lambda y_b, X_b: (np.ones(7), np.zeros(len(y_b)))
        result = bagging_perform(y, X, fit, R=3, seed=0)
        assert result.names == tuple(f"b{j}" for j in range(7))


class TestSummary:

    def test_contains_header_and_terms(self, solution):
        text = solution.summary()
        assert "BOOTSTRAP AGGREGATED MODEL" in text
        assert "Bootstrap samples: 40 (40 accepted, 0 discarded)" in text
        for name in solution.names:
            assert name in text
        assert "Importance" in text

    def test_na_for_undefined_se(self, simple_regression_data):
        X, y, _ = simple_regression_data
        with pytest.warns(RuntimeWarning):
            result = bagging_perform(y, X, OLSFitter(), R=1, seed=0)
        text = result.summary()
        assert "NA" in text
        assert "Warnings:" in text

    def test_repr(self, solution):
        assert repr(solution) == (
            "BaggingSolution(R=40, k=4, accepted=40, backend='cpu_bagging')"
        )
