"""
Tests for top_k() SVD-based feature selection.
"""

import numpy as np
import pandas as pd
import pytest

from pybagging.selection import top_k, TopKSolution
from pybagging.core.exceptions import ValidationError


@pytest.fixture
def dominant_data(rng):
    """Column 2 carries far more variance than the others."""
    n = 200
    X = rng.standard_normal((n, 5)) * 0.1
    X[:, 2] = rng.standard_normal(n) * 10.0
    X[:, 4] = rng.standard_normal(n) * 3.0
    return X


class TestTopKBasic:

    def test_returns_solution(self, dominant_data):
        result = top_k(dominant_data, 2)
        assert isinstance(result, TopKSolution)
        assert result.k == 2
        assert result.indices.shape == (2,)
        assert result.scores.shape == (5,)
        assert result.backend_name == 'cpu_svd'

    def test_dominant_column_first(self, dominant_data):
        result = top_k(dominant_data, 1)
        assert result.indices.tolist() == [2]
        assert result.names == ('x3',)

    def test_two_components_pick_both_strong_columns(self, dominant_data):
        result = top_k(dominant_data, 2, n_components=2)
        assert result.indices.tolist() == [2, 4]

    def test_scores_from_decomposition(self, dominant_data):
        result = top_k(dominant_data, 3, n_components=2)
        V = result.right_singular_vectors[:, :2]
        s = result.singular_values[:2]
        np.testing.assert_allclose(result.scores, (V ** 2) @ (s ** 2))

    def test_all_components_give_column_sum_of_squares(self, dominant_data):
        """Using every component, the score is the centered column sum of squares."""
        result = top_k(dominant_data, 5, n_components=5)
        Z = dominant_data - dominant_data.mean(axis=0)
        np.testing.assert_allclose(result.scores, (Z ** 2).sum(axis=0), rtol=1e-8)

    def test_k_equals_p_is_full_ranking(self, dominant_data):
        result = top_k(dominant_data, 5)
        assert sorted(result.indices.tolist()) == [0, 1, 2, 3, 4]
        assert np.all(np.diff(result.scores[result.indices]) <= 0)

    def test_scale_equalizes_units(self, rng):
        n = 300
        z = rng.standard_normal(n)
        X = np.column_stack([
            z * 1000.0,
            z + 0.01 * rng.standard_normal(n),
            rng.standard_normal(n),
        ])
        unscaled = top_k(X, 1)
        scaled = top_k(X, 2, scale=True)
        assert unscaled.indices.tolist() == [0]
        assert sorted(scaled.indices.tolist()) == [0, 1]

    def test_dataframe_names(self, dominant_data):
        df = pd.DataFrame(dominant_data, columns=list("abcde"))
        result = top_k(df, 2, n_components=2)
        assert result.names == ('c', 'e')

    def test_explained_variance_ratio(self, dominant_data):
        result = top_k(dominant_data, 1)
        evr = result.explained_variance_ratio
        assert evr.sum() == pytest.approx(1.0)
        assert evr[0] > 0.8

    def test_summary_and_repr(self, dominant_data):
        result = top_k(dominant_data, 2)
        text = result.summary()
        assert "Top-K Feature Selection" in text
        assert "x3" in text
        assert repr(result).startswith("TopKSolution(k=2")


class TestTopKValidation:

    @pytest.mark.parametrize("k", [0, 6])
    def test_k_out_of_range(self, dominant_data, k):
        with pytest.raises(ValidationError, match="k"):
            top_k(dominant_data, k)

    def test_n_components_out_of_range(self, rng):
        X = rng.standard_normal((3, 5))
        with pytest.raises(ValidationError, match="n_components"):
            top_k(X, 1, n_components=4)

    def test_constant_column_cannot_be_scaled(self, rng):
        X = rng.standard_normal((20, 3))
        X[:, 1] = 4.0
        with pytest.raises(ValidationError, match="zero variance"):
            top_k(X, 1, scale=True)

    def test_non_finite(self, dominant_data):
        X = dominant_data.copy()
        X[3, 3] = np.inf
        with pytest.raises(ValidationError, match="Inf"):
            top_k(X, 1)
