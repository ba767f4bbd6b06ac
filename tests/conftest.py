"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Simple regression dataset for basic tests."""
    n, p = 100, 3
    X = rng.standard_normal((n, p))
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def small_tabular_data(rng):
    """32 observations of 10 predictors, the size of a classic car dataset."""
    n, p = 32, 10
    X = rng.standard_normal((n, p))
    beta_true = np.array([3.0, -1.5, 0.0, 0.0, 2.0, 0.0, 0.0, 0.5, 0.0, 0.0])
    y = 20.0 + X @ beta_true + rng.standard_normal(n)
    return X, y, beta_true


@pytest.fixture
def sparse_regression_data(rng):
    """Two strong signals among eight predictors."""
    n, p = 120, 8
    X = rng.standard_normal((n, p))
    beta_true = np.zeros(p)
    beta_true[0] = 4.0
    beta_true[3] = -3.0
    y = 1.0 + X @ beta_true + rng.standard_normal(n) * 0.5
    return X, y, beta_true
