"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_positive_int: positive integer parameters
"""

import numpy as np
import pandas as pd
import pytest

from pybagging.core.exceptions import DimensionError, ValidationError
from pybagging.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_ndim,
    check_positive_int,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "X")
        assert np.issubdtype(result.dtype, np.floating)

    def test_bool_promoted_to_float(self):
        result = check_array([True, False], "X")
        np.testing.assert_array_equal(result, [1.0, 0.0])

    def test_dataframe_accepted(self):
        df = pd.DataFrame({"a": [1, 2], "b": [3.0, 4.0]})
        result = check_array(df, "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite rejects NaN and Inf values."""

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0, 3.0]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "X")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, -np.inf, 3.0]), "X")

    def test_mixed_nan_inf(self):
        with pytest.raises(ValidationError, match="2 NaN.*1 Inf"):
            check_finite(np.array([np.nan, np.inf, np.nan]), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDims:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "y")

    def test_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "y")

    def test_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_ndim_3(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "T")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_2d(np.zeros(3), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_matching_lengths_pass(self):
        check_consistent_length(np.zeros(5), np.zeros((5, 2)), names=("y", "X"))

    def test_mismatch_rejected(self):
        with pytest.raises(DimensionError, match="y=5, X=4"):
            check_consistent_length(np.zeros(5), np.zeros((4, 2)), names=("y", "X"))

    def test_names_count_must_match(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(5), np.zeros(5), names=("y",))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(5), names=("y",))


# ═══════════════════════════════════════════════════════════════════════
# check_min_samples / check_positive_int
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMinSamples:

    def test_enough_samples(self):
        check_min_samples(np.zeros(3), 1, "y")

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least 1 samples, got 0"):
            check_min_samples(np.zeros(0), 1, "y")


class TestCheckPositiveInt:

    def test_returns_int(self):
        assert check_positive_int(np.int64(5), "R") == 5
        assert type(check_positive_int(np.int64(5), "R")) is int

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be >= 1"):
            check_positive_int(value, "R")

    @pytest.mark.parametrize("value", [1.5, "3", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="expected a positive integer"):
            check_positive_int(value, "R")
