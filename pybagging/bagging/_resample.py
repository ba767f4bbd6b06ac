"""
Bootstrap resampling.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pybagging.core.exceptions import ValidationError


def bootstrap_indices(n: int, rng: np.random.Generator) -> NDArray[np.intp]:
    """
    Draw one ordinary bootstrap sample.

    Returns n indices drawn independently and uniformly from {0, ..., n-1}
    with replacement. Repeats are expected; on average about 36.8% of the
    observations are absent from any given sample.

    Raises:
        ValidationError: If n <= 0
    """
    if n <= 0:
        raise ValidationError(f"n: must be >= 1, got {n}")
    return rng.choice(n, size=n, replace=True)


def unique_fraction(n: int) -> float:
    """
    Expected fraction of distinct observations in a bootstrap sample.

    1 - (1 - 1/n)^n, which tends to 1 - 1/e ≈ 0.632.
    """
    if n <= 0:
        raise ValidationError(f"n: must be >= 1, got {n}")
    return 1.0 - (1.0 - 1.0 / n) ** n
