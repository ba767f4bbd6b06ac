"""
Top-K feature selection via singular value decomposition.

Each predictor is scored by how much of the leading principal directions
it carries:

    score_j = Σ_{c < m} s_c² V_jc²

where V holds the right singular vectors of the (centered, optionally
scaled) predictor matrix, s the singular values and m = n_components.
With m = 1 this ranks predictors by their absolute loading on the first
principal direction.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pybagging.core.exceptions import ValidationError
from pybagging.core.result import Result
from pybagging.core.compute.timing import Timer
from pybagging.core.compute.linalg.svd import svd_cpu
from pybagging.core.validation import (
    check_array,
    check_2d,
    check_finite,
    check_min_samples,
    check_positive_int,
)
from pybagging.selection.solution import TopKParams, TopKSolution


def top_k(
    X: ArrayLike,
    k: int,
    *,
    center: bool = True,
    scale: bool = False,
    n_components: int = 1,
) -> TopKSolution:
    """
    Select the k predictors that dominate the leading singular directions.

    Args:
        X: Predictor matrix (n x p), array-like or pandas DataFrame.
        k: Number of predictors to keep, 1 <= k <= p.
        center: Subtract column means before decomposing.
        scale: Divide columns by their standard deviation (after centering).
        n_components: Number of leading right singular vectors used for
            scoring, 1 <= n_components <= min(n, p).

    Returns:
        TopKSolution with selected indices/names and the decomposition.

    Raises:
        ValidationError: If inputs or k / n_components are invalid, or a
            constant column is scaled.
    """
    names = None
    if hasattr(X, 'columns'):
        names = tuple(str(c) for c in X.columns)

    X_arr = check_array(X, 'X')
    if X_arr.ndim == 1:
        X_arr = X_arr.reshape(-1, 1)
    check_2d(X_arr, 'X')
    check_finite(X_arr, 'X')
    check_min_samples(X_arr, 1, 'X')

    n, p = X_arr.shape
    if names is None:
        names = tuple(f"x{j + 1}" for j in range(p))

    k = check_positive_int(k, 'k')
    if k > p:
        raise ValidationError(f"k: cannot exceed number of predictors p={p}, got {k}")
    n_components = check_positive_int(n_components, 'n_components')
    if n_components > min(n, p):
        raise ValidationError(
            f"n_components: cannot exceed min(n, p)={min(n, p)}, got {n_components}"
        )

    timer = Timer()
    timer.start()

    with timer.section('preprocess'):
        Z = X_arr - X_arr.mean(axis=0) if center else X_arr.copy()
        if scale:
            sd = Z.std(axis=0, ddof=1) if n > 1 else np.zeros(p)
            constant = np.flatnonzero(sd == 0)
            if len(constant) > 0:
                raise ValidationError(
                    f"X: columns {constant.tolist()} have zero variance and cannot be scaled"
                )
            Z = Z / sd

    with timer.section('svd'):
        svd = svd_cpu(Z)

    with timer.section('scoring'):
        V = svd.right_singular_vectors[:, :n_components]
        s2 = svd.s[:n_components] ** 2
        scores = (V ** 2) @ s2
        order = np.argsort(-scores, kind='stable')
        indices = order[:k]

    timer.stop()

    params = TopKParams(
        indices=indices,
        scores=scores,
        right_singular_vectors=svd.right_singular_vectors,
        singular_values=svd.s,
        k=k,
        n_components=n_components,
    )
    result = Result(
        params=params,
        info={
            'n': n,
            'p': p,
            'rank': svd.rank,
            'center': center,
            'scale': scale,
        },
        timing=timer.result(),
        backend_name='cpu_svd',
    )
    return TopKSolution(_result=result, _names=names)
