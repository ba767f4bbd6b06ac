"""
Singular value decomposition.

Thin wrapper over LAPACK's gesdd (via NumPy) returning a structured
result, used by the top-K feature selector.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pybagging.core.exceptions import NumericalError


@dataclass(frozen=True)
class SVDResult:
    """
    Result of a thin SVD, X = U diag(s) Vt.

    Attributes:
        U: Left singular vectors (n x k), k = min(n, p)
        s: Singular values in descending order (k,)
        Vt: Right singular vectors as rows (k x p)
        rank: Numerical rank from the singular values
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vt: NDArray[np.floating[Any]]
    rank: int

    @property
    def right_singular_vectors(self) -> NDArray[np.floating[Any]]:
        """Right singular vectors as columns (p x k)."""
        return self.Vt.T


def svd_cpu(X: NDArray[np.floating[Any]]) -> SVDResult:
    """
    Thin SVD using LAPACK (via NumPy).

    Raises:
        NumericalError: If the decomposition does not converge
    """
    try:
        U, s, Vt = np.linalg.svd(X, full_matrices=False)
    except np.linalg.LinAlgError as e:
        raise NumericalError(f"SVD did not converge: {e}") from e

    if len(s) > 0 and s[0] > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * s[0]
        rank = int(np.sum(s > tol))
    else:
        rank = 0

    return SVDResult(U=U, s=s, Vt=Vt, rank=rank)
