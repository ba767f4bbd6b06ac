"""
QR decomposition and least squares solve.

LAPACK (via NumPy/SciPy) QR used by the ordinary least squares backend.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pybagging.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR, 'complete' for full QR

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)

    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R.max() > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R.max()
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    qr_result: QRResult | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Solve least squares via QR decomposition.

    Solves min_β ||y - Xβ||² as β = R⁻¹ Q'y.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)
        qr_result: Precomputed decomposition of X, if available

    Returns:
        Coefficient vector β (p,)

    Raises:
        SingularMatrixError: If X is rank-deficient (includes n < p)
    """
    n, p = X.shape
    if qr_result is None:
        qr_result = qr_cpu(X, mode='reduced')

    if qr_result.rank < p:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: rank={qr_result.rank}, expected={p}. "
            f"This indicates perfect multicollinearity or too few observations.",
            matrix_name='X',
            rank=qr_result.rank,
            expected_rank=p,
        )

    Qty = qr_result.Q.T @ y
    return solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)
