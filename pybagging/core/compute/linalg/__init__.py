"""
Linear algebra kernels for pybagging.

All functions use NumPy/SciPy (LAPACK under the hood), return a
structured result dataclass, and raise immediately with clear messages.

Submodules:
    qr: QR decomposition and least squares solve
    svd: Singular value decomposition
"""

from pybagging.core.compute.linalg.qr import QRResult, qr_cpu, qr_solve_cpu
from pybagging.core.compute.linalg.svd import SVDResult, svd_cpu

__all__ = [
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
    "SVDResult",
    "svd_cpu",
]
