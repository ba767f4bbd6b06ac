"""
Regression backends.

Available backends:
    CPUQRBackend: ordinary least squares via QR decomposition
    CPULassoBackend: lasso via scikit-learn coordinate descent
"""

from pybagging.regression.backends.cpu import CPUQRBackend
from pybagging.regression.backends.cpu_lasso import CPULassoBackend

__all__ = [
    "CPUQRBackend",
    "CPULassoBackend",
]
