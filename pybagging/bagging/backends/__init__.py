"""
Bagging backends.

Available backends:
    CPUBaggingBackend: sequential CPU loop
"""

from pybagging.bagging.backends.cpu import CPUBaggingBackend

__all__ = [
    "CPUBaggingBackend",
]
