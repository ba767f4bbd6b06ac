"""
Feature selection.

Usage:
    from pybagging.selection import top_k

    result = top_k(X, k=3)
    result.names     # three predictors dominating the first singular direction
"""

from pybagging.selection.solvers import top_k
from pybagging.selection.solution import TopKSolution, TopKParams

__all__ = [
    "top_k",
    "TopKSolution",
    "TopKParams",
]
