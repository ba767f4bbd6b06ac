"""
pybagging: bootstrap aggregation and regularized linear modeling.

Submodules:
    bagging: bootstrap aggregation of arbitrary model fitters
    regression: ordinary least squares and the lasso
    selection: SVD-based top-K feature selection
"""

__version__ = "0.1.0"

from pybagging import regression
from pybagging import selection
from pybagging import bagging
from pybagging.bagging import bagging_perform
from pybagging.regression import lasso
from pybagging.selection import top_k

__all__ = [
    "__version__",
    "bagging",
    "regression",
    "selection",
    "bagging_perform",
    "lasso",
    "top_k",
]
