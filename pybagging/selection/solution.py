"""
Solution types for SVD-based feature selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pybagging.core.result import Result


@dataclass(frozen=True)
class TopKParams:
    """
    Parameter payload for top-K selection.

    - indices: selected column indices, best first
    - scores: per-predictor score, shape (p,)
    - right_singular_vectors: V, shape (p, min(n, p))
    - singular_values: shape (min(n, p),)
    """
    indices: NDArray[np.intp]
    scores: NDArray[np.floating[Any]]
    right_singular_vectors: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    k: int
    n_components: int


@dataclass
class TopKSolution:
    """User-facing top-K selection results."""
    _result: Result[TopKParams]
    _names: tuple[str, ...]

    @property
    def indices(self) -> NDArray[np.intp]:
        """Selected column indices, highest score first."""
        return self._result.params.indices

    @property
    def names(self) -> tuple[str, ...]:
        """Selected predictor names, highest score first."""
        return tuple(self._names[j] for j in self.indices)

    @property
    def scores(self) -> NDArray[np.floating[Any]]:
        """Score of every predictor, in column order."""
        return self._result.params.scores

    @property
    def right_singular_vectors(self) -> NDArray[np.floating[Any]]:
        return self._result.params.right_singular_vectors

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.singular_values

    @property
    def explained_variance_ratio(self) -> NDArray[np.floating[Any]]:
        """Share of total squared singular value mass per component."""
        s2 = self.singular_values ** 2
        total = s2.sum()
        if total == 0:
            return np.zeros_like(s2)
        return s2 / total

    @property
    def k(self) -> int:
        return self._result.params.k

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        n_comp = self._result.params.n_components
        evr = self.explained_variance_ratio[:n_comp].sum()
        lines = [
            "Top-K Feature Selection (SVD)",
            "=" * 44,
            f"Components used: {n_comp} ({evr:.1%} of variance)",
            "",
            f"{'Rank':>4}  {'Predictor':<20} {'Score':>14}",
            "-" * 44,
        ]
        for rank, j in enumerate(self.indices, start=1):
            lines.append(f"{rank:>4}  {self._names[j]:<20} {self.scores[j]:14.6g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TopKSolution(k={self.k}, names={self.names!r})"
