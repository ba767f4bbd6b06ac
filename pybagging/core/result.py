"""
Result envelope shared by every backend.

Each domain (bagging, regression, selection) defines a frozen parameter
payload; its backend wraps that payload in Result together with the run
metadata: counts in `info`, per-section `timing`, the `backend_name`, and
non-fatal `warnings` that the public solver re-emits as RuntimeWarning.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable output of one backend solve.

    Attributes:
        params: Domain payload (BaggingParams, LinearParams, LassoParams,
            TopKParams)
        info: Run metadata, e.g. {'R': 100, 'n_accepted': 97, 'df': 21}
        timing: Seconds per Timer section plus 'total_seconds', or None
        backend_name: Identifier such as 'cpu_bagging' or 'cpu_qr'
        warnings: Messages for degenerate but non-fatal outcomes

    Example:
        >>> Result(
        ...     params=BaggingParams(...),
        ...     info={'R': 100, 'n_accepted': 100},
        ...     timing={'total_seconds': 0.2, 'model_fits': 0.18},
        ...     backend_name='cpu_bagging',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains substring."""
        return any(substring in w for w in self.warnings)
