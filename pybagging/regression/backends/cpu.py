"""
CPU reference backend for ordinary least squares.

Uses QR decomposition via LAPACK (through NumPy/SciPy).
"""

from typing import Any
import numpy as np

from pybagging.core.result import Result
from pybagging.core.compute.timing import Timer
from pybagging.core.compute.linalg.qr import qr_cpu, qr_solve_cpu
from pybagging.regression.design import Design
from pybagging.regression.solution import LinearParams


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Implements the Backend protocol for Design -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: Design) -> Result[LinearParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. Build the model matrix M (prepend ones if intercept)
            2. QR decomposition: M = QR
            3. Solve: β = R⁻¹ Q'y
            4. Compute residuals, fitted values, and sums of squares

        Raises:
            SingularMatrixError: If the model matrix is rank-deficient
        """
        timer = Timer()
        timer.start()

        M = design.model_matrix()
        y = design.y
        n = design.n

        with timer.section('qr_decomposition'):
            qr_result = qr_cpu(M, mode='reduced')

        with timer.section('solve'):
            coefficients = qr_solve_cpu(M, y, qr_result=qr_result)

        with timer.section('residuals'):
            fitted_values = M @ coefficients
            residuals = y - fitted_values

        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        timer.stop()

        params = LinearParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
            rank=qr_result.rank,
            df_residual=n - qr_result.rank,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': qr_result.rank,
            'intercept': design.intercept,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
