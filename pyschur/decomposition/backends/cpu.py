"""
CPU reference backends for the real Schur and Hessenberg decompositions.

SchurEngine runs the classical two-stage pipeline:
    1. Householder reduction to upper Hessenberg form
    2. Implicit double-shift (Francis) QR iteration with deflation

Everything happens in place on two (n, n) buffers: the working matrix,
which ends up holding the Schur form T, and the orthogonal accumulator Q.
Sub-blocks are numpy views into those buffers, so no reflector application
copies the matrix.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyschur.core.result import Result
from pyschur.core.exceptions import ConvergenceError, ValidationError
from pyschur.core.compute.timing import Timer
from pyschur.core.compute.tolerances import (
    EXCEPTIONAL_SHIFT_PERIOD,
    default_max_iterations,
    default_precision,
)
from pyschur.core.compute.linalg.householder import Reflector
from pyschur.core.compute.linalg.hessenberg import HessenbergReducer
from pyschur.core.validation import (
    check_array,
    check_buffer,
    check_finite,
    check_max_iterations,
    check_precision,
    check_square,
)
from pyschur.decomposition._blocks import (
    diagonal_blocks,
    schur_eigenvalues,
    split_real_block,
)
from pyschur.decomposition._shifts import (
    exceptional_shift,
    francis_shift,
    seed_column,
)
from pyschur.decomposition.design import SchurDesign
from pyschur.decomposition.solution import HessenbergParams, SchurParams


class _FrancisIteration:
    """
    Deflating double-shift QR iteration on a Hessenberg matrix.

    One instance per run: it owns cur_size (the index of the last row of
    the unconverged leading block) and the counters reported in
    Result.info. Rows and columns past cur_size are frozen; sweeps only
    read them through the full-width left reflections that keep T's
    off-diagonal blocks consistent.
    """

    def __init__(
        self,
        H: NDArray[np.floating[Any]],
        Q: NDArray[np.floating[Any]],
        precision: float,
        max_iterations: int,
        split_real: bool = True,
    ):
        self.H = H
        self.Q = Q
        self.n = H.shape[0]
        self.precision = precision
        self.max_iterations = max_iterations
        self.split_real = split_real
        self.cur_size = self.n - 1
        self.iterations = 0
        self.exceptional_shifts = 0
        self.deflations: list[int] = []
        self.blocks_split = 0
        self._since_deflation = 0
        # Fallback scale for the deflation test on zero diagonals
        self._scale = float(np.linalg.norm(H))

    def run(self) -> None:
        """
        Iterate until the active block is at most 2x2.

        Raises:
            ConvergenceError: If the macro-step budget is exhausted
        """
        self.try_to_deflate()
        while self.cur_size >= 2:
            if self.iterations >= self.max_iterations:
                raise ConvergenceError(
                    f"QR iteration did not converge after {self.iterations} iterations "
                    f"(rows 0..{self.cur_size} still unreduced)",
                    iterations=self.iterations,
                    reason='max_iterations',
                    threshold=self.max_iterations,
                    active_size=self.cur_size,
                )
            self.make_qr_iteration()
            self.try_to_deflate()

    # === Deflation ===

    def negligible(self, i: int) -> bool:
        """Is H[i, i-1] numerically zero relative to its diagonal neighbours?"""
        H = self.H
        scale = abs(H[i, i]) + abs(H[i - 1, i - 1])
        if scale == 0:
            scale = self._scale
        return abs(H[i, i - 1]) <= self.precision * scale

    def try_to_deflate(self) -> None:
        while self.cur_size >= 1:
            if self.negligible(self.cur_size):
                self.decrement_cur_size(1)
            elif self.cur_size == 1 or self.negligible(self.cur_size - 1):
                if not self.deflate_block():
                    break
            else:
                break

    def deflate_block(self) -> bool:
        """
        Deflate the converged 2x2 block in rows cur_size-1 .. cur_size.

        With real eigenvalues (and splitting enabled) the block is
        triangularized on the spot and recorded as two single-row
        deflations. A complex pair is recorded as one decrement of 2. The
        leading block at cur_size == 1 stays active unless it splits.

        Returns:
            True if cur_size was decremented
        """
        top = self.cur_size - 1
        if self.split_real and split_real_block(self.H, self.Q, top):
            self.blocks_split += 1
            self.decrement_cur_size(1)
            if top > 0:
                self.decrement_cur_size(1)
            return True
        if top == 0:
            return False
        self.decrement_cur_size(2)
        return True

    def decrement_cur_size(self, decrement: int) -> None:
        self.H[self.cur_size + 1 - decrement, self.cur_size - decrement] = 0.0
        self.cur_size -= decrement
        self.deflations.append(decrement)
        self._since_deflation = 0

    def window_start(self) -> int:
        """
        Top row of the unreduced window ending at cur_size.

        A negligible interior subdiagonal is zeroed and splits the window;
        a bulge cannot be chased across an exact zero.
        """
        for k in range(self.cur_size - 2, 0, -1):
            if self.negligible(k):
                self.H[k, k - 1] = 0.0
                return k
        return 0

    # === QR macro-step ===

    def make_qr_iteration(self) -> None:
        lo = self.window_start()
        self._since_deflation += 1
        if self._since_deflation % EXCEPTIONAL_SHIFT_PERIOD == 0:
            trace, det = exceptional_shift(self.H, self.cur_size)
            self.exceptional_shifts += 1
        else:
            trace, det = francis_shift(self.H, self.cur_size)
        self.set_matching_column(lo, trace, det)
        self.restore_hessenberg_form(lo)
        self.iterations += 1

    def set_matching_column(self, lo: int, trace: float, det: float) -> None:
        """Introduce the bulge with a reflector built from the shift polynomial."""
        reflector = Reflector(seed_column(self.H, lo, trace, det))
        self.reflect(reflector, lo, lo)

    def restore_hessenberg_form(self, lo: int) -> None:
        """Chase the bulge down to the bottom of the window."""
        H = self.H
        for step in range(lo, self.cur_size - 2):
            reflector = Reflector(H[step + 1:step + 4, step])
            self.reflect(reflector, step + 1, step)
            H[step + 2:step + 4, step] = 0.0
        step = self.cur_size - 2
        reflector = Reflector(H[step + 1:step + 3, step])
        self.reflect(reflector, step + 1, step)
        H[step + 2, step] = 0.0

    def reflect(self, reflector: Reflector, row: int, col: int) -> None:
        """
        Apply a reflector acting on rows/columns row .. row+length-1.

        Left: those rows, columns col..n-1 (frozen columns included).
        Right: rows 0..min(cur_size, row+length), the only rows that can be
        nonzero in those columns. Accumulated into Q from the right.
        """
        length = reflector.length
        last = min(self.cur_size, row + length)
        reflector.reflect_left(self.H[row:row + length, col:])
        reflector.reflect_right(self.H[:last + 1, row:row + length])
        reflector.reflect_right(self.Q[:, row:row + length])


class SchurEngine:
    """
    CPU backend for the real Schur decomposition A = Q T Q'.

    Implements the Backend protocol for SchurDesign -> SchurParams and
    also exposes run() for callers that want plain arrays or supply their
    own output buffers.

    Configuration:
        precision: Relative deflation threshold (non-negative). None means
            machine epsilon of the working dtype.
        max_iterations: Total macro-step budget. None means 30 * max(10, n).
        standardize: Split each 2x2 block with real eigenvalues as it deflates.
    """

    def __init__(
        self,
        precision: float | None = None,
        *,
        max_iterations: int | None = None,
        standardize: bool = True,
    ):
        self._precision = None if precision is None else check_precision(precision)
        self._max_iterations = (
            None if max_iterations is None else check_max_iterations(max_iterations)
        )
        self._standardize = standardize

    @property
    def name(self) -> str:
        return 'cpu_francis'

    @property
    def precision(self) -> float | None:
        return self._precision

    def set_precision(self, precision: float) -> None:
        """
        Reconfigure the deflation threshold.

        Raises:
            PrecisionError: If precision is negative or not finite
        """
        self._precision = check_precision(precision)

    def get_precision(self) -> float | None:
        """Configured precision, or None when machine epsilon is used."""
        return self._precision

    def run(
        self,
        matrix: ArrayLike,
        *,
        schur_form: NDArray[np.floating[Any]] | None = None,
        unitary: NDArray[np.floating[Any]] | None = None,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        Compute T and Q with A = Q @ T @ Q.T.

        The input is copied once into `schur_form`; it is never modified.
        Output buffers are allocated when not supplied. Every precondition
        is checked before either buffer is written.

        Args:
            matrix: Square real matrix
            schur_form: Optional (n, n) float buffer receiving T
            unitary: Optional (n, n) float buffer receiving Q

        Returns:
            (T, Q), the supplied buffers when given

        Raises:
            DimensionError: If matrix is not square or a buffer has the wrong shape
            ValidationError: If matrix is not real and finite, or buffers overlap
            ConvergenceError: If the iteration budget is exhausted
        """
        A = check_array(matrix, 'matrix')
        check_square(A, 'matrix')
        check_finite(A, 'matrix')
        T, Q = self._prepare_buffers(A, schur_form, unitary)
        self._decompose(A, T, Q, Timer())
        return T, Q

    def solve(self, design: SchurDesign) -> Result[SchurParams]:
        """
        Decompose a validated design.

        Algorithm:
            1. Copy A into the working matrix
            2. Householder reduction to Hessenberg form, Q initialized to I
            3. Francis double-shift sweeps with deflation until cur_size < 2,
               splitting real 2x2 blocks as they deflate (if enabled)

        Args:
            design: Validated square design

        Returns:
            Result containing SchurParams

        Raises:
            ConvergenceError: If the iteration budget is exhausted
        """
        timer = Timer()
        timer.start()

        T, Q = self._prepare_buffers(design.A, None, None)
        info = self._decompose(design.A, T, Q, timer)

        with timer.section('eigenvalues'):
            eigenvalues = schur_eigenvalues(T)
            blocks = tuple(diagonal_blocks(T))

        timer.stop()

        warnings_list = []
        if info['exceptional_shifts']:
            warnings_list.append(
                f"exceptional shift applied {info['exceptional_shifts']} time(s) "
                f"to break stagnation"
            )

        params = SchurParams(T=T, Q=Q, eigenvalues=eigenvalues, blocks=blocks)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # === Internals ===

    def _prepare_buffers(
        self,
        A: NDArray[np.floating[Any]],
        schur_form: NDArray[np.floating[Any]] | None,
        unitary: NDArray[np.floating[Any]] | None,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        n = A.shape[0]
        if schur_form is None:
            schur_form = np.empty((n, n), dtype=A.dtype)
        else:
            check_buffer(schur_form, (n, n), 'schur_form')
        if unitary is None:
            unitary = np.empty((n, n), dtype=schur_form.dtype)
        else:
            check_buffer(unitary, (n, n), 'unitary')
        if np.shares_memory(schur_form, unitary):
            raise ValidationError("schur_form and unitary must not share memory")
        return schur_form, unitary

    def _decompose(
        self,
        A: NDArray[np.floating[Any]],
        T: NDArray[np.floating[Any]],
        Q: NDArray[np.floating[Any]],
        timer: Timer,
    ) -> dict[str, Any]:
        """Run the pipeline on prepared buffers and return the info dict."""
        n = A.shape[0]
        precision = (
            self._precision if self._precision is not None
            else default_precision(T.dtype)
        )
        max_iterations = (
            self._max_iterations if self._max_iterations is not None
            else default_max_iterations(n)
        )

        with timer.section('copy'):
            T[...] = A

        with timer.section('hessenberg'):
            reducer = HessenbergReducer()
            reducer.run(T, Q)

        iteration = _FrancisIteration(
            T, Q, precision, max_iterations, split_real=self._standardize,
        )
        with timer.section('qr_iteration'):
            iteration.run()

        return {
            'method': 'francis_double_shift',
            'precision': precision,
            'max_iterations': max_iterations,
            'iterations': iteration.iterations,
            'deflations': list(iteration.deflations),
            'exceptional_shifts': iteration.exceptional_shifts,
            'active_size': iteration.cur_size,
            'hessenberg_reflectors': reducer.n_reflectors,
            'blocks_split': iteration.blocks_split,
        }


class CPUHessenbergBackend:
    """CPU backend for the Hessenberg decomposition A = Q H Q'."""

    @property
    def name(self) -> str:
        return 'cpu_householder'

    def solve(self, design: SchurDesign) -> Result[HessenbergParams]:
        timer = Timer()
        timer.start()

        n = design.n
        H = np.array(design.A, copy=True)
        Q = np.empty((n, n), dtype=H.dtype)

        with timer.section('hessenberg'):
            reducer = HessenbergReducer()
            reducer.run(H, Q)

        timer.stop()

        return Result(
            params=HessenbergParams(H=H, Q=Q),
            info={'method': 'householder', 'reflectors': reducer.n_reflectors},
            timing=timer.result(),
            backend_name=self.name,
        )
