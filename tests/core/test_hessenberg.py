"""
Tests for HessenbergReducer.

Validates:
    - Exact zeros below the first subdiagonal
    - Orthogonal accumulator and reconstruction Q H Q' = A
    - Unitary reset and shape checks
    - Already-reduced input is left alone
"""

import numpy as np
import pytest

from pyschur.core.compute.tolerances import select_tolerance
from pyschur.core.compute.linalg.hessenberg import HessenbergReducer
from pyschur.core.exceptions import DimensionError


def _reduce(A, unitary=None):
    H = np.array(A, dtype=np.float64, copy=True)
    Q = np.empty_like(H) if unitary is None else unitary
    reducer = HessenbergReducer()
    reducer.run(H, Q)
    return H, Q, reducer


class TestReduction:

    @pytest.mark.parametrize("n", [3, 4, 7, 12])
    def test_hessenberg_structure_is_exact(self, rng, n):
        H, _, _ = _reduce(rng.standard_normal((n, n)))
        assert not np.any(np.tril(H, -2))

    @pytest.mark.parametrize("n", [3, 5, 10])
    def test_reconstruction(self, rng, n):
        A = rng.standard_normal((n, n))
        H, Q, _ = _reduce(A)
        np.testing.assert_allclose(Q.T @ Q, np.eye(n), atol=1e-13)
        np.testing.assert_allclose(Q @ H @ Q.T, A, atol=1e-12)

    def test_first_row_and_column_of_q(self, rng):
        """Reflectors never touch index 0, so Q e1 = e1."""
        _, Q, _ = _reduce(rng.standard_normal((5, 5)))
        np.testing.assert_array_equal(Q[:, 0], np.eye(5)[:, 0])
        np.testing.assert_array_equal(Q[0, :], np.eye(5)[0, :])

    def test_reflector_count(self, rng):
        _, _, reducer = _reduce(rng.standard_normal((6, 6)))
        assert reducer.n_reflectors == 4

    def test_float32_stays_float32(self, rng):
        A = rng.standard_normal((6, 6)).astype(np.float32)
        H = A.copy()
        Q = np.empty_like(H)
        HessenbergReducer().run(H, Q)
        tol = select_tolerance(H.dtype)
        assert H.dtype == np.float32
        assert Q.dtype == np.float32
        np.testing.assert_allclose(Q.T @ Q, np.eye(6), atol=tol.atol)
        np.testing.assert_allclose(Q @ H @ Q.T, A, rtol=tol.rtol, atol=10 * tol.atol)

    def test_preserves_eigenvalues(self, rng, assert_same_spectrum):
        A = rng.standard_normal((6, 6))
        H, _, _ = _reduce(A)
        assert_same_spectrum(np.linalg.eigvals(H), np.linalg.eigvals(A), atol=1e-9)


class TestAlreadyReduced:

    def test_upper_triangular_untouched(self, rng):
        A = np.triu(rng.standard_normal((5, 5)))
        H, Q, reducer = _reduce(A)
        np.testing.assert_array_equal(H, A)
        np.testing.assert_array_equal(Q, np.eye(5))
        assert reducer.n_reflectors == 0

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_small_sizes_are_noops(self, rng, n):
        A = rng.standard_normal((n, n))
        H, Q, _ = _reduce(A)
        np.testing.assert_array_equal(H, A)
        np.testing.assert_array_equal(Q, np.eye(n))

    def test_unitary_reset_to_identity(self, rng):
        A = np.triu(rng.standard_normal((4, 4)))
        Q = np.full((4, 4), 7.0)
        _reduce(A, unitary=Q)
        np.testing.assert_array_equal(Q, np.eye(4))


class TestShapeChecks:

    def test_non_square_matrix(self):
        with pytest.raises(DimensionError, match="square"):
            HessenbergReducer().run(np.zeros((3, 4)), np.zeros((3, 3)))

    def test_unitary_shape_mismatch(self):
        with pytest.raises(DimensionError, match="unitary"):
            HessenbergReducer().run(np.zeros((3, 3)), np.zeros((2, 2)))
