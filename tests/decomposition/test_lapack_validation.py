"""
Validate pyschur against LAPACK through scipy.linalg.

The real Schur form is not unique (block order and the orthogonal factor
within each 2x2 block are free), so the comparison is on invariants:
the spectrum, the number of complex pairs, and for the Hessenberg
reduction the absolute values of H, which the implicit Q theorem fixes
once Q[:, 0] = e1.

Skipped when scipy is not installed.
"""

import numpy as np
import pytest

from pyschur import hessenberg, schur

scipy_linalg = pytest.importorskip("scipy.linalg")


def _random_case(seed, n):
    return np.random.default_rng(seed).standard_normal((n, n))


def _companion(coeffs):
    """Companion matrix of the monic polynomial with the given low-order coefficients."""
    n = len(coeffs)
    C = np.zeros((n, n))
    C[1:, :-1] = np.eye(n - 1)
    C[:, -1] = -np.asarray(coeffs, dtype=float)
    return C


CASES = {
    'random_5': _random_case(1, 5),
    'random_12': _random_case(2, 12),
    'random_30': _random_case(3, 30),
    'companion': _companion([1.0, -2.0, 3.0, 0.5, -1.0, 2.0]),
    'scaled': _random_case(6, 7) * 1e3,
}


def _n_complex_pairs(T):
    return int(np.count_nonzero(np.diag(T, -1)))


@pytest.mark.parametrize("name", sorted(CASES))
class TestAgainstLapack:

    def test_spectrum(self, name, assert_same_spectrum):
        A = CASES[name]
        T_ref = scipy_linalg.schur(A, output='real')[0]
        ref = np.linalg.eigvals(T_ref)
        result = schur(A)
        scale = max(np.abs(ref).max(), 1.0)
        assert_same_spectrum(result.eigenvalues, ref, atol=1e-7 * scale)

    def test_complex_pair_count(self, name):
        A = CASES[name]
        T_ref = scipy_linalg.schur(A, output='real')[0]
        result = schur(A)
        assert _n_complex_pairs(result.T) == _n_complex_pairs(T_ref)

    def test_residuals_comparable(self, name):
        A = CASES[name]
        T_ref, Z_ref = scipy_linalg.schur(A, output='real')
        ref_error = np.linalg.norm(Z_ref @ T_ref @ Z_ref.T - A) / np.linalg.norm(A)
        result = schur(A)
        assert result.reconstruction_error() <= max(100 * ref_error, 1e-13)

    def test_hessenberg_matches_up_to_signs(self, name):
        A = CASES[name]
        H_ref = scipy_linalg.hessenberg(A)
        result = hessenberg(A)
        np.testing.assert_allclose(
            np.abs(result.H), np.abs(H_ref),
            atol=1e-10 * np.linalg.norm(A),
        )
