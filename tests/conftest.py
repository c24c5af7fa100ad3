"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def rotation_plus_real():
    """[[0,-1,0],[1,0,0],[0,0,2]]: eigenvalues ±i and 2."""
    return np.array([
        [0.0, -1.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 2.0],
    ])


@pytest.fixture
def separated_real_spectrum(rng):
    """4x4 matrix similar to diag(1, 2, 4, 8) through a well-conditioned basis."""
    V = np.eye(4) + 0.2 * rng.standard_normal((4, 4))
    D = np.diag([1.0, 2.0, 4.0, 8.0])
    return V @ D @ np.linalg.inv(V), np.array([1.0, 2.0, 4.0, 8.0])


def _assert_same_spectrum(actual, expected, atol):
    """Greedy nearest-neighbour matching of two eigenvalue multisets."""
    actual = list(np.asarray(actual, dtype=np.complex128))
    expected = np.asarray(expected, dtype=np.complex128)
    assert len(actual) == len(expected)
    for lam in expected:
        distances = [abs(lam - mu) for mu in actual]
        k = int(np.argmin(distances))
        assert distances[k] <= atol, f"eigenvalue {lam} not found (closest {actual[k]})"
        actual.pop(k)


@pytest.fixture
def assert_same_spectrum():
    """Spectrum comparison that does not depend on eigenvalue ordering."""
    return _assert_same_spectrum
