"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyschur.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_francis",
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            info={"method": "francis_double_shift", "iterations": 7},
            timing={"total_seconds": 0.01, "qr_iteration": 0.008},
        )
        assert result.params.value == 1.0
        assert result.info["iterations"] == 7
        assert result.timing["qr_iteration"] == 0.008
        assert result.backend_name == "cpu_francis"

    def test_timing_none(self):
        assert _result().timing is None


class TestWarnings:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning_substring(self):
        result = _result(warnings=("exceptional shift applied 1 time(s)",))
        assert result.has_warning("exceptional")
        assert not result.has_warning("diverging")


class TestImmutability:

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)
