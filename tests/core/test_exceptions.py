"""
Tests for the pyschur exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PySchurError)
    - Diagnostic attributes on PrecisionError and ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyschur.core.exceptions import (
    ConvergenceError,
    DimensionError,
    NumericalError,
    PrecisionError,
    PySchurError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PySchurError."""

    def test_validation_error_is_pyschur_error(self):
        with pytest.raises(PySchurError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("not square")

    def test_precision_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise PrecisionError("negative precision", value=-1.0)

    def test_numerical_error_is_pyschur_error(self):
        with pytest.raises(PySchurError):
            raise NumericalError("computation failed")

    def test_convergence_error_is_pyschur_error(self):
        with pytest.raises(PySchurError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_validation_error(self):
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestPrecisionError:

    def test_value_attribute(self):
        err = PrecisionError("precision: must be non-negative, got -0.1", value=-0.1)
        assert err.value == -0.1
        assert "non-negative" in str(err)

    def test_value_defaults_to_none(self):
        assert PrecisionError("bad").value is None


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "QR iteration did not converge",
            iterations=300,
            reason="max_iterations",
            threshold=300,
            active_size=4,
        )
        assert str(err) == "QR iteration did not converge"
        assert err.iterations == 300
        assert err.reason == "max_iterations"
        assert err.threshold == 300
        assert err.active_size == 4

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=5)
        assert err.iterations == 5
        assert err.reason is None
        assert err.threshold is None
        assert err.active_size is None

    def test_iterations_required(self):
        with pytest.raises(TypeError):
            ConvergenceError("no iterations given")
