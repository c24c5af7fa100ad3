"""
Tests for timing utilities and tolerance defaults.
"""

import time

import numpy as np
import pytest

from pyschur.core.compute.timing import Timer
from pyschur.core.compute.tolerances import (
    FP32,
    FP64,
    default_max_iterations,
    default_precision,
    residual_tolerance,
    select_tolerance,
)


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(2):
            with timer.section('work'):
                time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result['work'] >= 0.002
        assert result['total_seconds'] >= result['work']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    def test_default_precision_is_eps(self):
        assert default_precision(np.float64) == np.finfo(np.float64).eps
        assert default_precision(np.float32) == np.finfo(np.float32).eps

    @pytest.mark.parametrize("n, expected", [(0, 300), (3, 300), (10, 300), (25, 750)])
    def test_default_max_iterations(self, n, expected):
        assert default_max_iterations(n) == expected

    def test_select_tolerance(self):
        assert select_tolerance(np.float32) is FP32
        assert select_tolerance(np.float64) is FP64
        assert select_tolerance('float64') is FP64

    def test_residual_tolerance_scales_with_n(self):
        assert residual_tolerance(20, np.float64) == pytest.approx(
            2 * residual_tolerance(10, np.float64)
        )
        assert residual_tolerance(0, np.float64) == residual_tolerance(1, np.float64)
