"""
Test cases for the loess smoother, including exact reproduction of straight lines, the jump interpolation shortcut, point weights and degenerate inputs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from decomposition.errors import InvalidDegree, InvalidInput, InvalidParameter
from decomposition.loess import fit_point, smooth


def _line(n):
    x = np.arange(n, dtype=float)
    return 2.0 * x + 1.0


def test_linear_fit_reproduces_line():
    y = _line(20)
    out = smooth(y, 7, 1, 1)
    assert np.allclose(out, y, atol=1e-9)


def test_jump_interpolation_reproduces_line():
    y = _line(20)
    out = smooth(y, 7, 1, 3)
    assert np.allclose(out, y, atol=1e-9)


def test_constant_series_degree_zero():
    y = np.full(15, 4.0)
    assert np.allclose(smooth(y, 5, 0, 1), 4.0)
    assert np.allclose(smooth(y, 5, 0, 2), 4.0)


def test_jump_positions_match_direct_fits():
    x = np.arange(20, dtype=float)
    y = 0.3 * x ** 2 - x + np.sin(x)
    full = smooth(y, 7, 1, 1)
    jumped = smooth(y, 7, 1, 3)
    for i in list(range(0, 20, 3)) + [19]:
        assert jumped[i] == pytest.approx(full[i], abs=1e-12)


def test_jump_interpolates_between_fits():
    x = np.arange(20, dtype=float)
    y = 0.3 * x ** 2
    jumped = smooth(y, 7, 1, 3)
    assert jumped[1] == pytest.approx(jumped[0] + (jumped[3] - jumped[0]) / 3.0)
    assert jumped[2] == pytest.approx(jumped[0] + 2.0 * (jumped[3] - jumped[0]) / 3.0)


def test_window_wider_than_series():
    y = _line(10)
    out = smooth(y, 31, 1, 1)
    assert np.allclose(out, y, atol=1e-9)


def test_zero_weight_ignores_outlier():
    y = np.ones(21)
    y[10] = 100.0
    weights = np.ones(21)
    weights[10] = 0.0
    out = smooth(y, 7, 0, 1, weights)
    assert np.allclose(out, 1.0)

    unweighted = smooth(y, 7, 0, 1)
    assert unweighted[10] > 1.0


def test_all_zero_weights_keep_raw_values():
    y = np.arange(8, dtype=float) ** 2
    out = smooth(y, 5, 1, 1, np.zeros(8))
    assert np.array_equal(out, y)


def test_fit_point_extrapolates_line():
    y = _line(12)
    assert fit_point(y, 7, 1, -1.0, 0, 6) == pytest.approx(-1.0)
    assert fit_point(y, 7, 1, 12.0, 5, 11) == pytest.approx(25.0)


def test_fit_point_returns_none_without_weight():
    y = _line(5)
    assert fit_point(y, 5, 1, 2.0, 0, 4, np.zeros(5)) is None


def test_fit_point_single_point_window():
    y = np.array([3.0, 7.0, 11.0])
    assert fit_point(y, 1, 1, 1.0, 1, 1) == pytest.approx(7.0)


def test_smooth_does_not_mutate_input():
    y = _line(15)
    before = y.copy()
    smooth(y, 5, 1, 2)
    assert np.array_equal(y, before)


def test_degenerate_inputs_raise():
    with pytest.raises(InvalidInput):
        smooth(np.array([1.0]), 3, 1, 1)
    with pytest.raises(InvalidDegree):
        smooth(_line(10), 3, 2, 1)
    with pytest.raises(InvalidParameter):
        smooth(_line(10), 3, 1, 0)
