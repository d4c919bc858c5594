"""
Test cases for the seasonal and trend strength metrics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from decomposition.errors import InvalidInput
from decomposition.stl import decompose
from decomposition.strength import seasonal_strength, trend_strength, variance


def test_strength_reference_values(series):
    result = decompose(series, 7)
    assert result.seasonal_strength() == pytest.approx(0.28411169658385693, abs=1e-3)
    assert result.trend_strength() == pytest.approx(0.16384239106781462, abs=1e-3)
    assert seasonal_strength(result.seasonal, result.remainder) == result.seasonal_strength()


def test_seasonal_strength_max():
    values = [float(i % 7) for i in range(30)]
    result = decompose(values, 7)
    assert result.seasonal_strength() == pytest.approx(1.0, abs=1e-3)


def test_trend_strength_max():
    values = [float(i) for i in range(30)]
    result = decompose(values, 7)
    assert result.trend_strength() == pytest.approx(1.0, abs=1e-3)


def test_strength_is_clamped():
    component = np.array([1.0, -1.0, 1.0, -1.0])
    remainder = np.array([-1.0, 1.0, -1.0, 1.2])
    # the remainder cancels the component, so 1 - var(r)/var(c+r) goes far below 0
    assert seasonal_strength(component, remainder) == 0.0


def test_zero_variance_denominator():
    component = np.array([2.0, 3.0, 4.0])
    remainder = -component
    assert trend_strength(component, remainder) == 0.0
    assert seasonal_strength(np.zeros(5), np.zeros(5)) == 0.0


def test_variance_uses_sample_denominator():
    assert variance(np.array([1.0, 2.0, 3.0, 4.0])) == pytest.approx(5.0 / 3.0)


def test_strength_rejects_bad_input():
    with pytest.raises(InvalidInput, match="same length"):
        seasonal_strength([1.0, 2.0, 3.0], [1.0, 2.0])
    with pytest.raises(InvalidInput, match="at least 2"):
        trend_strength([1.0], [0.5])
    with pytest.raises(InvalidInput):
        trend_strength([[1.0, 2.0]], [[0.0, 0.0]])
