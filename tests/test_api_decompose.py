"""
Test cases for the decomposition adapter: series coercion from sequences and keyed mappings, option validation and routing, response models and strength helpers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import date, timedelta

import numpy as np
import pytest

from api import (
    DecomposeOptions,
    Decomposition,
    MultiDecomposition,
    decompose,
    seasonal_strength,
    series_values,
    trend_strength,
)
from decomposition import mstl, stl
from decomposition.errors import InvalidDegree, InvalidInput, InvalidPeriod
from decomposition.mstl import MstlParams
from decomposition.stl import StlParams


def _dated(values):
    start = date(2024, 1, 1)
    return {start + timedelta(days=i): v for i, v in enumerate(values)}


def test_list_input_matches_engine(series):
    result = decompose(series, 7)
    expected = stl.decompose(series, 7)
    assert isinstance(result, Decomposition)
    assert result.weights is None
    assert np.allclose(result.seasonal, expected.seasonal)
    assert np.allclose(result.trend, expected.trend)
    assert np.allclose(result.remainder, expected.remainder)


def test_date_keyed_mapping_is_sorted(series):
    dated = _dated(series)
    shuffled = dict(reversed(list(dated.items())))
    result = decompose(shuffled, 7)
    expected = decompose(series, 7)
    assert result.seasonal == expected.seasonal
    assert result.trend == expected.trend


def test_iso_string_keys(series):
    keyed = {k.isoformat(): v for k, v in _dated(series).items()}
    assert series_values(keyed) == series


def test_series_values_passes_sequences_through(series):
    assert series_values(series) is series


def test_uncomparable_keys():
    with pytest.raises(InvalidInput, match="comparable"):
        decompose({1: 1.0, "b": 2.0, 3: 3.0, 4: 4.0}, 2)


def test_robust_option_reports_weights(series):
    result = decompose(series, 7, robust=True)
    expected = stl.decompose(series, 7, StlParams(robust=True))
    assert result.weights is not None
    assert np.allclose(result.weights, expected.weights)


def test_include_weights(series):
    result = decompose(series, 7, include_weights=True)
    assert result.weights == [1.0] * len(series)


def test_multiple_periods(series):
    result = decompose(series, [6, 10], iterations=3, seasonal_lengths=[9, 19])
    expected = mstl.decompose(series, [6, 10], MstlParams(iterations=3, seasonal_lengths=(9, 19)))
    assert isinstance(result, MultiDecomposition)
    assert result.periods == [6, 10]
    assert len(result.seasonal) == 2
    assert np.allclose(result.seasonal[1], expected.seasonal[1])
    assert np.allclose(result.trend, expected.trend)


def test_lambda_alias(series):
    by_alias = decompose(series, [6, 10], **{"lambda": 0.5})
    by_name = decompose(series, [6, 10], lmbda=0.5)
    assert by_alias.seasonal == by_name.seasonal


def test_unknown_option():
    with pytest.raises(InvalidInput, match="seasonal_window"):
        decompose(list(range(30)), 7, seasonal_window=9)


def test_wrongly_typed_option(series):
    with pytest.raises(InvalidInput, match="seasonal_length"):
        decompose(series, 7, seasonal_length="weekly")


def test_engine_errors_pass_through(series):
    with pytest.raises(InvalidDegree):
        decompose(series, 7, seasonal_degree=2)
    with pytest.raises(InvalidPeriod):
        decompose(series, 1)


def test_multi_only_option_needs_list(series):
    with pytest.raises(InvalidInput, match="iterations"):
        decompose(series, 7, iterations=3)
    with pytest.raises(InvalidInput, match="lmbda"):
        decompose(series, 7, **{"lambda": 0.5})


def test_include_weights_needs_single_period(series):
    with pytest.raises(InvalidInput, match="single period"):
        decompose(series, [6, 10], include_weights=True)


def test_options_split_into_param_records():
    opts = DecomposeOptions(seasonal_length=9, robust=True, iterations=4, **{"lambda": 0.25})
    assert opts.stl_params() == StlParams(seasonal_length=9, robust=True)
    params = opts.mstl_params()
    assert params.iterations == 4
    assert params.lmbda == 0.25
    assert params.stl.robust is True
    assert opts.mstl_options() == ["iterations", "lmbda"]


def test_strength_of_models(series):
    single = decompose(series, 7)
    assert seasonal_strength(single) == pytest.approx(0.28411169658385693, abs=1e-3)
    assert trend_strength(single) == pytest.approx(0.16384239106781462, abs=1e-3)

    multi = decompose(series, [6, 10])
    strengths = seasonal_strength(multi)
    assert isinstance(strengths, list)
    assert len(strengths) == 2


def test_strength_of_dicts_and_engine_results(series):
    single = decompose(series, 7)
    assert seasonal_strength(single.model_dump()) == seasonal_strength(single)

    engine_result = mstl.decompose(series, [6, 10])
    assert seasonal_strength(engine_result) == engine_result.seasonal_strength()
    assert trend_strength(engine_result) == engine_result.trend_strength()


def test_strength_missing_component():
    with pytest.raises(InvalidInput, match="remainder"):
        seasonal_strength({"seasonal": [1.0, 2.0]})


def test_model_dump_is_plain(series):
    dumped = decompose(series, 7, robust=True).model_dump()
    assert set(dumped) == {"seasonal", "trend", "remainder", "weights"}
    assert all(type(v) is float for v in dumped["seasonal"])

    multi = decompose(series, [6, 10]).model_dump()
    assert type(multi["seasonal"][0]) is list
    assert multi["periods"] == [6, 10]
