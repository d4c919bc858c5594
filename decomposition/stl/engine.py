"""
STL engine: seasonal-trend decomposition of a single-period series by nested loess passes. Each inner pass smooths the cycle-subseries of the detrended series, removes low-frequency leakage with a low-pass filter and re-estimates the trend; robust fitting adds outer passes that down-weight large remainders with bisquare weights.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

import numpy as np

from config import settings
from decomposition.loess import fit_point, smooth
from decomposition.series import as_period, as_series, require_cycles
from decomposition.stl.params import ResolvedStlParams, StlParams
from decomposition.stl.result import StlResult, frozen_array

log = logging.getLogger(__name__)


def _moving_average(x: np.ndarray, width: int) -> np.ndarray:
    return np.convolve(x, np.full(width, 1.0 / width), mode="valid")


def _low_pass(cycle: np.ndarray, period: int) -> np.ndarray:
    return _moving_average(_moving_average(_moving_average(cycle, period), period), 3)


def _cycle_subseries(
    detrended: np.ndarray,
    params: ResolvedStlParams,
    weights: Optional[np.ndarray],
) -> np.ndarray:
    period = params.period
    length = params.seasonal_length
    degree = params.seasonal_degree
    cycle = np.empty(len(detrended) + 2 * period)

    for phase in range(period):
        sub = detrended[phase::period]
        sub_weights = None if weights is None else weights[phase::period]
        k = len(sub)

        # one extra cycle on each side, extrapolated from the edge windows
        fitted = np.empty(k + 2)
        fitted[1:k + 1] = smooth(sub, length, degree, params.seasonal_jump, sub_weights)
        before = fit_point(sub, length, degree, -1.0, 0, min(length, k) - 1, sub_weights)
        fitted[0] = fitted[1] if before is None else before
        after = fit_point(sub, length, degree, float(k), max(0, k - length), k - 1, sub_weights)
        fitted[k + 1] = fitted[k] if after is None else after

        cycle[phase::period] = fitted
    return cycle


def _inner_pass(
    y: np.ndarray,
    trend: np.ndarray,
    params: ResolvedStlParams,
    weights: Optional[np.ndarray],
) -> Tuple[np.ndarray, np.ndarray]:
    n = len(y)
    period = params.period

    cycle = _cycle_subseries(y - trend, params, weights)
    low = smooth(
        _low_pass(cycle, period),
        params.low_pass_length,
        params.low_pass_degree,
        params.low_pass_jump,
    )
    seasonal = cycle[period:period + n] - low
    trend = smooth(y - seasonal, params.trend_length, params.trend_degree, params.trend_jump, weights)
    return seasonal, trend


def robustness_weights(y: np.ndarray, fit: np.ndarray) -> np.ndarray:
    resid = np.abs(y - fit)
    n = len(resid)
    ordered = np.sort(resid)
    h = settings.stl_robust_scale * 0.5 * (ordered[(n - 1) // 2] + ordered[n // 2])

    scale = max(1.0, float(np.max(np.abs(y))))
    if h <= settings.stl_robust_near_zero * scale:
        return np.ones(n)

    w = (1.0 - (resid / h) ** 2) ** 2
    w[resid <= settings.loess_full_weight_fraction * h] = 1.0
    w[resid > settings.loess_zero_weight_fraction * h] = 0.0
    return w


def run(y: np.ndarray, params: ResolvedStlParams) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Run the inner/outer loop on a validated series.

    Returns ``(seasonal, trend, weights)``; ``weights`` are the robustness
    weights used by the final pass, or all ones when no reweighting ran.
    """
    n = len(y)
    trend = np.zeros(n)
    seasonal = np.zeros(n)
    weights: Optional[np.ndarray] = None

    outer = 0
    while True:
        for _ in range(params.inner_loops):
            seasonal, trend = _inner_pass(y, trend, params, weights)
        outer += 1
        if outer > params.outer_loops:
            break
        weights = robustness_weights(y, trend + seasonal)

    if weights is None:
        weights = np.ones(n)
    return seasonal, trend, weights


def decompose(
    series: Iterable[Any],
    period: int,
    params: Optional[StlParams] = None,
    include_weights: bool = False,
) -> StlResult:
    y = as_series(series)
    period = as_period(period)
    require_cycles(len(y), period)
    resolved = (params or StlParams()).resolve(period)

    log.debug("stl decompose: n=%d period=%d robust=%s", len(y), period, resolved.robust)
    seasonal, trend, weights = run(y, resolved)
    remainder = y - seasonal - trend

    report_weights = resolved.robust or include_weights
    return StlResult(
        seasonal=frozen_array(seasonal),
        trend=frozen_array(trend),
        remainder=frozen_array(remainder),
        weights=frozen_array(weights if report_weights else []),
    )
