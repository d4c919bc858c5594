"""
MSTL orchestrator: multi-seasonal decomposition by iterative backfitting. Each pass re-extracts one seasonal component per period with the STL engine from the series minus every other current seasonal estimate, and a final loess pass over the fully deseasonalised series yields the shared trend.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

import numpy as np

from config import settings
from decomposition.errors import EmptyPeriods, InvalidInput
from decomposition.loess import smooth
from decomposition.mstl.boxcox import box_cox
from decomposition.mstl.params import MstlParams
from decomposition.mstl.result import MstlResult
from decomposition.series import as_period, as_series, require_cycles
from decomposition.stl.engine import run as run_stl
from decomposition.stl.result import frozen_array

log = logging.getLogger(__name__)


def _as_periods(periods: Iterable[Any]) -> List[int]:
    if isinstance(periods, (str, bytes)) or not isinstance(periods, Iterable):
        raise InvalidInput(f"periods must be a sequence of integers, got {type(periods).__name__}")
    items = list(periods)
    if not items:
        raise EmptyPeriods("periods must not be empty")
    return [as_period(p, label="periods") for p in items]


def _seasonal_windows(periods: List[int], params: MstlParams) -> List[int]:
    if params.seasonal_lengths is not None:
        return list(params.seasonal_lengths)
    if params.stl.seasonal_length is not None:
        return [params.stl.seasonal_length] * len(periods)

    # 7 + 4k for the k-th shortest period (1-based)
    windows = [0] * len(periods)
    ranked = sorted(range(len(periods)), key=periods.__getitem__)
    for rank, idx in enumerate(ranked):
        windows[idx] = settings.mstl_seasonal_length_base + settings.mstl_seasonal_length_step * (rank + 1)
    return windows


def decompose(
    series: Iterable[Any],
    periods: Iterable[int],
    params: Optional[MstlParams] = None,
) -> MstlResult:
    y = as_series(series)
    periods = _as_periods(periods)
    for period in periods:
        require_cycles(len(y), period)

    params = params or MstlParams()
    params.validate(len(periods))
    iterations = params.resolved_iterations(len(periods))

    windows = _seasonal_windows(periods, params)
    fits = [
        params.stl.with_options(seasonal_length=window).resolve(period)
        for period, window in zip(periods, windows)
    ]

    if params.resolved_sort_periods():
        order = sorted(range(len(periods)), key=periods.__getitem__)
    else:
        order = list(range(len(periods)))
    # the longest period sets the trend window; on ties, the one fitted last
    largest = max(order, key=lambda i: (periods[i], order.index(i)))

    log.debug(
        "mstl decompose: n=%d periods=%s iterations=%d lambda=%s",
        len(y), periods, iterations, params.lmbda,
    )

    residual = box_cox(y, params.lmbda) if params.lmbda is not None else y.copy()
    seasonal = [np.zeros(len(y)) for _ in periods]
    largest_weights: Optional[np.ndarray] = None

    for _ in range(iterations):
        for idx in order:
            deseasonalized = residual + seasonal[idx]
            component, _, weights = run_stl(deseasonalized, fits[idx])
            seasonal[idx] = component
            if idx == largest:
                largest_weights = weights
            residual = deseasonalized - component

    trend_fit = fits[largest]
    trend = smooth(
        residual,
        trend_fit.trend_length,
        trend_fit.trend_degree,
        trend_fit.trend_jump,
        largest_weights if trend_fit.reweights else None,
    )
    remainder = residual - trend

    return MstlResult(
        seasonal=tuple(frozen_array(s) for s in seasonal),
        trend=frozen_array(trend),
        remainder=frozen_array(remainder),
        periods=tuple(periods),
    )
