"""
Strength metrics summarising a completed decomposition: how much of the variation left after removing the trend (or the seasonal part) is explained by the seasonal (or trend) component, as variance ratios clamped to [0, 1].

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from decomposition.errors import InvalidInput


def _pair(component: Sequence[float], remainder: Sequence[float], label: str) -> tuple[np.ndarray, np.ndarray]:
    try:
        c = np.asarray(component, dtype=float)
        r = np.asarray(remainder, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{label} and remainder must be numeric sequences") from exc
    if c.ndim != 1 or r.ndim != 1:
        raise InvalidInput(f"{label} and remainder must be one-dimensional")
    if len(c) != len(r):
        raise InvalidInput(f"{label} and remainder must have the same length, got {len(c)} and {len(r)}")
    if len(r) < 2:
        raise InvalidInput("strength needs at least 2 observations")
    return c, r


def variance(values: np.ndarray) -> float:
    return float(np.var(values, ddof=1))


def _strength(component: np.ndarray, remainder: np.ndarray) -> float:
    denom = variance(component + remainder)
    if denom <= 0.0:
        return 0.0
    return float(min(1.0, max(0.0, 1.0 - variance(remainder) / denom)))


def seasonal_strength(seasonal: Sequence[float], remainder: Sequence[float]) -> float:
    s, r = _pair(seasonal, remainder, "seasonal")
    return _strength(s, r)


def trend_strength(trend: Sequence[float], remainder: Sequence[float]) -> float:
    t, r = _pair(trend, remainder, "trend")
    return _strength(t, r)
