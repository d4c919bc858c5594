"""
Loess smoother: locally weighted regression of degree 0 or 1 over a sliding window of neighbouring points, using a tricube kernel, optional per-point robustness weights and a jump stride that fits every j-th position and linearly interpolates the rest.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from config import ALLOWED_DEGREES, settings
from decomposition.errors import InvalidDegree, InvalidInput, InvalidParameter


def _tricube(dist: np.ndarray, bandwidth: float) -> np.ndarray:
    full = settings.loess_full_weight_fraction * bandwidth
    cutoff = settings.loess_zero_weight_fraction * bandwidth
    with np.errstate(divide="ignore", invalid="ignore"):
        w = (1.0 - (dist / bandwidth) ** 3) ** 3
    w[dist <= full] = 1.0
    w[dist > cutoff] = 0.0
    return w


def fit_point(
    y: np.ndarray,
    length: int,
    degree: int,
    x: float,
    left: int,
    right: int,
    weights: Optional[np.ndarray] = None,
) -> Optional[float]:
    """Fit one local regression at position ``x`` over ``y[left:right + 1]``.

    Positions are the array indices of ``y``; ``x`` may lie outside the array
    to extrapolate. Returns ``None`` when every kernel weight vanishes.
    """
    n = len(y)
    bandwidth = max(x - left, right - x)
    if length > n:
        bandwidth += (length - n) // 2

    pos = np.arange(left, right + 1, dtype=float)
    w = _tricube(np.abs(pos - x), bandwidth)
    if weights is not None:
        w = w * weights[left:right + 1]

    total = w.sum()
    if total <= 0.0:
        return None
    w = w / total

    if bandwidth > 0.0 and degree > 0:
        center = float(np.dot(w, pos))
        spread = float(np.dot(w, (pos - center) ** 2))
        # too little spread in x means the slope is not identifiable
        if np.sqrt(spread) > settings.loess_slope_spread_fraction * (n - 1):
            slope = (x - center) / spread
            w = w * (slope * (pos - center) + 1.0)

    return float(np.dot(w, y[left:right + 1]))


def _fit_or_keep(y, length, degree, i, left, right, weights) -> float:
    fitted = fit_point(y, length, degree, float(i), left, right, weights)
    return float(y[i]) if fitted is None else fitted


def smooth(
    y: np.ndarray,
    length: int,
    degree: int,
    jump: int,
    weights: Optional[np.ndarray] = None,
) -> np.ndarray:
    y = np.asarray(y, dtype=float)
    n = len(y)
    if n < 2:
        raise InvalidInput(f"loess needs at least 2 points, got {n}")
    if degree not in ALLOWED_DEGREES:
        raise InvalidDegree(f"loess degree must be 0 or 1, got {degree}")
    if length < 1 or jump < 1:
        raise InvalidParameter(f"loess length and jump must be positive, got length={length}, jump={jump}")

    out = np.empty(n)
    step = min(jump, n - 1)
    half = (length + 1) // 2

    if length >= n:
        left, right = 0, n - 1
        for i in range(0, n, step):
            out[i] = _fit_or_keep(y, length, degree, i, left, right, weights)
    elif step == 1:
        left, right = 0, length - 1
        for i in range(n):
            if i + 1 > half and right != n - 1:
                left += 1
                right += 1
            out[i] = _fit_or_keep(y, length, degree, i, left, right, weights)
    else:
        left, right = 0, length - 1
        for i in range(0, n, step):
            if i + 1 < half:
                left, right = 0, length - 1
            elif i + 1 >= n - half + 1:
                left, right = n - length, n - 1
            else:
                left, right = i + 1 - half, i + length - half
            out[i] = _fit_or_keep(y, length, degree, i, left, right, weights)

    if step != 1:
        offsets = np.arange(1, step)
        for i in range(0, n - step, step):
            delta = (out[i + step] - out[i]) / step
            out[i + 1:i + step] = out[i] + delta * offsets

        last = ((n - 1) // step) * step
        if last != n - 1:
            out[n - 1] = _fit_or_keep(y, length, degree, n - 1, left, right, weights)
            if last != n - 2:
                gap = n - 1 - last
                delta = (out[n - 1] - out[last]) / gap
                out[last + 1:n - 1] = out[last] + delta * np.arange(1, gap)

    return out
