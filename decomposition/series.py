"""
Series and period coercion shared by the STL and MSTL engines, turning caller supplied sequences into fresh float arrays and rejecting values the decomposition cannot work with (non-numeric elements, non-finite values, malformed shapes, bad periods).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable

import numpy as np

from config import MIN_PERIOD
from decomposition.errors import InsufficientData, InvalidInput, InvalidPeriod


def as_series(values: Iterable[Any]) -> np.ndarray:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidInput(f"series must be a sequence of numbers, got {type(values).__name__}")

    if isinstance(values, np.ndarray):
        if values.dtype.kind not in "iuf":
            raise InvalidInput(f"series must hold numbers, got dtype {values.dtype}")
        arr = values.astype(float)
    else:
        items = list(values)
        for i, v in enumerate(items):
            if isinstance(v, (bool, str, bytes)) or not isinstance(v, numbers.Real):
                raise InvalidInput(f"series element at index {i} is not a number: {v!r}")
        arr = np.array(items, dtype=float)

    if arr.ndim != 1:
        raise InvalidInput(f"series must be one-dimensional, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("series must not contain NaN or infinite values")
    return arr


def as_period(value: Any, label: str = "period") -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInput(f"{label} must be an integer, got {value!r}")
    period = int(value)
    if period < MIN_PERIOD:
        if label == "period":
            raise InvalidPeriod("period must be greater than 1")
        raise InvalidPeriod(f"{label} must be at least {MIN_PERIOD}")
    return period


def require_cycles(n: int, period: int) -> None:
    if n < 2 * period:
        raise InsufficientData(
            f"series has less than two periods (length {n}, period {period} needs at least {2 * period})"
        )
