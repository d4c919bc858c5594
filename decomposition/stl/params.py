"""
STL parameter records: the caller-facing StlParams (every field optional, builder style updates) and the fully resolved parameter set the engine runs with, where unset windows, degrees, jumps and loop counts are derived from the period.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from config import ALLOWED_DEGREES, MIN_WINDOW_LENGTH, settings
from decomposition.errors import InvalidDegree, InvalidParameter

log = logging.getLogger(__name__)


def _odd(value: int) -> int:
    return value + 1 if value % 2 == 0 else value


def _jump(window: int) -> int:
    return int(math.ceil(window / settings.stl_jump_divisor))


@dataclass(frozen=True)
class ResolvedStlParams:
    period: int
    seasonal_length: int
    trend_length: int
    low_pass_length: int
    seasonal_degree: int
    trend_degree: int
    low_pass_degree: int
    seasonal_jump: int
    trend_jump: int
    low_pass_jump: int
    inner_loops: int
    outer_loops: int
    robust: bool

    @property
    def reweights(self) -> bool:
        return self.outer_loops > 0


@dataclass(frozen=True)
class StlParams:
    seasonal_length: Optional[int] = None
    trend_length: Optional[int] = None
    low_pass_length: Optional[int] = None
    seasonal_degree: Optional[int] = None
    trend_degree: Optional[int] = None
    low_pass_degree: Optional[int] = None
    seasonal_jump: Optional[int] = None
    trend_jump: Optional[int] = None
    low_pass_jump: Optional[int] = None
    inner_loops: Optional[int] = None
    outer_loops: Optional[int] = None
    robust: bool = False

    def with_options(self, **changes: Any) -> StlParams:
        """Return a copy with ``changes`` applied; the receiver is left untouched."""
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise InvalidParameter(f"unknown STL parameter(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)

    def validate_degrees(self) -> None:
        for name in ("seasonal_degree", "trend_degree", "low_pass_degree"):
            value = getattr(self, name)
            if value is not None and value not in ALLOWED_DEGREES:
                raise InvalidDegree(f"{name} must be 0 or 1")

    def resolve(self, period: int) -> ResolvedStlParams:
        self.validate_degrees()

        seasonal_degree = _pick(self.seasonal_degree, settings.stl_seasonal_degree)
        trend_degree = _pick(self.trend_degree, settings.stl_trend_degree)
        low_pass_degree = _pick(self.low_pass_degree, trend_degree)

        seasonal_length = _odd(max(_pick(self.seasonal_length, period), MIN_WINDOW_LENGTH))

        factor = settings.stl_trend_span_factor
        derived_trend = int(math.ceil((factor * period) / (1.0 - factor / seasonal_length)))
        trend_length = _odd(max(_pick(self.trend_length, derived_trend), MIN_WINDOW_LENGTH))

        if self.low_pass_length is None:
            low_pass_length = _odd(period)
        else:
            low_pass_length = self.low_pass_length
            if low_pass_length < MIN_WINDOW_LENGTH:
                raise InvalidParameter(f"low_pass_length must be at least {MIN_WINDOW_LENGTH}")
            if low_pass_length % 2 != 1:
                raise InvalidParameter("low_pass_length must be odd")

        if self.robust:
            inner_default = settings.stl_robust_inner_loops
            outer_default = settings.stl_robust_outer_loops
        else:
            inner_default = settings.stl_inner_loops
            outer_default = 0
        inner_loops = _pick(self.inner_loops, inner_default)
        outer_loops = _pick(self.outer_loops, outer_default)

        resolved = ResolvedStlParams(
            period=period,
            seasonal_length=seasonal_length,
            trend_length=trend_length,
            low_pass_length=low_pass_length,
            seasonal_degree=seasonal_degree,
            trend_degree=trend_degree,
            low_pass_degree=low_pass_degree,
            seasonal_jump=_pick(self.seasonal_jump, _jump(seasonal_length)),
            trend_jump=_pick(self.trend_jump, _jump(trend_length)),
            low_pass_jump=_pick(self.low_pass_jump, _jump(low_pass_length)),
            inner_loops=inner_loops,
            outer_loops=outer_loops,
            robust=self.robust,
        )
        _check_counts(resolved)

        if self.robust and outer_loops == 0:
            log.warning("robust fitting requested with outer_loops=0; no robustness reweighting will run")
        log.debug("resolved stl params: %s", resolved)
        return resolved


def _pick(value: Optional[int], default: int) -> int:
    return default if value is None else value


def _check_counts(params: ResolvedStlParams) -> None:
    for name in ("seasonal_jump", "trend_jump", "low_pass_jump"):
        if getattr(params, name) < 1:
            raise InvalidParameter(f"{name} must be at least 1")
    for name in ("inner_loops", "outer_loops"):
        if getattr(params, name) < 0:
            raise InvalidParameter(f"{name} must not be negative")
