"""
Request models for the decomposition adapter: the loosely typed option bag callers pass alongside a series, validated and split into STL and MSTL parameter records.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from config import MSTL_ONLY_OPTIONS
from decomposition.mstl import MstlParams
from decomposition.stl import StlParams


_STL_FIELDS = (
    "seasonal_length",
    "trend_length",
    "low_pass_length",
    "seasonal_degree",
    "trend_degree",
    "low_pass_degree",
    "seasonal_jump",
    "trend_jump",
    "low_pass_jump",
    "inner_loops",
    "outer_loops",
)


class DecomposeOptions(BaseModel):
    seasonal_length: Optional[int] = None
    trend_length: Optional[int] = None
    low_pass_length: Optional[int] = None
    # degrees stay plain ints so the engine reports InvalidDegree itself
    seasonal_degree: Optional[int] = None
    trend_degree: Optional[int] = None
    low_pass_degree: Optional[int] = None
    seasonal_jump: Optional[int] = None
    trend_jump: Optional[int] = None
    low_pass_jump: Optional[int] = None
    inner_loops: Optional[int] = None
    outer_loops: Optional[int] = None
    robust: bool = False
    include_weights: bool = False

    iterations: Optional[int] = None
    lmbda: Optional[float] = Field(default=None, alias="lambda")
    seasonal_lengths: Optional[List[int]] = None
    sort_periods: Optional[bool] = None

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    def stl_params(self) -> StlParams:
        return StlParams(robust=self.robust, **{name: getattr(self, name) for name in _STL_FIELDS})

    def mstl_params(self) -> MstlParams:
        return MstlParams(
            stl=self.stl_params(),
            iterations=self.iterations,
            lmbda=self.lmbda,
            seasonal_lengths=tuple(self.seasonal_lengths) if self.seasonal_lengths is not None else None,
            sort_periods=self.sort_periods,
        )

    def mstl_options(self) -> List[str]:
        return sorted(name for name in MSTL_ONLY_OPTIONS if name in self.model_fields_set)
