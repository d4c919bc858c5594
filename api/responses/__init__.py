"""
Response models for the decomposition adapter, turning engine results backed by numpy arrays into plain-list pydantic models that serialise cleanly to JSON.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, model_serializer

from decomposition.mstl import MstlResult
from decomposition.stl import StlResult


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class Decomposition(NpModel):

    seasonal: List[float]
    trend: List[float]
    remainder: List[float]
    weights: Optional[List[float]] = None

    @classmethod
    def from_result(cls, result: StlResult) -> Decomposition:
        return cls(
            seasonal=result.seasonal.tolist(),
            trend=result.trend.tolist(),
            remainder=result.remainder.tolist(),
            weights=result.weights.tolist() if result.has_weights else None,
        )


class MultiDecomposition(NpModel):

    periods: List[int]
    seasonal: List[List[float]]
    trend: List[float]
    remainder: List[float]

    @classmethod
    def from_result(cls, result: MstlResult) -> MultiDecomposition:
        return cls(
            periods=list(result.periods),
            seasonal=[s.tolist() for s in result.seasonal],
            trend=result.trend.tolist(),
            remainder=result.remainder.tolist(),
        )
