"""
Decomposition engine for stlkit: loess smoothing, single-period STL,
multi-seasonal MSTL and strength metrics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from decomposition.errors import (
    DecompositionError,
    EmptyPeriods,
    InsufficientData,
    InvalidDegree,
    InvalidInput,
    InvalidParameter,
    InvalidPeriod,
)
from decomposition.strength import seasonal_strength, trend_strength
from decomposition.stl import StlParams, StlResult
from decomposition.mstl import MstlParams, MstlResult

__all__ = [
    "DecompositionError",
    "EmptyPeriods",
    "InsufficientData",
    "InvalidDegree",
    "InvalidInput",
    "InvalidParameter",
    "InvalidPeriod",
    "seasonal_strength",
    "trend_strength",
    "StlParams",
    "StlResult",
    "MstlParams",
    "MstlResult",
]
