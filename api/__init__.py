"""
Adapter package: the caller-facing surface of stlkit.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from api.decompose import decompose, seasonal_strength, series_values, trend_strength
from api.requests import DecomposeOptions
from api.responses import Decomposition, MultiDecomposition

__all__ = [
    "decompose",
    "seasonal_strength",
    "series_values",
    "trend_strength",
    "DecomposeOptions",
    "Decomposition",
    "MultiDecomposition",
]
