"""
StlResult value object holding the seasonal, trend and remainder arrays of a single-period decomposition together with the robustness weights when they were requested.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from decomposition.strength import seasonal_strength, trend_strength


def frozen_array(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class StlResult:
    seasonal: np.ndarray
    trend: np.ndarray
    remainder: np.ndarray
    weights: np.ndarray = field(default_factory=lambda: frozen_array([]))

    @property
    def has_weights(self) -> bool:
        return self.weights.size > 0

    def seasonal_strength(self) -> float:
        return seasonal_strength(self.seasonal, self.remainder)

    def trend_strength(self) -> float:
        return trend_strength(self.trend, self.remainder)
