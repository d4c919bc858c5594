"""
MstlResult value object: one seasonal array per requested period (in the caller's order) plus the shared trend and remainder.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from decomposition.strength import seasonal_strength, trend_strength


@dataclass(frozen=True)
class MstlResult:
    seasonal: Tuple[np.ndarray, ...]
    trend: np.ndarray
    remainder: np.ndarray
    periods: Tuple[int, ...] = ()

    def seasonal_total(self) -> np.ndarray:
        return np.sum(np.vstack(self.seasonal), axis=0)

    def seasonal_strength(self) -> List[float]:
        return [seasonal_strength(s, self.remainder) for s in self.seasonal]

    def trend_strength(self) -> float:
        return trend_strength(self.trend, self.remainder)
