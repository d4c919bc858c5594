"""
MSTL parameter record wrapping the shared STL parameters with the backfitting iteration count, the optional Box-Cox lambda, per-period seasonal window overrides and the period processing order.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from config import settings
from decomposition.errors import InvalidParameter
from decomposition.mstl.boxcox import check_lambda
from decomposition.stl.params import StlParams


@dataclass(frozen=True)
class MstlParams:
    stl: StlParams = field(default_factory=StlParams)
    iterations: Optional[int] = None
    lmbda: Optional[float] = None
    seasonal_lengths: Optional[Tuple[int, ...]] = None
    sort_periods: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.seasonal_lengths is not None:
            object.__setattr__(self, "seasonal_lengths", tuple(self.seasonal_lengths))

    def with_options(self, **changes: Any) -> MstlParams:
        """Return a copy with ``changes`` applied.

        Names that belong to :class:`StlParams` are routed to the wrapped
        STL record, so ``params.with_options(robust=True, iterations=3)``
        works in one call.
        """
        own = {f.name for f in dataclasses.fields(self)} - {"stl"}
        stl_changes = {k: v for k, v in changes.items() if k not in own}
        mine = {k: v for k, v in changes.items() if k in own}
        stl = self.stl.with_options(**stl_changes) if stl_changes else self.stl
        return dataclasses.replace(self, stl=stl, **mine)

    def resolved_iterations(self, n_periods: int) -> int:
        iterations = settings.mstl_iterations if self.iterations is None else self.iterations
        if iterations < 1:
            raise InvalidParameter("iterations must be at least 1")
        # a single period has nothing to backfit against
        return 1 if n_periods == 1 else iterations

    def resolved_sort_periods(self) -> bool:
        return settings.mstl_sort_periods if self.sort_periods is None else self.sort_periods

    def validate(self, n_periods: int) -> None:
        self.stl.validate_degrees()
        self.resolved_iterations(n_periods)
        if self.lmbda is not None:
            check_lambda(self.lmbda)
        if self.seasonal_lengths is not None:
            if len(self.seasonal_lengths) != n_periods:
                raise InvalidParameter("seasonal_lengths must have the same length as periods")
            if any(length < 1 for length in self.seasonal_lengths):
                raise InvalidParameter("seasonal_lengths must be positive")
