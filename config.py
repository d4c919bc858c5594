"""
Constants and configuration for stlkit.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


STLKIT_LOG_LEVEL: str = os.getenv("STLKIT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# smallest window any loess pass accepts
MIN_WINDOW_LENGTH = 3
MIN_PERIOD = 2
ALLOWED_DEGREES = (0, 1)

# options that only make sense for a multi-period decomposition
MSTL_ONLY_OPTIONS = ("iterations", "lmbda", "seasonal_lengths", "sort_periods")


class Settings(BaseSettings):
    log_level: str = STLKIT_LOG_LEVEL

    # stl defaults applied when a parameter is left unset
    stl_seasonal_degree: int = 0
    stl_trend_degree: int = 1
    stl_inner_loops: int = 2
    stl_robust_inner_loops: int = 1
    stl_robust_outer_loops: int = 15
    # jump = ceil(window / divisor)
    stl_jump_divisor: float = 10.0
    # trend window = ceil(factor * period / (1 - factor / seasonal_length))
    stl_trend_span_factor: float = 1.5

    # robustness weights: h = scale * median(|remainder|)
    stl_robust_scale: float = 6.0
    stl_robust_near_zero: float = 1e-12

    # loess kernel cutoffs relative to the bandwidth
    loess_full_weight_fraction: float = 0.001
    loess_zero_weight_fraction: float = 0.999
    # minimum spread of x (relative to the series range) before a slope is fitted
    loess_slope_spread_fraction: float = 0.001

    # mstl defaults
    mstl_iterations: int = 2
    mstl_seasonal_length_base: int = 7
    mstl_seasonal_length_step: int = 4
    mstl_sort_periods: bool = True

    model_config = {
        "env_prefix": "STLKIT_",
        "extra": "ignore",
    }


settings = Settings()
