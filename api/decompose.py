"""
Adapter entry points wrapping the decomposition engine: accepts a plain sequence or a key-sorted mapping as the series, an integer period (STL) or a list of periods (MSTL), and a loose option bag, and returns list-based response models.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Union

from api.exception import handle_exceptions
from api.requests import DecomposeOptions
from api.responses import Decomposition, MultiDecomposition
from decomposition import mstl, stl, strength
from decomposition.errors import InvalidInput

log = logging.getLogger(__name__)


def series_values(series: Any) -> Any:
    if not isinstance(series, Mapping):
        return series
    try:
        keys = sorted(series)
    except TypeError as exc:
        raise InvalidInput("series keys must be mutually comparable to be ordered") from exc
    return [series[k] for k in keys]


def _is_multi(period: Any) -> bool:
    return isinstance(period, Iterable) and not isinstance(period, (str, bytes))


@handle_exceptions
def decompose(series: Any, period: Any, **options: Any) -> Union[Decomposition, MultiDecomposition]:
    values = series_values(series)
    opts = DecomposeOptions(**options)
    log.debug("adapter decompose: period=%s options=%s", period, sorted(opts.model_fields_set))

    if _is_multi(period):
        if opts.include_weights:
            raise InvalidInput("include_weights is only available for a single period")
        result = mstl.decompose(values, period, opts.mstl_params())
        return MultiDecomposition.from_result(result)

    extra = opts.mstl_options()
    if extra:
        raise InvalidInput(f"option(s) {', '.join(extra)} need a list of periods")
    result = stl.decompose(values, period, opts.stl_params(), include_weights=opts.include_weights)
    return Decomposition.from_result(result)


def _component(result: Any, name: str) -> Any:
    if isinstance(result, Mapping):
        if name not in result:
            raise InvalidInput(f"decomposition result has no '{name}' component")
        return result[name]
    if not hasattr(result, name):
        raise InvalidInput(f"decomposition result has no '{name}' component")
    return getattr(result, name)


def _nested(seasonal: Any) -> bool:
    first = next(iter(seasonal), None)
    return isinstance(first, Iterable) and not isinstance(first, (str, bytes))


@handle_exceptions
def seasonal_strength(result: Any) -> Union[float, List[float]]:
    seasonal = _component(result, "seasonal")
    remainder = _component(result, "remainder")
    if _nested(seasonal):
        return [strength.seasonal_strength(s, remainder) for s in seasonal]
    return strength.seasonal_strength(seasonal, remainder)


@handle_exceptions
def trend_strength(result: Any) -> float:
    return strength.trend_strength(_component(result, "trend"), _component(result, "remainder"))
