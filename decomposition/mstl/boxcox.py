"""
Box-Cox power transform used to stabilise variance before a multi-seasonal decomposition, plus its inverse for callers that want components back on the original scale.

Forward: y = (x^λ - 1) / λ for λ ≠ 0, y = ln(x) for λ = 0
Inverse: x = (λy + 1)^(1/λ) for λ ≠ 0, x = exp(y) for λ = 0

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numpy as np

from decomposition.errors import InvalidInput, InvalidParameter


def check_lambda(lmbda: float) -> float:
    if not 0.0 <= lmbda <= 1.0:
        raise InvalidParameter("lambda must be between 0 and 1")
    return float(lmbda)


def box_cox(x: np.ndarray, lmbda: float) -> np.ndarray:
    lmbda = check_lambda(lmbda)
    x = np.asarray(x, dtype=float)
    if lmbda == 0.0:
        if np.any(x <= 0.0):
            raise InvalidInput("Box-Cox with lambda 0 needs strictly positive values")
        return np.log(x)
    if np.any(x < 0.0):
        raise InvalidInput("Box-Cox needs non-negative values")
    return (np.power(x, lmbda) - 1.0) / lmbda


def inverse_box_cox(y: np.ndarray, lmbda: float) -> np.ndarray:
    lmbda = check_lambda(lmbda)
    y = np.asarray(y, dtype=float)
    if lmbda == 0.0:
        return np.exp(y)
    base = lmbda * y + 1.0
    if np.any(base < 0.0):
        raise InvalidInput(f"inverse Box-Cox needs values of at least {-1.0 / lmbda:g} for lambda {lmbda:g}")
    return np.power(base, 1.0 / lmbda)
