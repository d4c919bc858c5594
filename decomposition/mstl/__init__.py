"""
MSTL subpackage for the decomposition engine.

Exposes the multi-period :func:`decompose` entry point, the :class:`MstlParams`
and :class:`MstlResult` records and the Box-Cox helpers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from decomposition.mstl.boxcox import box_cox, inverse_box_cox
from decomposition.mstl.engine import decompose
from decomposition.mstl.params import MstlParams
from decomposition.mstl.result import MstlResult

__all__ = ["box_cox", "inverse_box_cox", "decompose", "MstlParams", "MstlResult"]
