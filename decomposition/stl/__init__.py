"""
STL subpackage for the decomposition engine.

Exposes the single-period :func:`decompose` entry point together with the
:class:`StlParams` configuration record and the :class:`StlResult` value
object.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from decomposition.stl.engine import decompose, robustness_weights
from decomposition.stl.params import ResolvedStlParams, StlParams
from decomposition.stl.result import StlResult

__all__ = ["decompose", "robustness_weights", "ResolvedStlParams", "StlParams", "StlResult"]
