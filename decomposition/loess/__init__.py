"""
Loess subpackage for the decomposition engine.

Re-exports :func:`smooth` and :func:`fit_point` from
:mod:`decomposition.loess.smoother`, the local regression pass every STL
stage is built on.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from decomposition.loess.smoother import fit_point, smooth

__all__ = ["fit_point", "smooth"]
