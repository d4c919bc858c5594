"""
Strength metrics subpackage for the decomposition engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from decomposition.strength.metrics import seasonal_strength, trend_strength, variance

__all__ = ["seasonal_strength", "trend_strength", "variance"]
