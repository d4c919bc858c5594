"""
Error taxonomy for the decomposition engine. Every failure is a deterministic
configuration or input problem detected before any numeric work starts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


class DecompositionError(ValueError):
    pass


class InvalidPeriod(DecompositionError):
    pass


class InsufficientData(DecompositionError):
    pass


class InvalidDegree(DecompositionError):
    pass


class EmptyPeriods(DecompositionError):
    pass


class InvalidInput(DecompositionError):
    pass


class InvalidParameter(DecompositionError):
    pass
