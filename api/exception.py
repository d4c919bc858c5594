"""
Centralized exception translation for the decomposition adapter.

The :func:`handle_exceptions` decorator wraps an adapter entry point so that
callers only ever see the engine's error taxonomy.  Errors derived from
:class:`~decomposition.errors.DecompositionError` are propagated untouched,
preserving the engine's messages.  Pydantic validation failures and
``TypeError`` raised while coercing the caller's loosely typed options are
turned into :class:`~decomposition.errors.InvalidInput` with a readable
message.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar, cast

from pydantic import ValidationError

from decomposition.errors import DecompositionError, InvalidInput

F = TypeVar("F", bound=Callable[..., Any])


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "options"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "invalid options: " + "; ".join(parts)


def handle_exceptions(func: F) -> F:
    """Decorator that maps adapter-level failures onto engine errors.

    * :class:`DecompositionError` (and subclasses) is re-raised verbatim.
    * :class:`pydantic.ValidationError` becomes :class:`InvalidInput` listing
      every offending option.
    * :class:`TypeError` becomes :class:`InvalidInput` with the original text.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DecompositionError:
            raise
        except ValidationError as exc:
            raise InvalidInput(_describe(exc)) from exc
        except TypeError as exc:
            raise InvalidInput(str(exc)) from exc

    return cast(F, wrapper)
