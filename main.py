#!/usr/bin/env python3

"""
Command-line entry point for stlkit: reads a JSON series (a list of numbers or an object keyed by date/index) from a file or stdin, decomposes it with STL or MSTL and writes the components and strength metrics as JSON.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple

from api import decompose, seasonal_strength, trend_strength
from config import LOG_FORMAT, settings
from decomposition.errors import DecompositionError

log = logging.getLogger(__name__)

_INT_OPTIONS = (
    "seasonal_length",
    "trend_length",
    "low_pass_length",
    "seasonal_degree",
    "trend_degree",
    "low_pass_degree",
    "seasonal_jump",
    "trend_jump",
    "low_pass_jump",
    "inner_loops",
    "outer_loops",
    "iterations",
)


def _int_list(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seasonal-trend decomposition (STL / MSTL) of a JSON series")
    parser.add_argument("input", nargs="?", default="-", help="JSON file with a list or object of values ('-' for stdin)")
    parser.add_argument(
        "--period",
        type=int,
        action="append",
        required=True,
        help="Seasonal period; repeat for a multi-seasonal decomposition",
    )
    parser.add_argument("--robust", action="store_true", help="Use robustness reweighting")
    parser.add_argument("--include-weights", action="store_true", help="Report robustness weights (single period)")
    for name in _INT_OPTIONS:
        parser.add_argument(f"--{name.replace('_', '-')}", type=int, default=None)
    parser.add_argument("--lambda", dest="lmbda", type=float, default=None, help="Box-Cox lambda in [0, 1] (MSTL)")
    parser.add_argument("--seasonal-lengths", type=_int_list, default=None, help="Comma-separated seasonal windows (MSTL)")
    parser.add_argument(
        "--no-sort-periods",
        dest="sort_periods",
        action="store_false",
        default=None,
        help="Backfit periods in the given order instead of shortest first (MSTL)",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def _options(args: argparse.Namespace) -> Dict[str, Any]:
    opts: Dict[str, Any] = {}
    for name in _INT_OPTIONS + ("lmbda", "seasonal_lengths", "sort_periods"):
        value = getattr(args, name)
        if value is not None:
            opts[name] = value
    if args.robust:
        opts["robust"] = True
    if args.include_weights:
        opts["include_weights"] = True
    return opts


def _index_keys(pairs: List[Tuple[str, Any]]) -> Dict[Any, Any]:
    # JSON keys are always strings; integer indices must sort numerically
    if pairs and all(key.lstrip("-").isdigit() for key, _ in pairs):
        return {int(key): value for key, value in pairs}
    return dict(pairs)


def _read_series(path: str, stdin: TextIO) -> Any:
    if path == "-":
        return json.load(stdin, object_pairs_hook=_index_keys)
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh, object_pairs_hook=_index_keys)


def run(argv: Optional[Sequence[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        series = _read_series(args.input, stdin)
    except (OSError, json.JSONDecodeError) as exc:
        log.error("could not read series from %s: %s", args.input, exc)
        return 1

    period: Any = args.period[0] if len(args.period) == 1 else args.period
    try:
        result = decompose(series, period, **_options(args))
    except DecompositionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    payload = result.model_dump(exclude_none=True)
    payload["seasonal_strength"] = seasonal_strength(result)
    payload["trend_strength"] = trend_strength(result)
    json.dump(payload, stdout)
    stdout.write("\n")
    log.info("decomposed %d points with period(s) %s", len(result.trend), args.period)
    return 0


if __name__ == "__main__":
    sys.exit(run())
