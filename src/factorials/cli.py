"""Command-line demo for the factorial strategies.

Usage
-----
    python -m factorials 5                   # prints 120
    python -m factorials 10 --strategy pool_map --chunk-size 3
    python -m factorials 5 --all             # one line per strategy
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .config import load_settings
from .errors import ArithmeticOverflow, FactorialError
from .logging import configure_logging
from .models import Strategy
from .strategies import STRATEGIES, factorial


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="factorials", description="Compute n! for a non-negative integer n."
    )
    parser.add_argument("n", type=int, help="Target integer")
    parser.add_argument(
        "--strategy",
        default=Strategy.iterative.value,
        choices=[strategy.value for strategy in Strategy],
        help="Strategy to compute with (default: iterative)",
    )
    parser.add_argument("--chunk-size", type=int, default=None, help="Chunk size for partition strategies")
    parser.add_argument("--max-workers", type=int, default=None, help="Upper bound on worker threads")
    parser.add_argument("--all", action="store_true", help="Run every strategy and print each result")
    parser.add_argument("--log-level", default=None, help="Logging level (default: FACTORIALS_LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings()
        configure_logging(args.log_level or settings.log_level, json=settings.log_json)
        if args.all:
            for strategy in STRATEGIES:
                try:
                    value = factorial(strategy, args.n, args.chunk_size, args.max_workers)
                except ArithmeticOverflow as exc:
                    print(f"{strategy.value}: overflow ({exc})")
                    continue
                print(f"{strategy.value}: {value}")
            return 0
        result = factorial(args.strategy, args.n, args.chunk_size, args.max_workers)
    except FactorialError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result)
    return 0
