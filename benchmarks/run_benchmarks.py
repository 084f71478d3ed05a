#!/usr/bin/env python3
"""
Main entry point for the list benchmark.

Prints one line per (operation, variant) pair:
    Add | ArrayList | 10000 | 0.412 ms

Usage:
    # Run with default settings
    python -m benchmarks.run_benchmarks

    # Change the number of operations per step
    BENCHMARK_OPERATIONS=50000 python -m benchmarks.run_benchmarks

    # Only the linked-node variant
    python -m benchmarks.run_benchmarks --variants LinkedList

    # Check container contents after every step (not timed)
    python -m benchmarks.run_benchmarks --verify

    # Progress bar and log output on stderr
    python -m benchmarks.run_benchmarks --progress --log-level INFO
"""

import argparse
import logging
import sys
import time
from dataclasses import replace
from typing import List, Optional

from list_bench.logging_config import setup_logging
from list_bench.variants import VARIANTS

from .config import BenchmarkConfig
from .runner import BenchmarkRunner


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare ArrayList and LinkedList style containers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--operations",
        type=int,
        help="Elements inserted, read and removed per step (default: from env or 10000)",
    )
    parser.add_argument(
        "--variants",
        nargs="+",
        choices=[v.name for v in VARIANTS],
        help="List variants to benchmark, in order (default: ArrayList LinkedList)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Verify container contents after each step",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main benchmark execution.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Start with config from environment
    config = BenchmarkConfig.from_env()

    # Override with command-line arguments
    if args.operations is not None:
        config = replace(config, operations=args.operations)
    if args.variants is not None:
        config = replace(config, variants=tuple(args.variants))
    if args.verify:
        config.verify = True
    if args.progress:
        config.progress = True
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level)

    logger = setup_logging(getattr(logging, config.log_level))
    logger.info("Mode: %s", "VERIFY" if config.verify else "PERFORMANCE")

    runner = BenchmarkRunner(config)

    overall_start = time.perf_counter()
    runner.run()
    overall_elapsed = time.perf_counter() - overall_start

    logger.info("TOTAL EXECUTION TIME: %.3f seconds", overall_elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
