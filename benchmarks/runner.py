"""Core benchmark runner for list performance measurements."""

import logging
import sys
from typing import List, Optional, TextIO

from tqdm import tqdm

from list_bench.logging_config import get_logger
from list_bench.measure import (
    Sample,
    measure_add_time,
    measure_delete_time,
    measure_get_time,
)
from list_bench.variants import ListVariant, get_variant

from .config import BenchmarkConfig
from .verify import verify_contents, verify_empty

logger = get_logger("runner")

HEADER = "Method | Collection | Operations | Time (ms)"
SEPARATOR = "-" * 48


class BenchmarkRunner:
    """
    Runs Add, Get and Remove against every list variant.

    Per variant:
    1. Setup (not timed): create an empty container
    2. Run (timed): fill-forward, read-forward, drain-backward
    3. Verify (not timed, optional): contents after each step
    4. Report: one line per step on ``out``
    """

    def __init__(self, config: BenchmarkConfig, out: Optional[TextIO] = None):
        """
        Initialize benchmark runner.

        Args:
            config: Benchmark configuration
            out: Stream receiving the results table (default: stdout)
        """
        self.config = config
        self.out = out if out is not None else sys.stdout
        self._check_logging_level()

    def _check_logging_level(self) -> None:
        """Warn if verbose logging is enabled during measurement."""
        current_level = logging.getLogger("list_bench").getEffectiveLevel()
        if current_level < logging.INFO:
            logger.warning(
                "Verbose logging (%s) is enabled. This may affect benchmark timing! "
                "Set log level to INFO or higher for accurate measurements.",
                logging.getLevelName(current_level),
            )

    def print_header(self) -> None:
        print(HEADER, file=self.out)
        print(SEPARATOR, file=self.out)

    def report(self, sample: Sample) -> None:
        print(sample.format(), file=self.out)

    def test_list_performance(self, variant: ListVariant) -> List[Sample]:
        """
        Run the three timed steps on a single container of ``variant``.

        The same container flows through all steps: Add fills it, Get reads
        it back, Remove drains it.

        Returns:
            Samples for Add, Get and Remove, in that order
        """
        count = self.config.operations
        container = variant.create()
        samples = []

        elapsed = measure_add_time(container, count)
        samples.append(Sample("Add", variant.name, count, elapsed))
        self.report(samples[-1])
        if self.config.verify:
            verify_contents(container, count)

        elapsed = measure_get_time(container, count)
        samples.append(Sample("Get", variant.name, count, elapsed))
        self.report(samples[-1])
        if self.config.verify:
            verify_contents(container, count)

        elapsed = measure_delete_time(container, count)
        samples.append(Sample("Remove", variant.name, count, elapsed))
        self.report(samples[-1])
        if self.config.verify:
            verify_empty(container)

        logger.debug(
            "%s: %s", variant.name,
            ", ".join(f"{s.operation}={s.elapsed_ms:.3f}ms" for s in samples),
        )
        return samples

    def run(self) -> List[Sample]:
        """Print the header, then benchmark every configured variant in order."""
        self.print_header()
        samples = []
        variants = tqdm(
            [get_variant(name) for name in self.config.variants],
            desc="Variants",
            disable=not self.config.progress,
            file=sys.stderr,
            leave=False,
        )
        for variant in variants:
            samples.extend(self.test_list_performance(variant))
        logger.info(
            "Collected %d samples for %d operations per step",
            len(samples), self.config.operations,
        )
        return samples
