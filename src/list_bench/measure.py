"""
Timing helpers for the list benchmark.

Each ``measure_*`` function runs one loop over ``count`` elements and
returns the elapsed time in nanoseconds, read from a monotonic clock.
Failures inside the loop (e.g. ``IndexError``) propagate to the caller.
"""
import time
from dataclasses import dataclass
from typing import Callable, MutableSequence

from list_bench.variants import append, get, remove_at

OPERATIONS_COUNT = 10_000

NANOS_PER_MILLI = 1_000_000

Clock = Callable[[], int]


@dataclass(frozen=True)
class Sample:
    """One timing record for a single (operation, variant) pair."""
    operation: str
    variant: str
    operations: int
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / NANOS_PER_MILLI

    def format(self) -> str:
        return format_result(self.operation, self.variant, self.operations, self.elapsed_ns)


def format_result(method: str, list_type: str, count: int, elapsed_ns: int) -> str:
    """Render a sample as ``method | list_type | count | ms``."""
    return f"{method} | {list_type} | {count} | {elapsed_ns / NANOS_PER_MILLI:.3f} ms"


def fill_list(container: MutableSequence[int], count: int = OPERATIONS_COUNT) -> MutableSequence[int]:
    """Append ``0..count-1`` to the container. Untimed setup."""
    for i in range(count):
        append(container, i)
    return container


def measure_add_time(
    container: MutableSequence[int],
    count: int = OPERATIONS_COUNT,
    clock: Clock = time.perf_counter_ns,
) -> int:
    start = clock()
    for i in range(count):
        append(container, i)
    return clock() - start


def measure_get_time(
    container: MutableSequence[int],
    count: int = OPERATIONS_COUNT,
    clock: Clock = time.perf_counter_ns,
) -> int:
    start = clock()
    for i in range(count):
        get(container, i)
    return clock() - start


def measure_delete_time(
    container: MutableSequence[int],
    count: int = OPERATIONS_COUNT,
    clock: Clock = time.perf_counter_ns,
) -> int:
    """Remove indices ``count-1`` down to ``0``; empty range when count is 0."""
    start = clock()
    for i in range(count - 1, -1, -1):
        remove_at(container, i)
    return clock() - start
