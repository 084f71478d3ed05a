"""Correctness verification for benchmarked containers."""

from typing import MutableSequence

from list_bench.logging_config import get_logger

logger = get_logger("verify")


class VerificationError(AssertionError):
    """Raised when a container does not hold what the benchmark step left in it."""


def verify_contents(container: MutableSequence[int], count: int) -> None:
    """
    Check that the container holds exactly ``0..count-1`` in order.

    This is the verify phase - not timed in benchmarks.

    Raises:
        VerificationError: on a size or value mismatch
    """
    if len(container) != count:
        raise VerificationError(
            f"Expected {count} elements, got {len(container)}"
        )
    for index, value in enumerate(container):
        if value != index:
            raise VerificationError(
                f"Element #{index} mismatch: expected {index}, got {value}"
            )
    logger.debug("Verified %d elements in %s", count, type(container).__name__)


def verify_empty(container: MutableSequence[int]) -> None:
    """Check that a drained container has no elements left."""
    if len(container) != 0:
        raise VerificationError(
            f"Expected an empty container after drain, got {len(container)} elements"
        )
