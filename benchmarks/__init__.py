"""
Benchmarks package for array-backed and linked-node lists.

This package drives the timing helpers in ``list_bench``:
- Fill-forward (append at the tail)
- Read-forward (read every index in order)
- Drain-backward (remove from the last index down to the first)

Run it with ``python -m benchmarks.run_benchmarks``.
"""

from .config import BenchmarkConfig
from .runner import BenchmarkRunner

__all__ = ["BenchmarkConfig", "BenchmarkRunner"]
