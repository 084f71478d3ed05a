"""Benchmark configuration."""

import os
from dataclasses import dataclass, field
from typing import Tuple

from list_bench.measure import OPERATIONS_COUNT
from list_bench.variants import VARIANTS, get_variant

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() == "true"


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.environ.get(name, "")
    if not raw.strip():
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Benchmark parameters
    operations: int = OPERATIONS_COUNT
    variants: Tuple[str, ...] = field(
        default_factory=lambda: tuple(v.name for v in VARIANTS)
    )

    # Execution control
    verify: bool = False
    progress: bool = False

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.operations < 0:
            raise ValueError(
                f"Operation count must be non-negative, got {self.operations}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {self.log_level!r} "
                f"(expected one of {', '.join(LOG_LEVELS)})"
            )
        self.log_level = self.log_level.upper()
        self.variants = tuple(self.variants)
        # Raises ValueError on an unknown name
        for name in self.variants:
            get_variant(name)

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        return cls(
            operations=int(os.environ.get("BENCHMARK_OPERATIONS", str(OPERATIONS_COUNT))),
            variants=_env_list("BENCHMARK_VARIANTS", tuple(v.name for v in VARIANTS)),
            verify=_env_flag("BENCHMARK_VERIFY"),
            progress=_env_flag("BENCHMARK_PROGRESS"),
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "WARNING"),
        )
