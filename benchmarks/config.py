"""Benchmark configuration."""

import os
from dataclasses import dataclass


def _int_list(value):
    """Parse a comma separated list of ints; None or empty means default."""
    if not value:
        return None
    return [int(v) for v in value.split(",")]


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""
    
    # Reproducibility
    seed: int = 42
    
    # Benchmark parameters
    sizes: list[int] = None
    max_imbalances: list[int] = None
    
    # Execution control
    verify_only: bool = False
    skip_warmup: bool = False
    
    # Logging
    log_level: str = "INFO"
    
    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [1000, 10000]
        if self.max_imbalances is None:
            self.max_imbalances = [1, 2, 4, 8]
    
    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            sizes=_int_list(os.environ.get("BENCHMARK_SIZES")),
            max_imbalances=_int_list(os.environ.get("BENCHMARK_MAX_IMBALANCES")),
            verify_only=os.environ.get("BENCHMARK_VERIFY_ONLY", "").lower() == "true",
            skip_warmup=os.environ.get("BENCHMARK_SKIP_WARMUP", "").lower() == "true",
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        )
