"""
Benchmarking utilities for AVL-G trees.

This module provides common utilities and base classes for ASV benchmarking
that work with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output (every rotation is
    logged at DEBUG).
"""

import random
import gc
import logging
from typing import List, Tuple
import numpy as np

from avlg_trees.avlg_tree import AVLGTree
from benchmarks.config import BenchmarkConfig

_CONFIG = BenchmarkConfig.from_env()

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = _CONFIG.seed

_logger = logging.getLogger(__name__)


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations.

    This class provides methods for generating deterministic test data and
    performing common benchmark setup operations while ensuring reproducibility.
    """

    @staticmethod
    def check_logging_level():
        """
        Check if logging level is appropriate for benchmarking.

        Raises if DEBUG or lower (more verbose) logging is enabled, as this
        can significantly contaminate benchmark results with I/O overhead.
        """
        avlg_logger = logging.getLogger("avlg_trees")
        # Use getEffectiveLevel() to handle NOTSET correctly
        effective_level = avlg_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                  seed: int = None,
                                  key_range: Tuple[int, int] = (1, 1000000),
                                  distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic, duplicate-free keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of key values (min, max)
            distribution: 'uniform', 'clustered', 'sequential' or 'descending'.
                The last two are the insertion orders that force the most
                rotations.

        Returns:
            List of deterministic keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        random.seed(seed)
        np.random.seed(seed)

        min_key, max_key = key_range
        if max_key - min_key + 1 < size:
            raise ValueError("Not enough unique keys available to generate desired size")

        if distribution == 'uniform':
            # Sample without replacement for uniform distribution (no duplicates)
            population = np.arange(min_key, max_key + 1)
            return np.random.choice(population, size=size, replace=False).tolist()
        elif distribution == 'clustered':
            # Five hot spots, then deduplicate and top up with uniform keys
            cluster_centers = np.linspace(min_key, max_key, 5, dtype=int)
            cluster_size = size // 5
            keys = np.empty(0, dtype=int)

            for center in cluster_centers:
                cluster_keys = np.random.normal(center, (max_key - min_key) // 20, cluster_size)
                cluster_keys = np.clip(cluster_keys, min_key, max_key).astype(int)
                keys = np.concatenate([keys, cluster_keys])

            unique_keys = np.unique(keys)[:size]
            additional_needed = size - len(unique_keys)
            if additional_needed > 0:
                remaining = np.setdiff1d(np.arange(min_key, max_key + 1), unique_keys)
                pad = np.random.choice(remaining, size=additional_needed, replace=False)
                unique_keys = np.concatenate([unique_keys, pad])
            # np.unique sorts; restore a random insertion order
            return np.random.permutation(unique_keys).tolist()
        elif distribution == 'sequential':
            return list(range(min_key, min_key + size))
        elif distribution == 'descending':
            return list(range(min_key + size - 1, min_key - 1, -1))
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def build_tree(keys: List[int], max_imbalance: int) -> AVLGTree:
        """Create an AVL-G tree holding ``keys``, inserted in list order."""
        tree = AVLGTree(max_imbalance)
        insert = tree.insert
        for key in keys:
            insert(key)
        return tree

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                          hit_ratio: float = 0.8,
                          seed: int = None,
                          num_lookups = 1000) -> List[int]:
        """
        Create keys for lookup operations with specified hit ratio.

        Args:
            insert_keys: Keys that were inserted (for hits)
            hit_ratio: Ratio of lookups that should be hits (0.0 to 1.0)
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            num_lookups: Number of lookup keys to generate

        Returns:
            List of lookup keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        random.seed(seed)
        np.random.seed(seed)

        if not insert_keys:
            return np.random.randint(1, 1000001, size=num_lookups).tolist()

        num_hits = int(num_lookups * hit_ratio)
        num_misses = num_lookups - num_hits

        # Select hits from inserted keys (allowing duplicates to maintain hit ratio)
        hit_keys = random.choices(insert_keys, k=num_hits) if num_hits > 0 else []

        # Misses are drawn above the largest inserted key, so they never collide
        max_key = max(insert_keys)
        miss_keys = np.random.randint(max_key + 1, max_key * 2 + 2, size=num_misses).tolist()

        lookup_keys = hit_keys + miss_keys
        random.shuffle(lookup_keys)
        return lookup_keys


class BaseBenchmark:
    """Base class for ASV benchmarks optimized for ASV's built-in timing.

    This class provides a standard setup/teardown pattern that ensures:
    - Garbage collection is disabled during timed sections
    - Logging level is appropriate for benchmarking
    - Consistent parameter handling across benchmarks
    """

    params = []
    param_names = []

    # Let ASV handle timing optimization automatically
    warmup_time = 0.0 if _CONFIG.skip_warmup else 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Setup method called before each benchmark.

        Subclasses should:
        1. Call super().setup(*params) first
        2. Prepare test data
        3. Call gc.collect() to clean up setup overhead
        4. Call gc.disable() to prevent GC during measurement
        """
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        """Re-enables garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()
