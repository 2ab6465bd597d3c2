"""
ASV benchmarks for AVLGTree operations.

Each benchmark is parameterised over the imbalance bound G so the cost of
rotations can be compared against the cost of deeper search paths.
"""

import gc

from benchmarks.benchmark_utils import BaseBenchmark, BenchmarkUtils
from benchmarks.config import BenchmarkConfig

CONFIG = BenchmarkConfig.from_env()


class AVLGTreeInsertBenchmarks(BaseBenchmark):
    """Benchmarks for AVLGTree construction via sequential inserts."""

    params = [
        CONFIG.max_imbalances,
        CONFIG.sizes,
        ['uniform', 'sequential', 'clustered', 'descending'],
    ]
    param_names = ['max_imbalance', 'size', 'distribution']

    min_run_count = 3

    def setup(self, max_imbalance, size, distribution):
        super().setup(max_imbalance, size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=CONFIG.seed + hash((max_imbalance, size, distribution)) % 1000,
            distribution=distribution
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_insert_tree_construction(self, max_imbalance, size, distribution):
        """Benchmark full tree construction by inserting all keys."""
        BenchmarkUtils.build_tree(self.keys, max_imbalance)

    def track_rotations(self, max_imbalance, size, distribution):
        """Number of single rotations needed to build the tree."""
        return BenchmarkUtils.build_tree(self.keys, max_imbalance).rotation_count

    def track_height(self, max_imbalance, size, distribution):
        """Height of the finished tree."""
        return BenchmarkUtils.build_tree(self.keys, max_imbalance).get_height()


class AVLGTreeSearchBenchmarks(BaseBenchmark):
    """Benchmarks for AVLGTree.search()."""

    params = [
        CONFIG.max_imbalances,
        CONFIG.sizes,
        [0.0, 1.0],  # hit ratios
    ]
    param_names = ['max_imbalance', 'size', 'hit_ratio']

    min_run_count = 3

    # Class-level cache; hit_ratio does not affect tree structure
    _tree_cache = {}

    def setup(self, max_imbalance, size, hit_ratio):
        super().setup(max_imbalance, size, hit_ratio)
        base_seed = CONFIG.seed + hash((max_imbalance, size)) % 1000
        tree_cache_key = (max_imbalance, size)
        if tree_cache_key not in self._tree_cache:
            insert_keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=base_seed)
            tree = BenchmarkUtils.build_tree(insert_keys, max_imbalance)
            self._tree_cache[tree_cache_key] = (tree, insert_keys)

        self.tree, self.insert_keys = self._tree_cache[tree_cache_key]
        self.lookup_keys = BenchmarkUtils.create_lookup_keys(
            insert_keys=self.insert_keys,
            hit_ratio=hit_ratio,
            seed=base_seed + 1000
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    @classmethod
    def clear_cache(cls):
        """Clear the tree cache to free memory when needed."""
        cls._tree_cache.clear()
        gc.collect()

    def time_search(self, max_imbalance, size, hit_ratio):
        search = self.tree.search
        for key in self.lookup_keys:
            search(key)


class AVLGTreeDeleteBenchmarks(BaseBenchmark):
    """Benchmarks for deleting a random half of the keys."""

    params = [
        CONFIG.max_imbalances,
        CONFIG.sizes,
    ]
    param_names = ['max_imbalance', 'size']

    min_run_count = 3
    # One timed call per setup: the deletes consume the tree
    number = 1
    warmup_time = 0.0

    def setup(self, max_imbalance, size):
        super().setup(max_imbalance, size)
        seed = CONFIG.seed + hash((max_imbalance, size)) % 1000
        keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=seed)
        # ASV runs setup before every repeat, so each timing gets a fresh tree
        self.tree = BenchmarkUtils.build_tree(keys, max_imbalance)
        self.victims = keys[: size // 2]
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_delete_half(self, max_imbalance, size):
        delete = self.tree.delete
        for key in self.victims:
            delete(key)
