"""
Benchmarks package for AVL-G trees.

This package contains ASV benchmarks for performance testing of:
- AVLGTree.insert (tree construction) across imbalance bounds
- AVLGTree.search with configurable hit ratios
- AVLGTree.delete of a random half of the keys

The benchmarks are designed to be robust against CPU and memory load variations
by using deterministic test data and disabling garbage collection while timing.
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
