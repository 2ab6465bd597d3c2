#!/usr/bin/env python3
"""
In-process entry point for AVL-G tree benchmarks.

ASV remains the tool for tracked measurements (``asv run``). This script
gives a quick standalone run with proper phase separation:
- Setup (not timed): Key generation
- Run (timed): Insert all keys, search every key, delete half of them
- Verify (not timed): Invariant and key checks on the resulting trees

Usage:
    # Run with default settings
    python -m benchmarks.run_benchmarks

    # Run with custom seed for reproducibility
    BENCHMARK_SEED=123 python -m benchmarks.run_benchmarks

    # Run in verify-only mode (no timing, only correctness)
    BENCHMARK_VERIFY_ONLY=true python -m benchmarks.run_benchmarks

    # Restrict the grid
    python -m benchmarks.run_benchmarks --sizes 1000 --gs 1 3
"""

import argparse
import logging
import os
import sys
import time
from datetime import datetime

from tqdm import tqdm

from .benchmark_utils import BenchmarkUtils
from .config import BenchmarkConfig
from .verify import DISTRIBUTIONS, verify_config


def setup_logging(config: BenchmarkConfig, log_dir: str = None) -> None:
    """
    Configure logging for benchmark output.

    Args:
        config: Benchmark configuration
        log_dir: Optional directory for log files
    """
    handlers = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = os.path.join(log_dir, f"benchmark_{ts}.log")
        handlers.append(logging.FileHandler(log_path, mode="w"))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,  # Override any existing configuration
    )


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run AVL-G tree benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility (default: from env or 42)",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        help="Tree sizes to benchmark (default: 1000 10000)",
    )
    parser.add_argument(
        "--gs",
        type=int,
        nargs="+",
        help="Imbalance bounds G to test (default: 1 2 4 8)",
    )
    parser.add_argument(
        "--verify-only",
        action="store_true",
        help="Run in verify-only mode (no timing)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: benchmarks/logs)",
    )

    return parser.parse_args()


def time_operations(keys, max_imbalance):
    """Time construction, a full search pass and deleting half the keys."""
    t0 = time.perf_counter()
    tree = BenchmarkUtils.build_tree(keys, max_imbalance)
    insert_time = time.perf_counter() - t0
    height = tree.get_height()

    search = tree.search
    t0 = time.perf_counter()
    for key in keys:
        search(key)
    search_time = time.perf_counter() - t0

    delete = tree.delete
    t0 = time.perf_counter()
    for key in keys[: len(keys) // 2]:
        delete(key)
    delete_time = time.perf_counter() - t0

    return insert_time, search_time, delete_time, height, tree.rotation_count


def main() -> int:
    """
    Main benchmark execution.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args()

    # Start with config from environment
    config = BenchmarkConfig.from_env()

    # Override with command-line arguments
    if args.seed is not None:
        config.seed = args.seed
    if args.sizes is not None:
        config.sizes = args.sizes
    if args.gs is not None:
        config.max_imbalances = args.gs
    if args.verify_only:
        config.verify_only = True
    if args.log_level is not None:
        config.log_level = args.log_level

    log_dir = args.log_dir or os.path.join(os.path.dirname(__file__), "logs")
    setup_logging(config, log_dir if not config.verify_only else None)

    logging.info("=" * 70)
    logging.info("AVL-G TREE BENCHMARKS")
    logging.info("=" * 70)

    if config.verify_only:
        logging.info("Mode: VERIFY-ONLY (correctness checks, no timing)")
        return 0 if verify_config(config) else 1

    logging.info("Mode: PERFORMANCE (timed measurements)")

    overall_start = time.perf_counter()
    header = (
        f"{'G':>3} {'n':>7} {'distribution':>12} {'insert (s)':>11} "
        f"{'search (s)':>11} {'delete (s)':>11} {'height':>7} {'rotations':>10}"
    )
    rows = []
    grid = [
        (g, n, d)
        for g in config.max_imbalances
        for n in config.sizes
        for d in DISTRIBUTIONS
    ]
    for max_imbalance, size, distribution in tqdm(grid, desc="configurations", unit="cfg"):
        keys = BenchmarkUtils.generate_deterministic_keys(
            size=size, seed=config.seed, distribution=distribution
        )
        insert_time, search_time, delete_time, height, rotations = time_operations(
            keys, max_imbalance
        )
        rows.append(
            f"{max_imbalance:>3} {size:>7} {distribution:>12} {insert_time:>11.4f} "
            f"{search_time:>11.4f} {delete_time:>11.4f} {height:>7} {rotations:>10}"
        )

    logging.info("")
    logging.info(header)
    logging.info("-" * len(header))
    for row in rows:
        logging.info(row)

    # Verify (not timed)
    logging.info("")
    passed = verify_config(config)

    overall_elapsed = time.perf_counter() - overall_start
    logging.info("")
    logging.info("=" * 70)
    logging.info(f"TOTAL EXECUTION TIME: {overall_elapsed:.3f} seconds")
    logging.info("=" * 70)

    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
