"""Statistics for AVL-G trees."""

import argparse
import logging
import math
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np
from tqdm import tqdm

from avlg_trees.avlg_tree import AVLGTree
from avlg_trees.invariants import assert_tree_invariants_raise
from avlg_trees.tree_stats import avlg_stats_
from avlg_trees.utils import max_height_for_size

logger = logging.getLogger(__name__)


def create_avlg_tree(keys, max_imbalance: int) -> AVLGTree:
    """Build a tree by inserting each key in order."""
    tree = AVLGTree(max_imbalance)
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree


def random_keys(n: int) -> list:
    """Draw n distinct keys uniformly from a key space of 2^24."""
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n}, Available: {space}")
    return random.sample(range(space), k=n)


def repeated_experiment(
    size: int,
    repetitions: int,
    max_imbalance: int,
) -> None:
    """
    Repeatedly builds random AVL-G trees with ``size`` keys, then deletes a
    random half of them. Aggregates heights, rotation counts and timings over
    all repetitions.
    """
    t_all_0 = time.perf_counter()

    heights = []
    heights_after_delete = []
    insert_rotations = []
    delete_rotations = []
    times_build = []
    times_delete = []
    times_stats = []

    for _ in tqdm(range(repetitions), desc=f"n={size} G={max_imbalance}", leave=False):
        keys = random_keys(size)

        t0 = time.perf_counter()
        tree = create_avlg_tree(keys, max_imbalance)
        times_build.append(time.perf_counter() - t0)
        insert_rotations.append(tree.rotation_count)

        t0 = time.perf_counter()
        stats = avlg_stats_(tree)
        times_stats.append(time.perf_counter() - t0)
        assert_tree_invariants_raise(tree, stats)
        heights.append(stats.height)

        victims = np.random.permutation(keys)[: size // 2].tolist()
        rotations_before = tree.rotation_count
        t0 = time.perf_counter()
        for key in victims:
            tree.delete(key)
        times_delete.append(time.perf_counter() - t0)
        delete_rotations.append(tree.rotation_count - rotations_before)

        stats = avlg_stats_(tree)
        assert_tree_invariants_raise(tree, stats)
        heights_after_delete.append(stats.height)

    # Perfect height: ceil(log2(size + 1)) - 1
    perfect_height = math.ceil(math.log2(size + 1)) - 1 if size > 0 else -1
    height_bound = max_height_for_size(size, max_imbalance)

    rows = [
        ("Height", np.mean(heights), np.var(heights)),
        ("Height after delete", np.mean(heights_after_delete), np.var(heights_after_delete)),
        ("Perfect height", perfect_height, None),
        ("Height bound", height_bound, None),
        ("Height amplification", mean(h / perfect_height for h in heights) if perfect_height > 0 else 0, None),
        ("Rotations/insert", np.mean(insert_rotations) / size, np.var(insert_rotations) / size ** 2),
        (
            "Rotations/delete",
            np.mean(delete_rotations) / max(size // 2, 1),
            np.var(delete_rotations) / max(size // 2, 1) ** 2,
        ),
    ]

    # Log table
    header = f"{'Metric':<22} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<22} {avg:>15}")
        else:
            var_str = f"({var:.4f})"
            avg_fmt = f"{avg:15.4f}"
            logger.info(f"{name:<22} {avg_fmt} {var_str:>15}")

    # Performance metrics
    sum_build = sum(times_build)
    sum_delete = sum(times_delete)
    sum_stats = sum(times_stats)
    total_sum = sum_build + sum_delete + sum_stats

    perf_rows = [
        ("Build time (s)", times_build, sum_build),
        ("Delete time (s)", times_delete, sum_delete),
        ("Stats time (s)", times_stats, sum_stats),
    ]

    header = f"{'Metric':<20}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, times, total in perf_rows:
        pct = (total / total_sum * 100) if total_sum else 0
        logger.info(f"{name:<20}{np.mean(times):13.6f}{np.var(times):13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    t_all_1 = time.perf_counter() - t_all_0
    logger.info("Execution time: %.3f seconds", t_all_1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for AVL-G trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument(
        "--gs", type=int, nargs="+", default=[1, 2, 3, 4, 8], help="List of imbalance bounds (G) to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/avlg_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,  # Override any existing logging configuration
    )

    # Apply the chosen level to the library logger as well
    logging.getLogger("avlg_trees").setLevel(log_level)

    for n in args.sizes:
        for G in args.gs:
            logger.info("")
            logger.info("")
            logger.info(
                f"---------------- NOW RUNNING EXPERIMENT: n = {n}, G = {G}, repetitions = {args.repetitions} ----------------"
            )
            t0 = time.perf_counter()
            repeated_experiment(size=n, repetitions=args.repetitions, max_imbalance=G)
            elapsed = time.perf_counter() - t0
            logger.info(f"Total experiment time: {elapsed:.3f} seconds")
