"""Command line entry point: ``python -m ordered_search.performance``."""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import structlog

from ..config import load_config
from ..logging_setup import setup_logging
from ..search_manager import SearchManager
from .benchmark import BenchmarkConfig, BenchmarkStatus, SearchBenchmark


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m ordered_search.performance",
        description="Benchmark the registered ordered searches.",
    )
    parser.add_argument("--search", action="append", dest="searches",
                        help="Search name to benchmark; may be repeated (default: binary_search)")
    parser.add_argument("--sizes", type=int, nargs="+", default=[1000, 10000, 100000])
    parser.add_argument("--iterations", type=int, default=3)
    parser.add_argument("--queries", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--unique-ratio", type=float, default=None,
                        help="Benchmark duplicate-heavy data with this share of distinct values")
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--results-dir", default=None, help="Directory for JSON results")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    setup_logging(config.logging)
    log = structlog.get_logger("ordered_search.performance")

    searches = args.searches or ["binary_search"]
    with SearchManager(config) as manager:
        benchmark = SearchBenchmark(manager, results_dir=args.results_dir)
        results = benchmark.compare(searches, args.sizes, iterations=args.iterations,
                                    queries=args.queries, seed=args.seed,
                                    unique_ratio=args.unique_ratio)

    failed = [name for name, result in results.items() if result.status is BenchmarkStatus.FAILED]
    for name, result in results.items():
        log.info("benchmark finished", search=name, status=result.status.value)
    json.dump({name: result.summary_statistics() for name, result in results.items()},
              sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
