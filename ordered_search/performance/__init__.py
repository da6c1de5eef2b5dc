"""Benchmarking utilities for the ordered searches."""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkStatus,
    DataGenerator,
    PerformanceMetrics,
    SearchBenchmark,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkStatus",
    "DataGenerator",
    "PerformanceMetrics",
    "SearchBenchmark",
]
