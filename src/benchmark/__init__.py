"""
Benchmarking module for phone book search strategies.

This module times linear, sort-then-search and hash table lookups over one
shared directory and reports hit counts and phase durations.
"""

from .benchmark import (
    BenchmarkConfig,
    PhoneBookBenchmark,
    RunResult,
)
from .strategies import SearchStrategy, SortStrategy

__all__ = [
    "BenchmarkConfig",
    "PhoneBookBenchmark",
    "RunResult",
    "SearchStrategy",
    "SortStrategy",
]
