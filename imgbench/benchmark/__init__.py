"""
Benchmark execution and reporting package.
"""

from .runner import BenchmarkConfig, BenchmarkRunner, EncodeRun
from .metrics import AggregateStat, aggregate, format_bytes
from .reporter import Reporter

__all__ = [
    "BenchmarkConfig",
    "BenchmarkRunner",
    "EncodeRun",
    "AggregateStat",
    "aggregate",
    "format_bytes",
    "Reporter",
]
