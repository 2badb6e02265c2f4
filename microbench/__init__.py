"""In-process micro-benchmarking: time a callable and summarize repeated runs."""

from microbench.config import BENCHMARK_PRESETS, BenchmarkConfig, run_config
from microbench.core import (
    ArityMismatch,
    Duration,
    InvalidArgument,
    MicrobenchError,
    ResourceExhaustion,
    Result,
    SummaryStatistics,
    format_duration,
    format_summary,
    measure,
    measure_attr,
    run_for,
    run_n_times,
    summarize,
    timing,
)

__version__ = "0.1.0"

__all__ = [
    "BENCHMARK_PRESETS",
    "ArityMismatch",
    "BenchmarkConfig",
    "Duration",
    "InvalidArgument",
    "MicrobenchError",
    "ResourceExhaustion",
    "Result",
    "SummaryStatistics",
    "format_duration",
    "format_summary",
    "measure",
    "measure_attr",
    "run_config",
    "run_for",
    "run_n_times",
    "summarize",
    "timing",
]
