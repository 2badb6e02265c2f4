"""Measurement engine: isolated timer, aggregators and their statistics."""

from microbench.core.aggregate import run_for, run_n_times
from microbench.core.duration import Duration
from microbench.core.errors import ArityMismatch, InvalidArgument, MicrobenchError, ResourceExhaustion
from microbench.core.format import format_duration, format_summary
from microbench.core.result import Result, SummaryStatistics
from microbench.core.stats import summarize
from microbench.core.timer import measure, measure_attr, timing

__all__ = [
    "ArityMismatch",
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
    "run_for",
    "run_n_times",
    "summarize",
    "timing",
]
