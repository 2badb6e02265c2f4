"""Containers for single measurements and aggregated statistics."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import polars as pl

from microbench.core.duration import Duration
from microbench.core.format import format_summary


@dataclass(frozen=True)
class Result:
    """Elapsed time and return value of one timed call."""

    time: Duration
    result: Any = None


@dataclass(frozen=True)
class SummaryStatistics:
    """Reduction of one aggregation run.

    Attributes
    ----------
    min, max, median, average, total : Duration
        Statistics over the per-call durations. ``median`` is positional, see
        :func:`~microbench.core.stats.summarize`.
    count : int
        Number of timed calls.
    times : tuple of Duration
        Per-call durations in the order the calls ran.
    requested_number : int, optional
        Repetition count asked of :func:`~microbench.core.aggregate.run_n_times`.
    requested_duration : Duration, optional
        Minimum duration asked of :func:`~microbench.core.aggregate.run_for`.
    """

    min: Duration
    max: Duration
    median: Duration
    average: Duration
    total: Duration
    count: int
    times: tuple[Duration, ...] = ()
    requested_number: int | None = None
    requested_duration: Duration | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary, with durations as float microseconds."""
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Duration):
                value = float(value)
            elif f.name == "times":
                value = [float(t) for t in value]
            out[f.name] = value
        return out

    def to_frame(self) -> pl.DataFrame:
        """Return the per-call durations as a polars DataFrame."""
        return pl.DataFrame(
            {
                "run": list(range(1, len(self.times) + 1)),
                "time_us": [float(t) for t in self.times],
            },
            schema={"run": pl.Int64, "time_us": pl.Float64},
        )

    def __str__(self) -> str:
        return format_summary(self)
