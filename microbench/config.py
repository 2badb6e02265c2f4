"""Benchmark configurations and predefined presets."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass, replace
from typing import Any

from microbench.core.aggregate import run_for, run_n_times
from microbench.core.result import SummaryStatistics


@dataclass
class BenchmarkConfig:
    """Configuration for one benchmark run.

    ``min_duration_us`` takes precedence over ``n_runs`` when both are set.
    """

    target: str = ""
    n_runs: int | None = 5
    min_duration_us: float | None = None
    title: str | None = None

    @property
    def mode(self) -> str:
        """Either ``"duration"`` or ``"count"``."""
        return "duration" if self.min_duration_us is not None else "count"

    def with_overrides(self, **changes) -> BenchmarkConfig:
        """Return a copy with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


BENCHMARK_PRESETS: dict[str, BenchmarkConfig] = {
    "quick": BenchmarkConfig(n_runs=10),
    "standard": BenchmarkConfig(n_runs=100),
    "thorough": BenchmarkConfig(n_runs=1000),
    "one_second": BenchmarkConfig(n_runs=None, min_duration_us=1_000_000),
}


def run_config(config: BenchmarkConfig, func: Callable[[], Any]) -> SummaryStatistics:
    """Run ``func`` with the aggregator selected by ``config``."""
    if config.mode == "duration":
        return run_for(config.min_duration_us, func)
    return run_n_times(config.n_runs, func)
