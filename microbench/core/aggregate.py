"""Repeated measurement of a callable, reduced to summary statistics."""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Callable
from typing import Any

from microbench.core.duration import Duration
from microbench.core.errors import InvalidArgument
from microbench.core.result import Result, SummaryStatistics
from microbench.core.stats import summarize
from microbench.core.timer import measure

logger = logging.getLogger(__name__)


def _validate_runs(n) -> None:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 1:
        raise InvalidArgument(f"n={n!r} is not valid. Must be an integer greater than 1.")


def _as_duration(min_duration) -> Duration:
    if isinstance(min_duration, Duration):
        value = min_duration.microseconds
    elif isinstance(min_duration, numbers.Real) and not isinstance(min_duration, bool):
        value = min_duration
    else:
        raise InvalidArgument(f"min_duration={min_duration!r} is not valid. Must be a Duration or microseconds.")
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument(f"min_duration={min_duration!r} is not valid. Must be finite and greater than 0.")
    return min_duration if isinstance(min_duration, Duration) else Duration(float(value))


def run_n_times(n: int, func: Callable[[], Any]) -> SummaryStatistics:
    """Time ``func`` exactly ``n`` times, one call after another.

    Parameters
    ----------
    n : int
        Number of calls. Must be greater than 1.
    func : callable
        Zero-argument unit of work, reused for every call.

    Returns
    -------
    SummaryStatistics
        With ``count == requested_number == n``.

    Raises
    ------
    InvalidArgument
        If ``n`` is not an integer greater than 1.
    """
    _validate_runs(n)
    n = int(n)
    logger.debug("Running %d timed calls", n)

    sample: list[Result] = [measure(func) for _ in range(n)]
    stats = summarize(sample, requested_number=n)

    logger.debug("Finished %d calls in %s", stats.count, stats.total)
    return stats


def run_for(min_duration: Duration | float, func: Callable[[], Any]) -> SummaryStatistics:
    """Time ``func`` repeatedly until the timed calls add up to ``min_duration``.

    The check happens between calls, so at least one call always runs and a
    slow final call can overshoot the target. There is no cap on the number
    of calls.

    Parameters
    ----------
    min_duration : Duration or float
        Minimum total of the timed calls, as a Duration or in microseconds.
        Must be greater than 0.
    func : callable
        Zero-argument unit of work, reused for every call.

    Returns
    -------
    SummaryStatistics
        ``count`` is the number of calls made; ``requested_duration`` echoes
        ``min_duration``.

    Raises
    ------
    InvalidArgument
        If ``min_duration`` is not greater than 0.
    """
    requested = _as_duration(min_duration)
    logger.debug("Running timed calls for at least %s", requested)

    sample: list[Result] = []
    elapsed = Duration(0)
    while elapsed < requested:
        result = measure(func)
        sample.append(result)
        elapsed = elapsed + result.time

    stats = summarize(sample, requested_duration=requested)

    logger.debug("Finished %d calls in %s", stats.count, stats.total)
    return stats
