"""Statistics reduction shared by the aggregators."""

from __future__ import annotations

import numpy as np

from microbench.core.duration import Duration
from microbench.core.errors import InvalidArgument
from microbench.core.result import Result, SummaryStatistics


def descending_times(sample: list[Result]) -> np.ndarray:
    """Return the sample's durations in microseconds, largest first.

    The sort is stable, so equal durations keep the order they ran in.
    """
    times = np.asarray([float(r.time) for r in sample], dtype=np.float64)
    order = np.argsort(-times, kind="stable")
    return times[order]


def summarize(
    sample: list[Result],
    requested_number: int | None = None,
    requested_duration: Duration | None = None,
) -> SummaryStatistics:
    """Reduce a sample of timed calls to summary statistics.

    Parameters
    ----------
    sample : list of Result
        Timed calls, in the order they ran.
    requested_number : int, optional
        Passed through to the output.
    requested_duration : Duration, optional
        Passed through to the output.

    Returns
    -------
    SummaryStatistics
        ``median`` is the element at index ``count // 2`` of the durations
        sorted in descending order. For an even count this is the lower of
        the two middle values, not their mean.

    Raises
    ------
    InvalidArgument
        If the sample is empty.
    """
    count = len(sample)
    if count == 0:
        raise InvalidArgument("Cannot summarize an empty sample.")

    ordered = descending_times(sample)
    total = sum((r.time for r in sample), Duration(0))

    return SummaryStatistics(
        min=Duration(float(ordered[-1])),
        max=Duration(float(ordered[0])),
        median=Duration(float(ordered[count // 2])),
        average=total / count,
        total=total,
        count=count,
        times=tuple(r.time for r in sample),
        requested_number=requested_number,
        requested_duration=requested_duration,
    )
