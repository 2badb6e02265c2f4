"""Elapsed-time value type with microsecond resolution."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from microbench.core.errors import InvalidArgument
from microbench.core.format import format_duration


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative elapsed time, stored in microseconds.

    Durations add to each other, divide by a count to give a (possibly
    fractional) mean, and order totally so ``min``/``max``/``sorted`` work.
    ``sum()`` works directly on an iterable of durations because adding the
    integer ``0`` is the identity.

    Attributes
    ----------
    microseconds : int or float
        Elapsed time in microseconds.
    """

    microseconds: float

    def __post_init__(self):
        if isinstance(self.microseconds, bool) or not isinstance(self.microseconds, numbers.Real):
            raise InvalidArgument(f"microseconds={self.microseconds!r} is not valid. Must be a real number.")
        if math.isnan(self.microseconds) or self.microseconds < 0:
            raise InvalidArgument(f"microseconds={self.microseconds} is not valid. Must be non-negative.")

    @classmethod
    def at(cls, microseconds: float) -> Duration:
        """Build a duration from a microsecond count."""
        return cls(microseconds)

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        return cls(seconds * 1_000_000)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds / 1_000)

    @property
    def milliseconds(self) -> float:
        return self.microseconds / 1_000

    @property
    def seconds(self) -> float:
        return self.microseconds / 1_000_000

    def __add__(self, other):
        if isinstance(other, Duration):
            return Duration(self.microseconds + other.microseconds)
        if isinstance(other, numbers.Integral) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    __radd__ = __add__

    def __truediv__(self, count):
        if isinstance(count, bool) or not isinstance(count, numbers.Real):
            return NotImplemented
        return Duration(self.microseconds / count)

    def __float__(self) -> float:
        return float(self.microseconds)

    def __str__(self) -> str:
        return format_duration(self.microseconds)
