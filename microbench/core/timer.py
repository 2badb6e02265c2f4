"""Isolated timing of a single callable invocation."""

from __future__ import annotations

import contextvars
import inspect
import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from microbench.core.duration import Duration
from microbench.core.errors import ArityMismatch, ResourceExhaustion
from microbench.core.result import Result

logger = logging.getLogger(__name__)


def _describe(func) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def check_arity(func: Callable, args: Sequence[Any]) -> None:
    """Raise ArityMismatch unless ``func(*args)`` binds.

    Callables without an introspectable signature are accepted as-is.
    """
    if not callable(func):
        raise TypeError(f"{func!r} is not callable.")
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(*args)
    except TypeError as e:
        raise ArityMismatch(f"{_describe(func)} cannot be called with {len(args)} argument(s): {e}") from e


def _timed_call(func: Callable, args: tuple) -> tuple[int, Any]:
    start = time.perf_counter_ns()
    value = func(*args)
    elapsed = time.perf_counter_ns() - start
    return elapsed, value


def measure(func: Callable, args: Sequence[Any] = ()) -> Result:
    """Time one call of ``func(*args)`` on a dedicated worker thread.

    A single-worker executor is created for this call only and torn down
    afterwards. The worker runs inside a copy of the caller's context, so
    ``ContextVar`` values are visible to ``func``. Only the call itself is
    timed; starting the worker and handing back the result are not.

    Parameters
    ----------
    func : callable
        Unit of work to time.
    args : sequence, optional
        Positional arguments for ``func``.

    Returns
    -------
    Result
        Elapsed time and whatever ``func`` returned.

    Raises
    ------
    ArityMismatch
        If ``func`` cannot accept ``len(args)`` positional arguments. Raised
        before ``func`` is called.
    ResourceExhaustion
        If the worker thread cannot be started.
    Exception
        Anything ``func`` raises is re-raised unchanged.
    """
    args = tuple(args)
    check_arity(func, args)

    ctx = contextvars.copy_context()
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="microbench-timer") as executor:
        try:
            future = executor.submit(ctx.run, _timed_call, func, args)
        except RuntimeError as e:
            raise ResourceExhaustion(f"Could not start a worker to time {_describe(func)}.") from e
        elapsed_ns, value = future.result()

    elapsed = Duration.from_nanoseconds(elapsed_ns)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Timed %s: %.3f us", _describe(func), elapsed.microseconds)
    return Result(time=elapsed, result=value)


def measure_attr(owner: Any, name: str, args: Sequence[Any] = ()) -> Result:
    """Look up ``owner.name`` and time one call of it."""
    return measure(getattr(owner, name), args)


def timing(func: Callable, args: Sequence[Any] = ()) -> Duration:
    """Return only the elapsed time of ``func(*args)``."""
    return measure(func, args).time
