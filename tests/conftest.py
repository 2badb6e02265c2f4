"""Shared test configuration utilities for microbench."""

from __future__ import annotations

import os
import time

import pytest

from microbench.core.duration import Duration
from microbench.core.result import Result

_ENV_FULL = "MICROBENCH_RUN_FULL_TESTS"


def pytest_collection_modifyitems(items):
    """Skip long-running timing tests unless the full-test environment variable is set."""
    if os.environ.get(_ENV_FULL):
        return

    skip_marker = pytest.mark.skip(
        reason=(f"Skipped to keep the default test run fast. Set {_ENV_FULL}=1 to execute the full test battery.")
    )

    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_marker)


class CallCounter:
    """Zero-argument callable that records how often it ran."""

    def __init__(self, value=None, sleep_s=0.0):
        self.calls = 0
        self.value = value
        self.sleep_s = sleep_s

    def __call__(self):
        self.calls += 1
        if self.sleep_s:
            time.sleep(self.sleep_s)
        return self.value


@pytest.fixture
def counter():
    return CallCounter(value=42)


@pytest.fixture
def make_sample():
    """Build a sample of results from microsecond values."""

    def _make(times):
        return [Result(time=Duration(t), result=i) for i, t in enumerate(times)]

    return _make
