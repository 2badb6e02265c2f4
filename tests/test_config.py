"""Tests for benchmark configuration and presets."""

import pytest

from microbench.config import BENCHMARK_PRESETS, BenchmarkConfig, run_config
from microbench.core.duration import Duration
from microbench.core.errors import InvalidArgument


class TestBenchmarkConfig:
    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.n_runs == 5
        assert config.min_duration_us is None
        assert config.mode == "count"

    def test_duration_mode_wins(self):
        config = BenchmarkConfig(n_runs=10, min_duration_us=100)
        assert config.mode == "duration"

    def test_with_overrides_skips_none(self):
        config = BenchmarkConfig(target="os:getcwd").with_overrides(target=None, title="cwd")
        assert config.target == "os:getcwd"
        assert config.title == "cwd"

    def test_with_overrides_returns_copy(self):
        base = BenchmarkConfig()
        base.with_overrides(n_runs=50)
        assert base.n_runs == 5

    def test_to_dict(self):
        assert BenchmarkConfig(target="m:f").to_dict() == {
            "target": "m:f",
            "n_runs": 5,
            "min_duration_us": None,
            "title": None,
        }


class TestPresets:
    def test_names(self):
        assert set(BENCHMARK_PRESETS) == {"quick", "standard", "thorough", "one_second"}

    @pytest.mark.parametrize("name", ["quick", "standard", "thorough"])
    def test_count_presets(self, name):
        config = BENCHMARK_PRESETS[name]
        assert config.mode == "count"
        assert config.n_runs > 1

    def test_one_second(self):
        config = BENCHMARK_PRESETS["one_second"]
        assert config.mode == "duration"
        assert config.min_duration_us == 1_000_000


class TestRunConfig:
    def test_count_mode(self, counter):
        stats = run_config(BenchmarkConfig(n_runs=4), counter)
        assert stats.count == 4
        assert stats.requested_number == 4

    def test_duration_mode(self, counter):
        stats = run_config(BenchmarkConfig(min_duration_us=250), counter)
        assert stats.requested_duration == Duration(250)
        assert stats.total >= Duration(250)

    def test_invalid_runs(self, counter):
        with pytest.raises(InvalidArgument):
            run_config(BenchmarkConfig(n_runs=1), counter)
