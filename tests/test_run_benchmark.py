"""Tests for the command-line entry point."""

import logging

import pytest

from microbench.run_benchmark import build_config, build_parser, main


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


class TestBuildConfig:
    def _config(self, *argv):
        return build_config(build_parser().parse_args(list(argv)))

    def test_defaults(self):
        config = self._config("os:getcwd")
        assert config.target == "os:getcwd"
        assert config.mode == "count"
        assert config.n_runs == 5

    def test_preset(self):
        config = self._config("os:getcwd", "--preset", "quick")
        assert config.n_runs == 10

    def test_runs_override_duration_preset(self):
        config = self._config("os:getcwd", "--preset", "one_second", "--runs", "3")
        assert config.mode == "count"
        assert config.n_runs == 3

    def test_duration(self):
        config = self._config("os:getcwd", "--duration", "500")
        assert config.mode == "duration"
        assert config.min_duration_us == 500.0

    def test_preset_not_mutated(self):
        self._config("os:getcwd", "--preset", "quick", "--runs", "3")
        config = self._config("os:getcwd", "--preset", "quick")
        assert config.n_runs == 10

    def test_unknown_preset(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["os:getcwd", "--preset", "nope"])


class TestMain:
    def test_count_run(self, info_logs):
        assert main(["os:getcwd", "--runs", "3"]) == 0
        assert "Runs: 3" in info_logs.text
        assert "Requested runs: 3" in info_logs.text

    def test_duration_run(self, info_logs):
        assert main(["os:getcwd", "--duration", "200"]) == 0
        assert "Requested duration: 200 microseconds" in info_logs.text

    def test_passes_args(self, info_logs):
        assert main(["builtins:len", "--arg", "abc", "--runs", "2"]) == 0

    def test_title(self, info_logs):
        assert main(["os:getcwd", "--runs", "2", "--title", "cwd lookup"]) == 0
        assert " cwd lookup" in info_logs.text

    def test_bad_target(self, info_logs):
        assert main(["no_such_module_xyz:f"]) == 1
        assert "Cannot benchmark" in info_logs.text

    def test_arity_mismatch(self, info_logs):
        assert main(["os.path:join"]) == 1
        assert "Cannot benchmark" in info_logs.text

    def test_invalid_runs(self, info_logs):
        assert main(["os:getcwd", "--runs", "1"]) == 1
        assert "Invalid benchmark settings" in info_logs.text

    def test_target_raises(self, info_logs):
        assert main(["json:loads", "--arg", "{", "--runs", "2"]) == 1
        assert "JSONDecodeError" in info_logs.text


class TestHelp:
    def test_epilog_lists_examples(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--help"])
        out = capsys.readouterr().out
        assert "examples:" in out
        assert "  microbench json:dumps --arg hello --runs 1000" in out
