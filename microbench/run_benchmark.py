"""CLI entry point for benchmarking a callable."""

from __future__ import annotations

import argparse
import functools
import logging
from dataclasses import replace

from microbench.config import BENCHMARK_PRESETS, BenchmarkConfig, run_config
from microbench.core.errors import MicrobenchError
from microbench.core.format import format_summary
from microbench.core.target import resolve_target
from microbench.core.timer import check_arity

logger = logging.getLogger(__name__)

EXAMPLES = """\
examples:
  microbench json:dumps --arg hello --runs 1000
  microbench mypkg.parsers:parse_all --preset one_second
  microbench os:getcwd --duration 250000 --title "cwd lookup"
"""


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Merge the selected preset with explicit command-line options."""
    config = BENCHMARK_PRESETS[args.preset] if args.preset else BenchmarkConfig()
    config = config.with_overrides(target=args.target, title=args.title)

    if args.runs is not None:
        config = replace(config, n_runs=args.runs, min_duration_us=None)
    if args.duration is not None:
        config = replace(config, min_duration_us=args.duration)
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="microbench",
        description="Time a Python callable and summarize repeated runs",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("target", type=str, help="Callable to benchmark, as 'module:function'")
    parser.add_argument(
        "--preset",
        type=str,
        choices=list(BENCHMARK_PRESETS.keys()),
        help="Predefined run settings",
    )
    parser.add_argument("--runs", type=int, help="Number of timed runs")
    parser.add_argument("--duration", type=float, help="Keep running until this many microseconds have been timed")
    parser.add_argument(
        "--arg",
        dest="call_args",
        action="append",
        default=[],
        help="Positional string argument passed to the target (repeatable)",
    )
    parser.add_argument("--title", type=str, help="Title shown above the summary")
    parser.add_argument("--quiet", action="store_true", help="Suppress verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run benchmark CLI."""
    args = build_parser().parse_args(argv)

    log_level = logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )

    config = build_config(args)

    try:
        func = resolve_target(config.target)
        check_arity(func, args.call_args)
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        logger.error("Cannot benchmark %s: %s", config.target, e)
        return 1

    work = functools.partial(func, *args.call_args)

    if config.mode == "duration":
        logger.info("Running %s for at least %.0f microseconds", config.target, config.min_duration_us)
    else:
        logger.info("Running %s %d times", config.target, config.n_runs)

    try:
        stats = run_config(config, work)
    except MicrobenchError as e:
        logger.error("Invalid benchmark settings: %s", e)
        return 1
    except Exception as e:
        logger.error("%s raised %s: %s", config.target, type(e).__name__, e)
        return 1

    logger.info(format_summary(stats, title=config.title or config.target))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
