from __future__ import annotations

import argparse
import sys

import httpx

from echobin.common.core.http_client import HttpClientFactory
from echobin.common.core.logging_config import setup_logging

from .config import BenchConfig
from .runner import Benchmark, BenchmarkError, report
from .suite import DEFAULT_SUITE
from .ui import Reporter


def build_parser(config: BenchConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="echobin-bench",
        description="Compare echo server latency with an httpbin-compatible reference.",
    )
    parser.add_argument("--target", default=config.BENCH_TARGET_URL, help="echo server base URL")
    parser.add_argument(
        "--reference", default=config.BENCH_REFERENCE_URL, help="reference service base URL"
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=config.BENCH_ITERATIONS,
        help="requests per endpoint and service",
    )
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    return parser


def main(
    argv: list[str] | None = None,
    config: BenchConfig | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    if config is None:
        config = BenchConfig()
    args = build_parser(config).parse_args(argv)
    if args.iterations < 1:
        print("--iterations must be at least 1", file=sys.stderr)
        return 2

    setup_logging(config.LOG_CONFIG_PATH, log_level=config.LOG_LEVEL)

    reporter = Reporter(
        iterations=args.iterations,
        width=config.BENCH_PROGRESS_WIDTH,
        color=False if args.no_color else None,
    )
    factory = HttpClientFactory(config)
    with factory.create_sync_client(timeout=config.BENCH_TIMEOUT, transport=transport) as client:
        benchmark = Benchmark(
            client,
            target_url=args.target,
            reference_url=args.reference,
            reporter=reporter,
            iterations=args.iterations,
        )
        try:
            results = benchmark.run(DEFAULT_SUITE)
        except (BenchmarkError, httpx.HTTPError) as e:
            print(f"\nBenchmark aborted: {e}", file=sys.stderr)
            return 1

    report(results, reporter)
    return 0
