"""
Sequential latency benchmark of the echo server against a reference service.
"""

from __future__ import annotations

import logging
import statistics
import time
from dataclasses import dataclass

import httpx

from .suite import BenchmarkCase
from .ui import SERVICE_REFERENCE, SERVICE_TARGET, Reporter

logger = logging.getLogger("echobin.bench")


class BenchmarkError(Exception):
    """Raised when a measured request answers with an unexpected status."""

    def __init__(self, url: str, status_code: int, reason: str = ""):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Fetching {url} failed with status {status_code} {reason}".rstrip())


@dataclass(frozen=True)
class BenchmarkResult:
    case: BenchmarkCase
    target_ms: float
    reference_ms: float


@dataclass(frozen=True)
class Summary:
    average: float
    minimum: float
    maximum: float


def time_request(client: httpx.Client, url: str, case: BenchmarkCase) -> float:
    """
    Time one request in milliseconds.

    Raises:
        BenchmarkError: the status is neither 2xx nor the expected one
    """
    start = time.perf_counter()
    response = client.request(case.method, url, content=case.body, headers=case.headers)
    elapsed = time.perf_counter() - start

    if not response.is_success and response.status_code != case.expect_status:
        raise BenchmarkError(url, response.status_code, response.reason_phrase)

    return elapsed * 1000


class Benchmark:
    """Times every case of a suite against the target and the reference."""

    def __init__(
        self,
        client: httpx.Client,
        target_url: str,
        reference_url: str,
        reporter: Reporter,
        iterations: int = 10,
    ):
        self.client = client
        self.target_url = target_url.rstrip("/")
        self.reference_url = reference_url.rstrip("/")
        self.reporter = reporter
        self.iterations = iterations

    def measure(self, service: str, base_url: str, path: str, case: BenchmarkCase) -> float:
        """Average duration of `iterations` sequential requests."""
        url = base_url + path
        self.reporter.progress(service, path, 0)

        values = []
        for i in range(1, self.iterations + 1):
            values.append(time_request(self.client, url, case))
            self.reporter.progress(service, path, i)

        average = statistics.mean(values)
        logger.debug(
            "Measured endpoint",
            extra={"service": service, "url": url, "latency_ms": round(average, 2)},
        )
        return average

    def run_case(self, case: BenchmarkCase) -> BenchmarkResult:
        target_ms = self.measure(SERVICE_TARGET, self.target_url, case.target_path, case)
        reference_ms = self.measure(
            SERVICE_REFERENCE, self.reference_url, case.reference_path, case
        )
        return BenchmarkResult(case=case, target_ms=target_ms, reference_ms=reference_ms)

    def run(self, cases: list[BenchmarkCase]) -> list[BenchmarkResult]:
        self.reporter.newline()
        results = [self.run_case(case) for case in cases]
        self.reporter.newline()
        return results


def summarize(values: list[float]) -> Summary:
    return Summary(average=statistics.mean(values), minimum=min(values), maximum=max(values))


def report(results: list[BenchmarkResult], reporter: Reporter) -> tuple[Summary, Summary]:
    """Print and return the target and reference summaries."""
    target = summarize([result.target_ms for result in results])
    reference = summarize([result.reference_ms for result in results])

    reporter.summary(SERVICE_TARGET, target.average, target.minimum, target.maximum)
    reporter.summary(SERVICE_REFERENCE, reference.average, reference.minimum, reference.maximum)
    return target, reference
