import httpx
import pytest

from echobin.bench.runner import (
    Benchmark,
    BenchmarkError,
    BenchmarkResult,
    report,
    summarize,
    time_request,
)
from echobin.bench.suite import DEFAULT_SUITE, BenchmarkCase, EndpointPair

from .conftest import echo_service_handler


def _client(handler=echo_service_handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_time_request_returns_milliseconds():
    elapsed = time_request(_client(), "http://x.test/get", BenchmarkCase("/get"))

    assert elapsed >= 0


def test_time_request_accepts_expected_error_status():
    case = BenchmarkCase("/status/403", expect_status=403)

    assert time_request(_client(), "http://x.test/status/403", case) >= 0


def test_time_request_raises_on_unexpected_status():
    case = BenchmarkCase("/status/500")

    with pytest.raises(BenchmarkError) as exc_info:
        time_request(_client(), "http://x.test/status/500", case)

    assert exc_info.value.status_code == 500
    assert "http://x.test/status/500" in str(exc_info.value)


def test_time_request_sends_method_body_and_headers():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = request.content
        seen["header"] = request.headers.get("x-test-header")
        return httpx.Response(200)

    case = BenchmarkCase("/post", method="POST", body='{"a": 2}', headers={"X-Test-Header": "v"})
    time_request(_client(handler), "http://x.test/post", case)

    assert seen == {"method": "POST", "body": b'{"a": 2}', "header": "v"}


def test_benchmark_uses_service_specific_paths(reporter):
    urls = []

    def handler(request):
        urls.append(str(request.url))
        return echo_service_handler(request)

    benchmark = Benchmark(
        _client(handler),
        target_url="http://target.test/",
        reference_url="http://reference.test",
        reporter=reporter,
        iterations=2,
    )
    case = BenchmarkCase(EndpointPair(target="/auth/bearer", reference="/bearer"), expect_status=401)

    result = benchmark.run_case(case)

    assert urls == [
        "http://target.test/auth/bearer",
        "http://target.test/auth/bearer",
        "http://reference.test/bearer",
        "http://reference.test/bearer",
    ]
    assert result.target_ms >= 0
    assert result.reference_ms >= 0


def test_default_suite_passes_against_compatible_services(reporter):
    benchmark = Benchmark(
        _client(),
        target_url="http://target.test",
        reference_url="http://reference.test",
        reporter=reporter,
        iterations=2,
    )

    results = benchmark.run(DEFAULT_SUITE)

    assert len(results) == len(DEFAULT_SUITE)


def test_summarize():
    summary = summarize([1.0, 2.0, 6.0])

    assert summary.average == 3.0
    assert summary.minimum == 1.0
    assert summary.maximum == 6.0


def test_report_prints_both_services(reporter, output):
    case = BenchmarkCase("/get")
    results = [
        BenchmarkResult(case=case, target_ms=1.0, reference_ms=4.0),
        BenchmarkResult(case=case, target_ms=3.0, reference_ms=8.0),
    ]

    target, reference = report(results, reporter)

    assert target.average == 2.0
    assert reference.maximum == 8.0
    text = output.getvalue()
    assert "target:\n  average: 2.00ms\n  min: 1.00ms\n  max: 3.00ms\n" in text
    assert "reference:\n  average: 6.00ms\n  min: 4.00ms\n  max: 8.00ms\n" in text
