import base64
import io

import httpx
import pytest

from echobin.bench.config import BenchConfig
from echobin.bench.ui import Reporter


def echo_service_handler(request: httpx.Request) -> httpx.Response:
    """Answer like an httpbin-compatible service would."""
    path = request.url.path
    authorization = request.headers.get("authorization", "")

    if path.endswith("/hello/world"):
        expected = "Basic " + base64.b64encode(b"hello:world").decode("ascii")
        return httpx.Response(200 if authorization == expected else 401)
    if path in ("/auth/bearer", "/bearer"):
        return httpx.Response(200 if authorization == "Bearer asdfghjkl" else 401)
    if path.startswith("/status/"):
        return httpx.Response(int(path.rsplit("/", 1)[1]))
    if path in ("/redirect", "/redirect-to"):
        return httpx.Response(302, headers={"Location": "https://deno.land/"})
    return httpx.Response(200, json={"url": str(request.url)})


@pytest.fixture
def bench_config(tmp_path):
    return BenchConfig(
        BENCH_TARGET_URL="http://target.test",
        BENCH_REFERENCE_URL="http://reference.test/",
        LOG_CONFIG_PATH=str(tmp_path / "missing-logging.yml"),
        _env_file=None,
    )


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output):
    return Reporter(iterations=2, width=10, stream=output, color=False)
