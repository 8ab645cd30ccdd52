"""
Benchmark configuration.
"""

from pydantic import Field

from echobin.common.core.config import BaseAppConfig


class BenchConfig(BaseAppConfig):
    """
    Settings for the latency comparison between two echo services.
    """

    BENCH_TARGET_URL: str = Field(
        default="https://httpbin.deno.dev", description="Base URL of the echo server under test"
    )
    BENCH_REFERENCE_URL: str = Field(
        default="https://pie.dev", description="Base URL of the httpbin-compatible reference"
    )
    BENCH_ITERATIONS: int = Field(default=10, ge=1, description="Requests per endpoint and service")
    BENCH_TIMEOUT: float = Field(default=30.0, gt=0, description="Request timeout (seconds)")
    BENCH_PROGRESS_WIDTH: int = Field(default=25, ge=1, description="Progress bar width")
