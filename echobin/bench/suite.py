"""
Endpoint suite compared between the echo server and the reference service.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Union
from urllib.parse import quote

JSON_PAYLOAD = json.dumps({"a": 2, "b": "here's a string", "c": None})
REDIRECT_TARGET = "https://deno.land/"


@dataclass(frozen=True)
class EndpointPair:
    """Paths of one endpoint on the target and on the reference service."""

    target: str
    reference: str


Endpoint = Union[str, EndpointPair]


@dataclass(frozen=True)
class BenchmarkCase:
    endpoint: Endpoint
    method: str = "GET"
    body: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    # Non-2xx status the endpoint is expected to answer with.
    expect_status: int | None = None

    @property
    def target_path(self) -> str:
        if isinstance(self.endpoint, EndpointPair):
            return self.endpoint.target
        return self.endpoint

    @property
    def reference_path(self) -> str:
        if isinstance(self.endpoint, EndpointPair):
            return self.endpoint.reference
        return self.endpoint


def basic_credentials(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


BASIC_AUTH_ENDPOINT = EndpointPair(
    target="/auth/basic/hello/world", reference="/basic-auth/hello/world"
)
BEARER_AUTH_ENDPOINT = EndpointPair(target="/auth/bearer", reference="/bearer")
REDIRECT_ENDPOINT = EndpointPair(
    target=f"/redirect?to={quote(REDIRECT_TARGET, safe='')}",
    reference=f"/redirect-to?url={quote(REDIRECT_TARGET, safe='')}",
)


DEFAULT_SUITE: list[BenchmarkCase] = [
    BenchmarkCase("/get?a=b&c=d", headers={"X-Test-Header": "ignore this header!"}),
    BenchmarkCase("/post", method="POST", body=JSON_PAYLOAD),
    BenchmarkCase("/patch", method="PATCH", body=JSON_PAYLOAD),
    BenchmarkCase("/put", method="PUT", body=JSON_PAYLOAD),
    BenchmarkCase("/delete", method="DELETE", body=JSON_PAYLOAD),
    BenchmarkCase(BASIC_AUTH_ENDPOINT, expect_status=401),
    BenchmarkCase(
        BASIC_AUTH_ENDPOINT, headers={"Authorization": basic_credentials("hello", "world")}
    ),
    BenchmarkCase(
        BASIC_AUTH_ENDPOINT,
        headers={"Authorization": basic_credentials("no", "good")},
        expect_status=401,
    ),
    BenchmarkCase(BEARER_AUTH_ENDPOINT, expect_status=401),
    BenchmarkCase(BEARER_AUTH_ENDPOINT, headers={"Authorization": "Bearer asdfghjkl"}),
    BenchmarkCase("/status/403", expect_status=403),
    BenchmarkCase("/status/500", expect_status=500),
    BenchmarkCase("/status/203"),
    BenchmarkCase("/status/304", expect_status=304),
    # Redirects are not followed, only the redirect response is timed.
    BenchmarkCase(REDIRECT_ENDPOINT, expect_status=302),
]
