"""
Request description for the echo endpoints.
"""

from typing import Optional

from starlette.requests import Request

from ..models import BodyRequestInfo, RequestInfo
from .body import decode_body
from .flatten import flatten_headers, flatten_query


def client_origin(request: Request) -> Optional[str]:
    """Client address as reported by the serving layer."""
    return request.client.host if request.client else None


def basic_info(request: Request) -> RequestInfo:
    """Describe origin, URL, query parameters and headers of a request."""
    return RequestInfo(
        origin=client_origin(request),
        url=str(request.url),
        search_params=flatten_query(request.query_params),
        headers=flatten_headers(request.headers),
    )


async def body_info(request: Request) -> BodyRequestInfo:
    """Describe a request including its decoded body."""
    info = basic_info(request)
    body = await decode_body(request)
    return BodyRequestInfo(**info.model_dump(), body=body)
