"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .auth import BasicAuthResult, BearerAuthResult
from .info import (
    BodyRequestInfo,
    BodyType,
    DecodedBody,
    ErrorBody,
    FlattenedMap,
    HeadersInfo,
    OriginInfo,
    RequestInfo,
    UserAgentInfo,
)

__all__ = [
    "BasicAuthResult",
    "BearerAuthResult",
    "BodyRequestInfo",
    "BodyType",
    "DecodedBody",
    "ErrorBody",
    "FlattenedMap",
    "HeadersInfo",
    "OriginInfo",
    "RequestInfo",
    "UserAgentInfo",
]
