"""
Request descriptor models.

Request-scoped descriptions of an incoming request, serialized as the
response of the echo endpoints.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# A key maps to its only value, or to every value in original order.
FlattenedMap = Dict[str, Union[str, List[str]]]

BodyType = Literal["json", "form", "multipart", "text", "bytes", "none", "error"]


class DecodedBody(BaseModel):
    """Tagged representation of a request body."""

    type: BodyType
    value: Any = None

    model_config = ConfigDict(frozen=True)


class RequestInfo(BaseModel):
    """Basic description of a request."""

    origin: Optional[str] = None
    url: str
    search_params: FlattenedMap = Field(default_factory=dict, alias="searchParams")
    headers: FlattenedMap = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BodyRequestInfo(RequestInfo):
    """Request description with the decoded body merged in."""

    body: DecodedBody


class OriginInfo(BaseModel):
    origin: Optional[str] = None


class UserAgentInfo(BaseModel):
    user_agent: Optional[str] = Field(None, alias="user-agent")

    model_config = ConfigDict(populate_by_name=True)


class HeadersInfo(BaseModel):
    headers: FlattenedMap


class ErrorBody(BaseModel):
    """Error payload returned with 4xx/5xx statuses."""

    error: str
