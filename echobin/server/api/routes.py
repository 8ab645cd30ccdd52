"""
Echo and utility endpoints.
"""

import logging
import re
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from ..core.auth import check_basic, parse_bearer_token
from ..core.describe import client_origin
from ..core.exceptions import (
    InvalidStatusCodeError,
    MissingRedirectTargetError,
    StatusCodeOutOfRangeError,
)
from ..core.flatten import flatten_headers
from ..models import (
    BasicAuthResult,
    BearerAuthResult,
    BodyRequestInfo,
    HeadersInfo,
    OriginInfo,
    RequestInfo,
    UserAgentInfo,
)
from .deps import AuthorizationDep, BasicInfoDep, BodyInfoDep, ConfigDep

logger = logging.getLogger("echobin.routes")

router = APIRouter()

STATUS_CODE_PATTERN = re.compile(r"[0-9]+")
MIN_STATUS_CODE = 200
MAX_STATUS_CODE = 599
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Characters left untouched when a redirect target needs percent-encoding.
LOCATION_SAFE_CHARS = ":/?#[]@!$&'()*+,;=%~"


# ===========================================
# Echo endpoints
# ===========================================


@router.get("/get", response_model=RequestInfo)
async def echo_get(info: BasicInfoDep):
    return info


@router.post("/post", response_model=BodyRequestInfo)
async def echo_post(info: BodyInfoDep):
    return info


@router.put("/put", response_model=BodyRequestInfo)
async def echo_put(info: BodyInfoDep):
    return info


@router.patch("/patch", response_model=BodyRequestInfo)
async def echo_patch(info: BodyInfoDep):
    return info


@router.delete("/delete", response_model=BodyRequestInfo)
async def echo_delete(info: BodyInfoDep):
    return info


@router.get("/ip", response_model=OriginInfo)
async def echo_ip(request: Request):
    return OriginInfo(origin=client_origin(request))


@router.get("/user-agent", response_model=UserAgentInfo)
async def echo_user_agent(request: Request):
    return UserAgentInfo(user_agent=request.headers.get("user-agent"))


@router.get("/headers", response_model=HeadersInfo)
async def echo_headers(request: Request):
    return HeadersInfo(headers=flatten_headers(request.headers))


# ===========================================
# Authentication challenges
# ===========================================


@router.get("/auth/basic/{username}/{password}", response_model=BasicAuthResult)
async def basic_auth(
    username: str, password: str, authorization: AuthorizationDep, config: ConfigDep
):
    """Succeed when the Basic credentials equal the path parameters."""
    if check_basic(authorization, username, password):
        return BasicAuthResult(authorized=True, username=username)

    logger.debug("Basic auth rejected", extra={"username": username})
    return JSONResponse(
        status_code=401,
        content=BasicAuthResult(authorized=False).model_dump(),
        headers={"WWW-Authenticate": f'Basic realm="{config.BASIC_AUTH_REALM}"'},
    )


@router.get("/auth/bearer", response_model=BearerAuthResult)
async def bearer_auth(authorization: AuthorizationDep):
    """Succeed for any well-formed Bearer token."""
    token = parse_bearer_token(authorization)
    if token is not None:
        return BearerAuthResult(authorized=True, token=token)

    return JSONResponse(
        status_code=401,
        content=BearerAuthResult(authorized=False).model_dump(),
        headers={"WWW-Authenticate": "Bearer"},
    )


# ===========================================
# Status codes and redirects
# ===========================================


def parse_status_code(code: str) -> int:
    """
    Validate a status code path parameter.

    Raises:
        InvalidStatusCodeError: `code` is not made of ASCII digits
        StatusCodeOutOfRangeError: `code` is outside [200, 599]
    """
    if not STATUS_CODE_PATTERN.fullmatch(code):
        raise InvalidStatusCodeError(code)

    try:
        status_code = int(code)
    except ValueError:
        # Digit strings past the interpreter int conversion limit
        raise InvalidStatusCodeError(code) from None

    if status_code < MIN_STATUS_CODE or status_code > MAX_STATUS_CODE:
        raise StatusCodeOutOfRangeError(status_code)
    return status_code


@router.api_route("/status/{code}", methods=ALL_METHODS)
async def echo_status(code: str):
    """Answer with the requested status code and no body."""
    return Response(status_code=parse_status_code(code))


def first_query_param(request: Request, name: str) -> Optional[str]:
    values = request.query_params.getlist(name)
    return values[0] if values else None


def location_header(target: str) -> str:
    try:
        target.encode("latin-1")
    except UnicodeEncodeError:
        return quote(target, safe=LOCATION_SAFE_CHARS)
    return target


@router.get("/redirect", status_code=302)
async def redirect(request: Request):
    """Redirect to `to`, permanently when `permanent` is `1` or `true`."""
    to = first_query_param(request, "to")
    if not to:
        raise MissingRedirectTargetError()

    permanent = first_query_param(request, "permanent")
    status_code = 301 if permanent in ("1", "true") else 302
    return Response(status_code=status_code, headers={"Location": location_header(to)})
