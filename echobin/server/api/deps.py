"""
Dependency Injection for the echo API.

Manage request handler dependencies using FastAPI Depends.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from ..config import ServerConfig
from ..core.describe import basic_info, body_info
from ..models import BodyRequestInfo, RequestInfo


# ==========================================
# 1. Service Accessors
# ==========================================


def get_config(request: Request) -> ServerConfig:
    return request.app.state.config


ConfigDep = Annotated[ServerConfig, Depends(get_config)]


# ==========================================
# 2. Request Introspection
# ==========================================


def get_basic_info(request: Request) -> RequestInfo:
    return basic_info(request)


async def get_body_info(request: Request) -> BodyRequestInfo:
    return await body_info(request)


async def get_authorization(authorization: Optional[str] = Header(None)) -> Optional[str]:
    return authorization


BasicInfoDep = Annotated[RequestInfo, Depends(get_basic_info)]
BodyInfoDep = Annotated[BodyRequestInfo, Depends(get_body_info)]
AuthorizationDep = Annotated[Optional[str], Depends(get_authorization)]
