"""
Echo server configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from pydantic import Field

from echobin.common.core.config import BaseAppConfig


class ServerConfig(BaseAppConfig):
    """
    Configuration management for the echo server.
    """

    # Server settings
    HOST: str = Field(default="0.0.0.0", description="Listen host")
    PORT: int = Field(default=3000, ge=0, le=65535, description="Listen port")
    PROXY_HEADERS: bool = Field(
        default=False, description="Trust X-Forwarded-For for the reported client address"
    )
    FORWARDED_ALLOW_IPS: str = Field(
        default="127.0.0.1", description="Comma separated proxies allowed to set forwarded headers"
    )

    # Endpoint behavior
    BASIC_AUTH_REALM: str = Field(default="blah", description="Realm of the Basic challenge")
    RESPONSE_TIME_HEADER: str = Field(
        default="X-Response-Time", description="Header carrying the handling time"
    )

    # model_config is inherited
