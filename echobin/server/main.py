"""
Echo server - httpbin style request introspection

Reflects request metadata (headers, query parameters, body, client address)
back to the caller and simulates status codes, redirects and authentication
challenges.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import router
from .config import ServerConfig
from .core.exceptions import (
    EchoServerError,
    echo_server_exception_handler,
    global_exception_handler,
    http_exception_handler,
)
from .core.logging_config import setup_logging
from .middleware import response_time_middleware, trailing_slash_middleware

logger = logging.getLogger("echobin.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    config: ServerConfig = app.state.config
    logger.info(f"Listening on http://{config.HOST}:{config.PORT}")

    yield

    logger.info("Echo server shutting down.")


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Build the echo application.

    Args:
        config: server settings, read from the environment when omitted
    """
    if config is None:
        config = ServerConfig()

    app = FastAPI(title="Echo Server", version="1.0.0", lifespan=lifespan, redirect_slashes=False)
    app.state.config = config

    # Registered innermost first: timing wraps the trailing-slash redirect.
    app.middleware("http")(trailing_slash_middleware)
    app.middleware("http")(response_time_middleware)

    # Register exception handlers.
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(EchoServerError, echo_server_exception_handler)

    app.include_router(router)

    return app


def run(config: Optional[ServerConfig] = None):
    """Start uvicorn with the configured bind address and logging."""
    import uvicorn

    if config is None:
        config = ServerConfig()
    setup_logging(config)

    uvicorn.run(
        create_app(config),
        host=config.HOST,
        port=config.PORT,
        proxy_headers=config.PROXY_HEADERS,
        forwarded_allow_ips=config.FORWARDED_ALLOW_IPS,
        log_config=None,
    )


if __name__ == "__main__":
    run()
