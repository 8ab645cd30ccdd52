"""
Core logic package.

Provides request introspection (flattening, body decoding, description)
and Authorization header parsing.
"""

from .auth import check_basic, parse_basic_credentials, parse_bearer_token
from .body import decode_body, detect_body_type, render_bytes
from .describe import basic_info, body_info, client_origin
from .flatten import flatten, flatten_headers, flatten_query

__all__ = [
    "check_basic",
    "parse_basic_credentials",
    "parse_bearer_token",
    "decode_body",
    "detect_body_type",
    "render_bytes",
    "basic_info",
    "body_info",
    "client_origin",
    "flatten",
    "flatten_headers",
    "flatten_query",
]
