"""
Authorization header parsing for the Basic and Bearer challenge endpoints.

Credentials are only compared with the values supplied by the caller, no
credential store is involved.
"""

import base64
import binascii
from typing import Optional, Tuple


def split_authorization(header: Optional[str], scheme: str) -> Optional[str]:
    """
    Return the credentials of an ``<scheme> <credentials>`` header.

    The scheme must match exactly and the header must consist of exactly two
    single-space separated tokens, otherwise None is returned.
    """
    if not header:
        return None

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != scheme:
        return None
    return parts[1]


def parse_basic_credentials(header: Optional[str]) -> Optional[Tuple[str, str]]:
    """Decode ``Basic <base64(user:pass)>`` into a (user, password) pair."""
    token = split_authorization(header, "Basic")
    if token is None:
        return None

    try:
        padded = token + "=" * (-len(token) % 4)
        decoded = base64.b64decode(padded, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return None

    parts = decoded.split(":")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def check_basic(header: Optional[str], username: str, password: str) -> bool:
    return parse_basic_credentials(header) == (username, password)


def parse_bearer_token(header: Optional[str]) -> Optional[str]:
    """Token of a ``Bearer <token>`` header, accepted verbatim."""
    return split_authorization(header, "Bearer")
