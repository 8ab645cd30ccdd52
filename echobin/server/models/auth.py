"""
Pydantic models related to authentication.
"""

from typing import Optional

from pydantic import BaseModel


class BasicAuthResult(BaseModel):
    """Outcome of a Basic auth check."""

    authorized: bool
    username: Optional[str] = None


class BearerAuthResult(BaseModel):
    """Outcome of a Bearer auth check."""

    authorized: bool
    token: Optional[str] = None
