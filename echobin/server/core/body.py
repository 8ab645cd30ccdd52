"""
Request body decoding.

Detects the declared body type of a request and decodes it into a
``DecodedBody``. Decoding never raises: any failure is reported as the
``error`` body type.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from starlette.datastructures import UploadFile
from starlette.requests import Request

from ..models import BodyType, DecodedBody
from .flatten import flatten

logger = logging.getLogger("echobin.body")

JSON_MEDIA_TYPES = {"application/json", "application/csp-report"}
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
MULTIPART_MEDIA_TYPE = "multipart/form-data"


def parse_content_type(value: Optional[str]) -> Tuple[str, Dict[str, str]]:
    """
    Split a Content-Type header into its lowercased media type and parameters.

    >>> parse_content_type('text/plain; charset="utf-8"')
    ('text/plain', {'charset': 'utf-8'})
    """
    if not value:
        return "", {}

    media_type, *raw_params = value.split(";")
    params = {}
    for raw in raw_params:
        name, sep, param_value = raw.partition("=")
        if not sep:
            continue
        params[name.strip().lower()] = param_value.strip().strip('"')

    return media_type.strip().lower(), params


def detect_body_type(content_type: Optional[str], has_body: bool) -> BodyType:
    """Map a Content-Type header to the body type used for decoding."""
    if not has_body:
        return "none"

    media_type, _ = parse_content_type(content_type)
    if media_type in JSON_MEDIA_TYPES or media_type.endswith("+json"):
        return "json"
    if media_type == FORM_MEDIA_TYPE:
        return "form"
    if media_type == MULTIPART_MEDIA_TYPE:
        return "multipart"
    if media_type.startswith("text/"):
        return "text"
    return "bytes"


def render_bytes(raw: bytes) -> str:
    """Render raw bytes as comma separated decimal byte values."""
    return ",".join(str(byte) for byte in raw)


def describe_upload(upload: UploadFile) -> Dict[str, Any]:
    return {
        "filename": upload.filename,
        "contentType": upload.content_type,
        "size": upload.size,
    }


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


async def _decode_json(request: Request, raw: bytes) -> Any:
    return json.loads(raw, parse_constant=_reject_constant)


async def _decode_form(request: Request, raw: bytes) -> Any:
    form = await request.form()
    try:
        return flatten(
            (key, value) for key, value in form.multi_items() if isinstance(value, str)
        )
    finally:
        await form.close()


async def _decode_multipart(request: Request, raw: bytes) -> Any:
    form = await request.form()
    try:
        fields = []
        files: Dict[str, List[Dict[str, Any]]] = {}
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                files.setdefault(key, []).append(describe_upload(value))
            else:
                fields.append((key, value))
    finally:
        await form.close()

    return {
        "fields": flatten(fields),
        "files": {
            key: uploads[0] if len(uploads) == 1 else uploads for key, uploads in files.items()
        }
        or None,
    }


async def _decode_text(request: Request, raw: bytes) -> Any:
    _, params = parse_content_type(request.headers.get("content-type"))
    return raw.decode(params.get("charset") or "utf-8")


async def _decode_bytes(request: Request, raw: bytes) -> Any:
    return render_bytes(raw)


async def _decode_none(request: Request, raw: bytes) -> Any:
    return None


DECODERS: Dict[str, Callable[[Request, bytes], Awaitable[Any]]] = {
    "json": _decode_json,
    "form": _decode_form,
    "multipart": _decode_multipart,
    "text": _decode_text,
    "bytes": _decode_bytes,
    "none": _decode_none,
}


async def decode_body(request: Request) -> DecodedBody:
    """
    Read and decode the request body.

    Returns:
        DecodedBody tagged with the detected type, or ``error`` with a null
        value when reading or decoding failed.
    """
    try:
        raw = await request.body()
        body_type = detect_body_type(request.headers.get("content-type"), bool(raw))
        value = await DECODERS[body_type](request, raw)
    except Exception as e:
        logger.warning(
            "Failed to decode request body",
            extra={
                "path": request.url.path,
                "content_type": request.headers.get("content-type"),
                "error_type": type(e).__name__,
                "error_detail": str(e),
            },
        )
        return DecodedBody(type="error", value=None)

    return DecodedBody(type=body_type, value=value)
