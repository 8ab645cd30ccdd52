"""
Where: echobin/server/tests/test_body.py
What: Tests for body type detection and decoding through the write endpoints.
Why: Every body shape must come back tagged, and failures must stay 200.
"""

import pytest

from echobin.server.core.body import detect_body_type, parse_content_type, render_bytes


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("application/json", "json"),
        ("application/json; charset=utf-8", "json"),
        ("Application/JSON", "json"),
        ("application/vnd.api+json", "json"),
        ("application/csp-report", "json"),
        ("application/x-www-form-urlencoded", "form"),
        ("multipart/form-data; boundary=xyz", "multipart"),
        ("text/plain", "text"),
        ("text/html; charset=latin-1", "text"),
        ("application/octet-stream", "bytes"),
        ("image/png", "bytes"),
        (None, "bytes"),
    ],
)
def test_detect_body_type(content_type, expected):
    assert detect_body_type(content_type, has_body=True) == expected


def test_detect_body_type_without_body():
    assert detect_body_type("application/json", has_body=False) == "none"


def test_parse_content_type():
    assert parse_content_type('Text/Plain; Charset="UTF-8"; flag') == (
        "text/plain",
        {"charset": "UTF-8"},
    )
    assert parse_content_type(None) == ("", {})


def test_render_bytes_is_decimal_comma_list():
    assert render_bytes(b"\x01\xff") == "1,255"
    assert render_bytes(b"") == ""


def test_json_body(client):
    response = client.post("/post", json={"a": 2, "b": "x", "c": None})

    assert response.status_code == 200
    assert response.json()["body"] == {"type": "json", "value": {"a": 2, "b": "x", "c": None}}


def test_json_scalar_body(client):
    response = client.put("/put", content=b"[1, 2]", headers={"Content-Type": "application/json"})

    assert response.json()["body"] == {"type": "json", "value": [1, 2]}


@pytest.mark.parametrize("content", [b'{"a": ', b'{"a": NaN}', b"[Infinity]", b"[-Infinity]"])
def test_malformed_json_is_reported_as_error(client, content):
    response = client.post("/post", content=content, headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json()["body"] == {"type": "error", "value": None}


def test_urlencoded_form_body(client):
    response = client.post(
        "/post",
        content=b"a=1&b=2&a=3",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.json()["body"] == {"type": "form", "value": {"a": ["1", "3"], "b": "2"}}


def test_multipart_body_with_file(client):
    response = client.post(
        "/post",
        data={"name": "value"},
        files={"upload": ("hello.txt", b"hello", "text/plain")},
    )

    body = response.json()["body"]
    assert body["type"] == "multipart"
    assert body["value"]["fields"] == {"name": "value"}
    assert body["value"]["files"] == {
        "upload": {"filename": "hello.txt", "contentType": "text/plain", "size": 5}
    }


def test_multipart_body_without_files(client):
    content = (
        b"--xyz\r\n"
        b'Content-Disposition: form-data; name="a"\r\n\r\n'
        b"1\r\n"
        b"--xyz\r\n"
        b'Content-Disposition: form-data; name="a"\r\n\r\n'
        b"2\r\n"
        b"--xyz--\r\n"
    )
    response = client.patch(
        "/patch", content=content, headers={"Content-Type": "multipart/form-data; boundary=xyz"}
    )

    assert response.json()["body"] == {
        "type": "multipart",
        "value": {"fields": {"a": ["1", "2"]}, "files": None},
    }


def test_multipart_without_boundary_is_reported_as_error(client):
    response = client.post(
        "/post", content=b"garbage", headers={"Content-Type": "multipart/form-data"}
    )

    assert response.status_code == 200
    assert response.json()["body"] == {"type": "error", "value": None}


def test_text_body(client):
    response = client.post("/post", content="hi there", headers={"Content-Type": "text/plain"})

    assert response.json()["body"] == {"type": "text", "value": "hi there"}


def test_text_body_honors_charset(client):
    response = client.post(
        "/post",
        content="café".encode("latin-1"),
        headers={"Content-Type": "text/plain; charset=latin-1"},
    )

    assert response.json()["body"] == {"type": "text", "value": "café"}


@pytest.mark.parametrize(
    "content, content_type",
    [
        (b"\xff\xfe\xfa", "text/plain"),
        (b"abc", "text/plain; charset=no-such-charset"),
    ],
)
def test_undecodable_text_is_reported_as_error(client, content, content_type):
    response = client.post("/post", content=content, headers={"Content-Type": content_type})

    assert response.status_code == 200
    assert response.json()["body"] == {"type": "error", "value": None}


def test_binary_body(client):
    response = client.post(
        "/post", content=b"\x01\xff", headers={"Content-Type": "application/octet-stream"}
    )

    assert response.json()["body"] == {"type": "bytes", "value": "1,255"}


def test_body_without_content_type_is_bytes(client):
    response = client.request("DELETE", "/delete", content=b"ab")

    assert response.json()["body"] == {"type": "bytes", "value": "97,98"}


def test_missing_body(client):
    response = client.delete("/delete")

    assert response.status_code == 200
    assert response.json()["body"] == {"type": "none", "value": None}


@pytest.mark.asyncio
async def test_decode_failure_is_logged(async_client, caplog):
    with caplog.at_level("WARNING", logger="echobin.body"):
        response = await async_client.post(
            "/post", content=b"{", headers={"Content-Type": "application/json"}
        )

    assert response.status_code == 200
    records = [r for r in caplog.records if r.name == "echobin.body"]
    assert records
    assert records[0].error_type == "JSONDecodeError"
