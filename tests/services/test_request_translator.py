"""Tests for translating gateway events into application requests."""

import pytest
from conftest import api_gateway_event, custom_domain_with_base_event, make_app

from fastapi_lamb.exceptions import InvalidRequestError
from fastapi_lamb.models.config import AdapterConfig, BasePathMode
from fastapi_lamb.services.dispatch import DispatchClient
from fastapi_lamb.services.request_translator import (
    decode_header_value,
    to_method,
    translate_request,
)


@pytest.fixture
def client() -> DispatchClient:
    return DispatchClient(make_app())


@pytest.mark.parametrize(
    "method",
    ["GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "TRACE", "CONNECT", "PATCH"],
)
def test_supported_methods(method):
    """Test every standard method is accepted."""
    assert to_method(method) == method


@pytest.mark.parametrize("method", ["PROPFIND", "get", ""])
def test_unsupported_method(method):
    """Test extension and lowercase methods are rejected."""
    with pytest.raises(InvalidRequestError) as exc_info:
        to_method(method)

    assert exc_info.value.error_code == "INVALID_REQUEST"
    assert exc_info.value.status_code == 400


def test_decode_header_value_accepts_text_and_ascii_bytes():
    """Test str values pass through and ASCII bytes decode."""
    assert decode_header_value("accept", "text/html") == "text/html"
    assert decode_header_value("accept", b"text/html;\tq=0.9") == "text/html;\tq=0.9"


def test_decode_header_value_rejects_non_text():
    """Test non-visible octets fail naming the header."""
    with pytest.raises(InvalidRequestError, match="x-binary"):
        decode_header_value("x-binary", b"caf\xe9")


@pytest.mark.parametrize("value", ["caf\u00e9", "line\nbreak", "bell\x07"])
def test_decode_header_value_rejects_non_ascii_text(value):
    """Test decoded text with non-visible characters fails naming the header."""
    with pytest.raises(InvalidRequestError, match="x-name"):
        decode_header_value("x-name", value)


def test_translate_request_builds_url(client):
    """Test the URL carries the full path and the encoded query string."""
    event = api_gateway_event(
        query_params=[("q", "a b"), ("tag", "x"), ("q", "c")],
    )
    config = AdapterConfig(base_path_mode=BasePathMode.INCLUDE)

    request = translate_request(client, config, event)

    assert request.method == "GET"
    assert request.url.path == "/Prod/path/"
    assert request.url.query == b"q=a%20b&q=c&tag=x"


def test_translate_request_exclude_uses_api_path(client):
    """Test the exclude mode strips the custom domain base path."""
    config = AdapterConfig(base_path_mode=BasePathMode.EXCLUDE)

    request = translate_request(client, config, custom_domain_with_base_event())

    assert request.url.path == "/path/"


def test_translate_request_escapes_non_ascii_path(client):
    """Test non-ASCII path characters are escaped and escapes are kept."""
    event = api_gateway_event(path="/café/a%2Fb")
    config = AdapterConfig(base_path_mode=BasePathMode.EXCLUDE)

    request = translate_request(client, config, event)

    assert request.url.raw_path == b"/caf%C3%A9/a%2Fb"


def test_translate_request_copies_headers_and_body(client):
    """Test headers keep their order and the body is passed through."""
    event = api_gateway_event(
        method="POST",
        headers=[
            ("host", "abc.execute-api.us-east-1.amazonaws.com"),
            ("x-multi", "1"),
            ("x-multi", b"2"),
        ],
        body=b"\x00\x01binary",
    )
    config = AdapterConfig()

    request = translate_request(client, config, event)

    assert request.headers.get_list("x-multi") == ["1", "2"]
    assert request.headers["host"] == "abc.execute-api.us-east-1.amazonaws.com"
    assert request.content == b"\x00\x01binary"


def test_translate_request_rejects_bad_header(client):
    """Test a non-text header value fails translation."""
    event = api_gateway_event(headers=[("x-bad", b"\xff\xfe")])

    with pytest.raises(InvalidRequestError, match="x-bad"):
        translate_request(client, AdapterConfig(), event)


def test_translate_request_rejects_bad_method(client):
    """Test an unsupported method fails translation."""
    with pytest.raises(InvalidRequestError, match="PROPFIND"):
        translate_request(client, AdapterConfig(), api_gateway_event(method="PROPFIND"))
