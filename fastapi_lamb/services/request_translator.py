"""Translate gateway events into application requests."""

from typing import Optional, Union
from urllib.parse import quote

import httpx

from fastapi_lamb.exceptions import InvalidRequestError
from fastapi_lamb.models.config import AdapterConfig
from fastapi_lamb.models.event import IncomingEvent
from fastapi_lamb.services.dispatch import DispatchClient
from fastapi_lamb.utils.paths import PathResolver, encode_query

SUPPORTED_METHODS = frozenset(
    {"GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "TRACE", "CONNECT", "PATCH"}
)

# Characters kept as-is when escaping a path; "%" keeps existing escapes intact
PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~%"


def to_method(method: str) -> str:
    """
    Validate an HTTP method.

    Raises:
        InvalidRequestError: If the method is not a standard method
    """
    if method not in SUPPORTED_METHODS:
        raise InvalidRequestError(
            f"unknown method '{method}'", details={"method": method}
        )
    return method


def decode_header_value(name: str, value: Union[str, bytes]) -> str:
    """
    Decode a header value as text.

    Args:
        name: Header name, used in the error message
        value: Header value, raw octets or already decoded text

    Returns:
        The value as a string

    Raises:
        InvalidRequestError: If the value has non-visible ASCII characters
    """
    octets = value.encode("utf-8") if isinstance(value, str) else value
    if all(32 <= octet < 127 or octet == 9 for octet in octets):
        return octets.decode("ascii")
    raise InvalidRequestError(
        f"invalid value for header '{name}'", details={"header": name}
    )


def build_uri(
    config: AdapterConfig, event: IncomingEvent, paths: PathResolver
) -> str:
    """Dispatch path for the configured mode plus the encoded query string."""
    path = paths.dispatch_path(config.base_path_mode)
    return quote(path, safe=PATH_SAFE_CHARS) + encode_query(event.query_params)


def translate_request(
    client: DispatchClient,
    config: AdapterConfig,
    event: IncomingEvent,
    paths: Optional[PathResolver] = None,
) -> httpx.Request:
    """
    Build the application request for an event.

    Args:
        client: Dispatch client the request is addressed to
        config: Adapter configuration
        event: Incoming event
        paths: Resolver for the event, shared with the caller if it has one

    Returns:
        Request ready for dispatch

    Raises:
        InvalidRequestError: Unsupported method or non-text header value
    """
    method = to_method(event.method)
    uri = build_uri(config, event, paths or PathResolver(event))
    headers = [
        (name, decode_header_value(name, value)) for name, value in event.headers
    ]
    return client.build_request(method, uri, headers, event.body)
