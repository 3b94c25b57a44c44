"""Translate application responses into gateway responses."""

from typing import Iterable, Optional

from fastapi_lamb.exceptions import InvalidResponseError
from fastapi_lamb.models.config import AdapterConfig, BodyEncoding
from fastapi_lamb.models.response import (
    BinaryBody,
    EmptyBody,
    OutgoingResponse,
    ResponseBody,
    TextBody,
)

_FORBIDDEN_VALUE_CHARS = ("\r", "\n", "\x00")


def declared_encoding(
    config: AdapterConfig, headers: Iterable[tuple[str, str]]
) -> BodyEncoding:
    """
    Look up the body encoding for a response's content type.

    Parameters such as ``; charset=utf-8`` are ignored and the media type
    is compared lowercase.

    Args:
        config: Adapter configuration
        headers: Response headers

    Returns:
        Configured encoding, or the default for unlisted types
    """
    content_type = next(
        (value for name, value in headers if name.lower() == "content-type"), ""
    )
    media_type = content_type.split(";", 1)[0].strip().lower()
    return config.response_types.get(media_type, config.default_response_type)


def encode_body(body: Optional[bytes], encoding: BodyEncoding) -> ResponseBody:
    """
    Choose the body variant.

    Raises:
        InvalidResponseError: If text is mandated but the body is not UTF-8
    """
    if not body:
        return EmptyBody()
    if encoding is BodyEncoding.BINARY:
        return BinaryBody(data=body)
    try:
        return TextBody(text=body.decode("utf-8"))
    except UnicodeDecodeError as exc:
        if encoding is BodyEncoding.TEXT:
            raise InvalidResponseError(
                "failed to read response body as UTF-8",
                details={"position": exc.start},
            ) from exc
        return BinaryBody(data=body)


def _check_header(name: str, value: str) -> None:
    if not name or any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in name):
        raise InvalidResponseError(
            f"invalid response header name '{name}'", details={"header": name}
        )
    if any(ch in value for ch in _FORBIDDEN_VALUE_CHARS):
        raise InvalidResponseError(
            f"invalid value for response header '{name}'", details={"header": name}
        )


def translate_response(
    config: AdapterConfig,
    status_code: int,
    headers: Iterable[tuple[str, str]],
    body: Optional[bytes],
) -> OutgoingResponse:
    """
    Build the gateway response from the application's response.

    Args:
        config: Adapter configuration
        status_code: Application status code
        headers: Application headers, in order
        body: Application body, None when there is none

    Returns:
        OutgoingResponse with the chosen body variant

    Raises:
        InvalidResponseError: Non-UTF-8 body under text encoding, or a
            header that cannot be represented
    """
    header_list = list(headers)
    for name, value in header_list:
        _check_header(name, value)

    encoding = declared_encoding(config, header_list)
    return OutgoingResponse(
        status_code=status_code,
        headers=header_list,
        body=encode_body(body, encoding),
    )
