"""Error responses for translation failures."""

import json
from typing import Any

from fastapi_lamb.exceptions import AdapterError
from fastapi_lamb.models.response import OutgoingResponse, TextBody


def create_error_response(
    error_code: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    correlation_id: str | None = None,
) -> OutgoingResponse:
    """
    Create standardized error response.

    Args:
        error_code: Machine-readable error code
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        correlation_id: Lambda request ID for tracing

    Returns:
        OutgoingResponse with a JSON error body
    """
    content = {
        "status": "error",
        "error_code": error_code,
        "message": message,
        "details": details or {},
    }

    if correlation_id:
        content["correlation_id"] = correlation_id

    return OutgoingResponse(
        status_code=status_code,
        headers=[("content-type", "application/json")],
        body=TextBody(text=json.dumps(content)),
    )


def adapter_error_response(
    exc: AdapterError, correlation_id: str | None = None
) -> OutgoingResponse:
    """
    Render an AdapterError.

    Args:
        exc: InvalidRequestError, InvalidResponseError or another AdapterError
        correlation_id: Lambda request ID for tracing

    Returns:
        OutgoingResponse carrying the exception's status and error code
    """
    return create_error_response(
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        correlation_id=correlation_id,
    )
