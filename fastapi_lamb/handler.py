"""Lambda handler that dispatches gateway events into an ASGI application."""

import time
from typing import Any, Optional

from fastapi import FastAPI

from fastapi_lamb.exceptions import AdapterError
from fastapi_lamb.handlers.exception_handler import adapter_error_response
from fastapi_lamb.logging.config import get_logger
from fastapi_lamb.models.config import AdapterConfig
from fastapi_lamb.models.event import IncomingEvent
from fastapi_lamb.models.response import OutgoingResponse
from fastapi_lamb.services.lifecycle import ClientLifecycle
from fastapi_lamb.services.request_translator import translate_request
from fastapi_lamb.services.response_translator import translate_response
from fastapi_lamb.utils.paths import PathResolver

logger = get_logger(__name__)


def _get_correlation_id(context: Any) -> Optional[str]:
    """
    Extract the Lambda request ID from the invocation context.

    Args:
        context: Lambda context object, or None outside Lambda

    Returns:
        The request ID if the context carries one
    """
    return getattr(context, "aws_request_id", None)


def _log_invocation_start(event: IncomingEvent, correlation_id: Optional[str]) -> None:
    logger.info(
        "Invocation started",
        extra={
            "correlation_id": correlation_id,
            "context": {
                "method": event.method,
                "path": event.path,
                "request_context": event.request_context.type,
            },
        },
    )


def _log_invocation_error(
    event: IncomingEvent,
    dispatch_path: Optional[str],
    correlation_id: Optional[str],
    exc: Exception,
    elapsed_ms: float,
) -> None:
    context = {
        "method": event.method,
        "path": event.path,
        "response_time_ms": round(elapsed_ms, 2),
    }
    # Unknown when the request itself could not be translated
    if dispatch_path is not None:
        context["dispatch_path"] = dispatch_path

    logger.error(
        "Invocation failed with exception",
        exc_info=exc,
        extra={"correlation_id": correlation_id, "context": context},
    )


def _log_invocation_complete(
    event: IncomingEvent,
    response: OutgoingResponse,
    dispatch_path: str,
    correlation_id: Optional[str],
    elapsed_ms: float,
) -> None:
    logger.info(
        "Invocation completed",
        extra={
            "correlation_id": correlation_id,
            "context": {
                "method": event.method,
                "path": event.path,
                "dispatch_path": dispatch_path,
                "status_code": response.status_code,
                "body_type": response.body.type,
                "response_time_ms": round(elapsed_ms, 2),
            },
        },
    )


class LambdaHandler:
    """
    Dispatches gateway events into a FastAPI application.

    One instance serves every invocation of the process. The configuration
    is read-only; the dispatch client is built on the first invocation and
    shared afterwards.
    """

    def __init__(self, app: FastAPI, config: AdapterConfig) -> None:
        """
        Initialize handler.

        Args:
            app: Application to dispatch into
            config: Adapter configuration
        """
        self.config = config
        self.lifecycle = ClientLifecycle(app)

    async def __call__(
        self, event: IncomingEvent, context: Any = None
    ) -> OutgoingResponse:
        """
        Process one event.

        Args:
            event: Incoming gateway event
            context: Lambda context object

        Returns:
            Gateway response

        Raises:
            InvalidRequestError: If the event cannot be translated
            InvalidResponseError: If the application response cannot be
                translated
        """
        correlation_id = _get_correlation_id(context)
        start_time = time.time()
        _log_invocation_start(event, correlation_id)
        dispatch_path = None

        try:
            paths = PathResolver(event)
            client = self.lifecycle.get_client(paths, self.config)
            request = translate_request(client, self.config, event, paths)
            dispatch_path = request.url.path
            app_response = await client.dispatch(request)
            response = translate_response(
                self.config,
                app_response.status_code,
                app_response.headers.multi_items(),
                app_response.content,
            )
        except Exception as exc:
            elapsed_ms = (time.time() - start_time) * 1000
            _log_invocation_error(
                event, dispatch_path, correlation_id, exc, elapsed_ms
            )
            raise

        elapsed_ms = (time.time() - start_time) * 1000
        _log_invocation_complete(
            event, response, dispatch_path, correlation_id, elapsed_ms
        )
        return response

    async def handle(
        self, event: IncomingEvent, context: Any = None
    ) -> OutgoingResponse:
        """
        Process one event, rendering translation failures as responses.

        Configuration and programming errors still propagate.

        Args:
            event: Incoming gateway event
            context: Lambda context object

        Returns:
            Gateway response, or an error response for an AdapterError
        """
        try:
            return await self(event, context)
        except AdapterError as exc:
            return adapter_error_response(exc, _get_correlation_id(context))
