"""fastapi-lamb: serve a FastAPI application from API Gateway and ALB events."""

__version__ = "0.1.0"

from fastapi_lamb.exceptions import (
    AdapterError,
    BasePathResolutionError,
    FatalAdapterError,
    InvalidRequestError,
    InvalidResponseError,
    LifecycleError,
)
from fastapi_lamb.handler import LambdaHandler
from fastapi_lamb.lambda_handler import create_handler
from fastapi_lamb.models.config import AdapterConfig, BasePathMode, BodyEncoding
from fastapi_lamb.models.event import (
    GatewayV1Context,
    GatewayV2Context,
    IncomingEvent,
    LoadBalancerContext,
)
from fastapi_lamb.models.response import (
    BinaryBody,
    EmptyBody,
    OutgoingResponse,
    TextBody,
)

__all__ = [
    "AdapterConfig",
    "AdapterError",
    "BasePathMode",
    "BasePathResolutionError",
    "BinaryBody",
    "BodyEncoding",
    "EmptyBody",
    "FatalAdapterError",
    "GatewayV1Context",
    "GatewayV2Context",
    "IncomingEvent",
    "InvalidRequestError",
    "InvalidResponseError",
    "LambdaHandler",
    "LifecycleError",
    "LoadBalancerContext",
    "OutgoingResponse",
    "TextBody",
    "create_handler",
]
