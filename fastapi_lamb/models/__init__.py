"""Data models for the Lambda adapter."""

from fastapi_lamb.models.config import AdapterConfig, BasePathMode, BodyEncoding
from fastapi_lamb.models.event import IncomingEvent
from fastapi_lamb.models.response import OutgoingResponse

__all__ = [
    "AdapterConfig",
    "BasePathMode",
    "BodyEncoding",
    "IncomingEvent",
    "OutgoingResponse",
]
