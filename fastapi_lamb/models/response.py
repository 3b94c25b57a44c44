"""Outgoing gateway response model."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EmptyBody(BaseModel):
    """No response body."""

    model_config = ConfigDict(frozen=True)

    type: Literal["empty"] = "empty"


class TextBody(BaseModel):
    """Response body delivered as text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class BinaryBody(BaseModel):
    """Response body delivered as raw bytes (base64 on the wire)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["binary"] = "binary"
    data: bytes


ResponseBody = Annotated[
    Union[EmptyBody, TextBody, BinaryBody],
    Field(discriminator="type"),
]


class OutgoingResponse(BaseModel):
    """
    Response handed back to the gateway envelope serializer.

    Attributes:
        status_code: HTTP status code
        headers: Ordered header multimap
        body: Which body variant the gateway should receive
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    headers: list[tuple[str, str]] = Field(
        default_factory=list, description="Header multimap"
    )
    body: ResponseBody = Field(default_factory=EmptyBody)
