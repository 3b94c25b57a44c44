"""Incoming gateway event model."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GatewayV1Context(BaseModel):
    """REST API (payload format 1.0) request context."""

    model_config = ConfigDict(frozen=True)

    type: Literal["gateway_v1"] = "gateway_v1"
    stage: Optional[str] = Field(None, description="Deployment stage")
    resource_path: Optional[str] = Field(
        None, description="Resource template, e.g. /items/{id}"
    )


class GatewayV2Context(BaseModel):
    """HTTP API (payload format 2.0) request context."""

    model_config = ConfigDict(frozen=True)

    type: Literal["gateway_v2"] = "gateway_v2"
    stage: Optional[str] = Field(None, description="Deployment stage")
    path: Optional[str] = Field(None, description="requestContext.http.path")


class LoadBalancerContext(BaseModel):
    """Application load balancer target group request context."""

    model_config = ConfigDict(frozen=True)

    type: Literal["load_balancer"] = "load_balancer"


RequestContext = Annotated[
    Union[GatewayV1Context, GatewayV2Context, LoadBalancerContext],
    Field(discriminator="type"),
]


class IncomingEvent(BaseModel):
    """
    A gateway proxy event, already deserialized from its wire envelope.

    Attributes:
        method: HTTP method as sent by the gateway
        path: Raw request path
        query_params: Ordered query multimap, keys may repeat
        headers: Ordered header multimap; bytes values are raw octets
        path_parameters: Values captured by the gateway's route template
        body: Request body, already decoded from any transport encoding
        request_context: Gateway topology specific context
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(..., description="HTTP method")
    path: str = Field(..., description="Raw request path")
    query_params: list[tuple[str, str]] = Field(
        default_factory=list, description="Query string multimap"
    )
    headers: list[tuple[str, Union[str, bytes]]] = Field(
        default_factory=list, description="Header multimap"
    )
    path_parameters: dict[str, str] = Field(
        default_factory=dict, description="Route template captures"
    )
    body: bytes = Field(default=b"", description="Request body")
    request_context: RequestContext = Field(
        default_factory=GatewayV1Context, description="Request context"
    )

    @property
    def is_load_balancer(self) -> bool:
        """Whether the event came through a load balancer."""
        return isinstance(self.request_context, LoadBalancerContext)

    @property
    def host(self) -> Optional[str]:
        """
        First Host header as text.

        Returns:
            The host, or None when absent or not decodable as ASCII
        """
        for name, value in self.headers:
            if name.lower() != "host":
                continue
            if isinstance(value, str):
                return value
            try:
                return value.decode("ascii")
            except UnicodeDecodeError:
                return None
        return None
