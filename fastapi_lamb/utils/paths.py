"""
Path resolution for gateway events.

A request reaches the function through one of three topologies, and each
one presents the path differently:

- Default gateway domain (``{api-id}.execute-api.{region}.amazonaws.com``):
  the raw path excludes the stage, which is still part of the public URL.
- Custom domain: the raw path includes whatever base path mapping the
  domain uses, which has to be recovered from the resource template.
- Load balancer: the raw path is used as is.
"""

from functools import cached_property
from typing import Mapping
from urllib.parse import quote

from fastapi_lamb.exceptions import BasePathResolutionError
from fastapi_lamb.models.config import BasePathMode
from fastapi_lamb.models.event import (
    GatewayV1Context,
    GatewayV2Context,
    IncomingEvent,
)

DEFAULT_HOST_SUFFIX = ".amazonaws.com"
DEFAULT_HOST_INFIX = ".execute-api."


def is_default_gateway_host(event: IncomingEvent) -> bool:
    """
    Check whether the event was addressed to the default gateway domain.

    Args:
        event: Incoming event

    Returns:
        True for default-domain requests, never for load balancer requests
    """
    if event.is_load_balancer:
        return False
    host = event.host
    if host is None:
        return False
    return host.endswith(DEFAULT_HOST_SUFFIX) and DEFAULT_HOST_INFIX in host


def populate_resource_path(
    resource_path: str, path_parameters: Mapping[str, str]
) -> str:
    """
    Substitute path parameter values into a resource template.

    ``{name}`` and greedy ``{name+}`` segments are replaced by the matching
    path parameter value.

    Args:
        resource_path: Template such as ``/items/{id}/{proxy+}``
        path_parameters: Values captured by the gateway

    Returns:
        The literal path segment the template matched

    Raises:
        BasePathResolutionError: If a referenced parameter is missing
    """
    segments = []
    for segment in resource_path.split("/"):
        if segment.startswith("{"):
            end = 2 if segment.endswith("+}") else 1
            name = segment[1 : len(segment) - end]
            if name not in path_parameters:
                raise BasePathResolutionError(
                    f"Could not find path parameter '{name}'."
                )
            segments.append(path_parameters[name])
        else:
            segments.append(segment)
    return "/".join(segments)


def encode_query(query_params: list[tuple[str, str]]) -> str:
    """
    Render a query multimap as a query string.

    Keys keep the order of their first appearance and every value of a key
    is emitted in its original order.

    Args:
        query_params: Ordered (key, value) pairs, keys may repeat

    Returns:
        ``?k=v&k=v2...`` or an empty string
    """
    grouped: dict[str, list[str]] = {}
    for key, value in query_params:
        grouped.setdefault(key, []).append(value)

    parts = []
    separator = "?"
    for key, values in grouped.items():
        for value in values:
            parts.append(f"{separator}{quote(key, safe='')}={quote(value, safe='')}")
            separator = "&"
    return "".join(parts)


class PathResolver:
    """
    Computes the full, base and API path views of one event.

    Views are resolved lazily: a custom-domain base path is only derived
    when something asks for it, since deriving it can fail.
    """

    def __init__(self, event: IncomingEvent) -> None:
        """
        Initialize resolver.

        Args:
            event: Incoming event
        """
        self.event = event

    @cached_property
    def is_default_domain(self) -> bool:
        return is_default_gateway_host(self.event)

    @cached_property
    def base_path(self) -> str:
        """
        Prefix contributed by the stage or the custom domain mapping.

        Raises:
            BasePathResolutionError: If the resource template cannot be
                located in the raw path
        """
        context = self.event.request_context
        if isinstance(context, GatewayV1Context):
            stage, template = context.stage, context.resource_path
        elif isinstance(context, GatewayV2Context):
            stage, template = context.stage, context.path
        else:
            return ""

        if self.is_default_domain:
            return f"/{stage or ''}"

        segment = populate_resource_path(
            template or "", self.event.path_parameters
        )
        raw_path = self.event.path
        index = raw_path.find(segment)
        if index < 0:
            raise BasePathResolutionError(
                f"Could not find segment '{segment}' in path '{raw_path}'."
            )
        return raw_path[:index]

    @cached_property
    def full_path(self) -> str:
        """Path including the base path."""
        if self.event.is_load_balancer or not self.is_default_domain:
            return self.event.path
        return self.base_path + self.event.path

    @cached_property
    def api_path(self) -> str:
        """Path with the base path removed."""
        if self.event.is_load_balancer or self.is_default_domain:
            return self.event.path
        return self.event.path[len(self.base_path) :]

    def dispatch_path(self, mode: BasePathMode) -> str:
        """
        Select the path the application is dispatched with.

        Args:
            mode: Configured base path mode

        Returns:
            ``full_path`` when the base path is included, else ``api_path``
        """
        if mode is BasePathMode.EXCLUDE:
            return self.api_path
        return self.full_path
