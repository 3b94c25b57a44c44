"""Shared fixtures: a small FastAPI app and gateway events for each topology."""

from collections.abc import Callable

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from fastapi_lamb.handler import LambdaHandler
from fastapi_lamb.models.config import AdapterConfig, BasePathMode
from fastapi_lamb.models.event import (
    GatewayV1Context,
    IncomingEvent,
    LoadBalancerContext,
)

DEFAULT_HOST = "abc123defg.execute-api.us-east-1.amazonaws.com"
CUSTOM_HOST = "api.example.com"
ALB_HOST = "my-alb-1234567890.us-east-1.elb.amazonaws.com"


def make_app() -> FastAPI:
    """App with a single /path/ route that echoes the path it was called with."""
    app = FastAPI()

    @app.get("/path/")
    async def get_path(request: Request) -> PlainTextResponse:
        return PlainTextResponse(request.url.path)

    @app.exception_handler(404)
    async def not_found(request: Request, exc: Exception) -> PlainTextResponse:
        return PlainTextResponse(request.url.path, status_code=404)

    return app


def api_gateway_event(**overrides) -> IncomingEvent:
    """Request through the default execute-api domain, stage Prod."""
    fields = {
        "method": "GET",
        "path": "/path/",
        "headers": [("Host", DEFAULT_HOST), ("Accept", "text/plain")],
        "path_parameters": {"proxy": "path/"},
        "request_context": GatewayV1Context(stage="Prod", resource_path="/{proxy+}"),
    }
    fields.update(overrides)
    return IncomingEvent(**fields)


def custom_domain_event(**overrides) -> IncomingEvent:
    """Request through a custom domain with an empty base path mapping."""
    fields = {
        "method": "GET",
        "path": "/path/",
        "headers": [("Host", CUSTOM_HOST)],
        "path_parameters": {"proxy": "path/"},
        "request_context": GatewayV1Context(stage="Prod", resource_path="/{proxy+}"),
    }
    fields.update(overrides)
    return IncomingEvent(**fields)


def custom_domain_with_base_event(**overrides) -> IncomingEvent:
    """Request through a custom domain mapped under /base-path."""
    fields = {
        "method": "GET",
        "path": "/base-path/path/",
        "headers": [("Host", CUSTOM_HOST)],
        "path_parameters": {"proxy": "path/"},
        "request_context": GatewayV1Context(stage="Prod", resource_path="/{proxy+}"),
    }
    fields.update(overrides)
    return IncomingEvent(**fields)


def alb_event(**overrides) -> IncomingEvent:
    """Request through an application load balancer."""
    fields = {
        "method": "GET",
        "path": "/path/",
        "headers": [("Host", ALB_HOST)],
        "request_context": LoadBalancerContext(),
    }
    fields.update(overrides)
    return IncomingEvent(**fields)


@pytest.fixture
def make_handler() -> Callable[..., LambdaHandler]:
    """Factory for handlers over a fresh app, since remounting mutates it."""

    def _make(
        base_path_mode: BasePathMode = BasePathMode.REMOUNT_AND_INCLUDE,
        **config,
    ) -> LambdaHandler:
        return LambdaHandler(
            make_app(), AdapterConfig(base_path_mode=base_path_mode, **config)
        )

    return _make
