"""Tests for the bundled example application."""

import json

import pytest
from conftest import api_gateway_event

from examples.hello_api import adapter
from fastapi_lamb.handler import LambdaHandler
from fastapi_lamb.models.response import TextBody


def test_example_exposes_adapter() -> None:
    """Test the example exports the adapter, not a raw Lambda handler."""
    assert isinstance(adapter, LambdaHandler)


@pytest.mark.asyncio
async def test_example_serves_hello_under_stage() -> None:
    """Test the greeting route answers under the stage after remount."""
    event = api_gateway_event(path="/hello/", path_parameters={"proxy": "hello/"})

    response = await adapter(event)

    assert response.status_code == 200
    assert isinstance(response.body, TextBody)
    assert json.loads(response.body.text) == {"message": "Hello, world!"}
