"""Entry point for building the adapter inside a Lambda function.

Typical use in a function module::

    from fastapi_lamb import create_handler
    from myservice.main import app

    adapter = create_handler(app)

The event and response envelopes are (de)serialized by the runtime glue
that owns the invocation loop; this module only wires the adapter.
"""

from fastapi import FastAPI

from fastapi_lamb.config import settings
from fastapi_lamb.handler import LambdaHandler
from fastapi_lamb.logging.config import configure_logging
from fastapi_lamb.models.config import AdapterConfig


def create_handler(app: FastAPI, config: AdapterConfig | None = None) -> LambdaHandler:
    """
    Build the Lambda handler for an application.

    Args:
        app: FastAPI application to serve
        config: Adapter configuration; loaded from LAMB_* environment
            variables when omitted

    Returns:
        LambdaHandler to be shared by every invocation of the process

    Notes:
        - Configure the handler once at import time, not per invocation
        - The application's routes may be remounted on the first request
          when base_path_mode is remount_and_include
    """
    configure_logging()
    return LambdaHandler(app, config or settings.to_adapter_config())
