"""In-process dispatch into the wrapped ASGI application."""

from typing import Sequence

import httpx
from fastapi import FastAPI

# Only used to build absolute URLs; requests never leave the process
DISPATCH_BASE_URL = "http://lambda"


class DispatchClient:
    """
    Routes requests into the application and collects its responses.

    Built once per process by ClientLifecycle and shared by every
    invocation afterwards. Holds no per-request state.
    """

    def __init__(self, app: FastAPI) -> None:
        """
        Initialize dispatch client.

        Args:
            app: Application, with its final route table
        """
        self.app = app
        self._client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url=DISPATCH_BASE_URL,
        )

    def build_request(
        self,
        method: str,
        uri: str,
        headers: Sequence[tuple[str, str]],
        body: bytes,
    ) -> httpx.Request:
        """
        Build a request addressed to the application.

        Args:
            method: HTTP method
            uri: Percent-encoded path and query string
            headers: Ordered header pairs
            body: Raw request body

        Returns:
            Request ready for dispatch
        """
        url = self._client.base_url.copy_with(raw_path=uri.encode("ascii"))
        return httpx.Request(method, url, headers=list(headers), content=body)

    async def dispatch(self, request: httpx.Request) -> httpx.Response:
        """
        Run the request through the application.

        Args:
            request: Request from build_request

        Returns:
            The application's response, body fully read
        """
        return await self._client.send(request)
