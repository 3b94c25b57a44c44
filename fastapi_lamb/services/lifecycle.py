"""
One-time construction of the shared dispatch client.

The lifecycle starts out holding the application definition and turns it
into a DispatchClient on the first invocation. When the configuration asks
for it, the application's routes are remounted under the base path of that
first request before the client is published.

The remount is decided by the first request only. Requests that later
arrive through a different base path mapping (another custom domain, say)
are dispatched against the route table built for the first one.
"""

import threading
from typing import Optional

from fastapi import FastAPI

from fastapi_lamb.exceptions import LifecycleError
from fastapi_lamb.logging.config import get_logger
from fastapi_lamb.models.config import AdapterConfig, BasePathMode
from fastapi_lamb.services.dispatch import DispatchClient
from fastapi_lamb.utils.paths import PathResolver
from fastapi_lamb.utils.remount import remount_routes

logger = get_logger(__name__)


class ClientLifecycle:
    """
    Holds either the application (uninitialized) or its client (ready).

    The transition runs under a lock so concurrent first invocations build
    the client exactly once; once ready, reads do not lock.
    """

    def __init__(self, app: FastAPI) -> None:
        """
        Initialize lifecycle in the uninitialized state.

        Args:
            app: Application definition; its routes may be remounted
        """
        self._app: Optional[FastAPI] = app
        self._client: Optional[DispatchClient] = None
        self._lock = threading.RLock()
        self._building = False

    @property
    def is_ready(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> DispatchClient:
        """
        The published dispatch client.

        Raises:
            LifecycleError: If the client has not been built yet
        """
        client = self._client
        if client is None:
            raise LifecycleError("Dispatch client used before initialization.")
        return client

    def get_client(self, paths: PathResolver, config: AdapterConfig) -> DispatchClient:
        """
        Return the dispatch client, building it on first use.

        Args:
            paths: Resolver for the triggering request
            config: Adapter configuration

        Returns:
            The process-wide dispatch client

        Raises:
            LifecycleError: If called again from inside the transition
            BasePathResolutionError: If the remount base path cannot be
                resolved; the lifecycle stays uninitialized
        """
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is not None:
                return self._client
            if self._building:
                raise LifecycleError("Dispatch client initialization re-entered.")

            self._building = True
            try:
                self._client = self._build(paths, config)
            finally:
                self._building = False

            self._app = None
            return self._client

    def _build(self, paths: PathResolver, config: AdapterConfig) -> DispatchClient:
        app = self._app
        if app is None:
            raise LifecycleError("Application definition already consumed.")

        base_path = ""
        if config.base_path_mode is BasePathMode.REMOUNT_AND_INCLUDE:
            base_path = paths.base_path
            if base_path:
                remount_routes(app, base_path)

        logger.info(
            "Dispatch client initialized",
            extra={
                "context": {
                    "base_path_mode": config.base_path_mode.value,
                    "base_path": base_path,
                }
            },
        )
        return DispatchClient(app)
