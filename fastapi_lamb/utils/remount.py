"""Remount an application's routes under a base path."""

from fastapi import APIRouter, FastAPI
from starlette.routing import Mount

from fastapi_lamb.logging.config import get_logger

logger = get_logger(__name__)


def remount_routes(app: FastAPI, base_path: str) -> None:
    """
    Move every route of the application under ``base_path``.

    Mutates the application's route table in place, so it must only run
    before the application is shared.

    Args:
        app: Application whose routes are remounted
        base_path: Prefix such as ``/Prod``; ``/`` and ``""`` are no-ops
    """
    prefix = base_path.rstrip("/")
    if not prefix:
        return

    routes = list(app.router.routes)
    mounts = [route for route in routes if isinstance(route, Mount)]
    original = APIRouter()
    original.routes = [route for route in routes if not isinstance(route, Mount)]
    app.router.routes = []

    # include_router only carries API and plain routes; mounts are re-created
    app.include_router(original, prefix=prefix)
    for mount in mounts:
        app.router.routes.append(
            Mount(prefix + mount.path, app=mount.app, name=mount.name)
        )

    logger.info(
        "Routes remounted",
        extra={
            "context": {
                "base_path": prefix,
                "route_count": len(routes),
            }
        },
    )
