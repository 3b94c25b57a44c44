"""
Minimal FastAPI app wired to a fastapi-lamb adapter.

With the default remount_and_include mode, a request to
``https://{api-id}.execute-api.{region}.amazonaws.com/Prod/hello/`` reaches
the route below as ``/Prod/hello/`` after the first invocation remounts it.

``adapter`` is not a Lambda entry point on its own: it is an async callable
taking an IncomingEvent and returning an OutgoingResponse. The runtime glue
that owns the invocation loop must build the IncomingEvent from the raw
event dict, await ``adapter(event, context)`` and serialize the response
back into the gateway's JSON shape.
"""

from fastapi import FastAPI

from fastapi_lamb import create_handler

app = FastAPI()


@app.get("/hello/")
async def hello() -> dict[str, str]:
    """Return a greeting."""
    return {"message": "Hello, world!"}


adapter = create_handler(app)
