import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool

from callflow.core.call import Call
from callflow.core.handler import Handler
from callflow.core.method import Method
from callflow.core.representation import BytesRepresentation, MediaType
from callflow.core.status import SUCCESS_OK
from callflow.settings import Settings

logger = logging.getLogger(__name__)

ROUTE_METHODS = [m.value for m in Method if m is not Method.CONNECT]


async def request_to_call(request: Request) -> Call:
    """Converts an incoming request into a call."""
    resource_ref = request.url.path
    if request.url.query:
        resource_ref = f"{resource_ref}?{request.url.query}"

    call = Call(resource_ref=resource_ref, method=Method(request.method.upper()))
    body = await request.body()
    if body:
        call.input = BytesRepresentation(
            content=body,
            media_type=request.headers.get("content-type", MediaType.APPLICATION_OCTET_STREAM.value),
        )
    call.attributes["client_ip"] = request.client.host if request.client else "unknown"
    return call


def call_to_response(call: Call) -> Response:
    """Converts a handled call into a response. An unset status is answered as 200."""
    status = call.status or SUCCESS_OK
    if call.output is None:
        return Response(status_code=status.code)
    return Response(
        content=call.output.get_bytes() or b"",
        status_code=status.code,
        media_type=call.output.media_type,
    )


def create_app(handler: Handler, settings: Optional[Settings] = None) -> FastAPI:
    """
    Creates an application that hands every request to `handler` as a call.

    The handler, typically a FilterChain, runs in the thread pool, one call per
    request.

    Args:
        handler: The handler receiving the calls.
        settings: Application settings.

    Returns:
        The FastAPI application.
    """
    settings = settings or Settings()
    app = FastAPI(title="callflow")
    app.state.settings = settings
    app.state.handler = handler

    @app.api_route("/{full_path:path}", methods=ROUTE_METHODS, include_in_schema=False)
    async def dispatch(request: Request, full_path: str) -> Response:
        call = await request_to_call(request)
        logger.info(
            "Call received",
            extra={
                "call_id": str(call.call_id),
                "method": request.method,
                "path": request.url.path,
                "client_ip": call.attributes["client_ip"],
            },
        )
        await run_in_threadpool(app.state.handler, call)
        response = call_to_response(call)
        logger.info(
            "Call answered",
            extra={"call_id": str(call.call_id), "method": request.method, "status_code": response.status_code},
        )
        return response

    return app
