"""Centralized error boundary and exception handlers for the HTTP surface.

Client-facing error bodies never carry fault detail. Unexpected exceptions are
logged with traceback server-side and mapped to one generic 500 payload.
"""

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"
INTERNAL_ERROR_MESSAGE = "Something went wrong!"
ROUTING_MISS_STATUS_CODES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


def api_internal_error_response() -> JSONResponse:
    """Build the generic fault response.

    Returns:
        JSONResponse: HTTP 500 with a detail-free error body.
    """

    return JSONResponse(
        content={"error": INTERNAL_ERROR_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class FaultBoundaryRoute(APIRoute):
    """Route class that converts unexpected handler faults into a generic 500.

    Framework HTTP and validation errors pass through to their own handlers.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def fault_boundary_handler(request: Request) -> Response:
            try:
                return await route_handler(request)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except Exception:
                logger.exception("Unhandled fault while serving %s %s", request.method, request.url.path)
                return api_internal_error_response()

        return fault_boundary_handler


async def api_handle_http_error(_request: Request, error: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors, including routing misses, as JSON.

    Only `GET` routes exist, so a method mismatch is a routing miss and is
    answered like an unknown path.

    Args:
        _request: Incoming request.
        error: Raised HTTP exception.

    Returns:
        JSONResponse: `{"error": "Not found"}` with 404 for routing misses, `{"error": detail}` otherwise.
    """

    if error.status_code in ROUTING_MISS_STATUS_CODES:
        return JSONResponse(content={"error": NOT_FOUND_MESSAGE}, status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(
        content={"error": error.detail},
        status_code=error.status_code,
        headers=getattr(error, "headers", None),
    )


async def api_handle_unexpected_error(_request: Request, _error: Exception) -> JSONResponse:
    """Last-resort handler for faults raised outside a fault-boundary route.

    Starlette re-raises the fault after this response is sent, and the ASGI
    server logs it with traceback, so nothing is logged here.

    Returns:
        JSONResponse: The generic HTTP 500 payload.
    """

    return api_internal_error_response()
