# heroes/services/api/errors.py
from __future__ import annotations

from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from heroes.common.logging import get_logger
from heroes.common.settings import get_settings
from heroes.domain.errors import ProfileNotFound
from heroes.services.schemas.profiles import ErrorResponse, ProfileNotFoundResponse

log = get_logger(__name__)


def _json(model, status: int) -> JSONResponse:
    return JSONResponse(status_code=status, content=model.model_dump(mode="json", exclude_none=True))


def available_endpoints(app: FastAPI) -> list[str]:
    # the OpenAPI document lists every mounted route, however the routers were included
    return sorted(app.openapi().get("paths", {}))


def _cors_headers(request: Request) -> dict[str, str]:
    """
    Errors that escape to the outermost middleware never pass back through
    CORSMiddleware, so the allow-origin header is added here.
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}
    allowed = get_settings().api.cors_allow_origins
    if "*" in allowed:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in allowed:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


async def profile_not_found_handler(request: Request, exc: ProfileNotFound) -> JSONResponse:
    log.info("Profile not found: %s", exc.profile_id)
    payload = ProfileNotFoundResponse(message=str(exc), available_ids=exc.available_ids)
    return _json(payload, HTTPStatus.NOT_FOUND)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Starlette's own "no route matched" 404 carries the generic detail
    if exc.status_code == HTTPStatus.NOT_FOUND and exc.detail == HTTPStatus.NOT_FOUND.phrase:
        payload = ErrorResponse(
            error="Endpoint not found",
            message=f"The requested endpoint {request.url.path} was not found",
            available_endpoints=available_endpoints(request.app),
        )
    else:
        payload = ErrorResponse(error=str(exc.detail))
    response = _json(payload, exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Upstream failures (database unreachable, etc.) end up here; nothing is retried
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    payload = ErrorResponse(
        error="Internal server error",
        message=str(exc),
        timestamp=datetime.now(timezone.utc),
    )
    response = _json(payload, HTTPStatus.INTERNAL_SERVER_ERROR)
    response.headers.update(_cors_headers(request))
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProfileNotFound, profile_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
