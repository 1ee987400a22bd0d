from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from routers.rooms import rooms_router, NOT_FOUND_MESSAGE
from registry import RoomRegistry
from redirects import parse_authuser, with_authuser
from constants import ALLOWED_ORIGIN
from typing import Optional
from logging_config import get_logger, setup_logging
import os

# Setup logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE", None)
setup_logging(log_level=log_level, log_file=log_file)
logger = get_logger(__name__)

# Responses the bookmarklet reads cross-origin from the meeting page
CORS_STATUSES = (200, 404)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)
    return PlainTextResponse(detail, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def postprocess_response(request: Request, call_next):
    """Add the CORS origin header and forward `?u=` to meeting redirects as `authuser`."""
    response = await call_next(request)

    if response.status_code in CORS_STATUSES:
        response.headers["Access-Control-Allow-Origin"] = ALLOWED_ORIGIN

    user = parse_authuser(request.query_params.get("u"))
    location = response.headers.get("location")
    if user is not None and location:
        rewritten = with_authuser(location, user)
        if rewritten != location:
            logger.debug(f"Rewriting redirect {location} to {rewritten}")
            response.headers["location"] = rewritten

    return response


def create_app(registry: Optional[RoomRegistry] = None) -> FastAPI:
    app = FastAPI(title="meet-rooms")
    # One registry per running app, shared by every request handler
    app.state.registry = registry if registry is not None else RoomRegistry()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(postprocess_response)
    app.include_router(rooms_router)

    logger.info("FastAPI application initialized")
    return app


app = create_app()
