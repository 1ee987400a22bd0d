from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from constants import PROJECT_URL
from redirects import resolve_room
from registry import RoomRegistry
from script import render_script
from validation import InvalidCodeError, validate_code
from logging_config import get_logger

logger = get_logger(__name__)

rooms_router = APIRouter(tags=["rooms"])

NOT_FOUND_MESSAGE = "not found"


def get_registry(request: Request) -> RoomRegistry:
    return request.app.state.registry


def client_host(request: Request) -> str:
    return request.client.host if request.client else 'unknown'


@rooms_router.get("/")
async def redirect_to_project():
    return RedirectResponse(PROJECT_URL, status_code=308)


@rooms_router.get("/{room}/script", response_class=PlainTextResponse)
async def get_script(room: str, request: Request):
    # The script calls back into this server, so it needs the host it was reached on
    host = request.headers.get("host")
    if not host:
        logger.warning(f"Script request for room {room} from {client_host(request)} without host header")
        raise HTTPException(status_code=400, detail="missing host header in request")
    logger.info(f"Serving script for room {room} on host {host}")
    return render_script(room, host)


@rooms_router.get("/{room}/code", response_class=PlainTextResponse)
async def get_code(room: str, registry: RoomRegistry = Depends(get_registry)):
    decision = await resolve_room(registry, room)
    if not decision.active:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return decision.code


@rooms_router.post("/{room}/code/{code}", response_class=PlainTextResponse)
async def post_code(room: str, code: str, request: Request, registry: RoomRegistry = Depends(get_registry)):
    """
    Publish the meeting code of a room.

    The code must look like `abc-defg-hij`. Anything else is rejected before the
    registry is touched. Any valid code replaces the current one, whoever sent it.
    """
    try:
        validate_code(code)
    except InvalidCodeError as e:
        logger.warning(f"Invalid code {code!r} for room {room} from {client_host(request)}")
        raise HTTPException(status_code=400, detail=str(e))

    await registry.store(room, code)
    return code


@rooms_router.get("/{room}")
async def get_room(room: str, registry: RoomRegistry = Depends(get_registry)):
    decision = await resolve_room(registry, room)
    if decision.active:
        logger.info(f"Room {room} is active, redirecting to meeting {decision.code}")
        return RedirectResponse(decision.location, status_code=302)
    logger.info(f"Room {room} is inactive, redirecting to landing page")
    return RedirectResponse(decision.location, status_code=303)
