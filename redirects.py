from typing import Optional

from constants import LANDING_URL, MEET_BASE_URL
from logging_config import get_logger
from registry import RoomRegistry
from schemas.rooms import RoomDecision

logger = get_logger(__name__)

# `u` must fit an unsigned byte to be forwarded as `authuser`
MAX_AUTHUSER = 255


def meeting_url(code: str) -> str:
    return f"{MEET_BASE_URL}/{code}"


async def resolve_room(registry: RoomRegistry, room: str) -> RoomDecision:
    """Decide where a visitor of `room` should go.

    Active rooms point at their meeting, inactive (unknown or expired) rooms at
    the landing page. Both the redirect and the bare-code endpoints go through
    here so they agree on expiry.
    """
    code = await registry.lookup(room)
    if code is None:
        return RoomDecision(room=room, location=LANDING_URL, active=False)
    return RoomDecision(room=room, code=code, location=meeting_url(code), active=True)


def parse_authuser(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    if not (raw.isascii() and raw.isdigit()):
        return None
    user = int(raw)
    return user if user <= MAX_AUTHUSER else None


def with_authuser(location: str, user: int) -> str:
    if not location.startswith(MEET_BASE_URL):
        return location
    separator = "&" if "?" in location else "?"
    return f"{location}{separator}authuser={user}"
