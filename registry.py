import asyncio
import time
from typing import Callable, Dict, Optional

from constants import CODE_TTL_SECONDS
from logging_config import get_logger
from schemas.rooms import CodeEntry

logger = get_logger(__name__)


class RoomRegistry:
    """In-memory room -> meeting code map with read-triggered expiry.

    Expired entries are not swept in the background; they stay in the map until
    the next lookup of the same room removes them. Every lookup and store runs
    under one lock, lookups included since they may evict.
    """

    def __init__(self, ttl_seconds: int = CODE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._rooms: Dict[str, CodeEntry] = {}
        self._lock = asyncio.Lock()
        logger.info(f"Initializing RoomRegistry with TTL {ttl_seconds} seconds")

    def _is_live(self, entry: CodeEntry) -> bool:
        return self.clock() - entry.updated_at <= self.ttl_seconds

    async def lookup(self, room: str) -> Optional[str]:
        async with self._lock:
            entry = self._rooms.get(room)
            if entry is None:
                logger.debug(f"No code for room {room}")
                return None
            if self._is_live(entry):
                logger.debug(f"Found code {entry.value} for room {room}")
                return entry.value
            del self._rooms[room]
            logger.info(f"Code {entry.value} for room {room} expired, evicted")
            return None

    async def store(self, room: str, code: str) -> None:
        async with self._lock:
            previous = self._rooms.get(room)
            self._rooms[room] = CodeEntry(value=code, updated_at=self.clock())
        if previous is not None and previous.value != code:
            logger.info(f"Replaced code {previous.value} with {code} for room {room}")
        else:
            logger.info(f"Stored code {code} for room {room}")

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room: object) -> bool:
        return room in self._rooms
