from pydantic import BaseModel
from typing import Optional


class CodeEntry(BaseModel):
    value: str
    updated_at: float

class RoomDecision(BaseModel):
    room: str
    code: Optional[str] = None
    location: str
    active: bool
