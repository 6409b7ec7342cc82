from enum import Enum
from pydantic import Field
from typing import Optional
from .base import CamelModel


class CursorHint(str, Enum):
    POINTER = "pointer"
    DEFAULT = "default"


class InteractionState(CamelModel):
    active_id: Optional[int] = Field(None, description="Body currently under pointer focus")
    cursor_hint: CursorHint = Field(CursorHint.DEFAULT, description="Cursor the renderer should show")


class PointerEvent(CamelModel):
    body_id: int = Field(..., example=1, description="Body the pointer event refers to")
