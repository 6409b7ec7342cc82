from pydantic import Field
from typing import Dict, List, Optional
from .base import CamelModel
from .interaction import CursorHint
from .orbit import BodyPosition, OrbitState
from .planet import PlanetRecord


class SceneCreateRequest(CamelModel):
    planets: Optional[List[PlanetRecord]] = Field(None, description="Roster in orbit order; defaults to the built-in catalog")
    seed: Optional[int] = Field(None, description="Seed for the initial orbit angles")


class TickRequest(CamelModel):
    dt: float = Field(default=1.0, ge=0.0, allow_inf_nan=False, description="Step multiplier per frame")
    frames: int = Field(default=1, ge=1, description="Number of frames to advance")


class SceneView(CamelModel):
    """Combined state a renderer needs to draw one frame"""
    scene_id: str
    tick_count: int
    planets: List[PlanetRecord]
    orbits: List[OrbitState]
    positions: Dict[int, BodyPosition]
    active_id: Optional[int] = None
    cursor_hint: CursorHint = CursorHint.DEFAULT
    selected_id: Optional[int] = None
