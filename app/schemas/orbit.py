from pydantic import Field, ConfigDict
from .base import CamelModel


class OrbitState(CamelModel):
    """Per-body animation state; only the angle moves"""
    model_config = ConfigDict(frozen=True)

    body_id: int
    index: int = Field(..., ge=0, description="Slot the orbit was assigned from")
    angle: float = Field(..., description="Current angle (radians, in [0, 2π))")
    radius: float = Field(..., gt=0, description="Orbital radius (scene units)")
    angular_speed: float = Field(..., gt=0, description="Angular speed (radians per step)")


class BodyPosition(CamelModel):
    x: float
    y: float = 0.0
    z: float
