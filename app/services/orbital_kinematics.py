"""
Orbital Kinematics Module
Fixed-radius circular orbits advanced deterministically per animation frame
"""

import logging
import math
import numpy as np
from typing import Dict, Iterable, List, Optional
from app.schemas import OrbitState, BodyPosition

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi

BASE_RADIUS = 5.0
SPACING = 4.0
BASE_SPEED = 0.8
STEP_SCALE = 0.01


def assign_orbit(body_id: int, index: int, initial_angle: float,
                 base_radius: float = BASE_RADIUS, spacing: float = SPACING,
                 base_speed: float = BASE_SPEED) -> OrbitState:
    """
    Create the orbit for the body in slot `index`.

    Outer slots get larger radii and strictly smaller angular speeds.
    """
    if index < 0:
        raise IndexError(f"Orbit index out of range: {index}")
    return OrbitState(
        body_id=body_id,
        index=index,
        angle=initial_angle % TWO_PI,
        radius=base_radius + index * spacing,
        angular_speed=base_speed / (index + 1)
    )


def advance(state: OrbitState, dt: float = 1.0, step_scale: float = STEP_SCALE) -> OrbitState:
    """Return the state one step later; radius and speed are carried over unchanged"""
    if not math.isfinite(dt) or dt < 0:
        raise ValueError(f"Time step must be a finite non-negative number, got {dt}")
    angle = (state.angle + state.angular_speed * step_scale * dt) % TWO_PI
    return state.model_copy(update={"angle": angle})


def position(state: OrbitState) -> BodyPosition:
    # flat orbital plane
    return BodyPosition(
        x=math.cos(state.angle) * state.radius,
        y=0.0,
        z=math.sin(state.angle) * state.radius
    )


class OrbitalKinematicsEngine:
    """Keeps one OrbitState per body and advances all of them each tick"""

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 base_radius: float = BASE_RADIUS, spacing: float = SPACING,
                 base_speed: float = BASE_SPEED, step_scale: float = STEP_SCALE):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.base_radius = base_radius
        self.spacing = spacing
        self.base_speed = base_speed
        self.step_scale = step_scale
        self._states: Dict[int, OrbitState] = {}
        self._next_index = 0

    def __contains__(self, body_id: int) -> bool:
        return body_id in self._states

    def load_roster(self, body_ids: Iterable[int], initial_angles: Optional[Dict[int, float]] = None):
        """Replace the roster; bodies are assigned orbits in iteration order"""
        body_ids = list(body_ids)
        if len(set(body_ids)) != len(body_ids):
            raise ValueError("Roster contains duplicate body ids")

        initial_angles = initial_angles or {}
        self._states = {}
        self._next_index = 0
        for body_id in body_ids:
            self.add_body(body_id, initial_angles.get(body_id))

    def add_body(self, body_id: int, initial_angle: Optional[float] = None) -> OrbitState:
        if body_id in self._states:
            raise ValueError(f"Body {body_id} already has an orbit")
        if initial_angle is None:
            initial_angle = float(self.rng.uniform(0.0, TWO_PI))

        state = assign_orbit(
            body_id, self._next_index, initial_angle,
            base_radius=self.base_radius, spacing=self.spacing, base_speed=self.base_speed
        )
        self._states[body_id] = state
        self._next_index += 1
        logger.debug("Assigned orbit to body %s: radius=%.2f speed=%.4f", body_id, state.radius, state.angular_speed)
        return state

    def remove_body(self, body_id: int) -> OrbitState:
        # remaining bodies keep their slots
        return self._states.pop(body_id)

    def state(self, body_id: int) -> OrbitState:
        return self._states[body_id]

    def state_at(self, index: int) -> OrbitState:
        states = list(self._states.values())
        if not 0 <= index < len(states):
            raise IndexError(f"No body at roster position {index} (roster size {len(states)})")
        return states[index]

    def states(self) -> List[OrbitState]:
        return list(self._states.values())

    def tick(self, dt: float = 1.0) -> Dict[int, BodyPosition]:
        """Advance every body by one frame and return the fresh positions"""
        snapshot = dict(self._states)
        self._states = {
            body_id: advance(state, dt, self.step_scale)
            for body_id, state in snapshot.items()
        }
        return self.positions()

    def positions(self) -> Dict[int, BodyPosition]:
        return {body_id: position(state) for body_id, state in self._states.items()}
