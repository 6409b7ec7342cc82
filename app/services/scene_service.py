import logging
import uuid
import numpy as np
from typing import Dict, List, Optional
from app.data import catalog_planets
from app.schemas import PlanetRecord, SceneView, BodyPosition
from app.settings import settings
from .orbital_kinematics import OrbitalKinematicsEngine
from .selection_controller import SelectionInteractionController

logger = logging.getLogger(__name__)


class Scene:
    """One composed system: roster, orbits, pointer focus and the selected body"""

    def __init__(self, scene_id: str, planets: List[PlanetRecord], rng: np.random.Generator):
        self.scene_id = scene_id
        self.selected_id: Optional[int] = None
        self.tick_count = 0

        self.kinematics = OrbitalKinematicsEngine(
            rng=rng,
            base_radius=settings.orbit_base_radius,
            spacing=settings.orbit_spacing,
            base_speed=settings.orbit_base_speed,
            step_scale=settings.orbit_step_scale
        )
        self.interaction = SelectionInteractionController()
        self.interaction.subscribe_selected(self._on_selected)

        self.kinematics.load_roster(planet.id for planet in planets)
        self.planets: Dict[int, PlanetRecord] = {planet.id: planet for planet in planets}

    def _on_selected(self, body_id: int):
        self.selected_id = body_id

    def require_body(self, body_id: int) -> PlanetRecord:
        if body_id not in self.planets:
            raise KeyError(f"Body {body_id} not found in scene {self.scene_id}")
        return self.planets[body_id]

    def add_planet(self, planet: PlanetRecord):
        if planet.id in self.planets:
            raise ValueError(f"Body {planet.id} already exists in scene {self.scene_id}")
        self.kinematics.add_body(planet.id)
        self.planets[planet.id] = planet

    def remove_planet(self, body_id: int) -> PlanetRecord:
        planet = self.require_body(body_id)
        # focus and selection must not outlive the body
        self.interaction.leave(body_id)
        if self.selected_id == body_id:
            self.selected_id = None
        self.kinematics.remove_body(body_id)
        del self.planets[body_id]
        return planet

    def tick(self, dt: float = 1.0, frames: int = 1) -> Dict[int, BodyPosition]:
        positions = self.kinematics.positions()
        for _ in range(frames):
            positions = self.kinematics.tick(dt)
            self.tick_count += 1
        return positions

    def view(self) -> SceneView:
        return SceneView(
            scene_id=self.scene_id,
            tick_count=self.tick_count,
            planets=list(self.planets.values()),
            orbits=self.kinematics.states(),
            positions=self.kinematics.positions(),
            active_id=self.interaction.active_id,
            cursor_hint=self.interaction.cursor_hint,
            selected_id=self.selected_id
        )


class SceneService:
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SceneService, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self.scenes: Dict[str, Scene] = {}
        self._initialized = True

    def reset(self):
        """Drop every scene"""
        self.scenes.clear()

    def create_scene(self, planets: Optional[List[PlanetRecord]] = None, seed: Optional[int] = None) -> Scene:
        if len(self.scenes) >= settings.max_scenes:
            raise ValueError(f"Scene limit reached ({settings.max_scenes})")

        planets = catalog_planets() if planets is None else list(planets)
        if not planets:
            raise ValueError("A scene needs at least one body")
        if len(planets) > settings.max_bodies_per_scene:
            raise ValueError(f"A scene holds at most {settings.max_bodies_per_scene} bodies")

        scene_id = str(uuid.uuid4())
        scene = Scene(scene_id, planets, np.random.default_rng(seed))
        self.scenes[scene_id] = scene
        logger.info("Created scene %s with %d bodies", scene_id, len(planets))
        return scene

    def get_scene(self, scene_id: str) -> Scene:
        if scene_id not in self.scenes:
            raise KeyError(f"Scene {scene_id} not found")
        return self.scenes[scene_id]

    def delete_scene(self, scene_id: str):
        self.get_scene(scene_id)
        del self.scenes[scene_id]
        logger.info("Deleted scene %s", scene_id)

    def add_planet(self, scene_id: str, planet: PlanetRecord) -> SceneView:
        scene = self.get_scene(scene_id)
        if len(scene.planets) >= settings.max_bodies_per_scene:
            raise ValueError(f"A scene holds at most {settings.max_bodies_per_scene} bodies")
        scene.add_planet(planet)
        return scene.view()

    def remove_planet(self, scene_id: str, body_id: int) -> SceneView:
        scene = self.get_scene(scene_id)
        scene.remove_planet(body_id)
        return scene.view()

    def tick(self, scene_id: str, dt: float = 1.0, frames: int = 1) -> SceneView:
        if frames > settings.max_frames_per_tick:
            raise ValueError(f"At most {settings.max_frames_per_tick} frames per request")
        scene = self.get_scene(scene_id)
        scene.tick(dt, frames)
        logger.debug("Scene %s advanced %d frame(s), tick %d", scene_id, frames, scene.tick_count)
        return scene.view()

    # Pointer events
    def enter(self, scene_id: str, body_id: int) -> SceneView:
        scene = self.get_scene(scene_id)
        scene.require_body(body_id)
        scene.interaction.enter(body_id)
        return scene.view()

    def leave(self, scene_id: str, body_id: int) -> SceneView:
        # a leave for a body that is gone is stale and absorbed by the controller
        scene = self.get_scene(scene_id)
        scene.interaction.leave(body_id)
        return scene.view()

    def capture_lost(self, scene_id: str, body_id: int) -> SceneView:
        scene = self.get_scene(scene_id)
        scene.interaction.capture_lost(body_id)
        return scene.view()

    def leave_all(self, scene_id: str) -> SceneView:
        scene = self.get_scene(scene_id)
        scene.interaction.leave_all()
        return scene.view()

    def select(self, scene_id: str, body_id: int) -> SceneView:
        scene = self.get_scene(scene_id)
        scene.require_body(body_id)
        scene.interaction.select(body_id)
        return scene.view()

    def view(self, scene_id: str) -> SceneView:
        return self.get_scene(scene_id).view()
