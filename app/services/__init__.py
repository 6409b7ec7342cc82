from .orbital_kinematics import OrbitalKinematicsEngine, assign_orbit, advance, position
from .selection_controller import SelectionInteractionController
from .planet_synthesis import PlanetSynthesisEngine
from .scene_service import Scene, SceneService
from .analysis_service import AnalysisService

__all__ = [
    "OrbitalKinematicsEngine", "assign_orbit", "advance", "position",
    "SelectionInteractionController",
    "PlanetSynthesisEngine",
    "Scene", "SceneService",
    "AnalysisService"
]
